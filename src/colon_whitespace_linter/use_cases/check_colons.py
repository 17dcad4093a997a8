"""Check every Python file under a path."""

import logging
from typing import Optional

from colon_whitespace_linter.domain.entities import FileReport
from colon_whitespace_linter.domain.policy import WhitespacePolicy
from colon_whitespace_linter.domain.protocols import FileSystemProtocol
from colon_whitespace_linter.use_cases.inspect_source import InspectSourceUseCase

logger = logging.getLogger(__name__)


class CheckColonsUseCase:
    """Collects one FileReport per file that has violations, in path order."""

    def __init__(self, filesystem: FileSystemProtocol, inspector: InspectSourceUseCase) -> None:
        self.filesystem = filesystem
        self.inspector = inspector

    def execute(
        self,
        target_path: str,
        policy: WhitespacePolicy,
        exclude: Optional[list[str]] = None,
    ) -> list[FileReport]:
        reports: list[FileReport] = []
        if not policy.is_enabled:
            logger.info("Colon whitespace policy is disabled; nothing to check")
            return reports

        for path in self.filesystem.glob_python_files(target_path, exclude):
            try:
                source = self.filesystem.read_text(path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping %s: %s", path, exc)
                continue
            violations = self.inspector.execute(source, policy, module_name=path)
            logger.debug("%s: %d violation(s)", path, len(violations))
            if violations:
                reports.append(FileReport(path=path, violations=violations))
        return reports
