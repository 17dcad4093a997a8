"""LibCST based Fixer Gateway."""

import logging
from typing import Optional

import libcst as cst

from colon_whitespace_linter.domain.entities import Replacement
from colon_whitespace_linter.domain.protocols import FileSystemProtocol, FixerGatewayProtocol
from colon_whitespace_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway

logger = logging.getLogger(__name__)


class LibCSTFixerGateway(FixerGatewayProtocol):
    """Gateway for applying text replacements, refusing any that LibCST cannot re-parse."""

    def __init__(self, filesystem: Optional[FileSystemProtocol] = None) -> None:
        self._filesystem = filesystem or FileSystemGateway()

    def render(self, source: str, replacements: list[Replacement]) -> str:
        """
        Apply replacements to source text.

        Edits are applied back to front so earlier offsets stay valid.
        Overlapping edits raise ValueError.
        """
        ordered = sorted(replacements, key=lambda r: (r.start, r.end))
        for previous, current in zip(ordered, ordered[1:]):
            if current.start < previous.end:
                raise ValueError(
                    f"Overlapping replacements at offsets {previous.start}-{previous.end} "
                    f"and {current.start}-{current.end}"
                )
        result = source
        for replacement in reversed(ordered):
            result = replacement.apply(result)
        return result

    def apply_fixes(self, file_path: str, replacements: list[Replacement]) -> bool:
        """
        Apply replacements to a file.

        Args:
            file_path: Path to the file to modify
            replacements: Edits produced by the rule for this file

        Returns:
            True if the file was modified, False otherwise
        """
        if not replacements:
            return False
        try:
            source = self._filesystem.read_text(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", file_path, exc)
            return False

        fixed = self.render(source, replacements)
        if fixed == source:
            return False

        try:
            # libcst expects decoded text without the byte order mark.
            cst.parse_module(fixed.removeprefix("\ufeff"))
        except cst.ParserSyntaxError as exc:
            logger.warning("Refusing fix for %s; result does not parse: %s", file_path, exc)
            return False

        try:
            self._filesystem.write_text(file_path, fixed)
        except OSError as exc:
            logger.warning("Could not write %s: %s", file_path, exc)
            return False
        return True
