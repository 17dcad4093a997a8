"""Apply the rule's replacements to files on disk."""

import logging
from typing import Optional

from colon_whitespace_linter.domain.entities import FixResult, Replacement
from colon_whitespace_linter.domain.policy import WhitespacePolicy
from colon_whitespace_linter.domain.protocols import FixerGatewayProtocol
from colon_whitespace_linter.use_cases.check_colons import CheckColonsUseCase

logger = logging.getLogger(__name__)


class ApplyFixesUseCase:
    """
    Orchestrates a fix run: check, collect replacements per file, write.

    Every colon check is independent and its replacement touches only the
    whitespace before that colon, so one pass fixes a file completely.
    """

    def __init__(
        self,
        check_use_case: CheckColonsUseCase,
        fixer_gateway: FixerGatewayProtocol,
    ) -> None:
        self.check_use_case = check_use_case
        self.fixer_gateway = fixer_gateway

    def execute(
        self,
        target_path: str,
        policy: WhitespacePolicy,
        exclude: Optional[list[str]] = None,
    ) -> FixResult:
        changed: list[str] = []
        refused: list[str] = []
        fixed_count = 0

        for report in self.check_use_case.execute(target_path, policy, exclude):
            replacements: list[Replacement] = [
                v.replacement for v in report.violations if v.replacement is not None
            ]
            if not replacements:
                continue
            if self.fixer_gateway.apply_fixes(report.path, replacements):
                changed.append(report.path)
                fixed_count += len(replacements)
                logger.info("Fixed %d colon(s) in %s", len(replacements), report.path)
            else:
                refused.append(report.path)

        return FixResult(
            changed_files=tuple(changed),
            fixed_count=fixed_count,
            refused_files=tuple(refused),
        )
