"""Run the colon rule over a whole module outside of pylint."""

from dataclasses import replace

from astroid import nodes

from colon_whitespace_linter.domain.entities import Violation
from colon_whitespace_linter.domain.policy import WhitespacePolicy
from colon_whitespace_linter.domain.protocols import AstroidProtocol
from colon_whitespace_linter.domain.rules.whitespace_before_colon import (
    WhitespaceBeforeColonRule,
)
from colon_whitespace_linter.infrastructure.gateways.source_text import SourceText

_ELIGIBLE = (nodes.Dict, nodes.DictComp, nodes.MatchMapping)
_BOM = "\ufeff"


class InspectSourceUseCase:
    """Parses source text and returns every violation in pre-order, source order within a node."""

    def __init__(self, astroid_gateway: AstroidProtocol) -> None:
        self.astroid_gateway = astroid_gateway

    def execute(
        self, source: str, policy: WhitespacePolicy, module_name: str = ""
    ) -> tuple[Violation, ...]:
        if not policy.is_enabled:
            return ()
        # A UTF-8 signature is not Python; offsets below still index the full source.
        shift = len(_BOM) if source.startswith(_BOM) else 0
        body = source[shift:]
        module = self.astroid_gateway.parse_source(body, module_name)
        if module is None:
            return ()

        text = SourceText(body)
        rule = WhitespaceBeforeColonRule(policy)
        violations: list[Violation] = []
        for node in module.nodes_of_class(_ELIGIBLE):
            for site in self.astroid_gateway.colon_sites(node, text):
                violation = rule.check(site)
                if violation is not None:
                    violations.append(self._shifted(violation, shift) if shift else violation)
        return tuple(violations)

    @staticmethod
    def _shifted(violation: Violation, shift: int) -> Violation:
        replacement = violation.replacement
        if replacement is not None:
            replacement = replace(
                replacement, start=replacement.start + shift, end=replacement.end + shift
            )
        return replace(violation, start=violation.start + shift, replacement=replacement)
