"""Whitespace before colon check (C9201)."""

from typing import TYPE_CHECKING, Optional

import astroid  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from colon_whitespace_linter.domain.config import ConfigurationLoader
from colon_whitespace_linter.domain.entities import Violation
from colon_whitespace_linter.domain.policy import RECOGNISED_POLICIES, WhitespacePolicy
from colon_whitespace_linter.domain.protocols import AstroidProtocol
from colon_whitespace_linter.domain.rules.whitespace_before_colon import (
    WhitespaceBeforeColonRule,
)
from colon_whitespace_linter.infrastructure.gateways.source_text import SourceText


class ColonWhitespaceChecker(BaseChecker):
    """C9201: whitespace before the colon of dict entries and mapping patterns. Thin: delegates to the rule."""

    name: str = "colon-whitespace"
    msgs = {
        WhitespaceBeforeColonRule.code: (
            "expected %s before colon",
            WhitespaceBeforeColonRule.symbol,
            "Used when the whitespace between a dict key (or mapping pattern key) "
            "and its colon does not match the configured colon-whitespace-policy.",
        ),
    }
    options = (
        (
            "colon-whitespace-policy",
            {
                "default": "",
                "type": "string",
                "metavar": "<" + "|".join(RECOGNISED_POLICIES) + ">",
                "help": "Required whitespace before mapping colons. "
                "Any other value disables the check.",
            },
        ),
        (
            "colon-whitespace-strict",
            {
                "default": False,
                "type": "yn",
                "metavar": "<y or n>",
                "help": "Fail on an unrecognised colon-whitespace-policy instead of disabling the check.",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        ast_gateway: AstroidProtocol,
        config_loader: Optional[ConfigurationLoader] = None,
    ) -> None:
        super().__init__(linter)
        self._ast_gateway = ast_gateway
        self.config_loader = config_loader or ConfigurationLoader()
        self._rule = WhitespaceBeforeColonRule(WhitespacePolicy.DISABLED)
        self._source: Optional[SourceText] = None

    @property
    def policy(self) -> WhitespacePolicy:
        return self._rule.policy

    def open(self) -> None:
        """Resolve the policy once, before any module is checked."""
        config = self.linter.config
        option = getattr(config, "colon_whitespace_policy", "") or None
        strict = bool(getattr(config, "colon_whitespace_strict", False)) or None
        self._rule = WhitespaceBeforeColonRule(
            self.config_loader.resolve_policy(option, strict=strict)
        )

    def visit_module(self, node: astroid.nodes.Module) -> None:
        """Index the module text that colon sites are sliced from."""
        self._source = None
        if not self.policy.is_enabled:
            return
        text = self._ast_gateway.read_module_source(node)
        if text is not None:
            self._source = SourceText(text)

    def leave_module(self, node: astroid.nodes.Module) -> None:
        self._source = None

    def visit_dict(self, node: astroid.nodes.Dict) -> None:
        self._check_colons(node)

    def visit_dictcomp(self, node: astroid.nodes.DictComp) -> None:
        self._check_colons(node)

    def visit_matchmapping(self, node: astroid.nodes.MatchMapping) -> None:
        self._check_colons(node)

    def _check_colons(self, node: astroid.nodes.NodeNG) -> None:
        source = self._source
        if source is None or not self.policy.is_enabled:
            return
        for site in self._ast_gateway.colon_sites(node, source):
            violation = self._rule.check(site)
            if violation is not None:
                self._report(node, violation, source)

    def _report(
        self, node: astroid.nodes.NodeNG, violation: Violation, source: SourceText
    ) -> None:
        end_line, end_column = source.position(violation.end)
        self.add_message(
            violation.code,
            line=violation.line,
            node=node,
            args=(self.policy.value,),
            col_offset=violation.column,
            end_lineno=end_line,
            end_col_offset=end_column,
        )
