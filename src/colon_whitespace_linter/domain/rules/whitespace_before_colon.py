"""Whitespace before colon rule (C9201): spacing between a mapping key and its colon."""

from typing import Optional

from colon_whitespace_linter.domain.entities import (
    ColonSite,
    Replacement,
    Violation,
    WhitespaceRun,
)
from colon_whitespace_linter.domain.policy import (
    RECOGNISED_POLICIES,
    WhitespacePolicy,
)
from colon_whitespace_linter.domain.rules import RuleMetadata

RULE_METADATA = RuleMetadata(
    rule_name="whitespace-before-colon",
    description=(
        "Determines if a space is required or not before the colon in dict displays,\n"
        "dict comprehensions and mapping patterns.\n"
        "\n"
        "If a newline character is present before the colon, the colon passes\n"
        "regardless of the configured option."
    ),
    rationale=(
        "Pylint has no means of controlling spaces before the colon of a mapping\n"
        "entry. Checks for whitespace after the colon, and for annotation colons,\n"
        "do not cover the key/value separator."
    ),
    options_description=(
        "An option indicating the required number of spaces before colon must be provided:\n"
        "\n"
        '* "nospace" requires no space\n'
        '* "onespace" requires exactly one space\n'
        '* "space" requires one or more spaces'
    ),
    option_values=RECOGNISED_POLICIES,
    option_examples=("onespace",),
    rule_type="style",
    has_fix=True,
)


class WhitespaceBeforeColonRule:
    """Rule for C9201. Decides pass/fail for a colon site and builds the minimal fix."""

    code: str = "C9201"
    symbol: str = "whitespace-before-colon"
    metadata: RuleMetadata = RULE_METADATA

    def __init__(self, policy: WhitespacePolicy) -> None:
        self.policy = policy

    @staticmethod
    def failure_message(policy: WhitespacePolicy) -> str:
        return f"expected {policy.value} before colon"

    def check(self, site: ColonSite) -> Optional[Violation]:
        """Check the whitespace run between the preceding token and the colon."""
        run = WhitespaceRun.measure(site)

        # Multi-line layouts are left alone under every policy.
        if run.has_line_break:
            return None

        policy = self.policy
        if not policy.is_enabled:
            return None
        if policy is WhitespacePolicy.SPACE and run.length > 0:
            return None

        required = policy.required_length
        if run.length == required:
            return None

        return Violation(
            code=self.code,
            message=self.failure_message(policy),
            start=site.colon_start,
            length=run.length,
            line=site.line,
            column=site.column,
            kind=site.kind,
            replacement=Replacement(
                start=site.colon_start,
                end=site.colon_start + run.length,
                text=" " * required,
            ),
        )
