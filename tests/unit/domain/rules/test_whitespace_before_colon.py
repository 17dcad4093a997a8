"""Tests for WhitespaceBeforeColonRule (C9201)."""

import pytest

from colon_whitespace_linter.domain.entities import (
    ColonSite,
    ConstructKind,
    Replacement,
    WhitespaceRun,
)
from colon_whitespace_linter.domain.policy import WhitespacePolicy
from colon_whitespace_linter.domain.rules.whitespace_before_colon import (
    RULE_METADATA,
    WhitespaceBeforeColonRule,
)

START = 10


def _site(gap: str, kind: ConstructKind = ConstructKind.PROPERTY_ASSIGNMENT) -> ColonSite:
    text = gap + ":"
    return ColonSite(
        kind=kind,
        colon_start=START,
        colon_end=START + len(text),
        text=text,
        line=3,
        column=7,
    )


@pytest.mark.parametrize("length", [0, 1, 2, 5])
@pytest.mark.parametrize(
    ("policy", "passes"),
    [
        (WhitespacePolicy.NOSPACE, lambda n: n == 0),
        (WhitespacePolicy.ONESPACE, lambda n: n == 1),
        (WhitespacePolicy.SPACE, lambda n: n >= 1),
    ],
)
def test_policy_correctness(policy, passes, length: int) -> None:
    rule = WhitespaceBeforeColonRule(policy)
    violation = rule.check(_site(" " * length))
    assert (violation is None) == passes(length)


@pytest.mark.parametrize("gap", ["", " ", "   ", "\t\t"])
def test_disabled_policy_never_reports(gap: str) -> None:
    assert WhitespaceBeforeColonRule(WhitespacePolicy.DISABLED).check(_site(gap)) is None


@pytest.mark.parametrize("gap", ["\n", "  \n  ", "\r\n", "\n\n\t", "\r"])
@pytest.mark.parametrize("policy", list(WhitespacePolicy))
def test_line_break_exempts_any_policy(policy: WhitespacePolicy, gap: str) -> None:
    assert WhitespaceBeforeColonRule(policy).check(_site(gap)) is None


class TestViolationShape:
    def test_onespace_too_many(self) -> None:
        violation = WhitespaceBeforeColonRule(WhitespacePolicy.ONESPACE).check(_site("  "))

        assert violation is not None
        assert violation.code == "C9201"
        assert violation.message == "expected onespace before colon"
        assert violation.start == START
        assert violation.length == 2
        assert (violation.line, violation.column) == (3, 7)
        assert violation.kind is ConstructKind.PROPERTY_ASSIGNMENT
        assert violation.replacement == Replacement(START, START + 2, " ")

    def test_onespace_missing_inserts_one_space(self) -> None:
        violation = WhitespaceBeforeColonRule(WhitespacePolicy.ONESPACE).check(_site(""))

        assert violation is not None
        assert violation.length == 0
        assert violation.replacement == Replacement(START, START, " ")

    def test_space_missing_inserts_exactly_one_space(self) -> None:
        violation = WhitespaceBeforeColonRule(WhitespacePolicy.SPACE).check(_site(""))

        assert violation is not None
        assert violation.message == "expected space before colon"
        assert violation.replacement == Replacement(START, START, " ")

    def test_nospace_removes_run(self) -> None:
        violation = WhitespaceBeforeColonRule(WhitespacePolicy.NOSPACE).check(
            _site(" \t ", kind=ConstructKind.BINDING_ELEMENT)
        )

        assert violation is not None
        assert violation.message == "expected nospace before colon"
        assert violation.kind is ConstructKind.BINDING_ELEMENT
        assert violation.replacement == Replacement(START, START + 3, "")

    def test_fix_never_touches_colon(self) -> None:
        site = _site("     ")
        violation = WhitespaceBeforeColonRule(WhitespacePolicy.ONESPACE).check(site)

        assert violation is not None
        assert violation.replacement is not None
        assert violation.replacement.end == site.colon_end - 1
        assert violation.end == violation.replacement.end


def test_tab_counts_as_one_character() -> None:
    rule = WhitespaceBeforeColonRule(WhitespacePolicy.ONESPACE)
    assert rule.check(_site("\t")) is None
    assert rule.check(_site("\t ")) is not None


def test_run_stops_at_first_non_whitespace() -> None:
    site = ColonSite(
        kind=ConstructKind.PROPERTY_ASSIGNMENT,
        colon_start=0,
        colon_end=8,
        text="  ) #x :",
    )
    run = WhitespaceRun.measure(site)
    assert run.text == "  "
    assert run.length == 2
    assert not run.has_line_break


def test_metadata_describes_fixable_style_rule() -> None:
    assert RULE_METADATA.rule_name == "whitespace-before-colon"
    assert RULE_METADATA.option_values == ("nospace", "onespace", "space")
    assert RULE_METADATA.option_examples == ("onespace",)
    assert RULE_METADATA.rule_type == "style"
    assert RULE_METADATA.has_fix is True
    assert WhitespaceBeforeColonRule.metadata is RULE_METADATA
