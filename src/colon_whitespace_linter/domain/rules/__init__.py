"""Domain models for rules."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RuleMetadata:
    """Descriptive metadata published for a rule (shown by ``explain``)."""

    rule_name: str
    description: str
    rationale: str
    options_description: str
    option_values: tuple[str, ...]
    option_examples: tuple[str, ...] = field(default_factory=tuple)
    rule_type: str = "style"
    has_fix: bool = False
