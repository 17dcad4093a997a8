"""Configuration loader for linter settings."""

import logging
from typing import Optional

from colon_whitespace_linter.domain.policy import PolicyResolver, WhitespacePolicy

KNOWN_KEYS: frozenset[str] = frozenset({"policy", "strict", "exclude"})


class ConfigurationLoader:
    """
    Wraps the [tool.colon-whitespace] section of pyproject.toml.

    The section is read by the infrastructure ConfigFileLoader and handed in
    at the composition root.
    """

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._config: dict[str, object] = dict(config or {})
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys and values the rule does not understand."""
        unknown = sorted(key for key in config if key not in KNOWN_KEYS)
        if unknown:
            logging.warning(
                "Configuration Warning: unknown [tool.colon-whitespace] keys: %s",
                ", ".join(unknown),
            )
        policy = config.get("policy")
        if policy is not None and not isinstance(policy, (str, list)):
            logging.warning(
                "Configuration Warning: 'policy' should be a string, got %s",
                type(policy).__name__,
            )

    @property
    def policy_option(self) -> object:
        """Raw policy option as written in the config file."""
        return self._config.get("policy")

    @property
    def strict(self) -> bool:
        """Whether an unrecognised policy is an error instead of disabling the rule."""
        return bool(self._config.get("strict", False))

    @property
    def exclude(self) -> list[str]:
        """Glob patterns (relative to the checked path) skipped by the CLI."""
        raw = self._config.get("exclude", [])
        if isinstance(raw, str):
            return [raw]
        if isinstance(raw, list):
            return [item for item in raw if isinstance(item, str)]
        return []

    def resolve_policy(
        self, override: Optional[str] = None, strict: Optional[bool] = None
    ) -> WhitespacePolicy:
        """Resolve the effective policy; explicit arguments win over the config file."""
        option = override if override is not None else self.policy_option
        use_strict = self.strict if strict is None else strict
        return PolicyResolver.resolve(option, strict=use_strict)
