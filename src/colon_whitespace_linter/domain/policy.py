"""Whitespace policy for the colon rule and its resolver."""

import logging
from collections.abc import Sequence
from enum import Enum

logger = logging.getLogger(__name__)


class InvalidPolicyError(ValueError):
    """Raised in strict mode when the configured policy is not recognised."""


class WhitespacePolicy(Enum):
    """Required amount of whitespace before a mapping colon."""

    NOSPACE = "nospace"
    ONESPACE = "onespace"
    SPACE = "space"
    DISABLED = "disabled"

    @property
    def is_enabled(self) -> bool:
        return self is not WhitespacePolicy.DISABLED

    @property
    def required_length(self) -> int:
        """Whitespace length a violation is corrected to."""
        return 0 if self is WhitespacePolicy.NOSPACE else 1


RECOGNISED_POLICIES: tuple[str, ...] = (
    WhitespacePolicy.NOSPACE.value,
    WhitespacePolicy.ONESPACE.value,
    WhitespacePolicy.SPACE.value,
)


class PolicyResolver:
    """Normalises a raw option value into a WhitespacePolicy. No top-level functions."""

    @staticmethod
    def resolve(option: object, strict: bool = False) -> WhitespacePolicy:
        """
        Resolve a configuration value.

        Exact policy names map to their policy. A list of rule arguments
        resolves from its first element. Anything else disables the rule,
        or raises InvalidPolicyError when strict is set.
        """
        if isinstance(option, WhitespacePolicy):
            return option

        if isinstance(option, Sequence) and not isinstance(option, (str, bytes)):
            first = option[0] if option else None
            return PolicyResolver.resolve(first, strict=strict)

        if isinstance(option, str) and option in RECOGNISED_POLICIES:
            return WhitespacePolicy(option)

        if strict:
            raise InvalidPolicyError(
                f"Unrecognised colon whitespace policy {option!r}; "
                f"expected one of {', '.join(RECOGNISED_POLICIES)}"
            )
        logger.debug("Colon whitespace policy %r not recognised; rule disabled", option)
        return WhitespacePolicy.DISABLED
