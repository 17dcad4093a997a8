import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_LEADING_WHITESPACE = re.compile(r"\s*")
_LINE_BREAKS = ("\n", "\r")


class ConstructKind(Enum):
    """Constructs whose key/value colon is checked."""

    PROPERTY_ASSIGNMENT = "property-assignment"
    """Dict display entry or dict comprehension head: ``{key: value}``."""
    BINDING_ELEMENT = "binding-element"
    """Mapping pattern entry: ``case {"key": binding}``."""


@dataclass(frozen=True)
class ColonSite:
    """
    One colon occurrence to be checked.

    ``colon_start`` is the end offset of the token preceding the colon and
    ``colon_end`` the offset right after it, so ``text`` covers the gap and
    the colon itself. ``line``/``column`` locate ``colon_start`` (1-based
    line, 0-based character column).
    """

    kind: ConstructKind
    colon_start: int
    colon_end: int
    text: str
    line: int = 1
    column: int = 0


@dataclass(frozen=True)
class WhitespaceRun:
    """Whitespace immediately following the token that precedes a colon."""

    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def has_line_break(self) -> bool:
        return any(ch in self.text for ch in _LINE_BREAKS)

    @classmethod
    def measure(cls, site: ColonSite) -> "WhitespaceRun":
        """Longest whitespace run anchored at ``site.colon_start``."""
        match = _LEADING_WHITESPACE.match(site.text)
        return cls(match.group(0) if match else "")


@dataclass(frozen=True)
class Replacement:
    """Replace source ``[start, end)`` with ``text``."""

    start: int
    end: int
    text: str

    def apply(self, source: str) -> str:
        return source[: self.start] + self.text + source[self.end :]


@dataclass(frozen=True)
class Violation:
    """A colon whose preceding whitespace breaks the active policy."""

    code: str
    message: str
    start: int
    length: int
    line: int
    column: int
    kind: ConstructKind
    replacement: Optional[Replacement] = None

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class FileReport:
    """Violations found in one file."""

    path: str
    violations: tuple[Violation, ...] = ()


@dataclass(frozen=True)
class FixResult:
    """Outcome of a fix run."""

    changed_files: tuple[str, ...] = ()
    fixed_count: int = 0
    refused_files: tuple[str, ...] = ()
