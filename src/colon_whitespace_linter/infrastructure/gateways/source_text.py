"""Module text with offset/position bookkeeping and a token index."""

import io
import logging
import re
import tokenize
from bisect import bisect_left, bisect_right
from typing import Optional

from colon_whitespace_linter.domain.entities import ColonSite, ConstructKind

logger = logging.getLogger(__name__)

# Tokens that may sit between a key and its colon without being the key.
_TRIVIA: frozenset[int] = frozenset(
    {tokenize.COMMENT, tokenize.NL, tokenize.NEWLINE, tokenize.INDENT, tokenize.DEDENT}
)

_BARE_CR = re.compile(r"\r(?!\n)")


class SourceText:
    """
    Immutable view over one module's text.

    Lines end at ``\\n``, ``\\r\\n`` or a bare ``\\r``, the same breaks the
    compiler counts, so token positions, astroid line numbers and absolute
    character offsets agree.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        # Same length as text, so offsets carry over unchanged.
        lf_text = _BARE_CR.sub("\n", text)
        self._lines: list[str] = io.StringIO(lf_text).readlines()
        self._line_starts: list[int] = []
        offset = 0
        for line in self._lines:
            self._line_starts.append(offset)
            offset += len(line)
        self._tokens: list[tokenize.TokenInfo] = self._tokenize(lf_text)
        self._token_starts: list[int] = [self.offset(*tok.start) for tok in self._tokens]

    @staticmethod
    def _tokenize(text: str) -> list[tokenize.TokenInfo]:
        try:
            return list(tokenize.generate_tokens(io.StringIO(text).readline))
        except (tokenize.TokenError, SyntaxError) as exc:
            logger.debug("Could not tokenize source; no colons will be checked: %s", exc)
            return []

    @property
    def tokens(self) -> list[tokenize.TokenInfo]:
        return self._tokens

    def line_text(self, line: int) -> str:
        if 1 <= line <= len(self._lines):
            return self._lines[line - 1]
        return ""

    def offset(self, line: int, column: int) -> int:
        """Absolute character offset of a 1-based line and character column."""
        if line < 1:
            return 0
        if line > len(self._lines):
            return len(self.text)
        return self._line_starts[line - 1] + column

    def offset_from_byte_column(self, line: int, byte_column: int) -> int:
        """Absolute offset for astroid positions, whose columns count UTF-8 bytes."""
        line_text = self.line_text(line)
        if line_text.isascii():
            return self.offset(line, byte_column)
        prefix = line_text.encode("utf-8")[:byte_column].decode("utf-8", errors="ignore")
        return self.offset(line, len(prefix))

    def position(self, offset: int) -> tuple[int, int]:
        """1-based line and 0-based character column of an absolute offset."""
        if not self._line_starts:
            return (1, offset)
        index = max(bisect_right(self._line_starts, offset) - 1, 0)
        return (index + 1, offset - self._line_starts[index])

    def colon_site(
        self, kind: ConstructKind, after: int, before: Optional[int] = None
    ) -> Optional[ColonSite]:
        """
        Build the site of the first ``:`` operator starting at or after ``after``.

        ``before`` bounds the search (the start of the value/pattern) so a
        missing colon never picks up one belonging to a later entry.
        """
        string_end = self._enclosing_string_end(after)
        if string_end is not None:
            limit = string_end if before is None else min(before, string_end)
            return self._site_in_string(kind, after, limit)

        index = bisect_left(self._token_starts, after)
        while index < len(self._tokens):
            tok = self._tokens[index]
            start = self._token_starts[index]
            if before is not None and start >= before:
                return None
            if tok.type == tokenize.OP and tok.string == ":":
                return self._site_at(kind, index)
            index += 1
        return None

    def _enclosing_string_end(self, offset: int) -> Optional[int]:
        """End of the STRING token that strictly contains ``offset``, if any.

        Before Python 3.12 an f-string is a single STRING token, so the
        mappings inside its replacement fields have no tokens of their own.
        """
        index = bisect_right(self._token_starts, offset) - 1
        if index < 0:
            return None
        tok = self._tokens[index]
        if tok.type != tokenize.STRING or self._token_starts[index] == offset:
            return None
        end = self.offset(*tok.end)
        return end if offset < end else None

    def _site_in_string(self, kind: ConstructKind, after: int, limit: int) -> Optional[ColonSite]:
        colon_start = self.text.find(":", after, limit)
        if colon_start < 0:
            return None
        return self._site(kind, self._skip_closing_parens(after, colon_start), colon_start + 1)

    def _skip_closing_parens(self, start: int, stop: int) -> int:
        """Offset just past the last ``)`` that closes a parenthesised key."""
        position = start
        for offset in range(start, stop):
            if self.text[offset] == ")":
                position = offset + 1
            elif not self.text[offset].isspace():
                break
        return position

    def _site_at(self, kind: ConstructKind, colon_index: int) -> ColonSite:
        colon = self._tokens[colon_index]
        index = colon_index - 1
        while index >= 0 and self._tokens[index].type in _TRIVIA:
            index -= 1
        gap_start = self.offset(*self._tokens[index].end) if index >= 0 else 0
        return self._site(kind, gap_start, self.offset(*colon.end))

    def _site(self, kind: ConstructKind, gap_start: int, colon_end: int) -> ColonSite:
        line, column = self.position(gap_start)
        return ColonSite(
            kind=kind,
            colon_start=gap_start,
            colon_end=colon_end,
            text=self.text[gap_start:colon_end],
            line=line,
            column=column,
        )
