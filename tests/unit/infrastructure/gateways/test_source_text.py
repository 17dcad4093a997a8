from colon_whitespace_linter.domain.entities import ConstructKind
from colon_whitespace_linter.infrastructure.gateways.source_text import SourceText

KIND = ConstructKind.PROPERTY_ASSIGNMENT


class TestOffsets:
    def test_offset_and_position_round_trip(self) -> None:
        text = SourceText("a = 1\nbb = {x: 2}\n")
        assert text.offset(1, 0) == 0
        assert text.offset(2, 3) == 9
        assert text.position(9) == (2, 3)
        assert text.position(0) == (1, 0)

    def test_offset_past_last_line_clamps_to_end(self) -> None:
        text = SourceText("x = 1\n")
        assert text.offset(5, 0) == len("x = 1\n")

    def test_byte_columns_convert_to_characters(self) -> None:
        text = SourceText('d = {"é": 1}\n')
        # astroid reports the key end after the closing quote in UTF-8 bytes.
        assert text.offset_from_byte_column(1, 9) == 8

    def test_ascii_line_uses_byte_column_directly(self) -> None:
        text = SourceText("d = {'a': 1}\n")
        assert text.offset_from_byte_column(1, 8) == 8


class TestColonSite:
    def test_gap_starts_after_preceding_token(self) -> None:
        text = SourceText("x = {a  : 1}\n")
        site = text.colon_site(KIND, after=6)

        assert site is not None
        assert site.colon_start == 6
        assert site.colon_end == 9
        assert site.text == "  :"
        assert (site.line, site.column) == (1, 6)
        assert site.kind is KIND

    def test_closing_paren_is_the_preceding_token(self) -> None:
        text = SourceText("x = {(a)  : 1}\n")
        site = text.colon_site(KIND, after=7)

        assert site is not None
        assert site.colon_start == 8
        assert site.text == "  :"

    def test_comments_and_newlines_are_trivia(self) -> None:
        source = "x = {\n    a  # note\n    : 1,\n}\n"
        text = SourceText(source)
        after = source.index("a") + 1
        site = text.colon_site(KIND, after=after)

        assert site is not None
        assert site.colon_start == after
        assert site.text == "  # note\n    :"

    def test_walrus_is_not_a_colon(self) -> None:
        text = SourceText("y = {a: (b := 2)}\n")
        assert text.colon_site(KIND, after=8) is None

    def test_before_bound_stops_search(self) -> None:
        text = SourceText("x = {a, b: 1}\n")
        assert text.colon_site(KIND, after=6, before=8) is None

    def test_untokenizable_source_has_no_sites(self) -> None:
        text = SourceText('x = {"a" : """unterminated\n')
        assert text.tokens == []
        assert text.colon_site(KIND, after=0) is None

    def test_crlf_lines(self) -> None:
        text = SourceText("x = {\r\n  a : 1}\r\n")
        site = text.colon_site(KIND, after=10)

        assert site is not None
        assert site.colon_start == 10
        assert site.text == " :"
        assert (site.line, site.column) == (2, 3)

    def test_bare_carriage_return_ends_a_line(self) -> None:
        text = SourceText("d = 1\re = {a  : 1}\r")
        site = text.colon_site(KIND, after=12)

        assert site is not None
        assert site.colon_start == 12
        assert site.text == "  :"
        assert (site.line, site.column) == (2, 6)
        assert text.offset(2, 0) == 6


class TestColonSiteInFormatString:
    def test_dict_inside_replacement_field(self) -> None:
        text = SourceText('x = f"{ {1  : 2} }"\n')
        site = text.colon_site(KIND, after=10, before=14)

        assert site is not None
        assert site.colon_start == 10
        assert site.colon_end == 13
        assert site.text == "  :"

    def test_parenthesised_key_inside_replacement_field(self) -> None:
        text = SourceText('x = f"{ {(1)  : 2} }"\n')
        site = text.colon_site(KIND, after=11, before=16)

        assert site is not None
        assert site.colon_start == 12
        assert site.text == "  :"

    def test_string_key_is_not_inside_a_string(self) -> None:
        text = SourceText('x = {"a"  : 1}\n')
        site = text.colon_site(KIND, after=8, before=12)

        assert site is not None
        assert site.text == "  :"
