"""
Scanner Unit Tests

Cursor movement, delimiter search and quote-aware scanning.
"""

import pytest

from sipaddr import Scanner


class TestScannerSearch:
    """index_of / go_to tests"""

    def test_index_of_single_char(self):
        """
        Given: Text with a ';' after the cursor
        When: index_of(';') is called
        Then: The position is returned and the cursor does not move
        """
        # Given
        scanner = Scanner("sip:host;lr")

        # When
        index = scanner.index_of(";")

        # Then
        assert index == 8
        assert scanner.pos == 0

    def test_index_of_char_set_returns_first_match(self):
        scanner = Scanner("sip:host;x:1?y", 4)

        assert scanner.index_of(":;?") == 8

    def test_index_of_missing_returns_minus_one(self):
        assert Scanner("sip:host").index_of("@") == -1

    def test_index_of_starts_at_cursor(self):
        scanner = Scanner("a;b;c", 2)

        assert scanner.index_of(";") == 3

    def test_go_to_moves_to_end_when_missing(self):
        """
        Given: Text without the delimiter
        When: go_to is called
        Then: The cursor lands at the end and has_more is False
        """
        # Given
        scanner = Scanner("sip:host")

        # When
        scanner.go_to(";")

        # Then
        assert scanner.pos == len("sip:host")
        assert not scanner.has_more()


class TestScannerQuoted:
    """go_to_skipping_quoted tests"""

    def test_skips_delimiter_inside_quotes(self):
        """
        Given: A quoted run containing the delimiter
        When: go_to_skipping_quoted(';') is called
        Then: The cursor stops at the first unquoted ';'
        """
        # Given
        text = 'x="a;b";y'
        scanner = Scanner(text)

        # When
        scanner.go_to_skipping_quoted(";")

        # Then
        assert scanner.pos == text.index(";y")

    def test_escaped_quote_does_not_close_run(self):
        text = r'x="a\";b";y'
        scanner = Scanner(text)

        scanner.go_to_skipping_quoted(";")

        assert text[scanner.pos :] == ";y"

    def test_unterminated_quote_runs_to_end(self):
        scanner = Scanner('x="a;b')

        scanner.go_to_skipping_quoted(";")

        assert scanner.pos == len('x="a;b')

    def test_plain_text_behaves_like_go_to(self):
        scanner = Scanner("x=1;y=2")

        assert scanner.go_to_skipping_quoted(";").pos == 3


class TestScannerTokens:
    """get_word / skip_char / position tests"""

    def test_get_word_stops_on_separator(self):
        """
        Given: A cursor after ';'
        When: get_word is called with parameter separators
        Then: The name is returned and the cursor sits on '='
        """
        # Given
        scanner = Scanner(";transport=tcp", 1)

        # When
        word = scanner.get_word("=;")

        # Then
        assert word == "transport"
        assert scanner.peek() == "="

    def test_get_word_can_be_empty(self):
        scanner = Scanner("=x")

        assert scanner.get_word("=") == ""
        assert scanner.pos == 0

    def test_get_word_reads_to_end(self):
        scanner = Scanner("lr")

        assert scanner.get_word(";") == "lr"
        assert not scanner.has_more()

    def test_skip_char_chains(self):
        scanner = Scanner("sip:host;lr")

        assert scanner.go_to(";").skip_char().remaining() == "lr"

    def test_skip_char_never_passes_end(self):
        scanner = Scanner("a", 1)

        scanner.skip_char()

        assert scanner.pos == 1
        assert scanner.peek() == ""

    @pytest.mark.parametrize("pos, expected", [(-5, 0), (3, 3), (99, 5)])
    def test_set_pos_is_clamped(self, pos, expected):
        scanner = Scanner("abcde")

        scanner.set_pos(pos)

        assert scanner.get_pos() == expected
