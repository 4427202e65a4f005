"""
tests/test_parser.py
Env-file grammar: comments, quoting, escapes, multi-line values, edge cases.
"""

from pathlib import Path

import pytest

from envseed.parser import parse


FIXTURE_ENV = Path(__file__).parent / ".env"


@pytest.fixture(scope="module")
def parsed():
    return parse(FIXTURE_ENV.read_text(encoding="utf-8"))


class TestFixtureFile:
    """The sample tests/.env covers the whole grammar in one file."""

    def test_returns_dict(self, parsed):
        assert isinstance(parsed, dict)

    def test_basic(self, parsed):
        assert parsed["BASIC"] == "basic"

    def test_reads_after_blank_line(self, parsed):
        assert parsed["AFTER_LINE"] == "after_line"

    def test_empty_value_is_empty_string(self, parsed):
        assert parsed["EMPTY"] == ""

    def test_double_quoted(self, parsed):
        assert parsed["DOUBLE_QUOTES"] == "double_quotes"

    def test_single_quoted(self, parsed):
        assert parsed["SINGLE_QUOTES"] == "single_quotes"

    def test_expands_newlines_only_in_double_quotes(self, parsed):
        assert parsed["EXPAND_NEWLINES"] == "expand\nnewlines"
        assert parsed["DONT_EXPAND_NEWLINES_1"] == "dontexpand\\nnewlines"
        assert parsed["DONT_EXPAND_NEWLINES_2"] == "dontexpand\\nnewlines"

    def test_skips_commented_lines(self, parsed):
        assert "COMMENTS" not in parsed

    def test_strips_end_of_line_comments(self, parsed):
        assert parsed["EOL_COMMENTS"] == "good"

    def test_keeps_hash_inside_quotes(self, parsed):
        assert parsed["QUOTED_HASH_1"] == "should be # included"
        assert parsed["QUOTED_HASH_2"] == "should be # included"

    def test_keeps_equals_signs_in_value(self, parsed):
        assert parsed["EQUAL_SIGNS"] == "equals=="

    def test_retains_inner_quotes(self, parsed):
        assert parsed["RETAIN_INNER_QUOTES"] == '{"foo": "bar"}'
        assert parsed["RETAIN_INNER_QUOTES_AS_STRING"] == '{"foo": "bar"}'

    def test_retains_inner_spaces(self, parsed):
        assert parsed["INCLUDE_SPACE"] == "some spaced out string"

    def test_trims_unquoted_whitespace(self, parsed):
        assert parsed["WHITESPACE_TRIM"] == "trim me"

    def test_keeps_quoted_whitespace(self, parsed):
        assert parsed["QUOTED_WHITESPACE_NOTRIM_1"] == "  dont trim me   "
        assert parsed["QUOTED_WHITESPACE_NOTRIM_2"] == "  dont trim me   "

    def test_email_address(self, parsed):
        assert parsed["USERNAME"] == "therealnerdybeast@example.tld"

    def test_severe_combinations(self, parsed):
        assert parsed["PARSER_QA_1"] == "a'b'c'd'e"
        assert parsed["PARSER_QA_2"] == "\"  mismatched\\nquotes  '"
        assert parsed["PARSER_QA_3"] == "  # yes\n  # yes\n"

    def test_multiline_single_quoted(self, parsed):
        assert parsed["MULTILINE_SINGLE"] == "first\nsecond"


class TestAssignments:

    def test_unquoted_value_is_trimmed(self):
        assert parse("KEY=   value with spaces  ") == {"KEY": "value with spaces"}

    def test_empty_value(self):
        assert parse("KEY=") == {"KEY": ""}

    def test_whitespace_around_equals(self):
        assert parse("KEY = value") == {"KEY": "value"}

    def test_only_first_equals_splits(self):
        assert parse("KEY=a=b=c") == {"KEY": "a=b=c"}

    def test_key_punctuation(self):
        assert parse("my.key-name_1=x") == {"my.key-name_1": "x"}

    def test_keys_are_case_sensitive(self):
        assert parse("key=a\nKEY=b") == {"key": "a", "KEY": "b"}

    def test_last_duplicate_wins(self):
        assert parse("A=1\nB=2\nA=3") == {"A": "3", "B": "2"}

    def test_non_matching_lines_are_skipped(self):
        assert parse("not a pair\n=value\n\n   \nK=v") == {"K": "v"}

    def test_quote_after_equals_whitespace(self):
        assert parse('KEY=  "quoted"') == {"KEY": "quoted"}


class TestComments:

    def test_full_line_comment(self):
        assert parse("# full line comment\nKEY=val") == {"KEY": "val"}

    def test_indented_comment(self):
        assert parse("   # KEY=nope\nKEY=val") == {"KEY": "val"}

    def test_trailing_comment_stripped(self):
        assert parse("KEY=val #comment") == {"KEY": "val"}

    def test_hash_without_whitespace_is_kept(self):
        assert parse("KEY=a#b") == {"KEY": "a#b"}

    def test_value_that_is_only_a_comment(self):
        assert parse("KEY=#nothing here") == {"KEY": ""}

    def test_hash_in_double_quotes(self):
        assert parse('KEY="va#lue"') == {"KEY": "va#lue"}

    def test_lone_hash_in_quotes(self):
        assert parse('KEY="#"') == {"KEY": "#"}

    def test_comment_after_closing_quote(self):
        assert parse('KEY="v # kept" # dropped') == {"KEY": "v # kept"}


class TestQuoting:

    def test_double_quotes_expand_escaped_newline(self):
        assert parse('KEY="a\\nb"') == {"KEY": "a\nb"}

    def test_single_quotes_keep_escaped_newline(self):
        assert parse("KEY='a\\nb'") == {"KEY": "a\\nb"}

    def test_empty_quotes(self):
        assert parse('A=""\nB=\'\'') == {"A": "", "B": ""}

    def test_mismatched_quotes_kept_raw(self):
        assert parse("KEY=\"abc' # tail") == {"KEY": "\"abc'"}

    def test_trailing_text_after_quotes_is_unquoted(self):
        assert parse('KEY="a"b') == {"KEY": '"a"b'}

    def test_unterminated_quote_at_end_of_input(self):
        assert parse('KEY="') == {"KEY": '"'}
        assert parse("KEY='open") == {"KEY": "'open"}


class TestMultiline:

    def test_double_quoted_span(self):
        text = 'CERT="line one\nline two"\nAFTER=1'
        assert parse(text) == {"CERT": "line one\nline two", "AFTER": "1"}

    def test_comment_lookalikes_inside_span(self):
        text = 'K="  # yes\n  # yes\n"\n'
        assert parse(text) == {"K": "  # yes\n  # yes\n"}

    def test_escapes_expanded_across_span(self):
        assert parse('K="a\\nb\nc"') == {"K": "a\nb\nc"}

    def test_single_quoted_span_not_expanded(self):
        assert parse("K='a\\nb\nc'") == {"K": "a\\nb\nc"}

    def test_closing_quote_must_end_its_line(self):
        text = "A=\"open\nB=\"closed\""
        assert parse(text) == {"A": '"open', "B": "closed"}

    def test_mismatched_line_closes_on_next_lone_quote(self):
        # the span after a mismatched opener ends at the first later quote
        text = 'A="mismatched\'\nB="\nline\n"\nC=1'
        assert parse(text) == {"A": "mismatched'\nB=", "C": "1"}

    def test_crlf_span(self):
        assert parse('K="a\r\nb"\r\nN=2\r\n') == {"K": "a\nb", "N": "2"}


class TestInputTypes:

    def test_bytes(self):
        assert parse(b"BASIC=basic") == {"BASIC": "basic"}

    def test_bytes_with_bom(self):
        assert parse(b"\xef\xbb\xbfKEY=v") == {"KEY": "v"}

    def test_str_with_bom(self):
        assert parse("\ufeffKEY=v") == {"KEY": "v"}

    def test_undecodable_bytes_do_not_raise(self):
        assert parse(b"KEY=\xff") == {"KEY": "\ufffd"}

    def test_crlf_line_endings(self):
        assert parse('A=1\r\nB="two"\r\n') == {"A": "1", "B": "two"}

    def test_empty_input(self):
        assert parse("") == {}
        assert parse(b"") == {}

    @pytest.mark.parametrize("garbage", [
        "=", "==", '"', "'", "\"'", "#", "\x00", "KEY", "K=\"\n\n\n", "\n\n\n",
    ])
    def test_never_raises(self, garbage):
        assert isinstance(parse(garbage), dict)
