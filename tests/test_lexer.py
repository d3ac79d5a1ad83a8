import pytest

from minishell.errors import ParseError, UnclosedQuotesError
from minishell.lexer import has_unclosed_quotes, tokenize


def test_plain_words():
    line = "echo hello world"
    assert tokenize(line) == line.split()


def test_tabs_separate_words():
    assert tokenize("ls\t-l") == ["ls", "-l"]


def test_special_characters_are_own_tokens():
    assert tokenize("a|b>c<d") == ["a", "|", "b", ">", "c", "<", "d"]


@pytest.mark.parametrize("symbol", ["<", ">"])
def test_doubled_symbols_split_into_single_characters(symbol):
    assert tokenize(f"cat {symbol * 2} f") == ["cat", symbol, symbol, "f"]


def test_double_quotes_keep_spaces():
    assert tokenize('echo "hello world"') == ["echo", '"hello world"']


def test_single_quotes_protect_pipe():
    assert tokenize("echo 'a | b'") == ["echo", "'a | b'"]


def test_adjacent_quoted_runs_form_one_token():
    word = "\"a b\"'c d'"
    assert tokenize(word) == [word]


def test_quote_inside_word_does_not_protect_space():
    assert tokenize('a"b c"') == ['a"b', 'c"']


def test_blank_line_has_no_tokens():
    assert len(tokenize(" \t  ")) == 0


@pytest.mark.parametrize("line", ["ls -la | grep x > out", "a  b|c", "x<y>z"])
def test_unquoted_tokens_cover_input(line):
    tokens = tokenize(line)
    assert "".join(tokens) == line.replace(" ", "")
    assert all(tokens)


@pytest.mark.parametrize("line", ['echo "hi', "echo 'hi", "\"a\" 'b"])
def test_unclosed_quotes_raise(line):
    with pytest.raises(UnclosedQuotesError):
        tokenize(line)


def test_unclosed_quotes_is_parse_error():
    with pytest.raises(ParseError):
        tokenize("'")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("plain", False),
        ("'closed'", False),
        ('"it\'s"', False),
        ("'it\"s'", False),
        ('"open', True),
        ("'a' \"b", True),
        ("''\"", True),
    ],
)
def test_has_unclosed_quotes(line, expected):
    assert has_unclosed_quotes(line) is expected