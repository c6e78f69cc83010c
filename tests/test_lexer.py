import pytest

from mallet.errors import LexError
from mallet.reader.lexer import Token, lex, tokenize


def texts(source):
    return [tok.text for tok in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("a", ["a"]),
        ("'a", ["'", "a"]),
        ("[1 2]", ["[", "1", "2", "]"]),
        ("{:a 1}", ["{", ":a", "1", "}"]),
        ("~@xs", ["~@", "xs"]),
        ("~x", ["~", "x"]),
        ("`(a ~b)", ["`", "(", "a", "~", "b", ")"]),
        ("@atom", ["@", "atom"]),
        ("^{} x", ["^", "{", "}", "x"]),
        ("1,2,,3", ["1", "2", "3"]),
        (" ; comment\n a b", ["a", "b"]),
        ("a ; trailing", ["a"]),
        ('"hello world"', ['"hello world"']),
        (r'"a \"quoted\" word"', [r'"a \"quoted\" word"']),
        (r'"back\\" x', [r'"back\\"', "x"]),
        ("a~b", ["a~b"]),
        ("-12", ["-12"]),
    ],
)
def test_lexer_basic(source, expected):
    assert texts(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(", [Token("special", "(", 0)]),
        ("~@x", [Token("splice", "~@", 0), Token("atom", "x", 2)]),
        (' "s"', [Token("string", '"s"', 1)]),
        (":kw", [Token("keyword", ":kw", 0)]),
        ("sym", [Token("atom", "sym", 0)]),
    ],
)
def test_token_kinds_and_positions(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "",
        "    ",
        ",,,",
        "; comment only",
        "\n\t\n",
    ],
)
def test_lexer_edge_cases_yield_nothing(source):
    assert tokenize(source) == []


@pytest.mark.parametrize("source", ['"abc', '(a "b', r'"ends in escape\"'])
def test_unterminated_string(source):
    with pytest.raises(LexError, match="unterminated string"):
        tokenize(source)


def test_lex_is_lazy_until_the_error():
    tokens = lex('a "oops')
    assert next(tokens).text == "a"
    with pytest.raises(LexError):
        next(tokens)


@pytest.mark.parametrize("source", ["#", "\x00", "~~", "@@", "^^", "a'b", "\\"])
def test_any_character_outside_a_string_lexes(source):
    assert "".join(texts(source)) == source
