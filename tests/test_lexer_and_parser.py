import pytest

from bel.errors import BelSyntaxError
from bel.reader.parser import lex, parse, parse_all
from bel.types.char import Char
from bel.types.nil import Nil
from bel.types.object import from_list
from bel.types.pair import Pair
from bel.types.symbol import Symbol

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")
QUOTE = Symbol("quote")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("`a", [("quote", "`"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("\\a", [("char", "\\a")]),
        ("(\\space)", [("lparen", "("), ("char", "\\space"), ("rparen", ")")]),
        ("(a . b)", [("lparen", "("), ("symbol", "a"), ("symbol", "."), ("symbol", "b"), ("rparen", ")")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("", Nil),
        ("   \n  ", Nil),
        ("()", Nil),
        ("a", a),
        ("'a", from_list([QUOTE, a])),
        ("`a", from_list([QUOTE, a])),
        ("(quote a)", from_list([QUOTE, a])),
        ("(x)", Pair(Symbol("x"), Nil)),
        ("( a b (c d))", from_list([a, b, from_list([c, Symbol("d")])])),
        ("'(a b)", from_list([QUOTE, from_list([a, b])])),
        ("(a . b)", Pair(a, b)),
        ("(a b . c)", Pair(a, Pair(b, c))),
        ("\\a", Char("a")),
        ("(def xnox (x)\n  (id x nil))",
         from_list([Symbol("def"), Symbol("xnox"), from_list([Symbol("x")]),
                    from_list([Symbol("id"), Symbol("x"), Nil])])),
        ("(a ; trailing comment\n b)", from_list([a, b])),
    ]
)
def test_parse(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "a b",
        "(a) (b)",
        "(a b",
        ")",
        "'",
        "(a . b c)",
        "(a .)",
        "\\",
    ]
)
def test_parse_errors(source):
    with pytest.raises(BelSyntaxError):
        parse(source)


def test_parse_all_yields_every_form():
    assert list(parse_all("(set a b) a 'c")) == [
        from_list([Symbol("set"), a, b]),
        a,
        from_list([QUOTE, c]),
    ]


def test_printed_form_reads_back():
    source = "(def f (x y) (if (id x y) (join x y) (car (quote (a . b)))))"
    assert str(parse(source)) == source
    assert parse(str(parse(source))) == parse(source)
