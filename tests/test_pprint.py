import pytest

from bel import errors
from bel.debug_utils.pprint import (
    COLOR_SPECIAL_FORM, COLOR_SYMBOL, RESET, colorize, format_tree, pprint_tree,
)
from bel.reader.parser import parse
from bel.types.symbol import Symbol


def test_closure_literal_tree():
    tree = format_tree(parse("(lit clo nil (x) (id x nil))"))
    assert tree == "lit\nclo\nnil\n    x\n    id\n    x\n    nil\n"


def test_nested_levels():
    assert format_tree(parse("(a (b (c)) d)")) == "a\n    b\n        c\nd\n"


def test_atoms_print_on_one_line():
    assert format_tree(Symbol("a")) == "a\n"


def test_custom_indent():
    assert format_tree(parse("(a (b))"), {"indent": 2}) == "a\n  b\n"


def test_dotted_lists_are_rejected():
    with pytest.raises(errors.BelMalformedList):
        format_tree(parse("(a . b)"))


def test_colorize():
    options = {"color_symbols": True, "color_special_forms": True}
    assert colorize(Symbol("a")) == "a"
    assert colorize(Symbol("a"), options) == f"{COLOR_SYMBOL}a{RESET}"
    assert colorize(Symbol("quote"), options) == f"{COLOR_SPECIAL_FORM}quote{RESET}"


def test_pprint_tree(capsys):
    pprint_tree(parse("(a (b))"))
    assert capsys.readouterr().out == "a\n    b\n"
