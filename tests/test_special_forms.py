import pytest

from bel import errors
from bel.reader.parser import parse
from bel.types.nil import Nil
from bel.types.object import from_list
from bel.types.symbol import Symbol

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")


# -----------------------------------------------------
# set
# -----------------------------------------------------

def test_set_binds_and_returns_nil(interp):
    assert interp.eval("(set a b)") == Nil
    assert interp.eval("a") == b


@pytest.mark.parametrize(
    "source, bindings",
    [
        ("(set a b c d e f)", {"a": "b", "c": "d", "e": "f"}),
        ("(set a b c d e)", {"a": "b", "c": "d", "e": "nil"}),
        ("(set a)", {"a": "nil"}),
    ]
)
def test_set_multiple(interp, source, bindings):
    assert interp.eval(source) == Nil
    for key, val in bindings.items():
        assert interp.eval(key) == Symbol(val)


def test_set_does_not_evaluate_values(interp):
    assert interp.eval("(set a (x y))") == Nil
    assert interp.get("a") == from_list([Symbol("x"), Symbol("y")])


def test_set_with_no_arguments(interp):
    assert interp.eval("(set)") == Nil


def test_set_key_must_be_a_symbol(interp):
    with pytest.raises(errors.BelTypeMismatch):
        interp.eval("(set (a) b)")


def test_set_writes_globals_even_inside_a_function(interp):
    interp.eval("(def remember (x) (set seen x))")
    interp.eval("(remember 'a)")
    # the value is stored unevaluated
    assert interp.eval("seen") == Symbol("x")


# -----------------------------------------------------
# quote
# -----------------------------------------------------

def test_quote(interp):
    interp.eval("(set a b)")
    assert interp.eval("(quote a)") == a
    assert interp.eval("(quote (x))") == from_list([Symbol("x")])
    assert interp.eval("'(a b)") == from_list([a, b])
    assert interp.eval("`a") == a


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)", "(quote . a)"])
def test_quote_expects_single_element(interp, source):
    with pytest.raises(errors.BelTypeMismatch):
        interp.eval(source)


# -----------------------------------------------------
# if
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(if t 'a 'b)", a),
        ("(if nil 'a 'b)", b),
        ("(if nil 'a)", Nil),
        ("(if nil 'a nil 'b 'c)", c),
        ("(if nil 'a t 'b 'c)", b),
        ("(if (id nil nil) 'a 'b)", a),
        ("(if 'x 'a)", a),
        ("(if)", Nil),
        ("(if 'only)", Symbol("only")),
    ]
)
def test_if(interp, source, expected):
    assert interp.eval(source) == expected


def test_if_short_circuits(interp):
    # unbound symbols in unchosen positions are never evaluated
    assert interp.eval("(if t 'a unbound-else)") == a
    assert interp.eval("(if nil unbound-then 'b)") == b
    assert interp.eval("(if t 'a unbound-test unbound-then)") == a


def test_if_evaluates_predicates_in_order(interp):
    with pytest.raises(errors.BelUnboundSymbol):
        interp.eval("(if nil 'a unbound-test 'b 'c)")


# -----------------------------------------------------
# type
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source, expected",
    [
        ("(type 'a)", "symbol"),
        ("(type t)", "symbol"),
        ("(type '(a))", "pair"),
        ("(type (join 'a 'b))", "pair"),
    ]
)
def test_type(interp, source, expected):
    assert interp.eval(source) == Symbol(expected)


def test_type_evaluates_its_argument(interp):
    interp.eval("(set a (x))")
    assert interp.eval("(type a)") == Symbol("pair")


@pytest.mark.parametrize("source", ["(type)", "(type 'a 'b)"])
def test_type_expects_one_argument(interp, source):
    with pytest.raises(errors.BelArityMismatch):
        interp.eval(source)


def test_type_of_char_is_not_evaluable(interp):
    with pytest.raises(errors.BelNotImplemented):
        interp.eval("(type \\a)")


# -----------------------------------------------------
# def / mac
# -----------------------------------------------------

def test_def_stores_closure_literal(interp):
    assert interp.eval("(def xnox (x) (id x nil))") == Nil
    assert interp.get("xnox") == parse("(lit clo nil (x) (id x nil))")
    assert "xnox" in interp.function_names()


@pytest.mark.parametrize("source", ["(def f (x))", "(def f (x) x x)", "(def)", "(mac m (x))"])
def test_def_and_mac_require_three_arguments(interp, source):
    with pytest.raises(errors.BelArityMismatch):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(def (f) (x) x)", "(mac (m) (x) x)"])
def test_def_and_mac_name_must_be_symbol(interp, source):
    with pytest.raises(errors.BelTypeMismatch):
        interp.eval(source)


def test_mac_stores_macro_literal(interp):
    assert interp.eval("(mac m (x) x)") == Nil
    assert interp.get("m") == parse("(lit mac (lit clo nil (x) x))")
    assert interp.macro_names() == ["m"]
    assert "m" not in interp.function_names()


def test_macro_application_is_not_implemented(interp):
    interp.eval("(mac m (x) x)")
    with pytest.raises(errors.BelNotImplemented):
        interp.eval("(m a)")


def test_macro_arguments_are_not_evaluated(interp):
    # an unbound argument would fail if it were evaluated first
    interp.eval("(mac m (x) x)")
    with pytest.raises(errors.BelNotImplemented):
        interp.eval("(m unbound)")


def test_redefining_switches_between_function_and_macro(interp):
    interp.eval("(mac m (x) x)")
    interp.eval("(def m (x) x)")
    assert interp.eval("(m 'a)") == a
    assert interp.macro_names() == []
    interp.eval("(mac m (x) x)")
    assert "m" not in interp.function_names()
    with pytest.raises(errors.BelNotImplemented):
        interp.eval("(m 'a)")
