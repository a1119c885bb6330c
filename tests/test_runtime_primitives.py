import pytest

from bel import errors
from bel.builtins import PRIMITIVES, get_primitive, prim_car, prim_cdr, prim_id, prim_join
from bel.reader.parser import parse
from bel.types.nil import Nil, T
from bel.types.object import from_list
from bel.types.pair import Pair
from bel.types.symbol import Symbol

a, b = Symbol("a"), Symbol("b")


def test_minimum_primitive_set_is_registered():
    assert {"id", "car", "cdr"} <= set(PRIMITIVES)


@pytest.mark.parametrize(
    "args, expected",
    [
        (from_list([a, a]), T),
        (from_list([a, b]), Nil),
        (from_list([Nil, Nil]), T),
        (from_list([a]), Nil),
        (Nil, T),
        (from_list([from_list([a]), from_list([a])]), Nil),
    ]
)
def test_id(args, expected):
    assert prim_id(args) == expected


def test_id_on_parsed_arguments():
    assert prim_id(parse("(a a)")) == T
    assert prim_id(parse("(a b)")) == Nil


def test_car_and_cdr():
    lst = from_list([a, b])
    assert prim_car(from_list([lst])) == a
    assert prim_cdr(from_list([lst])) == from_list([b])
    assert prim_car(from_list([Nil])) == Nil
    assert prim_cdr(from_list([Nil])) == Nil
    assert prim_cdr(from_list([Pair(a, b)])) == b


@pytest.mark.parametrize("prim", [prim_car, prim_cdr])
def test_car_and_cdr_reject_atoms(prim):
    with pytest.raises(errors.BelTypeMismatch):
        prim(from_list([a]))


def test_join():
    assert prim_join(from_list([a, b])) == Pair(a, b)
    assert prim_join(from_list([a])) == from_list([a])


@pytest.mark.parametrize(
    "prim, args",
    [
        (prim_id, from_list([a, a, a])),
        (prim_car, from_list([a, b])),
        (prim_join, from_list([a, b, a])),
    ]
)
def test_surplus_arguments_fail(prim, args):
    with pytest.raises(errors.BelArityMismatch):
        prim(args)


def test_primitives_need_proper_argument_lists():
    with pytest.raises(errors.BelMalformedList):
        prim_id(Pair(a, b))


def test_get_primitive():
    assert get_primitive("car") is prim_car
    with pytest.raises(errors.BelUnknownPrimitive):
        get_primitive("nope")


def test_primitives_through_the_evaluator(interp):
    assert interp.eval("(car '(a b))") == a
    assert interp.eval("(cdr '(a b))") == from_list([b])
    assert interp.eval("(join 'a '(b))") == from_list([a, b])
    assert interp.eval("(id 'a 'a)") == T


def test_primitives_do_not_touch_globals(interp):
    before = dict(interp.globals.vars)
    interp.eval("(join (car '(a)) (cdr '(b c)))")
    assert interp.globals.vars == before


def test_custom_primitive_registry():
    from bel.interpreter import Interpreter

    interp = Interpreter(primitives={"first": prim_car})
    assert interp.primitive_names() == ["first"]
    assert interp.eval("(first '(a b))") == a
    with pytest.raises(errors.BelUnboundSymbol):
        interp.eval("(car '(a b))")
