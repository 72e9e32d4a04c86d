import pytest

from ember import errors
from ember.evaluation.evaluator import evaluate, call_function
from ember.types.atom import Atom
from ember.types.builtin import Builtin
from ember.types.closure import Closure
from ember.types.nil import Nil
from ember.types.symbol import Symbol

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate("hello", env) == "hello"
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False
    assert evaluate(Nil, env) is Nil


def test_functions_and_atoms_are_self_evaluating(env):
    closure = Closure([Symbol("x")], Symbol("x"), env)
    cell = Atom(3)
    assert evaluate(closure, env) is closure
    assert evaluate(cell, env) is cell
    plus = env.lookup(Symbol("+"))
    assert evaluate(plus, env) is plus


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42
    plus = evaluate(Symbol("+"), env)
    assert isinstance(plus, Builtin)
    assert plus.name == "+"


def test_unresolved_symbol_carries_name(env):
    with pytest.raises(errors.EmberUnboundSymbol) as exc:
        evaluate(Symbol("zzz"), env)
    assert exc.value.name == "zzz"


def test_empty_list_is_not_callable(env):
    with pytest.raises(errors.EmberEmptyListError):
        evaluate([], env)
    # it is a kind of call error
    with pytest.raises(errors.EmberCallError):
        evaluate([Symbol("list"), []], env)


@pytest.mark.parametrize("head", [1, "f", True, Nil, [Symbol("list"), 1]])
def test_call_of_non_function(env, head):
    with pytest.raises(errors.EmberCallError):
        evaluate([head, 2], env)


def test_simple_expression(env):
    assert evaluate([Symbol("+"), 1, 2], env) == 3
    assert evaluate([Symbol("+"), [Symbol("*"), 2, 3], 4], env) == 10


def test_head_position_is_evaluated(interp):
    assert interp.eval("((fun* (x) (* x x)) 5)") == 25
    assert interp.eval("(((fun* () +)) 1 2)") == 3


def test_arguments_are_evaluated_left_to_right(interp):
    interp.eval("(def! trace (atom ''))")
    interp.eval("(def! note (fun* (s) (do (swap! trace (fun* (t) (str t s))) s)))")
    assert interp.eval("(list (note 'a') (note 'b') (note 'c'))") == ["a", "b", "c"]
    assert interp.eval("(deref trace)") == "abc"


def test_special_forms_take_priority_over_bindings(interp):
    interp.eval("(def! if (fun* (a b c) 99))")
    assert interp.eval("(if true 1 2)") == 1


def test_closure_surplus_arguments_are_dropped(interp):
    assert interp.eval("((fun* (a b) (+ a b)) 1 2 3)") == 3


def test_closure_missing_argument_is_unbound(interp):
    # no arity check: the parameter simply stays unbound
    assert interp.eval("((fun* (a b) a) 1)") == 1
    with pytest.raises(errors.EmberUnboundSymbol) as exc:
        interp.eval("((fun* (a b) b) 1)")
    assert exc.value.name == "b"


def test_type_mismatch_reporting(interp):
    with pytest.raises(errors.EmberTypeError) as exc:
        interp.eval("(+ 1 'x')")
    err = exc.value
    assert err.fn_name == "+"
    assert err.position == 2
    assert err.expected == "Integer"
    assert err.actual == "x"
    assert str(err) == "Type mismatch: Expected Integer at argument position 2 of + but got 'x'"


def test_failed_form_keeps_earlier_definitions(interp):
    interp.eval("(def! a 1)")
    with pytest.raises(errors.EmberTypeError):
        interp.eval("(def! a (+ a 'x'))")
    assert interp.eval("a") == 1


def test_call_function_runs_closure_to_completion(env):
    square = evaluate([Symbol("fun*"), [Symbol("x")], [Symbol("*"), Symbol("x"), Symbol("x")]], env)
    assert call_function(square, [7]) == 49
    assert call_function(env.lookup(Symbol("list")), [1, 2]) == [1, 2]
