import pytest

from ember.errors import EmberArithmeticError, EmberArityError, EmberTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(- 10 3)", 7),
        ("(* 6 7)", 42),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ -7 -2)", 3),
        ("(+ -1 -5)", -6),
        ("(- -10 -5)", -5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 (* 2 (+ 3 (- 10 6))))", 15),
        ("(+ 9223372036854775806 1)", 9223372036854775807),
    ]
)
def test_arithmetic(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize(
    "source,fn_name,position",
    [
        ("(+ 1 'x')", "+", 2),
        ("(- 'a' 1)", "-", 1),
        ("(* 1 true)", "*", 2),
        ("(/ nil 1)", "/", 1),
        ("(+ (list) 1)", "+", 1),
    ]
)
def test_arithmetic_type_mismatch(interp, source, fn_name, position):
    with pytest.raises(EmberTypeError) as exc:
        interp.eval(source)
    assert exc.value.fn_name == fn_name
    assert exc.value.position == position
    assert exc.value.expected == "Integer"


@pytest.mark.parametrize("source", ["(+ 1)", "(- 1 2 3)", "(*)", "(/ 1)"])
def test_arithmetic_requires_two_arguments(interp, source):
    with pytest.raises(EmberArityError):
        interp.eval(source)


@pytest.mark.parametrize(
    "source",
    [
        "(/ 1 0)",
        "(+ 9223372036854775807 1)",
        "(- -9223372036854775808 1)",
        "(* 9223372036854775807 2)",
        "(/ -9223372036854775808 -1)",
    ]
)
def test_arithmetic_errors(interp, source):
    with pytest.raises(EmberArithmeticError):
        interp.eval(source)
