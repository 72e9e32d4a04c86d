import pytest

from ember.errors import EmberTypeError
from ember.types.atom import Atom


def test_atom_mutation(interp):
    interp.eval("(def! a (atom 5))")
    assert interp.eval("(atom? a)") is True
    assert interp.eval("(deref a)") == 5
    swapped = interp.eval("(swap! a (fun* (x) (+ x 1)))")
    assert swapped is interp.eval("a")
    assert interp.eval("(deref a)") == 6
    assert interp.eval("(reset! a 0)") == 0
    assert interp.eval("(deref a)") == 0


def test_atom_predicate(interp):
    assert interp.eval("(atom? (atom nil))") is True
    assert interp.eval("(atom? 5)") is False
    assert interp.eval("(atom? (list))") is False


def test_swap_with_builtin(interp):
    interp.eval("(def! b (atom (list 1 2 3)))")
    interp.eval("(swap! b count)")
    assert interp.eval("(deref b)") == 3


def test_swap_function_may_read_the_same_atom(interp):
    interp.eval("(def! a (atom 6))")
    interp.eval("(swap! a (fun* (x) (+ x (deref a))))")
    assert interp.eval("(deref a)") == 12


def test_atoms_are_shared_by_closures(interp):
    interp.eval("""
    (def! make-counter
      (fun* ()
        (let* (c (atom 0))
          (fun* () (deref (swap! c (fun* (n) (+ n 1))))))))
    """)
    interp.eval("(def! next-a (make-counter))")
    interp.eval("(def! next-b (make-counter))")
    assert interp.eval("(next-a)") == 1
    assert interp.eval("(next-a)") == 2
    assert interp.eval("(next-b)") == 1


def test_atom_equality_is_identity(interp):
    interp.eval("(def! a (atom 1))")
    assert interp.eval("(= a a)") is True
    assert interp.eval("(= (atom 1) (atom 1))") is False


@pytest.mark.parametrize(
    "source,position,expected",
    [
        ("(deref 5)", 1, "Atom"),
        ("(reset! 5 1)", 1, "Atom"),
        ("(swap! 5 count)", 1, "Atom"),
        ("(swap! (atom 1) 5)", 2, "Function"),
    ]
)
def test_atom_type_mismatch(interp, source, position, expected):
    with pytest.raises(EmberTypeError) as exc:
        interp.eval(source)
    assert exc.value.position == position
    assert exc.value.expected == expected


def test_atom_cell_api():
    cell = Atom(1)
    assert cell.deref() == 1
    assert cell.reset(2) == 2
    assert cell.swap(lambda v: v * 10) is cell
    assert cell.deref() == 20
    assert repr(cell) == "(atom 20)"
