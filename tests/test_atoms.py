import pytest

from mal.builtin import atom_builtin
from mal.errors import MalArityError, MalNotCallable, MalTypeError
from mal.types.atom import Atom
from mal.types.function import Function


def test_atom_create_and_deref(run):
    a = run("(atom 5)")
    assert isinstance(a, Atom)
    assert a.deref() == 5
    run("(def! a (atom 5))")
    assert run("(deref a)") == 5
    assert run("@a") == 5


def test_reset_returns_new_value(run):
    run("(def! a (atom 1))")
    assert run('(reset! a "two")') == "two"
    assert run("@a") == "two"


def test_swap_increments(run):
    run("(def! a (atom 5))")
    assert run("(swap! a (fn* (x) (+ x 1)))") == 6
    assert run("@a") == 6


def test_swap_with_extra_arguments(run):
    run("(def! a (atom 10))")
    assert run("(swap! a - 3 2)") == 5
    assert run("(swap! a list 1)") == [5, 1]


def test_mutation_visible_through_every_reference(run):
    run("(def! a (atom 0))")
    run("(def! holder (list a a))")
    run("(swap! (first holder) + 1)")
    assert run("@(nth holder 1)") == 1
    assert run("@a") == 1


def test_atoms_compare_by_identity(run):
    assert run("(let* (a (atom 1)) (= a a))") is True
    assert run("(= (atom 1) (atom 1))") is False


def test_atom_predicate(run):
    assert run("(atom? (atom nil))") is True
    assert run("(atom? 1)") is False


def test_atom_errors(run):
    with pytest.raises(MalTypeError):
        run("(deref 1)")
    with pytest.raises(MalTypeError):
        run("(reset! 1 2)")
    with pytest.raises(MalNotCallable):
        run("(swap! (atom 1) 2)")
    with pytest.raises(MalArityError):
        run("(swap! (atom 1))")
    with pytest.raises(MalArityError):
        run("(atom)")


def test_atom_cell_directly():
    cell = Atom([1])
    assert cell.swap(Function(lambda args: args[0] + args[1:]), [2, 3]) == [1, 2, 3]
    assert cell.deref() == [1, 2, 3]
    assert cell.reset(0) == 0
    assert cell.value == 0


def test_swap_builtin_calls_native_function():
    cell = Atom(2)
    double = Function(lambda args: args[0] * 2)
    assert atom_builtin.swap([cell, double]) == 4
    assert cell.deref() == 4
