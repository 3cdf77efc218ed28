"""Built-ins for atoms: atom, atom?, deref, reset!, swap!."""

from __future__ import annotations

from mal import Expression
from mal.errors import MalArityError, MalNotCallable, MalTypeError
from mal.printer import render
from mal.types.atom import Atom
from mal.types.environment import Environment
from mal.types.function import Function
from mal.types.symbol import Symbol


def _atom(name: str, value: Expression) -> Atom:
    if not isinstance(value, Atom):
        raise MalTypeError(f"{name} expects an atom, got {render(value, True)}")
    return value


def atom(args: list[Expression]) -> Atom:
    if len(args) != 1:
        raise MalArityError("atom requires exactly 1 argument")
    return Atom(args[0])


def is_atom(args: list[Expression]) -> bool:
    if len(args) != 1:
        raise MalArityError("atom? requires exactly 1 argument")
    return isinstance(args[0], Atom)


def deref(args: list[Expression]) -> Expression:
    if len(args) != 1:
        raise MalArityError("deref requires exactly 1 argument")
    return _atom("deref", args[0]).deref()


def reset(args: list[Expression]) -> Expression:
    if len(args) != 2:
        raise MalArityError("reset! requires an atom and a value")
    return _atom("reset!", args[0]).reset(args[1])


def swap(args: list[Expression]) -> Expression:
    """(swap! a f x y) stores (f @a x y) in a and returns it."""
    if len(args) < 2:
        raise MalArityError("swap! requires an atom and a function")
    cell, fn, *extra = args
    cell = _atom("swap!", cell)
    if not isinstance(fn, Function):
        raise MalNotCallable(f"swap! expects a function, got {render(fn, True)}")
    return cell.swap(fn, extra)


def register(env: Environment) -> None:
    env.update({
        Symbol("atom"): Function(atom, name="atom"),
        Symbol("atom?"): Function(is_atom, name="atom?"),
        Symbol("deref"): Function(deref, name="deref"),
        Symbol("reset!"): Function(reset, name="reset!"),
        Symbol("swap!"): Function(swap, name="swap!"),
    })
