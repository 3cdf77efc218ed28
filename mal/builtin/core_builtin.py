"""Built-in functions for the mal runtime environment.

This module defines arithmetic, comparison, list processing, predicates,
string and reader helpers, and the registration utility that installs them
into a root environment. Every built-in takes the evaluated argument list.
"""
from __future__ import annotations

from pathlib import Path

from mal import Expression
from mal.errors import MalArityError, MalEvaluationError, MalTypeError
from mal.printer import render
from mal.reader.parser import parse
from mal.types.atom import Atom
from mal.types.environment import Environment
from mal.types.function import Function
from mal.types.nil import Nil, NilType
from mal.types.number import divide, is_number, wrap
from mal.types.symbol import Symbol


def _expect_arity(name: str, args: list[Expression], count: int) -> None:
    if len(args) != count:
        raise MalArityError(f"{name} requires exactly {count} argument(s), got {len(args)}")


def _numbers(name: str, args: list[Expression]) -> list[int]:
    for a in args:
        if not is_number(a):
            raise MalTypeError(f"All arguments to {name} must be numbers, got {render(a, True)}")
    return args


def _sequence(name: str, value: Expression) -> list[Expression]:
    """Lists pass through; nil counts as the empty list."""
    if value is Nil:
        return []
    if not isinstance(value, list):
        raise MalTypeError(f"{name} expects a list, got {render(value, True)}")
    return value


def _string(name: str, value: Expression) -> str:
    if not isinstance(value, str):
        raise MalTypeError(f"{name} expects a string, got {render(value, True)}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Expression]) -> int:
    """Sum of all arguments."""
    return wrap(sum(_numbers("+", args)))


def sub(args: list[Expression]) -> int:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise MalArityError("- requires at least 1 argument")
    first, *rest = _numbers("-", args)
    if not rest:
        return wrap(-first)
    return wrap(first - sum(rest))


def mul(args: list[Expression]) -> int:
    result = 1
    for x in _numbers("*", args):
        result *= x
    return wrap(result)


def div(args: list[Expression]) -> int:
    """Divide left to right, rounding each quotient half-to-even."""
    if len(args) < 2:
        raise MalArityError("/ requires at least 2 arguments")
    first, *rest = _numbers("/", args)
    result = first
    for x in rest:
        result = divide(result, x)
    return result


# -------------------------------
# Equality and comparison
# -------------------------------
def is_equal(a: Expression, b: Expression) -> bool:
    """Structural equality; booleans never equal numbers, atoms compare by identity."""
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (Atom, Function)) or isinstance(b, (Atom, Function)):
        return a is b
    if type(a) is not type(b):
        return False
    return a == b


def equals(args: list[Expression]) -> bool:
    """True if all adjacent arguments are equal."""
    return all(is_equal(a, b) for a, b in zip(args, args[1:]))


def lt(args: list[Expression]) -> bool:
    args = _numbers("<", args)
    return all(a < b for a, b in zip(args, args[1:]))


def lte(args: list[Expression]) -> bool:
    args = _numbers("<=", args)
    return all(a <= b for a, b in zip(args, args[1:]))


def gt(args: list[Expression]) -> bool:
    args = _numbers(">", args)
    return all(a > b for a, b in zip(args, args[1:]))


def gte(args: list[Expression]) -> bool:
    args = _numbers(">=", args)
    return all(a >= b for a, b in zip(args, args[1:]))


# -------------------------------
# List operations
# -------------------------------
def list_builtin(args: list[Expression]) -> list[Expression]:
    return list(args)


def is_list(args: list[Expression]) -> bool:
    _expect_arity("list?", args, 1)
    return isinstance(args[0], list)


def is_empty(args: list[Expression]) -> bool:
    _expect_arity("empty?", args, 1)
    return not _sequence("empty?", args[0])


def count(args: list[Expression]) -> int:
    _expect_arity("count", args, 1)
    return len(_sequence("count", args[0]))


def cons(args: list[Expression]) -> list[Expression]:
    _expect_arity("cons", args, 2)
    head, tail = args
    return [head, *_sequence("cons", tail)]


def concat(args: list[Expression]) -> list[Expression]:
    result: list[Expression] = []
    for a in args:
        result.extend(_sequence("concat", a))
    return result


def first(args: list[Expression]) -> Expression:
    _expect_arity("first", args, 1)
    seq = _sequence("first", args[0])
    return seq[0] if seq else Nil


def rest(args: list[Expression]) -> list[Expression]:
    _expect_arity("rest", args, 1)
    return list(_sequence("rest", args[0])[1:])


def nth(args: list[Expression]) -> Expression:
    _expect_arity("nth", args, 2)
    seq = _sequence("nth", args[0])
    index = args[1]
    if not is_number(index):
        raise MalTypeError("nth index must be a number")
    if not 0 <= index < len(seq):
        raise MalTypeError(f"nth index {index} out of range")
    return seq[index]


# -------------------------------
# Predicates and introspection
# -------------------------------
def type_name(value: Expression) -> str:
    match value:
        case bool():
            return "boolean"
        case int():
            return "number"
        case NilType():
            return "nil"
        case Symbol():
            return "symbol"
        case str():
            return "string"
        case list():
            return "list"
        case Function() if value.is_macro:
            return "macro"
        case Function():
            return "function"
        case Atom():
            return "atom"
        case _:
            raise MalTypeError(f"Unknown value type {type(value).__name__}")


def _predicate(name: str, *type_names: str):
    def check(args: list[Expression]) -> bool:
        _expect_arity(name, args, 1)
        return type_name(args[0]) in type_names
    return check


def is_true(args: list[Expression]) -> bool:
    _expect_arity("true?", args, 1)
    return args[0] is True


def is_false(args: list[Expression]) -> bool:
    _expect_arity("false?", args, 1)
    return args[0] is False


def type_builtin(args: list[Expression]) -> str:
    _expect_arity("type", args, 1)
    return type_name(args[0])


def symbol(args: list[Expression]) -> Symbol:
    _expect_arity("symbol", args, 1)
    return Symbol(_string("symbol", args[0]))


# -------------------------------
# Strings and output
# -------------------------------
def str_builtin(args: list[Expression]) -> str:
    """Concatenate the raw renderings of all arguments."""
    return "".join(render(a) for a in args)


def pr_str(args: list[Expression]) -> str:
    return " ".join(render(a, readably=True) for a in args)


def prn(args: list[Expression]) -> NilType:
    print(pr_str(args))
    return Nil


def println(args: list[Expression]) -> NilType:
    print(" ".join(render(a) for a in args))
    return Nil


# -------------------------------
# Reader and files
# -------------------------------
def read_string(args: list[Expression]) -> Expression:
    _expect_arity("read-string", args, 1)
    return parse(_string("read-string", args[0]))


def _read_text(name: str, path: Expression) -> str:
    try:
        return Path(_string(name, path)).read_text(encoding="utf-8")
    except OSError as ex:
        raise MalEvaluationError(f"{name}: cannot read {path}: {ex.strerror}") from ex
    except ValueError as ex:
        raise MalEvaluationError(f"{name}: invalid path {path!r}: {ex}") from ex


def slurp(args: list[Expression]) -> str:
    """Whole text of a file."""
    _expect_arity("slurp", args, 1)
    return _read_text("slurp", args[0])


def read_lines(args: list[Expression]) -> list[Expression]:
    """A file's lines as a list of strings, without line terminators."""
    _expect_arity("read-lines", args, 1)
    return _read_text("read-lines", args[0]).splitlines()


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "list": list_builtin,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
    "cons": cons,
    "concat": concat,
    "first": first,
    "rest": rest,
    "nth": nth,
    "nil?": _predicate("nil?", "nil"),
    "true?": is_true,
    "false?": is_false,
    "symbol?": _predicate("symbol?", "symbol"),
    "string?": _predicate("string?", "string"),
    "number?": _predicate("number?", "number"),
    "fn?": _predicate("fn?", "function"),
    "macro?": _predicate("macro?", "macro"),
    "symbol": symbol,
    "type": type_builtin,
    "str": str_builtin,
    "pr-str": pr_str,
    "prn": prn,
    "println": println,
    "read-string": read_string,
    "slurp": slurp,
    "read-lines": read_lines,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): Function(fn, name=name) for name, fn in BUILTINS.items()})
