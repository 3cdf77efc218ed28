# Core type aliases for the mal data model.
# Values are plain Python objects wherever Python has a direct counterpart
# (int, bool, str, list) plus a few dedicated classes (Symbol, Nil, Function,
# Atom). The same representation is used for code (forms) and runtime values.

from typing import Any, Callable

# Any mal value or form
Expression = Any

# Host callable wrapped by a Function: receives the evaluated argument list
NativeFn = Callable[[list], Expression]

# Evaluator function type passed to special forms
EvaluatorFn = Callable[..., Expression]
