from __future__ import annotations
import logging
from typing import Literal

from mal import Expression
from mal.builtin.atom_builtin import register as register_atoms
from mal.builtin.core_builtin import register
from mal.errors import MalArityError
from mal.evaluation.evaluator import evaluate
from mal.printer import render
from mal.reader.parser import parse, read_all
from mal.types.environment import Environment
from mal.types.function import Function
from mal.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Evaluated on every start-up, before any prelude file
BOOTSTRAP: tuple[str, ...] = (
    "(def! not (fn* (a) (if a false true)))",
)


class Interpreter:
    """
    Orchestrates reading, evaluating and printing mal code.
    Maintains the root Environment across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)
        register_atoms(self.env)
        self.env.define(Symbol("eval"), Function(self._eval_builtin, name="eval"))

        for code in BOOTSTRAP:
            self.eval(code)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from mal.modules.prelude_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def _eval_builtin(self, args: list[Expression]) -> Expression:
        """(eval form) evaluates form in the root environment."""
        if len(args) != 1:
            raise MalArityError("eval requires exactly 1 argument")
        return evaluate(args[0], self.env)

    def eval_prelude(self, code: str) -> None:
        for expr in read_all(code):
            evaluate(expr, self.env)

    def eval(self, code: str) -> Expression:
        """Read the first form in code and evaluate it."""
        logger.debug("Evaluating %r", code)
        return evaluate(parse(code), self.env)

    def rep(self, code: str) -> str:
        return render(self.eval(code), readably=True)
