from __future__ import annotations
import logging
from typing import Protocol

from mal.config import get_prelude_files

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate every configured prelude file, in order.

    Raises FileNotFoundError if a configured prelude file does not exist.
    """
    for path in get_prelude_files():
        if not path.is_file():
            raise FileNotFoundError(f"Cannot find prelude file '{path}'")
        logger.info("Loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
