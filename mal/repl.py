"""Line-based read-eval-print loop and console entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

from mal.config import get_log_level, get_prompt
from mal.errors import MalError
from mal.interpreter import Interpreter
from mal.printer import escape_string
from mal.reader.parser import lex

logger = logging.getLogger(__name__)


def repl(
    interp: Interpreter,
    input_fn: Callable[[str], str] = input,
    output: Optional[TextIO] = None,
    prompt: Optional[str] = None,
) -> None:
    """Read one line at a time until EOF, printing each result.

    A failing line is reported and the loop carries on with the
    environment as it was before that line.
    """
    output = output or sys.stdout
    prompt = get_prompt() if prompt is None else prompt
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            break
        if next(lex(line), None) is None:
            continue  # blank or comment-only
        try:
            print(interp.rep(line), file=output)
        except MalError as ex:
            logger.debug("Error evaluating %r", line, exc_info=True)
            print(f"Error: {ex}", file=output)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='mal interpreter.')
    parser.add_argument('script', nargs='?', metavar='PATH',
        help='Source file to load instead of starting the interactive loop.')
    parser.add_argument('--no-prelude', action='store_true',
        help='Do not load the prelude library on start-up.')
    parser.add_argument('--log-level', default=get_log_level(),
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: %(default)s, or MAL_LOG_LEVEL).')
    opts = parser.parse_args(argv)

    logging.basicConfig(level=opts.log_level, format='%(levelname)s %(name)s: %(message)s')

    interp = Interpreter(prelude=None if opts.no_prelude else 'auto')
    if opts.script:
        try:
            interp.eval(f'(load-file {escape_string(opts.script)})')
        except MalError as ex:
            logger.error("Failed to load %s: %s", opts.script, ex)
            return 1
        return 0

    repl(interp)
    return 0


if __name__ == '__main__':
    sys.exit(main())
