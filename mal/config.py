from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (mal package directory)
_MAL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIRS = [_MAL_DIR / 'prelude']
_DEFAULT_PROMPT = 'user> '
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_REPL_HOST = '127.0.0.1'
_DEFAULT_REPL_PORT = 8765


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_files() -> List[Path]:
    """Prelude sources in load order; directories contribute their *.mal files, sorted."""
    files: List[Path] = []
    for p in paths_from_env('MAL_PRELUDE_PATH', _DEFAULT_PRELUDE_DIRS):
        if p.is_dir():
            files.extend(sorted(p.glob('*.mal')))
        else:
            files.append(p)
    return files


def get_prompt() -> str:
    return os.environ.get('MAL_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('MAL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('MAL_REPL_HOST', _DEFAULT_REPL_HOST)
    port = int(os.environ.get('MAL_REPL_PORT', _DEFAULT_REPL_PORT))
    return host, port
