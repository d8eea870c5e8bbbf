from __future__ import annotations
import sys
import traceback
from typing import Optional, Protocol

from ..errors import ConversionError


class MainFunc(Protocol):
    def __call__(self, argv: Optional[list[str]] = None) -> int: ...


def _wants_traceback(argv: list[str]) -> bool:
    # cheap peek; main() does the real parsing
    verbosity = sum(1 for a in argv if a in ("-v", "--verbose")) + (2 if "-vv" in argv else 0)
    return "--debug" in argv or verbosity >= 2


def run_cli(main_func: MainFunc) -> None:
    """
    Call main_func(argv) and turn the outcome into a process exit.

    - return value -> exit code
    - ConversionError -> 'Error (<kind>): ...' on stderr, exit 1
    - any other exception -> 'Error: ...' on stderr, exit 1
    - full traceback only with '--debug' or '-vv'
    """
    argv = sys.argv[1:]

    try:
        code = main_func(argv)
    except SystemExit:
        raise
    except ConversionError as e:
        if _wants_traceback(argv):
            traceback.print_exc()
        print(f"Error ({e.kind.value}): {e.message}", file=sys.stderr)
        raise SystemExit(1)
    except Exception as e:
        if _wants_traceback(argv):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    else:
        raise SystemExit(code)
