import sys
from sys import stderr
from typing import Any, NoReturn


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=stderr)


def fatal(code: int, format: str, *args: Any) -> NoReturn:
    printf_err(format, *args)
    printf_err("\n")
    sys.exit(code)
