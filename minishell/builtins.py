"""Built-in commands: echo, pwd, env, export, unset and exit.

Each command takes the full argument list, the command name included.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

from minishell.environment import Environment, is_valid_identifier
from minishell.libft import atoi


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``code``."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class ShellState:
    """State the built-ins read and change."""

    env: Environment = field(default_factory=Environment)
    return_value: int = 0


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def _is_n_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"n"}


def builtin_echo(args: Sequence[str], out: Optional[TextIO] = None) -> int:
    """Print the arguments separated by spaces; leading ``-n`` flags drop the newline."""
    words = list(args[1:])
    newline = True
    while words and _is_n_flag(words[0]):
        newline = False
        words.pop(0)
    text = " ".join(words)
    if newline:
        text += "\n"
    _out(out).write(text)
    return 0


def builtin_pwd(
    args: Sequence[str],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _err(err).write(f"pwd: {exc.strerror or exc}\n")
        return 1
    _out(out).write(f"{cwd}\n")
    return 0


def builtin_env(
    args: Sequence[str], shell: ShellState, out: Optional[TextIO] = None
) -> int:
    """Print every environment entry that has a value."""
    stream = _out(out)
    for line in shell.env.env_lines():
        stream.write(f"{line}\n")
    return 0


def _export_one(
    arg: str, shell: ShellState, out: TextIO, err: TextIO
) -> bool:
    name, sep, value = arg.partition("=")
    if sep:
        if is_valid_identifier(name):
            shell.env.set(name, value)
            return True
        err.write(f"bash: export: `{arg}': not a valid identifier\n")
        shell.return_value = 1
        return False
    if is_valid_identifier(arg):
        shell.env.set(arg, None)
        return True
    out.write(f"minishell: export: `{arg}': not a valid identifier\n")
    return False


def builtin_export(
    args: Sequence[str],
    shell: ShellState,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Set variables, or list them sorted when given no arguments."""
    stream = _out(out)
    if len(args) < 2:
        for line in shell.env.export_lines():
            stream.write(f"{line}\n")
        return 0
    error_stream = _err(err)
    status = 0
    for arg in args[1:]:
        if not _export_one(arg, shell, stream, error_stream):
            status = 1
    return status


def builtin_unset(
    args: Sequence[str], shell: ShellState, err: Optional[TextIO] = None
) -> int:
    """Remove the named variables; invalid names are reported."""
    stream = _err(err)
    status = 0
    for name in args[1:]:
        if is_valid_identifier(name):
            shell.env.unset(name)
        else:
            stream.write(f"bash: unset: {name}: not a valid identifier\n")
            status = 1
    return status


def _is_numeric(text: str) -> bool:
    digits = text[1:] if text[:1] in ("+", "-") else text
    return bool(digits) and all("0" <= ch <= "9" for ch in digits)


def builtin_exit(
    args: Sequence[str], shell: ShellState, err: Optional[TextIO] = None
) -> int:
    """Raise ``ShellExit``; with too many arguments report and return 1 instead."""
    stream = _err(err)
    if len(args) < 2:
        raise ShellExit(0)
    arg = args[1]
    if not _is_numeric(arg):
        shell.return_value = 255
        stream.write(f"bash: exit: {arg}: numeric argument required\n")
        raise ShellExit(255)
    if len(args) > 2:
        stream.write("bash: exit: too many arguments\n")
        shell.return_value = 1
        return 1
    raise ShellExit(atoi(arg) & 0xFF)