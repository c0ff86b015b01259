# minishell

Building blocks of a small POSIX-style shell, usable as a library: a minimal
formatter, a chunked line reader, classic string helpers, an environment store
and a set of builtin commands. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `minishell.printf`

A formatter that understands `%c %s %d %i %u %x %X %p` and `%%`.

- `format_message(fmt, *args)` returns the formatted text. `%d`/`%i` wrap the
  value to a signed 32-bit integer, `%u`/`%x`/`%X` to an unsigned 32-bit one,
  `%s` of `None` gives `(null)`, and `%p` of a null address gives `0x0`. A `%`
  followed by an unknown character produces nothing; a trailing lone `%` is kept.
  Too few arguments raise `ValueError`.
- `printf(fmt, *args, stream=None)` writes the text to `stream` (standard output
  by default) and returns the number of characters written.
- `format_hex(n, uppercase=False)` and `format_pointer(address)` render numbers
  in hexadecimal.

### `minishell.linereader`

`LineReader(source, buffer_size=42)` reads from a file descriptor or a binary or
text file-like object in chunks of `buffer_size`. `read_line()` returns the next
line with its newline (the last line may lack one), or `None` at the end; the
reader can also be iterated. A negative descriptor or a non-positive buffer size
raises `ValueError`.

### `minishell.libft`

String and character helpers with the classic C semantics: `atoi`, `itoa`,
`split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strcmp`, and the character
tests `isalpha`, `isalnum`, `isprint`, `isascii` (taking a one-character string
or a character code).

### `minishell.environment`

`Environment(entries=None)` keeps `NAME=value` entries and bare exported names in
insertion order. It offers `get`, `set`, `unset`, `copy`, `env_lines()` (entries
with a value, as `env` prints them) and `export_lines()` (all entries sorted and
shown as `declare -x NAME="value"`), plus an `entries` property, iteration,
`len()` and `in`. Helper functions: `is_valid_identifier`, `make_entry`,
`matches_name` and `format_export_entry`.

### `minishell.builtins`

The builtins as functions over a `ShellState` (an `Environment` and a
`return_value`). Each takes the full argument list, command name included, and
returns its exit status; output streams default to standard output and
standard error.

- `builtin_echo(args, out=None)` – leading `-n`, `-nn`, … flags drop the newline.
- `builtin_pwd(args, out=None, err=None)`
- `builtin_env(args, shell, out=None)`
- `builtin_export(args, shell, out=None, err=None)` – lists sorted entries with no
  arguments, otherwise sets each `NAME` or `NAME=value`.
- `builtin_unset(args, shell, err=None)`
- `builtin_exit(args, shell, err=None)` – raises `ShellExit` whose `code` is the
  numeric argument modulo 256 (0 with no argument, 255 for a non-numeric one);
  with too many arguments it reports the error and returns 1.

## Example

```python
import io
from minishell.builtins import ShellState, builtin_export, builtin_env
from minishell.environment import Environment

shell = ShellState(Environment(["HOME=/home/user"]))
out, err = io.StringIO(), io.StringIO()
builtin_export(["export", "GREETING=hello"], shell, out, err)
builtin_env(["env"], shell, out)
print(out.getvalue())
```

## What it does not do

This package is a library, not a runnable shell. It installs no command, and it
has no prompt or interactive loop, no command-line parsing, quoting or variable
expansion, no pipes, redirections or here-documents, no `cd`, and it does not
run external programs.