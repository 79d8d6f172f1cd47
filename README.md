# pipex

`pipex` runs two commands joined by a pipe. The first command reads its
standard input from a file. The output of the second command goes to another
file. It behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

To run the tests, install the test extra and run pytest:

```sh
pip install ".[test]"
pytest
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The command takes exactly four arguments:

- `infile` is opened for reading. If it cannot be opened, the command prints
  `failed to open infile` to standard error and exits with status 1.
- `outfile` is created or truncated with mode `0644`. If it cannot be opened,
  the command prints `failed to open outfile` and exits with status 1.
- Each command is split on spaces, and empty pieces are dropped. Quoting is
  not supported: `"grep a b"` becomes `grep`, `a` and `b`.
- A command name that starts with `/` or `./` is used as given. Any other
  name is looked up in the directories of `PATH`. The first match that can be
  executed is used.

With the wrong number of arguments, the command prints
`usage: pipex infile cmd cmd outfile` to standard error and exits with
status 1. If a command cannot be found or started, it prints
`command not found` to standard error. The other command still runs. The
command waits for both sides of the pipe, then exits with status 0. It does
not pass on the exit statuses of the commands.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

## Library use

`pipex.cli.run_pipeline` runs the pipeline and returns the exit statuses of
both commands. A command that could not be found or started counts as
status 1. The `env` argument defaults to the process environment. It is used
for the `PATH` lookup and is passed on to the commands. If the files or the
pipe cannot be set up, `PipexError` is raised.

```python
from pipex.cli import run_pipeline, PipexError

try:
    first_status, second_status = run_pipeline(
        "input.txt", "grep error", "wc -l", "count.txt"
    )
except PipexError as exc:
    print(exc)
```

`pipex.cli.main(argv)` is the function behind the command. It returns the
exit status instead of exiting.

To resolve an executable the same way the command does, use
`pipex.pathfind`:

```python
from pipex.pathfind import find_command, search_dirs, CommandNotFound

print(search_dirs({"PATH": "/usr/bin::/bin"}))   # ['/usr/bin', '/bin']
try:
    print(find_command("ls", {"PATH": "/usr/bin:/bin"}))
except CommandNotFound as exc:
    print(exc)                                   # command not found
```

`CommandNotFound` is raised in three cases:

- the command is empty;
- the environment has no `PATH`;
- no directory in `PATH` holds an executable of that name.

## Other helpers

- `pipex.textutils` provides these functions:
  - `split_words`: splits on one separator character and drops empty pieces.
  - `parse_int`: parses a leading integer. It skips leading whitespace,
    accepts one optional sign, and returns 0 when there are no digits.
  - `int_to_str`, `trim`, `substring`, `find_within` and `compare_prefix`.
  - The ASCII character tests `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`
    and `is_print`, and the case changers `to_upper` and `to_lower`. These
    accept either a one-character string or an integer code.
- `pipex.printf` provides `format_string(fmt, *args)` and
  `printf(fmt, *args, stream=None)`. They handle the conversions
  `%c %s %p %d %i %u %x %X`. Any other conversion, `%%` included, produces
  a single `%`. `printf` writes to standard output by default and returns
  the number of characters written.
- `pipex.lines.LineReader(fd, buffer_size=42)` reads a raw file descriptor
  one line at a time. Each line is returned as `bytes` with its newline
  included. `read_line()` returns `None` at end of input, and the reader can
  be iterated over:

```python
import os
import sys
from pipex.lines import LineReader

fd = os.open("input.txt", os.O_RDONLY)
for line in LineReader(fd):
    sys.stdout.buffer.write(line)
os.close(fd)
```