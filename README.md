# unixkit

A collection of small, classic Unix command-line tools written in plain
Python, with no dependencies beyond the standard library. Each tool is also
importable as a module, so its building blocks can be reused and tested.

The tools need a POSIX system; the terminal tools (`ukit-showtty`,
`ukit-echostate`, `ukit-setecho`, `ukit-bounce`) need a real terminal.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `ukit-more [FILE...]` | Page through files (or standard input) 24 lines at a time. At the ` more? ` prompt: space shows a page, Enter a line, `q` quits. Replies are read from `/dev/tty`. |
| `ukit-cp SOURCE DEST` | Copy a file in 4096-byte blocks; the destination is created (or truncated) with mode 0644. |
| `ukit-rotate [-l]` | Copy standard input to standard output, mapping `a`→`b`, …, `z`→`a`. With `-l`/`--list`, print each input character and its code instead, stopping at `Q`. |
| `ukit-who [FILE] [-H]` | List logged-in users from the utmp file (default `/var/run/utmp`) with terminal, login time and remote host; `-H`/`--no-host` leaves out the host. |
| `ukit-write LOGNAME` | Send lines from standard input to the terminal of the first login of LOGNAME. `ukit-write -t TTYPATH` writes to the given terminal file instead. |
| `ukit-ls [-l] [DIR...]` | List the entries of the current directory, or of each named one, `.` and `..` included. `-l` gives the long form: mode letters, links, owner, group, size, time, name. |
| `ukit-fileinfo [-s] FILE` | Show a file's mode, link count, owner, group, size and modification time; with `-s`, only its size. |
| `ukit-spwd` | Print the working directory by climbing parent directories and matching inode numbers. |
| `ukit-showtty` | Show the baud rate, erase and kill characters, and some input and local mode flags of standard input. |
| `ukit-echostate` | Report whether echo is on for standard input. |
| `ukit-setecho y\|n` | Turn echo on (an argument starting with `y`) or off. |
| `ukit-play-again [--timed]` | Ask "Do you want another transaction (y/n)?", reading single keypresses without echo on a terminal; exit status 0 for yes, 1 for no. With `--timed` it polls every two seconds, beeps, and gives up with status 2 after a few tries. |
| `ukit-ticker` | Count down from 10 using an interval timer ticking every half second. |
| `ukit-bounce [2d\|1d\|hello]` | Terminal animations that end when `Q` is typed. `2d` (default): a ball bouncing in a box; `f`/`s` and `F`/`S` change its horizontal and vertical speed. `1d`: a message sliding along a row; space turns it, `f`/`s` speed it up or slow it down. `hello`: a message sliding back and forth once a second. |
| `ukit-smsh` | A small shell with variables (`name=value`, `set`, `export NAME`) and `if` / `then` / `fi`. Exported variables form the environment of the programs it runs. |
| `ukit-psh` | A prompting shell: enter a command one argument per line (`Arg[0]? `, …), then an empty line to run it; it reports the exit status and signal. |
| `ukit-pipe CMD1 CMD2` | Run `CMD1 \| CMD2`; the commands take no arguments. |

## Using the modules

Some examples of the library side:

```python
from unixkit.rotate import rotate_text
from unixkit.ls import mode_to_letters
from unixkit.smsh import splitline, okname
from unixkit.varlib import VarTable

rotate_text("hello, zoo")        # 'ifmmp, app'
mode_to_letters(0o40755)         # 'drwxr-xr-x'
splitline("ls   -l\t/tmp")       # ['ls', '-l', '/tmp']
okname("_path2")                 # True
okname("2x")                     # False

table = VarTable()
table.store("GREETING", "hi")
table.export("GREETING")
table.lookup("GREETING")         # 'hi'
table.to_environ()               # {'GREETING': 'hi'}
table.listing()                  # ['  * GREETING=hi']
```

Driving the small shell with your own runner instead of starting programs:

```python
import io
from unixkit.smsh import Shell

calls = []
shell = Shell(runner=lambda args, env: calls.append(args) or 0)
shell.run(io.StringIO("x=1\nexport x\nif true\nthen\necho yes\nfi\n"), io.StringIO())
calls                            # [['true'], ['echo', 'yes']]
```

Reading the login records directly:

```python
from unixkit.utmp import UtmpReader
from unixkit.who import format_record

with UtmpReader("/var/run/utmp", 16) as reader:
    for record in reader:
        line = format_record(record, True)
        if line is not None:     # only user logins are formatted
            print(line)
```

Copying a file, with errors raised as `CopyError`:

```python
from unixkit.cp import copy_file, CopyError

try:
    copy_file("notes.txt", "notes.bak", 4096)
except CopyError as exc:
    print(exc)
```

## What it does not do

- `ukit-smsh` splits words on spaces and tabs only: there is no quoting,
  no `$name` substitution, no `else`, no pipes or redirection.
- `ukit-psh` takes one argument per line and has no variables or control
  words; `ukit-pipe` connects exactly two commands without arguments.
- The utmp reader knows the Linux record layout only.