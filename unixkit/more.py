"""Page through text a screenful at a time."""

import sys
from contextlib import ExitStack

PAGELEN = 24
LINELEN = 512
PROMPT = "\033[7m more? \033[m"
TTY_PATH = "/dev/tty"


def _lines(fp):
    """Yield input lines, splitting any longer than LINELEN - 1 characters."""
    limit = LINELEN - 1
    for line in fp:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def see_more(cmd, out=None):
    """Show the prompt and return how many lines to advance.

    'q' means stop (0), space means a full page, Enter means one line.
    Other characters are ignored; end of input means stop.
    """
    out = sys.stdout if out is None else out
    out.write(PROMPT)
    out.flush()
    while c := cmd.read(1):
        if c == "q":
            return 0
        if c == " ":
            return PAGELEN
        if c == "\n":
            return 1
    return 0


def do_more(fp, out=None, cmd=None):
    """Copy fp to out, pausing after every PAGELEN lines.

    Replies are read from cmd; when cmd is None the controlling
    terminal is opened the first time a reply is needed.
    """
    out = sys.stdout if out is None else out
    with ExitStack() as stack:
        shown = 0
        for line in _lines(fp):
            if shown == PAGELEN:
                if cmd is None:
                    cmd = stack.enter_context(open(TTY_PATH))
                reply = see_more(cmd, out)
                if reply == 0:
                    break
                shown -= reply
            out.write(line)
            shown += 1


def main(argv=None):
    """Page standard input, or each named file in turn."""
    args = sys.argv[1:] if argv is None else argv
    try:
        if not args:
            do_more(sys.stdin)
        for name in args:
            with open(name) as fp:
                do_more(fp)
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())