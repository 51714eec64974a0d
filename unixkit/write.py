"""Send lines from standard input to another user's terminal."""

import os
import sys

from .utmp import UTMP_FILE, UtmpReader

NAME_LEN = 32
USAGE = "usage: write [-t ttyname | logname]"


def find_tty(logname, utmp_path=UTMP_FILE):
    """Return the terminal line of the first login of logname, or None.

    Only the first login found is returned; an unreadable utmp file
    counts as not logged in.
    """
    wanted = logname[:NAME_LEN]
    try:
        reader = UtmpReader(utmp_path)
    except OSError:
        return None
    with reader:
        for record in reader:
            if record.user == wanted:
                return record.line
    return None


def relay(source, dest_path):
    """Copy lines from source to the existing file dest_path.

    Opening dest_path raises OSError; a failed write stops the copy.
    Returns the number of bytes written.
    """
    fd = os.open(dest_path, os.O_WRONLY)
    total = 0
    try:
        for line in source:
            data = line.encode()
            try:
                total += os.write(fd, data)
            except OSError:
                break
    finally:
        os.close(fd)
    return total


def main(argv=None):
    """write logname, or write -t ttyname: copy standard input there."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 2 and args[0] in ("-t", "--tty"):
        dest = args[1]
    elif len(args) == 1 and not args[0].startswith("-"):
        tty = find_tty(args[0])
        if tty is None:
            return 1
        dest = f"/dev/{tty}"
    else:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        relay(sys.stdin, dest)
    except OSError as exc:
        print(f"{dest}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())