"""List the users who are logged in."""

import argparse
import sys
import time

from .utmp import USER_PROCESS, UTMP_FILE, UtmpReader


def format_time(timeval):
    """Return the 'Mon dd hh:mm' part of the local ctime string."""
    return time.ctime(timeval)[4:16]


def format_record(record, show_host=True):
    """Format a login record as one line, or return None if it is not a user."""
    if record.type != USER_PROCESS:
        return None
    text = f"{record.user:<8.8} {record.line:<8.8} {format_time(record.time)}"
    if show_host and record.host:
        text += f" ({record.host})"
    return text


def main(argv=None):
    """Print one line for each user logged in."""
    parser = argparse.ArgumentParser(prog="who")
    parser.add_argument("file", nargs="?", default=UTMP_FILE)
    parser.add_argument(
        "-H", "--no-host", action="store_true",
        help="do not show the remote host",
    )
    args = parser.parse_args(argv)
    try:
        reader = UtmpReader(args.file)
    except OSError as exc:
        print(f"{args.file}: {exc.strerror}", file=sys.stderr)
        return 1
    with reader:
        for record in reader:
            line = format_record(record, show_host=not args.no_host)
            if line is not None:
                print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())