"""Rotate lower-case letters, or list input characters one by one."""

import argparse
import sys


def rotate_char(c):
    """Map a->b, b->c, ..., z->a; leave everything else alone."""
    if c == "z":
        return "a"
    if "a" <= c < "z":
        return chr(ord(c) + 1)
    return c


def rotate_text(text):
    """Rotate every character of text."""
    return "".join(rotate_char(c) for c in text)


def list_chars(text):
    """Yield a description of each character until a 'Q' or the end."""
    for n, c in enumerate(text):
        if c == "Q":
            return
        yield f"char {n:3d} is {c} code {ord(c)}"


def _chars(stream):
    while c := stream.read(1):
        yield c


def main(argv=None):
    """Rotate standard input, or list its characters with --list."""
    parser = argparse.ArgumentParser(prog="rotate")
    parser.add_argument(
        "-l", "--list", action="store_true",
        help="list each input character and its code until Q",
    )
    args = parser.parse_args(argv)
    if args.list:
        for line in list_chars(_chars(sys.stdin)):
            print(line, flush=True)
    else:
        for c in _chars(sys.stdin):
            sys.stdout.write(rotate_char(c))
            sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())