"""Ask a yes/no question, optionally in character mode and with a timeout."""

import argparse
import enum
import fcntl
import os
import signal
import sys
import termios
import time
from contextlib import contextmanager

ASK = "Do you want another transaction"
TRIES = 3
SLEEPTIME = 2
BEEP = "\a"
_OK_CHARS = "yYnN"


class Response(enum.IntEnum):
    """The answer, with the value used as exit status."""

    YES = 0
    NO = 1
    TIMEOUT = 2


def get_response(question, stream, out=None):
    """Ask question and read characters until y or n; end of input means no."""
    out = sys.stdout if out is None else out
    out.write(f"{question} (y/n)?")
    out.flush()
    while c := stream.read(1):
        if c in "yY":
            return Response.YES
        if c in "nN":
            return Response.NO
    return Response.NO


def get_ok_char(stream):
    """Skip characters other than y, Y, n, N; return the next one or '' at end."""
    while c := stream.read(1):
        if c in _OK_CHARS:
            return c
    return ""


def get_timed_response(question, stream, out=None, max_tries=TRIES,
                       sleep=time.sleep):
    """Ask question, then poll for an answer, giving up after max_tries beeps."""
    out = sys.stdout if out is None else out
    out.write(f"{question} (y/n)?")
    out.flush()
    while True:
        sleep(SLEEPTIME)
        answer = get_ok_char(stream).lower()
        if answer == "y":
            return Response.YES
        if answer == "n":
            return Response.NO
        if max_tries == 0:
            return Response.TIMEOUT
        max_tries -= 1
        out.write(BEEP)
        out.flush()


@contextmanager
def saved_tty(fd=0):
    """Restore the terminal attributes and file flags of fd on leaving."""
    attrs = termios.tcgetattr(fd)
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


def _set_cr_noecho_mode(fd):
    attrs = termios.tcgetattr(fd)
    attrs[3] &= ~(termios.ICANON | termios.ECHO)
    attrs[6][termios.VMIN] = 1
    termios.tcsetattr(fd, termios.TCSANOW, attrs)


def _set_nodelay_mode(fd):
    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)


class _FdReader:
    """Read single characters from a descriptor; no input reads as ''."""

    def __init__(self, fd):
        self._fd = fd

    def read(self, size=1):
        try:
            data = os.read(self._fd, size)
        except OSError:
            return ""
        return data.decode("latin-1")


def main(argv=None):
    """Ask whether to go on; exit 0 for yes, 1 for no, 2 for timeout."""
    parser = argparse.ArgumentParser(prog="play_again")
    parser.add_argument("--timed", action="store_true",
                        help="give up after a few tries without an answer")
    args = parser.parse_args(argv)
    fd = 0
    reader = _FdReader(fd)

    def ask():
        if args.timed:
            return get_timed_response(ASK, reader)
        return get_response(ASK, reader)

    if not os.isatty(fd):
        return int(ask())

    previous_quit = signal.signal(signal.SIGQUIT, signal.SIG_IGN)
    try:
        with saved_tty(fd):
            _set_cr_noecho_mode(fd)
            if args.timed:
                _set_nodelay_mode(fd)
            response = ask()
    except KeyboardInterrupt:
        return int(Response.TIMEOUT)
    finally:
        signal.signal(signal.SIGQUIT, previous_quit)
    return int(response)


if __name__ == "__main__":
    sys.exit(main())