"""Interval timer that delivers SIGALRM at a steady rate, and a countdown demo."""

import signal
import sys

DEMO_INTERVAL_MS = 500
DEMO_START = 10


def split_msecs(n_msecs):
    """Split milliseconds into whole seconds and the remaining microseconds."""
    if n_msecs < 0:
        raise ValueError("n_msecs must not be negative")
    seconds, msecs = divmod(int(n_msecs), 1000)
    return seconds, msecs * 1000


def set_ticker(n_msecs):
    """Send SIGALRM every n_msecs milliseconds; 0 turns the ticker off.

    Returns the previous (delay, interval) of the real-time timer.
    Raises ValueError for a negative value and OSError if the timer
    cannot be set.
    """
    seconds, usecs = split_msecs(n_msecs)
    period = seconds + usecs / 1_000_000
    return signal.setitimer(signal.ITIMER_REAL, period, period)


class _Countdown:
    """Signal handler that counts down one number per call, then says DONE."""

    def __init__(self, start, out):
        self.num = start
        self.out = out
        self.done = False

    def __call__(self, signum=None, frame=None):
        if self.done:
            return True
        self.out.write(f"{self.num} ..")
        self.num -= 1
        if self.num < 0:
            self.out.write("DONE!\n")
            self.done = True
        self.out.flush()
        return self.done


def countdown(start=DEMO_START, out=None):
    """Return a handler that prints start, start-1, ..., 0 and then DONE!.

    Each call returns True once the count is finished; its ``done``
    attribute says the same.
    """
    return _Countdown(start, sys.stdout if out is None else out)


def main(argv=None):
    """Count down from 10 at two ticks a second."""
    handler = countdown(DEMO_START)
    previous = signal.signal(signal.SIGALRM, handler)
    try:
        try:
            set_ticker(DEMO_INTERVAL_MS)
        except OSError as exc:
            print(f"set_ticker: {exc}", file=sys.stderr)
            return 1
        while not handler.done:
            signal.pause()
    finally:
        set_ticker(0)
        signal.signal(signal.SIGALRM, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())