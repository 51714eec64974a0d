"""Animate a bouncing ball or a message on the terminal with curses."""

import argparse
import curses
import signal
import sys
import time
from dataclasses import dataclass
from typing import Optional

BLANK = " "
DFL_SYMBOL = "o"
TOP_ROW = 5
BOT_ROW = 20
LEFT_EDGE = 10
RIGHT_EDGE = 70
X_INIT = 10
Y_INIT = 10
TICKS_PER_SEC = 50
X_TTM = 5
Y_TTM = 8

MESSAGE = "hello"
MESSAGE_DELAY_MS = 200

HELLO_MESSAGE = "Hello"
HELLO_LEFT = 10
HELLO_RIGHT = 30
HELLO_ROW = 10


@dataclass
class Ball:
    """A ball that moves one cell along an axis every *_ttm ticks."""

    y_pos: int = Y_INIT
    x_pos: int = X_INIT
    y_ttm: int = Y_TTM
    x_ttm: int = X_TTM
    y_ttg: int = Y_TTM
    x_ttg: int = X_TTM
    y_dir: int = 1
    x_dir: int = 1
    symbol: str = DFL_SYMBOL

    def tick(self):
        """Advance one clock tick; return True if the ball moved.

        An axis whose ttm is not positive never moves. After a move the
        ball bounces off the edges of the court.
        """
        moved = False
        if self.y_ttm > 0:
            self.y_ttg -= 1
            if self.y_ttg == 0:
                self.y_pos += self.y_dir
                self.y_ttg = self.y_ttm
                moved = True
        if self.x_ttm > 0:
            self.x_ttg -= 1
            if self.x_ttg == 0:
                self.x_pos += self.x_dir
                self.x_ttg = self.x_ttm
                moved = True
        if moved:
            self.bounce_or_lose()
        return moved

    def bounce_or_lose(self):
        """Turn the ball around at an edge; return True if it bounced."""
        bounced = False
        if self.y_pos == TOP_ROW:
            self.y_dir = 1
            bounced = True
        elif self.y_pos == BOT_ROW:
            self.y_dir = -1
            bounced = True
        if self.x_pos == LEFT_EDGE:
            self.x_dir = 1
            bounced = True
        elif self.x_pos == RIGHT_EDGE:
            self.x_dir = -1
            bounced = True
        return bounced


@dataclass
class Message:
    """A text that slides along a row and turns back at the edges.

    With right left as None the text turns when its end reaches the
    screen width passed to step.
    """

    text: str = MESSAGE
    row: int = 10
    col: int = 0
    dir: int = 1
    left: int = 0
    right: Optional[int] = None

    def step(self, cols):
        """Move one column and turn around at an edge; return the new column."""
        self.col += self.dir
        right = cols - len(self.text) if self.right is None else self.right
        if self.dir < 0 and self.col <= self.left:
            self.dir = 1
        elif self.dir > 0 and self.col >= right:
            self.dir = -1
        return self.col


def _put(stdscr, row, col, text):
    try:
        stdscr.addstr(row, col, text)
    except curses.error:
        pass


def _park(stdscr):
    try:
        stdscr.move(curses.LINES - 1, curses.COLS - 1)
    except curses.error:
        pass


def _events(stdscr, interval):
    """Yield typed key codes, and None once per tick of interval() seconds."""
    next_tick = time.monotonic() + interval()
    while True:
        wait = next_tick - time.monotonic()
        if wait <= 0:
            yield None
            next_tick = time.monotonic() + interval()
            continue
        stdscr.timeout(max(1, int(wait * 1000)))
        key = stdscr.getch()
        if key != -1:
            yield key


def _run_ball(stdscr):
    ball = Ball()
    _put(stdscr, ball.y_pos, ball.x_pos, ball.symbol)
    stdscr.refresh()
    controls = {
        ord("f"): ("x_ttm", -1),
        ord("s"): ("x_ttm", 1),
        ord("F"): ("y_ttm", -1),
        ord("S"): ("y_ttm", 1),
    }
    for key in _events(stdscr, lambda: 1 / TICKS_PER_SEC):
        if key is None:
            y_cur, x_cur = ball.y_pos, ball.x_pos
            if ball.tick():
                _put(stdscr, y_cur, x_cur, BLANK)
                _put(stdscr, ball.y_pos, ball.x_pos, ball.symbol)
                _park(stdscr)
                stdscr.refresh()
        elif key == ord("Q"):
            return
        elif key in controls:
            name, change = controls[key]
            setattr(ball, name, getattr(ball, name) + change)


def _run_message(stdscr):
    message = Message()
    delay = MESSAGE_DELAY_MS
    stdscr.clear()
    _put(stdscr, message.row, message.col, message.text)
    stdscr.refresh()
    blank = " " * len(message.text)
    for key in _events(stdscr, lambda: delay / 1000):
        if key is None:
            _put(stdscr, message.row, message.col, blank)
            message.step(curses.COLS)
            _put(stdscr, message.row, message.col, message.text)
            stdscr.refresh()
        elif key == ord("Q"):
            return
        elif key == ord(" "):
            message.dir = -message.dir
        elif key == ord("f") and delay > 2:
            delay //= 2
        elif key == ord("s"):
            delay *= 2


def _run_hello(stdscr):
    message = Message(HELLO_MESSAGE, row=HELLO_ROW, col=HELLO_LEFT,
                      left=HELLO_LEFT, right=HELLO_RIGHT)
    blank = " " * len(message.text)
    stdscr.clear()
    _put(stdscr, message.row, message.col, message.text)
    _park(stdscr)
    stdscr.refresh()
    for key in _events(stdscr, lambda: 1.0):
        if key is None:
            _put(stdscr, message.row, message.col, blank)
            message.step(curses.COLS)
            _put(stdscr, message.row, message.col, message.text)
            _park(stdscr)
            stdscr.refresh()
        elif key == ord("Q"):
            return


_MODES = {"2d": _run_ball, "1d": _run_message, "hello": _run_hello}


def main(argv=None):
    """bounce [2d|1d|hello]: run an animation until Q is typed."""
    parser = argparse.ArgumentParser(prog="bounce")
    parser.add_argument("mode", nargs="?", choices=sorted(_MODES), default="2d")
    args = parser.parse_args(argv)
    previous = None
    if args.mode == "2d":
        previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        curses.wrapper(_MODES[args.mode])
    except KeyboardInterrupt:
        pass
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())