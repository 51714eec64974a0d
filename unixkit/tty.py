"""Inspect and change terminal driver settings."""

import sys
import termios

_BAUD_NAMES = {
    termios.B300: "300",
    termios.B600: "600",
    termios.B1200: "1200",
    termios.B1800: "1800",
    termios.B2400: "2400",
    termios.B4800: "4800",
    termios.B9600: "9600",
}

INPUT_FLAGS = (
    (termios.IGNBRK, "Ignore break condition"),
    (termios.BRKINT, "Signal interrupt on break"),
    (termios.IGNPAR, "Ignore chars with parity errors"),
    (termios.PARMRK, "Mark parity errors"),
    (termios.INPCK, "Enable input parity check"),
    (termios.ISTRIP, "Strip character"),
    (termios.INLCR, "Map NL to CR on input"),
    (termios.IGNCR, "Ignore CR"),
    (termios.ICRNL, "Map CR to NL on input"),
    (termios.IXON, "Enable start/stop output control"),
    (termios.IXOFF, "Enable start/stop input control"),
)

LOCAL_FLAGS = (
    (termios.ISIG, "Enable signals"),
    (termios.ICANON, "Canonical input (erase and kill)"),
    (termios.ECHO, "Enable echo"),
    (termios.ECHOE, "Echo ERASE as BS-SPACE-BS"),
    (termios.ECHOK, "Echo KILL by starting new line"),
)

# Positions in the list that termios.tcgetattr returns.
_IFLAG, _LFLAG, _OSPEED, _CC = 0, 3, 5, 6


def baud_name(speed):
    """Return the speed constant as text, or 'Fast' for anything above 9600."""
    return _BAUD_NAMES.get(speed, "Fast")


def describe_flags(value, flags):
    """Return one line per (bit, name) pair saying whether the bit is set."""
    return [
        f"  {name} is {'ON' if value & bit else 'OFF'}" for bit, name in flags
    ]


def control_char_line(label, code):
    """Describe a control character by its code and its Ctrl- letter."""
    return (
        f"The {label} character is ascii {code}, "
        f"Ctrl-{chr(code - 1 + ord('A'))}"
    )


def echo_state(fd=0):
    """Return True if the terminal on fd echoes input.

    Raises termios.error if fd is not a terminal.
    """
    return bool(termios.tcgetattr(fd)[_LFLAG] & termios.ECHO)


def set_echo(fd, enabled):
    """Turn echo on fd on or off at once."""
    attrs = termios.tcgetattr(fd)
    if enabled:
        attrs[_LFLAG] |= termios.ECHO
    else:
        attrs[_LFLAG] &= ~termios.ECHO
    termios.tcsetattr(fd, termios.TCSANOW, attrs)


def _reason(exc):
    return exc.args[-1] if exc.args else str(exc)


def _cc_code(value):
    return value[0] if isinstance(value, bytes) else int(value)


def echostate_main(argv=None):
    """Report whether standard input echoes."""
    try:
        on = echo_state(0)
    except termios.error as exc:
        print(f"tcgetattr: {_reason(exc)}", file=sys.stderr)
        return 1
    if on:
        print(" echo is on , since its bit is 1")
    else:
        print(" echo if OFF, since its bit is 0")
    return 0


def setecho_main(argv=None):
    """setecho [y|n]: turn echo on standard input on (y) or off."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        attrs = termios.tcgetattr(0)
    except termios.error as exc:
        print(f"tcgettattr: {_reason(exc)}", file=sys.stderr)
        return 1
    if args[0].startswith("y"):
        attrs[_LFLAG] |= termios.ECHO
    else:
        attrs[_LFLAG] &= ~termios.ECHO
    try:
        termios.tcsetattr(0, termios.TCSANOW, attrs)
    except termios.error as exc:
        print(f"tcsetattr: {_reason(exc)}", file=sys.stderr)
        return 2
    return 0


def main(argv=None):
    """Show the speed, control characters and some flags of standard input."""
    try:
        attrs = termios.tcgetattr(0)
    except termios.error as exc:
        print(f"cannot get params about stdin: {_reason(exc)}", file=sys.stderr)
        return 1
    cc = attrs[_CC]
    print(f"the baud rate is {baud_name(attrs[_OSPEED])}")
    print(control_char_line("erase", _cc_code(cc[termios.VERASE])))
    print(control_char_line("line kill", _cc_code(cc[termios.VKILL])))
    for line in describe_flags(attrs[_IFLAG], INPUT_FLAGS):
        print(line)
    for line in describe_flags(attrs[_LFLAG], LOCAL_FLAGS):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())