"""A small shell with variables, export, set and if/then/fi."""

import enum
import os
import re
import signal
import subprocess
import sys

from .varlib import VarTable

DFL_PROMPT = "> "
_DELIMS = re.compile(r"[ \t]+")
_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_CONTROL = ("if", "then", "fi")


def next_cmd(prompt, stream, out=None):
    """Prompt, then return the next line without its newline, or None at end."""
    out = sys.stdout if out is None else out
    out.write(prompt)
    out.flush()
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def splitline(line):
    """Split a line into words separated by spaces and tabs."""
    if line is None:
        return None
    return [word for word in _DELIMS.split(line) if word]


def okname(name):
    """Return True if name is a legal variable name."""
    return _NAME.fullmatch(name) is not None


def is_control_command(word):
    """Return True for the words if, then and fi."""
    return word in _CONTROL


class _IfState(enum.Enum):
    NEUTRAL = enum.auto()
    WANT_THEN = enum.auto()
    THEN_BLOCK = enum.auto()


def _run_command(args, env):
    def reset_signals():
        signal.signal(signal.SIGINT, signal.SIG_DFL)
        signal.signal(signal.SIGQUIT, signal.SIG_DFL)

    return subprocess.run(args, env=env, preexec_fn=reset_signals).returncode


class Shell:
    """Command processing: control words, builtins, then external programs.

    runner is called as runner(args, env) and returns the exit status;
    by default it runs the program and waits for it.
    """

    def __init__(self, variables=None, runner=None, err=None):
        self.variables = VarTable() if variables is None else variables
        self.runner = _run_command if runner is None else runner
        self.err = sys.stderr if err is None else err
        self.out = sys.stdout
        self._state = _IfState.NEUTRAL
        self._succeeded = True
        self.last_status = 0

    def process(self, args):
        """Run one command line; return its status."""
        if not args:
            return 0
        if is_control_command(args[0]):
            return self.do_control_command(args)
        if not self.ok_to_execute():
            return 0
        result = self.builtin_command(args)
        if result is None:
            result = self.execute(args)
        return result

    def builtin_command(self, args):
        """Run set, name=value or export; return the status, or None if not a builtin."""
        word = args[0]
        if word == "set":
            for line in self.variables.listing():
                self.out.write(line + "\n")
            return 0
        if "=" in word:
            name, value = word.split("=", 1)
            if not okname(name):
                return None
            try:
                self.variables.store(name, value)
            except OverflowError:
                return 1
            return 0
        if word == "export":
            if len(args) < 2 or not okname(args[1]):
                return 1
            try:
                self.variables.export(args[1])
            except OverflowError:
                return 1
            return 0
        return None

    def _syntax_error(self, message):
        self._state = _IfState.NEUTRAL
        self.err.write(f"syntax error: {message}\n")
        return -1

    def do_control_command(self, args):
        """Handle if, then or fi; return 0, or -1 for a syntax error."""
        word = args[0]
        if word == "if":
            if self._state is not _IfState.NEUTRAL:
                return self._syntax_error("if unexpected")
            self.last_status = self.process(args[1:])
            self._succeeded = self.last_status == 0
            self._state = _IfState.WANT_THEN
            return 0
        if word == "then":
            if self._state is not _IfState.WANT_THEN:
                return self._syntax_error("then unexpected")
            self._state = _IfState.THEN_BLOCK
            return 0
        if word == "fi":
            if self._state is not _IfState.THEN_BLOCK:
                return self._syntax_error("fi unexpected")
            self._state = _IfState.NEUTRAL
            return 0
        raise ValueError(f"internal error processing: {word}")

    def ok_to_execute(self):
        """Say whether an ordinary command should run in the current state."""
        if self._state is _IfState.WANT_THEN:
            self._syntax_error("then expected")
            return False
        if self._state is _IfState.THEN_BLOCK:
            return self._succeeded
        return True

    def execute(self, args):
        """Run a program with the exported variables as its environment."""
        if not args:
            return 0
        try:
            return self.runner(list(args), self.variables.to_environ())
        except OSError as exc:
            self.err.write(f"cannot execute command: {exc.strerror or exc}\n")
            return 1

    def run(self, stream, out=None):
        """Read and process commands until end of input; return the last status."""
        if out is not None:
            self.out = out
        result = 0
        while (line := next_cmd(DFL_PROMPT, stream, self.out)) is not None:
            result = self.process(splitline(line))
        return result


def main(argv=None):
    """Run the shell on standard input, ignoring interrupt and quit."""
    shell = Shell()
    shell.variables.load_environ(os.environ)
    previous_int = signal.signal(signal.SIGINT, signal.SIG_IGN)
    previous_quit = signal.signal(signal.SIGQUIT, signal.SIG_IGN)
    try:
        shell.run(sys.stdin, sys.stdout)
    finally:
        signal.signal(signal.SIGINT, previous_int)
        signal.signal(signal.SIGQUIT, previous_quit)
    return 0


if __name__ == "__main__":
    sys.exit(main())