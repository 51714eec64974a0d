"""A prompting shell that asks for one argument at a time, and a two-command pipe."""

import subprocess
import sys

MAXARGS = 20


def read_arglists(stream, out=None, max_args=MAXARGS):
    """Prompt for arguments and yield each list ended by a blank line or end of input.

    Reading stops once max_args arguments have been collected without
    a blank line.
    """
    out = sys.stdout if out is None else out
    args = []
    while len(args) < max_args:
        out.write(f"Arg[{len(args)}]? ")
        out.flush()
        line = stream.readline()
        if line and line != "\n":
            args.append(line[:-1] if line.endswith("\n") else line)
            continue
        if args:
            yield args
            args = []
        if not line:
            return


def execute(arglist):
    """Run a program and wait; return (exit status, signal number)."""
    try:
        code = subprocess.run(list(arglist)).returncode
    except OSError as exc:
        print(f"execvp failed: {exc.strerror or exc}", file=sys.stderr)
        return 1, 0
    if code < 0:
        return 0, -code
    return code, 0


def run_pipe(cmd1, cmd2):
    """Run cmd1 | cmd2 (no arguments); return the exit status of cmd2.

    Raises OSError if either program cannot be started.
    """
    first = subprocess.Popen([cmd1], stdout=subprocess.PIPE)
    try:
        second = subprocess.Popen([cmd2], stdin=first.stdout)
    except OSError:
        first.stdout.close()
        first.kill()
        first.wait()
        raise
    first.stdout.close()
    status = second.wait()
    first.wait()
    return status


def pipe_main(argv=None):
    """pipe cmd1 cmd2: connect the output of cmd1 to the input of cmd2."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("usage: pipe cmd1 cmd2", file=sys.stderr)
        return 1
    try:
        return run_pipe(args[0], args[1])
    except OSError as exc:
        print(f"{exc.filename}: {exc.strerror}", file=sys.stderr)
        return 4


def main(argv=None):
    """Prompt for commands and run each one, reporting how it exited."""
    for arglist in read_arglists(sys.stdin, sys.stdout):
        status, sig = execute(arglist)
        print(f"child exited with status {status},{sig}")
    return 0


if __name__ == "__main__":
    sys.exit(main())