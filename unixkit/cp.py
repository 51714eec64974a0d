"""Copy one file to another using plain reads and writes."""

import os
import sys

BUFFERSIZE = 4096
COPYMODE = 0o644


class CopyError(Exception):
    """A copy step failed; carries what was attempted, on which path, and why."""

    def __init__(self, action, path, reason):
        super().__init__(action, path, reason)
        self.action = action
        self.path = path
        self.reason = reason

    def __str__(self):
        if self.path:
            return f"Error: {self.action} {self.path}: {self.reason}"
        return f"Error: {self.action} {self.reason}"


def copy_file(src, dest, buffer_size=BUFFERSIZE):
    """Copy src to dest (created or truncated, mode 0644); return bytes copied."""
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    try:
        in_fd = os.open(src, os.O_RDONLY)
    except OSError as exc:
        raise CopyError("Cannot open ", src, exc.strerror) from exc
    try:
        out_fd = os.open(dest, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, COPYMODE)
    except OSError as exc:
        os.close(in_fd)
        raise CopyError("Cannot creat", dest, exc.strerror) from exc

    total = 0
    try:
        while True:
            try:
                chunk = os.read(in_fd, buffer_size)
            except OSError as exc:
                raise CopyError("Read error from ", src, exc.strerror) from exc
            if not chunk:
                break
            try:
                written = os.write(out_fd, chunk)
            except OSError as exc:
                raise CopyError("Write error to ", dest, exc.strerror) from exc
            if written != len(chunk):
                raise CopyError("Write error to ", dest, "short write")
            total += written
    except CopyError:
        os.close(in_fd)
        os.close(out_fd)
        raise

    try:
        os.close(in_fd)
        os.close(out_fd)
    except OSError as exc:
        raise CopyError("Error closing files", "", exc.strerror) from exc
    return total


def main(argv=None):
    """Command entry point: cp source destination."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print("usage: cp source destination", file=sys.stderr)
        return 1
    try:
        copy_file(args[0], args[1])
    except CopyError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())