"""Print the path of a directory by climbing to the root through '..'."""

import os
import sys


def inum_to_name(directory, inode):
    """Return the name of the entry in directory with this inode number.

    Raises LookupError if no entry has it.
    """
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.inode() == inode:
                return entry.name
    # A mount point lists the inode of the covered directory; check stat too.
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                if entry.stat(follow_symlinks=False).st_ino == inode:
                    return entry.name
            except OSError:
                continue
    raise LookupError(f"error looking for inum {inode}")


def path_to(directory="."):
    """Return the absolute path of directory, found one '..' at a time."""
    parts = []
    current = directory
    here = os.stat(current)
    while True:
        parent = os.path.join(current, "..")
        above = os.stat(parent)
        if os.path.samestat(here, above):
            break
        parts.append(inum_to_name(parent, here.st_ino))
        current, here = parent, above
    return "/" + "/".join(reversed(parts))


def main(argv=None):
    """Print the path of the current directory."""
    try:
        print(path_to("."))
    except (OSError, LookupError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())