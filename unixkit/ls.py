"""List the contents of directories, briefly or in long form."""

import argparse
import grp
import os
import pwd
import stat
import sys
import time

_PERMISSIONS = (
    (stat.S_IRUSR, 1, "r"),
    (stat.S_IWUSR, 2, "w"),
    (stat.S_IXUSR, 3, "x"),
    (stat.S_IRGRP, 4, "r"),
    (stat.S_IWGRP, 5, "w"),
    (stat.S_IXGRP, 6, "x"),
    (stat.S_IROTH, 7, "r"),
    (stat.S_IWOTH, 8, "w"),
    (stat.S_IXOTH, 9, "x"),
)


def mode_to_letters(mode):
    """Return the ten-letter type and permission string for mode.

    Only directories, character and block devices get a type letter;
    setuid, setgid and sticky bits are not shown.
    """
    letters = list("----------")
    if stat.S_ISDIR(mode):
        letters[0] = "d"
    if stat.S_ISCHR(mode):
        letters[0] = "c"
    if stat.S_ISBLK(mode):
        letters[0] = "b"
    for bit, position, letter in _PERMISSIONS:
        if mode & bit:
            letters[position] = letter
    return "".join(letters)


def uid_to_name(uid):
    """Return the user name for uid, or the number itself as text."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def gid_to_name(gid):
    """Return the group name for gid, or the number itself as text."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_file_info(filename, info):
    """Format one long-listing line from a stat result."""
    return (
        f"{mode_to_letters(info.st_mode)}"
        f"{int(info.st_nlink):4d} "
        f"{uid_to_name(info.st_uid):<8} "
        f"{gid_to_name(info.st_gid):<8} "
        f"{int(info.st_size):8d} "
        f"{time.ctime(info.st_mtime)[4:16]} "
        f"{filename}"
    )


def list_directory(dirname, long=False):
    """Return the listing lines for dirname, '.' and '..' included.

    Raises OSError if the directory cannot be read. In long form an
    entry that cannot be stat'ed is reported on standard error and skipped.
    """
    names = [".", "..", *os.listdir(dirname)]
    if not long:
        return names
    lines = []
    for name in names:
        try:
            info = os.stat(os.path.join(dirname, name))
        except OSError as exc:
            print(f"{name}: {exc.strerror}", file=sys.stderr)
            continue
        lines.append(format_file_info(name, info))
    return lines


def _show(dirname, long):
    try:
        lines = list_directory(dirname, long)
    except OSError:
        print(f"ls: cannot open {dirname}", file=sys.stderr)
        return
    for line in lines:
        print(line)


def main(argv=None):
    """ls [-l] [dir ...]: list the current directory or each one named."""
    parser = argparse.ArgumentParser(prog="ls")
    parser.add_argument("-l", dest="long", action="store_true",
                        help="use the long listing format")
    parser.add_argument("dirs", nargs="*")
    args = parser.parse_args(argv)
    if not args.dirs:
        _show(".", args.long)
    for dirname in args.dirs:
        print(f"{dirname}:")
        _show(dirname, args.long)
    return 0


if __name__ == "__main__":
    sys.exit(main())