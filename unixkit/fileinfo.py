"""Show the information that stat reports about a file."""

import argparse
import os
import sys


def format_stat_info(fname, info):
    """Return stat fields in a name: value layout, one per line."""
    return (
        f"   mode: {info.st_mode:o}\n"
        f"  links: {info.st_nlink}\n"
        f"   user: {info.st_uid}\n"
        f"  group: {info.st_gid}\n"
        f"   size: {info.st_size}\n"
        f"modtime: {int(info.st_mtime)}\n"
        f"   name: {fname}\n"
    )


def main(argv=None):
    """fileinfo [-s] file: show stat fields, or with -s just the size."""
    parser = argparse.ArgumentParser(prog="fileinfo")
    parser.add_argument("-s", "--size", action="store_true",
                        help="print only the size of the file")
    parser.add_argument("file", nargs="?")
    args = parser.parse_args(argv)
    if args.file is None:
        return 1
    try:
        info = os.stat(args.file)
    except OSError as exc:
        print(f"{args.file}: {exc.strerror}", file=sys.stderr)
        return 1
    if args.size:
        print(f" The size of {args.file} is {info.st_size}")
    else:
        sys.stdout.write(format_stat_info(args.file, info))
    return 0


if __name__ == "__main__":
    sys.exit(main())