[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "unixkit"
version = "0.1.0"
description = "Small Unix utilities: pager, copier, who, ls, pwd, tty tools, a tiny shell and more"
requires-python = ">=3.10"
dependencies = []
keywords = ["unix", "shell", "utmp", "who", "ls", "pager", "tty", "termios", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ukit-more = "unixkit.more:main"
ukit-cp = "unixkit.cp:main"
ukit-rotate = "unixkit.rotate:main"
ukit-who = "unixkit.who:main"
ukit-write = "unixkit.write:main"
ukit-ls = "unixkit.ls:main"
ukit-fileinfo = "unixkit.fileinfo:main"
ukit-spwd = "unixkit.spwd:main"
ukit-showtty = "unixkit.tty:main"
ukit-echostate = "unixkit.tty:echostate_main"
ukit-setecho = "unixkit.tty:setecho_main"
ukit-play-again = "unixkit.play_again:main"
ukit-ticker = "unixkit.ticker:main"
ukit-bounce = "unixkit.bounce:main"
ukit-smsh = "unixkit.smsh:main"
ukit-psh = "unixkit.psh:main"
ukit-pipe = "unixkit.psh:pipe_main"

[tool.setuptools.packages.find]
include = ["unixkit*"]

[tool.pytest.ini_options]
addopts = "-ra"
