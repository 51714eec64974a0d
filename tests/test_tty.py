import contextlib
import os
import termios

import pytest

from unixkit import tty


@contextlib.contextmanager
def _fd0_from(fd):
    saved = os.dup(0)
    os.dup2(fd, 0)
    try:
        yield
    finally:
        os.dup2(saved, 0)
        os.close(saved)


@pytest.fixture
def pty_pair():
    master, slave = os.openpty()
    try:
        yield master, slave
    finally:
        os.close(master)
        os.close(slave)


@pytest.fixture
def pty_stdin(pty_pair):
    master, slave = pty_pair
    with _fd0_from(slave):
        yield master


def test_baud_name_known_speeds():
    assert tty.baud_name(termios.B300) == "300"
    assert tty.baud_name(termios.B9600) == "9600"


def test_baud_name_fast():
    assert tty.baud_name(termios.B38400) == "Fast"


def test_describe_flags_marks_set_bits():
    lines = tty.describe_flags(termios.ECHO, tty.LOCAL_FLAGS)
    assert len(lines) == len(tty.LOCAL_FLAGS)
    assert "  Enable echo is ON" in lines
    assert "  Enable signals is OFF" in lines


def test_describe_flags_all_off():
    lines = tty.describe_flags(0, tty.INPUT_FLAGS)
    assert all(line.endswith(" is OFF") for line in lines)
    assert lines[0] == "  Ignore break condition is OFF"


def test_describe_flags_all_on():
    everything = 0
    for bit, _ in tty.INPUT_FLAGS:
        everything |= bit
    lines = tty.describe_flags(everything, tty.INPUT_FLAGS)
    assert all(line.endswith(" is ON") for line in lines)


def test_control_char_line():
    assert (
        tty.control_char_line("erase", 8)
        == "The erase character is ascii 8, Ctrl-H"
    )
    assert (
        tty.control_char_line("line kill", 21)
        == "The line kill character is ascii 21, Ctrl-U"
    )


def test_set_echo_round_trip(pty_pair):
    _, slave = pty_pair
    tty.set_echo(slave, False)
    assert tty.echo_state(slave) is False
    tty.set_echo(slave, True)
    assert tty.echo_state(slave) is True


def test_echo_state_on_pipe_raises():
    r, w = os.pipe()
    try:
        with pytest.raises(termios.error):
            tty.echo_state(r)
    finally:
        os.close(r)
        os.close(w)


def test_echostate_main_reports_off(pty_stdin, capsys):
    tty.set_echo(0, False)
    assert tty.echostate_main([]) == 0
    assert capsys.readouterr().out == " echo if OFF, since its bit is 0\n"


def test_echostate_main_reports_on(pty_stdin, capsys):
    tty.set_echo(0, True)
    assert tty.echostate_main([]) == 0
    assert capsys.readouterr().out == " echo is on , since its bit is 1\n"


def test_setecho_main_without_args_does_nothing(pty_stdin):
    tty.set_echo(0, False)
    assert tty.setecho_main([]) == 0
    assert tty.echo_state(0) is False


def test_setecho_main_switches(pty_stdin):
    assert tty.setecho_main(["n"]) == 0
    assert tty.echo_state(0) is False
    assert tty.setecho_main(["y"]) == 0
    assert tty.echo_state(0) is True


def test_setecho_main_not_a_terminal():
    r, w = os.pipe()
    try:
        with _fd0_from(r):
            assert tty.setecho_main(["y"]) == 1
    finally:
        os.close(r)
        os.close(w)


def test_main_shows_settings(pty_stdin, capsys):
    tty.set_echo(0, True)
    assert tty.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("the baud rate is ")
    assert lines[1].startswith("The erase character is ascii ")
    assert lines[2].startswith("The line kill character is ascii ")
    assert "  Enable echo is ON" in lines
    assert len(lines) == 3 + len(tty.INPUT_FLAGS) + len(tty.LOCAL_FLAGS)


def test_main_not_a_terminal(capsys):
    r, w = os.pipe()
    try:
        with _fd0_from(r):
            assert tty.main([]) == 1
    finally:
        os.close(r)
        os.close(w)
    assert "cannot get params about stdin" in capsys.readouterr().err