import os

from unixkit import fileinfo


def _fake_stat():
    return os.stat_result((0o100644, 7, 1, 2, 1000, 100, 42, 0, 1234, 0))


def test_format_stat_info_lines():
    lines = fileinfo.format_stat_info("f", _fake_stat()).splitlines()
    assert lines == [
        "   mode: 100644",
        "  links: 2",
        "   user: 1000",
        "  group: 100",
        "   size: 42",
        "modtime: 1234",
        "   name: f",
    ]


def test_main_real_file(tmp_path, capsys):
    path = tmp_path / "data"
    path.write_text("abcde")
    assert fileinfo.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "   size: 5\n" in out
    assert out.endswith(f"   name: {path}\n")


def test_main_size_only(tmp_path, capsys):
    path = tmp_path / "data"
    path.write_text("abc")
    assert fileinfo.main(["-s", str(path)]) == 0
    assert capsys.readouterr().out == f" The size of {path} is 3\n"


def test_main_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "none")
    assert fileinfo.main([missing]) == 1
    assert capsys.readouterr().err.startswith(f"{missing}: ")


def test_main_no_arguments():
    assert fileinfo.main([]) == 1