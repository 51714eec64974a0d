import struct

import pytest

from unixkit.utmp import (
    RECORD_SIZE,
    USER_PROCESS,
    UtmpReader,
    parse_record,
)

_LAYOUT = struct.Struct("<hxxi32s4s32s256shhiii16s20x")


def _pack(rtype=USER_PROCESS, user="alice", line="pts/0", host="",
          when=1000, pid=42):
    return _LAYOUT.pack(
        rtype, pid, line.encode(), b"ts/0", user.encode(), host.encode(),
        0, 0, 0, when, 0, b"\0" * 16,
    )


def _write(tmp_path, records, tail=b""):
    path = tmp_path / "utmp"
    path.write_bytes(b"".join(records) + tail)
    return path


def test_parse_record_fields():
    data = _pack(user="bob", line="tty1", host="example.com", when=12345, pid=7)
    assert len(data) == RECORD_SIZE
    rec = parse_record(data)
    assert rec.type == USER_PROCESS
    assert rec.user == "bob"
    assert rec.line == "tty1"
    assert rec.host == "example.com"
    assert rec.time == 12345
    assert rec.pid == 7
    assert rec.id == "ts/0"


def test_parse_record_full_width_name_has_no_terminator():
    name = "x" * 32
    rec = parse_record(_pack(user=name))
    assert rec.user == name


@pytest.mark.parametrize("size", [0, RECORD_SIZE - 1, RECORD_SIZE + 1])
def test_parse_record_rejects_wrong_size(size):
    with pytest.raises(ValueError):
        parse_record(b"\0" * size)


def test_reader_yields_all_records_across_batches(tmp_path):
    records = [_pack(user=f"u{i}", when=i) for i in range(40)]
    path = _write(tmp_path, records)
    with UtmpReader(str(path), nrecs=16) as reader:
        got = list(reader)
    assert [r.user for r in got] == [f"u{i}" for i in range(40)]
    assert [r.time for r in got] == list(range(40))


def test_reader_ignores_partial_trailing_record(tmp_path):
    path = _write(tmp_path, [_pack(user="a"), _pack(user="b")], tail=b"junk")
    with UtmpReader(str(path), nrecs=4) as reader:
        assert [r.user for r in reader] == ["a", "b"]


def test_reader_empty_file(tmp_path):
    path = _write(tmp_path, [])
    with UtmpReader(str(path)) as reader:
        assert list(reader) == []


def test_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        UtmpReader(str(tmp_path / "absent"))


def test_reader_after_close_yields_nothing(tmp_path):
    path = _write(tmp_path, [_pack()])
    reader = UtmpReader(str(path))
    reader.close()
    reader.close()
    assert list(reader) == []


def test_reader_rejects_bad_batch_size(tmp_path):
    path = _write(tmp_path, [_pack()])
    with pytest.raises(ValueError):
        UtmpReader(str(path), nrecs=0)