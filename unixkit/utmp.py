"""Read login records from a utmp file, a batch of records per read."""

import os
import struct
from dataclasses import dataclass

UTMP_FILE = "/var/run/utmp"
NRECS = 16
USER_PROCESS = 7

# The utmp record layout on Linux, 384 bytes:
# type, pad, pid, line[32], id[4], user[32], host[256],
# exit termination, exit status, session, tv_sec, tv_usec,
# addr_v6[16], unused[20].
_RECORD = struct.Struct("<hxxi32s4s32s256shhiii16s20x")
RECORD_SIZE = _RECORD.size


def _text(raw):
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass(frozen=True)
class UtmpRecord:
    """One login record."""

    type: int
    pid: int
    line: str
    id: str
    user: str
    host: str
    exit_termination: int
    exit_status: int
    session: int
    time: int
    usec: int
    addr: bytes


def _from_fields(fields):
    (rtype, pid, line, ident, user, host, term, status,
     session, sec, usec, addr) = fields
    return UtmpRecord(
        type=rtype,
        pid=pid,
        line=_text(line),
        id=_text(ident),
        user=_text(user),
        host=_text(host),
        exit_termination=term,
        exit_status=status,
        session=session,
        time=sec,
        usec=usec,
        addr=addr,
    )


def parse_record(data):
    """Decode exactly one RECORD_SIZE-byte record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(
            f"a utmp record is {RECORD_SIZE} bytes, got {len(data)}"
        )
    return _from_fields(_RECORD.unpack(data))


class UtmpReader:
    """Iterate over the records of a utmp file, reading nrecs at a time.

    Opening a missing or unreadable file raises OSError.
    """

    def __init__(self, path=UTMP_FILE, nrecs=NRECS):
        if nrecs <= 0:
            raise ValueError("nrecs must be positive")
        self._nrecs = nrecs
        self._fd = os.open(path, os.O_RDONLY)

    def __iter__(self):
        while self._fd is not None:
            chunk = os.read(self._fd, self._nrecs * RECORD_SIZE)
            count = len(chunk) // RECORD_SIZE
            if count == 0:
                return
            for fields in _RECORD.iter_unpack(chunk[: count * RECORD_SIZE]):
                yield _from_fields(fields)

    def close(self):
        """Close the file; closing twice is harmless."""
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False