from __future__ import annotations

import pytest

from pcmwav.cursor import ByteCursor
from pcmwav.errors import NotRiffError, UnexpectedEofError


def test_reads_little_endian_fields() -> None:
    cursor = ByteCursor(b"\x01\x02\x03\x04\x05\x06")
    assert cursor.u16() == 0x0201
    assert cursor.u32() == 0x06050403
    assert cursor.at_end
    assert cursor.remaining == 0


def test_short_read_reports_offset_and_sizes() -> None:
    cursor = ByteCursor(b"\x01\x02\x03")
    cursor.skip(1)
    with pytest.raises(UnexpectedEofError) as exc:
        cursor.u32("sample rate")
    message = str(exc.value)
    assert "sample rate" in message
    assert "offset 1" in message
    assert "need 4 bytes, 2 available" in message


def test_skip_past_end_then_read_fails() -> None:
    cursor = ByteCursor(b"abcd")
    cursor.skip(10)
    assert cursor.at_end
    assert cursor.remaining == 0
    with pytest.raises(UnexpectedEofError):
        cursor.tag()


def test_expect_tag_raises_given_error() -> None:
    cursor = ByteCursor(b"RIFX")
    with pytest.raises(NotRiffError) as exc:
        cursor.expect_tag(b"RIFF", NotRiffError, "not a RIFF file")
    assert "b'RIFX'" in str(exc.value)
