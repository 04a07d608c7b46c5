import pytest

from fillit.memory import (
    bzero,
    memalloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_takes_value_modulo_256():
    buf = bytearray(2)
    memset(buf, 256 + 7, 2)
    assert buf == bytearray([7, 7])


def test_memset_rejects_overrun():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    assert bzero(buf, 2) is None
    assert buf == bytearray(b"\x00\x00cd")


def test_memcpy_copies_n_bytes():
    dst = bytearray(b"......")
    result = memcpy(dst, b"hello!", 5)
    assert result is dst
    assert dst == bytearray(b"hello.")


def test_memcpy_same_buffer_unchanged():
    buf = bytearray(b"same")
    assert memcpy(buf, buf, 4) == bytearray(b"same")


def test_memccpy_stops_after_stop_byte():
    dst = bytearray(b"--------")
    offset = memccpy(dst, b"abc:defg", ord(":"), 8)
    assert offset == len(b"abc:")
    assert dst == bytearray(b"abc:----")


def test_memccpy_without_stop_copies_all_and_returns_none():
    dst = bytearray(4)
    assert memccpy(dst, b"wxyz", ord("!"), 4) is None
    assert dst == bytearray(b"wxyz")


def test_memccpy_same_buffer():
    buf = bytearray(b"abc")
    assert memccpy(buf, buf, ord("b"), 3) == 0


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_same_offset_returns_none():
    buf = bytearray(b"abc")
    assert memmove(buf, 1, 1, 2) is None
    assert buf == bytearray(b"abc")


def test_memmove_rejects_overrun():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_and_antisymmetry():
    forward = memcmp(b"abc", b"abd", 3)
    assert forward < 0
    assert memcmp(b"abd", b"abc", 3) == -forward


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memalloc_zero_filled():
    buf = memalloc(5)
    assert buf == bytearray(5)
    assert all(byte == 0 for byte in buf)


def test_memalloc_rejects_negative():
    with pytest.raises(ValueError):
        memalloc(-1)