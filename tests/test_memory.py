import pytest

from minitalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"xxxxx")
    result = memset(buf, ord("A"), 3)
    assert result is buf
    assert buf == bytearray(b"AAAxx")


def test_memset_truncates_value_to_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"AA")


def test_memset_rejects_overlong_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf == bytearray(b"\x00\x00\x00\x00o")


@pytest.mark.parametrize("count,size", [(0, 4), (3, 4), (5, 1)])
def test_calloc_zeroed(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    memcpy(dst, b"abc", 3)
    assert dst[:3] == bytearray(b"abc")
    assert dst[3:] == bytearray(b"...")


def test_memcpy_zero_length_is_noop():
    dst = bytearray(b"keep")
    memcpy(dst, b"", 0)
    assert dst == bytearray(b"keep")


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 3)
    assert buf == bytearray(b"ababcf")


def test_memmove_backward_overlap_preserves_source():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[:4] == bytearray(original[2:6])
    assert buf[4:] == bytearray(original[4:])


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_respects_length():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_antisymmetric():
    a, b = b"\x00\xff", b"\x00\x01"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)