import os

import pytest

from sigtalk.lines import LineReader, read_lines


@pytest.fixture
def make_fd(tmp_path):
    opened = []

    def _make(data):
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _make
    for fd in opened:
        os.close(fd)


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 1024])
def test_lines_split_on_newlines(make_fd, buffer_size):
    fd = make_fd(b"ab\ncd\nlast")
    assert list(read_lines(fd, buffer_size)) == [b"ab\n", b"cd\n", b"last"]


@pytest.mark.parametrize("buffer_size", [1, 2, 5])
def test_lines_join_back_to_input(make_fd, buffer_size):
    data = b"\n\nfirst line\nsecond\n\nthird\n"
    fd = make_fd(data)
    lines = list(read_lines(fd, buffer_size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines)


def test_empty_input_gives_none(make_fd):
    reader = LineReader(make_fd(b""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_read_line_after_end_keeps_returning_none(make_fd):
    reader = LineReader(make_fd(b"only\n"))
    assert reader.read_line() == b"only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_default_buffer_size(make_fd):
    reader = LineReader(make_fd(b"x\n"))
    assert reader.buffer_size == 2


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -4])
def test_non_positive_buffer_rejected(make_fd, size):
    with pytest.raises(ValueError):
        LineReader(make_fd(b"data\n"), size)


def test_closed_descriptor_raises():
    read_end, write_end = os.pipe()
    os.close(read_end)
    os.close(write_end)
    reader = LineReader(read_end)
    with pytest.raises(OSError):
        reader.read_line()


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"one\ntwo\n")
        os.close(write_end)
        assert list(read_lines(read_end, 3)) == [b"one\n", b"two\n"]
    finally:
        os.close(read_end)