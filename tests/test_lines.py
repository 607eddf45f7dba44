import io

import pytest

from minitalk.lines import LineReader, iter_lines

DATA = b"a\nbc\n\nlonger line of text\nd"


class _RecordingStream:
    def __init__(self, data):
        self._inner = io.BytesIO(data)
        self.sizes = []

    def read(self, size):
        self.sizes.append(size)
        return self._inner.read(size)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_lines_split_on_newline(size):
    lines = list(LineReader(io.BytesIO(DATA), size))
    assert lines == DATA.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 42])
def test_concatenation_restores_input(size):
    assert b"".join(iter_lines(io.BytesIO(DATA), size)) == DATA


def test_text_stream():
    text = "first\nsecond\nthird"
    assert list(iter_lines(io.StringIO(text), 4)) == ["first\n", "second\n", "third"]


def test_every_line_but_last_ends_with_newline():
    lines = list(iter_lines(io.BytesIO(DATA), 3))
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert not lines[-1].endswith(b"\n")


def test_empty_stream_gives_none():
    assert LineReader(io.BytesIO(b"")).next_line() is None


def test_none_after_exhaustion():
    reader = LineReader(io.BytesIO(b"x\n"), 8)
    assert reader.next_line() == b"x\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_reads_use_buffer_size():
    stream = _RecordingStream(DATA)
    list(LineReader(stream, 7))
    assert stream.sizes
    assert set(stream.sizes) == {7}


def test_default_buffer_size():
    stream = _RecordingStream(b"abc\n")
    assert LineReader(stream).next_line() == b"abc\n"
    assert stream.sizes[0] == 42


def test_leftover_kept_between_calls():
    stream = _RecordingStream(b"one\ntwo\n")
    reader = LineReader(stream, 100)
    assert reader.next_line() == b"one\n"
    reads_after_first = len(stream.sizes)
    assert reader.next_line() == b"two\n"
    assert len(stream.sizes) == reads_after_first


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(DATA), size)


def test_iter_lines_invalid_buffer_size():
    with pytest.raises(ValueError):
        list(iter_lines(io.BytesIO(DATA), 0))