import io
import os

import pytest

from ftkit.line_reader import DEFAULT_BUFFER_SIZE, LineReader, main

SAMPLE = b"first line\nsecond\n\nthird without end"


@pytest.mark.parametrize("size", [1, 2, 3, 7, DEFAULT_BUFFER_SIZE, 10000])
def test_lines_rejoin_to_input(size):
    lines = list(LineReader(io.BytesIO(SAMPLE), size))
    assert b"".join(lines) == SAMPLE
    assert lines == SAMPLE.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 5, DEFAULT_BUFFER_SIZE])
def test_every_line_but_last_ends_with_newline(size):
    data = b"a\nbb\nccc\n"
    lines = list(LineReader(io.BytesIO(data), size))
    assert all(line.endswith(b"\n") for line in lines)
    assert len(lines) == data.count(b"\n")


def test_read_line_returns_none_at_end():
    reader = LineReader(io.BytesIO(b"only\n"), 4)
    assert reader.read_line() == b"only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_source_yields_nothing():
    assert list(LineReader(io.BytesIO(b""))) == []
    assert LineReader(io.BytesIO(b"")).read_line() is None


def test_text_source_yields_str():
    text = "alpha\nbeta\n"
    lines = list(LineReader(io.StringIO(text), 3))
    assert lines == ["alpha\n", "beta\n"]


def test_file_descriptor_source(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(SAMPLE)
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(LineReader(fd, 5))
    finally:
        os.close(fd)
    assert lines == SAMPLE.splitlines(keepends=True)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -4])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), size)


def test_unreadable_source_rejected():
    with pytest.raises(TypeError):
        LineReader(object())


class _FailingSource:
    def __init__(self):
        self._steps = [b"ab", OSError("boom"), b"cd\n"]

    def read(self, size):
        if not self._steps:
            return b""
        step = self._steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step


def test_read_error_discards_buffered_data():
    reader = LineReader(_FailingSource(), 2)
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.read_line() == b"cd\n"
    assert reader.read_line() is None


def test_main_prints_each_line_with_extra_newline(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a\nb")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "a\n\nb\n"


def test_main_requires_exactly_one_argument(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err
    assert main(["x", "y"]) == 1


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().err