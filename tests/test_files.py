import os
import re

import pytest

from soshell.files import (
    MAX_READ,
    close_fd,
    fd_is_valid,
    file_info,
    format_bytes,
    is_jpeg,
    open_file,
    read_fd,
)


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"hello world")
    return path


def test_fd_is_valid_for_open_descriptor(sample):
    fd = os.open(sample, os.O_RDONLY)
    try:
        assert fd_is_valid(fd) is True
    finally:
        os.close(fd)


def test_fd_is_valid_false_after_close(sample):
    fd = os.open(sample, os.O_RDONLY)
    os.close(fd)
    assert fd_is_valid(fd) is False


def test_fd_is_valid_false_for_huge_descriptor():
    assert fd_is_valid(10_000_000) is False


def test_open_file_returns_readable_descriptor(sample):
    fd = open_file(str(sample))
    try:
        assert os.read(fd, 100) == b"hello world"
    finally:
        os.close(fd)


def test_open_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_file(str(tmp_path / "missing"))


def test_close_fd_closes(sample):
    fd = os.open(sample, os.O_RDONLY)
    close_fd(fd)
    assert fd_is_valid(fd) is False


def test_close_fd_twice_raises(sample):
    fd = os.open(sample, os.O_RDONLY)
    close_fd(fd)
    with pytest.raises(OSError):
        close_fd(fd)


def test_format_bytes_empty():
    assert format_bytes(b"") == "ASCII: \nHex:   "


def test_format_bytes_marks_non_printable():
    assert format_bytes(b"A\x00") == "ASCII: A.\nHex:   41 00 "


def test_format_bytes_hex_round_trip():
    data = bytes(range(256))
    ascii_line, hex_line = format_bytes(data).split("\n")
    assert bytes.fromhex(hex_line[len("Hex:   "):]) == data
    assert len(ascii_line) == len("ASCII: ") + len(data)


def test_format_bytes_printable_text_kept():
    ascii_line = format_bytes(b"hello world").split("\n")[0]
    assert ascii_line == "ASCII: hello world"


def test_read_fd_reads_requested_amount(sample):
    fd = os.open(sample, os.O_RDONLY)
    try:
        assert read_fd(fd, 5) == b"hello"
        assert read_fd(fd, 100) == b" world"
    finally:
        os.close(fd)


def test_read_fd_caps_at_limit(tmp_path):
    path = tmp_path / "big.bin"
    path.write_bytes(b"x" * (MAX_READ + 1000))
    fd = os.open(path, os.O_RDONLY)
    try:
        assert len(read_fd(fd, MAX_READ * 3)) == MAX_READ
    finally:
        os.close(fd)


def test_read_fd_negative_raises(sample):
    fd = os.open(sample, os.O_RDONLY)
    try:
        with pytest.raises(ValueError):
            read_fd(fd, -1)
    finally:
        os.close(fd)


def test_read_fd_closed_raises(sample):
    fd = os.open(sample, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        read_fd(fd, 4)


def test_file_info_counts_listed_descriptors():
    report = file_info()
    listed = re.search(r"Descritores abertos: ([\d ]*)\n", report).group(1).split()
    total = int(re.search(r"Total de ficheiros abertos: (\d+)", report).group(1))
    assert total == len(listed)


def test_file_info_lists_new_descriptor(sample):
    fd = os.open(sample, os.O_RDONLY)
    try:
        report = file_info()
    finally:
        os.close(fd)
    listed = re.search(r"Descritores abertos: ([\d ]*)\n", report).group(1).split()
    if fd < 64:
        assert str(fd) in listed
    else:
        assert all(int(n) < 64 for n in listed)


@pytest.mark.parametrize("marker", [0xE0, 0xE1, 0xE2, 0xE8])
def test_is_jpeg_accepts_markers(tmp_path, marker):
    path = tmp_path / "img.jpg"
    path.write_bytes(b"\xff\xd8\xff" + bytes([marker]) + b"rest")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert is_jpeg(fd) is True
        assert os.lseek(fd, 0, os.SEEK_CUR) == 0
    finally:
        os.close(fd)


def test_is_jpeg_rejects_other_marker(tmp_path):
    path = tmp_path / "img.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe3rest")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert is_jpeg(fd) is False
    finally:
        os.close(fd)


def test_is_jpeg_rejects_text(sample):
    fd = os.open(sample, os.O_RDONLY)
    try:
        assert is_jpeg(fd) is False
    finally:
        os.close(fd)


def test_is_jpeg_short_file(tmp_path):
    path = tmp_path / "short"
    path.write_bytes(b"\xff\xd8")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert is_jpeg(fd) is False
    finally:
        os.close(fd)