import pytest

from easyreq.callback import (
    DebugCallback,
    HeaderCallback,
    InfoType,
    ProgressCallback,
    ReadCallback,
    WriteCallback,
)


def test_read_callback_default_size_unknown():
    cb = ReadCallback(lambda size, userdata: b"")
    assert cb.size == -1
    assert cb.userdata == 0


def test_read_callback_returns_data_and_passes_userdata():
    seen = []

    def reader(size, userdata):
        seen.append((size, userdata))
        return b"abc"

    cb = ReadCallback(reader, userdata=7, size=3)
    assert cb(16) == b"abc"
    assert seen == [(16, 7)]


def test_read_callback_abort():
    assert ReadCallback(lambda size, userdata: None)(10) is None


def test_read_callback_too_much_data():
    cb = ReadCallback(lambda size, userdata: b"x" * (size + 1))
    with pytest.raises(ValueError):
        cb(4)


def test_header_callback_result():
    lines = []
    cb = HeaderCallback(lambda line, userdata: lines.append(line) is None)
    assert cb("Content-Type: text/html\r\n") is True
    assert lines == ["Content-Type: text/html\r\n"]
    assert HeaderCallback(lambda line, userdata: False)("x") is False


def test_write_callback_collects_chunks():
    chunks = []

    def writer(data, userdata):
        chunks.append(data)
        return userdata

    assert WriteCallback(writer, userdata=True)("Hello ") is True
    assert WriteCallback(writer, userdata=False)("world!") is False
    assert "".join(chunks) == "Hello world!"


def test_progress_callback_argument_order():
    received = []

    def progress(dt, dn, ut, un, userdata):
        received.append((dt, dn, ut, un, userdata))
        return dn < dt

    cb = ProgressCallback(progress, userdata="ud")
    assert cb(100, 10, 0, 0) is True
    assert cb(100, 100, 0, 0) is False
    assert received[0] == (100, 10, 0, 0, "ud")


def test_debug_callback_converts_type():
    received = []
    cb = DebugCallback(lambda kind, data, userdata: received.append((kind, data, userdata)))
    assert cb(2, "GET / HTTP/1.1") is None
    assert received == [(InfoType.HEADER_OUT, "GET / HTTP/1.1", 0)]


def test_debug_callback_rejects_unknown_type():
    cb = DebugCallback(lambda kind, data, userdata: None)
    with pytest.raises(ValueError):
        cb(42, "x")


def test_info_type_values():
    kinds = []
    cb = DebugCallback(lambda kind, data, userdata: kinds.append(kind))
    for value in (0, 6):
        cb(value, "x")
    assert kinds == [InfoType.TEXT, InfoType.SSL_DATA_OUT]
    assert [int(kind) for kind in kinds] == [0, 6]
    assert len(InfoType) == 7