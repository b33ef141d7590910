import pytest

from uartcon.serial_port import StreamPort


class FakeDevice:
    def __init__(self, incoming=b"", accept=None):
        self.incoming = bytearray(incoming)
        self.chunks = []
        self.accept = list(accept or [])

    def read(self, size):
        data = bytes(self.incoming[:size])
        del self.incoming[:size]
        return data

    def write(self, chunk):
        self.chunks.append(chunk)
        if self.accept:
            return self.accept.pop(0)
        return None


def test_read_returns_available_bytes():
    device = FakeDevice(b"hello")
    port = StreamPort(device.read, device.write)
    assert port.read(32) == b"hello"
    assert port.read(32) == b""


def test_read_limits_to_size():
    device = FakeDevice(b"abcdef")
    port = StreamPort(device.read, device.write)
    assert port.read(4) == b"abcd"
    assert port.read(4) == b"ef"


def test_read_truncates_oversized_reader():
    port = StreamPort(lambda size: b"0123456789", lambda chunk: None)
    assert port.read(3) == b"012"


def test_read_handles_none():
    port = StreamPort(lambda size: None, lambda chunk: None)
    assert port.read(8) == b""


def test_read_nonpositive_size():
    device = FakeDevice(b"abc")
    port = StreamPort(device.read, device.write)
    assert port.read(0) == b""
    assert device.incoming == bytearray(b"abc")


def test_write_splits_into_chunks():
    device = FakeDevice()
    port = StreamPort(device.read, device.write, chunk_size=4)
    data = b"abcdefghij"
    assert port.write(data) == len(data)
    assert all(len(chunk) <= 4 for chunk in device.chunks)
    assert b"".join(device.chunks) == data


def test_write_retries_partial_writes():
    device = FakeDevice(accept=[0, 2, 0, 1])
    port = StreamPort(device.read, device.write, chunk_size=8)
    data = b"serial"
    assert port.write(data) == len(data)
    written = b"".join(
        chunk[:n]
        for chunk, n in zip(device.chunks, [0, 2, 0, 1] + [None] * 10)
    )
    assert written == data


def test_write_empty():
    device = FakeDevice()
    port = StreamPort(device.read, device.write)
    assert port.write(b"") == 0
    assert device.chunks == []


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        StreamPort(lambda size: b"", lambda chunk: None, chunk_size=0)