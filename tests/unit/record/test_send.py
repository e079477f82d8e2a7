"""Testy jednostkowe BufferSend."""

import io
from unittest.mock import Mock

import pytest

from config_commons.record import BufferSend, Send


class TestBufferSend:
    """Testy wysyłki zserializowanego bufora."""

    def test_writes_buffer_unchanged(self):
        channel = Mock()
        payload = b"\x00\x01payload"

        BufferSend(payload).write_to(channel)

        channel.write.assert_called_once_with(payload)
        assert channel.write.call_args[0][0] is payload

    def test_writes_to_binary_stream(self):
        stream = io.BytesIO()
        BufferSend(bytearray(b"abc")).write_to(stream)
        assert stream.getvalue() == b"abc"

    def test_write_error_propagates_unmodified(self):
        error = ConnectionResetError("peer closed")
        channel = Mock()
        channel.write.side_effect = error

        with pytest.raises(ConnectionResetError) as exc_info:
            BufferSend(b"x").write_to(channel)

        assert exc_info.value is error

    def test_size(self):
        assert BufferSend(b"12345").size == 5
        assert BufferSend(memoryview(b"123")).size == 3

    def test_rejects_non_bytes(self):
        with pytest.raises(TypeError):
            BufferSend("text")

    def test_is_a_send(self):
        assert isinstance(BufferSend(b""), Send)
