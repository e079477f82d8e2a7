from abc import ABC, abstractmethod


class Send(ABC):
    """Dane gotowe do wysłania kanałem wyjściowym."""

    @abstractmethod
    def write_to(self, channel) -> None:
        """
        Zapisuje dane do kanału.

        Args:
            channel: Obiekt z metodą `write(data)` (np. `asyncio.StreamWriter`,
                `io.BufferedWriter`).
        """
        pass


class BufferSend(Send):
    """Wysyłka wcześniej zserializowanego bufora bez dalszych przekształceń.

    Błędy zapisu zgłaszane przez kanał są propagowane bez zmian.
    """

    def __init__(self, buffer):
        if not isinstance(buffer, (bytes, bytearray, memoryview)):
            raise TypeError(f"buffer must be bytes-like, got {type(buffer).__name__}")
        self._buffer = buffer

    @property
    def buffer(self):
        return self._buffer

    @property
    def size(self) -> int:
        return memoryview(self._buffer).nbytes

    def write_to(self, channel) -> None:
        channel.write(self._buffer)
