"""Byte-stream framer: cuts a continuous byte stream into NMEA frames.

State machine:

    idle    --'$'-->      filling   (buffer = "$")
    idle    --other-->    idle      (byte dropped)
    filling --'\\n'-->     idle      (buffer handed to on_frame, then cleared)
    filling --overflow--> idle      (buffer dropped silently)
    filling --other-->    filling   (byte appended)

Every entry point (single byte, buffer, text line) goes through
``read_byte`` so the framing is identical whichever one the caller uses.
"""

from collections.abc import Callable, Iterable

__all__ = ["DEFAULT_MAX_BUFFER_SIZE", "SentenceFramer"]

# Limit on a frame that never sees a newline; protects against garbage
# streams growing the buffer without bound.
DEFAULT_MAX_BUFFER_SIZE = 2000

_START_BYTE = ord("$")
_NEWLINE = ord("\n")
_LINE_TERMINATOR = b"\r\n"


class SentenceFramer:
    """Accumulate bytes between '$' and '\\n' and emit each complete frame.

    Args:
        on_frame: Called with the frame text, including its trailing "\\n".
            Decoded as latin-1, so each character is one received byte.
            Exceptions it raises propagate to the caller of the ``read_*``
            method, after the framer has reset itself.
        max_buffer_size: Largest frame kept before it is discarded.
    """

    def __init__(
        self,
        on_frame: Callable[[str], None],
        max_buffer_size: int = DEFAULT_MAX_BUFFER_SIZE,
    ) -> None:
        self._on_frame = on_frame
        self.max_buffer_size = max_buffer_size
        self._buffer = bytearray()
        self._filling = False

    @property
    def filling(self) -> bool:
        """True while a frame has been started but not terminated."""
        return self._filling

    @property
    def buffered(self) -> bytes:
        """Bytes of the frame currently being assembled."""
        return bytes(self._buffer)

    def reset(self) -> None:
        """Drop any partial frame and return to idle."""
        self._buffer.clear()
        self._filling = False

    def read_byte(self, byte: int) -> None:
        """Advance the state machine by one byte."""
        if not self._filling:
            if byte == _START_BYTE:
                self._filling = True
                self._buffer.append(byte)
            return

        if byte == _NEWLINE:
            self._buffer.append(byte)
            frame = self._buffer.decode("latin-1")
            try:
                self._on_frame(frame)
            finally:
                self.reset()
            return

        if len(self._buffer) < self.max_buffer_size:
            self._buffer.append(byte)
        else:
            self.reset()

    def read_buffer(self, data: Iterable[int], size: int | None = None) -> None:
        """Feed the first ``size`` bytes of ``data`` (all of it by default)."""
        if size is not None:
            data = bytes(data)[:size]
        for byte in data:
            self.read_byte(byte)

    def read_line(self, line: str) -> None:
        """Feed a line of text followed by a "\\r\\n" terminator."""
        self.read_buffer(line.encode("latin-1", errors="replace"))
        self.read_buffer(_LINE_TERMINATOR)
