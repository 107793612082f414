"""Replay byte source: serves a fixed buffer, cycling when exhausted."""

from __future__ import annotations

from driftfield.entropy.base import ByteSource
from driftfield.exceptions import EntropyUnavailableError


class ReplayByteSource(ByteSource):
    """Replays a recorded buffer so a scan can be reproduced byte for byte.

    Reads continue where the previous one stopped and wrap around to the
    start of the buffer.

    Args:
        data: The recorded bytes to replay. Must not be empty.
    """

    def __init__(self, data: bytes) -> None:
        if not data:
            raise ValueError("ReplayByteSource needs at least one byte")
        self._data = bytes(data)
        self._offset = 0
        self._closed = False

    @property
    def name(self) -> str:
        return "replay"

    @property
    def is_available(self) -> bool:
        return not self._closed

    def get_random_bytes(self, n: int) -> bytes:
        if self._closed:
            raise EntropyUnavailableError("Replay source is closed")
        out = bytearray()
        while len(out) < n:
            chunk = self._data[self._offset : self._offset + (n - len(out))]
            out += chunk
            self._offset = (self._offset + len(chunk)) % len(self._data)
        return bytes(out)

    def close(self) -> None:
        self._closed = True
