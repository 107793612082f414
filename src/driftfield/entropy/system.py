"""System byte source using ``os.urandom()``.

This is the default source and the default fallback. It is
cryptographically secure and always available on all platforms.
"""

from __future__ import annotations

import os

from driftfield.entropy.base import ByteSource
from driftfield.entropy.registry import register_byte_source


@register_byte_source("system")
class SystemByteSource(ByteSource):
    """``os.urandom()`` wrapper, always available and cryptographically secure."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``; ``os.urandom()`` never fails."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG."""
        return os.urandom(n)

    def close(self) -> None:
        """No-op; no resources to release."""
