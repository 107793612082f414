"""Primary/fallback byte source pair.

Reads go to the primary first. Only
:class:`~driftfield.exceptions.EntropyUnavailableError` (including a wrong
length from the primary) hands the read to the fallback; any other error
surfaces to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from driftfield.entropy.base import ByteSource
from driftfield.exceptions import EntropyUnavailableError

logger = logging.getLogger("driftfield")


class FallbackByteSource(ByteSource):
    """Serve bytes from *primary*, or from *fallback* when it is unavailable.

    The scanner reads :attr:`last_source_used` and :attr:`used_fallback`
    after each draw to tag readings and log records.
    """

    def __init__(self, primary: ByteSource, fallback: ByteSource) -> None:
        self._primary = primary
        self._fallback = fallback
        self._last_source_used: str = primary.name
        self._used_fallback = False

    @property
    def name(self) -> str:
        return f"{self._primary.name}+{self._fallback.name}"

    @property
    def is_available(self) -> bool:
        return self._primary.is_available or self._fallback.is_available

    @property
    def last_source_used(self) -> str:
        return self._last_source_used

    @property
    def used_fallback(self) -> bool:
        return self._used_fallback

    def get_random_bytes(self, n: int) -> bytes:
        """Draw *n* bytes, failing over once.

        Raises:
            EntropyUnavailableError: If the fallback fails too.
        """
        source = self._primary
        self._used_fallback = False
        try:
            data = source.sample(n)
        except EntropyUnavailableError as exc:
            logger.warning(
                "Byte source %r unavailable (%s), falling back to %r",
                self._primary.name,
                exc,
                self._fallback.name,
            )
            source = self._fallback
            data = source.sample(n)
            self._used_fallback = True
        self._last_source_used = source.name
        return data

    def close(self) -> None:
        self._primary.close()
        self._fallback.close()

    def health_check(self) -> dict[str, Any]:
        status = super().health_check()
        status.update(
            primary=self._primary.health_check(),
            fallback=self._fallback.health_check(),
            last_source_used=self._last_source_used,
        )
        return status
