"""Abstract base class for all byte sources.

Every byte source (OS randomness, a seeded mock, a replayed buffer) implements
this interface. Subclasses must implement the four abstract members: ``name``,
``is_available``, ``get_random_bytes()``, and ``close()``. The ABC provides a
concrete ``health_check()`` and a length-checked ``sample()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from driftfield.exceptions import EntropyUnavailableError


class ByteSource(ABC):
    """Abstract base for all byte sources.

    Implementations must provide uniformly distributed bytes on demand. The
    analysis pipeline has no fallback if a source degrades to weaker
    randomness, so production sources should be cryptographically backed.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide bytes."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes.
        """

    def sample(self, n: int) -> bytes:
        """Fetch *n* bytes and verify the length.

        Args:
            n: Number of bytes to draw.

        Returns:
            Exactly *n* bytes.

        Raises:
            EntropyUnavailableError: If the source returns a short or long read.
        """
        data = self.get_random_bytes(n)
        if len(data) != n:
            raise EntropyUnavailableError(
                f"Source {self.name!r} returned {len(data)} bytes, expected {n}"
            )
        return data

    @abstractmethod
    def close(self) -> None:
        """Release resources (channels, connections, file handles)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
