"""Byte source subsystem for driftfield.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from driftfield.entropy import ByteSource, ByteSourceRegistry
    from driftfield.entropy import SystemByteSource, MockByteSource
"""

from driftfield.entropy.base import ByteSource
from driftfield.entropy.fallback import FallbackByteSource
from driftfield.entropy.mock import MockByteSource
from driftfield.entropy.registry import ByteSourceRegistry, register_byte_source
from driftfield.entropy.replay import ReplayByteSource
from driftfield.entropy.system import SystemByteSource

__all__ = [
    "ByteSource",
    "ByteSourceRegistry",
    "FallbackByteSource",
    "MockByteSource",
    "ReplayByteSource",
    "SystemByteSource",
    "register_byte_source",
]
