"""Name -> class lookup for byte sources.

Source modules in this package register themselves with
``@register_byte_source("<name>")`` when imported. Other distributions can
publish sources under the ``driftfield.byte_sources`` entry-point group;
those are imported the first time a name is missing from the table.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from driftfield.entropy.base import ByteSource

logger = logging.getLogger("driftfield")

_ENTRY_POINT_GROUP = "driftfield.byte_sources"


class ByteSourceRegistry:
    """Class-level table of byte source types, keyed by config name.

    ``DriftfieldConfig.entropy_source_type`` is resolved against this table.
    In-package registrations shadow plugins that reuse the same name.
    """

    _registry: ClassVar[dict[str, type[ByteSource]]] = {}
    _entry_points_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[ByteSource]], type[ByteSource]]:
        def decorator(source_cls: type[ByteSource]) -> type[ByteSource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[ByteSource]:
        """Return the class registered as *name*.

        Raises:
            KeyError: If neither a registration nor a plugin provides *name*.
        """
        if name not in cls._registry and not cls._entry_points_loaded:
            cls._load_entry_points()
        try:
            return cls._registry[name]
        except KeyError:
            known = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown byte source: {name!r}. Available: {known}") from None

    @classmethod
    def list_available(cls) -> list[str]:
        if not cls._entry_points_loaded:
            cls._load_entry_points()
        return sorted(cls._registry)

    @classmethod
    def _load_entry_points(cls) -> None:
        """Import plugin sources once; a plugin that fails to load is skipped."""
        cls._entry_points_loaded = True
        try:
            found = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Could not read %s entry points", _ENTRY_POINT_GROUP, exc_info=True)
            return

        for plugin in found:
            if plugin.name in cls._registry:
                continue
            try:
                source_cls = plugin.load()
            except Exception:
                logger.warning(
                    "Skipping byte source plugin %r (%s)", plugin.name, plugin.value, exc_info=True
                )
                continue
            cls._registry[plugin.name] = source_cls
            logger.debug("Registered byte source plugin %r", plugin.name)

    @classmethod
    def _reset(cls) -> None:
        """Clear all registrations (tests only)."""
        cls._registry.clear()
        cls._entry_points_loaded = False


register_byte_source = ByteSourceRegistry.register
