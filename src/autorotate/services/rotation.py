"""Deterministic mapping from a tick value to a catalog position."""

from __future__ import annotations

from dataclasses import dataclass

from autorotate.services.errors import EmptyCatalogError


@dataclass(frozen=True)
class RotationSettings:
    """Rotation parameters for an entity or for the global defaults.

    ``enabled`` only matters for entity overrides; a disabled override means
    "use the global defaults instead".
    """

    tick_duration: int
    index_offset: int = 0
    use_most_recent: bool = False
    enabled: bool = False


# Largest value a BigInteger column holds; ids and settings above it are never stored.
MAX_STORED_INT = 2**63 - 1

# What an entity that never wrote an override reads back.
UNSET_OVERRIDE = RotationSettings(tick_duration=0, index_offset=0, use_most_recent=False, enabled=False)


def select_index(tick: int, settings: RotationSettings, catalog_size: int) -> int:
    """Return the catalog index selected at ``tick``.

    With ``use_most_recent`` the newest record wins regardless of tick,
    duration or offset. Otherwise each record is held for ``tick_duration``
    ticks, starting from ``index_offset`` and wrapping around the catalog.

    Args:
        tick: Externally supplied counter value.
        settings: Effective settings for the entity being resolved.
        catalog_size: Number of records currently in the catalog.

    Raises:
        EmptyCatalogError: If the catalog has no records.
        ValueError: If ``tick`` is negative or the duration is not positive.
    """
    if catalog_size <= 0:
        raise EmptyCatalogError()
    if tick < 0:
        raise ValueError("tick must be non-negative")

    if settings.use_most_recent:
        return catalog_size - 1

    if settings.tick_duration <= 0:
        raise ValueError("tick duration must be greater than zero")
    position = tick // settings.tick_duration + settings.index_offset
    return position % catalog_size
