"""Global default and per-entity rotation settings.

The store validates values but performs no authorization; the gallery runs
the access gate before calling any setter here.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from autorotate.core.settings import settings
from autorotate.models import EntityOverride, GlobalDefaults
from autorotate.services.errors import ZeroDurationError
from autorotate.services.rotation import MAX_STORED_INT, UNSET_OVERRIDE, RotationSettings

logger = logging.getLogger(__name__)

GLOBAL_DEFAULTS_ID = 1


def _check_duration(tick_duration: int) -> None:
    if tick_duration == 0:
        raise ZeroDurationError()
    if tick_duration < 0:
        raise ValueError("tick duration must be non-negative")
    if tick_duration > MAX_STORED_INT:
        raise ValueError("tick duration is too large")


def _check_offset(index_offset: int) -> None:
    if index_offset < 0:
        raise ValueError("index offset must be non-negative")
    if index_offset > MAX_STORED_INT:
        raise ValueError("index offset is too large")


class SettingsStore:
    """Read and write rotation settings records."""

    def __init__(self, db: Session) -> None:
        self.db = db

    # --- Global defaults ---------------------------------------------------------

    def get_global_defaults(self) -> RotationSettings:
        """Return the global defaults, which are always enabled.

        Falls back to the configured values when the row has not been seeded.
        """
        row = self.db.get(GlobalDefaults, GLOBAL_DEFAULTS_ID)
        if row is None:
            return RotationSettings(
                tick_duration=settings.default_tick_duration,
                index_offset=settings.default_index_offset,
                use_most_recent=settings.default_use_most_recent,
                enabled=True,
            )
        return RotationSettings(
            tick_duration=row.tick_duration,
            index_offset=row.index_offset,
            use_most_recent=row.use_most_recent,
            enabled=True,
        )

    def set_global_defaults(
        self,
        tick_duration: int,
        index_offset: int,
        use_most_recent: bool,
    ) -> RotationSettings:
        """Replace every field of the global defaults.

        Raises:
            ZeroDurationError: If ``tick_duration`` is zero.
        """
        _check_duration(tick_duration)
        _check_offset(index_offset)
        return self._write_defaults(
            tick_duration=tick_duration,
            index_offset=index_offset,
            use_most_recent=use_most_recent,
        )

    def set_default_tick_duration(self, tick_duration: int) -> RotationSettings:
        """Change only the default tick duration."""
        _check_duration(tick_duration)
        return self._write_defaults(tick_duration=tick_duration)

    def set_default_index_offset(self, index_offset: int) -> RotationSettings:
        """Change only the default index offset; zero is allowed."""
        _check_offset(index_offset)
        return self._write_defaults(index_offset=index_offset)

    def set_default_use_most_recent(self, use_most_recent: bool) -> RotationSettings:
        """Change only the default most-recent flag."""
        return self._write_defaults(use_most_recent=use_most_recent)

    def seed_global_defaults(self) -> bool:
        """Insert the configured defaults if no row exists yet.

        Returns:
            True if a row was created.
        """
        if self.db.get(GlobalDefaults, GLOBAL_DEFAULTS_ID) is not None:
            return False
        self.db.add(self._new_defaults_row())
        self.db.commit()
        logger.info(
            "Seeded global defaults: tick_duration=%d index_offset=%d use_most_recent=%s",
            settings.default_tick_duration,
            settings.default_index_offset,
            settings.default_use_most_recent,
        )
        return True

    def _new_defaults_row(self) -> GlobalDefaults:
        return GlobalDefaults(
            id=GLOBAL_DEFAULTS_ID,
            tick_duration=settings.default_tick_duration,
            index_offset=settings.default_index_offset,
            use_most_recent=settings.default_use_most_recent,
        )

    def _write_defaults(self, **fields: int | bool) -> RotationSettings:
        row = self.db.get(GlobalDefaults, GLOBAL_DEFAULTS_ID)
        if row is None:
            row = self._new_defaults_row()
            self.db.add(row)
        for key, value in fields.items():
            setattr(row, key, value)
        self.db.commit()

        current = self.get_global_defaults()
        logger.info(
            "Global defaults changed: tick_duration=%d index_offset=%d use_most_recent=%s",
            current.tick_duration,
            current.index_offset,
            current.use_most_recent,
        )
        return current

    # --- Entity overrides --------------------------------------------------------

    def get_override(self, entity_id: int) -> RotationSettings:
        """Return the entity's override, or the unset record if never written.

        Ids outside the storable range can never have been written.
        """
        if not 0 <= entity_id <= MAX_STORED_INT:
            return UNSET_OVERRIDE
        row = self.db.get(EntityOverride, entity_id)
        if row is None:
            return UNSET_OVERRIDE
        return RotationSettings(
            tick_duration=row.tick_duration,
            index_offset=row.index_offset,
            use_most_recent=row.use_most_recent,
            enabled=row.enabled,
        )

    def set_override(
        self,
        entity_id: int,
        tick_duration: int,
        index_offset: int,
        use_most_recent: bool,
        enabled: bool,
    ) -> RotationSettings:
        """Create or replace the entity's override.

        The duration is checked even when ``enabled`` is False.

        Raises:
            ZeroDurationError: If ``tick_duration`` is zero.
            ValueError: If any value is negative or too large to store.
        """
        if not 0 <= entity_id <= MAX_STORED_INT:
            raise ValueError("entity id is out of range")
        _check_duration(tick_duration)
        _check_offset(index_offset)

        row = self.db.get(EntityOverride, entity_id)
        if row is None:
            row = EntityOverride(entity_id=entity_id)
            self.db.add(row)
        row.tick_duration = tick_duration
        row.index_offset = index_offset
        row.use_most_recent = use_most_recent
        row.enabled = enabled
        self.db.commit()

        logger.info(
            "Override for entity %d: tick_duration=%d index_offset=%d "
            "use_most_recent=%s enabled=%s",
            entity_id,
            tick_duration,
            index_offset,
            use_most_recent,
            enabled,
        )
        return self.get_override(entity_id)

    def effective_settings(self, entity_id: int) -> RotationSettings:
        """Return the enabled override for ``entity_id`` or the global defaults."""
        override = self.get_override(entity_id)
        if override.enabled:
            return override
        return self.get_global_defaults()
