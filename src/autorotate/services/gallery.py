"""Caller-facing operations composing the gate, catalog, settings and resolver.

Every mutation runs its authorization check before touching any table, so a
rejected call leaves the catalog, defaults and overrides exactly as they were.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import Session

from autorotate.models import ImageRecord
from autorotate.services.access import AccessGate
from autorotate.services.catalog import ImageCatalog
from autorotate.services.errors import EmptyCatalogError
from autorotate.services.events import EventBus
from autorotate.services.metadata import build_metadata, encode_metadata_uri
from autorotate.services.registry import EntityRegistry, OwnershipRegistry
from autorotate.services.rotation import RotationSettings, select_index
from autorotate.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class Gallery:
    """Rotating image gallery for a set of ownable entities."""

    def __init__(
        self,
        db: Session,
        registry: OwnershipRegistry | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.db = db
        self.registry = registry if registry is not None else EntityRegistry(db)
        self.catalog = ImageCatalog(db, bus)
        self.settings = SettingsStore(db)
        self.gate = AccessGate(db, self.registry)

    # --- Catalog -----------------------------------------------------------------

    def push_image(self, caller: str | None, reference: str, attribution: str) -> int:
        """Append an image record (administrator only) and return its index."""
        self.gate.require_administrator(caller)
        return self.catalog.append(reference, attribution)

    def update_image(
        self,
        caller: str | None,
        index: int,
        reference: str,
        attribution: str,
    ) -> None:
        """Overwrite the image record at ``index`` (administrator only)."""
        self.gate.require_administrator(caller)
        self.catalog.update(index, reference, attribution)

    def image_at_index(self, index: int) -> ImageRecord:
        return self.catalog.get(index)

    def num_images(self) -> int:
        return self.catalog.size()

    def list_images(self, skip: int = 0, limit: int = 100) -> Sequence[ImageRecord]:
        return self.catalog.list(skip=skip, limit=limit)

    # --- Global defaults ---------------------------------------------------------

    def global_defaults(self) -> RotationSettings:
        return self.settings.get_global_defaults()

    def set_global_defaults(
        self,
        caller: str | None,
        tick_duration: int,
        index_offset: int,
        use_most_recent: bool,
    ) -> RotationSettings:
        self.gate.require_administrator(caller)
        return self.settings.set_global_defaults(tick_duration, index_offset, use_most_recent)

    def set_default_tick_duration(self, caller: str | None, tick_duration: int) -> RotationSettings:
        self.gate.require_administrator(caller)
        return self.settings.set_default_tick_duration(tick_duration)

    def set_default_index_offset(self, caller: str | None, index_offset: int) -> RotationSettings:
        self.gate.require_administrator(caller)
        return self.settings.set_default_index_offset(index_offset)

    def set_default_use_most_recent(
        self,
        caller: str | None,
        use_most_recent: bool,
    ) -> RotationSettings:
        self.gate.require_administrator(caller)
        return self.settings.set_default_use_most_recent(use_most_recent)

    # --- Entity overrides --------------------------------------------------------

    def entity_settings(self, entity_id: int) -> RotationSettings:
        """Return the entity's own override record (unset if never written)."""
        return self.settings.get_override(entity_id)

    def effective_settings(self, entity_id: int) -> RotationSettings:
        return self.settings.effective_settings(entity_id)

    def update_settings(
        self,
        caller: str | None,
        entity_id: int,
        tick_duration: int,
        index_offset: int,
        use_most_recent: bool,
        enabled: bool,
    ) -> RotationSettings:
        """Write the entity's override (owner or approved delegate only)."""
        self.gate.require_owner_or_approved(caller, entity_id)
        return self.settings.set_override(
            entity_id,
            tick_duration,
            index_offset,
            use_most_recent,
            enabled,
        )

    # --- Resolution --------------------------------------------------------------

    def image_for_entity_at_tick(self, entity_id: int, tick: int) -> ImageRecord:
        """Return the catalog record that applies to ``entity_id`` at ``tick``.

        Raises:
            EmptyCatalogError: If the catalog has no records.
        """
        effective = self.settings.effective_settings(entity_id)
        index = select_index(tick, effective, self.catalog.size())
        logger.debug("Entity %d at tick %d resolves to index %d", entity_id, tick, index)
        return self.catalog.get(index)

    def entity_metadata(self, entity_id: int, tick: int) -> dict[str, Any]:
        """Return the metadata document for ``entity_id`` at ``tick``.

        Works for any entity id and for an empty catalog.
        """
        try:
            image: ImageRecord | None = self.image_for_entity_at_tick(entity_id, tick)
        except EmptyCatalogError:
            image = None
        return build_metadata(entity_id, image)

    def entity_uri(self, entity_id: int, tick: int) -> str:
        """Return the metadata document encoded as a data URI."""
        return encode_metadata_uri(self.entity_metadata(entity_id, tick))

    # --- Administration ----------------------------------------------------------

    def administrator(self) -> str:
        return self.gate.administrator()

    def transfer_administration(self, caller: str | None, new_administrator: str) -> str:
        return self.gate.transfer_administration(caller, new_administrator)


def get_gallery(db: Session) -> Gallery:
    """Return a gallery bound to ``db`` using the table-backed registry."""
    return Gallery(db)
