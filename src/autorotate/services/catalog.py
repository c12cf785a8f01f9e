"""Append-only image catalog backed by the ``image_record`` table."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from autorotate.models import ImageRecord
from autorotate.services.errors import OutOfBoundsError
from autorotate.services.events import EventBus, ImageAppended, ImageUpdated, get_event_bus


class ImageCatalog:
    """Ordered list of image records addressed by dense zero-based index.

    Records are only ever appended or overwritten in place, so an index stays
    valid for the lifetime of the catalog. The catalog performs no
    authorization; callers go through the access gate first.
    """

    def __init__(self, db: Session, bus: EventBus | None = None) -> None:
        self.db = db
        self.bus = bus if bus is not None else get_event_bus()

    def size(self) -> int:
        """Return the number of records in the catalog."""
        return int(self.db.query(func.count()).select_from(ImageRecord).scalar() or 0)

    def append(self, reference: str, attribution: str) -> int:
        """Append a record and return its index."""
        index = self.size()
        self.db.add(ImageRecord(position=index, reference=reference, attribution=attribution))
        self.db.commit()

        self.bus.publish(ImageAppended(index=index, reference=reference, attribution=attribution))
        return index

    def update(self, index: int, reference: str, attribution: str) -> None:
        """Overwrite the record at ``index``.

        Raises:
            OutOfBoundsError: If no record exists at ``index``.
        """
        record = self._require(index)
        record.reference = reference
        record.attribution = attribution
        self.db.commit()

        self.bus.publish(ImageUpdated(index=index, reference=reference, attribution=attribution))

    def get(self, index: int) -> ImageRecord:
        """Return the record at ``index``.

        Raises:
            OutOfBoundsError: If no record exists at ``index``.
        """
        return self._require(index)

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[ImageRecord]:
        """Return records in index order with offset-based pagination."""
        return (
            self.db.query(ImageRecord)
            .order_by(ImageRecord.position)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def _require(self, index: int) -> ImageRecord:
        size = self.size()
        if index < 0 or index >= size:
            raise OutOfBoundsError(index, size)
        record = self.db.get(ImageRecord, index)
        if record is None:  # pragma: no cover - positions are dense
            raise OutOfBoundsError(index, size)
        return record
