"""Ownable-entity registry consulted by the access gate.

The gate only needs :class:`OwnershipRegistry`; :class:`EntityRegistry` is
the table-backed implementation used by the service, with mint, approval
and transfer semantics modelled on ERC-721 tokens.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from sqlalchemy import func
from sqlalchemy.orm import Session

from autorotate.models import Entity
from autorotate.services.errors import EntityNotFoundError, NotApprovedOrOwnerError
from autorotate.services.rotation import MAX_STORED_INT

logger = logging.getLogger(__name__)


@runtime_checkable
class OwnershipRegistry(Protocol):
    """Read side of an ownable-unit registry.

    Implementations must answer from current state on every call; the gate
    never caches the result.
    """

    def owner_of(self, entity_id: int) -> str | None:
        """Return the current owner, or None if the entity does not exist."""
        ...

    def approved_delegate_of(self, entity_id: int) -> str | None:
        """Return the single approved delegate, or None."""
        ...


class EntityRegistry:
    """Table-backed registry of sequentially numbered entities."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def owner_of(self, entity_id: int) -> str | None:
        entity = self._lookup(entity_id)
        return entity.owner if entity is not None else None

    def approved_delegate_of(self, entity_id: int) -> str | None:
        entity = self._lookup(entity_id)
        return entity.approved if entity is not None else None

    def balance_of(self, identity: str) -> int:
        """Return how many entities ``identity`` currently owns."""
        return int(
            self.db.query(func.count())
            .select_from(Entity)
            .filter(Entity.owner == identity)
            .scalar()
            or 0
        )

    def total_supply(self) -> int:
        """Return the number of entities minted so far."""
        return int(self.db.query(func.count()).select_from(Entity).scalar() or 0)

    def mint(self, to: str) -> int:
        """Issue the next entity id to ``to`` and return it."""
        if not to:
            raise ValueError("cannot mint to an empty identity")
        entity_id = self.total_supply()
        self.db.add(Entity(entity_id=entity_id, owner=to, approved=None))
        self.db.commit()
        logger.info("Minted entity %d to %s", entity_id, to)
        return entity_id

    def approve(self, caller: str, delegate: str | None, entity_id: int) -> None:
        """Set (or clear, with None) the approved delegate for an entity.

        Raises:
            EntityNotFoundError: If the entity was never minted.
            NotApprovedOrOwnerError: If ``caller`` is not the owner.
        """
        entity = self._require(entity_id)
        if caller != entity.owner:
            logger.warning("Rejected approval on entity %d by %s", entity_id, caller)
            raise NotApprovedOrOwnerError()
        if delegate == entity.owner:
            raise ValueError("owner cannot be its own approved delegate")
        entity.approved = delegate or None
        self.db.commit()
        logger.info("Entity %d approved delegate set to %s", entity_id, entity.approved)

    def transfer(self, caller: str, to: str, entity_id: int) -> None:
        """Move an entity to ``to`` and clear its approved delegate.

        Raises:
            EntityNotFoundError: If the entity was never minted.
            NotApprovedOrOwnerError: If ``caller`` is neither owner nor approved.
        """
        if not to:
            raise ValueError("cannot transfer to an empty identity")
        entity = self._require(entity_id)
        if caller not in (entity.owner, entity.approved):
            logger.warning("Rejected transfer of entity %d by %s", entity_id, caller)
            raise NotApprovedOrOwnerError()
        previous = entity.owner
        entity.owner = to
        entity.approved = None
        self.db.commit()
        logger.info("Transferred entity %d from %s to %s", entity_id, previous, to)

    def _require(self, entity_id: int) -> Entity:
        entity = self._lookup(entity_id)
        if entity is None:
            raise EntityNotFoundError(entity_id)
        return entity

    def _lookup(self, entity_id: int) -> Entity | None:
        # Ids that cannot be stored were never minted.
        if not 0 <= entity_id <= MAX_STORED_INT:
            return None
        return self.db.get(Entity, entity_id)
