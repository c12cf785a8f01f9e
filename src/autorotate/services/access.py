"""Authorization checks guarding every mutating operation."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from autorotate.core.settings import settings
from autorotate.models import Administrator
from autorotate.services.errors import NotAdministratorError, NotApprovedOrOwnerError
from autorotate.services.registry import OwnershipRegistry

logger = logging.getLogger(__name__)

ADMINISTRATOR_ID = 1


class AccessGate:
    """Administrator and owner-or-approved predicates.

    The administrator identity lives in the ``administrator`` table and falls
    back to the configured identity until the first handover. Ownership is
    read from the registry on every check.
    """

    def __init__(self, db: Session, registry: OwnershipRegistry) -> None:
        self.db = db
        self.registry = registry

    def administrator(self) -> str:
        """Return the current administrator identity."""
        row = self.db.get(Administrator, ADMINISTRATOR_ID)
        return row.identity if row is not None else settings.administrator

    def is_administrator(self, caller: str | None) -> bool:
        return bool(caller) and caller == self.administrator()

    def is_owner_or_approved(self, caller: str | None, entity_id: int) -> bool:
        if not caller:
            return False
        if caller == self.registry.owner_of(entity_id):
            return True
        return caller == self.registry.approved_delegate_of(entity_id)

    def require_administrator(self, caller: str | None) -> None:
        """Raise NotAdministratorError unless ``caller`` is the administrator."""
        if not self.is_administrator(caller):
            logger.warning("Rejected administrator-only operation from %s", caller)
            raise NotAdministratorError()

    def require_owner_or_approved(self, caller: str | None, entity_id: int) -> None:
        """Raise NotApprovedOrOwnerError unless ``caller`` controls the entity."""
        if not self.is_owner_or_approved(caller, entity_id):
            logger.warning("Rejected override write on entity %d from %s", entity_id, caller)
            raise NotApprovedOrOwnerError()

    def transfer_administration(self, caller: str | None, new_administrator: str) -> str:
        """Hand administration to ``new_administrator`` in a single commit.

        The previous administrator loses its rights as soon as this returns.
        """
        self.require_administrator(caller)
        if not new_administrator or not new_administrator.strip():
            raise ValueError("new administrator must not be empty")

        row = self.db.get(Administrator, ADMINISTRATOR_ID)
        if row is None:
            row = Administrator(id=ADMINISTRATOR_ID, identity=new_administrator)
            self.db.add(row)
        else:
            row.identity = new_administrator
        self.db.commit()

        logger.info("Administration transferred from %s to %s", caller, new_administrator)
        return new_administrator

    def seed_administrator(self) -> bool:
        """Persist the configured administrator if no handover has happened."""
        if self.db.get(Administrator, ADMINISTRATOR_ID) is not None:
            return False
        self.db.add(Administrator(id=ADMINISTRATOR_ID, identity=settings.administrator))
        self.db.commit()
        logger.info("Seeded administrator %s", settings.administrator)
        return True
