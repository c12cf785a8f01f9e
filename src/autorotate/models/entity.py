"""SQLAlchemy model for ownable, sequentially numbered entities."""
from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from autorotate.db.session import Base


class Entity(Base):
    """Ownership record for a minted entity."""

    __tablename__ = "entity"

    entity_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    owner: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    # At most one approved delegate; cleared on every transfer.
    approved: Mapped[str | None] = mapped_column(Text, nullable=True)
