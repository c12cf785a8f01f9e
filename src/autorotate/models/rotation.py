"""Rotation settings records: the global defaults and per-entity overrides."""
from sqlalchemy import BigInteger, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from autorotate.db.session import Base


class GlobalDefaults(Base):
    """Single-row table holding the administrator-wide rotation defaults."""

    __tablename__ = "global_defaults"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, default=1)
    tick_duration: Mapped[int] = mapped_column(BigInteger, nullable=False)
    index_offset: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    use_most_recent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class EntityOverride(Base):
    """Per-entity settings written by the entity's owner or approved delegate.

    Rows only exist for entities that have been written to at least once.
    """

    __tablename__ = "entity_override"

    entity_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    tick_duration: Mapped[int] = mapped_column(BigInteger, nullable=False)
    index_offset: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    use_most_recent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
