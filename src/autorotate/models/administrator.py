"""System-level bookkeeping models."""
from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from autorotate.db.session import Base


class Administrator(Base):
    """The single identity allowed to mutate the catalog and global defaults."""

    __tablename__ = "administrator"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, default=1)
    identity: Mapped[str] = mapped_column(Text, nullable=False)
