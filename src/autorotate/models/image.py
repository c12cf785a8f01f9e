"""SQLAlchemy model for catalog image records."""
from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from autorotate.db.session import Base


class ImageRecord(Base):
    """One catalog entry, addressed by its dense zero-based position."""

    __tablename__ = "image_record"

    # Assigned by the catalog as the size before the append; never reused.
    position: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    # Opaque reference (URI, content hash, ...); content is never stored here.
    reference: Mapped[str] = mapped_column(Text, nullable=False)
    attribution: Mapped[str] = mapped_column(Text, nullable=False)
