"""
Preference model: one row per key of the local key-value store
"""
from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from expense_tracker.db.base import Base, TimestampMixin


class Preference(Base, TimestampMixin):
    """
    Preference model

    Holds an opaque blob under a unique key, the way a platform
    preference store does. The transaction list is a single row.
    """
    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        comment="Fixed identifier of the stored value"
    )

    value: Mapped[bytes] = mapped_column(
        LargeBinary,
        nullable=False,
        comment="Serialized payload"
    )

    def __repr__(self) -> str:
        return f"<Preference(key={self.key}, size={len(self.value or b'')})>"
