"""SQLAlchemy ORM models — maps to the website_hit_sequence table."""

from sqlalchemy import BigInteger, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.adapters.persistence.database import Base


class SequenceModel(Base):
    __tablename__ = "website_hit_sequence"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sequence_name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    sequence_count: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0, server_default="0"
    )

    __table_args__ = (
        CheckConstraint("sequence_count >= 0", name="ck_sequence_count_non_negative"),
    )
