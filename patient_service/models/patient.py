"""Patient ORM — one row per patient in the `patients` table.

Invariants:
    - id and device_id are 64-bit (BIGINT); id autoincrements, assigned on first flush
    - medical_id is unique and non-nullable
    - device_id is nullable and indexed but NOT unique (several patients may share a device)
    - diabetes_type stored as its string value (VARCHAR, not a native DB enum)
"""

from sqlalchemy import BigInteger, Enum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from patient_service.core.domain_types import DiabetesType
from patient_service.db.base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns
BigId = BigInteger().with_variant(Integer, "sqlite")


class Patient(Base):
    """Patient record with optional device link."""
    __tablename__ = "patients"

    id: Mapped[int] = mapped_column(
        BigId, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    medical_id: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )
    device_id: Mapped[int | None] = mapped_column(
        BigInteger, nullable=True, index=True,
    )
    diabetes_type: Mapped[DiabetesType | None] = mapped_column(
        Enum(DiabetesType, native_enum=False, length=20), nullable=True,
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    height: Mapped[float | None] = mapped_column(Float, nullable=True)
    emergency_contact: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Patient id={self.id} medical_id={self.medical_id!r}>"
