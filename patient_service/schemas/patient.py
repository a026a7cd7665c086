"""Patient Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - name and medical_id: stripped, non-empty
    - 0 < age <= 150; weight and height > 0 when present
    - device_id fits in BIGINT when present
    - email must be a syntactically valid address when present
    - JSON uses camelCase aliases (medicalId, deviceId, ...); snake_case also accepted on input
    - PatientUpdate is a full replacement: omitted optional fields arrive as None
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from patient_service.core.domain_types import ID_MAX, ID_MIN, DiabetesType


class PatientBase(BaseModel):
    """Shared config: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatientCreate(PatientBase):
    """Patient creation payload — id is assigned by storage."""
    name: str = Field(min_length=1, max_length=100)
    age: int = Field(gt=0, le=150)
    medical_id: str = Field(min_length=1, max_length=50)
    device_id: int | None = Field(None, ge=ID_MIN, le=ID_MAX)
    diabetes_type: DiabetesType | None = None
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=30)
    weight: float | None = Field(None, gt=0)
    height: float | None = Field(None, gt=0)
    emergency_contact: str | None = Field(None, max_length=255)

    @field_validator("name", "medical_id")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class PatientUpdate(PatientCreate):
    """Full-record replacement for PUT /patients/{id}."""


class PatientResponse(PatientBase):
    """Patient response — stored record including its id."""
    id: int
    name: str
    age: int
    medical_id: str
    device_id: int | None = None
    diabetes_type: DiabetesType | None = None
    email: str | None = None
    phone: str | None = None
    weight: float | None = None
    height: float | None = None
    emergency_contact: str | None = None
