"""Boundary Protocols — contract between the patient service and its storage.

Invariants:
    - Services depend on PatientRepository, never on a concrete database client or ORM class
    - build() creates an unsaved record (id None) from plain field values; no IO
    - find_* methods return None (single) or an empty list (many) when nothing matches
    - save() assigns an id on first save and returns the stored record
    - A unique medical_id collision detected by storage raises DuplicateMedicalIdError

Design Decisions:
    - Protocol over ABC: the SQLAlchemy repository and in-memory test doubles
      satisfy it structurally
"""

from typing import Protocol

from patient_service.core.domain_types import (
    DeviceId, DiabetesType, MedicalId, PatientId,
)


class PatientLike(Protocol):
    """Structural contract for patient records passed between service and storage."""
    id: int | None
    name: str
    age: int
    medical_id: str
    device_id: int | None
    diabetes_type: DiabetesType | None
    email: str | None
    phone: str | None
    weight: float | None
    height: float | None
    emergency_contact: str | None


class PatientRepository(Protocol):
    """Contract for patient persistence — implemented in infrastructure/."""
    def build(self, fields: dict) -> PatientLike: ...
    async def find_all(self) -> list[PatientLike]: ...
    async def find_by_id(self, patient_id: PatientId) -> PatientLike | None: ...
    async def find_by_medical_id(
        self, medical_id: MedicalId,
    ) -> PatientLike | None: ...
    async def find_by_device_id(self, device_id: DeviceId) -> PatientLike | None: ...
    async def find_with_device(self) -> list[PatientLike]: ...
    async def find_by_diabetes_type(
        self, diabetes_type: DiabetesType,
    ) -> list[PatientLike]: ...
    async def exists_by_medical_id(self, medical_id: MedicalId) -> bool: ...
    async def save(self, patient: PatientLike) -> PatientLike: ...
    async def delete(self, patient: PatientLike) -> None: ...
