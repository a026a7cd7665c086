"""SQLAlchemy Patient Repository — PatientRepository implementation over an AsyncSession.

Invariants:
    - One AsyncSession per instance; reads and the final write of a service call share it
    - save()/delete() commit; a failed commit is rolled back before the error propagates
    - Unique violation on medical_id at commit → DuplicateMedicalIdError (race between
      the existence check and the insert)
    - find_by_device_id returns the lowest id when several patients share a device
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from patient_service.core.domain_types import (
    DeviceId, DiabetesType, MedicalId, PatientId,
)
from patient_service.core.errors import DuplicateMedicalIdError
from patient_service.models.patient import Patient

logger = logging.getLogger(__name__)


class SqlAlchemyPatientRepository:
    """Patient persistence backed by the `patients` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def build(self, fields: dict) -> Patient:
        return Patient(**fields)

    async def find_all(self) -> list[Patient]:
        result = await self.db.execute(select(Patient).order_by(Patient.id))
        return list(result.scalars().all())

    async def find_by_id(self, patient_id: PatientId) -> Patient | None:
        result = await self.db.execute(
            select(Patient).where(Patient.id == patient_id),
        )
        return result.scalar_one_or_none()

    async def find_by_medical_id(self, medical_id: MedicalId) -> Patient | None:
        result = await self.db.execute(
            select(Patient).where(Patient.medical_id == medical_id),
        )
        return result.scalar_one_or_none()

    async def find_by_device_id(self, device_id: DeviceId) -> Patient | None:
        result = await self.db.execute(
            select(Patient)
            .where(Patient.device_id == device_id)
            .order_by(Patient.id)
            .limit(1)
        )
        return result.scalars().first()

    async def find_with_device(self) -> list[Patient]:
        result = await self.db.execute(
            select(Patient)
            .where(Patient.device_id.is_not(None))
            .order_by(Patient.id)
        )
        return list(result.scalars().all())

    async def find_by_diabetes_type(
        self, diabetes_type: DiabetesType,
    ) -> list[Patient]:
        result = await self.db.execute(
            select(Patient)
            .where(Patient.diabetes_type == diabetes_type)
            .order_by(Patient.id)
        )
        return list(result.scalars().all())

    async def exists_by_medical_id(self, medical_id: MedicalId) -> bool:
        result = await self.db.execute(
            select(Patient.id).where(Patient.medical_id == medical_id).limit(1),
        )
        return result.first() is not None

    async def save(self, patient: Patient) -> Patient:
        self.db.add(patient)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Unique constraint violated on save: {e.orig}",
                extra={"medical_id": patient.medical_id},
            )
            raise DuplicateMedicalIdError(patient.medical_id) from e
        await self.db.refresh(patient)
        return patient

    async def delete(self, patient: Patient) -> None:
        await self.db.delete(patient)
        await self.db.commit()
