"""Patient Service — medical-ID uniqueness and existence checks over injected storage.

Invariants:
    - create fails with DuplicateMedicalIdError before any write when the medical ID exists
    - update/delete/assign_device look the patient up first (PatientNotFoundError if absent)
    - update checks for collision only when the medical ID actually changes
    - update overwrites every mutable field (full replacement)
    - assign_device does NOT check whether another patient already holds the device
    - Records are built by the repository; this module never touches the ORM
"""

import logging

from patient_service.core.domain_types import (
    DeviceId, DiabetesType, MedicalId, PatientId,
)
from patient_service.core.enforce_patient import (
    apply_replacement, assign_device, medical_id_changed,
)
from patient_service.core.errors import (
    DuplicateMedicalIdError, ErrorContext, PatientNotFoundError,
)
from patient_service.core.repository_protocols import PatientLike, PatientRepository
from patient_service.schemas.patient import PatientCreate, PatientUpdate

logger = logging.getLogger(__name__)


class PatientService:
    """Patient CRUD plus device assignment."""

    def __init__(self, repository: PatientRepository):
        self.repository = repository

    async def list_patients(self) -> list[PatientLike]:
        logger.info("Listing all patients")
        return await self.repository.find_all()

    async def list_patients_with_device(self) -> list[PatientLike]:
        logger.info("Listing patients with an assigned device")
        return await self.repository.find_with_device()

    async def list_patients_by_diabetes_type(
        self, diabetes_type: DiabetesType,
    ) -> list[PatientLike]:
        logger.info(f"Listing patients with diabetes type {diabetes_type.value}")
        return await self.repository.find_by_diabetes_type(diabetes_type)

    async def get_patient(self, patient_id: PatientId) -> PatientLike:
        logger.info("Fetching patient by id", extra={"patient_id": patient_id})
        patient = await self.repository.find_by_id(patient_id)
        if patient is None:
            raise PatientNotFoundError(
                "id", patient_id, ErrorContext(patient_id=patient_id),
            )
        return patient

    async def get_patient_by_medical_id(self, medical_id: MedicalId) -> PatientLike:
        logger.info("Fetching patient by medical ID", extra={"medical_id": medical_id})
        patient = await self.repository.find_by_medical_id(medical_id)
        if patient is None:
            raise PatientNotFoundError(
                "medical ID", medical_id, ErrorContext(medical_id=medical_id),
            )
        return patient

    async def get_patient_by_device_id(self, device_id: DeviceId) -> PatientLike:
        logger.info("Fetching patient by device id", extra={"device_id": device_id})
        patient = await self.repository.find_by_device_id(device_id)
        if patient is None:
            raise PatientNotFoundError(
                "device ID", device_id, ErrorContext(device_id=device_id),
            )
        return patient

    async def create_patient(self, data: PatientCreate) -> PatientLike:
        medical_id = MedicalId(data.medical_id)
        logger.info("Creating patient", extra={"medical_id": medical_id})
        if await self.repository.exists_by_medical_id(medical_id):
            raise DuplicateMedicalIdError(medical_id)
        patient = self.repository.build(data.model_dump())
        saved = await self.repository.save(patient)
        logger.info(
            "Patient created",
            extra={"patient_id": saved.id, "medical_id": saved.medical_id},
        )
        return saved

    async def update_patient(
        self, patient_id: PatientId, data: PatientUpdate,
    ) -> PatientLike:
        """Replace every mutable field of an existing patient.

        Raises PatientNotFoundError if the patient does not exist, and
        DuplicateMedicalIdError if the new medical ID belongs to someone else.
        """
        logger.info("Updating patient", extra={"patient_id": patient_id})
        patient = await self.get_patient(patient_id)
        new_medical_id = MedicalId(data.medical_id)
        if (
            medical_id_changed(patient.medical_id, new_medical_id)
            and await self.repository.exists_by_medical_id(new_medical_id)
        ):
            raise DuplicateMedicalIdError(
                new_medical_id, ErrorContext(patient_id=patient_id),
            )
        apply_replacement(patient, data.model_dump())
        return await self.repository.save(patient)

    async def delete_patient(self, patient_id: PatientId) -> None:
        logger.info("Deleting patient", extra={"patient_id": patient_id})
        patient = await self.get_patient(patient_id)
        await self.repository.delete(patient)

    async def assign_device(
        self, patient_id: PatientId, device_id: DeviceId,
    ) -> PatientLike:
        # TODO: reject a device already linked to another patient once device ownership rules are agreed
        logger.info(
            "Assigning device to patient",
            extra={"patient_id": patient_id, "device_id": device_id},
        )
        patient = await self.get_patient(patient_id)
        assign_device(patient, device_id)
        return await self.repository.save(patient)
