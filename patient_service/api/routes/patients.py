"""Patient Routes — HTTP mapping for PatientService operations.

Invariants:
    - Request bodies validated by Pydantic before the service is called (400 on failure)
    - Id path parameters outside the BIGINT range are rejected with 400
    - Domain errors propagate to the global handlers (404 / 409)
    - Static paths (/with-device, /diabetes-type/..., /medical-id/..., /device/...)
      are declared before /{patient_id}
    - DELETE returns 204 with an empty body
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from patient_service.core.domain_types import (
    ID_MAX, ID_MIN, DeviceId, DiabetesType, MedicalId, PatientId,
)
from patient_service.infrastructure.database import get_db
from patient_service.infrastructure.patient_repository import SqlAlchemyPatientRepository
from patient_service.schemas.patient import (
    PatientCreate, PatientResponse, PatientUpdate,
)
from patient_service.services.patient_service import PatientService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/patients", tags=["patients"])

PatientIdPath = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]
DeviceIdPath = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]


def get_patient_service(db: AsyncSession = Depends(get_db)) -> PatientService:
    """FastAPI dependency: PatientService bound to the request's session."""
    return PatientService(SqlAlchemyPatientRepository(db))


@router.get("", response_model=list[PatientResponse])
async def list_patients(service: PatientService = Depends(get_patient_service)):
    """List every patient."""
    return await service.list_patients()


@router.get("/with-device", response_model=list[PatientResponse])
async def list_patients_with_device(
    service: PatientService = Depends(get_patient_service),
):
    """List patients that have a device assigned."""
    return await service.list_patients_with_device()


@router.get(
    "/diabetes-type/{diabetes_type}", response_model=list[PatientResponse],
)
async def list_patients_by_diabetes_type(
    diabetes_type: DiabetesType,
    service: PatientService = Depends(get_patient_service),
):
    return await service.list_patients_by_diabetes_type(diabetes_type)


@router.get("/medical-id/{medical_id}", response_model=PatientResponse)
async def get_patient_by_medical_id(
    medical_id: str, service: PatientService = Depends(get_patient_service),
):
    return await service.get_patient_by_medical_id(MedicalId(medical_id))


@router.get("/device/{device_id}", response_model=PatientResponse)
async def get_patient_by_device_id(
    device_id: DeviceIdPath,
    service: PatientService = Depends(get_patient_service),
):
    return await service.get_patient_by_device_id(DeviceId(device_id))


@router.post(
    "", response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_patient(
    body: PatientCreate, service: PatientService = Depends(get_patient_service),
):
    """Create a patient; 409 if the medical ID is taken."""
    return await service.create_patient(body)


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(
    patient_id: PatientIdPath,
    service: PatientService = Depends(get_patient_service),
):
    return await service.get_patient(PatientId(patient_id))


@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: PatientIdPath,
    body: PatientUpdate,
    service: PatientService = Depends(get_patient_service),
):
    """Replace a patient record. Omitted optional fields are cleared."""
    return await service.update_patient(PatientId(patient_id), body)


@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_patient(
    patient_id: PatientIdPath,
    service: PatientService = Depends(get_patient_service),
):
    await service.delete_patient(PatientId(patient_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{patient_id}/device/{device_id}", response_model=PatientResponse,
)
async def assign_device_to_patient(
    patient_id: PatientIdPath,
    device_id: DeviceIdPath,
    service: PatientService = Depends(get_patient_service),
):
    """Link a device to a patient. Does not check existing device links."""
    return await service.assign_device(PatientId(patient_id), DeviceId(device_id))
