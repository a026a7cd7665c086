"""In-memory PatientRepository — test double for PatientService unit tests.

Invariants:
    - Records are plain PatientRecord dataclasses; no ORM involved
    - Ids assigned sequentially from 1 on first save
    - save() enforces medical_id uniqueness like the DB unique constraint
    - calls records every method invocation as (method, argument)
"""

from dataclasses import dataclass

from patient_service.core.domain_types import DiabetesType
from patient_service.core.errors import DuplicateMedicalIdError


@dataclass
class PatientRecord:
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
    id: int | None = None


class InMemoryPatientRepository:
    """Dict-backed patient storage."""

    def __init__(self):
        self.rows: dict[int, object] = {}
        self.calls: list[tuple[str, object]] = []
        self._next_id = 1

    def _log(self, method, arg=None):
        self.calls.append((method, arg))

    def called(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)

    def build(self, fields: dict) -> PatientRecord:
        self._log("build", fields)
        return PatientRecord(**fields)

    async def find_all(self):
        self._log("find_all")
        return [self.rows[k] for k in sorted(self.rows)]

    async def find_by_id(self, patient_id):
        self._log("find_by_id", patient_id)
        return self.rows.get(patient_id)

    async def find_by_medical_id(self, medical_id):
        self._log("find_by_medical_id", medical_id)
        return next(
            (p for p in await self._sorted() if p.medical_id == medical_id), None,
        )

    async def find_by_device_id(self, device_id):
        self._log("find_by_device_id", device_id)
        return next(
            (p for p in await self._sorted() if p.device_id == device_id), None,
        )

    async def find_with_device(self):
        self._log("find_with_device")
        return [p for p in await self._sorted() if p.device_id is not None]

    async def find_by_diabetes_type(self, diabetes_type: DiabetesType):
        self._log("find_by_diabetes_type", diabetes_type)
        return [
            p for p in await self._sorted() if p.diabetes_type == diabetes_type
        ]

    async def exists_by_medical_id(self, medical_id):
        self._log("exists_by_medical_id", medical_id)
        return any(p.medical_id == medical_id for p in self.rows.values())

    async def save(self, patient):
        self._log("save", patient)
        for row_id, other in self.rows.items():
            if row_id != patient.id and other.medical_id == patient.medical_id:
                raise DuplicateMedicalIdError(patient.medical_id)
        if patient.id is None:
            patient.id = self._next_id
            self._next_id += 1
        self.rows[patient.id] = patient
        return patient

    async def delete(self, patient):
        self._log("delete", patient)
        self.rows.pop(patient.id, None)

    async def _sorted(self):
        return [self.rows[k] for k in sorted(self.rows)]
