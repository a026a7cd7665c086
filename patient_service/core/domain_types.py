"""Domain Types — identity wrappers and the diabetes classification enum.

Invariants:
    - PatientId and DeviceId wrap ints stored as BIGINT; values outside
      [ID_MIN, ID_MAX] never reach storage
    - MedicalId wraps str
    - DiabetesType values equal their names (stored as-is in the diabetes_type column)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PatientId = NewType("PatientId", int)
DeviceId = NewType("DeviceId", int)
MedicalId = NewType("MedicalId", str)

ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class DiabetesType(str, Enum):
    """Diabetes classification of a patient."""
    TYPE_1 = "TYPE_1"
    TYPE_2 = "TYPE_2"
    GESTATIONAL = "GESTATIONAL"
    PREDIABETES = "PREDIABETES"
    OTHER = "OTHER"
