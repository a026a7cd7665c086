"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from patient_service.models.patient import Patient  # noqa: F401
