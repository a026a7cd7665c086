"""Patient Rules — pure checks and field replacement used by PatientService.

Invariants:
    - MUTABLE_FIELDS lists every column except id; id is never written after creation
    - apply_replacement() writes every mutable field, so omitted optional values become None
    - Pure functions: no IO, no logging
"""

MUTABLE_FIELDS: tuple[str, ...] = (
    "name",
    "age",
    "medical_id",
    "device_id",
    "diabetes_type",
    "email",
    "phone",
    "weight",
    "height",
    "emergency_contact",
)


def medical_id_changed(current: str, replacement: str) -> bool:
    """True when an update moves the patient to a different medical ID."""
    return current != replacement


def apply_replacement(target, replacement: dict) -> None:
    """Overwrite every mutable field of target with the replacement values.

    Keys missing from replacement are written as None.
    """
    for name in MUTABLE_FIELDS:
        setattr(target, name, replacement.get(name))


def assign_device(target, device_id: int) -> None:
    """Link target to a device; other fields are left untouched."""
    target.device_id = device_id
