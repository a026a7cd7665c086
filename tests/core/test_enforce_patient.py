"""Patient Rules — tests for medical ID change detection and full replacement.

Tests cover:
    - medical_id_changed is a plain inequality
    - apply_replacement overwrites every mutable field, nulling omitted ones
    - apply_replacement never touches id
    - assign_device only changes device_id
"""

from types import SimpleNamespace

from patient_service.core.enforce_patient import (
    MUTABLE_FIELDS, apply_replacement, assign_device, medical_id_changed,
)


def _patient(**overrides):
    data = {
        "id": 1,
        "name": "Juan Pérez",
        "age": 35,
        "medical_id": "MED123",
        "device_id": 100,
        "diabetes_type": "TYPE_1",
        "email": "juan@example.com",
        "phone": "+34123456789",
        "weight": 70.5,
        "height": 1.75,
        "emergency_contact": "Ana Pérez",
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def test_medical_id_changed():
    assert medical_id_changed("MED123", "MED456")
    assert not medical_id_changed("MED123", "MED123")


def test_mutable_fields_exclude_id():
    assert "id" not in MUTABLE_FIELDS
    assert len(MUTABLE_FIELDS) == 10


def test_apply_replacement_overwrites_all_fields():
    patient = _patient()
    apply_replacement(patient, {
        "name": "Juan P.",
        "age": 36,
        "medical_id": "MED123",
        "device_id": 200,
        "diabetes_type": "TYPE_2",
        "email": "jp@example.com",
        "phone": "+34000000000",
        "weight": 72.0,
        "height": 1.76,
        "emergency_contact": "Luis",
    })
    assert patient.age == 36
    assert patient.device_id == 200
    assert patient.emergency_contact == "Luis"
    assert patient.id == 1


def test_apply_replacement_nulls_omitted_fields():
    patient = _patient()
    apply_replacement(patient, {"name": "Juan", "age": 36, "medical_id": "MED123"})
    assert patient.age == 36
    for name in ("device_id", "diabetes_type", "email", "phone",
                 "weight", "height", "emergency_contact"):
        assert getattr(patient, name) is None


def test_assign_device_touches_only_device_id():
    patient = _patient(device_id=None)
    assign_device(patient, 100)
    assert patient.device_id == 100
    assert patient.name == "Juan Pérez"
    assert patient.email == "juan@example.com"
