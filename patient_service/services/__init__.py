"""Services — business rules over the PatientRepository protocol."""
