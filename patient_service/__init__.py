"""Patient Service Package — patient records for the insulin-pump care platform.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
