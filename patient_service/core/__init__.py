"""Core — domain types, error hierarchy, storage protocols, and pure patient rules.

Invariants:
    - Core never imports from api/, services/ or infrastructure/
    - Functions here do no IO
"""
