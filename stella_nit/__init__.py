"""stella_nit — validation of Brazilian NIT (PIS/PASEP/CI) numbers.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only (stella_nit.validator, stella_nit.core.*)
"""
