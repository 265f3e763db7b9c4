"""Core Layer — pure NIT validation logic, no IO, no logging, no config reads.

Invariants:
    - No module in core/ imports from validator, config, or infrastructure/
    - All functions are pure and deterministic (generate_nit takes its RNG as input)

Design Decisions:
    - Functional core separated from the NITValidator shell (ADR: impureim sandwich)
"""
