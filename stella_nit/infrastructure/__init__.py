"""Infrastructure Layer — cross-cutting concerns for host applications.

Invariants:
    - Infrastructure never imports core/ validation logic; it reads Settings only
"""
