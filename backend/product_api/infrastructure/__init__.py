"""Infrastructure Layer — database sessions, repositories, logging.

Invariants:
    - Everything that performs IO lives here or in api/
    - core/ never imports from this package
"""
