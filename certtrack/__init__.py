"""certtrack — worker, course, and certification registry API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
