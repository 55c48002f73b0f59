"""Exceptions raised by the arpmath engines.

Domain failures derive from ``gmpy2.InvalidOperationError``, the category the
float engine itself raises for operations with no real result (``sqrt(-1)``,
``inf - inf``), so one ``except`` clause covers both::

    try:
        log(dst, x)
    except gmpy2.InvalidOperationError as e:
        ...
"""

import gmpy2


class DomainError(gmpy2.InvalidOperationError):
    """An argument lies outside the mathematical domain of the operation."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class InvariantError(RuntimeError):
    """An internal consistency check failed; this is a bug in arpmath."""
