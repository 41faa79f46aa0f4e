"""
Plant Catalog Backend - Exception Hierarchy
============================================

What:  Application-specific exceptions for storage faults and request failures.
Why:   Storage faults and HTTP-facing failures are different things: the store
       knows whether a write hit the unique index, the handlers know which
       status and client message that should become.
How:   Two small hierarchies. The store raises StoreError subclasses; request
       handlers translate them into PlantCatalogError values that carry
       everything the boundary error handler needs.
Who:   StoreError: raised by PlantStore. PlantCatalogError: raised by PlantService,
       formatted by the handlers registered in main.py.

Exception Hierarchy:
    StoreError                 → storage / infrastructure fault
    └── DuplicateKeyError      → unique index on `name` violated

    PlantCatalogError          → structured failure (log, status, message)
    └── PlantNotFoundError     → 404 {"err": "Plant not found"}
"""

from typing import Any, Dict, Optional


# ══════════════════════════════════════════════════════════════════════════
# Store Faults
# ══════════════════════════════════════════════════════════════════════════


class StoreError(Exception):
    """
    Raised by PlantStore when a database operation fails.

    Attributes:
        message:  Diagnostic text (server logs only)
        context:  Extra debug info, e.g. the plant name or the original error type
    """

    def __init__(
        self,
        message: str = "Record store operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DuplicateKeyError(StoreError):
    """
    Raised when an insert or update collides with an existing `name`.

    The bulk seed loader treats this as benign; single-record create reports
    it like any other store fault.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "Duplicate plant name"
        if name:
            message = f"Duplicate plant name '{name}'"
        ctx = dict(context or {})
        if name:
            ctx["name"] = name
        super().__init__(message=message, context=ctx)
        self.name = name


# ══════════════════════════════════════════════════════════════════════════
# Structured Request Failures
# ══════════════════════════════════════════════════════════════════════════


class PlantCatalogError(Exception):
    """
    Structured failure raised by request handlers.

    Every field is optional; the boundary error handler fills in defaults for
    whatever a handler leaves out.

    Attributes:
        log:      Internal diagnostic for server logs (never sent to the client)
        status:   HTTP status code
        message:  Client-facing body, always shaped {"err": "<summary>"}
    """

    def __init__(
        self,
        log: Optional[str] = None,
        status: Optional[int] = None,
        message: Optional[Dict[str, str]] = None,
    ):
        self.log = log
        self.status = status
        self.message = message
        super().__init__(log or (message or {}).get("err", "Plant catalog error"))


class PlantNotFoundError(PlantCatalogError):
    """
    Raised when no record matches the requested name.

    HTTP:  404 Not Found, body {"err": "Plant not found"}
    """

    def __init__(self, log: Optional[str] = None):
        super().__init__(log=log, status=404, message={"err": "Plant not found"})
