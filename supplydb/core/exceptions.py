"""Custom exceptions and database error translation.

Every failure of a batch run surfaces as a subclass of SupplyDBError so the
entry point can report it and exit with a non-zero status.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError

# =============================================================================
# Exception Classes
# =============================================================================


class SupplyDBError(Exception):
    """Base exception for supplydb errors.

    All application-specific exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application error.

        Args:
            message: Human-readable error message.
            code: Machine-readable error code.
            details: Additional error context.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    @property
    def title(self) -> str:
        """Short summary of the error type."""
        return self.code.replace("_", " ").title()


class ConnectivityError(SupplyDBError):
    """The storage connection could not be established.

    Raised before provisioning starts; nothing has been touched.
    """

    def __init__(
        self,
        message: str = "Cannot connect to database",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="CONNECTIVITY_ERROR", details=details)


class SchemaError(SupplyDBError):
    """A table, extension or index statement failed during provisioning."""

    def __init__(
        self,
        message: str = "Schema provisioning failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="SCHEMA_ERROR", details=details)


class ExhaustionError(SupplyDBError):
    """A round-robin assignment had no targets to cycle over."""

    def __init__(
        self,
        message: str = "No targets available for assignment",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="EXHAUSTION_ERROR", details=details)


class IntegrityViolation(SupplyDBError):
    """An insert broke a uniqueness, check or ownership constraint."""

    def __init__(
        self,
        message: str = "Integrity constraint violated",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="INTEGRITY_VIOLATION", details=details)


class QueryError(SupplyDBError):
    """Any other read or write failure against storage."""

    def __init__(
        self,
        message: str = "Database operation failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, code="QUERY_ERROR", details=details)


# =============================================================================
# Error Translation
# =============================================================================


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy errors from the block as supplydb errors.

    Args:
        operation: Name of the operation, recorded in the error details.

    Raises:
        IntegrityViolation: For constraint violations reported by the database.
        QueryError: For any other database failure.
    """
    try:
        yield
    except IntegrityError as e:
        raise IntegrityViolation(
            f"{operation}: {e.orig}",
            details={"operation": operation, "sqlstate": sqlstate_of(e)},
        ) from e
    except DBAPIError as e:
        raise QueryError(
            f"{operation}: {e.orig}",
            details={"operation": operation, "sqlstate": sqlstate_of(e)},
        ) from e
    except SQLAlchemyError as e:
        raise QueryError(f"{operation}: {e}", details={"operation": operation}) from e


def sqlstate_of(error: DBAPIError) -> str | None:
    """Extract the PostgreSQL SQLSTATE code from a wrapped driver error."""
    return getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
