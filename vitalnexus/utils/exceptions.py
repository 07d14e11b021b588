"""
Custom Exception Hierarchy

Error types raised by the collaborators around the recommendation core
(storage, consultation store). Each error knows the HTTP status it maps to,
so the API layer can report it without inspecting the cause.
"""
from typing import Optional, Dict, Any


class VitalNexusError(Exception):
    """Base exception for all backend errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class StorageError(VitalNexusError):
    """The backing database could not complete an operation."""

    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error",
        operation: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            details={"operation": operation, **(details or {})}
        )
        self.operation = operation


class RecordNotFoundError(VitalNexusError):
    """A doctor / user record addressed by id does not exist."""

    status_code = 404

    def __init__(
        self,
        entity: str,
        record_id: Any,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"{entity.capitalize()} not found",
            code="NOT_FOUND",
            details={"entity": entity, "id": record_id, **(details or {})}
        )
        self.entity = entity
        self.record_id = record_id


class ConsultationNotFoundError(VitalNexusError):
    """No stored consultation result for the requested session."""

    status_code = 404

    def __init__(
        self,
        session_id: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"No consultation stored for session {session_id}",
            code="CONSULTATION_NOT_FOUND",
            details={"session_id": session_id, **(details or {})}
        )
        self.session_id = session_id
