"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    VitalNexusError,
    StorageError,
    RecordNotFoundError,
    ConsultationNotFoundError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "VitalNexusError",
    "StorageError",
    "RecordNotFoundError",
    "ConsultationNotFoundError",
]
