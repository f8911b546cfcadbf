"""Generation run domain exports."""

from .generation_use_case import (
    SCHEMA_FILE_CANDIDATES,
    GenerationError,
    execute_generation,
    find_schema_file,
)
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationError",
    "SCHEMA_FILE_CANDIDATES",
    "execute_generation",
    "find_schema_file",
]
