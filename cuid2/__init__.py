"""cuid2: collision-resistant, sortable unique identifiers.

Public API:
    generate(length=24) -> str                 raises on failure
    try_generate(length=24) -> GenerationResult  never raises for known failures
    Cuid2Generator                             explicit generator with its own state
"""

from cuid2.constants import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from cuid2.errors import CryptoFailureError, Cuid2Error, InvalidArgumentError
from cuid2.generator import (
    Cuid2Generator,
    GeneratorState,
    generate,
    get_default_generator,
    try_generate,
)
from cuid2.models import ErrorKind, GenerationResult
from cuid2.platform import Platform, SystemPlatform

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_LENGTH",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "CryptoFailureError",
    "Cuid2Error",
    "Cuid2Generator",
    "ErrorKind",
    "GenerationResult",
    "GeneratorState",
    "InvalidArgumentError",
    "Platform",
    "SystemPlatform",
    "generate",
    "get_default_generator",
    "try_generate",
]
