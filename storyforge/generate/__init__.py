# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import ContentGenerator, load_config_file
from .types import (
    AIConfig,
    BatchItem,
    BatchResult,
    ContentKind,
    GeneratedResult,
    GenerationResult,
    ManualResult,
    ProviderName,
)
from .prompts import build_prompt
from .errors import BackendUnavailable, GenerationError, UnrecognizedProvider

__all__ = [
    "ContentGenerator",
    "load_config_file",
    "AIConfig",
    "BatchItem",
    "BatchResult",
    "ContentKind",
    "GeneratedResult",
    "GenerationResult",
    "ManualResult",
    "ProviderName",
    "build_prompt",
    "BackendUnavailable",
    "GenerationError",
    "UnrecognizedProvider",
]
