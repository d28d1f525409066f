# Shared value types for the generate package:
# provider/kind enums, the immutable AIConfig and the result union.

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


class ProviderName(str, Enum):
    """Backends a ContentGenerator can route to."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    CUSTOM = "custom"
    MANUAL = "manual"


class ContentKind(str, Enum):
    """Creative content categories, each with its own prompt template."""
    CHARACTER = "character"
    PLOT = "plot"
    SCENE = "scene"
    DIALOGUE = "dialogue"


DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_OUTPUT_TOKENS = 2000

# camelCase names accepted by AIConfig.from_options
_OPTION_ALIASES = {
    "apiKey": "credential",
    "api_key": "credential",
    "baseUrl": "endpoint",
    "base_url": "endpoint",
    "maxTokens": "max_output_tokens",
    "max_tokens": "max_output_tokens",
    "maxOutputTokens": "max_output_tokens",
}


@dataclass(frozen=True)
class AIConfig:
    """Active provider plus its connection parameters. Never mutated; replace it."""
    provider: ProviderName = ProviderName.MANUAL
    credential: str = ""
    model: str = ""
    endpoint: str = ""
    temperature: float = DEFAULT_TEMPERATURE
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS

    def __post_init__(self) -> None:
        # raises ValueError for names outside the closed enum
        object.__setattr__(self, "provider", ProviderName(self.provider))
        tokens = int(self.max_output_tokens)
        if tokens != self.max_output_tokens or tokens <= 0:
            raise ValueError(f"max_output_tokens must be a positive integer, got {self.max_output_tokens!r}")
        object.__setattr__(self, "max_output_tokens", tokens)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "AIConfig":
        """Build a config from a partial mapping; missing or None values take defaults."""
        values: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__ and value is not None:
                values[name] = value
        if "temperature" in values:
            values["temperature"] = float(values["temperature"])
        if "max_output_tokens" in values:
            tokens = values["max_output_tokens"]
            values["max_output_tokens"] = int(tokens) if isinstance(tokens, str) else tokens
        for name in ("credential", "model", "endpoint"):
            if name in values:
                values[name] = str(values[name])
        return cls(**values)

    def describe(self) -> Dict[str, Any]:
        """Public view of the config; the credential itself is left out."""
        return {
            "provider": self.provider.value,
            "model": self.model,
            "endpoint": self.endpoint,
            "temperature": self.temperature,
            "max_output_tokens": self.max_output_tokens,
            "has_credential": bool(self.credential),
        }


@dataclass(frozen=True)
class ManualResult:
    """Prompt text for the caller to paste into an external AI tool."""
    prompt_text: str
    copy_instructions: str
    status: str = field(default="manual", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "prompt_text": self.prompt_text,
            "copy_instructions": self.copy_instructions,
        }


@dataclass(frozen=True)
class GeneratedResult:
    """Text produced by a backend."""
    content: str
    source_provider: str
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status: str = field(default="generated", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "content": self.content,
            "generated_at": self.generated_at.isoformat(),
            "source_provider": self.source_provider,
        }


GenerationResult = Union[ManualResult, GeneratedResult]


@dataclass(frozen=True)
class BatchItem:
    """One entry of a batch request."""
    id: str
    kind: Union[ContentKind, str]
    params: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BatchItem":
        # "type" is the older request shape for the kind
        kind = data.get("kind", data.get("type", ""))
        return cls(id=str(data["id"]), kind=kind, params=dict(data.get("params") or {}))


@dataclass(frozen=True)
class BatchResult:
    id: str
    result: GenerationResult

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "result": self.result.to_dict()}
