"""Client contract shared by every backend.

A client turns (kind, params, config) into a GenerationResult. Remote clients
never raise for backend trouble: whatever goes wrong inside `invoke` is
logged and answered with the manual prompt for the same request.
An empty or whitespace-only reply counts as a failure as well, on purpose:
callers never receive a blank generated result.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping, Optional

from ..errors import BackendUnavailable
from ..prompts import COPY_INSTRUCTIONS, build_prompt
from ..types import (
    AIConfig,
    BatchItem,
    BatchResult,
    GeneratedResult,
    GenerationResult,
    ManualResult,
    ProviderName,
)

logger = logging.getLogger(__name__)


def manual_result(kind, params: Optional[Mapping[str, Any]]) -> ManualResult:
    return ManualResult(prompt_text=build_prompt(kind, params), copy_instructions=COPY_INSTRUCTIONS)


class BaseClient(ABC):
    name: ProviderName

    @abstractmethod
    def generate(self, kind, params: Optional[Mapping[str, Any]], config: AIConfig) -> GenerationResult:
        ...

    def generate_batch(self, requests: Iterable[BatchItem], config: AIConfig) -> List[BatchResult]:
        """Run items one after another; output keeps input order and ids."""
        results = []
        for item in requests:
            results.append(BatchResult(id=item.id, result=self.generate(item.kind, item.params, config)))
        return results


class RemoteClient(BaseClient):
    """Client backed by a network call. Subclasses implement `invoke`."""

    @abstractmethod
    def invoke(self, prompt: str, config: AIConfig) -> str:
        """Send the prompt and return the extracted text, or raise."""

    def generate(self, kind, params: Optional[Mapping[str, Any]], config: AIConfig) -> GenerationResult:
        # the config decides, whichever client object was picked
        if config.provider is ProviderName.MANUAL:
            return manual_result(kind, params)

        prompt = build_prompt(kind, params)
        if not prompt:
            logger.warning("Unrecognized content kind %r; sending an empty prompt to %s", kind, self.name.value)

        try:
            text = self.invoke(prompt, config)
        except Exception as e:
            err = e if isinstance(e, BackendUnavailable) else BackendUnavailable(self.name.value, f"{type(e).__name__}: {e}")
            logger.warning("%s; falling back to manual prompt", err)
            return manual_result(kind, params)

        return GeneratedResult(content=text, source_provider=self.name.value)

    def _require_text(self, text) -> str:
        if not isinstance(text, str) or not text.strip():
            raise BackendUnavailable(self.name.value, "response carried no text")
        return text.strip()
