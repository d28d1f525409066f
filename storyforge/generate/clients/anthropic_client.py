# Client for the Anthropic Messages API.

from anthropic import Anthropic
from ..errors import BackendUnavailable
from ..types import AIConfig, ProviderName
from .base import RemoteClient

DEFAULT_MODEL = "claude-3-sonnet-20240229"


class AnthropicClient(RemoteClient):
    name = ProviderName.ANTHROPIC

    def invoke(self, prompt: str, config: AIConfig) -> str:
        with Anthropic(api_key=config.credential, max_retries=0) as client:
            resp = client.messages.create(
                model=config.model or DEFAULT_MODEL,
                max_tokens=config.max_output_tokens,
                temperature=config.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        blocks = [b for b in (resp.content or []) if getattr(b, "type", None) == "text"]
        if not blocks:
            raise BackendUnavailable(self.name.value, "no text block in response")
        return self._require_text(blocks[0].text)
