# Client for the OpenAI Chat Completions API.
# A fresh SDK client is built per call so a reconfigured key is always the one used.
# The context manager closes its connection pool whether the call succeeds or not.

from openai import OpenAI
from ..types import AIConfig, ProviderName
from .base import RemoteClient

DEFAULT_MODEL = "gpt-4"


class OpenAIClient(RemoteClient):
    name = ProviderName.OPENAI

    def invoke(self, prompt: str, config: AIConfig) -> str:
        with OpenAI(api_key=config.credential, max_retries=0) as client:
            resp = client.chat.completions.create(
                model=config.model or DEFAULT_MODEL,
                messages=[{"role": "user", "content": prompt}],
                temperature=config.temperature,
                max_tokens=config.max_output_tokens,
            )
        return self._require_text(resp.choices[0].message.content)
