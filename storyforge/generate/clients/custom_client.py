# Client for a self-hosted or third-party HTTP endpoint.
# The endpoint must speak the OpenAI chat-completions shape: the body is sent
# that way and the reply is read from choices[0].message.content. Nothing else
# about the remote side is assumed or checked.

import requests
from ..errors import BackendUnavailable
from ..types import AIConfig, ProviderName
from .base import RemoteClient


class CustomEndpointClient(RemoteClient):
    name = ProviderName.CUSTOM

    def invoke(self, prompt: str, config: AIConfig) -> str:
        if not config.endpoint:
            raise BackendUnavailable(self.name.value, "no endpoint configured")

        headers = {"Content-Type": "application/json"}
        if config.credential:
            headers["Authorization"] = f"Bearer {config.credential}"
        payload = {
            "model": config.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": config.temperature,
            "max_tokens": config.max_output_tokens,
        }
        # no timeout: callers bound the call themselves if they need to
        resp = requests.post(config.endpoint, headers=headers, json=payload)
        resp.raise_for_status()
        data = resp.json()
        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise BackendUnavailable(self.name.value, f"unexpected response shape ({type(e).__name__})") from e
        return self._require_text(text)
