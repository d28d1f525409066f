# ContentGenerator: holds the active AIConfig, picks the matching client and
# exposes single + batch generation. Build one per host and pass it around.

from __future__ import annotations
import logging
import os
import threading
import yaml
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .clients import AnthropicClient, BaseClient, CustomEndpointClient, ManualClient, OpenAIClient
from .errors import UnrecognizedProvider
from .types import AIConfig, BatchItem, BatchResult, GenerationResult, ProviderName

logger = logging.getLogger(__name__)


def default_clients() -> Dict[ProviderName, BaseClient]:
    return {
        ProviderName.OPENAI: OpenAIClient(),
        ProviderName.ANTHROPIC: AnthropicClient(),
        ProviderName.CUSTOM: CustomEndpointClient(),
        ProviderName.MANUAL: ManualClient(),
    }


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Read generator options from a YAML file; a missing file means no options."""
    if not path or not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Generator config {path} must be a mapping, got {type(data).__name__}")
    return data


class ContentGenerator:
    def __init__(
        self,
        config: Optional[AIConfig] = None,
        clients: Optional[Mapping[Union[ProviderName, str], BaseClient]] = None,
    ):
        self.clients: Dict[ProviderName, BaseClient] = (
            {ProviderName(k): v for k, v in clients.items()} if clients is not None else default_clients()
        )
        missing = set(ProviderName) - set(self.clients)
        assert not missing, f"no client registered for {sorted(p.value for p in missing)}"
        self._config = config or AIConfig()
        self._lock = threading.Lock()

    @property
    def config(self) -> AIConfig:
        return self._config

    def configure(self, config: Union[AIConfig, Mapping[str, Any], None]) -> "ContentGenerator":
        """Replace the held config as a whole. Returns self for chaining."""
        new_config = config if isinstance(config, AIConfig) else AIConfig.from_options(config)
        with self._lock:
            self._config = new_config
        logger.info(
            "Generator configured: provider=%s model=%s",
            new_config.provider.value,
            new_config.model or "(default)",
        )
        return self

    def current_client(self, config: Optional[AIConfig] = None) -> BaseClient:
        provider = (config or self._config).provider
        try:
            return self.clients[provider]
        except KeyError:
            raise UnrecognizedProvider(provider.value) from None

    def generate_content(self, kind, params: Optional[Mapping[str, Any]] = None) -> GenerationResult:
        """Main entry point for one piece of content."""
        config = self._config
        return self.current_client(config).generate(kind, params or {}, config)

    def generate_batch(self, requests: Iterable[Union[BatchItem, Mapping[str, Any]]]) -> List[BatchResult]:
        config = self._config
        items = [r if isinstance(r, BatchItem) else BatchItem.from_dict(r) for r in requests]
        return self.current_client(config).generate_batch(items, config)
