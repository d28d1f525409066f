# Backend clients, one per ProviderName.

from .base import BaseClient, RemoteClient, manual_result
from .openai_client import OpenAIClient
from .anthropic_client import AnthropicClient
from .custom_client import CustomEndpointClient
from .manual_client import ManualClient

__all__ = [
    "BaseClient",
    "RemoteClient",
    "manual_result",
    "OpenAIClient",
    "AnthropicClient",
    "CustomEndpointClient",
    "ManualClient",
]
