# Offline client: hands back the prompt for the caller to paste elsewhere.
# Default provider, used for local dev and whenever no backend is set up.

from typing import Any, Mapping, Optional
from ..types import AIConfig, ManualResult, ProviderName
from .base import BaseClient, manual_result


class ManualClient(BaseClient):
    name = ProviderName.MANUAL

    def generate(self, kind, params: Optional[Mapping[str, Any]], config: AIConfig) -> ManualResult:
        return manual_result(kind, params)
