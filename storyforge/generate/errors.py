# Exceptions raised by the generate package.
#
# BackendUnavailable never reaches callers of ContentGenerator: remote clients
# turn it into a manual result. UnrecognizedProvider is a wiring bug and
# propagates.


class GenerationError(Exception):
    """Base class for generate package errors."""


class BackendUnavailable(GenerationError):
    """A backend call failed or returned a payload we cannot read."""

    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider} backend unavailable: {reason}")
        self.provider = provider
        self.reason = reason


class UnrecognizedProvider(GenerationError, LookupError):
    """No client is registered for the configured provider."""

    def __init__(self, provider):
        super().__init__(f"No client registered for provider {provider!r}")
        self.provider = provider
