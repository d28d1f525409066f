# ===============================================
# tests/conftest.py
# -----------------------------------------------
# Fake backends: the OpenAI / Anthropic SDK classes
# and requests.post are swapped for recorders, so
# no test ever reaches the network.
# ===============================================

from types import SimpleNamespace

import pytest
import requests

from storyforge.generate.clients import anthropic_client, custom_client, openai_client


class FakeBackend:
    """Records every call; replies with `reply` or raises `error`."""

    def __init__(self, reply="Generated text"):
        self.reply = reply
        self.error = None
        self.status = 200
        self.payload = None  # custom endpoint only: raw JSON override
        self.calls = []
        self.opened = 0  # SDK clients constructed
        self.closed = 0  # SDK clients closed again


class _FakeSDKClient:
    """Stands in for OpenAI() / Anthropic(); usable as a context manager."""

    def __init__(self, backend, api_key, **kwargs):
        self.backend = backend
        self.api_key = api_key
        backend.opened += 1

    def close(self):
        self.backend.closed += 1

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _create(self, **params):
        self.backend.calls.append({"api_key": self.api_key, **params})
        if self.backend.error:
            raise self.backend.error


class _FakeOpenAI(_FakeSDKClient):
    def __init__(self, backend, api_key=None, **kwargs):
        super().__init__(backend, api_key, **kwargs)
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self.create))

    def create(self, **params):
        self._create(**params)
        message = SimpleNamespace(content=self.backend.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class _FakeAnthropic(_FakeSDKClient):
    def __init__(self, backend, api_key=None, **kwargs):
        super().__init__(backend, api_key, **kwargs)
        self.messages = SimpleNamespace(create=self.create)

    def create(self, **params):
        self._create(**params)
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self.backend.reply)])


def _openai_factory(backend):
    return lambda api_key=None, **kwargs: _FakeOpenAI(backend, api_key, **kwargs)


def _anthropic_factory(backend):
    return lambda api_key=None, **kwargs: _FakeAnthropic(backend, api_key, **kwargs)


class _FakeResponse:
    def __init__(self, status, payload):
        self.status_code = status
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return self._payload


def _post_factory(backend):
    def post(url, headers=None, json=None, **kwargs):
        backend.calls.append({"url": url, "headers": headers, "json": json})
        if backend.error:
            raise backend.error
        payload = backend.payload
        if payload is None:
            payload = {"choices": [{"message": {"content": backend.reply}}]}
        return _FakeResponse(backend.status, payload)

    return post


@pytest.fixture
def backends(monkeypatch):
    fakes = SimpleNamespace(
        openai=FakeBackend("OpenAI wrote this"),
        anthropic=FakeBackend("Anthropic wrote this"),
        custom=FakeBackend("Custom endpoint wrote this"),
    )
    monkeypatch.setattr(openai_client, "OpenAI", _openai_factory(fakes.openai))
    monkeypatch.setattr(anthropic_client, "Anthropic", _anthropic_factory(fakes.anthropic))
    monkeypatch.setattr(custom_client.requests, "post", _post_factory(fakes.custom))
    fakes.total_calls = lambda: len(fakes.openai.calls) + len(fakes.anthropic.calls) + len(fakes.custom.calls)
    return fakes
