"""Fixtures compartidas: app aislada por test y cliente de OpenAI falso."""
from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, List

import pytest
from fastapi.testclient import TestClient

from studynotes.core.config import Settings
from studynotes.infrastructure.ai.ai_service import AIService
from studynotes.infrastructure.db.memory import init_storage
from studynotes.main import create_app


class FakeCompletions:
    """Imita `client.chat.completions`: devuelve o lanza lo encolado, en orden.

    Un `SimpleNamespace` se devuelve tal cual como respuesta cruda.
    """

    def __init__(self, outcomes: List[Any]) -> None:
        self.outcomes = list(outcomes)
        self.calls: List[dict] = []

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, SimpleNamespace):
            return outcome
        content = outcome if isinstance(outcome, str) or outcome is None else json.dumps(outcome)
        message = SimpleNamespace(content=content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(*outcomes: Any) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(list(outcomes))))


def make_ai(client: Any = None) -> AIService:
    return AIService(client, model_primary="primary-model", model_fallback="fallback-model")


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, openai_api_key=None)


@pytest.fixture
def storage():
    return init_storage()


@pytest.fixture
def make_client(settings, storage):
    def _make(ai: AIService | None = None, **kwargs: Any) -> TestClient:
        app = create_app(settings=settings, storage=storage, ai=ai or make_ai())
        return TestClient(app, **kwargs)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
