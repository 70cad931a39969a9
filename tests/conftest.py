"""Shared fixtures: test settings, a fake AI client and an API client."""
import pytest
from fastapi.testclient import TestClient

from qualifier.api.main import create_app
from qualifier.core.config import Settings

TEST_EMAIL = "student@example.edu"


class FakeAIClient:
    """Stands in for LLMClient; answers or raises as configured."""

    def __init__(self, answer: str = "Paris", error: Exception = None):
        self.answer = answer
        self.error = error
        self.questions = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def settings() -> Settings:
    """Settings with a known email and no file logging."""
    return Settings(official_email=TEST_EMAIL, log_dir="")


@pytest.fixture
def fake_ai() -> FakeAIClient:
    """AI collaborator that always answers 'Paris'."""
    return FakeAIClient()


@pytest.fixture
def client(settings: Settings, fake_ai: FakeAIClient) -> TestClient:
    """TestClient for an app wired to the fake AI collaborator."""
    return TestClient(create_app(settings, ai_client=fake_ai))
