"""
Configuration des tests pytest
"""
import os

import pytest
from fastapi.testclient import TestClient

# Configuration des variables d'environnement pour les tests
os.environ["GROQ_API_KEY"] = "test-groq-key"
os.environ["EMAIL_USER"] = "agency@example.com"
os.environ["EMAIL_PASS"] = "test-app-password"

from app.dependencies import get_lead_mailer  # noqa: E402
from core.errors import CompletionError, MailDeliveryError  # noqa: E402


class FakeCompletionClient:
    """Remplace l'API de complétion et compte les appels"""

    def __init__(self, answer="LLM answer", error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    async def complete(self, message):
        self.calls.append(message)
        if self.error:
            raise self.error
        return self.answer


class FakeMailer:
    """Remplace le relais SMTP et garde les envois"""

    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send_lead(self, name, email, message, pdf_content):
        if self.error:
            raise self.error
        self.sent.append({
            "name": name,
            "email": email,
            "message": message,
            "pdf": pdf_content,
        })


@pytest.fixture
def settings():
    from app.config import Settings

    return Settings()


@pytest.fixture
def completion_client():
    return FakeCompletionClient()


@pytest.fixture
def failing_completion_client():
    return FakeCompletionClient(error=CompletionError("Completion API returned HTTP 503"))


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def failing_mailer():
    return FakeMailer(error=MailDeliveryError("SMTP authentication failed: (535, b'bad credentials')"))


@pytest.fixture
def app(settings, completion_client, mailer):
    """
    Application de test avec collaborateurs externes simulés
    """
    from main import create_app

    application = create_app(settings, completion_client=completion_client)
    application.dependency_overrides[get_lead_mailer] = lambda: mailer
    return application


@pytest.fixture
def client(app):
    """
    Client de test FastAPI
    """
    with TestClient(app) as test_client:
        yield test_client
