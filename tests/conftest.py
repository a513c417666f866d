from __future__ import annotations

import pytest
import requests

from installer import fetch, questionnaire, settings

ENV_TEMPLATE = (
    "# SupaLLM configuration\n"
    "CLERK_PUBLISHABLE_KEY=\n"
    "CLERK_SECRET_KEY=\n"
    "INITIAL_USER_EMAIL=\n"
    "INITIAL_USER_PASSWORD=\n"
    "SECRET_KEY=\n"
    "FRONTEND_PORT=3000\n"
    "BACKEND_PORT=3001\n"
    "SUPALLM_API_URL=http://localhost:3001\n"
    "POSTGRES_PORT=5431\n"
)

COMPOSE_TEMPLATE = "services:\n  frontend:\n    image: supallm/frontend\n"


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200):
        self.body = body
        self.status_code = status

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i : i + chunk_size]


class FakeRemote:
    """Stand-in for requests.get keyed by URL."""

    def __init__(self):
        self.files: dict[str, bytes] = {}
        self.failures: dict[str, Exception] = {}
        self.status: dict[str, int] = {}
        self.calls: list[str] = []

    def __call__(self, url, stream=False, timeout=None):
        self.calls.append(url)
        if url in self.failures:
            raise self.failures[url]
        return FakeResponse(self.files.get(url, b""), self.status.get(url, 200))


class ScriptedAnswers:
    """Feeds queued answers to rich prompts. ``None`` means the operator pressed Enter."""

    def __init__(self):
        self.queue: list = []
        self.asked: list[str] = []

    def push(self, *answers):
        self.queue.extend(answers)

    def _next(self, prompt, default):
        self.asked.append(str(prompt))
        if not self.queue:
            raise AssertionError(f"unexpected prompt: {prompt}")
        value = self.queue.pop(0)
        if value is None:
            return default
        return value

    def prompt(self, prompt, default=None, **kwargs):
        return self._next(prompt, default)

    def confirm(self, prompt, default=False, **kwargs):
        return self._next(prompt, default)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def remote(monkeypatch):
    fake = FakeRemote()
    fake.files[settings.remote_url("docker-compose.yml")] = COMPOSE_TEMPLATE.encode()
    fake.files[settings.remote_url(".env.exemple")] = ENV_TEMPLATE.encode()
    monkeypatch.setattr(fetch.requests, "get", fake)
    return fake


@pytest.fixture
def answers(monkeypatch):
    scripted = ScriptedAnswers()
    monkeypatch.setattr(questionnaire.Prompt, "ask", staticmethod(scripted.prompt))
    monkeypatch.setattr(questionnaire.Confirm, "ask", staticmethod(scripted.confirm))
    return scripted


@pytest.fixture
def launched(monkeypatch):
    calls = []

    def fake_call(cmd, *args, **kwargs):
        calls.append(list(cmd))
        return 0

    monkeypatch.setattr("installer.launcher.subprocess.call", fake_call)
    return calls
