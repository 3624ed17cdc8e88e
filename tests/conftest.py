import pytest
import requests

from cook_import.config import Settings
from cook_import.errors import FetchError
from cook_import.models import RecipeData


TEA = RecipeData(
    name="Tea",
    ingredients="water, tea leaves",
    instructions="Boil water. Steep leaves.",
)


class FakeFetcher:
    """Fetcher double that records calls and returns a fixed recipe (or fails)."""

    def __init__(self, recipe=TEA, error=None):
        self.recipe = recipe
        self.error = error
        self.calls = []

    def fetch(self, url):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.recipe


class FakeModelClient:
    """Model client double with a canned reply."""

    def __init__(self, reply="@water{1%l}", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []
        self.smoke_tests = 0

    def convert(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply

    def smoke_test(self):
        self.smoke_tests += 1
        return "Hello!"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else str(payload))

    def json(self):
        if self._payload is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class FakeSession:
    """Stand-in for requests.Session that replays one response."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.headers = {}
        self.requests = []

    def _send(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._send("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._send("POST", url, **kwargs)


@pytest.fixture
def settings():
    return Settings(anthropic_api_key="sk-ant-test", openai_api_key="sk-test")


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def failing_fetcher():
    return FakeFetcher(error=FetchError("Failed to fetch URL https://example.com/tea: 404"))
