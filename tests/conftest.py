import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

TEST_OPENROUTER_URL = "https://openrouter.test/api/v1/chat/completions"


def completion_body(content: Optional[str]) -> Dict[str, Any]:
    return {
        "id": "gen-test",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ]
    }


def results_reply(results_string: str) -> str:
    return json.dumps({"resultsString": results_string})


@pytest.fixture
def openrouter_env(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "test-key")
    monkeypatch.setenv("OPENROUTER_URL", TEST_OPENROUTER_URL)
    monkeypatch.setenv("OPENROUTER_MODEL_NAME", "test/model")
    monkeypatch.setenv("OPENROUTER_TEMPERATURE", "0.0")


@pytest.fixture
def captured_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def mock_client_factory(captured_requests) -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose transport answers every request with the given body."""
    def factory(body: Any = None, status_code: int = 200, text: Optional[str] = None) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=body)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
