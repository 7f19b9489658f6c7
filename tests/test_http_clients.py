"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from calorie_climb.adapters.fdc_client import HttpxFdcClient
from calorie_climb.adapters.openai_narrative_client import (
    FALLBACK_MESSAGE,
    OpenAINarrativeClient,
)


class _FakeCompletions:
    def __init__(self, content: str | None) -> None:
        self.content = content
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        message = type("Message", (), {"content": self.content})()
        choice = type("Choice", (), {"message": message})()
        return type("Resp", (), {"choices": [choice]})()


class _FakeOpenAI:
    def __init__(self, content: str | None) -> None:
        completions = _FakeCompletions(content)
        self.chat = type("Chat", (), {"completions": completions})()


def test_openai_narrative_client_builds_feedback_prompt() -> None:
    fake = _FakeOpenAI("  Mangoes are great!  ")
    client = OpenAINarrativeClient(client=fake, model="gpt-4o-mini")

    result = asyncio.run(
        client.generate(
            mode="feedback",
            current_food="Mango",
            current_calories=60,
            previous_food="water",
            previous_calories=0,
            is_healthy=True,
        )
    )

    payload = fake.chat.completions.last_payload
    prompt = payload["messages"][1]["content"]
    assert result == "Mangoes are great!"
    assert payload["model"] == "gpt-4o-mini"
    assert payload["max_tokens"] == 150
    assert payload["messages"][0]["role"] == "system"
    assert 'A kid just chose to eat "Mango" which has 60 calories.' in prompt
    assert "The new food has more calories, so the game continues!" in prompt
    assert "This is a healthy choice!" in prompt


def test_openai_narrative_client_game_over_prompt() -> None:
    fake = _FakeOpenAI(None)
    client = OpenAINarrativeClient(client=fake, model="sonar")

    result = asyncio.run(
        client.generate(
            mode="gameOver",
            current_food="",
            current_calories=0,
            previous_food=None,
            previous_calories=None,
            is_healthy=False,
            reason="Game Over! Too much food.",
            total_calories=2100,
            foods_eaten=["water", "apple", "cake"],
        )
    )

    prompt = fake.chat.completions.last_payload["messages"][1]["content"]
    assert result == FALLBACK_MESSAGE
    assert "Game Over! Too much food." in prompt
    assert "2100 total calories from these foods: water, apple, cake." in prompt


def test_fdc_client_search_and_get() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/foods/search"):
            return httpx.Response(200, json={"foods": [], "totalHits": 0})
        return httpx.Response(200, json={"fdcId": 1, "foodNutrients": []})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport, base_url="https://api.test")
    client = HttpxFdcClient(api_key="key", http_client=async_client)

    search = asyncio.run(
        client.search_foods("rice", page_size=8, data_types=["Branded"])
    )
    food = asyncio.run(client.get_food(1))

    assert search == {"foods": [], "totalHits": 0}
    assert food["fdcId"] == 1
    search_request, food_request = seen
    assert search_request.method == "POST"
    assert search_request.url.params["api_key"] == "key"
    assert json.loads(search_request.content) == {
        "query": "rice",
        "pageSize": 8,
        "pageNumber": 1,
        "sortBy": "dataType.keyword",
        "sortOrder": "asc",
        "dataType": ["Branded"],
    }
    assert food_request.method == "GET"
    assert food_request.url.path == "/food/1"


def test_fdc_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "rate limited"})

    async_client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="https://api.test"
    )
    client = HttpxFdcClient(api_key="key", http_client=async_client)

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        asyncio.run(client.get_food(1))

    assert exc_info.value.response.status_code == 429
