"""
Tests for wolfram_client

Test Coverage:
- pick_answer(): pod selection, malformed payloads
- WolframAlphaClient.solve(): query parameters and failure handling
"""
import asyncio

import httpx
import pytest

from homework_helper.settings import Settings
from homework_helper.wolfram_client import WolframAlphaClient, pick_answer


QUERY_RESULT = {
    "queryresult": {
        "success": True,
        "pods": [
            {"title": "Input interpretation", "subpods": [{"plaintext": "solve 2x + 3 = 7"}]},
            {"title": "Solution", "subpods": [{"plaintext": "x = 2"}]},
            {"title": "Number line", "subpods": [{"plaintext": ""}]},
        ],
    }
}


def _solve(client, query):
    async def go():
        try:
            return await client.solve(query)
        finally:
            await client.aclose()

    return asyncio.run(go())


def test_pick_answer_prefers_answer_pods():
    assert pick_answer(QUERY_RESULT) == "x = 2"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"queryresult": {"success": False}},
        {"queryresult": {"pods": [{"title": "Plot", "subpods": [{"plaintext": "graph"}]}]}},
        {"queryresult": {"pods": [{"title": "Result", "subpods": []}]}},
        {"queryresult": {"pods": [{"title": "Result", "subpods": [{"plaintext": None}]}]}},
        {"queryresult": {"pods": "x"}},
        {"queryresult": {"pods": ["x"]}},
        {"queryresult": {"pods": [{"title": "Result", "subpods": ["x"]}]}},
        {"queryresult": {"pods": [{"title": "Result", "subpods": "x"}]}},
        {"queryresult": {"pods": [{"title": "Result", "subpods": [{"plaintext": 42}]}]}},
        ["not", "a", "dict"],
    ],
)
def test_pick_answer_without_usable_pod(data):
    assert pick_answer(data) is None


def test_solve_sends_query_parameters():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=QUERY_RESULT)

    client = WolframAlphaClient("app-123", config=Settings(), transport=httpx.MockTransport(handler))

    assert _solve(client, " 2x + 3 = 7 ") == "x = 2"
    params = seen[0].url.params
    assert params["input"] == "2x + 3 = 7"
    assert params["appid"] == "app-123"
    assert params["output"] == "JSON"
    assert params["format"] == "plaintext"


def test_solve_returns_none_on_http_error():
    client = WolframAlphaClient(
        "app-123",
        config=Settings(),
        transport=httpx.MockTransport(lambda request: httpx.Response(500)),
    )

    assert _solve(client, "2x + 3 = 7") is None


def test_solve_returns_none_on_invalid_json():
    client = WolframAlphaClient(
        "app-123",
        config=Settings(),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="not json")),
    )

    assert _solve(client, "2x + 3 = 7") is None


def test_blank_query_makes_no_request():
    def handler(request):
        raise AssertionError("no request expected")

    client = WolframAlphaClient("app-123", config=Settings(), transport=httpx.MockTransport(handler))

    assert _solve(client, "   ") is None


def test_missing_app_id():
    with pytest.raises(ValueError, match="WOLFRAM_APP_ID"):
        WolframAlphaClient(config=Settings())


def test_pick_answer_skips_malformed_pods():
    data = {"queryresult": {"pods": ["x", None, {"title": "Result", "subpods": [{"plaintext": "x = 2"}]}]}}

    assert pick_answer(data) == "x = 2"


def test_solve_returns_none_on_malformed_pods():
    client = WolframAlphaClient(
        "app-123",
        config=Settings(),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"queryresult": {"pods": ["x"]}})),
    )

    assert _solve(client, "2x + 3 = 7") is None
