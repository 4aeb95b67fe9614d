from datetime import date

import httpx
import pytest

from tenki_hikaku.models import CitationRecord
from tenki_hikaku.service import WeatherFetchError, fetch_weather_comparison

REPLY = """\
Detected Location: 東京都新宿区
---SOURCE: tenki.jp---
Condition: 曇り
High: 18
Low: 12
Rain: 30
---SUMMARY---
曇りの予報で一致。
"""


class FakeClient:
    def __init__(self, text="", citations=None, error=None):
        self.text = text
        self.citations = citations or []
        self.error = error
        self.calls = []

    def search(self, model, prompt):
        self.calls.append((model, prompt))
        if self.error:
            raise self.error
        return self.text, self.citations


def test_fetch_parses_reply():
    client = FakeClient(REPLY, [CitationRecord(uri="https://tenki.jp/a", title="tenki.jp")])
    result = fetch_weather_comparison(client, " 35.689, 139.691 ", "gemini-test", today=date(2026, 10, 19))

    model, prompt = client.calls[0]
    assert model == "gemini-test"
    assert 'Input Location: "35.689, 139.691"' in prompt
    assert result.location == "東京都新宿区"
    assert result.providers[0].url == "https://tenki.jp/a"
    assert result.summary == "曇りの予報で一致。"


def test_empty_reply_is_not_an_error():
    result = fetch_weather_comparison(FakeClient(""), "札幌")
    assert result.location == "札幌"
    assert result.providers == ()


def test_http_error_becomes_fetch_error():
    request = httpx.Request("POST", "https://gemini.test")
    error = httpx.HTTPStatusError("boom", request=request, response=httpx.Response(503, request=request))
    with pytest.raises(WeatherFetchError):
        fetch_weather_comparison(FakeClient(error=error), "東京")


def test_transport_error_becomes_fetch_error():
    with pytest.raises(WeatherFetchError):
        fetch_weather_comparison(FakeClient(error=httpx.ConnectError("down")), "東京")


def test_blank_location():
    with pytest.raises(ValueError):
        fetch_weather_comparison(FakeClient(REPLY), "   ")
