import asyncio

import httpx

from letterboxed import notifier
from letterboxed.notifier import format_summary, send_notification

REPORT = {
    "letters": "ABC,DEF,GHI,JKL",
    "valid_word_count": 12,
    "solutions": 3,
    "stage_timings": {"total": 5.0},
}


def test_format_summary_reports_full_word_count():
    title, body = format_summary(REPORT, ["ADGJ", "ADG"])
    assert title == "Letter Boxed ABC,DEF,GHI,JKL - 3 solutions"
    assert body == "ADGJ,ADG\n\n12 valid words in 5.0ms"


def _patch_client(monkeypatch, handler):
    real_client = httpx.AsyncClient

    def factory(**kwargs):
        return real_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(notifier.httpx, "AsyncClient", factory)


def test_send_notification(monkeypatch):
    requests = []

    def handler(request: httpx.Request):
        requests.append(request)
        return httpx.Response(200)

    _patch_client(monkeypatch, handler)
    asyncio.run(send_notification(REPORT, ["ADGJ"], "topic", "https://ntfy.test"))

    assert len(requests) == 1
    assert str(requests[0].url) == "https://ntfy.test/topic"
    assert requests[0].headers["Title"] == "Letter Boxed ABC,DEF,GHI,JKL - 3 solutions"
    assert requests[0].content.decode() == "ADGJ\n\n12 valid words in 5.0ms"


def test_send_notification_failure_is_logged(monkeypatch, caplog):
    _patch_client(monkeypatch, lambda request: httpx.Response(500))
    asyncio.run(send_notification({"letters": "ABC,DEF,GHI,JKL"}, [], "topic"))
    assert "Failed to send notification" in caplog.text
