import logging

import httpx

logger = logging.getLogger("letterboxed")


def format_summary(report: dict, words: list[str], limit: int = 10) -> tuple[str, str]:
    """Title and body for a search report as produced by ``SearchMetrics.report``."""
    title = f"Letter Boxed {report['letters']} - {report.get('solutions', 0)} solutions"
    body = ",".join(words[:limit]) + f"\n\n{report.get('valid_word_count', len(words))} valid words"
    total_ms = report.get("stage_timings", {}).get("total")
    if total_ms is not None:
        body += f" in {total_ms}ms"
    return title, body


async def send_notification(
    report: dict,
    words: list[str],
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
):
    """Send a puzzle summary to ntfy.sh. Best-effort: failures are logged, not raised."""
    try:
        title, body = format_summary(report, words)

        async with httpx.AsyncClient(timeout=10.0) as client:
            resp = await client.post(
                f"{ntfy_url}/{topic}",
                content=body.encode("utf-8"),
                headers={
                    "Title": title,
                    "Priority": "default",
                    "Tags": "package",
                },
            )
            resp.raise_for_status()
            logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)

    except Exception as e:
        logger.error("Failed to send notification: %s", e)
