"""Layered parsers for generative model responses.

Each parser is total over its input and returns None when it cannot help,
so they compose as first-success-wins:

    parse_structured -> parse_loose -> sentinel_result
"""

import json
import re
from collections.abc import Callable

from app.processor.models import EnrichmentResult

FAILED_SUMMARY = "Failed to generate summary"

_FENCE_RE = re.compile(r"```(?:json|javascript|js)?\s*([\s\S]*?)```")
_HEADER_RE = re.compile(r"^#+\s+.*$", re.MULTILINE)
_SUMMARY_RE = re.compile(r'summary["\s:]+([^"]+)', re.IGNORECASE)
_TAGS_RE = re.compile(r'tags["\s:]+\[(.*?)\]', re.IGNORECASE | re.DOTALL)

ResponseParser = Callable[[str], EnrichmentResult | None]


def clean_markdown(text: str) -> str:
    """Remove code fences, stray backticks and markdown headers."""
    if not text:
        return ""
    cleaned = _FENCE_RE.sub(r"\1", text)
    cleaned = cleaned.replace("`", "")
    cleaned = _HEADER_RE.sub("", cleaned)
    return cleaned.strip()


def parse_structured(raw: str) -> EnrichmentResult | None:
    try:
        parsed = json.loads(clean_markdown(raw))
    except json.JSONDecodeError:
        return None
    if not isinstance(parsed, dict):
        return None
    summary = parsed.get("summary")
    tags = parsed.get("tags")
    return EnrichmentResult(
        summary=summary if isinstance(summary, str) and summary else FAILED_SUMMARY,
        tags=[str(tag) for tag in tags] if isinstance(tags, list) else [],
    )


def parse_loose(raw: str) -> EnrichmentResult | None:
    summary_match = _SUMMARY_RE.search(raw)
    tags_match = _TAGS_RE.search(raw)
    if summary_match is None and tags_match is None:
        return None
    summary = summary_match.group(1).strip() if summary_match else ""
    return EnrichmentResult(
        summary=summary or FAILED_SUMMARY,
        tags=_split_tags(tags_match.group(1)) if tags_match else [],
    )


def sentinel_result(raw: str) -> EnrichmentResult:
    _ = raw
    return EnrichmentResult(summary=FAILED_SUMMARY, tags=[])


def _split_tags(raw_list: str) -> list[str]:
    tags = [item.strip().strip("\"'").strip() for item in raw_list.split(",")]
    return [tag for tag in tags if tag]


RESPONSE_PARSERS: tuple[ResponseParser, ...] = (parse_structured, parse_loose)


def parse_response(raw: str) -> tuple[EnrichmentResult, bool]:
    """Run the parsers in order.

    Returns:
        (result, recovered) where *recovered* is False only when every
        parser failed and the sentinel was used.
    """
    for parser in RESPONSE_PARSERS:
        result = parser(raw)
        if result is not None:
            return result, True
    return sentinel_result(raw), False
