"""Local, deterministic extractors with no external calls."""

import re

from bs4 import BeautifulSoup

_WHITESPACE_RE = re.compile(r"\s+")


def extract_html_text(data: bytes) -> str:
    """Strip tags, drop script/style content and collapse whitespace."""
    soup = BeautifulSoup(data.decode("utf-8", errors="replace"), "html.parser")
    for element in soup(["script", "style"]):
        element.decompose()
    return _WHITESPACE_RE.sub(" ", soup.get_text(" ")).strip()


def decode_plain_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")
