from __future__ import annotations

from typing import Callable, Iterable, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .core import DEFAULT_CONFIG, ParseError, SearchConfig, build_search_url, fetch_page


Markup = Union[bytes, str]
Selector = Callable[..., list[str]]


def select_texts(body: Markup, selector: str, *, encoding: str = "utf-8") -> list[str]:
    """
    Parse an HTML document and return the text of every node matching the CSS selector,
    in document order. Text is returned untrimmed; filtering is the caller's job.
    """
    try:
        if isinstance(body, bytes):
            soup = BeautifulSoup(body, "html.parser", from_encoding=encoding)
        else:
            soup = BeautifulSoup(body, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParseError(f"could not parse emoji page: {e}") from e
    return [node.get_text() for node in soup.select(selector)]


def filter_emojis(texts: Iterable[str], *, max_emojis: int = 50, max_length: int = 5) -> list[str]:
    """
    Keep short, non-empty tokens (emoji glyphs) and drop longer labels.
    Length is measured in utf-8 bytes, so one 4-byte emoji passes and a run of them doesn't.
    """
    emojis: list[str] = []
    for text in texts:
        if len(emojis) >= max_emojis:
            break
        emoji = text.strip()
        if emoji and len(emoji.encode("utf-8")) < max_length:
            emojis.append(emoji)
    return emojis


def extract_emojis(
    body: Markup,
    *,
    config: SearchConfig = DEFAULT_CONFIG,
    select: Selector = select_texts,
) -> list[str]:
    texts = select(body, config.selector, encoding=config.encoding)
    return filter_emojis(texts, max_emojis=config.max_emojis, max_length=config.max_length)


def search(
    query: str,
    *,
    config: SearchConfig = DEFAULT_CONFIG,
    fetch: Callable[..., Markup] = fetch_page,
    select: Selector = select_texts,
) -> list[str]:
    """Query EmojiDB and return the emojis found on the result page (possibly empty)."""
    url = build_search_url(query, config.base_url)
    body = fetch(url, timeout=config.timeout)
    return extract_emojis(body, config=config, select=select)
