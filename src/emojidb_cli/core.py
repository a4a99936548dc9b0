from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests


DEFAULT_BASE_URL = "https://emojidb.org"

UA = {"User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"}


@dataclass(frozen=True)
class SearchConfig:
    base_url: str = DEFAULT_BASE_URL
    selector: str = ".emoji-ctn .emoji"
    max_emojis: int = 50
    max_length: int = 5  # utf-8 bytes, exclusive
    columns: int = 5
    timeout: Optional[float] = None
    encoding: str = "utf-8"


DEFAULT_CONFIG = SearchConfig()


class EmojiDBError(Exception):
    """Base class for everything that can abort a search."""


class FetchError(EmojiDBError):
    pass


class StatusError(FetchError):
    def __init__(self, status_code: int, url: str = "") -> None:
        super().__init__(f"failed to fetch emojis: status {status_code}")
        self.status_code = status_code
        self.url = url


class ParseError(EmojiDBError):
    pass


def build_search_url(query: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """
    Turn a free-text query into an EmojiDB search URL.
    Example: 'Happy Face' -> '<base>/happy-face-emojis?utm_source=user_search'
    """
    slug = query.strip().lower().replace(" ", "-")
    return f"{base_url.rstrip('/')}/{quote(slug, safe='')}-emojis?utm_source=user_search"


def fetch_page(url: str, *, timeout: Optional[float] = None) -> bytes:
    try:
        r = requests.get(url, headers=UA, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"failed to fetch emojis: {e}") from e
    try:
        if r.status_code != 200:
            raise StatusError(r.status_code, url)
        return r.content
    except requests.RequestException as e:
        # reading the body can still fail mid-stream
        raise FetchError(f"failed to fetch emojis: {e}") from e
    finally:
        r.close()
