from __future__ import annotations

from functools import lru_cache
from typing import Any, Final

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DHLOTTERY_BASE_URL, HTTP_RETRIES, HTTP_TIMEOUT

DEFAULT_HEADERS: Final[dict[str, str]] = {
    "User-Agent": "Mozilla/5.0 (compatible; LottoAssist/1.0)",
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "ko-KR,ko;q=0.9,en-US;q=0.8",
    "Referer": DHLOTTERY_BASE_URL + "/",
}

@lru_cache(maxsize=1)
def get_session() -> requests.Session:
    s = requests.Session()
    retry = Retry(
        total=HTTP_RETRIES,
        backoff_factor=0.8,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    s.mount("https://", HTTPAdapter(max_retries=retry))
    s.headers.update(DEFAULT_HEADERS)
    return s

def get_json(url: str, session: requests.Session | None = None) -> Any:
    """GET + raise_for_status + decode. A non-JSON body raises ValueError."""
    r = (session or get_session()).get(url, timeout=HTTP_TIMEOUT)
    r.raise_for_status()
    return r.json()
