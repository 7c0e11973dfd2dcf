import os, logging, requests
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any
from dotenv import load_dotenv
load_dotenv()

from .catalog import ITEMS_API_URL, BAZAAR_API_URL

log = logging.getLogger(__name__)

UA = os.getenv("UA", "bazaar-utils-generator")

def _timeout(raw: str | None) -> float | None:
    # unset means no timeout, the requests default
    return float(raw) if raw else None

TIMEOUT = _timeout(os.getenv("HTTP_TIMEOUT"))

HEADERS = {
    "User-Agent": UA,
    "Accept": "application/json",
}

_requests_session = requests.Session()
_requests_session.headers.update(HEADERS)


class ConversionError(RuntimeError):
    pass

class RequestError(ConversionError):
    def __init__(self, status: int, reason: str, url: str):
        self.status = status
        self.reason = reason
        self.url = url
        status_line = f"{status} {reason}" if reason else str(status)
        super().__init__(f"Request failed {status_line} for {url}")

class ApiError(ConversionError):
    def __init__(self, label: str, cause: str):
        self.label = label
        self.cause = cause
        super().__init__(f"{label} API returned an error: {cause}")


@dataclass
class ItemsResponse:
    items: list
    last_updated: int | None = None

@dataclass
class BazaarResponse:
    products: dict = field(default_factory=dict)
    last_updated: int | None = None

    @property
    def product_ids(self) -> list[str]:
        return list(self.products.keys())


def fetch_json(url: str) -> Any:
    r = _requests_session.get(url, timeout=TIMEOUT)
    if not r.ok:
        raise RequestError(r.status_code, r.reason or "", url)
    try:
        return r.json()
    except ValueError as e:
        raise ApiError(url, f"non-JSON body ({e})") from e


def _cause(raw: Any) -> str:
    cause = raw.get("cause") if isinstance(raw, dict) else None
    return cause if isinstance(cause, str) and cause else "Unknown API error"

def parse_items_response(raw: Any, label: str = "Items") -> ItemsResponse:
    """Check the item-catalog payload shape: success flag plus an `items` list."""
    if not (isinstance(raw, dict) and raw.get("success") is True and isinstance(raw.get("items"), list)):
        raise ApiError(label, _cause(raw))
    return ItemsResponse(items=raw["items"], last_updated=raw.get("lastUpdated"))

def parse_bazaar_response(raw: Any, label: str = "Bazaar") -> BazaarResponse:
    """Check the bazaar payload shape: success flag plus a `products` object."""
    if not (isinstance(raw, dict) and raw.get("success") is True and isinstance(raw.get("products"), dict)):
        raise ApiError(label, _cause(raw))
    return BazaarResponse(products=raw["products"], last_updated=raw.get("lastUpdated"))


def fetch_all(bazaar_url: str = BAZAAR_API_URL, items_url: str = ITEMS_API_URL) -> tuple[BazaarResponse, ItemsResponse]:
    """
    Fetch the bazaar listings and the item catalog together.

    Both requests are in flight at the same time; the first failure is
    re-raised here and the other result is discarded.

    Raises:
        RequestError: non-2xx status from either endpoint
        ApiError: a payload without the expected success shape
        requests.RequestException: transport failures
    """
    log.info("Fetching Bazaar products and SkyBlock items...")
    with ThreadPoolExecutor(max_workers=2) as pool:
        bazaar_future = pool.submit(fetch_json, bazaar_url)
        items_future = pool.submit(fetch_json, items_url)
        bazaar_raw = bazaar_future.result()
        items_raw = items_future.result()
    return parse_bazaar_response(bazaar_raw), parse_items_response(items_raw)
