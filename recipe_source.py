import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import unquote, urljoin, urlsplit

import requests

from constants import CACHE_KEY, COLLECTION_KEYS, DATA_FILE

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class RecipeDataError(Exception):
    """Raised when the recipe document cannot be fetched or parsed."""


def decode_recipe_collection(data: Any) -> List[Dict[str, Any]]:
    """Accept a bare list, or a list under one of COLLECTION_KEYS, in that order.

    Any other shape decodes to an empty collection. Entries that are not
    objects are dropped.
    """
    records: Any = None
    if isinstance(data, list):
        records = data
    elif isinstance(data, dict):
        for key in COLLECTION_KEYS:
            if isinstance(data.get(key), list):
                records = data[key]
                break
    if records is None:
        return []
    return [r for r in records if isinstance(r, dict)]


def resolve_data_url(page_url: str, data_url: Optional[str] = None) -> str:
    if data_url:
        return data_url
    return urljoin(page_url, DATA_FILE)


def _is_http(location: str) -> bool:
    return urlsplit(location).scheme in ("http", "https")


def _local_path(location: str) -> Path:
    parts = urlsplit(location)
    if parts.scheme == "file":
        return Path(unquote(parts.path))
    return Path(location)


def fetch_recipe_document(location: str, timeout: float = DEFAULT_TIMEOUT) -> Any:
    if _is_http(location):
        try:
            resp = requests.get(location, timeout=timeout)
        except requests.RequestException as e:
            raise RecipeDataError(f"Failed to load recipe data: {e}") from e
        if not resp.ok:
            raise RecipeDataError(f"Failed to load recipe data: HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise RecipeDataError(f"Recipe data is not valid JSON: {e}") from e

    path = _local_path(location)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeDataError(f"Failed to load recipe data: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise RecipeDataError(f"Recipe data is not valid JSON: {e}") from e


class RecipeSource:
    """The canonical recipe document, fetched on every load."""

    def __init__(self, location: str, timeout: float = DEFAULT_TIMEOUT):
        self.location = location
        self.timeout = timeout

    def load(self) -> List[Dict[str, Any]]:
        logger.info("Loading recipes from %s", self.location)
        return decode_recipe_collection(fetch_recipe_document(self.location, self.timeout))


class RecipeCache:
    """Read-only view of a key/value store file, populated by someone else.

    The file holds a JSON object; the CACHE_KEY entry is the JSON-serialized
    recipe collection, the way a browser keeps it in local storage.
    """

    def __init__(self, path: Path, key: str = CACHE_KEY):
        self.path = Path(path)
        self.key = key

    def get_item(self, key: str) -> Optional[Any]:
        if not self.path.exists():
            return None
        try:
            store = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise RecipeDataError(f"Cache file {self.path} is unreadable: {e}") from e
        if not isinstance(store, dict):
            raise RecipeDataError(f"Cache file {self.path} is not a key/value store")
        return store.get(key)

    def load(self) -> Optional[List[Dict[str, Any]]]:
        """Return the cached collection, or None when nothing is cached."""
        raw = self.get_item(self.key)
        if raw is None or raw == "":
            return None
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as e:
                raise RecipeDataError(f"Cached recipes are not valid JSON: {e}") from e
        return decode_recipe_collection(raw)
