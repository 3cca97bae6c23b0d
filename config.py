"""
Settings for the recipe page, read from the environment.

A .env file in the working directory is loaded first when present; variables
already set in the environment win.

- RECIPE_DATA_URL: recipe document URL or path (default: recipe.json next to the page)
- RECIPE_CACHE_FILE: key/value store file holding the cachedRecipes entry
- RECIPE_HTTP_TIMEOUT: seconds to wait for the recipe document (default 30)
- RECIPE_SHOW_IMAGE / RECIPE_SHOW_BUTTONS: set to 0/false/no/off to hide
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from recipe_source import DEFAULT_TIMEOUT

FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class PageSettings:
    data_url: Optional[str] = None
    cache_file: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    show_image: bool = True
    show_buttons: bool = True


def _flag(name: str, default: bool = True) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in FALSE_VALUES


def _timeout() -> float:
    raw = os.getenv("RECIPE_HTTP_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise SystemExit(f"RECIPE_HTTP_TIMEOUT must be a number of seconds, got {raw!r}.")
    if timeout <= 0:
        raise SystemExit("RECIPE_HTTP_TIMEOUT must be positive.")
    return timeout


def load_settings() -> PageSettings:
    load_dotenv(override=False)
    return PageSettings(
        data_url=os.getenv("RECIPE_DATA_URL") or None,
        cache_file=os.getenv("RECIPE_CACHE_FILE") or None,
        timeout=_timeout(),
        show_image=_flag("RECIPE_SHOW_IMAGE"),
        show_buttons=_flag("RECIPE_SHOW_BUTTONS"),
    )
