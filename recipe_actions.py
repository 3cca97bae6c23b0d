import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import quote

from constants import (
    ACK_REVERT_SECONDS,
    COOKING_PAGE,
    COPIED_LABEL,
    COPY_FAILED_LABEL,
    SHARE_LABEL,
    TITLE_PARAM,
    URI_COMPONENT_SAFE,
)
from recipe_models import RecipeRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SharePayload:
    title: str
    text: str
    url: str


def encode_uri_component(value: str) -> str:
    return quote(value, safe=URI_COMPONENT_SAFE)


def start_cooking_href(title: str, page: str = COOKING_PAGE) -> str:
    return f"{page}?{TITLE_PARAM}={encode_uri_component(title)}"


def compose_share_text(recipe: RecipeRecord) -> str:
    ingredients = "\n".join(recipe.ingredients)
    instructions = "\n\n".join(recipe.instructions)
    return f"{recipe.title}\n\nIngredients:\n{ingredients}\n\nInstructions:\n{instructions}"


class ShareButton:
    """Share action bound to a rendered recipe.

    Prefers the host's native share; otherwise copies the text to the
    clipboard and shows a short acknowledgment on the button label.
    """

    def __init__(
        self,
        title: str,
        text: str,
        url: str,
        label: str = SHARE_LABEL,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.payload = SharePayload(title=title, text=text, url=url)
        self.original_label = label
        self.label = label
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def click(
        self,
        native_share: Optional[Callable[[SharePayload], None]] = None,
        clipboard: Optional[Callable[[str], None]] = None,
    ) -> str:
        if native_share is not None:
            try:
                native_share(self.payload)
            except Exception as e:
                logger.debug("Share cancelled: %s", e)
                return "cancelled"
            return "shared"

        if clipboard is None:
            return "unavailable"

        try:
            clipboard(self.payload.text)
        except Exception as e:
            logger.warning("Copy failed: %s", e)
            self._acknowledge(COPY_FAILED_LABEL)
            return "copy_failed"
        self._acknowledge(COPIED_LABEL)
        return "copied"

    def revert(self) -> None:
        with self._lock:
            self.label = self.original_label

    def _acknowledge(self, label: str) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self.label = label
            self._timer = self._timer_factory(ACK_REVERT_SECONDS, self.revert)
            self._timer.daemon = True
            self._timer.start()
