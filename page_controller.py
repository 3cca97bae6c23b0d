import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional
from urllib.parse import parse_qs, urlsplit

from constants import (
    FAILURE_MESSAGE,
    LOADING_MESSAGE,
    MISSING_TITLE_MESSAGE,
    SITE_NAME,
    TITLE_PARAM,
)
from recipe_actions import ShareButton
from recipe_locator import RecipeLocator
from recipe_models import PageAction, RecipeFound, RecipeView, RenderOptions
from recipe_renderer import render_recipe

logger = logging.getLogger(__name__)

GO_BACK = PageAction("Go Back", "back")
RETRY = PageAction("Retry", "reload")


@dataclass(frozen=True)
class PageState:
    """What the recipe container shows at one point of the page lifecycle."""

    kind: str
    document_title: str = SITE_NAME
    message: Optional[str] = None
    detail: Optional[str] = None
    actions: List[PageAction] = field(default_factory=list)
    view: Optional[RecipeView] = None


def get_query_param(page_url: str, name: str) -> Optional[str]:
    values = parse_qs(urlsplit(page_url).query).get(name)
    if not values:
        return None
    return values[0]


class PageController:
    """Runs the page initialisation sequence once and reports each state."""

    def __init__(
        self,
        locator: RecipeLocator,
        on_state: Optional[Callable[[PageState], None]] = None,
        options: Optional[RenderOptions] = None,
    ):
        self.locator = locator
        self.on_state = on_state
        self.options = options or RenderOptions()
        self.page_url: Optional[str] = None
        self.state: Optional[PageState] = None

    def init(self, page_url: str) -> PageState:
        if self.state is not None:
            return self.state
        self.page_url = page_url

        title = get_query_param(page_url, TITLE_PARAM)
        if not title or not title.strip():
            return self._finish(PageState("missing_title", message=MISSING_TITLE_MESSAGE, actions=[GO_BACK]))

        self._show(PageState("loading", message=LOADING_MESSAGE))

        result = self.locator.locate(title)
        if not isinstance(result, RecipeFound):
            logger.error("Error: %s", result.detail)
            return self._finish(PageState(
                "failed",
                message=FAILURE_MESSAGE,
                detail=result.detail,
                actions=[RETRY, GO_BACK],
            ))

        view = render_recipe(result.recipe, self.options)
        return self._finish(PageState("recipe", document_title=view.document_title, view=view))

    def share_button(self) -> Optional[ShareButton]:
        """The share action of the rendered recipe, if one is on the page."""
        if self.state is None or self.state.view is None:
            return None
        view = self.state.view
        if not any(a.action == "share" for a in view.actions):
            return None
        return ShareButton(view.title, view.share_text, self.page_url or "")

    def _finish(self, state: PageState) -> PageState:
        self.state = state
        self._show(state)
        return state

    def _show(self, state: PageState) -> None:
        if self.on_state is not None:
            self.on_state(state)
