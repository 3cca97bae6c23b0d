import logging
from typing import Any, Dict, List, Optional
from urllib.parse import unquote

from recipe_models import LookupResult, RecipeFound, RecipeLoadError, RecipeNotFound, RecipeRecord
from recipe_source import RecipeCache, RecipeDataError, RecipeSource

logger = logging.getLogger(__name__)


def _match_key(title: Any) -> str:
    return str(title or "").strip().lower()


def find_exact(recipes: List[Dict[str, Any]], title: str) -> Optional[Dict[str, Any]]:
    wanted = _match_key(title)
    if not wanted:
        return None
    for recipe in recipes:
        if _match_key(recipe.get("title")) == wanted:
            return recipe
    return None


def find_partial(recipes: List[Dict[str, Any]], title: str) -> Optional[Dict[str, Any]]:
    wanted = _match_key(title)
    if not wanted:
        return None
    for recipe in recipes:
        if wanted in _match_key(recipe.get("title")):
            return recipe
    return None


def find_recipe(recipes: List[Dict[str, Any]], title: str) -> Optional[Dict[str, Any]]:
    """Exact match first; the substring match only runs when nothing matches exactly."""
    return find_exact(recipes, title) or find_partial(recipes, title)


class RecipeLocator:
    """Resolves a requested title against the cache, then the recipe document."""

    def __init__(self, source: RecipeSource, cache: Optional[RecipeCache] = None):
        self.source = source
        self.cache = cache

    def locate(self, requested_title: str) -> LookupResult:
        title = unquote(requested_title)

        cached = self._cached_recipes()
        if cached:
            hit = find_exact(cached, title)
            if hit is not None:
                logger.info("Found recipe in cache: %s", hit.get("title"))
                return RecipeFound(RecipeRecord.from_dict(hit), source="cache")

        try:
            recipes = self.source.load()
        except RecipeDataError as e:
            logger.warning("Error fetching recipe %r: %s", title, e)
            hit = find_partial(cached or [], title)
            if hit is not None:
                logger.info("Using partial cache match: %s", hit.get("title"))
                return RecipeFound(RecipeRecord.from_dict(hit), source="cache")
            return RecipeLoadError(title, str(e))

        hit = find_recipe(recipes, title)
        if hit is None:
            available = [str(r.get("title")) for r in recipes if r.get("title")]
            logger.warning("Recipe %r not found among %d recipes", title, len(recipes))
            return RecipeNotFound(title, available)
        return RecipeFound(RecipeRecord.from_dict(hit), source="remote")

    def _cached_recipes(self) -> Optional[List[Dict[str, Any]]]:
        if self.cache is None:
            return None
        try:
            return self.cache.load()
        except RecipeDataError as e:
            logger.warning("Ignoring recipe cache: %s", e)
            return None
