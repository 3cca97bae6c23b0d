import re
from typing import Pattern, Tuple

SITE_NAME = "Cookease"
TITLE_PARAM = "title"
COOKING_PAGE = "cooking.html"

CACHE_KEY = "cachedRecipes"
DATA_FILE = "recipe.json"
COLLECTION_KEYS: Tuple[str, ...] = ("food_recipes", "recipes")

IMAGE_FILE_RE: Pattern[str] = re.compile(r"\.(?:jpe?g|png|gif|webp|svg)$", re.I)
DEFAULT_IMAGE_GLYPH = "🍳"

DURATION_FALLBACK = "Not specified"
NO_INGREDIENTS = "No ingredients listed."
NO_INSTRUCTIONS = "No instructions available."

MISSING_TITLE_MESSAGE = "No recipe selected. Please go back and choose a recipe."
LOADING_MESSAGE = "Loading recipe..."
FAILURE_MESSAGE = "Failed to load recipe. Please try again."

SHARE_LABEL = "Share"
COPIED_LABEL = "Copied!"
COPY_FAILED_LABEL = "Copy failed"
ACK_REVERT_SECONDS = 2.0

# encodeURIComponent leaves these unescaped
URI_COMPONENT_SAFE = "-_.!~*'()"
