from typing import List, Optional

from constants import (
    DEFAULT_IMAGE_GLYPH,
    DURATION_FALLBACK,
    IMAGE_FILE_RE,
    NO_INGREDIENTS,
    NO_INSTRUCTIONS,
    SHARE_LABEL,
    SITE_NAME,
)
from recipe_actions import compose_share_text, start_cooking_href
from recipe_models import (
    ImageBlock,
    MetaItem,
    NumberedStep,
    PageAction,
    RecipeRecord,
    RecipeView,
    RenderOptions,
)


def document_title(title: str) -> str:
    return f"{SITE_NAME} — {title}"


def image_block(recipe: RecipeRecord) -> ImageBlock:
    image = recipe.recipe_image
    if image and IMAGE_FILE_RE.search(image.strip()):
        return ImageBlock(kind="image", src=image.strip(), alt=recipe.title)
    if image:
        return ImageBlock(kind="placeholder", text=image)
    return ImageBlock(kind="placeholder", text=DEFAULT_IMAGE_GLYPH)


def meta_items(recipe: RecipeRecord) -> List[MetaItem]:
    items = [MetaItem("Time", recipe.minimum_duration or DURATION_FALLBACK)]
    if recipe.servings:
        items.append(MetaItem("Servings", recipe.servings))
    if recipe.difficulty:
        items.append(MetaItem("Difficulty", recipe.difficulty))
    return items


def ingredient_items(ingredients: List[str]) -> List[str]:
    return list(ingredients) if ingredients else [NO_INGREDIENTS]


def instruction_steps(instructions: List[str]) -> List[NumberedStep]:
    if not instructions:
        instructions = [NO_INSTRUCTIONS]
    return [NumberedStep(i, step) for i, step in enumerate(instructions, 1)]


def recipe_actions(recipe: RecipeRecord) -> List[PageAction]:
    return [
        PageAction("Start Cooking", "start_cooking", href=start_cooking_href(recipe.title)),
        PageAction(SHARE_LABEL, "share"),
    ]


def render_recipe(recipe: RecipeRecord, options: Optional[RenderOptions] = None) -> RecipeView:
    """Build the display model for one recipe. No side effects."""
    options = options or RenderOptions()
    return RecipeView(
        document_title=document_title(recipe.title),
        title=recipe.title,
        image=image_block(recipe) if options.show_image else None,
        meta=meta_items(recipe),
        ingredients=ingredient_items(recipe.ingredients),
        instructions=instruction_steps(recipe.instructions),
        notes=recipe.notes,
        actions=recipe_actions(recipe) if options.show_buttons else [],
        share_text=compose_share_text(recipe),
    )
