import argparse
import logging
import re
from pathlib import Path
from typing import Optional

from config import PageSettings, load_settings
from page_controller import PageController, PageState
from presenters import render_html_page, render_markdown
from recipe_locator import RecipeLocator
from recipe_models import RenderOptions
from recipe_source import RecipeCache, RecipeSource, resolve_data_url

logger = logging.getLogger(__name__)

FORMATS = {
    "html": (render_html_page, ".html"),
    "markdown": (render_markdown, ".md"),
}


def build_controller(page_url: str, settings: PageSettings) -> PageController:
    source = RecipeSource(resolve_data_url(page_url, settings.data_url), timeout=settings.timeout)
    cache = RecipeCache(Path(settings.cache_file)) if settings.cache_file else None
    options = RenderOptions(show_image=settings.show_image, show_buttons=settings.show_buttons)
    return PageController(RecipeLocator(source, cache), on_state=_log_state, options=options)


def _log_state(state: PageState) -> None:
    logger.info("Page state: %s", state.kind)


def output_name(state: PageState) -> str:
    title = state.view.title if state.view is not None else state.kind
    name = re.sub(r"[\\/:*?\"<>|]+", "-", title).strip() or "recipe"
    return name[:80]


def write_page(state: PageState, out_dir: Path, fmt: str = "html") -> Path:
    render, suffix = FORMATS[fmt]
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / (output_name(state) + suffix)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render(state))
    return path


def main(argv: Optional[list] = None) -> int:
    ap = argparse.ArgumentParser(description="Render a recipe detail page from a page address like recipe.html?title=Tea.")
    ap.add_argument("page_url", help="Page address carrying the title query parameter")
    ap.add_argument("--data", help="Recipe document URL or path (default: recipe.json next to the page)")
    ap.add_argument("--cache-file", help="Key/value store file holding cached recipes")
    ap.add_argument("--format", choices=sorted(FORMATS), default="html", help="Output format")
    ap.add_argument("--out-dir", default="./out", help="Output directory for rendered pages")
    ap.add_argument("--no-image", action="store_true", help="Leave out the recipe image block")
    ap.add_argument("--no-buttons", action="store_true", help="Leave out the start cooking and share actions")
    ap.add_argument("--share", action="store_true", help="Print the share text of the recipe")
    ap.add_argument("--verbose", action="store_true", help="Log lookup progress")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    if args.data:
        settings.data_url = args.data
    if args.cache_file:
        settings.cache_file = args.cache_file
    if args.no_image:
        settings.show_image = False
    if args.no_buttons:
        settings.show_buttons = False

    controller = build_controller(args.page_url, settings)
    state = controller.init(args.page_url)
    path = write_page(state, Path(args.out_dir), args.format)

    print("Done.")
    print("Page:", path)
    if state.kind != "recipe":
        print(state.message)
        if state.detail:
            print(state.detail)
        return 1
    if args.share and state.view is not None:
        print()
        print(state.view.share_text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
