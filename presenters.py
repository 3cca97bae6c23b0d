from html import escape
from typing import List, Optional

from page_controller import PageState
from recipe_models import PageAction, RecipeView

ACTION_SCRIPTS = {
    "back": "window.history.back()",
    "reload": "window.location.reload()",
}

ACTION_IDS = {
    "start_cooking": "startCooking",
    "share": "shareBtn",
}


def _action_html(action: PageAction, view: Optional[RecipeView] = None) -> str:
    label = escape(action.label)
    if action.href:
        return f'<a id="{ACTION_IDS.get(action.action, action.action)}" class="primary-btn" href="{escape(action.href)}">{label}</a>'
    if action.action == "share" and view is not None:
        share_text = escape(view.share_text).replace("\n", "&#10;")
        return f'<button id="shareBtn" class="secondary-btn" data-share-text="{share_text}">{label}</button>'
    script = ACTION_SCRIPTS.get(action.action, "")
    return f'<button onclick="{script}" class="primary-btn">{label}</button>'


def _recipe_html(view: RecipeView) -> List[str]:
    lines: List[str] = []
    if view.image is not None:
        lines.append('<div class="recipe-image-container">')
        if view.image.kind == "image":
            lines.append(f'  <img src="{escape(view.image.src)}" alt="{escape(view.image.alt or "")}">')
        else:
            lines.append(f'  <div class="emoji-placeholder">{escape(view.image.text or "")}</div>')
        lines.append("</div>")

    lines.append(f'<h2 class="section-title">{escape(view.title)}</h2>')
    lines.append('<div class="recipe-meta">')
    for item in view.meta:
        lines.append(f"  <div><strong>{escape(item.label)}:</strong> {escape(item.value)}</div>")
    lines.append("</div>")

    lines.append('<h3 class="section-title">Ingredients</h3>')
    lines.append('<ul class="list">')
    lines.extend(f"  <li>{escape(ing)}</li>" for ing in view.ingredients)
    lines.append("</ul>")

    lines.append('<h3 class="section-title">Instructions</h3>')
    lines.append('<ol class="list">')
    lines.extend(f'  <li value="{step.number}">{escape(step.text)}</li>' for step in view.instructions)
    lines.append("</ol>")

    if view.notes:
        lines.append('<h3 class="section-title">Notes</h3>')
        lines.append(f'<p class="recipe-notes">{escape(view.notes)}</p>')

    if view.actions:
        lines.append('<div class="recipe-actions">')
        lines.extend(f"  {_action_html(a, view)}" for a in view.actions)
        lines.append("</div>")
    return lines


def render_html_card(state: PageState) -> str:
    """Inner HTML of the recipe container for the given page state."""
    if state.kind == "recipe" and state.view is not None:
        lines = _recipe_html(state.view)
    elif state.kind == "loading":
        lines = [
            '<div class="loading">',
            '  <div class="spinner"></div>',
            f"  <p>{escape(state.message or '')}</p>",
            "</div>",
        ]
    else:
        lines = ['<div class="error">', f"  <p>{escape(state.message or '')}</p>"]
        if state.detail:
            lines.append(f'  <p class="error-detail">{escape(state.detail)}</p>')
        lines.extend(f"  {_action_html(a)}" for a in state.actions)
        lines.append("</div>")
    return "\n".join(lines) + "\n"


def render_html_page(state: PageState) -> str:
    card = "".join(f"      {line}\n" for line in render_html_card(state).splitlines())
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "  <head>\n"
        '    <meta charset="utf-8">\n'
        f"    <title>{escape(state.document_title)}</title>\n"
        "  </head>\n"
        "  <body>\n"
        '    <div id="recipeCard">\n'
        f"{card}"
        "    </div>\n"
        "  </body>\n"
        "</html>\n"
    )


def render_markdown(state: PageState) -> str:
    if state.kind != "recipe" or state.view is None:
        md = [f"# {state.document_title}", "", f"> {state.message or ''}", ""]
        if state.detail:
            md.append(f"_{state.detail}_")
            md.append("")
        return "\n".join(md).strip() + "\n"

    view = state.view
    md = [f"# {view.title}", ""]
    if view.image is not None:
        if view.image.kind == "image":
            md.append(f"![{view.image.alt or ''}]({view.image.src})")
        else:
            md.append(view.image.text or "")
        md.append("")
    for item in view.meta:
        md.append(f"- **{item.label}:** {item.value}")
    md.append("")
    md.append("## Ingredients")
    for ing in view.ingredients:
        md.append(f"- {ing}")
    md.append("")
    md.append("## Instructions")
    for step in view.instructions:
        md.append(f"{step.number}. {step.text}")
    md.append("")
    if view.notes:
        md.append("## Notes")
        md.append(view.notes)
        md.append("")
    links = [f"[{a.label}]({a.href})" for a in view.actions if a.href]
    if links:
        md.append(" · ".join(links))
        md.append("")
    return "\n".join(md).strip() + "\n"
