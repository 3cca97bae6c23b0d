from page_controller import PageController, get_query_param
from recipe_models import RecipeFound, RecipeLoadError, RecipeNotFound, RecipeRecord, RenderOptions


class FakeLocator:
    def __init__(self, result):
        self.result = result
        self.requested = []

    def locate(self, title):
        self.requested.append(title)
        return self.result


def found(title="Tea"):
    return RecipeFound(RecipeRecord(title=title, ingredients=["Water"], instructions=["Boil"]))


def test_get_query_param_decodes_value():
    assert get_query_param("recipe.html?title=Mac%20%26%20Cheese", "title") == "Mac & Cheese"
    assert get_query_param("recipe.html?title=Tea+Time", "title") == "Tea Time"
    assert get_query_param("recipe.html", "title") is None


def test_missing_title_shows_message_without_lookup():
    locator = FakeLocator(found())
    states = []

    state = PageController(locator, on_state=states.append).init("https://example.com/recipe.html")

    assert state.kind == "missing_title"
    assert state.message == "No recipe selected. Please go back and choose a recipe."
    assert [a.action for a in state.actions] == ["back"]
    assert locator.requested == []
    assert [s.kind for s in states] == ["missing_title"]


def test_blank_title_counts_as_missing():
    locator = FakeLocator(found())

    state = PageController(locator).init("recipe.html?title=%20%20")

    assert state.kind == "missing_title"
    assert locator.requested == []


def test_found_recipe_goes_through_loading_state():
    locator = FakeLocator(found())
    states = []

    state = PageController(locator, on_state=states.append).init("recipe.html?title=Tea")

    assert [s.kind for s in states] == ["loading", "recipe"]
    assert states[0].message == "Loading recipe..."
    assert state.document_title == "Cookease — Tea"
    assert state.view.ingredients == ["Water"]
    assert locator.requested == ["Tea"]


def test_not_found_shows_failure_with_detail_and_recovery_actions():
    locator = FakeLocator(RecipeNotFound("Pho", ["Tea"]))

    state = PageController(locator).init("recipe.html?title=Pho")

    assert state.kind == "failed"
    assert state.message == "Failed to load recipe. Please try again."
    assert "Pho" in state.detail
    assert [a.action for a in state.actions] == ["reload", "back"]


def test_load_error_shows_failure():
    locator = FakeLocator(RecipeLoadError("Tea", "HTTP 503"))

    state = PageController(locator).init("recipe.html?title=Tea")

    assert state.kind == "failed"
    assert "HTTP 503" in state.detail


def test_init_runs_once():
    locator = FakeLocator(found())
    controller = PageController(locator)

    first = controller.init("recipe.html?title=Tea")
    second = controller.init("recipe.html?title=Tea")

    assert first is second
    assert locator.requested == ["Tea"]


def test_share_button_is_bound_to_rendered_recipe():
    controller = PageController(FakeLocator(found()))
    assert controller.share_button() is None

    controller.init("https://example.com/recipe.html?title=Tea")
    button = controller.share_button()

    assert button.payload.title == "Tea"
    assert button.payload.url == "https://example.com/recipe.html?title=Tea"
    assert "Ingredients:\nWater" in button.payload.text


def test_share_button_absent_when_buttons_hidden():
    controller = PageController(FakeLocator(found()), options=RenderOptions(show_buttons=False))
    controller.init("recipe.html?title=Tea")

    assert controller.share_button() is None
