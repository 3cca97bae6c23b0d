import threading

from recipe_actions import ShareButton, compose_share_text, start_cooking_href
from recipe_models import RecipeRecord


class FakeTimer:
    created = []

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function()


def make_button():
    FakeTimer.created = []
    return ShareButton("Tea", "Tea\n\nIngredients:\nWater", "https://example.com/recipe.html?title=Tea", timer_factory=FakeTimer)


def test_start_cooking_href_encodes_like_uri_component():
    assert start_cooking_href("Mac & Cheese") == "cooking.html?title=Mac%20%26%20Cheese"
    assert start_cooking_href("Mom's (best) pie!") == "cooking.html?title=Mom's%20(best)%20pie!"


def test_compose_share_text():
    recipe = RecipeRecord(title="Tea", ingredients=["Water", "Tea leaves"], instructions=["Boil water", "Steep"])

    assert compose_share_text(recipe) == (
        "Tea\n\nIngredients:\nWater\nTea leaves\n\nInstructions:\nBoil water\n\nSteep"
    )


def test_native_share_is_preferred():
    button = make_button()
    shared = []
    copied = []

    outcome = button.click(native_share=shared.append, clipboard=copied.append)

    assert outcome == "shared"
    assert shared[0].title == "Tea"
    assert shared[0].url == "https://example.com/recipe.html?title=Tea"
    assert copied == []
    assert button.label == "Share"


def test_cancelled_native_share_is_not_an_error():
    button = make_button()

    def cancelled(payload):
        raise RuntimeError("AbortError")

    assert button.click(native_share=cancelled) == "cancelled"
    assert button.label == "Share"


def test_clipboard_fallback_acknowledges_then_reverts():
    button = make_button()
    copied = []

    assert button.click(clipboard=copied.append) == "copied"
    assert copied == ["Tea\n\nIngredients:\nWater"]
    assert button.label == "Copied!"

    timer = FakeTimer.created[-1]
    assert timer.interval == 2.0
    assert timer.started
    timer.fire()
    assert button.label == "Share"


def test_clipboard_failure_shows_failure_label():
    button = make_button()

    def broken(text):
        raise OSError("clipboard unavailable")

    assert button.click(clipboard=broken) == "copy_failed"
    assert button.label == "Copy failed"
    FakeTimer.created[-1].fire()
    assert button.label == "Share"


def test_repeated_copy_restarts_revert_timer():
    button = make_button()
    button.click(clipboard=lambda text: None)
    button.click(clipboard=lambda text: None)

    first, second = FakeTimer.created
    assert first.cancelled
    assert second.started


def test_no_share_capability():
    assert make_button().click() == "unavailable"


def test_revert_from_timer_thread():
    button = make_button()
    button.click(clipboard=lambda text: None)

    worker = threading.Thread(target=FakeTimer.created[-1].fire)
    worker.start()
    worker.join()

    assert button.label == "Share"
    button.click(clipboard=lambda text: None)
    assert button.label == "Copied!"
