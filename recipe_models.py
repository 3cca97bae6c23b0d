from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _text_list(value: Any) -> List[str]:
    if value is None or value == "":
        return []
    if not isinstance(value, (list, tuple)):
        return [str(value)]
    return [str(item) for item in value if item is not None]


@dataclass(frozen=True)
class RecipeRecord:
    """One recipe from the data document, with duration aliases reconciled."""

    title: str
    minimum_duration: Optional[str] = None
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    servings: Optional[str] = None
    difficulty: Optional[str] = None
    notes: Optional[str] = None
    recipe_image: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecipeRecord":
        duration = _optional_text(data.get("minimumDuration")) or _optional_text(data.get("minimum_duration"))
        return cls(
            title=str(data.get("title") or ""),
            minimum_duration=duration,
            ingredients=_text_list(data.get("ingredients")),
            instructions=_text_list(data.get("instructions")),
            servings=_optional_text(data.get("servings")),
            difficulty=_optional_text(data.get("difficulty")),
            notes=_optional_text(data.get("notes")),
            recipe_image=_optional_text(data.get("recipeImage")),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
        }
        if self.minimum_duration is not None:
            data["minimumDuration"] = self.minimum_duration
            data["minimum_duration"] = self.minimum_duration
        for key, value in (
            ("servings", self.servings),
            ("difficulty", self.difficulty),
            ("notes", self.notes),
            ("recipeImage", self.recipe_image),
        ):
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class RecipeFound:
    recipe: RecipeRecord
    source: str = "remote"


@dataclass(frozen=True)
class RecipeNotFound:
    requested_title: str
    available_titles: List[str] = field(default_factory=list)

    @property
    def detail(self) -> str:
        available = ", ".join(self.available_titles) or "none"
        return f"Recipe not found: {self.requested_title!r}. Available recipes: {available}"


@dataclass(frozen=True)
class RecipeLoadError:
    requested_title: str
    message: str

    @property
    def detail(self) -> str:
        return f"Could not load recipes for {self.requested_title!r}: {self.message}"


LookupResult = Union[RecipeFound, RecipeNotFound, RecipeLoadError]


@dataclass(frozen=True)
class RenderOptions:
    show_image: bool = True
    show_buttons: bool = True


@dataclass(frozen=True)
class ImageBlock:
    kind: str
    src: Optional[str] = None
    alt: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class MetaItem:
    label: str
    value: str


@dataclass(frozen=True)
class NumberedStep:
    number: int
    text: str


@dataclass(frozen=True)
class PageAction:
    label: str
    action: str
    href: Optional[str] = None


@dataclass(frozen=True)
class RecipeView:
    """Structured description of a rendered recipe, consumed by the presenters."""

    document_title: str
    title: str
    image: Optional[ImageBlock]
    meta: List[MetaItem]
    ingredients: List[str]
    instructions: List[NumberedStep]
    notes: Optional[str] = None
    actions: List[PageAction] = field(default_factory=list)
    share_text: str = ""
