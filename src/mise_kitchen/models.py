"""
Mise Kitchen - Recipe Models.

Recipe documents as the persistence layer stores them, plus the looser
import shape used for freshly generated or pasted recipes.

Only the two step lists are touched by the Mise core; every other field is
carried along untouched.
"""

from pydantic import Field, field_validator

from mise.steps.models import (
    CamelModel,
    CookingStep,
    CookingStepInput,
    PreparationStep,
    PreparationStepInput,
)


class Ingredient(CamelModel):
    """An ingredient line. Quantity is free text ("1/2", "a pinch")."""

    name: str
    quantity: str
    unit: str | None = None

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_as_text(cls, value):
        return str(value) if isinstance(value, (int, float)) else value


class ShoppingItem(CamelModel):
    """A shopping list entry derived from a recipe."""

    id: str
    name: str
    quantity: str
    unit: str | None = None
    purchased: bool = False


class ShoppingItemImport(CamelModel):
    """Shopping list entry as it appears in an import (no id yet)."""

    id: str | None = None
    name: str
    quantity: str
    unit: str | None = None
    purchased: bool = False


class Recipe(CamelModel):
    """
    A stored recipe.

    preparation_steps and cooking_steps are numbered independently; a stored
    document may carry null for either and it loads as an empty list.
    """

    id: str
    title: str
    description: str | None = None
    servings: int | None = None
    prep_time_minutes: int | None = None
    marinate_time_minutes: int | None = None
    cook_time_minutes: int | None = None
    category: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    ingredients: list[Ingredient] = Field(default_factory=list)
    preparation_steps: list[PreparationStep] = Field(default_factory=list)
    cooking_steps: list[CookingStep] = Field(default_factory=list)
    shopping_list: list[ShoppingItem] = Field(default_factory=list)
    created_at: str
    image_url: str | None = None
    is_favorite: bool | None = None

    @field_validator("preparation_steps", "cooking_steps", "shopping_list", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class RecipeImport(CamelModel):
    """
    A recipe that has not been saved yet.

    Step lists may hold bare instruction strings; the shopping list may hold
    bare item names.
    """

    title: str
    description: str | None = None
    servings: int | None = None
    prep_time_minutes: int | None = None
    marinate_time_minutes: int | None = None
    cook_time_minutes: int | None = None
    category: list[str] | None = None
    tags: list[str] | None = None
    ingredients: list[Ingredient] = Field(default_factory=list)
    preparation_steps: list[PreparationStepInput] = Field(default_factory=list)
    cooking_steps: list[CookingStepInput] = Field(default_factory=list)
    shopping_list: list[str | ShoppingItemImport] | None = None
    image_url: str | None = None

    @field_validator("preparation_steps", "cooking_steps", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value
