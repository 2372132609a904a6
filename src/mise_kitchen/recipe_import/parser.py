"""Turn imported recipe documents into stored recipes."""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from mise.steps.models import CookingStep, PreparationStep
from mise_kitchen.config import settings
from mise_kitchen.models import Recipe, RecipeImport, ShoppingItem

from .models import ImportValidation
from .normalizer import STEP_FIELDS, normalize_import_document

logger = logging.getLogger(__name__)


def validate_recipe_json(data: Any) -> ImportValidation:
    """
    Validate the structure of an import document.

    Checks:
    1. Title present
    2. At least one ingredient, each with a name and a quantity
    3. At least one step list present
    4. Every step carries non-empty instruction text
    5. Step numbers, when given, are integers of 1 or more
    6. The document loads as a RecipeImport

    A document that passes always loads with load_recipe_import. Step
    instructions are only checked here; the unifier trusts them.
    """
    if not isinstance(data, dict):
        return ImportValidation(valid=False, error="Recipe must be a JSON object")

    title = data.get("title")
    if not title or not isinstance(title, str):
        return ImportValidation(valid=False, error="Recipe must have a title")

    ingredients = data.get("ingredients")
    if not isinstance(ingredients, list) or len(ingredients) == 0:
        return ImportValidation(valid=False, error="Recipe must have at least one ingredient")

    for position, ingredient in enumerate(ingredients, start=1):
        if not isinstance(ingredient, dict) or not _is_text(ingredient.get("name")):
            return ImportValidation(valid=False, error=f"Ingredient {position} must have a name")
        quantity = ingredient.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, (str, int, float)):
            return ImportValidation(valid=False, error=f"Ingredient {position} must have a quantity")

    if not any(isinstance(data.get(field), list) for field in STEP_FIELDS):
        return ImportValidation(
            valid=False,
            error="Recipe must have preparation steps or cooking steps",
        )

    for field in STEP_FIELDS:
        steps = data.get(field)
        if steps is None:
            continue
        if not isinstance(steps, list):
            return ImportValidation(valid=False, error=f"{field} must be a list")
        for position, step in enumerate(steps, start=1):
            if not _has_instruction_text(step):
                return ImportValidation(
                    valid=False,
                    error=f"{field} step {position} must have a non-empty instruction",
                )
            if not _has_valid_step_number(step):
                return ImportValidation(
                    valid=False,
                    error=f"{field} step {position} must have a stepNumber of 1 or more",
                )

    try:
        RecipeImport.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        return ImportValidation(valid=False, error=f"{location}: {first['msg']}")

    return ImportValidation(valid=True)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _has_instruction_text(step: Any) -> bool:
    if isinstance(step, dict):
        step = step.get("instruction")
    return _is_text(step)


def _has_valid_step_number(step: Any) -> bool:
    number = step.get("stepNumber") if isinstance(step, dict) else None
    if number is None:
        return True
    return isinstance(number, int) and not isinstance(number, bool) and number >= 1


def load_recipe_import(data: dict[str, Any]) -> RecipeImport:
    """
    Load an import document, splitting pasted step text into entries.

    Raises:
        pydantic.ValidationError: if the normalized document has the wrong shape
    """
    return RecipeImport.model_validate(normalize_import_document(data))


def parse_recipe_json(
    data: RecipeImport,
    *,
    now: datetime | None = None,
    id_prefix: str | None = None,
) -> Recipe:
    """
    Convert an import into a stored recipe.

    - Bare step strings become numbered steps (array position)
    - Step objects keep their number, or get the array position when missing
    - Completion is reset on every step
    - Shopping list comes from the import, or from the ingredients when absent

    Args:
        data: The loaded import
        now: Creation time (defaults to current UTC time)
        id_prefix: Recipe id prefix (defaults to settings.recipe_id_prefix)

    Returns:
        A new Recipe; the import is not modified
    """
    now = now or datetime.now(timezone.utc)
    prefix = id_prefix or settings.recipe_id_prefix
    recipe_id = f"{prefix}_{int(now.timestamp() * 1000)}"

    preparation_steps = [
        PreparationStep(step_number=index + 1, instruction=step, completed=False)
        if isinstance(step, str)
        else step.model_copy(update={"step_number": step.step_number or index + 1, "completed": False})
        for index, step in enumerate(data.preparation_steps)
    ]

    cooking_steps = [
        CookingStep(step_number=index + 1, instruction=step, completed=False)
        if isinstance(step, str)
        else step.model_copy(update={"step_number": step.step_number or index + 1, "completed": False})
        for index, step in enumerate(data.cooking_steps)
    ]

    if data.shopping_list:
        shopping_list = [
            ShoppingItem(id=f"shopping_{recipe_id}_{index}", name=item, quantity="1", purchased=False)
            if isinstance(item, str)
            else ShoppingItem(
                id=f"shopping_{recipe_id}_{index}",
                name=item.name,
                quantity=item.quantity,
                unit=item.unit,
                purchased=False,
            )
            for index, item in enumerate(data.shopping_list)
        ]
    else:
        logger.info(f"No shopping list on import '{data.title}', generating from ingredients")
        shopping_list = [
            ShoppingItem(
                id=f"shopping_{recipe_id}_{index}",
                name=ingredient.name,
                quantity=ingredient.quantity,
                unit=ingredient.unit,
                purchased=False,
            )
            for index, ingredient in enumerate(data.ingredients)
        ]

    return Recipe(
        id=recipe_id,
        title=data.title,
        description=data.description,
        servings=data.servings,
        prep_time_minutes=data.prep_time_minutes,
        marinate_time_minutes=data.marinate_time_minutes,
        cook_time_minutes=data.cook_time_minutes,
        category=data.category or [],
        tags=data.tags or [],
        ingredients=[ingredient.model_copy() for ingredient in data.ingredients],
        preparation_steps=preparation_steps,
        cooking_steps=cooking_steps,
        shopping_list=shopping_list,
        created_at=now.isoformat(),
        image_url=data.image_url,
    )
