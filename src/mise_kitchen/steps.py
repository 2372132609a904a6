"""
Mise Kitchen - Step Editing.

Glue between stored recipes and the Mise unifier, plus pure edit helpers
for a unified sequence. Every helper returns new objects; recipes and step
lists passed in are never modified.

Typical edit session:
    steps = unify_recipe_steps(recipe)
    steps = move_step(steps, 3, 0)
    steps = retag_step(steps, 0, StepTag.PREP)
    saved = apply_step_edits(recipe, steps)
"""

import logging
from collections.abc import Sequence
from uuid import uuid4

from mise.steps import (
    StepSource,
    StepTag,
    UnifiedStep,
    build_unified_steps,
    build_unified_steps_from_import,
    map_unified_steps_to_recipe_schema,
    renumber_steps,
)
from mise_kitchen.models import Recipe, RecipeImport

logger = logging.getLogger(__name__)


# =============================================================================
# Recipe <-> Unified Sequence
# =============================================================================


def unify_recipe_steps(recipe: Recipe) -> list[UnifiedStep]:
    """Unified sequence for a stored recipe."""
    return build_unified_steps(recipe.preparation_steps, recipe.cooking_steps)


def preview_import_steps(recipe: RecipeImport) -> list[UnifiedStep]:
    """Unified sequence for an import preview (always prep first, then cook)."""
    return build_unified_steps_from_import(recipe.preparation_steps, recipe.cooking_steps)


def apply_step_edits(recipe: Recipe, unified_steps: Sequence[UnifiedStep]) -> Recipe:
    """
    Map an edited sequence back onto a recipe.

    Both step lists are replaced wholesale; the returned recipe is a deep
    copy, ready to hand to persistence.
    """
    mapped = map_unified_steps_to_recipe_schema(unified_steps)
    logger.info(
        f"Saving steps for recipe {recipe.id}: "
        f"{len(mapped.preparation_steps)} prep, {len(mapped.cooking_steps)} cook"
    )
    return recipe.model_copy(
        update={
            "preparation_steps": mapped.preparation_steps,
            "cooking_steps": mapped.cooking_steps,
        },
        deep=True,
    )


def toggle_step_completion(recipe: Recipe, source: StepSource, step_number: int) -> Recipe:
    """
    Flip completion of the first step with this number in one stored list.

    Unknown step numbers return an unchanged copy.
    """
    updated = recipe.model_copy(deep=True)
    steps = updated.preparation_steps if source is StepSource.PREPARATION_STEPS else updated.cooking_steps

    for step in steps:
        if step.step_number == step_number:
            step.completed = not step.completed
            return updated

    logger.warning(f"No step {step_number} in {source.value} of recipe {recipe.id}")
    return updated


# =============================================================================
# Edit Helpers
# =============================================================================


def _check_index(steps: Sequence[UnifiedStep], index: int, *, allow_end: bool = False) -> None:
    upper = len(steps) if allow_end else len(steps) - 1
    if not 0 <= index <= upper:
        raise IndexError(f"Step index {index} out of range for {len(steps)} steps")


def move_step(steps: Sequence[UnifiedStep], from_index: int, to_index: int) -> list[UnifiedStep]:
    """Move one step to a new position."""
    _check_index(steps, from_index)
    _check_index(steps, to_index)

    reordered = list(steps)
    reordered.insert(to_index, reordered.pop(from_index))
    return renumber_steps(reordered)


def retag_step(steps: Sequence[UnifiedStep], index: int, tag: StepTag | str) -> list[UnifiedStep]:
    """Change the tag of one step. Retagging to prep drops its duration on save."""
    _check_index(steps, index)

    updated = list(steps)
    updated[index] = updated[index].model_copy(update={"tag": StepTag(tag)})
    return renumber_steps(updated)


def insert_step(
    steps: Sequence[UnifiedStep],
    index: int,
    instruction: str,
    tag: StepTag | str = StepTag.NEUTRAL,
    duration: str | None = None,
) -> list[UnifiedStep]:
    """Insert a new step before index (index == len(steps) appends)."""
    _check_index(steps, index, allow_end=True)
    tag = StepTag(tag)

    new_step = UnifiedStep(
        key=f"{tag.value}-new-{uuid4().hex[:8]}",
        order=index + 1,
        instruction=instruction,
        tag=tag,
        duration=duration,
    )
    updated = list(steps)
    updated.insert(index, new_step)
    return renumber_steps(updated)


def remove_step(steps: Sequence[UnifiedStep], index: int) -> list[UnifiedStep]:
    """Remove one step. Removing the last one leaves an empty sequence."""
    _check_index(steps, index)

    updated = list(steps)
    del updated[index]
    return renumber_steps(updated)
