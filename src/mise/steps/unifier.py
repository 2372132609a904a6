"""
Mise Core - Step Unifier.

Reconciles a recipe's preparation and cooking lists into one ordered
sequence for display and editing, and maps an edited sequence back into
the two-list schema.

Forward:
    build_unified_steps              stored recipes (numbered step objects)
    build_unified_steps_from_import  import previews (bare strings allowed)

Reverse:
    map_unified_steps_to_recipe_schema

Everything here is pure: inputs are never mutated and every call returns
freshly allocated models.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import assert_never

from mise.steps.models import (
    CookingStep,
    CookingStepInput,
    PreparationStep,
    PreparationStepInput,
    RecipeSteps,
    StepOrigin,
    StepSource,
    StepTag,
    UnifiedStep,
)

logger = logging.getLogger(__name__)

FALLBACK_KEY = "fallback"
FALLBACK_INSTRUCTION = "No steps provided."


def _fallback_steps() -> list[UnifiedStep]:
    """Placeholder sequence for a recipe with no steps on either list."""
    return [
        UnifiedStep(
            key=FALLBACK_KEY,
            order=1,
            instruction=FALLBACK_INSTRUCTION,
            tag=StepTag.NEUTRAL,
        )
    ]


def renumber_steps(steps: Iterable[UnifiedStep]) -> list[UnifiedStep]:
    """Return copies of the steps with order rewritten to 1..N by position."""
    return [
        step.model_copy(update={"order": position}, deep=True)
        for position, step in enumerate(steps, start=1)
    ]


def _origin_number(step: UnifiedStep) -> int:
    if step.origin is None or step.origin.step_number is None:
        return 0
    return step.origin.step_number


# =============================================================================
# Ordering Policy
# =============================================================================


def should_interleave(
    preparation_steps: Sequence[PreparationStep] | None,
    cooking_steps: Sequence[CookingStep] | None,
) -> bool:
    """
    Decide whether to merge-sort both lists by step number.

    True only when:
    - both lists are non-empty
    - every step on both lists carries a step number
    - the two lists share no step number

    Abutting or disjoint ranges qualify in either direction (prep 1-3 with
    cook 4-6, or cook 1-3 with prep 4-5). Any shared number, including a
    partial overlap such as prep {1, 3} with cook {2, 3}, means the numbering
    can't be trusted across lists and the caller falls back to prep-then-cook.
    """
    if not preparation_steps or not cooking_steps:
        return False

    prep_numbers = [step.step_number for step in preparation_steps]
    cook_numbers = [step.step_number for step in cooking_steps]

    if None in prep_numbers or None in cook_numbers:
        return False

    return set(prep_numbers).isdisjoint(cook_numbers)


# =============================================================================
# Forward: two lists -> unified sequence
# =============================================================================


def build_unified_steps(
    preparation_steps: Sequence[PreparationStep] | None,
    cooking_steps: Sequence[CookingStep] | None,
) -> list[UnifiedStep]:
    """
    Build the unified step sequence for a stored recipe.

    Missing lists are treated as empty. When both are empty the result is a
    single neutral placeholder, so callers never receive an empty sequence.
    The final order field is always 1..N in sequence position.

    Args:
        preparation_steps: Stored preparation steps (may be None)
        cooking_steps: Stored cooking steps (may be None)

    Returns:
        Unified steps in display order
    """
    prep_steps = list(preparation_steps or [])
    cook_steps = list(cooking_steps or [])

    if not prep_steps and not cook_steps:
        logger.debug("No preparation or cooking steps, using placeholder")
        return _fallback_steps()

    unified_prep = [
        UnifiedStep(
            key=f"prep-{index}",
            order=step.step_number or index + 1,
            instruction=step.instruction,
            tag=StepTag.PREP,
            completed=step.completed,
            origin=StepOrigin(source=StepSource.PREPARATION_STEPS, step_number=step.step_number),
        )
        for index, step in enumerate(prep_steps)
    ]

    unified_cook = [
        UnifiedStep(
            key=f"cook-{index}",
            order=step.step_number or index + 1,
            instruction=step.instruction,
            tag=StepTag.COOK,
            completed=step.completed,
            duration=step.duration,
            origin=StepOrigin(source=StepSource.COOKING_STEPS, step_number=step.step_number),
        )
        for index, step in enumerate(cook_steps)
    ]

    if should_interleave(prep_steps, cook_steps):
        logger.debug(
            f"Interleaving {len(unified_prep)} prep and {len(unified_cook)} cook steps by step number"
        )
        # sorted() is stable: equal numbers within one list keep array order
        merged = sorted(unified_prep + unified_cook, key=_origin_number)
    else:
        logger.debug(
            f"Sequential order for {len(unified_prep)} prep and {len(unified_cook)} cook steps"
        )
        merged = unified_prep + unified_cook

    return renumber_steps(merged)


def build_unified_steps_from_import(
    preparation_steps: Sequence[PreparationStepInput] | None,
    cooking_steps: Sequence[CookingStepInput] | None,
) -> list[UnifiedStep]:
    """
    Build the unified step sequence for an import preview.

    Import entries may be bare instruction strings, so there is no reliable
    numbering to interleave on: prep steps always come first, then cook
    steps, each in array order. Bare strings get their array position as
    origin step number.
    """
    prep_steps = list(preparation_steps or [])
    cook_steps = list(cooking_steps or [])

    if not prep_steps and not cook_steps:
        logger.debug("Import has no preparation or cooking steps, using placeholder")
        return _fallback_steps()

    unified: list[UnifiedStep] = []

    for index, entry in enumerate(prep_steps):
        if isinstance(entry, str):
            unified.append(
                UnifiedStep(
                    key=f"prep-{index}",
                    order=index + 1,
                    instruction=entry,
                    tag=StepTag.PREP,
                    origin=StepOrigin(source=StepSource.PREPARATION_STEPS, step_number=index + 1),
                )
            )
        else:
            unified.append(
                UnifiedStep(
                    key=f"prep-{index}",
                    order=index + 1,
                    instruction=entry.instruction,
                    tag=StepTag.PREP,
                    completed=entry.completed,
                    origin=StepOrigin(source=StepSource.PREPARATION_STEPS, step_number=entry.step_number),
                )
            )

    for index, entry in enumerate(cook_steps):
        if isinstance(entry, str):
            unified.append(
                UnifiedStep(
                    key=f"cook-{index}",
                    order=index + 1,
                    instruction=entry,
                    tag=StepTag.COOK,
                    origin=StepOrigin(source=StepSource.COOKING_STEPS, step_number=index + 1),
                )
            )
        else:
            unified.append(
                UnifiedStep(
                    key=f"cook-{index}",
                    order=index + 1,
                    instruction=entry.instruction,
                    tag=StepTag.COOK,
                    completed=entry.completed,
                    duration=entry.duration,
                    origin=StepOrigin(source=StepSource.COOKING_STEPS, step_number=entry.step_number),
                )
            )

    return renumber_steps(unified)


# =============================================================================
# Reverse: unified sequence -> two lists
# =============================================================================


def map_unified_steps_to_recipe_schema(unified_steps: Iterable[UnifiedStep]) -> RecipeSteps:
    """
    Map an edited unified sequence back to the two-list schema for saving.

    The given order is authoritative; nothing is sorted here.
    - prep -> preparation_steps
    - cook, neutral -> cooking_steps (there is no third stored list)

    Each output list is renumbered 1..n in array order. key, order and
    origin are dropped. An empty sequence maps to two empty lists.
    """
    preparation_steps: list[PreparationStep] = []
    cooking_steps: list[CookingStep] = []

    for step in unified_steps:
        if step.tag is StepTag.PREP:
            preparation_steps.append(
                PreparationStep(
                    step_number=len(preparation_steps) + 1,
                    instruction=step.instruction,
                    completed=step.completed,
                )
            )
        elif step.tag is StepTag.COOK or step.tag is StepTag.NEUTRAL:
            cooking_steps.append(
                CookingStep(
                    step_number=len(cooking_steps) + 1,
                    instruction=step.instruction,
                    duration=step.duration,
                    completed=step.completed,
                )
            )
        else:
            assert_never(step.tag)

    return RecipeSteps(preparation_steps=preparation_steps, cooking_steps=cooking_steps)
