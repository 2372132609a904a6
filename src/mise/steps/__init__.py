"""Step model and unifier for recipe preparation and cooking steps."""

from .models import (
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
from .unifier import (
    FALLBACK_INSTRUCTION,
    FALLBACK_KEY,
    build_unified_steps,
    build_unified_steps_from_import,
    map_unified_steps_to_recipe_schema,
    renumber_steps,
    should_interleave,
)

__all__ = [
    "CookingStep",
    "CookingStepInput",
    "PreparationStep",
    "PreparationStepInput",
    "RecipeSteps",
    "StepOrigin",
    "StepSource",
    "StepTag",
    "UnifiedStep",
    "FALLBACK_INSTRUCTION",
    "FALLBACK_KEY",
    "build_unified_steps",
    "build_unified_steps_from_import",
    "map_unified_steps_to_recipe_schema",
    "renumber_steps",
    "should_interleave",
]
