"""
Mise Core - Step Models.

A recipe stores its instructions as two tagged, independently numbered
lists. There is no numbering contract between the two lists: they may use
disjoint, continuous, or fully overlapping step numbers.

Stored documents use camelCase keys (stepNumber, preparationSteps), so every
model here loads from and dumps to camelCase while exposing snake_case
attributes in Python.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StepTag(str, Enum):
    """Kind of a unified step. Closed: reverse mapping dispatches on every member."""

    PREP = "prep"
    COOK = "cook"
    NEUTRAL = "neutral"


class StepSource(str, Enum):
    """Which stored list a unified step was built from."""

    PREPARATION_STEPS = "preparationSteps"
    COOKING_STEPS = "cookingSteps"


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Stored Steps
# =============================================================================


class PreparationStep(CamelModel):
    """Cold-prep work: chopping, mixing, marinating."""

    step_number: int | None = Field(default=None, ge=1)
    instruction: str
    completed: bool | None = None


class CookingStep(CamelModel):
    """Heat-involving work. Duration is free text ("10 minutes"), never parsed."""

    step_number: int | None = Field(default=None, ge=1)
    instruction: str
    duration: str | None = None
    completed: bool | None = None


class RecipeSteps(CamelModel):
    """The two-list step schema, as handed back to persistence."""

    preparation_steps: list[PreparationStep] = Field(default_factory=list)
    cooking_steps: list[CookingStep] = Field(default_factory=list)


# Import-shaped entries: freshly generated or pasted recipes may carry bare
# instruction strings instead of step objects.
PreparationStepInput = str | PreparationStep
CookingStepInput = str | CookingStep


# =============================================================================
# Unified Steps (transient, UI-facing)
# =============================================================================


class StepOrigin(CamelModel):
    """Where a unified step came from. Only used for the ordering decision."""

    source: StepSource
    step_number: int | None = None


class UnifiedStep(CamelModel):
    """
    One entry of the single editable sequence.

    Never persisted as-is: reverse mapping drops key, order and origin and
    renumbers each stored list from 1.
    """

    key: str  # Unique within one unification pass ("prep-0", "cook-2", "fallback")
    order: int = Field(ge=1)  # 1-based position in the unified sequence
    instruction: str
    tag: StepTag
    completed: bool | None = None
    duration: str | None = None
    origin: StepOrigin | None = None
