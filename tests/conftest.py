"""
Pytest configuration and fixtures for Mise tests.
"""

import os

import pytest

# Set test environment before importing mise modules
os.environ["MISE_ENV"] = "development"
os.environ.setdefault("LOG_LEVEL", "INFO")

from mise.steps import CookingStep, PreparationStep
from mise_kitchen.models import Recipe


@pytest.fixture
def make_prep():
    """Factory: preparation steps from (stepNumber, instruction) pairs."""

    def _make(*numbers_and_texts, completed=None):
        return [
            PreparationStep(step_number=number, instruction=text, completed=completed)
            for number, text in numbers_and_texts
        ]

    return _make


@pytest.fixture
def make_cook():
    """Factory: cooking steps from (stepNumber, instruction) pairs."""

    def _make(*numbers_and_texts, duration=None, completed=None):
        return [
            CookingStep(step_number=number, instruction=text, duration=duration, completed=completed)
            for number, text in numbers_and_texts
        ]

    return _make


@pytest.fixture
def recipe_document():
    """Stored recipe document as the persistence layer returns it."""
    return {
        "id": "recipe-1",
        "title": "Grilled Chicken",
        "description": "Marinated and grilled",
        "servings": 4,
        "prepTimeMinutes": 20,
        "marinateTimeMinutes": 90,
        "cookTimeMinutes": 15,
        "category": ["dinner"],
        "tags": ["grill", "summer"],
        "ingredients": [
            {"name": "chicken thighs", "quantity": "1", "unit": "kg"},
            {"name": "garlic", "quantity": "3", "unit": "cloves"},
            {"name": "salt", "quantity": "1 pinch"},
        ],
        "preparationSteps": [
            {"stepNumber": 1, "instruction": "Chop vegetables"},
            {"stepNumber": 2, "instruction": "Mix marinade"},
            {"stepNumber": 3, "instruction": "Marinate chicken", "completed": True},
        ],
        "cookingSteps": [
            {"stepNumber": 4, "instruction": "Heat grill", "duration": "10 minutes"},
            {"stepNumber": 5, "instruction": "Grill chicken", "duration": "12 minutes"},
            {"stepNumber": 6, "instruction": "Rest meat"},
        ],
        "shoppingList": [],
        "createdAt": "2026-01-01T12:00:00+00:00",
    }


@pytest.fixture
def recipe(recipe_document):
    """Stored recipe loaded into models."""
    return Recipe.model_validate(recipe_document)


@pytest.fixture
def import_document():
    """Freshly generated recipe with bare-string steps."""
    return {
        "title": "Pasta Aglio e Olio",
        "ingredients": [
            {"name": "spaghetti", "quantity": "400", "unit": "g"},
            {"name": "garlic", "quantity": "6", "unit": "cloves"},
        ],
        "preparationSteps": ["Slice garlic", "Chop parsley"],
        "cookingSteps": [
            "Boil water",
            {"stepNumber": 2, "instruction": "Cook pasta", "duration": "9 minutes"},
        ],
    }
