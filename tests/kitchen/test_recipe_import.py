"""Tests for recipe import module."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from mise.steps import CookingStep, PreparationStep
from mise_kitchen.models import RecipeImport
from mise_kitchen.recipe_import import (
    ImportValidation,
    extract_instruction_texts,
    load_recipe_import,
    normalize_import_document,
    parse_recipe_json,
    validate_recipe_json,
)

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestExtractInstructionTexts:
    """Tests for step list normalization."""

    def test_extract_from_string_list(self):
        result = extract_instruction_texts(["Step 1", "Step 2", "Step 3"])
        assert result == ["Step 1", "Step 2", "Step 3"]

    def test_filter_empty_strings(self):
        result = extract_instruction_texts(["Step 1", "", "  ", " Step 2 "])
        assert result == ["Step 1", "Step 2"]

    def test_extract_from_howto_step_dicts(self):
        instructions = [
            {"@type": "HowToStep", "text": "Mix ingredients"},
            {"@type": "HowToStep", "text": "Bake for 30 minutes"},
        ]
        assert extract_instruction_texts(instructions) == ["Mix ingredients", "Bake for 30 minutes"]

    def test_step_dicts_kept(self):
        step = {"stepNumber": 2, "instruction": "Cook pasta", "duration": "9 minutes"}
        assert extract_instruction_texts(["Boil water", step]) == ["Boil water", step]

    def test_malformed_items_kept_for_validation(self):
        assert extract_instruction_texts([{"note": "oops"}, 42]) == [{"note": "oops"}, 42]

    def test_extract_from_numbered_string(self):
        result = extract_instruction_texts("1. Mix ingredients\n2. Bake for 30 minutes\n3) Serve")
        assert result == ["Mix ingredients", "Bake for 30 minutes", "Serve"]

    def test_extract_from_paragraphs(self):
        result = extract_instruction_texts("Mix everything.\n\nBake until golden.")
        assert result == ["Mix everything.", "Bake until golden."]

    def test_single_sentence(self):
        assert extract_instruction_texts("  Just stir.  ") == ["Just stir."]

    def test_extract_empty_or_none(self):
        assert extract_instruction_texts(None) == []
        assert extract_instruction_texts([]) == []
        assert extract_instruction_texts("   ") == []


class TestNormalizeImportDocument:
    """Tests for whole-document normalization."""

    def test_normalizes_both_step_fields(self):
        data = {"title": "Soup", "preparationSteps": "1. Chop\n2. Rinse", "cookingSteps": [" Simmer "]}

        result = normalize_import_document(data)

        assert result["preparationSteps"] == ["Chop", "Rinse"]
        assert result["cookingSteps"] == ["Simmer"]

    def test_returns_copy(self):
        data = {"title": "Soup", "cookingSteps": [" Simmer "]}

        normalize_import_document(data)

        assert data["cookingSteps"] == [" Simmer "]

    def test_leaves_other_values_alone(self):
        data = {"title": "Soup", "preparationSteps": None, "cookingSteps": {"bad": True}}

        result = normalize_import_document(data)

        assert result["preparationSteps"] is None
        assert result["cookingSteps"] == {"bad": True}
        assert "ingredients" not in result


class TestValidateRecipeJson:
    """Tests for import validation."""

    def test_valid_document(self, import_document):
        assert validate_recipe_json(import_document) == ImportValidation(valid=True)

    def test_not_an_object(self):
        result = validate_recipe_json(["not", "a", "recipe"])
        assert not result.valid
        assert result.error == "Recipe must be a JSON object"

    def test_missing_title(self, import_document):
        del import_document["title"]
        assert validate_recipe_json(import_document).error == "Recipe must have a title"

    def test_missing_ingredients(self, import_document):
        import_document["ingredients"] = []
        assert validate_recipe_json(import_document).error == "Recipe must have at least one ingredient"

    def test_missing_both_step_lists(self, import_document):
        del import_document["preparationSteps"]
        del import_document["cookingSteps"]
        assert validate_recipe_json(import_document).error == "Recipe must have preparation steps or cooking steps"

    def test_one_step_list_is_enough(self, import_document):
        del import_document["preparationSteps"]
        assert validate_recipe_json(import_document).valid

    def test_step_list_must_be_list(self, import_document):
        import_document["cookingSteps"] = "Boil water"
        assert validate_recipe_json(import_document).error == "cookingSteps must be a list"

    def test_blank_instruction(self, import_document):
        import_document["preparationSteps"] = ["Slice garlic", "   "]
        result = validate_recipe_json(import_document)
        assert result.error == "preparationSteps step 2 must have a non-empty instruction"

    def test_step_object_without_instruction(self, import_document):
        import_document["cookingSteps"] = [{"stepNumber": 1, "duration": "5 minutes"}]
        result = validate_recipe_json(import_document)
        assert result.error == "cookingSteps step 1 must have a non-empty instruction"

    def test_normalized_pasted_text_is_valid(self, import_document):
        import_document["preparationSteps"] = "1. Slice garlic\n2. Chop parsley"
        assert validate_recipe_json(normalize_import_document(import_document)).valid

    def test_ingredient_without_quantity(self, import_document):
        import_document["ingredients"] = [{"name": "egg"}]
        assert validate_recipe_json(import_document).error == "Ingredient 1 must have a quantity"

    def test_ingredient_without_name(self, import_document):
        import_document["ingredients"].append({"quantity": "2"})
        assert validate_recipe_json(import_document).error == "Ingredient 3 must have a name"

    def test_numeric_quantity_is_valid(self, import_document):
        import_document["ingredients"] = [{"name": "egg", "quantity": 2}]
        assert validate_recipe_json(import_document).valid

    def test_step_number_zero(self, import_document):
        import_document["cookingSteps"] = [{"stepNumber": 0, "instruction": "Boil"}]
        result = validate_recipe_json(import_document)
        assert result.error == "cookingSteps step 1 must have a stepNumber of 1 or more"

    def test_step_number_not_integer(self, import_document):
        import_document["preparationSteps"] = [{"stepNumber": "first", "instruction": "Slice garlic"}]
        assert not validate_recipe_json(import_document).valid

    def test_null_step_number_is_valid(self, import_document):
        import_document["cookingSteps"] = [{"stepNumber": None, "instruction": "Boil"}]
        assert validate_recipe_json(import_document).valid

    def test_model_shape_errors_are_reported(self, import_document):
        import_document["servings"] = "a crowd"
        result = validate_recipe_json(import_document)
        assert not result.valid
        assert result.error.startswith("servings:")


ACCEPTANCE_CASES = [
    pytest.param(
        {"title": "T", "ingredients": [{"name": "egg"}], "cookingSteps": [{"stepNumber": 0, "instruction": "Boil"}]},
        id="missing-quantity-and-zero-step",
    ),
    pytest.param(
        {"title": "T", "ingredients": [{"name": "egg", "quantity": "1"}], "cookingSteps": ["Boil"]},
        id="minimal",
    ),
    pytest.param(
        {"title": "T", "ingredients": [{"name": "egg", "quantity": 1}], "preparationSteps": ["Crack", "Whisk"]},
        id="numeric-quantity",
    ),
    pytest.param(
        {
            "title": "T",
            "ingredients": [{"name": "egg", "quantity": "1"}],
            "cookingSteps": [{"stepNumber": 3, "instruction": "Fry", "duration": "2 minutes"}],
            "shoppingList": ["eggs", {"name": "butter", "quantity": "1", "unit": "tbsp"}],
        },
        id="objects-and-shopping-list",
    ),
    pytest.param(
        {"title": "T", "ingredients": [{"name": "egg", "quantity": "1"}], "cookingSteps": ["Fry"], "tags": "breakfast"},
        id="tags-not-a-list",
    ),
    pytest.param(
        {"title": "T", "ingredients": [{"name": "egg", "quantity": "1"}], "cookingSteps": [{"instruction": 5}]},
        id="instruction-not-text",
    ),
]


@pytest.mark.parametrize("document", ACCEPTANCE_CASES)
def test_accepted_documents_always_load(document):
    """Whatever validation accepts, the loader accepts too."""
    if validate_recipe_json(normalize_import_document(document)).valid:
        load_recipe_import(document)


def test_missing_quantity_and_zero_step_rejected():
    document = {
        "title": "T",
        "ingredients": [{"name": "egg"}],
        "cookingSteps": [{"stepNumber": 0, "instruction": "Boil"}],
    }

    assert not validate_recipe_json(normalize_import_document(document)).valid


class TestLoadRecipeImport:
    """Tests for loading import documents into models."""

    def test_mixed_steps(self, import_document):
        recipe_import = load_recipe_import(import_document)

        assert recipe_import.preparation_steps == ["Slice garlic", "Chop parsley"]
        assert recipe_import.cooking_steps[0] == "Boil water"
        assert isinstance(recipe_import.cooking_steps[1], CookingStep)
        assert recipe_import.cooking_steps[1].duration == "9 minutes"

    def test_null_step_list(self, import_document):
        import_document["preparationSteps"] = None
        assert load_recipe_import(import_document).preparation_steps == []

    def test_missing_title_raises(self):
        with pytest.raises(ValidationError):
            load_recipe_import({"ingredients": []})


class TestParseRecipeJson:
    """Tests for import -> stored recipe conversion."""

    def _parse(self, import_document, **overrides):
        return parse_recipe_json(load_recipe_import(import_document), now=NOW, id_prefix="recipe", **overrides)

    def test_id_and_created_at(self, import_document):
        recipe = self._parse(import_document)

        assert recipe.id == "recipe_1767268800000"
        assert recipe.created_at == "2026-01-01T12:00:00+00:00"

    def test_custom_prefix(self, import_document):
        recipe = parse_recipe_json(load_recipe_import(import_document), now=NOW, id_prefix="imported")
        assert recipe.id.startswith("imported_")

    def test_string_steps_numbered_by_position(self, import_document):
        recipe = self._parse(import_document)

        assert [(s.step_number, s.instruction) for s in recipe.preparation_steps] == [
            (1, "Slice garlic"),
            (2, "Chop parsley"),
        ]
        assert all(s.completed is False for s in recipe.preparation_steps)

    def test_step_objects_keep_number_and_duration(self, import_document):
        recipe = self._parse(import_document)

        assert recipe.cooking_steps[0].step_number == 1
        assert recipe.cooking_steps[1].step_number == 2
        assert recipe.cooking_steps[1].duration == "9 minutes"

    def test_step_object_without_number_gets_position(self):
        recipe_import = RecipeImport(
            title="Rice",
            cooking_steps=["Rinse rice", CookingStep(instruction="Simmer", completed=True)],
        )

        recipe = parse_recipe_json(recipe_import, now=NOW, id_prefix="recipe")

        assert recipe.cooking_steps[1].step_number == 2
        assert recipe.cooking_steps[1].completed is False

    def test_import_not_modified(self):
        step = PreparationStep(instruction="Chop", completed=True)
        recipe_import = RecipeImport(title="Salad", preparation_steps=[step])

        parse_recipe_json(recipe_import, now=NOW, id_prefix="recipe")

        assert step.step_number is None
        assert step.completed is True

    def test_shopping_list_from_ingredients(self, import_document):
        recipe = self._parse(import_document)

        assert [item.id for item in recipe.shopping_list] == [
            "shopping_recipe_1767268800000_0",
            "shopping_recipe_1767268800000_1",
        ]
        assert recipe.shopping_list[1].name == "garlic"
        assert recipe.shopping_list[1].quantity == "6"
        assert recipe.shopping_list[1].unit == "cloves"
        assert not any(item.purchased for item in recipe.shopping_list)

    def test_shopping_list_from_import(self, import_document):
        import_document["shoppingList"] = ["lemons", {"name": "parmesan", "quantity": "100", "unit": "g"}]

        recipe = self._parse(import_document)

        assert recipe.shopping_list[0].name == "lemons"
        assert recipe.shopping_list[0].quantity == "1"
        assert recipe.shopping_list[1].unit == "g"
        assert recipe.shopping_list[1].id == "shopping_recipe_1767268800000_1"

    def test_optional_lists_default_empty(self, import_document):
        recipe = self._parse(import_document)

        assert recipe.category == []
        assert recipe.tags == []
