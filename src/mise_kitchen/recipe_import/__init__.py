"""Recipe import: validation and conversion of generated or pasted recipes."""

from .models import ImportValidation
from .normalizer import extract_instruction_texts, normalize_import_document
from .parser import load_recipe_import, parse_recipe_json, validate_recipe_json

__all__ = [
    "ImportValidation",
    "extract_instruction_texts",
    "normalize_import_document",
    "load_recipe_import",
    "parse_recipe_json",
    "validate_recipe_json",
]
