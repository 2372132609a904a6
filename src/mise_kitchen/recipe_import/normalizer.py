"""Normalization utilities for imported recipe steps."""

import re
from typing import Any

STEP_FIELDS = ("preparationSteps", "cookingSteps")


def extract_instruction_texts(instructions: list | str | None) -> list:
    """
    Normalize one imported step list.

    Handles:
        - List of strings (blank entries dropped, text stripped)
        - List of step dicts with 'instruction' (kept as-is)
        - List of HowToStep dicts with 'text' (converted to bare strings)
        - Single pasted string (split by numbered lines or blank lines)
    """
    if not instructions:
        return []

    if isinstance(instructions, list):
        result: list = []
        for item in instructions:
            if isinstance(item, str):
                text = item.strip()
                if text:
                    result.append(text)
            elif isinstance(item, dict):
                # HowToStep format; anything else is left for validation to reject
                text = item.get("text") or item.get("@text")
                if "instruction" not in item and isinstance(text, str) and text.strip():
                    result.append(text.strip())
                else:
                    result.append(item)
            else:
                result.append(item)
        return result

    if isinstance(instructions, str):
        # Numbered patterns like "1." or "2)" at line starts
        steps = re.split(r"(?:^|\n)\s*\d+[\.\)]\s*", instructions)
        if len(steps) > 1:
            return [s.strip() for s in steps if s.strip()]

        steps = instructions.split("\n\n")
        if len(steps) > 1:
            return [s.strip() for s in steps if s.strip()]

        return [instructions.strip()] if instructions.strip() else []

    return []


def normalize_import_document(data: dict[str, Any]) -> dict[str, Any]:
    """
    Return a copy of an import document with both step lists normalized.

    Values that are neither lists nor pasted text are left alone so
    validation can still tell "missing" or "malformed" from "empty".
    """
    normalized = dict(data)
    for field in STEP_FIELDS:
        if isinstance(normalized.get(field), (list, str)):
            normalized[field] = extract_instruction_texts(normalized[field])
    return normalized
