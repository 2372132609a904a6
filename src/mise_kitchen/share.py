"""
Mise Kitchen - Recipe Sharing.

Formats a stored recipe for sharing, either as an import document another
user can load, or as human-readable text they can paste into a new chat.
"""

from mise_kitchen.config import settings
from mise_kitchen.models import Recipe, RecipeImport


def format_time(minutes: int) -> str:
    """
    Format minutes as hours and minutes.

    Examples:
        30 -> "30m"
        60 -> "1h"
        90 -> "1h 30m"
    """
    if minutes >= 60:
        hours, mins = divmod(minutes, 60)
        return f"{hours}h {mins}m" if mins > 0 else f"{hours}h"
    return f"{minutes}m"


def recipe_to_shareable_json(recipe: Recipe) -> RecipeImport:
    """
    Convert a stored recipe back to import shape.

    Steps become bare instruction strings so the receiver renumbers them on
    import; ids, completion and the shopping list are left out.
    """
    return RecipeImport(
        title=recipe.title,
        description=recipe.description,
        servings=recipe.servings,
        prep_time_minutes=recipe.prep_time_minutes,
        marinate_time_minutes=recipe.marinate_time_minutes,
        cook_time_minutes=recipe.cook_time_minutes,
        category=list(recipe.category),
        tags=list(recipe.tags),
        ingredients=[ingredient.model_copy() for ingredient in recipe.ingredients],
        preparation_steps=[step.instruction for step in recipe.preparation_steps],
        cooking_steps=[step.instruction for step in recipe.cooking_steps],
        image_url=recipe.image_url,
    )


def generate_shareable_text(recipe: Recipe, app_name: str | None = None) -> str:
    """
    Generate human-readable text for a recipe.

    Sections (each only when present): description, time and servings,
    ingredients, preparation, cooking, tags. Steps are numbered by position,
    not by their stored step number.
    """
    app_name = app_name or settings.share_app_name
    lines = [f"🍳 Recipe shared from {app_name}", "", recipe.title, ""]

    if recipe.description:
        lines += [recipe.description, ""]

    time_info = []
    if recipe.prep_time_minutes:
        time_info.append(f"Prep: {format_time(recipe.prep_time_minutes)}")
    if recipe.marinate_time_minutes:
        time_info.append(f"Marinate: {format_time(recipe.marinate_time_minutes)}")
    if recipe.cook_time_minutes:
        time_info.append(f"Cook: {format_time(recipe.cook_time_minutes)}")
    if recipe.servings:
        time_info.append(f"Servings: {recipe.servings}")
    if time_info:
        lines += [f"⏱️ {' • '.join(time_info)}", ""]

    lines.append("📝 Ingredients:")
    for ingredient in recipe.ingredients:
        quantity = f"{ingredient.quantity} " if ingredient.quantity else ""
        unit = f"{ingredient.unit} " if ingredient.unit else ""
        lines.append(f"• {quantity}{unit}{ingredient.name}")
    lines.append("")

    if recipe.preparation_steps:
        lines.append("🔪 Preparation:")
        lines += [f"{i}. {step.instruction}" for i, step in enumerate(recipe.preparation_steps, start=1)]
        lines.append("")

    if recipe.cooking_steps:
        lines.append("👨‍🍳 Cooking:")
        lines += [f"{i}. {step.instruction}" for i, step in enumerate(recipe.cooking_steps, start=1)]
        lines.append("")

    if recipe.tags:
        lines += [f"🏷️ {', '.join(recipe.tags)}", ""]

    lines.append("---")
    lines.append(
        f"💡 Want to save this recipe? Copy this entire message, open {app_name}, "
        "start a new chat, and paste it! The AI will help you create and save this recipe."
    )
    return "\n".join(lines)
