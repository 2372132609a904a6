"""
Mise - CLI Entry Point.

Usage:
    mise steps recipe.json            Show a recipe's unified steps
    mise steps draft.json --import    Preview steps of an unsaved import
    mise save edited_steps.json       Map edited unified steps back to prep/cook lists
    mise validate draft.json          Validate an import document
    mise share recipe.json            Print shareable recipe text
    mise health                       Check configuration
    mise --help                       Show help
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from mise.steps import UnifiedStep, map_unified_steps_to_recipe_schema
from mise_kitchen.models import Recipe

app = typer.Typer(
    name="mise",
    help="Mise - unify, edit and share recipe steps.",
    add_completion=False,
)
console = Console()

TAG_STYLES = {"prep": "cyan", "cook": "red", "neutral": "dim"}

_unified_steps_adapter = TypeAdapter(list[UnifiedStep])


def setup_logging(verbose: bool = False) -> None:
    """Setup logging to stderr. --verbose wins over LOG_LEVEL."""
    from mise_kitchen.config import settings

    try:
        level_name = settings.log_level
    except ValidationError:
        # Bad .env values are reported by `mise health`
        level_name = "INFO"

    level = logging.DEBUG if verbose else getattr(logging, level_name)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"❌ Could not read {path}: {e}", markup=False)
        raise typer.Exit(1)


def _load_recipe(path: Path) -> Recipe:
    try:
        return Recipe.model_validate(_load_json(path))
    except ValidationError as e:
        console.print(f"❌ Invalid recipe document:\n{e}", markup=False)
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Mise - unify, edit and share recipe steps."""
    setup_logging(verbose)


@app.command()
def steps(
    file: Path = typer.Argument(..., help="Recipe JSON document"),
    from_import: bool = typer.Option(False, "--import", "-i", help="Treat FILE as an unsaved import"),
) -> None:
    """Show the unified step sequence for a recipe."""
    from mise_kitchen.recipe_import import load_recipe_import, normalize_import_document, validate_recipe_json
    from mise_kitchen.steps import preview_import_steps, unify_recipe_steps

    if from_import:
        data = _load_json(file)
        if not isinstance(data, dict):
            console.print("[red]❌ Import document must be a JSON object[/red]")
            raise typer.Exit(1)
        result = validate_recipe_json(normalize_import_document(data))
        if not result.valid:
            console.print(f"❌ {result.error}", markup=False)
            raise typer.Exit(1)
        try:
            recipe_import = load_recipe_import(data)
        except ValidationError as e:
            console.print(f"❌ Invalid import document:\n{e}", markup=False)
            raise typer.Exit(1)
        title = recipe_import.title
        unified = preview_import_steps(recipe_import)
    else:
        recipe = _load_recipe(file)
        title = recipe.title
        unified = unify_recipe_steps(recipe)

    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Tag")
    table.add_column("Instruction")
    table.add_column("Duration")
    table.add_column("Done", justify="center")

    for step in unified:
        style = TAG_STYLES[step.tag.value]
        table.add_row(
            str(step.order),
            f"[{style}]{step.tag.value}[/{style}]",
            step.instruction,
            step.duration or "",
            "✅" if step.completed else "",
        )

    console.print(table)


@app.command()
def save(
    file: Path = typer.Argument(..., help="JSON array of unified steps"),
) -> None:
    """Map edited unified steps back to preparationSteps and cookingSteps."""
    data = _load_json(file)
    try:
        unified = _unified_steps_adapter.validate_python(data)
    except ValidationError as e:
        console.print(f"❌ Invalid unified steps:\n{e}", markup=False)
        raise typer.Exit(1)

    mapped = map_unified_steps_to_recipe_schema(unified)
    typer.echo(json.dumps(mapped.model_dump(by_alias=True, exclude_none=True), indent=2, ensure_ascii=False))


@app.command()
def validate(
    file: Path = typer.Argument(..., help="Import JSON document"),
) -> None:
    """Validate an import document before saving it."""
    from mise_kitchen.recipe_import import normalize_import_document, validate_recipe_json

    data = _load_json(file)
    if isinstance(data, dict):
        data = normalize_import_document(data)

    result = validate_recipe_json(data)
    if not result.valid:
        console.print(f"❌ {result.error}", markup=False)
        raise typer.Exit(1)

    console.print("✅ Recipe is valid")


@app.command()
def share(
    file: Path = typer.Argument(..., help="Recipe JSON document"),
) -> None:
    """Print shareable text for a recipe."""
    from mise_kitchen.share import generate_shareable_text

    recipe = _load_recipe(file)
    console.print(generate_shareable_text(recipe), markup=False, highlight=False, soft_wrap=True)


@app.command()
def health() -> None:
    """Check configuration."""
    from mise_kitchen.config import get_settings

    console.print("\n[bold]Mise Health Check[/bold]\n")

    try:
        settings = get_settings()
        console.print("✅ Configuration loaded")
        console.print(f"   Environment: {settings.mise_env}")
        console.print(f"   Log level: {settings.log_level}")
        console.print(f"   Share app name: {settings.share_app_name}")
        console.print(f"   Recipe id prefix: {settings.recipe_id_prefix}")
        console.print("\n[green]All checks passed![/green]")

    except ValidationError as e:
        console.print(f"\n❌ Configuration error: {e}", markup=False)
        console.print("[dim]Check the values in your .env file.[/dim]")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from mise import __version__

    console.print(f"Mise version {__version__}")


if __name__ == "__main__":
    app()
