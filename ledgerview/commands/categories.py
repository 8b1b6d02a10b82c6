"""Category commands backed by the local category registry."""

from rich.console import Console
from rich.table import Table

from ledgerview.commands.common import fail, open_api, open_registry
from ledgerview.domain.models import CATEGORY_TYPES
from ledgerview.errors import LedgerViewError, ValidationError

console = Console()


def _check_type(category_type: str) -> None:
    if category_type not in CATEGORY_TYPES:
        fail(ValidationError({"type": "Type must be 'income' or 'expense'"}))


def list_categories_command(category_type: str | None = None) -> None:
    """List categories, optionally of one type."""
    if category_type is not None:
        _check_type(category_type)

    try:
        registry = open_registry()
    except LedgerViewError as e:
        fail(e)

    table = Table(title="Categories")
    table.add_column("Name", style="white")
    table.add_column("Type")
    table.add_column("Description", style="dim")
    table.add_column("Custom", justify="center")

    for category in registry.categories:
        if category_type is not None and category.type != category_type:
            continue
        type_display = "[green]income[/green]" if category.type == "income" else "[red]expense[/red]"
        custom = "✓" if registry.is_custom(category.name) else ""
        table.add_row(category.name, type_display, category.description, custom)

    console.print(table)


def add_category_command(name: str, category_type: str, description: str = "") -> None:
    """Add a custom category."""
    _check_type(category_type)
    if not name.strip():
        fail(ValidationError({"name": "Name is required"}))

    try:
        registry = open_registry()
    except LedgerViewError as e:
        fail(e)

    if registry.add(name, category_type, description):  # type: ignore[arg-type]
        console.print(f"[green]✓[/green] Added {category_type} category: {name}")
    else:
        console.print(f"[yellow]Category '{name}' already exists[/yellow]")


def remove_category_command(name: str) -> None:
    """Remove a custom category."""
    try:
        registry = open_registry()
    except LedgerViewError as e:
        fail(e)

    if not registry.is_custom(name):
        console.print(f"[yellow]'{name}' is a predefined category and cannot be removed[/yellow]")
        return

    if registry.remove(name):
        console.print(f"[green]✓[/green] Removed category: {name}")
    else:
        console.print(f"[yellow]Category '{name}' not found[/yellow]")


def update_category_command(
    name: str,
    new_name: str | None = None,
    category_type: str | None = None,
    description: str | None = None,
) -> None:
    """Update a category's name, type or description."""
    fields: dict[str, str] = {}
    if new_name is not None:
        fields["name"] = new_name
    if category_type is not None:
        _check_type(category_type)
        fields["type"] = category_type
    if description is not None:
        fields["description"] = description

    if not fields:
        console.print("[yellow]Nothing to change[/yellow]")
        return

    try:
        registry = open_registry()
    except LedgerViewError as e:
        fail(e)

    if registry.get(name) is None:
        console.print(f"[yellow]Category '{name}' not found[/yellow]")
    elif registry.update(name, **fields):
        console.print(f"[green]✓[/green] Updated category: {name}")
    else:
        console.print(f"[yellow]Category '{new_name}' already exists[/yellow]")


def sync_categories_command() -> None:
    """Replace the local category list with the API's."""
    try:
        categories = open_api().get_categories()
        if not categories:
            console.print("[yellow]The API returned no categories, keeping the local list[/yellow]")
            return
        registry = open_registry()
        registry.replace_all(categories)
    except LedgerViewError as e:
        fail(e)

    console.print(f"[green]✓[/green] Synced {len(categories)} categories from the API")
