# cli.py
import argparse
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.catalogclient import CatalogClient, CatalogAPIError

console = Console()
c = CatalogClient(base_url="http://127.0.0.1:3000")


# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Product Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=6)
    table.add_column("Name", style="bold", width=22)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=14)
    table.add_column("In stock", justify="center", width=8)
    table.add_column("Description", width=36)

    for p in products:
        price = p.get("price")
        in_stock = p.get("inStock")
        table.add_row(
            str(p.get("id", "N/A")),
            str(p.get("name", "N/A")),
            f"${price:.2f}" if isinstance(price, (int, float)) else str(price),
            str(p.get("category", "N/A")),
            "[green]yes[/green]" if in_stock else "[red]no[/red]",
            str(p.get("description", ""))
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    API and connection errors are reported in the status panel and yield None.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except CatalogAPIError as e:
        status_message = f"Error: {e.message}"
    except OSError as e:
        # requests' ConnectionError and timeouts are OSErrors
        status_message = f"Error: {e}"
    console.print(show_status(status_message, False))
    return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = try_api(c.list_products) or []
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Catalog SDK",
        "[bold blue]Product Catalog CLI[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_id() -> int:
    while True:
        raw = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
        if raw.isdigit():
            return int(raw)
        console.print("[red]Product IDs are whole numbers.[/red]")


def ask_changes() -> Dict[str, Any]:
    """Prompt for each editable field; blank answers leave the field alone."""
    changes: Dict[str, Any] = {}
    for field in ("name", "description", "category"):
        value = Prompt.ask(f"New {field} (blank to keep)", default="", show_default=False)
        if value:
            changes[field] = value
    price = Prompt.ask("New price (blank to keep)", default="", show_default=False)
    if price:
        try:
            changes["price"] = float(price)
        except ValueError:
            console.print("[red]Ignoring price: not a number.[/red]")
    if Confirm.ask("Change stock status?", default=False):
        changes["inStock"] = Confirm.ask("In stock?", default=True)
    return changes


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache

    console.clear()
    console.print(create_header())

    product_cache = try_api(c.list_products) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "4", "✏️ Update product"),
            ("2", "ℹ️ Get product by ID", "5", "🗑️ Delete product"),
            ("3", "➕ Create product", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter(["1", "2", "3", "4", "5", "q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded successfully")
            if products is not None:
                product_cache = products
                show_products(products)

        elif choice == "2":
            pid = ask_product_id()
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "3":
            name = prompt_with_autocomplete("Enter product name")
            price = ask_float("💰 Price", default=10.0)
            description = prompt_with_autocomplete("📝 Description")
            category = prompt_with_autocomplete("🏷️ Category", default="general")
            in_stock = Confirm.ask("In stock?", default=True)
            resp = try_api(
                c.create_product, name, price, description, category, in_stock,
                success_msg=f"Product '{name}' created successfully"
            )
            if resp:
                show_products([resp])
                product_cache = try_api(c.list_products) or []

        elif choice == "4":
            pid = ask_product_id()
            changes = ask_changes()
            if not changes:
                console.print("[italic yellow]Nothing to update[/italic yellow]")
                continue
            resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **changes)
            if resp:
                show_products([resp])

        elif choice == "5":
            pid = ask_product_id()
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    product_cache = [p for p in product_cache if p.get("id") != pid]

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


# ---------------------------
# Non-interactive commands
# ---------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:3000", help="Catalog server URL")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", help="List all products")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--id", type=int, required=True, help="ID of the product")

    cp = subparsers.add_parser("create", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", type=float, required=True, help="Product price")
    cp.add_argument("--description", required=True, help="Product description")
    cp.add_argument("--category", required=True, help="Product category")
    cp.add_argument("--out-of-stock", action="store_true", help="Mark the product as not in stock")

    up = subparsers.add_parser("update", help="Update fields of a product")
    up.add_argument("--id", type=int, required=True, help="ID of the product")
    up.add_argument("--name", help="New name")
    up.add_argument("--price", type=float, help="New price")
    up.add_argument("--description", help="New description")
    up.add_argument("--category", help="New category")
    stock = up.add_mutually_exclusive_group()
    stock.add_argument("--in-stock", dest="in_stock", action="store_true", default=None)
    stock.add_argument("--out-of-stock", dest="in_stock", action="store_false")

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--id", type=int, required=True, help="ID of the product")

    return parser


def run_command(args: argparse.Namespace, client: CatalogClient):
    if args.command == "list":
        return client.list_products()

    elif args.command == "get":
        return client.get_product(args.id)

    elif args.command == "create":
        return client.create_product(
            args.name, args.price, args.description, args.category,
            False if args.out_of_stock else None
        )

    elif args.command == "update":
        changes = {
            key: value for key, value in (
                ("name", args.name), ("price", args.price),
                ("description", args.description), ("category", args.category),
                ("inStock", args.in_stock),
            ) if value is not None
        }
        return client.update_product(args.id, **changes)

    elif args.command == "delete":
        return client.delete_product(args.id)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    global c
    args = build_parser().parse_args(argv)
    c = CatalogClient(base_url=args.base_url)

    if args.command is None:
        menu()
        return 0

    try:
        console.print_json(data=run_command(args, c))
    except CatalogAPIError as e:
        console.print(f"[bold red]{e}[/bold red]")
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
