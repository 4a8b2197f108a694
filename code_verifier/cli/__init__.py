"""Command line tool for managing the product table."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from code_verifier.core.exceptions import ProductValidationError, StorageError
from code_verifier.core.services import DbSessionService, Found, ProductService
from code_verifier.entities.product import Product, ProductRepository

console = Console()

app = typer.Typer(
    help="Product code verifier - manage and check product codes",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def get_database_service() -> DbSessionService:
    return DbSessionService()


@app.command("init-db")
def init_db() -> None:
    """Create the products table if it does not exist."""
    try:
        get_database_service().create_all()
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print("[green]✅ Database initialized[/green]")


@app.command("add")
def add_product(
    code: str = typer.Argument(..., help="Product code, letters and digits only"),
    name: str = typer.Argument(..., help="Product display name"),
) -> None:
    """Register a new product."""
    try:
        with get_database_service().session_scope() as session:
            service = ProductService(ProductRepository(session))
            product = service.save(Product(code=code, name=name))
    except (ProductValidationError, StorageError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]✅ Saved product {product.code} ({product.name}) with id {product.id}[/green]"
    )


@app.command("check")
def check_code(code: str = typer.Argument(..., help="Code to verify")) -> None:
    """Check whether a product code exists."""
    try:
        with get_database_service().session_scope() as session:
            result = ProductService(ProductRepository(session)).verify_code(code)
    except StorageError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e

    if isinstance(result, Found):
        console.print(
            Panel(
                f"[bold]{result.product.code}[/bold]\n{result.product.name}",
                title="Code found",
                border_style="green",
            )
        )
    elif result.code is None:
        console.print("[yellow]Please provide a product code[/yellow]")
        raise typer.Exit(code=1)
    else:
        console.print(f"[yellow]Code {result.code} not found[/yellow]")
        raise typer.Exit(code=1)


@app.command("list")
def list_products() -> None:
    """List all products ordered by name."""
    try:
        with get_database_service().session_scope() as session:
            products = ProductService(ProductRepository(session)).list_all()
    except StorageError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="cyan")
    table.add_column("Code", style="green")
    table.add_column("Name", style="magenta")
    table.add_column("Created", style="blue")

    for product in products:
        table.add_row(
            str(product.id),
            product.code,
            product.name,
            product.created_at.isoformat(timespec="seconds") if product.created_at else "",
        )

    console.print(table)
    console.print(f"\n[green]Found {len(products)} products[/green]")


@app.command("count")
def count_products() -> None:
    """Print the number of stored products."""
    try:
        with get_database_service().session_scope() as session:
            total = ProductService(ProductRepository(session)).count()
    except StorageError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print(total)


@app.command("delete")
def delete_product(
    product_id: int = typer.Argument(..., help="Identifier of the product to delete"),
) -> None:
    """Delete a product by id. Unknown ids are ignored."""
    try:
        with get_database_service().session_scope() as session:
            ProductService(ProductRepository(session)).delete(product_id)
    except (ProductValidationError, StorageError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print(f"[green]✅ Product {product_id} removed[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
