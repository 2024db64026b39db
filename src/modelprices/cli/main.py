"""modelprices CLI entry point."""
from __future__ import annotations

import logging

import click


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """modelprices: Compare model pricing from the OpenRouter catalog."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--page-size", default=15, type=int, help="Rows per page")
@click.option("--compact/--no-compact", default=False, help="Start with only the core columns")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, page_size: int, compact: bool, debug: bool) -> None:
    """Start the pricing table web server."""
    from dataclasses import replace

    from modelprices.config import AppConfig
    from modelprices.web.app import create_app

    base = AppConfig.from_env()
    config = replace(
        base,
        host=host,
        port=port,
        page_size=page_size,
        table=replace(base.table, compact=compact),
    )
    app = create_app(config=config)
    click.echo(f"Starting modelprices on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


@cli.command("list")
@click.option("--search", default="", help="Free-text search")
@click.option("--provider", "providers", multiple=True, help="Provider filter (repeatable)")
@click.option("--hide-free", is_flag=True, help="Exclude free models")
@click.option("--sort", "sort_key", default="input_cost", help="Sort field")
@click.option("--descending", is_flag=True, help="Sort descending")
@click.option("--limit", default=15, type=int, help="Number of rows to show")
@click.option("--url", default=None, help="Catalog URL override")
def list_models(
    search: str,
    providers: tuple[str, ...],
    hide_free: bool,
    sort_key: str,
    descending: bool,
    limit: int,
    url: str | None,
) -> None:
    """Fetch the catalog and print a pricing table."""
    from dataclasses import replace

    from modelprices.config import AppConfig
    from modelprices.errors import FetchError
    from modelprices.fetcher import CatalogFetcher
    from modelprices.pipeline import derive_rows
    from modelprices.query import QueryState
    from modelprices.sorting import SortDirection, SortState

    try:
        sort = SortState(
            sort_key,
            SortDirection.DESCENDING if descending else SortDirection.ASCENDING,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--sort") from exc

    config = AppConfig.from_env()
    if url:
        config = replace(config, catalog_url=url)

    fetcher = CatalogFetcher(config)
    try:
        catalog = fetcher.fetch()
    except FetchError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)
    finally:
        fetcher.close()

    query = QueryState(text=search, providers=frozenset(providers), hide_free=hide_free)
    page = derive_rows(catalog, query, sort, limit)

    click.echo(f"{'Model':<48} {'Provider':<16} {'Context':>8} {'Input':>10} {'Output':>10}")
    for record in page.rows:
        pin = "*" if record.keep else ""
        click.echo(
            f"{(pin + record.id)[:48]:<48} {record.provider[:16]:<16} "
            f"{record.context_window:>8} {record.input_cost:>10} {record.output_cost:>10}"
        )
    click.echo(f"Showing {len(page.rows)} of {page.total} models")


if __name__ == "__main__":
    cli()
