"""
Click-based CLI for gamanage.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from . import __version__
from .account_summaries import PROPERTY_KEYS, VIEW_KEYS, AccountSummaries
from .columns import populate_columns
from .config import load_config
from .metadata import Metadata
from .service import AnalyticsManagement
from .storage import read_items

console = Console()
err_console = Console(stderr=True)


def _fail(message: Any) -> NoReturn:
    err_console.print(f"[red]✗ Error:[/red] {escape(str(message))}")
    sys.exit(1)


def _load_summaries(input_file: Optional[str]) -> AccountSummaries:
    if input_file:
        return AccountSummaries(read_items(Path(input_file)))
    return AnalyticsManagement.from_config(load_config()).get_account_summaries()


def _label(node: dict) -> str:
    return f"{node.get('name', '')} [dim]({node['id']})[/dim]"


@click.group()
@click.version_option(version=__version__, prog_name="gamanage")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Google Analytics account and metadata helpers"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.Path(),
    help="Saved accountSummaries response (default: query the API)",
)
def accounts(input_file: Optional[str]) -> None:
    """Print the account → property → view tree"""

    try:
        summaries = _load_summaries(input_file)

        tree = Tree("Accounts")
        for account in summaries.all():
            account_branch = tree.add(f"[bold]{_label(account)}[/bold]")
            for prop in account.get(PROPERTY_KEYS[0], []):
                property_branch = account_branch.add(f"[cyan]{_label(prop)}[/cyan]")
                for view in prop.get(VIEW_KEYS[0], []):
                    property_branch.add(_label(view))
        console.print(tree)

    except FileNotFoundError as e:
        _fail(e)
    except Exception as e:
        _fail(e)


@cli.command()
@click.option("--input", "-i", "input_file", type=click.Path(), help="Saved accountSummaries response")
@click.option("--account-id", help="Account ID")
@click.option("--property-id", help="Property (web property) ID")
@click.option("--view-id", help="View (profile) ID")
def lookup(
    input_file: Optional[str],
    account_id: Optional[str],
    property_id: Optional[str],
    view_id: Optional[str],
) -> None:
    """Look up an account, property or view by ID"""

    try:
        summaries = _load_summaries(input_file)
        node = summaries.get(account_id=account_id, property_id=property_id, view_id=view_id)
        if node is None:
            _fail("No account, property or view matches the given ID")

        summary = {key: value for key, value in node.items() if key not in PROPERTY_KEYS + VIEW_KEYS}
        console.print_json(json.dumps(summary))

        if view_id:
            console.print(f"Property: {_label(summaries.get_property_by_view_id(view_id))}")
            console.print(f"Account: {_label(summaries.get_account_by_view_id(view_id))}")
        elif property_id:
            console.print(f"Account: {_label(summaries.get_account_by_property_id(property_id))}")

    except FileNotFoundError as e:
        _fail(e)
    except Exception as e:
        _fail(e)


@cli.command()
@click.option(
    "--input", "-i", "input_file", type=click.Path(), required=True,
    help="Saved metadata.columns.list response",
)
@click.option("--custom-metrics", type=click.Path(), help="Saved customMetrics.list response")
@click.option("--custom-dimensions", type=click.Path(), help="Saved customDimensions.list response")
@click.option("--goals", type=click.Path(), help="Saved goals.list response")
@click.option("--premium", is_flag=True, help="Use premium template bounds")
@click.option("--type", "column_type", type=click.Choice(["METRIC", "DIMENSION"]), help="Column type")
@click.option("--status", help="Only columns with this status (e.g. PUBLIC)")
@click.option("--json", "json_output", is_flag=True, help="Output JSON")
def columns(
    input_file: str,
    custom_metrics: Optional[str],
    custom_dimensions: Optional[str],
    goals: Optional[str],
    premium: bool,
    column_type: Optional[str],
    status: Optional[str],
    json_output: bool,
) -> None:
    """List metadata columns, expanding templates when account data is given"""

    try:
        items = read_items(Path(input_file))
        if custom_metrics or custom_dimensions or goals or premium:
            items = populate_columns(
                items,
                read_items(Path(custom_metrics)) if custom_metrics else [],
                read_items(Path(custom_dimensions)) if custom_dimensions else [],
                read_items(Path(goals)) if goals else [],
                is_premium=premium,
            )

        metadata = Metadata(items)
        column_filter = {}
        if status:
            column_filter["status"] = status

        if column_type == "METRIC":
            selected = metadata.all_metrics(column_filter)
        elif column_type == "DIMENSION":
            selected = metadata.all_dimensions(column_filter)
        else:
            selected = metadata.all(column_filter)

        if json_output:
            console.print_json(json.dumps(list(selected)))
            return

        table = Table(title=f"{len(selected)} columns")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Type")
        table.add_column("Status")
        for column in selected:
            attributes = column["attributes"]
            table.add_row(
                column["id"],
                attributes.get("uiName", ""),
                attributes.get("type", ""),
                attributes.get("status", ""),
            )
        console.print(table)

    except FileNotFoundError as e:
        _fail(e)
    except Exception as e:
        _fail(e)


def main() -> None:
    """Entry point for CLI"""
    cli()


if __name__ == "__main__":
    main()
