"""
Rendering functions for rosvoid terminal output.

This module handles pretty-printing of run results. Recipe file
rendering lives in ``rosvoid.recipe``.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from typing import List, Dict, Any

console = Console(stderr=True)

STATUS_STYLES = {
    'rendered': 'green',
    'no_release': 'dim',
    'failed': 'red',
}


def render_results_table(results: List[Dict[str, Any]]) -> None:
    """
    Render generation results as a pretty table.

    Args:
        results: List of GenerationResult dictionaries
    """
    if not results:
        console.print("[yellow]No repositories processed.[/yellow]")
        return

    table = Table(
        title="Generated Recipes",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )

    table.add_column("Repository", style="cyan")
    table.add_column("Status")
    table.add_column("Packages", justify="right")
    table.add_column("Recipe / Error", style="dim")

    for result in sorted(results, key=lambda r: r['name']):
        status = result['status']
        style = STATUS_STYLES.get(status, 'white')
        detail = result.get('error') or result.get('path') or ''
        table.add_row(
            result['name'],
            f"[{style}]{status}[/{style}]",
            str(result.get('sub_packages', 0)),
            detail,
        )

    console.print(table)
    print_results_summary(results)


def print_results_summary(results: List[Dict[str, Any]]) -> None:
    """Print summary counts for a generation run."""
    total = len(results)
    if total == 0:
        return

    rendered = sum(1 for r in results if r['status'] == 'rendered')
    skipped = sum(1 for r in results if r['status'] == 'no_release')
    failed = sum(1 for r in results if r['status'] == 'failed')

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Total repositories: {total}")
    console.print(f"  [green]Rendered: {rendered}[/green]")
    if skipped:
        console.print(f"  No release: {skipped}")
    if failed:
        console.print(f"  [red]Failed: {failed}[/red]")
