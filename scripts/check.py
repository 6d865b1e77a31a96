#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.11"
# dependencies = [
#     "rich>=13.7.0",
#     "click>=8.1.7",
# ]
# ///

"""
Development check script - runs linting, type checking, and tests.
"""

import subprocess
import sys

import click
from rich.console import Console
from rich.table import Table

console = Console()

PATHS = ["err_ctx/", "tests/"]


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and return whether it succeeded."""
    console.print(f"\n[blue]🔍 {description}...[/blue]")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except Exception as e:
        console.print(f"[red]❌ {description} error: {e}[/red]")
        return False

    if result.returncode == 0:
        console.print(f"[green]✅ {description} passed[/green]")
        return True

    console.print(f"[red]❌ {description} failed[/red]")
    if result.stdout:
        console.print(result.stdout)
    if result.stderr:
        console.print(result.stderr)
    return False


@click.command()
@click.option("--lint/--no-lint", default=True, help="Run linting checks")
@click.option("--typecheck/--no-typecheck", default=True, help="Run type checking")
@click.option("--test/--no-test", default=True, help="Run tests")
@click.option("--fix", is_flag=True, help="Auto-fix linting issues")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(lint: bool, typecheck: bool, test: bool, fix: bool, verbose: bool):
    """Run development checks before committing."""
    console.print("\n[bold blue]🚀 Running development checks...[/bold blue]\n")

    results = []

    if lint:
        cmd = ["uv", "run", "ruff", "check", *PATHS]
        if fix:
            cmd.append("--fix")
        results.append(("Linting", run_command(cmd, "Ruff linting")))

        cmd = ["uv", "run", "ruff", "format", *PATHS]
        if not fix:
            cmd.append("--check")
        results.append(("Formatting", run_command(cmd, "Ruff formatting")))

    if typecheck:
        cmd = ["uv", "run", "mypy", "err_ctx/"]
        results.append(("Type Check", run_command(cmd, "Type checking")))

    if test:
        cmd = ["uv", "run", "pytest", "tests/", "--tb=long" if verbose else "--tb=short"]
        if verbose:
            cmd.append("-v")
        results.append(("Tests", run_command(cmd, "Tests")))

    table = Table(show_header=True)
    table.add_column("Check", style="cyan")
    table.add_column("Status", style="green")

    for check, passed in results:
        status = "[green]✅ Passed[/green]" if passed else "[red]❌ Failed[/red]"
        table.add_row(check, status)

    console.print("\n[bold]📊 Summary:[/bold]")
    console.print(table)

    if all(passed for _, passed in results):
        console.print("\n[bold green]✨ All checks passed![/bold green]")
        sys.exit(0)
    console.print("\n[bold red]⚠️  Some checks failed.[/bold red]")
    if lint and not fix:
        console.print("[dim]Tip: Use --fix flag to auto-fix linting issues[/dim]")
    sys.exit(1)


if __name__ == "__main__":
    main()
