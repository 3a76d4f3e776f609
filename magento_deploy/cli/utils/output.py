# magento_deploy/cli/utils/output.py
"""Output formatting utilities"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...api.exceptions import MagentoDeployError
from ...constants import EMOJI_ERROR, EMOJI_SUCCESS
from ...core.manager import DeployEntry, DeployReport
from ...models.config import DeployConfig
from ...models.package import Package

console = Console()


def format_deploy_report(report: DeployReport, title: str = "Deploy Result") -> None:
    """Format and display a deploy report"""
    if not report.dispatched:
        console.print("[yellow]Nothing to deploy[/yellow]")
        return

    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Package", style="cyan")
    table.add_column("Role")
    table.add_column("Action")
    table.add_column("Strategy")

    for index, record in enumerate(report.dispatched, start=1):
        table.add_row(
            str(index),
            record.name,
            record.role.name.lower(),
            record.action.value,
            record.strategy,
        )

    console.print(table)
    console.print(f"[green]{EMOJI_SUCCESS}[/green] Deployed {len(report.dispatched)} package(s)")


def format_plan(entries: List[DeployEntry]) -> None:
    """Display the entries a deploy would dispatch"""
    if not entries:
        console.print("[yellow]Nothing to deploy[/yellow]")
        return

    table = Table(title="Deploy Plan (dry run)", box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Package", style="cyan")
    table.add_column("Role")
    table.add_column("Action")
    table.add_column("Strategy")
    table.add_column("Source", style="dim")

    for index, entry in enumerate(entries, start=1):
        table.add_row(
            str(index),
            entry.package.name,
            entry.role.name.lower(),
            entry.strategy.action.value,
            entry.strategy.name,
            str(entry.strategy.source_dir),
        )

    console.print(table)


def format_packages(packages: List[Package], strategies: List[Optional[str]],
                    sources: List[str]) -> None:
    """Display installed packages with their deploy strategy"""
    table = Table(title="Installed Packages", box=box.SIMPLE)
    table.add_column("Package", style="cyan")
    table.add_column("Version")
    table.add_column("Type")
    table.add_column("Role")
    table.add_column("Strategy")
    table.add_column("Source", style="dim")

    for package, strategy, source in zip(packages, strategies, sources):
        role = package.role
        table.add_row(
            package.name,
            package.normalized_version or "-",
            package.type,
            role.name.lower() if role else "-",
            strategy or "[red]unsupported[/red]",
            source,
        )

    console.print(table)


def format_config(config: DeployConfig) -> None:
    """Display effective configuration"""
    lines = []
    for key, value in config.to_dict().items():
        if isinstance(value, dict):
            value = ", ".join(f"{k}={v}" for k, v in value.items()) or "-"
        elif isinstance(value, list):
            value = ", ".join(value) or "-"
        lines.append(f"[bold]{key}:[/bold] {value}")

    console.print(Panel("\n".join(lines), title="Configuration", border_style="blue"))


def format_error(error: MagentoDeployError) -> None:
    """Display a deploy error"""
    code = f" [dim]({error.error_code})[/dim]" if error.error_code else ""
    console.print(Panel(
        f"[red]{EMOJI_ERROR}[/red] {error}{code}",
        title="Deploy Error",
        border_style="red",
    ))
