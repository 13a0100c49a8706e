"""Dependency check behind ``protokit check-deps``.

Imports every runtime package and reports the installed distribution
version.  Exit code 0 means everything imports; 1 lists what is missing.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module, metadata

from rich.console import Console
from rich.table import Table

# distribution name -> import name
RUNTIME_PACKAGES: dict[str, str] = {
    "fastapi": "fastapi",
    "uvicorn": "uvicorn",
    "pydantic": "pydantic",
    "email-validator": "email_validator",
    "sqlalchemy": "sqlalchemy",
    "passlib": "passlib",
    "pyyaml": "yaml",
    "rich": "rich",
    "click": "click",
}


@dataclass(frozen=True)
class PackageStatus:
    distribution: str
    module: str
    version: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def inspect_package(distribution: str, module: str) -> PackageStatus:
    """Import ``module`` and look up the version of ``distribution``."""
    try:
        import_module(module)
    except ImportError as exc:
        return PackageStatus(distribution, module, error=str(exc))
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        version = None
    return PackageStatus(distribution, module, version=version)


def check_packages(packages: dict[str, str] | None = None) -> list[PackageStatus]:
    packages = RUNTIME_PACKAGES if packages is None else packages
    return [inspect_package(dist, module) for dist, module in packages.items()]


def render(statuses: list[PackageStatus], console: Console) -> None:
    table = Table(title="Runtime packages")
    table.add_column("Package", style="cyan")
    table.add_column("Import")
    table.add_column("Version")
    table.add_column("Status")
    for status in statuses:
        table.add_row(
            status.distribution,
            status.module,
            status.version or "?",
            "[green]ok[/green]" if status.ok else f"[red]missing[/red] ({status.error})",
        )
    console.print(table)


def main(console: Console | None = None, packages: dict[str, str] | None = None) -> int:
    console = console or Console()
    statuses = check_packages(packages)
    render(statuses, console)

    missing = [s.distribution for s in statuses if not s.ok]
    if missing:
        console.print(f"[yellow]Missing: {', '.join(missing)}. Run pip install -e . to fix.[/yellow]")
        return 1
    console.print("[green]All dependencies present.[/green]")
    return 0
