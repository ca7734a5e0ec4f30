"""
assetbuster CLI.

Command-line interface for fingerprinting assets and inspecting manifests.
"""

from __future__ import annotations

from pathlib import Path

import click

from assetbuster import __version__
from assetbuster.core.config import DEFAULT_PROJECT_FILE, load_project
from assetbuster.errors import BusterError
from assetbuster.logging import buster_message, configure_logging


def _fail(message: str) -> None:
    click.echo(buster_message(message), err=True)
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """assetbuster: fingerprint static assets for cache-busting."""
    pass


@main.command()
@click.option(
    "--config", "-c",
    type=click.Path(dir_okay=False),
    default=DEFAULT_PROJECT_FILE,
    show_default=True,
    help="Project file with a 'buster' section",
)
@click.option("--verbose", "-v", is_flag=True, help="Log effective settings and each file written")
@click.option("--dry-run", is_flag=True, help="List manifest entries without writing files")
def run(config: str, verbose: bool, dry_run: bool) -> None:
    """Fingerprint the configured files and write the rev-manifest."""
    from assetbuster.buster import plan_buster, run_buster

    configure_logging(verbose=verbose)

    try:
        project = load_project(Path(config))

        if dry_run:
            from rich.console import Console
            from rich.table import Table

            entries = plan_buster(project.config, project.root)

            table = Table(title=f"Dry run: {project.settings.manifest}")
            table.add_column("Original", style="cyan")
            table.add_column("Fingerprinted")
            for original, fingerprinted in entries:
                table.add_row(original, fingerprinted)

            Console().print(table)
            click.echo(f"{len(entries)} file(s) would be fingerprinted")
            return

        result = run_buster(project.config, project.root)
    except (BusterError, OSError) as e:
        _fail(str(e))

    click.echo(f"Wrote {len(result.written)} file(s)")
    if result.skipped:
        click.echo(f"Skipped {len(result.skipped)} file(s) with unsupported names")
    click.echo(f"Manifest: {result.settings.manifest}")


@main.command()
@click.option(
    "--config", "-c",
    type=click.Path(dir_okay=False),
    default=DEFAULT_PROJECT_FILE,
    show_default=True,
    help="Project file with a 'buster' section",
)
@click.option(
    "--manifest", "-m",
    type=click.Path(dir_okay=False),
    help="Manifest file to show (overrides the project's manifest)",
)
def inspect(config: str, manifest: str | None) -> None:
    """Show the entries of a rev-manifest."""
    from rich.console import Console
    from rich.table import Table

    from assetbuster.manifest.rev_manifest import RevManifest

    try:
        manifest_path = Path(manifest) if manifest else load_project(Path(config)).settings.manifest
        if not manifest_path.exists():
            _fail(f"Manifest not found: {manifest_path}")
        rev_manifest = RevManifest.load(manifest_path)
    except (BusterError, OSError) as e:
        _fail(str(e))

    if len(rev_manifest) == 0:
        click.echo(f"Manifest {manifest_path} is empty")
        return

    table = Table(title=str(manifest_path))
    table.add_column("Original", style="cyan")
    table.add_column("Fingerprinted")
    for original, fingerprinted in sorted(rev_manifest.root.items()):
        table.add_row(original, fingerprinted)

    Console().print(table)


if __name__ == "__main__":
    main()
