"""Command-line interface for acstatus."""

import json
import sys
import time
from typing import Optional, Tuple

import click
import requests

from . import __version__
from .client import AtCoderProblemsClient, SubmissionFormatError
from .config import GlobalConfig, LocalConfig
from .progress import filter_reset_progress
from .status import classify, summarize
from .utils.logging import get_logger, setup_logging
from .utils.terminal import (
    STATUS_NAMES,
    console,
    create_table,
    err_console,
    format_epoch,
    format_status,
    format_status_detail,
)

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
def cli():
    """acstatus - solve status of AtCoder problems against your rivals."""
    pass


@cli.command()
@click.argument("user", required=False)
@click.option("-r", "--rival", "rivals", multiple=True, help="Rival user id (repeatable)")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON instead of a table")
@click.option("--no-reset", is_flag=True, default=False, help="Ignore the progress reset list")
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
def status(user: Optional[str], rivals: Tuple[str, ...], as_json: bool, no_reset: bool, debug: bool):
    """Show the status of every problem USER or a rival submitted to."""
    setup_logging("DEBUG" if debug else None)

    config = GlobalConfig.load()
    user = user or config.user_id
    if not user:
        console.print("[red]No user given and none configured. Run 'acstatus set-user' first.[/red]")
        sys.exit(1)

    all_rivals = list(config.rivals) + list(rivals)
    client = AtCoderProblemsClient(base_url=config.base_url)

    if not as_json:
        console.print(f"[cyan]Fetching submissions of {user} and {len(all_rivals)} rival(s)...[/cyan]")
    try:
        submissions = client.fetch_submissions(user, all_rivals)
    except requests.RequestException as e:
        console.print(f"[red]Failed to fetch submissions: {e}[/red]")
        sys.exit(1)
    except SubmissionFormatError as e:
        console.print(f"[red]Malformed response: {e}[/red]")
        sys.exit(1)

    # Resets belong to the configured user only
    if not no_reset and config.has_user():
        path = LocalConfig.find_config()
        local = LocalConfig.load(path)
        if path is not None and local is None:
            err_console.print(f"[yellow]Could not read {path}, ignoring progress resets.[/yellow]")
        elif local is not None and local.progress_resets:
            logger.debug("Applying %d progress resets", len(local.progress_resets))
            submissions = filter_reset_progress(
                submissions, local.progress_resets, config.user_id
            )

    status_map = classify(submissions, user)

    if as_json:
        data = {pid: s.to_dict() for pid, s in sorted(status_map.items())}
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    if not status_map:
        console.print("[yellow]No submissions found.[/yellow]")
        return

    table = create_table(f"Problems of {user}", ["Problem", "Status", "Detail"])
    for problem_id, problem_status in sorted(status_map.items()):
        table.add_row(problem_id, format_status(problem_status), format_status_detail(problem_status))
    console.print(table)

    counts = summarize(status_map)
    console.print(
        "  ".join(f"[bold]{STATUS_NAMES[label]}:[/bold] {count}" for label, count in counts.items() if count)
    )


@cli.command(name="set-user")
@click.argument("user")
def set_user(user: str):
    """Set the default user id."""
    config = GlobalConfig.load()
    config.user_id = user
    config.save()
    console.print(f"[green]Default user set to: {user}[/green]")


@cli.group()
def rival():
    """Manage tracked rivals."""
    pass


@rival.command(name="add")
@click.argument("user")
def rival_add(user: str):
    """Track a rival."""
    config = GlobalConfig.load()
    if not config.add_rival(user):
        console.print(f"[yellow]{user} is already a rival.[/yellow]")
        return
    config.save()
    console.print(f"[green]Added rival: {user}[/green]")


@rival.command(name="remove")
@click.argument("user")
def rival_remove(user: str):
    """Stop tracking a rival."""
    config = GlobalConfig.load()
    if not config.remove_rival(user):
        console.print(f"[yellow]{user} is not a rival.[/yellow]")
        return
    config.save()
    console.print(f"[green]Removed rival: {user}[/green]")


@rival.command(name="list")
def rival_list():
    """List tracked rivals."""
    config = GlobalConfig.load()
    if not config.rivals:
        console.print("[yellow]No rivals configured.[/yellow]")
        return
    for r in config.rivals:
        console.print(r)


def load_local_config():
    """
    Load the project config for editing.
    Exits instead of returning a fresh config when an existing file is unreadable,
    so saving cannot drop the resets it holds.
    """
    path = LocalConfig.find_config()
    config = LocalConfig.load(path)
    if path is not None and config is None:
        console.print(f"[red]Could not read {path}. Fix or remove it first.[/red]")
        sys.exit(1)
    return path, config


@cli.group()
def reset():
    """Manage the progress reset list of this project."""
    pass


@reset.command(name="add")
@click.argument("problem_id")
@click.option("--at", "epoch", type=int, help="Reset epoch second (default: now)")
def reset_add(problem_id: str, epoch: Optional[int]):
    """Hide your submissions to PROBLEM_ID made up to now (or --at)."""
    if epoch is None:
        epoch = int(time.time())

    path, config = load_local_config()
    config = config or LocalConfig()
    config.add_reset(problem_id, epoch)
    config.save(path)
    logger.debug("Saved local config to %s", path)
    console.print(f"[green]Reset {problem_id} at {format_epoch(epoch)}[/green]")


@reset.command(name="remove")
@click.argument("problem_id")
def reset_remove(problem_id: str):
    """Remove the reset point of PROBLEM_ID."""
    path, config = load_local_config()
    if config is None or not config.remove_reset(problem_id):
        console.print(f"[yellow]No reset for {problem_id}.[/yellow]")
        return
    config.save(path)
    console.print(f"[green]Removed reset of {problem_id}[/green]")


@reset.command(name="list")
def reset_list():
    """List progress resets."""
    _, config = load_local_config()
    if config is None or not config.progress_resets:
        console.print("[yellow]No progress resets.[/yellow]")
        return

    table = create_table("Progress Resets", ["Problem", "Reset At"])
    for item in config.progress_resets:
        table.add_row(item.problem_id, format_epoch(item.reset_epoch_second))
    console.print(table)


@cli.command()
def version():
    """Show version information."""
    console.print(f"[bold cyan]acstatus[/bold cyan] version [green]{__version__}[/green]")
    console.print("Solve status of AtCoder problems against rivals")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
