from __future__ import annotations

import logging

import httpx
import typer
from rich.console import Console
from rich.table import Table

from update_service.diff import diff_records
from update_service.fetch.snapshot import fetch_html, make_client, read_snapshot, stamp, write_snapshot
from update_service.settings import settings
from writings_core import writings as w
from writings_core.corpus import WORKS, WORKS_BY_NAME, Work, html_path, parse_work
from writings_core.errors import StructureError, WritingsError
from writings_core.settings import settings as core_settings

app = typer.Typer(help="Refresh and verify the stored bahai.org HTML snapshots.")
console = Console()
logger = logging.getLogger(__name__)


def _select_works(names: list[str] | None) -> list[Work]:
    if not names:
        return list(WORKS)
    unknown = [n for n in names if n not in WORKS_BY_NAME]
    if unknown:
        known = ", ".join(WORKS_BY_NAME)
        raise typer.BadParameter(f"Unknown work(s): {', '.join(unknown)}. Choose from: {known}")
    return [WORKS_BY_NAME[n] for n in names]


def _records_table(title: str, records: list[w.Writings], style: str) -> Table:
    table = Table(title=title, title_style=style)
    table.add_column("ref_id")
    table.add_column("#", justify="right")
    table.add_column("text")
    for record in records:
        number = w.number(record)
        excerpt = record.text if len(record.text) <= 80 else record.text[:77] + "..."
        table.add_row(record.ref_id, "" if number is None else str(number), excerpt)
    return table


def update_work(work: Work, *, client: httpx.Client) -> bool:
    """
    Download one work and replace its snapshot if the page changed.

    Returns True when a new snapshot was written.
    """
    path = html_path(work, settings.html_dir)
    old_html = read_snapshot(path)

    console.print(f"\nFetching HTML from {work.url} ...")
    html = fetch_html(work.url, client=client)
    if html == old_html:
        console.print(f"[green]OK:[/green] {path.name} has not changed from last update.")
        return False

    stamped = stamp(work.url, html)
    records = parse_work(work.visitor, stamped, verify=False)
    if not records:
        raise StructureError(f"{work.visitor.__name__} returned no records")
    work.visitor.verify_count(records)

    existing: tuple = ()
    if old_html:
        try:
            existing = parse_work(work.visitor, old_html, verify=False)
        except StructureError as exc:
            logger.warning("previous %s snapshot no longer parses: %s", work.file_name, exc)
    added, removed = diff_records(existing, records)
    if added:
        console.print(_records_table(f"ADDED ({len(added)})", added, "green"))
    if removed:
        console.print(_records_table(f"REMOVED ({len(removed)})", removed, "red"))

    console.print(f"Parsed: {len(records)}, Expected: {work.expected_count}, Writing to {path} ...")
    write_snapshot(path, stamped)
    return True


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser progress.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else core_settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def download(
    works: list[str] | None = typer.Argument(None, help="Works to refresh (default: all)."),
) -> None:
    """
    Fetch each work from bahai.org, re-parse it and store the new snapshot
    under `html_dir` when the page changed.

    Note: requires network access at runtime.
    """
    selected = _select_works(works)
    updated = 0
    with make_client() as client:
        for work in selected:
            try:
                if update_work(work, client=client):
                    updated += 1
            except WritingsError as exc:
                console.print(f"[red]CODE UPDATE REQUIRED ({work.file_name}):[/red] {exc}")
                raise typer.Exit(1) from exc
    console.print(f"\n[green]✓ {updated} of {len(selected)} snapshot(s) updated[/green]")


@app.command()
def check(
    works: list[str] | None = typer.Argument(None, help="Works to verify (default: all)."),
) -> None:
    """Parse the stored snapshots and verify each work's record count."""
    table = Table(title="Snapshots")
    table.add_column("work")
    table.add_column("parsed", justify="right")
    table.add_column("expected", justify="right")
    table.add_column("status")

    failed = False
    for work in _select_works(works):
        path = html_path(work, settings.html_dir)
        if not path.exists():
            table.add_row(work.file_name, "-", str(work.expected_count), "[red]missing[/red]")
            failed = True
            continue
        try:
            records = parse_work(work.visitor, path.read_text(encoding="utf-8"), verify=False)
        except WritingsError as exc:
            table.add_row(work.file_name, "-", str(work.expected_count), f"[red]{exc}[/red]")
            failed = True
            continue
        ok = len(records) == work.expected_count
        failed = failed or not ok
        status = "[green]ok[/green]" if ok else "[red]count mismatch[/red]"
        table.add_row(work.file_name, str(len(records)), str(work.expected_count), status)

    console.print(table)
    if failed:
        raise typer.Exit(1)
