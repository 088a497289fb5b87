import json
from collections.abc import Sequence
from dataclasses import asdict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pod_generator.domain.pod import GroupReport, MemberReport, PodReport, PodSizeMode
from pod_generator.domain.tier import format_tier

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def format_declared(member: MemberReport) -> str:
    """Declared tiers with the ones in play for the pod in bold."""
    parts = [
        f"[bold]{label}[/bold]" if highlighted else label
        for label, highlighted in zip(member.declared, member.highlighted)
    ]
    return ", ".join(parts)


def _add_member_row(table: Table, member: MemberReport, indent: str = "") -> None:
    table.add_row(f"{indent}{escape(member.name)}", format_declared(member), format_tier(member.average_tier))


def _add_entry_rows(table: Table, entry: MemberReport | GroupReport) -> None:
    if isinstance(entry, GroupReport):
        header = f"[bold]Group {escape(entry.group_id)}[/bold] [dim](Avg Power: {format_tier(entry.average_tier)})[/dim]"
        table.add_row(header, "", "")
        for member in entry.members:
            _add_member_row(table, member, indent="  ")
    else:
        _add_member_row(table, entry)


def print_pod_reports(reports: Sequence[PodReport]) -> None:
    if not reports:
        console.print("Could not form pods with the given participants.")
        return
    for report in reports:
        console.print(
            f"[bold green]{report.title}[/bold green] [dim]{report.size} players, avg power {report.average_power}[/dim]"
        )
        table = Table(show_edge=False, pad_edge=False)
        table.add_column("Player")
        table.add_column("Tiers")
        table.add_column("Avg", justify="right")
        for entry in report.entries:
            _add_entry_rows(table, entry)
        console.print(table)
        console.print()


def print_unassigned(entries: Sequence[MemberReport | GroupReport]) -> None:
    if not entries:
        return
    count = sum(len(e.members) if isinstance(e, GroupReport) else 1 for e in entries)
    console.print(f"[bold red]Unassigned[/bold red] [dim]({count} players)[/dim]")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("Tiers")
    table.add_column("Avg", justify="right")
    for entry in entries:
        _add_entry_rows(table, entry)
    console.print(table)


def print_plan(n: int, mode: PodSizeMode, sizes: Sequence[int]) -> None:
    if not sizes:
        console.print(f"[red]{n} players cannot form a pod[/red] (need at least 3)")
        return
    joined = " + ".join(str(s) for s in sizes)
    console.print(f"[bold]{n}[/bold] players ({mode.value}): {joined} [dim]({len(sizes)} pods)[/dim]")


def print_json(reports: Sequence[PodReport], unassigned: Sequence[MemberReport | GroupReport]) -> None:
    payload = {
        "pods": [asdict(r) for r in reports],
        "unassigned": [asdict(e) for e in unassigned],
    }
    console.print_json(json.dumps(payload))
