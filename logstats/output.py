"""Log Stats - Report output"""

from typing import Dict

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def _section(console: Console, title: str, style: str = "bold"):
    console.print("\n" + "─" * 70, style="cyan")
    console.print(title, style=style)


def _print_samples(console: Console, title: str, samples: Dict, style: str):
    _section(console, f"{title} ({samples['total']})", style)
    for line in samples['recent']:
        # Text keeps brackets and :codes: verbatim; it drops control codes and expands tabs
        console.print(Text("  " + line), soft_wrap=True)


def print_report(report: Dict, console: Console):
    console.print("\n" + "═" * 70, style="cyan")
    console.print("              LOG ANALYSIS REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    summary = report['summary']
    console.print(Panel.fit(
        f"Total Lines: [cyan]{summary['total_lines']:,}[/]\n"
        f"Unique IPs: [cyan]{summary['unique_ips']:,}[/]\n"
        f"Unique Status Codes: [cyan]{summary['unique_status_codes']:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    if report['levels']:
        _section(console, "LEVELS")
        table = Table(box=box.ROUNDED)
        table.add_column("Level", style="cyan")
        table.add_column("Lines", justify="right")
        table.add_column("Share", justify="right")
        for level, data in report['levels'].items():
            color = {'ERROR': 'red', 'WARN': 'yellow', 'WARNING': 'yellow'}.get(level, 'white')
            table.add_row(f"[{color}]{level}[/]", str(data['count']), f"{data['percentage']:.1f}%")
        console.print(table)

    if report['status_codes']:
        _section(console, "STATUS CODES")
        for code, count in report['status_codes'].items():
            color = 'green' if code < 400 else 'yellow' if code < 500 else 'red'
            console.print(f"  {code}: [{color}]{count}[/]")

    if report['top_ips']:
        _section(console, f"TOP {len(report['top_ips'])} IPs (by lines)")
        table = Table(box=box.ROUNDED)
        table.add_column("IP Address", style="cyan")
        table.add_column("Lines", justify="right")
        for ip, count in report['top_ips'].items():
            table.add_row(ip, str(count))
        console.print(table)

    if report['errors']['total']:
        _print_samples(console, "RECENT ERRORS", report['errors'], "bold red")

    if report['warnings']['total']:
        _print_samples(console, "RECENT WARNINGS", report['warnings'], "bold yellow")

    console.print("\n" + "═" * 70, style="cyan")
