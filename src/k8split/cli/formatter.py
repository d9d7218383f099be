# src/k8split/cli/formatter.py
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from k8split.core.models import ChunkStatus, SplitReport

STATUS_STYLES = {
    ChunkStatus.WRITTEN: ("green", "✅"),
    ChunkStatus.PREVIEW: ("cyan", "👀"),
    ChunkStatus.DUPLICATE: ("yellow", "⚠️"),
    ChunkStatus.BLANK: ("dim", "➖"),
}


class ReportFormatter:
    """
    Renders the end-of-run report: one row per chunk, then a summary.
    """

    def __init__(self, output: Console):
        self.console = output

    def print_final_table(self, report: SplitReport):
        table = Table(title="K8Split Execution Report", show_lines=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind", style="white")
        table.add_column("Name", style="cyan")
        table.add_column("Namespace")
        table.add_column("Status", style="bold")
        table.add_column("Result", justify="center")

        for outcome in report.outcomes:
            color, icon = STATUS_STYLES[outcome.status]
            identity = outcome.identity
            table.add_row(
                str(outcome.index),
                escape(identity.kind) if identity else "-",
                escape(identity.name) if identity else "-",
                escape(identity.namespace) if identity else "-",
                f"[{color}]{outcome.status.value}[/{color}]",
                icon
            )

        self.console.print(table)

    def print_summary(self, report: SplitReport):
        summary = report.summary()
        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Source:          {escape(str(report.source))}\n"
            f"Output Dir:      {escape(str(report.output_dir))}\n"
            f"Chunks:          {summary['total_chunks']}\n"
            f"Written:         [green]{summary['written']}[/green]\n"
            f"Previewed:       [cyan]{summary['previewed']}[/cyan]\n"
            f"Duplicates:      [yellow]{summary['duplicates']}[/yellow]\n"
            f"Blank:           {summary['blank']}",
            border_style="dim"
        ))
