# Third-party
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Local imports
from dsprofile.core.config import ProfilerConfig
from dsprofile.core.models import ColumnProfile, Report

# -----------------------------
# Display Service
# -----------------------------


class DisplayService:
    """Service for Rich console formatting of profiling reports."""

    def __init__(
        self,
        config: ProfilerConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.config: ProfilerConfig = config or ProfilerConfig()
        self.console: Console = console or Console()

    # -----------------------------
    # Display Operations
    # -----------------------------

    def show_report(self, report: Report, title: str = "Column Profile") -> None:
        """Print a report as a table followed by a triage summary.

        Args:
            report: Report to render
            title: Table title
        """
        self.console.print(self.build_report_table(report, title=title))

        panel: Panel | None = self._format_triage_panel(report)
        if panel is not None:
            self.console.print(panel)

    def build_report_table(
        self, report: Report, title: str = "Column Profile"
    ) -> Table:
        """Build a Rich table with one row per profiled column.

        Args:
            report: Report to render
            title: Table title

        Returns:
            Rich Table in report order
        """
        table: Table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Column", style="cyan")
        table.add_column("Type", style="yellow")
        table.add_column("Distinct", justify="right", style="white")
        table.add_column("Present", justify="right", style="white")
        table.add_column("Missing", justify="right", style="white")
        table.add_column("% Missing", justify="right")
        table.add_column("% Distinct", justify="right", style="white")
        table.add_column("Flags", style="bold red")

        for profile in report:
            color: str = self._missing_color(profile.pct_missing)
            table.add_row(
                profile.name,
                profile.dtype,
                f"{profile.distinct_count:,}",
                f"{profile.present_count:,}",
                f"{profile.missing_count:,}",
                f"[{color}]{profile.pct_missing:.2f}%[/]",
                f"{profile.pct_distinct:.2f}",
                self._flags(profile),
            )

        return table

    # -----------------------------
    # Formatting Helpers
    # -----------------------------

    def _missing_color(self, pct_missing: float) -> str:
        # Color code by missing percentage
        if pct_missing > self.config.null_pct_high:
            return "red"
        if pct_missing > self.config.null_pct_medium:
            return "yellow"
        return "green"

    def _flags(self, profile: ColumnProfile) -> str:
        if profile.is_all_missing:
            return "all missing"
        if profile.is_constant:
            return "constant"
        return ""

    def _format_triage_panel(self, report: Report) -> Panel | None:
        """Summarize columns worth a look before downstream analysis.

        Returns:
            Rich Panel, or None when nothing is flagged
        """
        all_missing: list[str] = report.all_missing_columns()
        constant: list[str] = report.constant_columns()
        if not all_missing and not constant:
            return None

        sections: list[str] = []
        if all_missing:
            sections.append(f"[bold red]All missing:[/] {', '.join(all_missing)}")
        if constant:
            sections.append(f"[bold yellow]Constant:[/] {', '.join(constant)}")

        return Panel(
            "\n".join(sections),
            title="Triage",
            border_style="bright_blue",
        )
