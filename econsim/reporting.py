"""
Reporting and Export Module

Formats a SimulationResult as a text report, tabular exports and a
paginated PDF report.
"""

import io
import logging
import textwrap
from pathlib import Path
from typing import BinaryIO, Optional, Union

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .impacts import ImpactLevel
from .simulation import SimulationResult

logger = logging.getLogger(__name__)

REPORT_TITLE = "EconSim Simulation Report"

LEVEL_LABELS = {
    ImpactLevel.STRONG_POSITIVE: "↑↑ Strong Positive",
    ImpactLevel.POSITIVE: "↑ Positive",
    ImpactLevel.NEUTRAL: "→ Neutral",
    ImpactLevel.NEGATIVE: "↓ Negative",
    ImpactLevel.STRONG_NEGATIVE: "↓↓ Strong Negative",
}

# A4 portrait, in inches
PAGE_SIZE = (8.27, 11.69)
LEFT_MARGIN = 0.1
ITEM_INDENT = 0.13
TOP = 0.94
BOTTOM = 0.07
WRAP_WIDTH = 95


def format_signed(value: float, unit: str = "%") -> str:
    """Format a delta with an explicit ``+`` for positive values."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.2f}{unit}"


def format_timestamp(result: SimulationResult) -> str:
    return result.timestamp.strftime("%B %d, %Y, %I:%M %p %Z").strip()


def default_overview(result: SimulationResult) -> str:
    """Plain-language summary used when no AI overview is supplied."""
    outputs = result.outputs
    inputs = result.inputs
    return (
        f"{result.impacts.policy_name} at a rate of {inputs.policy_rate:g}% applied to the "
        f"{inputs.market_type.value} market. The rule-based projection gives a GDP change of "
        f"{format_signed(outputs.gdp_change)}, an employment change of "
        f"{format_signed(outputs.employment_change)} and an inflation change of "
        f"{format_signed(outputs.inflation_change)}, with government revenue moving by "
        f"{format_signed(outputs.revenue_change, 'B$')} and welfare by "
        f"{format_signed(outputs.welfare_change)}."
    )


class SimulationReport:
    """
    Generate reports and exports for one simulation run.
    """

    def __init__(self, result: SimulationResult, overview: Optional[str] = None):
        self.result = result
        self.overview = overview or default_overview(result)

    def metrics(self) -> list[tuple[str, str]]:
        """Key metrics as (label, formatted value) pairs."""
        outputs = self.result.outputs
        return [
            ("GDP Change", format_signed(outputs.gdp_change)),
            ("Employment Change", format_signed(outputs.employment_change)),
            ("Inflation Change", format_signed(outputs.inflation_change)),
            ("Government Revenue", format_signed(outputs.revenue_change, "B$")),
            ("Welfare Change", format_signed(outputs.welfare_change)),
        ]

    def generate_text_report(self) -> str:
        """Generate a plain text report."""
        result = self.result
        lines = []

        lines.append("=" * 70)
        lines.append(REPORT_TITLE.upper())
        lines.append("=" * 70)
        lines.append(f"Generated: {format_timestamp(result)}")
        lines.append(f"Policy: {result.impacts.policy_name}")
        lines.append(f"Simulation ID: {result.id}")
        lines.append("")

        lines.append("EXECUTIVE SUMMARY")
        lines.append("-" * 40)
        lines.extend(textwrap.wrap(self.overview, 70))
        lines.append("")

        lines.append("KEY METRICS")
        lines.append("-" * 40)
        for label, value in self.metrics():
            lines.append(f"{label + ':':<24}{value:>12}")
        lines.append("")

        lines.append("IMPACT ANALYSIS")
        lines.append("-" * 70)
        for section in result.impacts.sections:
            lines.append(section.title)
            for item in section.items:
                lines.append(f"  {LEVEL_LABELS[item.level]}: {item.effect}")
            lines.append(f"  Insight: {section.recommendation}")
            lines.append("")

        lines.append("PROJECTED PATH")
        lines.append("-" * 70)
        lines.append(f"{'Period':>6} {'GDP':>10} {'Employment':>12} {'Inflation':>10} {'Revenue':>10}")
        for point in result.outputs.time_series:
            lines.append(
                f"{point.period:>6} {point.gdp:>10.2f} {point.employment:>12.2f} "
                f"{point.inflation:>10.2f} {point.revenue:>10.2f}"
            )
        lines.append("")

        return "\n".join(lines)

    def display_summary(self, console: Optional[Console] = None):
        """Print a formatted summary of the result to the terminal."""
        console = console or Console()
        result = self.result

        console.print(Panel(
            f"[bold blue]{result.impacts.policy_name}[/bold blue]\n{self.overview}",
            title=REPORT_TITLE,
        ))

        metrics = Table(title="Key Metrics")
        metrics.add_column("Metric", style="cyan")
        metrics.add_column("Change", justify="right", style="bold")
        for name, value in self.metrics():
            metrics.add_row(name, value)
        console.print(metrics)

        path = Table(title="Projected Path")
        path.add_column("Period", style="cyan")
        path.add_column("GDP", justify="right")
        path.add_column("Employment", justify="right")
        path.add_column("Inflation", justify="right")
        path.add_column("Revenue", justify="right")
        for point in result.outputs.time_series:
            path.add_row(
                str(point.period),
                f"{point.gdp:.2f}",
                f"{point.employment:.2f}",
                f"{point.inflation:.2f}",
                f"{point.revenue:.2f}",
            )
        console.print(path)

    def to_dataframe(self) -> pd.DataFrame:
        """Time series with the price level, one row per period."""
        outputs = self.result.outputs
        df = pd.DataFrame([point.to_dict() for point in outputs.time_series])
        df["price_level"] = list(outputs.price_level)
        return df

    def impacts_dataframe(self) -> pd.DataFrame:
        """One row per labeled effect."""
        rows = []
        for section in self.result.impacts.sections:
            for item in section.items:
                rows.append({
                    "section": section.title,
                    "effect": item.effect,
                    "level": item.level.value,
                    "score": item.level.score,
                })
        return pd.DataFrame(rows, columns=["section", "effect", "level", "score"])

    def export_to_csv(self, filepath: Union[str, Path]):
        """Export the time series to a CSV file."""
        self.to_dataframe().to_csv(filepath, index=False)
        logger.info(f"Results exported to {filepath}")

    def export_to_json(self, filepath: Union[str, Path]):
        """Export the full result to a JSON file."""
        Path(filepath).write_text(self.result.to_json(), encoding="utf-8")
        logger.info(f"Results exported to {filepath}")

    def plot_time_series(self, save_path: Optional[str] = None, show: bool = False) -> plt.Figure:
        """
        Static chart of the projected indicator paths and the price level.
        """
        df = self.to_dataframe()
        fig, axes = plt.subplots(1, 2, figsize=(14, 5))
        fig.suptitle(f"Projected Path: {self.result.impacts.policy_name}",
                     fontsize=14, fontweight='bold')

        ax1 = axes[0]
        for column in ("gdp", "employment", "revenue"):
            ax1.plot(df["period"], df[column], linewidth=2, label=column.capitalize())
        ax1.set_xlabel('Period')
        ax1.set_ylabel('Index level')
        ax1.set_title('Economic Indicators')
        ax1.legend(loc='best')
        ax1.grid(True, alpha=0.3)

        ax2 = axes[1]
        ax2.plot(df["period"], df["inflation"], 'r-', linewidth=2, label='Inflation (%)')
        ax2.plot(df["period"], df["price_level"] - 100, 'b--', linewidth=1.5,
                 label='Price level - 100')
        ax2.axhline(y=0, color='black', linestyle='-', linewidth=0.5)
        ax2.set_xlabel('Period')
        ax2.set_title('Prices')
        ax2.legend(loc='best')
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')

        if show:
            plt.show()

        return fig

    # -------------------------------------------------------------------------
    # PDF
    # -------------------------------------------------------------------------

    def _pdf_lines(self) -> list[tuple[str, float, dict]]:
        """Flatten the report into (text, x, style) lines in reading order."""
        result = self.result
        heading = {"fontsize": 14, "color": "#212121", "step": 0.032}
        body = {"fontsize": 9, "color": "#323232", "step": 0.018}
        muted = {"fontsize": 10, "color": "#646464", "step": 0.02}

        lines = [(REPORT_TITLE, LEFT_MARGIN, {"fontsize": 24, "color": "#212121", "step": 0.045})]
        lines.append((f"Generated: {format_timestamp(result)}", LEFT_MARGIN, muted))
        lines.append((f"Policy: {result.impacts.policy_name}", LEFT_MARGIN, muted))
        lines.append((f"Simulation ID: {result.id}", LEFT_MARGIN, {**muted, "step": 0.04}))

        lines.append(("Executive Summary", LEFT_MARGIN, heading))
        for text in textwrap.wrap(self.overview, WRAP_WIDTH):
            lines.append((text, LEFT_MARGIN, body))
        lines.append(("", LEFT_MARGIN, body))

        lines.append(("Key Metrics", LEFT_MARGIN, heading))
        for label, value in self.metrics():
            lines.append((f"{label}: {value}", LEFT_MARGIN, body))
        lines.append(("", LEFT_MARGIN, body))

        lines.append(("Impact Analysis", LEFT_MARGIN, heading))
        for section in result.impacts.sections:
            lines.append((section.title, LEFT_MARGIN, {"fontsize": 11, "color": "#212121", "step": 0.024}))
            for item in section.items:
                for text in textwrap.wrap(f"{LEVEL_LABELS[item.level]}: {item.effect}", WRAP_WIDTH - 5):
                    lines.append((text, ITEM_INDENT, body))
            insight = {**body, "color": "#646464", "style": "italic"}
            for text in textwrap.wrap(f"Insight: {section.recommendation}", WRAP_WIDTH - 5):
                lines.append((text, ITEM_INDENT, insight))
            lines.append(("", LEFT_MARGIN, body))

        return lines

    def _pdf_pages(self) -> list[Figure]:
        pages = [Figure(figsize=PAGE_SIZE)]
        y = TOP

        for text, x, style in self._pdf_lines():
            if y - style["step"] < BOTTOM:
                pages.append(Figure(figsize=PAGE_SIZE))
                y = TOP
            if text:
                pages[-1].text(
                    x, y, text,
                    fontsize=style["fontsize"],
                    color=style["color"],
                    fontstyle=style.get("style", "normal"),
                    va="top",
                )
            y -= style["step"]

        total = len(pages)
        for number, page in enumerate(pages, start=1):
            page.text(0.5, 0.03, f"Page {number} of {total}",
                      fontsize=8, color="#969696", ha="center")
        return pages

    def export_to_pdf(self, target: Union[str, Path, BinaryIO]) -> int:
        """
        Write the PDF report.

        Args:
            target: File path or binary file object

        Returns:
            Number of pages written
        """
        pages = self._pdf_pages()
        with PdfPages(target) as pdf:
            for page in pages:
                pdf.savefig(page)
        logger.info(f"PDF report with {len(pages)} page(s) written for simulation {self.result.short_id}")
        return len(pages)

    def to_pdf_bytes(self) -> bytes:
        """Render the PDF report in memory (for download buttons)."""
        buffer = io.BytesIO()
        self.export_to_pdf(buffer)
        return buffer.getvalue()

    @property
    def pdf_filename(self) -> str:
        return f"EconSim_Report_{self.result.timestamp.strftime('%Y%m%d_%H%M%S')}.pdf"
