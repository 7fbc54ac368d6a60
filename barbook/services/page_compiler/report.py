"""Reporting utilities for sync runs."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import pandas as pd

from .diagnostics import WarningRecord

WARNING_COLUMNS = ("kind", "book_id", "page_num", "message")


def generate_report(
    output_dir: Path,
    page_counts: Mapping[str, int],
    skipped_books: Sequence[str],
    warnings: Sequence[WarningRecord],
    artifact_path: Path,
) -> tuple[Path, Path | None]:
    """Generate a Markdown sync report and a CSV export of the warnings."""

    output_dir.mkdir(parents=True, exist_ok=True)

    warnings_path: Path | None = None
    if warnings:
        warnings_path = output_dir / "sync_warnings.csv"
        frame = pd.DataFrame([record.as_row() for record in warnings], columns=list(WARNING_COLUMNS))
        frame.to_csv(warnings_path, index=False)

    report_path = output_dir / "sync_report.md"

    lines = ["# Page Config Sync Report", ""]
    lines.append(f"- Artifact: `{artifact_path}`")
    lines.append(f"- Books compiled: {len(page_counts)}")
    lines.append(f"- Books skipped: {len(skipped_books)}")
    lines.append(f"- Warnings: {len(warnings)}")
    lines.append("")

    if page_counts:
        lines.append("## Pages per book")
        for book_id, count in page_counts.items():
            lines.append(f"- **{book_id}**: {count} pages")
        lines.append("")

    if skipped_books:
        lines.append("## Skipped books")
        for book_id in skipped_books:
            lines.append(f"- {book_id}")
        lines.append("")

    if warnings:
        lines.append("## Warnings")
        for record in warnings:
            lines.append(f"- {record.location()} `{record.kind}`: {record.message}")
        lines.append("")
        lines.append(f"Warnings exported to `{warnings_path.name}`.")

    report_path.write_text("\n".join(lines), encoding="utf-8")
    return report_path, warnings_path
