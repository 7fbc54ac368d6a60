"""Public API for the page compiler service."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel

from barbook.config import SyncConfig

from .catalog import CatalogRegistry
from .compiler import compile_registry
from .diagnostics import WarningLog, WarningRecord
from .report import generate_report
from .serializer import render_artifact, write_artifact

LOGGER = logging.getLogger(__name__)


class SyncResult(BaseModel):
    """Aggregated outcome returned to callers."""

    registry: CatalogRegistry
    page_counts: Dict[str, int]
    skipped_books: List[str]
    warnings: List[WarningRecord]
    artifact_path: str
    report_path: str | None = None
    warnings_csv_path: str | None = None

    @property
    def warning_count(self) -> int:
        return len(self.warnings)


def sync_books(
    config: SyncConfig,
    output_path: Optional[Path] = None,
    report_dir: Optional[Path] = None,
    generated_at: Optional[datetime] = None,
) -> SyncResult:
    """Compile every configured book and regenerate the page configuration artifact."""

    warnings = WarningLog()
    compiled = compile_registry(config, warnings)

    target = Path(output_path) if output_path is not None else config.output_path
    source = render_artifact(compiled.registry, generated_at=generated_at)
    write_artifact(source, target)

    page_counts = compiled.page_counts()
    report_path: Path | None = None
    warnings_csv: Path | None = None
    if report_dir is not None:
        report_path, warnings_csv = generate_report(
            Path(report_dir),
            page_counts=page_counts,
            skipped_books=compiled.skipped_books,
            warnings=warnings.records(),
            artifact_path=target,
        )

    LOGGER.info(
        "Wrote %s (%s book(s), %s skipped, %s warning(s))",
        target,
        len(page_counts),
        len(compiled.skipped_books),
        len(warnings),
    )

    return SyncResult(
        registry=compiled.registry,
        page_counts=page_counts,
        skipped_books=compiled.skipped_books,
        warnings=warnings.records(),
        artifact_path=str(target),
        report_path=str(report_path) if report_path else None,
        warnings_csv_path=str(warnings_csv) if warnings_csv else None,
    )
