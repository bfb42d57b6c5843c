"""Labelled training data loaded from CSV.

The CSV must have a header row with ``TEXT`` and ``CATEGORY`` columns;
other columns are ignored and column order does not matter. Rows with an
empty text or category are skipped silently, rows whose category is not
recognised are skipped with a warning. Neither aborts the run.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .classifier import train
from .errors import InvalidCategoryError, ModelIOError, TrainingDataError
from .models import Category, Model

logger = logging.getLogger(__name__)

TEXT_COLUMN = "TEXT"
CATEGORY_COLUMN = "CATEGORY"


@dataclass
class TrainingRow:
    """One data row from the CSV (``line`` is the 1-based file line)."""

    line: int
    text: str
    category: str


@dataclass
class SkippedRow:
    line: int
    category: str
    reason: str


@dataclass
class TrainingReport:
    """Summary of a bulk training run.

    Attributes:
        trained: Rows successfully added to the model.
        skipped_empty: Rows missing a text or category value.
        skipped_invalid: Rows rejected because of an unknown category.
        categories: Documents trained per category in this run.
    """

    trained: int = 0
    skipped_empty: int = 0
    skipped_invalid: list[SkippedRow] = field(default_factory=list)
    categories: dict[Category, int] = field(default_factory=dict)

    @property
    def skipped(self) -> int:
        return self.skipped_empty + len(self.skipped_invalid)


def read_training_rows(path: str | Path) -> Iterator[TrainingRow]:
    """Yield rows from a training CSV.

    Values are returned as found; missing cells come back as ``""``.

    Raises:
        ModelIOError: If the file does not exist or cannot be read.
        TrainingDataError: If the header lacks ``TEXT`` or ``CATEGORY``, or
            the file is not parseable CSV.
    """
    path = Path(path)
    if not path.is_file():
        raise ModelIOError(f"Training data file '{path}' not found.")

    try:
        # utf-8-sig swallows the BOM spreadsheet exports like to add.
        with open(path, newline="", encoding="utf-8-sig") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header is None:
                raise TrainingDataError(f"Could not read header from CSV file '{path}'.")

            columns = [name.strip() for name in header]
            if TEXT_COLUMN not in columns or CATEGORY_COLUMN not in columns:
                raise TrainingDataError(
                    f"CSV file must contain '{TEXT_COLUMN}' and '{CATEGORY_COLUMN}' columns."
                )
            text_idx = columns.index(TEXT_COLUMN)
            category_idx = columns.index(CATEGORY_COLUMN)

            for row in reader:
                yield TrainingRow(
                    line=reader.line_num,
                    text=row[text_idx] if text_idx < len(row) else "",
                    category=row[category_idx] if category_idx < len(row) else "",
                )
    except (OSError, UnicodeDecodeError) as e:
        raise ModelIOError(f"Could not read CSV file '{path}': {e}") from e
    except csv.Error as e:
        raise TrainingDataError(
            f"Could not parse CSV file '{path}' (line {reader.line_num}): {e}"
        ) from e


def train_from_rows(model: Model, rows: Iterator[TrainingRow]) -> TrainingReport:
    """Train ``model`` on each row, skipping rows that cannot be used."""
    report = TrainingReport()
    for row in rows:
        if not row.text or not row.category:
            report.skipped_empty += 1
            continue

        try:
            category = train(model, row.text, row.category)
        except InvalidCategoryError as e:
            logger.warning(
                "Skipping row %d with invalid category '%s': %s",
                row.line, row.category, e,
            )
            report.skipped_invalid.append(SkippedRow(row.line, row.category, str(e)))
            continue

        report.trained += 1
        report.categories[category] = report.categories.get(category, 0) + 1

    logger.info(
        "Trained on %d rows (%d skipped)", report.trained, report.skipped
    )
    return report


def train_from_csv(model: Model, path: str | Path) -> TrainingReport:
    """Train ``model`` on every usable row of a training CSV."""
    logger.info("Loading training data from %s", path)
    return train_from_rows(model, read_training_rows(path))
