"""Tests for loading labelled training data from CSV."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from topic_classifier.classifier import classify
from topic_classifier.errors import ModelIOError, TrainingDataError
from topic_classifier.models import Category, Model
from topic_classifier.training_data import (
    TrainingRow,
    read_training_rows,
    train_from_csv,
    train_from_rows,
)


class TestReadTrainingRows:
    def test_columns_located_by_header(self, training_csv: Path):
        rows = list(read_training_rows(training_csv))
        assert len(rows) == 6
        assert rows[0] == TrainingRow(
            line=2,
            text="Ocean warming breaks temperature records",
            category="Climate Change",
        )
        assert rows[3].text == ""
        assert rows[4].category == "Sports"

    def test_short_rows_padded(self, tmp_path: Path):
        file = tmp_path / "data.csv"
        file.write_text("TEXT,CATEGORY\nonly text\n", encoding="utf-8")
        assert list(read_training_rows(file)) == [TrainingRow(2, "only text", "")]

    def test_byte_order_mark(self, tmp_path: Path):
        file = tmp_path / "data.csv"
        file.write_text("\ufeffTEXT,CATEGORY\nocean,Climate Change\n", encoding="utf-8")
        assert list(read_training_rows(file))[0].category == "Climate Change"

    def test_quoted_commas(self, tmp_path: Path):
        file = tmp_path / "data.csv"
        file.write_text('CATEGORY,TEXT\nImmigration,"border, asylum, visas"\n', encoding="utf-8")
        assert list(read_training_rows(file))[0].text == "border, asylum, visas"

    @pytest.mark.parametrize("header", ["TEXT,LABEL", "BODY,CATEGORY", "text,category"])
    def test_missing_columns(self, tmp_path: Path, header: str):
        file = tmp_path / "data.csv"
        file.write_text(f"{header}\nocean,Climate Change\n", encoding="utf-8")
        with pytest.raises(TrainingDataError, match="TEXT"):
            list(read_training_rows(file))

    def test_empty_file(self, tmp_path: Path):
        file = tmp_path / "data.csv"
        file.write_text("", encoding="utf-8")
        with pytest.raises(TrainingDataError, match="header"):
            list(read_training_rows(file))

    def test_oversized_field(self, tmp_path: Path):
        file = tmp_path / "data.csv"
        file.write_text(
            "TEXT,CATEGORY\n" + '"' + "a" * 180_000 + '",Climate Change\n',
            encoding="utf-8",
        )
        with pytest.raises(TrainingDataError, match="Could not parse CSV file"):
            list(read_training_rows(file))

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ModelIOError, match="not found"):
            list(read_training_rows(tmp_path / "missing.csv"))


class TestTrainFromCsv:
    def test_report(self, empty_model: Model, training_csv: Path):
        report = train_from_csv(empty_model, training_csv)
        assert report.trained == 4
        assert report.skipped_empty == 1
        assert [row.line for row in report.skipped_invalid] == [6]
        assert report.skipped_invalid[0].category == "Sports"
        assert report.skipped == 2
        assert report.categories == {
            Category.CLIMATE_CHANGE: 2,
            Category.ECONOMIC_JUSTICE: 1,
            Category.IMMIGRATION: 1,
        }

    def test_model_updated(self, empty_model: Model, training_csv: Path):
        train_from_csv(empty_model, training_csv)
        assert empty_model.total_documents == 4
        assert list(empty_model.category_counts) == [
            Category.CLIMATE_CHANGE,
            Category.ECONOMIC_JUSTICE,
            Category.IMMIGRATION,
        ]
        assert classify(empty_model, "asylum border") is Category.IMMIGRATION

    def test_invalid_category_logged(self, empty_model: Model, training_csv: Path, caplog):
        with caplog.at_level(logging.WARNING, logger="topic_classifier"):
            train_from_csv(empty_model, training_csv)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Sports" in warnings[0].getMessage()

    def test_train_from_rows(self, empty_model: Model):
        rows = [
            TrainingRow(2, "ocean", "climate_change"),
            TrainingRow(3, "", "Immigration"),
            TrainingRow(4, "pride", "LGBTQIA+"),
        ]
        report = train_from_rows(empty_model, iter(rows))
        assert report.trained == 2
        assert report.skipped_empty == 1
        assert empty_model.total_documents == 2
