"""Tests for category normalization."""

from __future__ import annotations

import pytest

from topic_classifier.categories import normalize_category, valid_categories
from topic_classifier.errors import InvalidCategoryError, TopicClassifierError
from topic_classifier.models import Category


class TestNormalizeCategory:
    @pytest.mark.parametrize(
        "raw",
        [
            "Climate Change",
            "climate change",
            "CLIMATE CHANGE",
            "cLiMaTe ChAnGe",
            "climate_change",
            "Climate-Change",
            "climate__change",
            "climate - change",
            "  Climate   Change  ",
            "\tclimate\nchange",
        ],
    )
    def test_climate_change_spellings(self, raw):
        assert normalize_category(raw) is Category.CLIMATE_CHANGE

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Economic Justice", Category.ECONOMIC_JUSTICE),
            ("economic_justice", Category.ECONOMIC_JUSTICE),
            ("immigration", Category.IMMIGRATION),
            ("IMMIGRATION", Category.IMMIGRATION),
            ("reproductive-rights", Category.REPRODUCTIVE_RIGHTS),
            ("Reproductive_Rights", Category.REPRODUCTIVE_RIGHTS),
            ("LGBTQIA+", Category.LGBTQIA),
            ("lgbtqia+", Category.LGBTQIA),
            (" LGBTQIA+ ", Category.LGBTQIA),
        ],
    )
    def test_every_category_resolves(self, raw, expected):
        assert normalize_category(raw) is expected

    def test_category_passes_through(self):
        assert normalize_category(Category.IMMIGRATION) is Category.IMMIGRATION

    @pytest.mark.parametrize(
        "raw",
        ["Sports", "", "   ", "climate", "climatechange", "Climate Chnage", "LGBTQIA", "LGBTQIA +"],
    )
    def test_unknown_raises(self, raw):
        with pytest.raises(InvalidCategoryError):
            normalize_category(raw)

    def test_error_carries_raw_value_and_choices(self):
        with pytest.raises(InvalidCategoryError) as exc_info:
            normalize_category("Sports")
        assert exc_info.value.raw == "Sports"
        assert "Sports" in str(exc_info.value)
        assert "Climate Change" in str(exc_info.value)

    def test_error_is_catchable_as_family_and_value_error(self):
        with pytest.raises(TopicClassifierError):
            normalize_category("nope")
        with pytest.raises(ValueError):
            normalize_category("nope")


class TestValidCategories:
    def test_declaration_order(self):
        assert valid_categories() == [
            "Climate Change",
            "Economic Justice",
            "Immigration",
            "Reproductive Rights",
            "LGBTQIA+",
        ]

    def test_category_is_closed_set(self):
        assert len(Category) == 5
        assert all(isinstance(c.value, str) for c in Category)

    def test_str_is_label(self):
        assert str(Category.LGBTQIA) == "LGBTQIA+"
