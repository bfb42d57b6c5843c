"""Shared test fixtures for topic-classifier tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from topic_classifier.classifier import train
from topic_classifier.models import Model


@pytest.fixture
def empty_model() -> Model:
    """A freshly constructed, untrained model."""
    return Model()


@pytest.fixture
def trained_model() -> Model:
    """Two climate documents and one economic justice document."""
    model = Model()
    train(model, "ocean warming record temperatures", "Climate Change")
    train(model, "glacier melt rising seas", "Climate Change")
    train(model, "wage inequality rising poverty", "Economic Justice")
    return model


@pytest.fixture
def corpus() -> list[tuple[str, str]]:
    """Small labelled corpus covering all five categories."""
    return [
        ("Ocean temperatures hit a record as glaciers melt", "Climate Change"),
        ("Carbon emissions and wildfires worsen drought", "climate_change"),
        ("Sea level rise floods coastal towns after storms", "CLIMATE CHANGE"),
        ("Minimum wage workers strike over poverty pay", "Economic Justice"),
        ("Union organizers demand fair wages and housing", "economic-justice"),
        ("Wealth inequality widens as rents soar", "Economic Justice"),
        ("Asylum seekers wait at the border for hearings", "Immigration"),
        ("Deportation raids target undocumented migrants", "immigration"),
        ("Visa backlog leaves refugees stranded", "Immigration"),
        ("Abortion clinics close after the ruling", "Reproductive Rights"),
        ("Contraception access and abortion bans debated", "reproductive_rights"),
        ("Pregnancy care and abortion funding cut", "Reproductive Rights"),
        ("Transgender youth face new healthcare restrictions", "LGBTQIA+"),
        ("Pride march celebrates gay and lesbian equality", "lgbtqia+"),
        ("Queer and transgender students push for protections", "LGBTQIA+"),
    ]


@pytest.fixture
def training_csv(tmp_path: Path) -> Path:
    """A training CSV with one empty row and one invalid category."""
    file = tmp_path / "training_data.csv"
    file.write_text(
        "ID,CATEGORY,TEXT\n"
        '1,Climate Change,"Ocean warming breaks temperature records"\n'
        '2,climate_change,"Glacier melt raises sea levels"\n'
        '3,Economic Justice,"Wage inequality deepens poverty"\n'
        "4,Immigration,\n"
        '5,Sports,"The home team won the championship"\n'
        '6,immigration,"Asylum seekers wait at the border"\n',
        encoding="utf-8",
    )
    return file


ENV_VARS = (
    "TOPIC_CLASSIFIER_DATA",
    "TOPIC_CLASSIFIER_MODEL",
    "TOPIC_CLASSIFIER_MIN_CATEGORIES",
    "TOPIC_CLASSIFIER_CURATE",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Unset classifier environment variables and run from an empty directory.

    Each variable is set before being deleted so that anything a ``.env``
    file loads during the test is removed again on teardown.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
