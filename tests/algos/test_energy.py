"""Tests for energy classification."""
import pytest

from app.algos.atom_scoring.energy import (
    EnergyLevel,
    classify_energy,
    energy_boost,
    infer_energy,
    parse_energy,
)
from tests.conftest import make_atom


@pytest.mark.parametrize(
    "value,expected",
    [
        ("quick", EnergyLevel.QUICK),
        ("QUICK", EnergyLevel.QUICK),
        ("Deep", EnergyLevel.DEEP),
        ("medium", EnergyLevel.MEDIUM),
        ("something else", EnergyLevel.MEDIUM),
        ("", EnergyLevel.MEDIUM),
    ],
)
def test_parse_energy(value, expected):
    assert parse_energy(value) == expected


class TestInferEnergy:

    def test_short_content_is_quick(self):
        assert infer_energy("Call mom") == EnergyLevel.QUICK

    def test_empty_content_is_quick(self):
        assert infer_energy("") == EnergyLevel.QUICK

    def test_quick_keyword_in_long_content(self):
        content = "x" * 120 + " only a Brief look needed"
        assert infer_energy(content) == EnergyLevel.QUICK

    def test_five_minute_keyword(self):
        content = "Takes about 5 MIN to tidy the shared folder and rename the files properly."
        assert infer_energy(content) == EnergyLevel.QUICK

    def test_quick_check_runs_before_deep(self):
        """Short content with a deep keyword is still Quick."""
        assert infer_energy("Write the design doc") == EnergyLevel.QUICK

    def test_long_content_is_deep(self):
        assert infer_energy("x" * 201) == EnergyLevel.DEEP

    def test_deep_keyword(self):
        content = "Need to RESEARCH the options for the new storage layer this week."
        assert infer_energy(content) == EnergyLevel.DEEP

    def test_review_all_keyword(self):
        content = "Go through and review all of the open pull requests on the repository."
        assert infer_energy(content) == EnergyLevel.DEEP

    def test_length_boundaries_are_medium(self):
        assert infer_energy("x" * 50) == EnergyLevel.MEDIUM
        assert infer_energy("x" * 200) == EnergyLevel.MEDIUM


class TestClassifyEnergy:

    def test_override_wins_over_content(self):
        atom = make_atom(content="short", energy="deep")
        assert classify_energy(atom) == EnergyLevel.DEEP

    def test_unknown_override_is_medium(self):
        atom = make_atom(content="short", energy="turbo")
        assert classify_energy(atom) == EnergyLevel.MEDIUM

    def test_inferred_without_override(self):
        atom = make_atom(content="short")
        assert classify_energy(atom) == EnergyLevel.QUICK


def test_energy_boosts():
    assert energy_boost(EnergyLevel.QUICK) == 0.1
    assert energy_boost(EnergyLevel.MEDIUM) == 0.0
    assert energy_boost(EnergyLevel.DEEP) == -0.05
