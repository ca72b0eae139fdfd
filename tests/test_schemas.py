"""
Tests for climb and attempt models, and the user field parsers.
"""
import pytest
from pydantic import ValidationError

from climblog.exceptions import ValidationFailure
from climblog.models.enums import ClimbType
from climblog.schemas.climb import Climb, ClimbDate
from climblog.services.field_parsers import (
    parse_confirmation,
    parse_day,
    parse_identity_text,
    parse_month,
    parse_stars,
    parse_year,
)


def make_climb(**overrides) -> Climb:
    fields = dict(name="Flake", location="Smith Rock", type=ClimbType.TRAD, grade=0, stars=2)
    fields.update(overrides)
    return Climb(**fields)


class TestClimbModel:
    """Tests for model-level invariants"""

    def test_grade_label_uses_type_table(self, boulder):
        assert boulder.grade_label == "V8"

    @pytest.mark.parametrize("stars", [0, 4])
    def test_star_bounds_accepted(self, stars):
        assert make_climb(stars=stars).stars == stars

    @pytest.mark.parametrize("stars", [-1, 5])
    def test_star_bounds_rejected(self, stars):
        with pytest.raises(ValidationError):
            make_climb(stars=stars)

    def test_grade_index_must_fit_table(self):
        # 54 is V17+ but past the end of the YDS table
        assert make_climb(type=ClimbType.BOULDER, grade=54).grade_label == "V17+"
        with pytest.raises(ValidationError):
            make_climb(type=ClimbType.SPORT, grade=54)

    def test_negative_grade_rejected(self):
        with pytest.raises(ValidationError):
            make_climb(grade=-1)

    def test_identity_is_case_insensitive(self, boulder):
        assert boulder.matches("MIDNIGHT LIGHTNING", "yosemite")
        assert not boulder.matches("Midnight Lightning", "Bishop")

    def test_identity_fields_must_fit_store_slot(self):
        assert make_climb(name="n" * 45, location="l" * 45).name == "n" * 45
        with pytest.raises(ValidationError):
            make_climb(name="n" * 46)
        with pytest.raises(ValidationError):
            make_climb(location="\u00e9" * 23)

    def test_identity_width_checked_on_assignment(self, boulder):
        with pytest.raises(ValidationError):
            boulder.name = "A" * 46
        assert boulder.name == "Midnight Lightning"

    def test_attempts_default_empty_and_independent(self, sample_attempt):
        first, second = make_climb(), make_climb(name="Other")
        first.attempts.append(sample_attempt)
        assert second.attempts == []


class TestClimbDate:
    """Tests for attempt dates"""

    def test_str(self):
        assert str(ClimbDate(year=2024, month=3, day=5)) == "2024-3-5"

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_range(self, month):
        with pytest.raises(ValidationError):
            ClimbDate(year=2024, month=month, day=1)

    def test_no_calendar_check_on_day(self):
        assert ClimbDate(year=2023, month=2, day=31).day == 31

    def test_year_must_fit_store_field(self):
        with pytest.raises(ValidationError):
            ClimbDate(year=10000, month=1, day=1)


class TestFieldParsers:
    """Tests for user-entered field parsing"""

    @pytest.mark.parametrize("text, expected", [("0", 0), ("4", 4)])
    def test_stars_boundaries_accepted(self, text, expected):
        assert parse_stars(text) == expected

    @pytest.mark.parametrize("text", ["-1", "5", "", "three", "2.5"])
    def test_stars_rejected(self, text):
        with pytest.raises(ValidationFailure):
            parse_stars(text)

    def test_month(self):
        assert parse_month("12") == 12
        with pytest.raises(ValidationFailure):
            parse_month("13")
        with pytest.raises(ValidationFailure):
            parse_month("0")

    def test_year_and_day_are_digits_only(self):
        assert parse_year("2024") == 2024
        assert parse_day("15") == 15
        with pytest.raises(ValidationFailure):
            parse_year("24a")
        with pytest.raises(ValidationFailure):
            parse_day("-3")

    def test_year_too_wide_for_store(self):
        with pytest.raises(ValidationFailure):
            parse_year("10000")

    @pytest.mark.parametrize("text, expected", [("y", True), ("YES", True), ("n", False), ("No", False)])
    def test_confirmation(self, text, expected):
        assert parse_confirmation(text) is expected

    def test_confirmation_rejects_other(self):
        with pytest.raises(ValidationFailure):
            parse_confirmation("maybe")

    def test_identity_text_width(self):
        assert parse_identity_text("A" * 45) == "A" * 45
        with pytest.raises(ValidationFailure):
            parse_identity_text("A" * 46)
        # Width is counted in encoded bytes, not characters
        with pytest.raises(ValidationFailure):
            parse_identity_text("é" * 23, "location")
