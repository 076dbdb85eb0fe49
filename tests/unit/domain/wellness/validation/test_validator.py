"""Unit tests for the profile field validator."""

import pytest

from wellness_bot.domain.wellness.core.exceptions.domain_errors import (
    InvalidFieldValueError,
)
from wellness_bot.domain.wellness.core.value_objects import (
    ActivityLevel,
    DietaryPreference,
    Gender,
    Lifestyle,
)
from wellness_bot.domain.wellness.validation import (
    FIELD_RULES,
    PROFILE_FIELD_ORDER,
    ProfileField,
    accept,
    is_in_range,
    is_valid,
    is_valid_activity_level,
    is_valid_dietary_pref,
    is_valid_gender,
    is_valid_lifestyle,
    normalize,
    parse_float,
    parse_int,
)


class TestChoicePredicates:
    """Test case-insensitive string predicates."""

    @pytest.mark.parametrize("raw", ["male", "Male", "MALE", "female", "FeMaLe"])
    def test_gender_accepts_any_case(self, raw):
        assert is_valid_gender(raw)

    @pytest.mark.parametrize("raw", ["", "m", "other", "males", " male"])
    def test_gender_rejects_unknown(self, raw):
        assert not is_valid_gender(raw)

    @pytest.mark.parametrize(
        "raw",
        ["sedentary", "Lightly Active", "MODERATELY ACTIVE", "very active"],
    )
    def test_activity_level_accepts_canonical_texts(self, raw):
        assert is_valid_activity_level(raw)

    @pytest.mark.parametrize(
        "raw", ["lightly-active", "lightly_active", "active", "very  active"]
    )
    def test_activity_level_rejects_variants(self, raw):
        assert not is_valid_activity_level(raw)

    @pytest.mark.parametrize("raw", ["smoking", "ALCOHOL", "None"])
    def test_lifestyle_accepts(self, raw):
        assert is_valid_lifestyle(raw)

    def test_lifestyle_rejects_unknown(self):
        assert not is_valid_lifestyle("vaping")

    @pytest.mark.parametrize("raw", ["vegetarian", "Vegan", "NONE"])
    def test_dietary_pref_accepts(self, raw):
        assert is_valid_dietary_pref(raw)

    def test_dietary_pref_rejects_unknown(self):
        assert not is_valid_dietary_pref("keto")

    def test_normalize_lowercases(self):
        assert normalize("MoDeRaTeLy AcTiVe") == "moderately active"


class TestIsInRange:
    """Test inclusive bounds check."""

    def test_bounds_are_inclusive(self):
        assert is_in_range(1, 1, 120)
        assert is_in_range(120, 1, 120)

    def test_outside_bounds_rejected(self):
        assert not is_in_range(0, 1, 120)
        assert not is_in_range(121, 1, 120)

    def test_real_bounds(self):
        assert is_in_range(0.5, 0.5, 2.5)
        assert not is_in_range(2.51, 0.5, 2.5)


class TestAccept:
    """Test parse + check + normalize for each field."""

    @pytest.mark.parametrize("raw", ["MALE", "Male", "male"])
    def test_gender_normalizes_to_lowercase(self, raw):
        value = accept(ProfileField.GENDER, raw)

        assert value is Gender.MALE
        assert value == "male"

    def test_activity_level_maps_to_enum(self):
        value = accept(ProfileField.ACTIVITY_LEVEL, "Lightly Active")

        assert value is ActivityLevel.LIGHTLY_ACTIVE

    def test_lifestyle_and_diet_map_to_enums(self):
        assert accept(ProfileField.LIFESTYLE, "Smoking") is Lifestyle.SMOKING
        assert (
            accept(ProfileField.DIETARY_PREF, "VEGAN")
            is DietaryPreference.VEGAN
        )

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("120", 120)])
    def test_age_boundaries_accepted(self, raw, expected):
        assert accept(ProfileField.AGE, raw) == expected

    @pytest.mark.parametrize("raw", ["0", "121", "-5"])
    def test_age_out_of_range_rejected(self, raw):
        with pytest.raises(InvalidFieldValueError) as exc_info:
            accept(ProfileField.AGE, raw)

        assert exc_info.value.minimum == 1
        assert exc_info.value.maximum == 120

    @pytest.mark.parametrize("raw", ["abc", "", "25.5", "twenty"])
    def test_malformed_age_rejected_like_out_of_range(self, raw):
        with pytest.raises(InvalidFieldValueError) as exc_info:
            accept(ProfileField.AGE, raw)

        assert exc_info.value.has_bounds

    def test_height_parses_float(self):
        assert accept(ProfileField.HEIGHT, "1.80") == pytest.approx(1.8)

    @pytest.mark.parametrize("raw", ["0.49", "2.51", "nan", "inf", "-inf"])
    def test_height_rejects_out_of_range_and_non_finite(self, raw):
        with pytest.raises(InvalidFieldValueError):
            accept(ProfileField.HEIGHT, raw)

    def test_weight_bounds(self):
        assert accept(ProfileField.WEIGHT, "20") == 20.0
        assert accept(ProfileField.WEIGHT, "300") == 300.0
        with pytest.raises(InvalidFieldValueError):
            accept(ProfileField.WEIGHT, "19.9")

    def test_sleep_hours_bounds(self):
        assert accept(ProfileField.SLEEP_HOURS, "0") == 0
        assert accept(ProfileField.SLEEP_HOURS, "24") == 24
        with pytest.raises(InvalidFieldValueError):
            accept(ProfileField.SLEEP_HOURS, "25")

    def test_choice_rejection_has_no_bounds(self):
        with pytest.raises(InvalidFieldValueError) as exc_info:
            accept(ProfileField.GENDER, "unknown")

        assert not exc_info.value.has_bounds
        assert exc_info.value.field is ProfileField.GENDER
        assert exc_info.value.raw == "unknown"

    def test_is_valid_mirrors_accept(self):
        assert is_valid(ProfileField.AGE, "30")
        assert not is_valid(ProfileField.AGE, "0")
        assert not is_valid(ProfileField.LIFESTYLE, "vaping")


class TestFieldOrder:
    """Test field identity and entry order."""

    def test_order_matches_profile_entry_order(self):
        assert [f.value for f in PROFILE_FIELD_ORDER] == [
            "age",
            "gender",
            "height",
            "weight",
            "activity_level",
            "sleep_hours",
            "lifestyle",
            "dietary_pref",
        ]

    def test_every_field_has_a_rule(self):
        assert set(FIELD_RULES) == set(ProfileField)


class TestNumericParsers:
    """Test that numeric text is plain ASCII."""

    @pytest.mark.parametrize("raw", ["25", "+25", "-3", "007"])
    def test_int_accepts_ascii_digits(self, raw):
        assert parse_int(raw) == int(raw)

    @pytest.mark.parametrize(
        "raw", ["7_5", "٢٥", "２５", "2.5", "1e2", " 25", ""]
    )
    def test_int_rejects_non_ascii_forms(self, raw):
        with pytest.raises(ValueError):
            parse_int(raw)

    @pytest.mark.parametrize(
        "raw,expected",
        [("1.80", 1.8), (".5", 0.5), ("2.", 2.0), ("1.8e0", 1.8), ("-0.5", -0.5)],
    )
    def test_float_accepts_ascii_decimals(self, raw, expected):
        assert parse_float(raw) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "raw", ["1_0", "１.8", "nan", "inf", "1.8.0", ".", "1e", ""]
    )
    def test_float_rejects_other_forms(self, raw):
        with pytest.raises(ValueError):
            parse_float(raw)

    @pytest.mark.parametrize("raw", ["7_5", "٢٥", "２５"])
    def test_age_rejects_underscored_and_unicode_digits(self, raw):
        with pytest.raises(InvalidFieldValueError) as exc_info:
            accept(ProfileField.AGE, raw)

        assert exc_info.value.has_bounds
