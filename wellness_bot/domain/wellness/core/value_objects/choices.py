"""Categorical profile attributes: gender, lifestyle, dietary preference."""

from enum import Enum


class Gender(str, Enum):
    """Gender selecting the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class Lifestyle(str, Enum):
    """Self-reported lifestyle habit.

    NONE means no habit worth addressing; no lifestyle advice is given.
    """

    SMOKING = "smoking"
    ALCOHOL = "alcohol"
    NONE = "none"


class DietaryPreference(str, Enum):
    """Dietary preference driving the nutrition advice block."""

    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    NONE = "none"
