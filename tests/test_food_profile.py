"""Tests for deriving playable foods from FDC records."""

import pytest

from calorie_climb.domain.foods import Nutrient
from calorie_climb.domain.nutrition import FoodDetails, FoodSummary, SearchMode
from calorie_climb.services.food_profile import (
    DEFAULT_EMOJI,
    clean_food_name,
    derive_emoji,
    derive_health_rating,
    extract_calories,
    food_from_details,
)


def _details(description: str, data_type: str, kcal: float) -> FoodDetails:
    return FoodDetails(
        summary=FoodSummary(
            fdc_id=42,
            description=description,
            brand_owner=None,
            brand_name=None,
            data_type=data_type,
        ),
        nutrients=(
            Nutrient("Energy", kcal * 4.184, "kJ"),
            Nutrient("Energy", kcal, "kcal"),
            Nutrient("Protein", 1.2, "g"),
            Nutrient("Vitamin C, total ascorbic acid", 36.4, "mg"),
        ),
        serving_size=100,
        serving_size_unit="g",
    )


@pytest.mark.parametrize(
    ("description", "expected"),
    [
        ("Apples, raw, with skin", "Apples"),
        ("Cheese (cheddar), sharp", "Cheese"),
        ("Raw broccoli florets", "Broccoli Florets"),
        ("USDA Commodity peanut butter, smooth", "Peanut Butter"),
    ],
)
def test_clean_food_name(description: str, expected: str) -> None:
    assert clean_food_name(description) == expected


@pytest.mark.parametrize(
    ("description", "emoji"),
    [
        ("Bananas, raw", "🍌"),
        ("Chicken, broilers or fryers, breast", "🍗"),
        ("Ice cream, vanilla", "🍦"),
        ("Quinoa, cooked", DEFAULT_EMOJI),
    ],
)
def test_derive_emoji(description: str, emoji: str) -> None:
    assert derive_emoji(description) == emoji


@pytest.mark.parametrize(
    ("description", "rating"),
    [
        ("Vegetable medley, raw", 9),
        ("Broccoli, raw", 10),
        ("Salmon, Atlantic, farmed", 8),
        ("Chicken, fried, batter", 3),
        ("Cookies, chocolate chip", 2),
        ("Quinoa, cooked", 5),
    ],
)
def test_derive_health_rating(description: str, rating: int) -> None:
    assert derive_health_rating(description) == rating


def test_extract_calories_prefers_kcal() -> None:
    nutrients = (
        Nutrient("Energy", 251.0, "kJ"),
        Nutrient("Energy", 59.6, "kcal"),
    )

    assert extract_calories(nutrients) == 60


def test_extract_calories_missing_energy() -> None:
    assert extract_calories((Nutrient("Protein", 3.0, "g"),)) == 0
    assert extract_calories(()) == 0


def test_generic_food_uses_clean_name() -> None:
    food = food_from_details(_details("Mangos, raw", "Foundation", 60), SearchMode.GENERIC)

    assert food.name == "Mangos"
    assert food.calories == 60
    assert food.description == "Mangos - 60 calories per 100g"
    assert food.is_from_usda
    assert food.fdc_id == 42
    assert food.serving_size == 100
    assert [nutrient.name for nutrient in food.nutrients] == ["Protein"]


def test_generic_survey_food_keeps_fndds_description() -> None:
    food = food_from_details(
        _details("Mango nectar, canned", "Survey (FNDDS)", 51), SearchMode.GENERIC
    )

    assert food.name == "Mango Nectar"
    assert food.description.endswith("FNDDS Description: Mango nectar, canned")


def test_full_mode_keeps_database_description() -> None:
    food = food_from_details(_details("Mangos, raw", "SR Legacy", 60), SearchMode.FULL)

    assert food.name == "mangos, raw"
    assert food.description == "From USDA database: Mangos, raw"
    assert food.data_type == "SR Legacy"
