"""Derive game-facing food profiles from FoodData Central records."""

import re

from calorie_climb.domain.foods import Food, Nutrient
from calorie_climb.domain.nutrition import FoodDetails, SearchMode

DEFAULT_EMOJI = "🍽️"
DEFAULT_HEALTH_RATING = 5

KEY_NUTRIENTS = frozenset(
    {
        "Protein",
        "Total lipid (fat)",
        "Carbohydrate, by difference",
        "Fiber, total dietary",
        "Sugars, total including NLEA",
        "Sodium, Na",
    }
)

# Evaluated in order, first match wins.
EMOJI_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("apple",), "🍎"),
    (("banana",), "🍌"),
    (("orange",), "🍊"),
    (("grape",), "🍇"),
    (("strawberr",), "🍓"),
    (("peach",), "🍑"),
    (("pineapple",), "🍍"),
    (("watermelon",), "🍉"),
    (("cherry",), "🍒"),
    (("lemon",), "🍋"),
    (("carrot",), "🥕"),
    (("broccoli",), "🥦"),
    (("tomato",), "🍅"),
    (("corn",), "🌽"),
    (("pepper",), "🌶️"),
    (("lettuce", "salad"), "🥬"),
    (("potato",), "🥔"),
    (("onion",), "🧅"),
    (("cucumber",), "🥒"),
    (("spinach", "kale"), "🥬"),
    (("chicken",), "🍗"),
    (("beef", "steak"), "🥩"),
    (("fish", "salmon", "tuna"), "🐟"),
    (("egg",), "🥚"),
    (("shrimp",), "🍤"),
    (("milk",), "🥛"),
    (("cheese",), "🧀"),
    (("yogurt",), "🥛"),
    (("butter",), "🧈"),
    (("bread",), "🍞"),
    (("rice",), "🍚"),
    (("pasta",), "🍝"),
    (("cereal",), "🥣"),
    (("oats", "oatmeal"), "🥣"),
    (("cookie",), "🍪"),
    (("cake",), "🍰"),
    (("ice cream",), "🍦"),
    (("chocolate",), "🍫"),
    (("candy",), "🍬"),
    (("donut",), "🍩"),
    (("pizza",), "🍕"),
    (("burger",), "🍔"),
    (("fries",), "🍟"),
    (("water",), "💧"),
    (("juice",), "🧃"),
    (("soda", "cola"), "🥤"),
    (("coffee",), "☕"),
    (("tea",), "🍵"),
    (("almond",), "🥜"),
    (("peanut",), "🥜"),
    (("walnut",), "🥜"),
)

HEALTH_RULES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("spinach", "kale", "broccoli"), 10),
    (("salmon", "tuna"), 8),
    (("fruit", "vegetable"), 8),
    (("whole grain", "oats"), 7),
    (("chicken breast", "lean"), 7),
    (("bread", "pasta", "rice"), 5),
    (("cheese", "milk"), 6),
    (("fried", "pizza", "burger"), 3),
    (("candy", "cookie", "cake"), 2),
    (("soda", "energy drink"), 1),
)

_QUALIFIERS = re.compile(r"\b(raw|fresh|unprepared|commercial|usda commodity)\b")
_PARENTHETICAL = re.compile(r"\(.*?\)")


def derive_emoji(description: str) -> str:
    """Pick a display emoji from the first matching keyword rule."""
    desc = description.lower()
    for keywords, emoji in EMOJI_RULES:
        if any(keyword in desc for keyword in keywords):
            return emoji
    return DEFAULT_EMOJI


def derive_health_rating(description: str) -> int:
    """Rate healthiness 1-10 from the first matching keyword rule."""
    desc = description.lower()
    if "raw" in desc and ("vegetable" in desc or "fruit" in desc):
        return 9
    for keywords, rating in HEALTH_RULES:
        if any(keyword in desc for keyword in keywords):
            return rating
    return DEFAULT_HEALTH_RATING


def clean_food_name(description: str) -> str:
    """Turn an FDC description into a short title-cased display name."""
    cleaned = description.lower().split(",", maxsplit=1)[0]
    cleaned = _PARENTHETICAL.sub("", cleaned)
    cleaned = _QUALIFIERS.sub("", cleaned)
    return " ".join(word.capitalize() for word in cleaned.split())


def extract_calories(nutrients: tuple[Nutrient, ...]) -> int:
    """Return rounded kcal from the energy nutrient, or 0 when missing."""
    energy = [
        nutrient
        for nutrient in nutrients
        if "energy" in nutrient.name.lower() or "calorie" in nutrient.name.lower()
    ]
    if not energy:
        return 0
    kcal = [nutrient for nutrient in energy if nutrient.unit.lower() == "kcal"]
    chosen = kcal[0] if kcal else energy[0]
    return max(0, round(chosen.amount))


def food_from_details(details: FoodDetails, mode: SearchMode) -> Food:
    """Convert an FDC detail record into a playable food."""
    summary = details.summary
    calories = extract_calories(details.nutrients)
    key_nutrients = tuple(
        nutrient for nutrient in details.nutrients if nutrient.name in KEY_NUTRIENTS
    )
    generic = mode in {SearchMode.GENERIC, SearchMode.OFFLINE}
    name = (
        clean_food_name(summary.description)
        if generic
        else summary.description.lower()
    )

    if generic and summary.data_type == "Survey (FNDDS)":
        description = (
            f"{name} - {calories} calories per 100g. "
            f"FNDDS Description: {summary.description}"
        )
    elif generic:
        description = f"{name} - {calories} calories per 100g"
    else:
        description = f"From USDA database: {summary.description}"

    return Food(
        name=name,
        calories=calories,
        emoji=derive_emoji(summary.description),
        health_rating=derive_health_rating(summary.description),
        description=description,
        fdc_id=summary.fdc_id,
        brand_owner=summary.brand_owner,
        ingredients=details.ingredients,
        serving_size=details.serving_size,
        serving_size_unit=details.serving_size_unit,
        nutrients=key_nutrients,
        data_type=summary.data_type,
        additional_descriptions=details.additional_descriptions,
        is_from_usda=True,
    )
