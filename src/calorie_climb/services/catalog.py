"""Offline food catalog with lookup and suggestion ranking."""

from dataclasses import dataclass, field

from calorie_climb.domain.foods import Food
from calorie_climb.services.safety import contains_restricted

MAX_CATALOG_SUGGESTIONS = 5

FOOD_CATALOG: tuple[Food, ...] = (
    Food("water", 0, "💧", 10, "Essential for life! Zero calories and super healthy."),
    # Low calorie greens
    Food(
        "cucumber",
        16,
        "🥒",
        9,
        "Crispy and refreshing! Very low in calories and full of water.",
    ),
    Food(
        "lettuce",
        5,
        "🥬",
        9,
        "Leafy greens are amazing! Almost no calories but lots of nutrients.",
    ),
    Food(
        "celery",
        6,
        "🥬",
        9,
        "Crunchy and fun to eat! Burns almost as many calories as it contains.",
    ),
    Food(
        "spinach",
        23,
        "🥬",
        10,
        "Popeye's favorite! Super nutritious and very low in calories.",
    ),
    # Fruits
    Food(
        "apple",
        95,
        "🍎",
        9,
        "An apple a day keeps the doctor away! Sweet, crunchy, and healthy.",
    ),
    Food("banana", 105, "🍌", 8, "Great for energy! Potassium-rich and naturally sweet."),
    Food("orange", 87, "🍊", 9, "Packed with vitamin C! Juicy and refreshing."),
    Food("grapes", 110, "🍇", 8, "Nature's candy! Sweet and full of antioxidants."),
    Food("strawberries", 50, "🍓", 9, "Sweet and low in calories! Perfect healthy snack."),
    # Vegetables
    Food("carrot", 25, "🥕", 9, "Great for your eyes! Crunchy and naturally sweet."),
    Food(
        "broccoli",
        55,
        "🥦",
        10,
        "Little green trees! Super nutritious and cancer-fighting.",
    ),
    Food("tomato", 35, "🍅", 8, "Technically a fruit! Full of vitamins and very tasty."),
    # Proteins
    Food(
        "chicken breast",
        165,
        "🍗",
        7,
        "Lean protein power! Helps build strong muscles.",
    ),
    Food("salmon", 206, "🐟", 8, "Brain food! Rich in omega-3 fatty acids."),
    Food("egg", 78, "🥚", 8, "Perfect protein! Contains all essential amino acids."),
    Food("tofu", 94, "🥩", 7, "Plant-based protein! Great for vegetarians."),
    # Dairy
    Food("milk", 103, "🥛", 7, "Builds strong bones! Rich in calcium and protein."),
    Food("yogurt", 100, "🥛", 8, "Good bacteria for your tummy! Creamy and nutritious."),
    Food(
        "cheese",
        113,
        "🧀",
        6,
        "Calcium-rich but watch the fat! Delicious in moderation.",
    ),
    # Grains
    Food("rice", 130, "🍚", 6, "Energy fuel! Carbs to power your day."),
    Food("bread", 79, "🍞", 5, "Comfort food! Better when it's whole grain."),
    Food(
        "pasta",
        131,
        "🍝",
        5,
        "Italian favorite! Carbs for energy, but watch the portions.",
    ),
    Food("oatmeal", 68, "🥣", 8, "Breakfast champion! Fiber-rich and keeps you full."),
    # Nuts and seeds
    Food(
        "almonds",
        164,
        "🥜",
        8,
        "Brain food! Healthy fats and protein in a tiny package.",
    ),
    Food("peanuts", 161, "🥜", 7, "Not actually nuts, but legumes! Protein-packed."),
    # Moderate calorie foods
    Food("avocado", 234, "🥑", 8, "Healthy fats galore! Creamy and heart-healthy."),
    Food(
        "pizza slice",
        285,
        "🍕",
        4,
        "Tasty but high in calories! Enjoy as a special treat.",
    ),
    Food("hamburger", 354, "🍔", 3, "Classic comfort food! High in calories and fat."),
    Food(
        "french fries",
        365,
        "🍟",
        2,
        "Crispy but not healthy! Lots of oil and calories.",
    ),
    # Treats
    Food("chocolate bar", 235, "🍫", 3, "Sweet treat! High in sugar and calories."),
    Food("ice cream", 207, "🍦", 3, "Cold and creamy! High in sugar and fat."),
    Food("donut", 269, "🍩", 2, "Sweet and fried! Very high in sugar and calories."),
    Food("cake", 365, "🍰", 2, "Birthday special! Lots of sugar and calories."),
    Food("cookies", 142, "🍪", 3, "Sweet treats! High in sugar, eat in moderation."),
    # Very high calorie foods
    Food("milkshake", 530, "🥤", 2, "Liquid calories! Very high in sugar and fat."),
    Food(
        "cheeseburger",
        540,
        "🍔",
        2,
        "Super size calories! Very high in fat and calories.",
    ),
    Food(
        "fried chicken",
        320,
        "🍗",
        3,
        "Crispy but greasy! High in calories from frying.",
    ),
    # Unsafe items
    Food("energy drink", 110, "⚡", 1, "Too much caffeine! Can make your heart race."),
    Food(
        "raw meat",
        143,
        "🥩",
        1,
        "Dangerous bacteria! Always cook meat before eating.",
        is_toxic=True,
    ),
    Food("soap", 0, "🧼", 1, "Not food! Very dangerous to eat!", is_toxic=True),
    Food(
        "poison",
        0,
        "☠️",
        1,
        "Extremely dangerous! Never eat anything poisonous!",
        is_toxic=True,
    ),
)


@dataclass(frozen=True)
class FoodCatalog:
    """Read-only table of foods available without a network."""

    foods: tuple[Food, ...] = field(default=FOOD_CATALOG)

    def lookup(self, name: str) -> Food | None:
        """Find the best catalog entry for a typed food name."""
        normalized = name.strip().lower()
        if not normalized or contains_restricted(normalized):
            return None

        for food in self.foods:
            if food.name.lower() == normalized:
                return food

        for food in self.foods:
            if food.name.lower().startswith(normalized):
                return food

        partial_matches = [
            food
            for food in self.foods
            if normalized in food.name.lower() or food.name.lower() in normalized
        ]
        if partial_matches:
            return max(partial_matches, key=lambda food: len(food.name))
        return None

    def suggest(self, prefix: str) -> list[Food]:
        """Return up to five catalog foods matching partially typed input."""
        normalized = prefix.strip().lower()
        if len(normalized) < 2:
            return []
        if contains_restricted(normalized):
            return []

        matches = [food for food in self.foods if normalized in food.name.lower()]
        matches.sort(key=lambda food: _suggestion_rank(food, normalized))
        return matches[:MAX_CATALOG_SUGGESTIONS]


def _suggestion_rank(food: Food, normalized: str) -> tuple[int, int]:
    name = food.name.lower()
    if name == normalized:
        return (0, len(name))
    if name.startswith(normalized):
        return (1, len(name))
    return (2, len(name))
