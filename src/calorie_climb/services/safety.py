"""Child-safety content filtering for food names and descriptions."""

import logging

_logger = logging.getLogger(__name__)

# Matched as case-insensitive substrings anywhere in the text.
RESTRICTED_KEYWORDS: tuple[str, ...] = (
    "beer",
    "wine",
    "liquor",
    "liqueur",
    "whiskey",
    "whisky",
    "vodka",
    "rum",
    "gin",
    "tequila",
    "brandy",
    "cognac",
    "bourbon",
    "scotch",
    "champagne",
    "cocktail",
    "martini",
    "margarita",
    "bloody mary",
    "mojito",
    "daiquiri",
    "cosmopolitan",
    "manhattan",
    "old fashioned",
    "alcoholic",
    "alcohol",
    "ethanol",
    "proof",
    "distilled",
    "fermented",
    "brewed",
    "sake",
    "mead",
    "cider",
    "ale",
    "lager",
    "stout",
    "porter",
    "pilsner",
    "absinthe",
    "amaretto",
    "baileys",
    "kahlua",
    "sambuca",
    "schnapps",
    "aperitif",
    "digestif",
    "cordial",
    "bitters",
    "vermouth",
    "sherry",
    "port",
    "mixed drink",
    "hard seltzer",
    "wine cooler",
    "sangria",
    "punch, alcoholic",
    "beverage, alcoholic",
    "drink, alcoholic",
)

RESTRICTED_BRANDS: tuple[str, ...] = (
    "anheuser-busch",
    "budweiser",
    "coors",
    "miller",
    "heineken",
    "corona",
    "absolut",
    "smirnoff",
    "bacardi",
    "captain morgan",
    "jose cuervo",
    "jack daniels",
    "jim beam",
    "johnnie walker",
    "grey goose",
)


def contains_restricted(text: str | None) -> bool:
    """Return True when text mentions any restricted keyword."""
    if not text:
        return False
    normalized = text.lower()
    for keyword in RESTRICTED_KEYWORDS:
        if keyword in normalized:
            _logger.info("Restricted content rejected: %r (%s)", text, keyword)
            return True
    return False


def is_restricted_brand(brand_owner: str | None) -> bool:
    """Return True when the brand owner is an alcohol producer."""
    if not brand_owner:
        return False
    normalized = brand_owner.lower()
    return any(brand in normalized for brand in RESTRICTED_BRANDS)
