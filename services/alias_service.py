"""
Alias resolution for SKU tokens.

Resolution order for a raw attribute value:
    1. alias of the matching canonical option (value or label)
    2. FALLBACK_ALIASES entry for the category
    3. the raw value itself

Matching is case-insensitive and ignores surrounding whitespace.
"""

from typing import Optional

from models.option import DropdownData, OptionCategory


# Known aliases usable before the reference sheet carries them.
# Keys are normalized (trimmed, lower-case) values.
FALLBACK_ALIASES: dict[OptionCategory, dict[str, str]] = {
    OptionCategory.PRODUCT_GROUPS: {
        "kurtaset": "KT",
        "kurta set": "KT",
        "kurta": "KU",
    },
    OptionCategory.NATURES: {
        "printed": "PR",
        "solid": "SL",
        "embroidery": "EM",
    },
    OptionCategory.COLORS: {
        "black": "BK",
        "white": "WH",
        "red": "RD",
        "blue": "BL",
        "green": "GR",
        "yellow": "YL",
        "pink": "PK",
    },
}


def normalize(value: Optional[str]) -> str:
    """Normalize a value for alias matching."""
    return (value or "").strip().lower()


class AliasResolver:
    """
    Resolves attribute values to their SKU alias codes.

    Holds no state beyond the option lists it was built with, so one
    instance can serve any number of previews.
    """

    def __init__(self, options: Optional[DropdownData] = None):
        self.options = options or DropdownData()

    def resolve(self, category: OptionCategory, raw_value: Optional[str]) -> str:
        """
        Resolve a raw value to its alias.

        Args:
            category: Option category of the value
            raw_value: Value as entered or selected

        Returns:
            Alias code, or raw_value unchanged when nothing matches
            ("" for empty input)
        """
        if not raw_value:
            return ""

        category = OptionCategory(category)
        normalized = normalize(raw_value)

        for option in self.options.options_for(category):
            if normalize(option.value) == normalized or normalize(option.label) == normalized:
                if option.alias:
                    return option.alias
                # First match decides; an alias-less match falls through
                break

        fallback = FALLBACK_ALIASES.get(category, {}).get(normalized)
        if fallback:
            return fallback

        return raw_value
