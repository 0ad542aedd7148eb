"""Keyword rule table for expense categorization.

Each entry pairs a category with substrings matched against the lowercased
``counterparty + " " + note`` text. Ordering matters: earlier groups win, so
a message mentioning both ``amazon`` and ``pizza`` is Shopping. Housing and
Financial appear twice on purpose; the two halves sit at different
priorities (furniture before food, utilities after vehicles; transfer terms
first, cash terms last).
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import Category


@dataclass(frozen=True, slots=True)
class KeywordGroup:
    name: str
    category: Category
    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(k in text for k in self.keywords)


CATEGORY_RULES: tuple[KeywordGroup, ...] = (
    KeywordGroup(
        "financial-transfers",
        Category.FINANCIAL,
        ("credit card payment", "sadaad", "cib repayment"),
    ),
    KeywordGroup(
        "shopping",
        Category.SHOPPING,
        (
            "amazon", "noon", "jumia", "souq", "shopping", "zara", "h&m",
            "lc waikiki", "defacto", "american eagle", "lachica", "ravin",
            "el salama", "stitch", "clothes", "fashion", "shoes", "concrete",
            "town team", "activ", "naga", "rich for cloth", "pronto",
            "scarpe", "scarape", "tie house", "rose paris", "b tech", "b.tech",
            "trade line", "2b", "best buy", "dubai phone", "mobile shop",
            "el araby", "fresh electric", "tornado",
        ),
    ),
    KeywordGroup(
        "housing-furniture",
        Category.HOUSING,
        ("ikea", "homzmart", "furniture", "jotun", "ahfad"),
    ),
    KeywordGroup(
        "food",
        Category.FOOD,
        (
            "mcdonalds", "kfc", "pizza", "burger", "buffalo", "primos",
            "spectra", "desoky", "sandwich", "elmenus", "talabat", "breadfast",
            "roosters", "hardees", "manchow", "willys", "dhad", "el dahan",
            "sanabel", "fookotcharia", "krispy", "cafe", "costa", "starbucks",
            "cilantro", "tbsp", "espresso", "beano", "cinnabon", "dunkin",
            "caribou", "house of cocoa", "sale sucre", "dar el bon", "karak",
            "potasta", "b labn", "b.labn", "carrefour", "fathalla", "market",
            "seoudi", "gomla", "bim", "kazyon", "hyper", "ramadan hamada",
            "saood", "metro", "kheir zaman", "ragab", "abu auf", "kashier",
            "elkhalil", "aswak", "fresh food", "sun mall", "grapes",
        ),
    ),
    KeywordGroup(
        "transportation",
        Category.TRANSPORTATION,
        (
            "uber", "didi", "careem", "indriver", "transport", "super jet",
            "railways", "go bus", "swvl", "pegasus", "fly", "airline",
            "booking", "flight",
        ),
    ),
    KeywordGroup(
        "vehicle",
        Category.VEHICLE,
        (
            "mobil", "chillout", "gas station", "total", "ola", "master gas",
            "adnoc", "wataniya", "fuel", "car service", "tire", "fit & fix",
        ),
    ),
    KeywordGroup(
        "housing-utilities",
        Category.HOUSING,
        (
            "sahl", "electricity", "water", "bill", "national gas", "natgas",
            "town gas", "petrotrade", "taqa", "north cairo",
        ),
    ),
    KeywordGroup(
        "communications",
        Category.COMMUNICATIONS,
        (
            "vodafone", "orange", "etisalat", "we ", "telecom", "top up",
            "landline", "we-fv", "internet", "fbb", "adsl", "google",
            "microsoft", "adobe", "apple", "icloud", "storage", "host",
            "domain", "xbox", "playstation", "steam", "games", "mullvad",
            "linkedin",
        ),
    ),
    KeywordGroup(
        "life-entertainment",
        Category.LIFE,
        (
            "netflix", "spotify", "osn", "shahid", "youtube", "watch it",
            "yango", "vox", "cinema", "renessance", "ticket", "tazkarti",
            "kindle", "audible", "books", "diwan", "pharmacy", "dr.",
            "hospital", "medical", "ezaby", "elezzaby", "seif", "rushdy",
            "andalusia", "yosra", "hany", "tay",
        ),
    ),
    KeywordGroup(
        "financial-cash",
        Category.FINANCIAL,
        ("atm", "withdrawal", "s7b", "سحب", "cash", "fawry", "my fawry", "fawrypay"),
    ),
)


__all__ = ["CATEGORY_RULES", "KeywordGroup"]
