"""English pluralization for default table names.

Covers the regular suffix rules plus a short list of irregular nouns,
enough to turn model names into conventional REST collection names.
"""

import re

_IRREGULAR_PLURALS = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "datum": "data",
    "medium": "media",
    "criterion": "criteria",
    "index": "indices",
    "matrix": "matrices",
    "status": "statuses",
    "address": "addresses",
}

_CAMEL_TAIL = re.compile(r"^(.+?)([A-Z][a-z]+)$")


def pluralize(word: str) -> str:
    """Return the plural of a singular English *word*.

    CamelCase words pluralize their last component only::

        pluralize("User")      -> "Users"
        pluralize("Category")  -> "Categories"
        pluralize("BlogEntry") -> "BlogEntries"
        pluralize("Shelf")     -> "Shelves"
        pluralize("person")    -> "people"
    """
    if not word:
        return word

    lower = word.lower()
    if lower in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lower]
        return plural.capitalize() if word[0].isupper() else plural

    camel = _CAMEL_TAIL.match(word)
    if camel:
        prefix, tail = camel.groups()
        return prefix + pluralize(tail)

    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    if lower.endswith("y") and len(word) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    if lower.endswith(("elf", "alf", "olf", "eaf", "oaf", "arf")):
        return word[:-1] + "ves"
    if lower.endswith("fe"):
        return word[:-2] + "ves"
    return word + "s"


def table_name(model_name: str) -> str:
    """Conventional collection name for *model_name*: lower-cased plural.

    ::

        table_name("User")     -> "users"
        table_name("Person")   -> "people"
    """
    return pluralize(model_name).lower()
