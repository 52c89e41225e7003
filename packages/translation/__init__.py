# Translation package - text to sign-language gloss conversion
"""
Convert spoken or typed text to gloss sequences using a phrase dictionary.

Example usage:
    from packages.translation import translate, GlossTranslator

    # Quick translation
    result = translate("What is your name?")
    print(result.to_string())  # "WHAT YOUR NAME"

    # Custom mappings
    translator = GlossTranslator()
    translator.add_mapping("good night", ["GOOD", "NIGHT"])
    print(translator.convert("Good night"))  # ["GOOD", "NIGHT"]
"""

from .dictionary import (
    DEFAULT_MAPPINGS,
    GlossDictionary,
)
from .gloss_translator import (
    GlossTranslation,
    GlossTranslator,
    MatchKind,
    MatchPolicy,
    translate,
)

__all__ = [
    # Main API
    "translate",
    "GlossTranslator",
    "GlossTranslation",
    "MatchKind",
    "MatchPolicy",
    # Dictionary
    "GlossDictionary",
    "DEFAULT_MAPPINGS",
]
