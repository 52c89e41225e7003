"""Tests for the text-to-gloss translator."""

import pytest

from packages.translation.dictionary import GlossDictionary
from packages.translation.gloss_translator import (
    GlossTranslation,
    GlossTranslator,
    MatchKind,
    MatchPolicy,
    translate,
)


@pytest.fixture
def translator():
    """Translator with the built-in dictionary."""
    return GlossTranslator()


class TestConvert:
    """Test the convert() contract."""

    def test_empty_input(self, translator):
        assert translator.convert("") == []

    def test_whitespace_only_input(self, translator):
        """Whitespace normalizes to empty and is treated as empty input."""
        assert translator.convert("   ") == []
        assert translator.convert("\t\n") == []

    def test_exact_match(self, translator):
        assert translator.convert("hello") == ["HELLO"]

    def test_exact_match_is_case_and_space_insensitive(self, translator):
        assert translator.convert("  Thank You  ") == ["THANK-YOU"]

    def test_substring_match(self, translator):
        assert translator.convert("What is your name?") == ["WHAT", "YOUR", "NAME"]

    def test_unknown_word_fingerspelled(self, translator):
        assert translator.convert("xyz123!!") == ["XYZ123"]

    def test_word_by_word(self, translator):
        """Known words map through the dictionary, unknown ones are literal.

        Punctuation hides "hello" from the substring step; stripping it
        during the word step lets the word find its own entry.
        """
        assert translator.convert("hel.lo zebra") == ["HELLO", "ZEBRA"]

    def test_all_punctuation_returns_literal(self, translator):
        assert translator.convert("!!!") == ["!!!"]

    def test_literal_uses_trimmed_input(self, translator):
        assert translator.convert("  ?!  ") == ["?!"]

    def test_never_empty_for_non_empty_input(self, translator):
        for text in ["a", "?", "Zebra crossing", "..."]:
            assert translator.convert(text)

    def test_non_string_input_does_not_raise(self, translator):
        assert translator.convert(None) == []
        assert translator.convert(42) == ["42"]

    def test_returns_copy(self, translator):
        """Mutating the result does not change the dictionary entry."""
        glosses = translator.convert("hello")
        glosses.append("EXTRA")

        assert translator.convert("hello") == ["HELLO"]


class TestSubstringTieBreak:
    """The substring step returns the first dictionary key, not the longest."""

    def test_first_key_in_dictionary_order_wins(self):
        dictionary = GlossDictionary([("good", ["GOOD"]), ("have a good day", ["HAVE", "GOOD", "DAY"])])
        translator = GlossTranslator(dictionary)

        assert translator.convert("I hope you have a good day") == ["GOOD"]

    def test_short_generic_key_shadows_longer_phrase(self, translator):
        """'hi' occurs inside 'this' and comes early in the default order."""
        result = translator.translate("Can you show me how to sign this?")

        assert result.match == MatchKind.SUBSTRING
        assert result.matched_phrase == "hi"
        assert result.glosses == ["HELLO"]

    def test_longest_policy(self):
        dictionary = GlossDictionary([("good", ["GOOD"]), ("have a good day", ["HAVE", "GOOD", "DAY"])])
        translator = GlossTranslator(dictionary, policy=MatchPolicy.LONGEST)

        assert translator.convert("I hope you have a good day") == ["HAVE", "GOOD", "DAY"]

    def test_longest_policy_equal_length_keeps_order(self):
        dictionary = GlossDictionary([("cat", ["CAT"]), ("dog", ["DOG"])])
        translator = GlossTranslator(dictionary, policy=MatchPolicy.LONGEST)

        assert translator.convert("dog and cat") == ["CAT"]

    def test_overwrite_keeps_position(self):
        dictionary = GlossDictionary([("good", ["GOOD"]), ("day", ["DAY"])])
        translator = GlossTranslator(dictionary)

        translator.add_mapping("day", ["DAY-2"])
        translator.add_mapping("good", ["GOOD-2"])

        assert translator.list_phrases() == ["good", "day"]
        assert translator.convert("good day everyone") == ["GOOD-2"]


class TestTranslate:
    """Test the detailed translate() result."""

    def test_empty(self, translator):
        result = translator.translate("")

        assert isinstance(result, GlossTranslation)
        assert result.match == MatchKind.EMPTY
        assert result.glosses == []

    def test_exact(self, translator):
        result = translator.translate("Goodbye")

        assert result.match == MatchKind.EXACT
        assert result.matched_phrase == "goodbye"
        assert result.original_text == "Goodbye"

    def test_words_records_fingerspelled(self, translator):
        result = translator.translate("hel.lo zebra")

        assert result.match == MatchKind.WORDS
        assert result.fingerspelled == ["ZEBRA"]

    def test_literal(self, translator):
        result = translator.translate("???")

        assert result.match == MatchKind.LITERAL
        assert result.glosses == ["???"]

    def test_literal_strips_whitespace_keeps_original(self, translator):
        result = translator.translate("\t ?! \n")

        assert result.match == MatchKind.LITERAL
        assert result.glosses == ["?!"]
        assert result.original_text == "\t ?! \n"

    def test_to_string_and_dict(self, translator):
        result = translator.translate("What is your name?")

        assert result.to_string() == "WHAT YOUR NAME"
        assert result.to_string("-") == "WHAT-YOUR-NAME"

        data = result.to_dict()
        assert data["glosses"] == ["WHAT", "YOUR", "NAME"]
        assert data["match"] == "substring"
        assert data["matched_phrase"] == "what is your name"

    def test_translate_batch(self, translator):
        results = translator.translate_batch(["hello", "", "sorry"])

        assert [r.glosses for r in results] == [["HELLO"], [], ["SORRY"]]

    def test_module_level_translate(self):
        assert translate("thanks").glosses == ["THANK-YOU"]


class TestMappingManagement:
    """Test add/remove/has/list operations."""

    def test_add_then_has(self, translator):
        assert translator.has_mapping("good night") is False

        assert translator.add_mapping("Good Night", ["GOOD", "NIGHT"]) is True

        assert translator.has_mapping("good night") is True
        assert translator.convert("good night") == ["GOOD", "NIGHT"]

    def test_remove_then_not_has(self, translator):
        translator.add_mapping("good night", ["GOOD", "NIGHT"])

        assert translator.remove_mapping("  GOOD NIGHT ") is True
        assert translator.has_mapping("good night") is False

    def test_remove_missing_returns_false(self, translator):
        assert translator.remove_mapping("not a phrase") is False

    def test_add_is_idempotent_overwrite(self, translator):
        translator.add_mapping("hello", ["HI"])
        translator.add_mapping("hello", ["HI"])

        assert translator.get_mapping("hello") == ["HI"]
        assert translator.list_phrases().count("hello") == 1

    def test_add_rejects_blank_phrase(self, translator):
        count = len(translator.list_phrases())

        assert translator.add_mapping("   ", ["X"]) is False
        assert len(translator.list_phrases()) == count

    def test_add_rejects_empty_tokens(self, translator):
        assert translator.add_mapping("nothing", []) is False
        assert translator.add_mapping("nothing", ["", "  "]) is False
        assert translator.has_mapping("nothing") is False

    def test_add_strips_tokens(self, translator):
        translator.add_mapping("water", [" WATER ", ""])

        assert translator.get_mapping("water") == ["WATER"]

    def test_get_mapping_missing(self, translator):
        assert translator.get_mapping("unknown phrase") is None

    def test_list_phrases_order(self, translator):
        phrases = translator.list_phrases()

        assert phrases[:4] == ["hello", "hi", "goodbye", "bye"]
        assert phrases[-1] == "night"

    def test_added_phrase_is_scanned_last(self, translator):
        translator.add_mapping("coffee", ["COFFEE-SIGN"])

        # built-in "please" precedes the new key in dictionary order
        assert translator.convert("coffee please") == ["PLEASE"]
        assert translator.convert("coffee xyz") == ["COFFEE-SIGN"]

    def test_has_mapping_property(self, translator):
        """has_mapping tracks add/remove for arbitrary phrases."""
        for phrase in ["a", "Zebra", "over the moon", "hello"]:
            translator.add_mapping(phrase, ["TOKEN"])
            assert translator.has_mapping(phrase) is True
            translator.remove_mapping(phrase)
            assert translator.has_mapping(phrase) is False
