# tests/unit/test_end_word_validator.py

import pytest
from lear.evaluation.end_word_validator import (
    EndWordValidator,
    poem_satisfies_key,
    all_poems_satisfy_key,
)
from lear.models.end_word import EndWordValidationResult
from lear.models.poem import PoemBlock


ABCDE_LINES = [
    "A builder who worked on an Arch",
    "Set off with his plans in a Beam;",
    "He carved a fine Corbel",
    "Then polished a Dome,",
    "And rested at last by the Eave.",
]


class TestPoemSatisfiesKey:

    def test_matching_end_words(self):
        assert poem_satisfies_key(ABCDE_LINES, "ABCDE") is True

    def test_wrong_third_line(self):
        lines = list(ABCDE_LINES)
        lines[2] = "He carved a fine Pier"
        assert poem_satisfies_key(lines, "ABCDE") is False

    def test_case_insensitive(self):
        lines = [line.lower() for line in ABCDE_LINES]
        assert poem_satisfies_key(lines, "abcde") is True

    @pytest.mark.parametrize("key", ["", "AB", "ABCD", "1234!"])
    def test_vacuous_pass_without_full_key(self, key):
        assert poem_satisfies_key(["no", "match", "here", "at", "all"], key) is True
        assert poem_satisfies_key([], key) is True

    def test_short_poem_passes(self):
        assert poem_satisfies_key(ABCDE_LINES[:4], "ZZZZZ") is True

    def test_only_first_five_lines_count(self):
        lines = ABCDE_LINES + ["A sixth line ending in Zinc"]
        assert poem_satisfies_key(lines, "ABCDE") is True

    def test_line_without_word_fails(self):
        lines = list(ABCDE_LINES)
        lines[4] = "***"
        assert poem_satisfies_key(lines, "ABCDE") is False

    def test_accepts_poem_block(self):
        assert poem_satisfies_key(PoemBlock(lines=ABCDE_LINES), "ABCDE") is True

    def test_raw_key_is_normalized(self):
        assert poem_satisfies_key(ABCDE_LINES, "ａ-b c!d e") is True


class TestAllPoemsSatisfyKey:

    def test_empty_text_fails(self):
        assert all_poems_satisfy_key("", "ABCDE") is False
        assert all_poems_satisfy_key("  \n\n  ", "ABCDE") is False

    def test_empty_text_fails_even_without_key(self):
        assert all_poems_satisfy_key("", "") is False

    def test_single_passing_poem(self, abcde_limerick):
        assert all_poems_satisfy_key(abcde_limerick, "ABCDE") is True

    def test_single_failing_poem(self, abcde_limerick_wrong_line_three):
        assert all_poems_satisfy_key(abcde_limerick_wrong_line_three, "ABCDE") is False

    def test_every_poem_must_pass(self, abcde_limerick, abcde_limerick_wrong_line_three):
        text = abcde_limerick + "\n\n" + abcde_limerick_wrong_line_three.replace("1)", "2)")
        assert all_poems_satisfy_key(text, "ABCDE") is False

    def test_two_passing_poems(self, abcde_limerick):
        text = abcde_limerick + "\n\n" + abcde_limerick.replace("1)", "2)")
        assert all_poems_satisfy_key(text, "ABCDE") is True

    def test_short_poem_among_passing(self, abcde_limerick):
        text = abcde_limerick + "\n\n2) Just two lines\nof a fragment"
        assert all_poems_satisfy_key(text, "ABCDE") is True


class TestEndWordValidator:

    def setup_method(self):
        self.validator = EndWordValidator()

    def test_validate_passing(self, abcde_limerick):
        result = self.validator.validate(abcde_limerick, "ABCDE")

        assert isinstance(result, EndWordValidationResult)
        assert result.overall_valid is True
        assert result.poem_count == 1
        assert result.poem_results[0].checked is True
        assert result.poem_results[0].terminal_words == ["Arch", "Beam", "Corbel", "Dome", "Eave"]
        assert result.error_details is None

    def test_validate_failing(self, abcde_limerick_wrong_line_three):
        result = self.validator.validate(abcde_limerick_wrong_line_three, "ABCDE")

        assert result.overall_valid is False
        assert result.failing_poems == [0]
        assert result.poem_results[0].mismatched_lines == [3]
        assert "Pier" in result.error_details

    def test_validate_empty(self):
        result = self.validator.validate("", "ABCDE")

        assert result.overall_valid is False
        assert result.poem_count == 0
        assert "No poems" in result.validation_summary

    def test_validate_without_key(self, abcde_limerick_wrong_line_three):
        result = self.validator.validate(abcde_limerick_wrong_line_three, "ARCH")

        assert result.overall_valid is True
        assert result.letter_key == "ARCH"
        assert result.poem_results[0].checked is False

    @pytest.mark.parametrize("text", ["", "1) a\nb", "x\n\ny"])
    def test_agrees_with_boolean_check(self, text, abcde_limerick, abcde_limerick_wrong_line_three):
        for candidate in (text, abcde_limerick, abcde_limerick_wrong_line_three):
            assert self.validator.validate(candidate, "ABCDE").overall_valid == all_poems_satisfy_key(candidate, "ABCDE")
            assert self.validator.is_valid(candidate, "ABCDE") == all_poems_satisfy_key(candidate, "ABCDE")

    def test_to_dict(self, abcde_limerick_wrong_line_three):
        result_dict = self.validator.validate(abcde_limerick_wrong_line_three, "ABCDE").to_dict()

        assert result_dict['letter_key'] == "ABCDE"
        assert result_dict['overall_valid'] is False
        assert result_dict['poem_count'] == 1
        assert result_dict['poem_results'][0]['mismatched_lines'] == [3]
