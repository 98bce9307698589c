import pytest

from eloquent.core import (
    STOP_WORDS,
    _round_half_up,
    _round_tenth,
    Hyperparameters,
    analyze_repetition,
    analyze_speech_patterns,
    repetition_severity,
    tokenize,
    word_frequency,
)


CAT_TEXT = "the cat sat on the mat and the cat was happy"

REPETITIVE_TEXT = (
    "The project was a good project. Our team built the project quickly, "
    "and the team tested the project carefully before the launch."
)


class TestTokenize:
    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("Hello, World!  Hi") == ["hello", "world", "hi"]

    def test_empty_and_non_string_input(self):
        assert tokenize("") == []
        assert tokenize(None) == []
        assert tokenize(42) == []

    def test_normalization_is_lossy(self):
        text = "Well, THIS is it."
        assert " ".join(tokenize(text)) != text

    def test_word_frequency_counts_each_token(self):
        assert word_frequency(["a", "b", "a"]) == {"a": 2, "b": 1}


class TestAnalyzeRepetition:
    def test_cat_example(self):
        result = analyze_repetition(CAT_TEXT)
        assert result["total_words"] == 11
        assert result["total_repetitions"] == 1
        assert ("cat", 2) in result["repeated_words"]
        assert result["repetition_rate"] == pytest.approx(100 / 11)
        assert result["severity"] == "medium"

    def test_empty_text(self):
        result = analyze_repetition("")
        assert result["total_words"] == 0
        assert result["total_repetitions"] == 0
        assert result["repetition_rate"] == 0
        assert result["repeated_words"] == []
        assert result["severity"] == "good"

    def test_none_is_treated_as_empty(self):
        assert analyze_repetition(None)["total_words"] == 0

    def test_stop_words_and_short_words_excluded(self):
        result = analyze_repetition("the the the and and go go go ok ok")
        assert result["repeated_words"] == []
        assert result["total_repetitions"] == 0
        assert result["repetition_rate"] == 0

    def test_repeated_words_never_contain_stop_words(self):
        result = analyze_repetition(REPETITIVE_TEXT)
        for word, _count in result["repeated_words"]:
            assert word not in STOP_WORDS
            assert len(word) >= 3

    def test_total_repetitions_matches_counts(self):
        result = analyze_repetition(REPETITIVE_TEXT)
        assert result["total_repetitions"] == sum(c - 1 for _, c in result["repeated_words"])
        assert result["repeated_words"][0] == ("project", 4)
        assert ("team", 2) in result["repeated_words"]

    def test_equal_counts_keep_first_occurrence_order(self):
        result = analyze_repetition("zebra apple zebra apple mango mango mango")
        assert result["repeated_words"] == [("mango", 3), ("zebra", 2), ("apple", 2)]

    def test_is_idempotent(self):
        assert analyze_repetition(REPETITIVE_TEXT) == analyze_repetition(REPETITIVE_TEXT)

    def test_word_frequency_included(self):
        result = analyze_repetition(CAT_TEXT)
        assert result["word_frequency"]["the"] == 3
        assert result["word_frequency"]["happy"] == 1

    def test_custom_hyperparameters(self):
        lenient = Hyperparameters(min_repeated_word_length=2)
        assert analyze_repetition("go go", hyperparameters=lenient)["repeated_words"] == [("go", 2)]
        assert analyze_repetition("go go")["repeated_words"] == []


class TestRounding:
    def test_halves_round_up(self):
        assert _round_half_up(2.5) == 3
        assert _round_half_up(0.5) == 1
        assert _round_tenth(2.25) == 2.3
        assert _round_tenth(0.25) == 0.3
        assert _round_tenth(6.24) == 6.2


class TestRepetitionSeverity:
    def test_bands(self):
        assert repetition_severity(16) == "high"
        assert repetition_severity(9) == "medium"
        assert repetition_severity(4) == "low"
        assert repetition_severity(3) == "good"
        assert repetition_severity(0) == "good"


class TestAnalyzeSpeechPatterns:
    def test_no_sessions(self):
        result = analyze_speech_patterns([])
        assert result == {
            "average_repetition_rate": 0.0,
            "trend": "stable",
            "improvement": 0.0,
            "common_repeated_words": [],
        }

    def test_improving_trend(self):
        sessions = [{"repetition_rate": r} for r in (10, 10, 10, 2, 2, 2)]
        result = analyze_speech_patterns(sessions)
        assert result["average_repetition_rate"] == pytest.approx(6.0)
        assert result["improvement"] == pytest.approx(8.0)
        assert result["trend"] == "improving"

    def test_declining_trend(self):
        sessions = [{"repetition_rate": r} for r in (1, 1, 9, 9, 9)]
        assert analyze_speech_patterns(sessions)["trend"] == "declining"

    def test_too_few_sessions_for_trend(self):
        sessions = [{"repetition_rate": 20}, {"repetition_rate": 1}]
        result = analyze_speech_patterns(sessions)
        assert result["trend"] == "stable"
        assert result["improvement"] == 0.0

    def test_missing_rate_counts_as_zero(self):
        result = analyze_speech_patterns([{"repetition_rate": 4}, {}])
        assert result["average_repetition_rate"] == pytest.approx(2.0)

    def test_common_repeated_words_accept_mappings_and_pairs(self):
        sessions = [
            {"repetition_rate": 5, "repeated_words": {"project": 3, "team": 2}},
            {"repetition_rate": 5, "repeated_words": [("project", 2), ("launch", 4)]},
        ]
        result = analyze_speech_patterns(sessions)
        assert result["common_repeated_words"][0] == ("project", 5)
        assert ("launch", 4) in result["common_repeated_words"]
        assert ("team", 2) in result["common_repeated_words"]
