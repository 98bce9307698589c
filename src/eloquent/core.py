# Word-repetition analysis for speech and writing transcripts.
#
# Tokenizes a transcript, counts word frequencies, and reports which content
# words are repeated, how often, and how severe the repetition is. Also rolls
# stored session results up into a cross-session trend.

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Mapping

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Tunable thresholds, weights, and bands used by the analyzers."""

    min_repeated_word_length: int = 3

    severity_high_rate: float = 15.0
    severity_medium_rate: float = 8.0
    severity_low_rate: float = 3.0

    trend_recent_sessions: int = 3
    trend_change_threshold: float = 2.0
    common_repeated_words_limit: int = 10

    confidence_base: int = 50
    confidence_high_weight: int = 8
    confidence_low_weight: int = 6
    confidence_high_min: int = 70
    confidence_moderate_min: int = 40
    confidence_praise_min: int = 80
    confidence_suggest_max: int = 30

    energy_exclamation_weight: int = 2
    energy_high_min: int = 3
    energy_low_max: int = -1
    energy_overall_high_bonus: int = 20
    energy_overall_low_penalty: int = -10

    anxiety_pattern_weight: int = 2
    anxiety_rapid_words_per_sentence: int = 20
    anxiety_filler_ratio: float = 0.1
    anxiety_high_min: int = 5
    anxiety_moderate_min: int = 2
    anxiety_emotion_min: int = 3
    anxiety_calming_min: int = 4
    anxiety_calm_max: int = 2
    feedback_limit: int = 3

    sentiment_confidence_weight: int = 10
    sentiment_energy_high_min: int = 5
    sentiment_energy_moderate_min: int = 2
    sentiment_positive_min: int = 2

    pace_slow_wpm: int = 100
    pace_good_wpm: int = 130
    pace_moderate_wpm: int = 160
    pause_words_per_pause: int = 20
    average_pause_seconds: float = 1.2

    recognition_confidence: float = 85.0
    complex_word_length: int = 8
    clarity_complexity_weight: float = 20.0
    articulation_weight: float = 1.2
    variation_base: float = 50.0
    variation_single_sentence: float = 70.0
    variation_variance_weight: float = 2.0
    projection_base: float = 60.0
    projection_confidence_weight: float = 10.0
    voice_clarity_min: float = 80.0
    voice_variation_min: float = 70.0
    voice_projection_min: float = 75.0

    speaking_confidence_weight: float = 0.3
    speaking_pacing_weight: float = 0.3
    speaking_voice_weight: float = 0.4
    engagement_question_weight: int = 10
    engagement_direct_address_weight: int = 2
    engagement_story_weight: int = 15
    engagement_energy_bonus: int = 20
    engagement_high_min: int = 70
    engagement_moderate_min: int = 40
    sentence_long_words: float = 25.0
    sentence_short_words: float = 10.0
    sentence_long_score: int = 60
    sentence_short_score: int = 70
    sentence_balanced_score: int = 90
    clarity_excellent_min: int = 80
    presence_filler_weight: float = 10.0
    presence_confidence_weight: float = 0.3
    presence_strong_min: float = 80.0
    presence_moderate_min: float = 60.0
    structure_transition_weight: float = 200.0
    structure_base: float = 50.0
    structure_well_organized_min: float = 75.0
    structure_moderate_min: float = 50.0

    score_min: int = 0
    score_max: int = 100


DEFAULT_HYPERPARAMETERS = Hyperparameters()


# ---------------------------------------------------------------------------
# Word lists and patterns
# ---------------------------------------------------------------------------

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "is", "am", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might", "can",
    "this", "that", "these", "those", "my", "your", "his", "its", "our", "their",
    "um", "uh", "er", "ah", "like", "so", "well", "actually", "basically",
})

CONFIDENCE_HIGH = frozenset({
    "definitely", "certainly", "absolutely", "clearly", "obviously",
    "undoubtedly", "precisely", "exactly", "specifically", "guaranteed",
})

_PUNCT_RE = re.compile(r"[^\w\s]")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_CAPS_WORD_RE = re.compile(r"\b[A-Z]{2,}\b")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def tokenize(text: object) -> list[str]:
    """Lower-case ``text``, drop punctuation, and split it on whitespace.

    Anything that is not a non-empty string yields an empty list. Case and
    punctuation are discarded, so joining the tokens does not give back the
    original text.
    """
    if not text or not isinstance(text, str):
        return []
    return _PUNCT_RE.sub("", text.lower()).split()


def word_frequency(tokens: Iterable[str]) -> dict[str, int]:
    frequency: dict[str, int] = {}
    for token in tokens:
        frequency[token] = frequency.get(token, 0) + 1
    return frequency


def _text(transcript: object) -> str:
    return transcript if isinstance(transcript, str) else ""


def _sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def _sentence_breaks(text: str) -> int:
    return len(_SENTENCE_SPLIT_RE.findall(text))


def _caps_words(text: str) -> int:
    return len(_CAPS_WORD_RE.findall(text))


def _clamp(value: float, hp: Hyperparameters) -> float:
    return max(hp.score_min, min(hp.score_max, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _round_tenth(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def _deduplicate(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RepetitionResult:
    total_words: int
    total_repetitions: int
    repetition_rate: float
    repeated_words: tuple[tuple[str, int], ...]
    severity: str
    word_frequency: dict[str, int]

    def to_payload(self) -> dict[str, object]:
        return {
            "total_words": self.total_words,
            "total_repetitions": self.total_repetitions,
            "repetition_rate": self.repetition_rate,
            "repeated_words": list(self.repeated_words),
            "severity": self.severity,
            "word_frequency": dict(self.word_frequency),
        }


def repetition_severity(rate: float, hyperparameters: Hyperparameters | None = None) -> str:
    """Bucket a repetition rate into ``high``, ``medium``, ``low`` or ``good``."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if rate > hp.severity_high_rate:
        return "high"
    if rate > hp.severity_medium_rate:
        return "medium"
    if rate > hp.severity_low_rate:
        return "low"
    return "good"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_repetition(transcript: object, hyperparameters: Hyperparameters | None = None) -> dict:
    """Measure how often content words repeat in a transcript.

    Args:
        transcript: The text to analyze. Empty or non-string input is scored as
            zero words.
        hyperparameters: Optional tuning overrides. Uses sensible defaults if omitted.

    Returns:
        Dict with keys: total_words, total_repetitions, repetition_rate,
        repeated_words, severity, word_frequency. ``repeated_words`` holds
        ``(word, count)`` pairs sorted by count descending; equal counts keep
        the order in which the words first appeared.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    tokens = tokenize(transcript)
    frequency = word_frequency(tokens)

    repeated = sorted(
        (
            (word, count) for word, count in frequency.items()
            if count > 1 and len(word) >= hp.min_repeated_word_length and word not in STOP_WORDS
        ),
        key=lambda item: -item[1],
    )
    total_repetitions = sum(count - 1 for _, count in repeated)
    total_words = len(tokens)
    rate = (total_repetitions / total_words) * 100 if total_words > 0 else 0.0

    return RepetitionResult(
        total_words=total_words,
        total_repetitions=total_repetitions,
        repetition_rate=rate,
        repeated_words=tuple(repeated),
        severity=repetition_severity(rate, hp),
        word_frequency=frequency,
    ).to_payload()


def _session_repeated_words(session: Mapping) -> Iterable[tuple[str, int]]:
    repeated = session.get("repeated_words") or {}
    if isinstance(repeated, Mapping):
        return repeated.items()
    return ((word, count) for word, count in repeated)


def analyze_speech_patterns(sessions: list[Mapping] | None, hyperparameters: Hyperparameters | None = None) -> dict:
    """Summarize repetition across stored practice sessions, oldest first.

    Each session is a mapping with an optional ``repetition_rate`` and optional
    ``repeated_words`` (a word-to-count mapping or a list of pairs).

    Returns:
        Dict with keys: average_repetition_rate, trend (``improving``,
        ``declining`` or ``stable``), improvement, common_repeated_words.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if not sessions:
        return {
            "average_repetition_rate": 0.0,
            "trend": "stable",
            "improvement": 0.0,
            "common_repeated_words": [],
        }

    rates = [float(s.get("repetition_rate") or 0) for s in sessions]
    average = sum(rates) / len(rates)

    trend = "stable"
    improvement = 0.0
    recent = rates[-hp.trend_recent_sessions:]
    earlier = rates[:-hp.trend_recent_sessions]
    if recent and earlier:
        improvement = sum(earlier) / len(earlier) - sum(recent) / len(recent)
        if improvement > hp.trend_change_threshold:
            trend = "improving"
        elif improvement < -hp.trend_change_threshold:
            trend = "declining"

    totals: dict[str, int] = {}
    for session in sessions:
        for word, count in _session_repeated_words(session):
            totals[word] = totals.get(word, 0) + int(count)
    common = sorted(totals.items(), key=lambda item: -item[1])[: hp.common_repeated_words_limit]

    return {
        "average_repetition_rate": average,
        "trend": trend,
        "improvement": improvement,
        "common_repeated_words": common,
    }
