# Pacing and voice-quality estimates derived from transcript text.
#
# None of these numbers come from audio. Pauses are read off punctuation and the
# voice sub-scores are proxies built from word length, vocabulary variety, and
# sentence-length spread, so every payload is marked ``estimated``.

from __future__ import annotations

import math
from dataclasses import dataclass

from eloquent.core import (
    CONFIDENCE_HIGH,
    DEFAULT_HYPERPARAMETERS,
    Hyperparameters,
    _round_half_up,
    _round_tenth,
    _sentences,
    _text,
    tokenize,
)

_SHORT_PAUSE = ","
_MEDIUM_PAUSES = ("-", "\u2013", "\u2014")
_LONG_PAUSES = (".", "!", "?")


@dataclass(frozen=True)
class PauseEstimate:
    short: int
    medium: int
    long: int
    average_length: float

    @property
    def total(self) -> int:
        return self.short + self.medium + self.long

    def to_payload(self) -> dict[str, object]:
        return {
            "total": self.total,
            "distribution": {"short": self.short, "medium": self.medium, "long": self.long},
            "average_length": self.average_length,
        }


@dataclass(frozen=True)
class PacingQuality:
    quality: str
    score: int
    message: str

    def to_payload(self) -> dict[str, object]:
        return {"quality": self.quality, "score": self.score, "message": self.message}


def _pauses(text: str, hp: Hyperparameters) -> PauseEstimate:
    return PauseEstimate(
        short=text.count(_SHORT_PAUSE),
        medium=sum(text.count(mark) for mark in _MEDIUM_PAUSES),
        long=sum(text.count(mark) for mark in _LONG_PAUSES),
        average_length=hp.average_pause_seconds,
    )


def estimate_pauses(transcript: object, hyperparameters: Hyperparameters | None = None) -> dict:
    """Count commas, dashes, and sentence endings as short, medium, and long pauses."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    return _pauses(_text(transcript), hp).to_payload()


def _words_per_minute(word_count: int, duration: float) -> float:
    return (word_count / duration) * 60 if duration > 0 else 0.0


def _pacing_quality(word_count: int, duration: float, hp: Hyperparameters) -> PacingQuality:
    if duration <= 0 or word_count == 0:
        return PacingQuality("unknown", 0, "Not enough speech to assess pace")
    wpm = _words_per_minute(word_count, duration)
    if wpm < hp.pace_slow_wpm:
        return PacingQuality("slow", 60, "Speaking pace is quite slow")
    if wpm < hp.pace_good_wpm:
        return PacingQuality("good", 90, "Excellent speaking pace")
    if wpm < hp.pace_moderate_wpm:
        return PacingQuality("moderate", 75, "Slightly fast but manageable")
    return PacingQuality("fast", 50, "Speaking too quickly")


def _pacing_recommendations(word_count: int, duration: float, pauses: PauseEstimate, hp: Hyperparameters) -> list[str]:
    recommendations = []
    if duration <= 0 or word_count == 0:
        return recommendations
    wpm = _words_per_minute(word_count, duration)
    if wpm < hp.pace_slow_wpm:
        recommendations.append("Try speaking slightly faster to maintain audience engagement")
    elif wpm > hp.pace_moderate_wpm:
        recommendations.append("Slow down your pace to ensure clarity and comprehension")
    if pauses.total < word_count / hp.pause_words_per_pause:
        recommendations.append("Add more strategic pauses to emphasize key points")
    return recommendations


def analyze_pacing(transcript: object, duration: float | None, hyperparameters: Hyperparameters | None = None) -> dict:
    """Estimate speaking pace from a transcript and its elapsed duration.

    Args:
        transcript: The spoken text.
        duration: Elapsed speaking time in seconds. Zero, negative, NaN, infinite
            or ``None`` leaves the pace unknown rather than dividing by zero.
        hyperparameters: Optional tuning overrides.

    Returns:
        Dict with keys: words_per_minute, total_words, total_sentences,
        average_words_per_sentence, estimated_pauses, pause_distribution,
        average_pause_length, pacing_quality, recommendations, estimated.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text = _text(transcript)
    seconds = float(duration or 0)
    if not math.isfinite(seconds):
        seconds = 0.0
    word_count = len(tokenize(text))
    sentence_count = len(_sentences(text))
    pauses = _pauses(text, hp)

    return {
        "words_per_minute": _round_half_up(_words_per_minute(word_count, seconds)),
        "total_words": word_count,
        "total_sentences": sentence_count,
        "average_words_per_sentence": _round_half_up(word_count / sentence_count) if sentence_count else 0,
        "estimated_pauses": pauses.total,
        "pause_distribution": pauses.to_payload()["distribution"],
        "average_pause_length": pauses.average_length,
        "pacing_quality": _pacing_quality(word_count, seconds, hp).to_payload(),
        "recommendations": _pacing_recommendations(word_count, seconds, pauses, hp),
        "estimated": True,
    }


# ---------------------------------------------------------------------------
# Voice quality
# ---------------------------------------------------------------------------


def _clarity(tokens: list[str], recognition_confidence: float, hp: Hyperparameters) -> float:
    complex_words = sum(1 for t in tokens if len(t) > hp.complex_word_length)
    return min(hp.score_max, recognition_confidence + (complex_words / len(tokens)) * hp.clarity_complexity_weight)


def _articulation(tokens: list[str], hp: Hyperparameters) -> float:
    variety = len(set(tokens)) / len(tokens) * 100
    return min(hp.score_max, variety * hp.articulation_weight)


def _variation(text: str, hp: Hyperparameters) -> float:
    lengths = [len(s.split()) for s in _sentences(text)]
    if len(lengths) < 2:
        return hp.variation_single_sentence
    mean = sum(lengths) / len(lengths)
    variance = sum((x - mean) ** 2 for x in lengths) / len(lengths)
    return min(hp.score_max, hp.variation_base + variance * hp.variation_variance_weight)


def _projection(tokens: list[str], hp: Hyperparameters) -> float:
    confident = sum(1 for t in tokens if t in CONFIDENCE_HIGH)
    return min(hp.score_max, hp.projection_base + confident * hp.projection_confidence_weight)


def analyze_voice_quality(
    transcript: object, recognition_confidence: float | None = None, hyperparameters: Hyperparameters | None = None
) -> dict:
    """Heuristic clarity, articulation, variation, and projection scores (0-100).

    ``recognition_confidence`` is the speech recognizer's confidence for the
    transcript, on a 0-100 scale. The scores are text-derived estimates, not
    acoustic measurements.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text = _text(transcript)
    tokens = tokenize(text)
    if not tokens:
        return {
            "clarity": 0.0, "articulation": 0.0, "variation": 0.0, "projection": 0.0,
            "overall_quality": 0, "recommendations": [], "estimated": True,
        }

    confidence = hp.recognition_confidence if recognition_confidence is None else recognition_confidence
    clarity = _clarity(tokens, confidence, hp)
    articulation = _articulation(tokens, hp)
    variation = _variation(text, hp)
    projection = _projection(tokens, hp)
    overall = _round_half_up((clarity + articulation + variation + projection) / 4)

    recommendations = []
    if clarity < hp.voice_clarity_min:
        recommendations.append("Focus on clear articulation and pronunciation")
    if variation < hp.voice_variation_min:
        recommendations.append("Vary your tone and pitch to keep listeners engaged")
    if projection < hp.voice_projection_min:
        recommendations.append("Speak with more confidence and authority")

    return {
        "clarity": _round_tenth(clarity),
        "articulation": _round_tenth(articulation),
        "variation": _round_tenth(variation),
        "projection": _round_tenth(projection),
        "overall_quality": overall,
        "recommendations": recommendations,
        "estimated": True,
    }
