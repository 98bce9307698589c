# Emotional-tone scoring for spoken transcripts.
#
# Matches transcript tokens against fixed keyword lists for confidence, energy,
# anxiety, and positivity, picks a primary emotion from a fixed priority ladder,
# and composes a short list of coaching feedback.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from eloquent.core import (
    CONFIDENCE_HIGH,
    DEFAULT_HYPERPARAMETERS,
    Hyperparameters,
    _caps_words,
    _clamp,
    _round_half_up,
    _sentence_breaks,
    _text,
    tokenize,
)
from eloquent.pacing import analyze_pacing

# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class Level(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class PrimaryEmotion(str, Enum):
    CONFIDENT_ENERGETIC = "confident-energetic"
    CONFIDENT = "confident"
    ENERGETIC = "energetic"
    ANXIOUS = "anxious"
    POSITIVE = "positive"
    CONCERNED = "concerned"
    NEUTRAL = "neutral"


class FeedbackKind(str, Enum):
    POSITIVE = "positive"
    SUGGESTION = "suggestion"
    CALMING = "calming"
    EXCELLENT = "excellent"


# ---------------------------------------------------------------------------
# Lexicons
# ---------------------------------------------------------------------------

CONFIDENCE_LOW = frozenset({
    "maybe", "perhaps", "possibly", "might", "could", "probably",
    "seems", "appears", "uncertain",
})
ENERGY_HIGH = frozenset({
    "excited", "amazing", "fantastic", "incredible", "awesome", "brilliant",
    "outstanding", "excellent", "thrilled", "passionate", "energetic",
})
ENERGY_LOW = frozenset({
    "tired", "okay", "fine", "alright", "whatever", "boring", "dull",
    "slow", "quiet", "calm", "peaceful",
})
ANXIETY_FILLERS = frozenset({
    "um", "uh", "like", "actually", "basically", "literally", "well", "so",
    "nervous", "worried", "scared", "anxious",
})
REPETITIVE_PATTERNS = (
    ("really", "really"), ("very", "very"), ("so", "so"),
    ("like", "like"), ("and", "and"), ("the", "the"),
)
POSITIVE_WORDS = frozenset({
    "love", "great", "wonderful", "happy", "joy", "success", "achievement",
    "proud", "grateful", "blessed", "fortunate", "lucky",
})
NEGATIVE_WORDS = frozenset({
    "hate", "terrible", "awful", "sad", "angry", "frustrated", "disappointed",
    "worried", "stressed", "difficult", "problem", "issue",
})

SENTIMENT_POSITIVE = frozenset({
    "excellent", "amazing", "fantastic", "great", "wonderful", "outstanding",
    "successful", "excited", "confident", "proud", "happy", "thrilled",
    "innovative", "breakthrough", "achievement", "opportunity", "growth",
})
SENTIMENT_NEGATIVE = frozenset({
    "difficult", "challenging", "problem", "issue", "concern", "worried",
    "frustrated", "disappointed", "failed", "mistake", "error", "struggle",
    "unfortunately", "however", "but", "although", "despite",
})
SENTIMENT_UNCERTAINTY = frozenset({
    "maybe", "perhaps", "possibly", "might", "could", "probably", "seems", "appears",
})


def _matches(tokens: list[str], lexicon: frozenset[str]) -> int:
    return sum(1 for token in tokens if token in lexicon)


def _repetitive_patterns(tokens: list[str]) -> int:
    bigrams = set(zip(tokens, tokens[1:]))
    return sum(1 for pattern in REPETITIVE_PATTERNS if pattern in bigrams)


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Confidence:
    level: int
    high: int
    low: int
    assessment: Level


@dataclass(frozen=True)
class _Energy:
    level: Level
    score: int
    high_words: int
    low_words: int
    exclamations: int
    caps_words: int


@dataclass(frozen=True)
class _Anxiety:
    score: int
    level: Level
    indicators: tuple[str, ...]
    fillers: int
    repetitive_patterns: int


@dataclass(frozen=True)
class FeedbackItem:
    kind: FeedbackKind
    message: str
    category: str

    def to_payload(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message, "category": self.category}


def _score_confidence(tokens: list[str], hp: Hyperparameters) -> _Confidence:
    high = _matches(tokens, CONFIDENCE_HIGH)
    low = _matches(tokens, CONFIDENCE_LOW)
    level = int(_clamp(hp.confidence_base + high * hp.confidence_high_weight - low * hp.confidence_low_weight, hp))
    if level > hp.confidence_high_min:
        assessment = Level.HIGH
    elif level > hp.confidence_moderate_min:
        assessment = Level.MODERATE
    else:
        assessment = Level.LOW
    return _Confidence(level=level, high=high, low=low, assessment=assessment)


def _score_energy(tokens: list[str], text: str, hp: Hyperparameters) -> _Energy:
    high = _matches(tokens, ENERGY_HIGH)
    low = _matches(tokens, ENERGY_LOW)
    exclamations = text.count("!")
    caps = _caps_words(text)
    score = high + exclamations * hp.energy_exclamation_weight + caps - low
    if score > hp.energy_high_min:
        level = Level.HIGH
    elif score < hp.energy_low_max:
        level = Level.LOW
    else:
        level = Level.MODERATE
    return _Energy(level=level, score=score, high_words=high, low_words=low, exclamations=exclamations, caps_words=caps)


def _score_anxiety(tokens: list[str], text: str, hp: Hyperparameters) -> _Anxiety:
    fillers = _matches(tokens, ANXIETY_FILLERS)
    patterns = _repetitive_patterns(tokens)
    words_per_sentence = len(tokens) / max(1, _sentence_breaks(text))
    rapid = 1 if words_per_sentence > hp.anxiety_rapid_words_per_sentence else 0
    score = fillers + patterns * hp.anxiety_pattern_weight + rapid

    indicators = []
    if fillers > len(tokens) * hp.anxiety_filler_ratio:
        indicators.append("High filler word usage")
    if patterns > 0:
        indicators.append("Repetitive speech patterns")
    if rapid:
        indicators.append("Rapid speech pace")

    if score > hp.anxiety_high_min:
        level = Level.HIGH
    elif score > hp.anxiety_moderate_min:
        level = Level.MODERATE
    else:
        level = Level.LOW
    return _Anxiety(score=score, level=level, indicators=tuple(indicators), fillers=fillers, repetitive_patterns=patterns)


# ---------------------------------------------------------------------------
# Primary emotion ladder
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _EmotionInputs:
    confidence: int
    energy: Level
    anxiety: int
    positive: int
    negative: int


_Rung = tuple[PrimaryEmotion, Callable[[_EmotionInputs, Hyperparameters], bool], tuple[str, ...]]

# First matching rung wins; NEUTRAL always matches.
_EMOTION_LADDER: tuple[_Rung, ...] = (
    (PrimaryEmotion.CONFIDENT_ENERGETIC,
     lambda e, hp: e.confidence > hp.confidence_high_min and e.energy is Level.HIGH,
     ("enthusiastic", "passionate")),
    (PrimaryEmotion.CONFIDENT, lambda e, hp: e.confidence > hp.confidence_high_min, ("assured", "certain")),
    (PrimaryEmotion.ENERGETIC, lambda e, hp: e.energy is Level.HIGH, ("excited", "animated")),
    (PrimaryEmotion.ANXIOUS, lambda e, hp: e.anxiety > hp.anxiety_emotion_min, ("nervous", "uncertain")),
    (PrimaryEmotion.POSITIVE, lambda e, hp: e.positive > e.negative, ("optimistic", "upbeat")),
    (PrimaryEmotion.CONCERNED, lambda e, hp: e.negative > e.positive, ("serious", "thoughtful")),
    (PrimaryEmotion.NEUTRAL, lambda e, hp: True, ()),
)


def _primary_emotion(inputs: _EmotionInputs, hp: Hyperparameters) -> tuple[PrimaryEmotion, tuple[str, ...]]:
    for emotion, applies, secondary in _EMOTION_LADDER:
        if applies(inputs, hp):
            return emotion, secondary
    raise AssertionError("emotion ladder has no default rung")


# ---------------------------------------------------------------------------
# Feedback
# ---------------------------------------------------------------------------


def _compose_feedback(
    confidence: _Confidence, energy: _Energy, anxiety: _Anxiety, emotion: PrimaryEmotion, hp: Hyperparameters
) -> list[FeedbackItem]:
    feedback: list[FeedbackItem] = []

    if confidence.level > hp.confidence_praise_min:
        feedback.append(FeedbackItem(FeedbackKind.POSITIVE, "You sound very confident!", "confidence"))
    elif confidence.level < hp.confidence_suggest_max:
        feedback.append(FeedbackItem(FeedbackKind.SUGGESTION, "Try using more definitive language", "confidence"))

    if energy.level is Level.HIGH:
        feedback.append(FeedbackItem(FeedbackKind.POSITIVE, "Great energy! Your enthusiasm is contagious", "energy"))
    elif energy.level is Level.LOW:
        feedback.append(FeedbackItem(FeedbackKind.SUGGESTION, "Try adding more enthusiasm to engage your audience", "energy"))

    if anxiety.score > hp.anxiety_calming_min:
        feedback.append(FeedbackItem(FeedbackKind.CALMING, "Take a deep breath. Slow down and speak clearly", "anxiety"))
    elif anxiety.score < hp.anxiety_calm_max:
        feedback.append(FeedbackItem(FeedbackKind.POSITIVE, "You sound calm and composed", "anxiety"))

    if emotion is PrimaryEmotion.CONFIDENT_ENERGETIC:
        feedback.append(FeedbackItem(FeedbackKind.EXCELLENT, "Perfect! Confident and energetic delivery", "overall"))
    elif emotion is PrimaryEmotion.ANXIOUS:
        feedback.append(FeedbackItem(FeedbackKind.CALMING, "Remember to breathe. You've got this!", "overall"))

    return feedback[: hp.feedback_limit]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_emotion(
    transcript: object, duration: float | None = None, hyperparameters: Hyperparameters | None = None
) -> dict:
    """Score the emotional tone of a transcript.

    Args:
        transcript: The spoken text. Empty or non-string input yields a neutral
            result with no feedback.
        duration: Optional elapsed speaking time in seconds. When given, the
            result also carries a ``pacing`` section.
        hyperparameters: Optional tuning overrides.

    Returns:
        Dict with keys: confidence_level, confidence_assessment, energy_level,
        energy_score, anxiety_score, anxiety_level, anxiety_indicators,
        positivity, primary_emotion, secondary_emotions, overall, signals,
        feedback, and ``pacing`` when a duration was supplied.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text = _text(transcript)
    tokens = tokenize(text)

    confidence = _score_confidence(tokens, hp)
    energy = _score_energy(tokens, text, hp)
    anxiety = _score_anxiety(tokens, text, hp)
    positive = _matches(tokens, POSITIVE_WORDS)
    negative = _matches(tokens, NEGATIVE_WORDS)

    inputs = _EmotionInputs(
        confidence=confidence.level, energy=energy.level, anxiety=anxiety.score, positive=positive, negative=negative
    )
    emotion, secondary = _primary_emotion(inputs, hp)

    energy_adjustment = {
        Level.HIGH: hp.energy_overall_high_bonus,
        Level.LOW: hp.energy_overall_low_penalty,
        Level.MODERATE: 0,
    }[energy.level]
    feedback = _compose_feedback(confidence, energy, anxiety, emotion, hp) if tokens else []

    result = {
        "confidence_level": confidence.level,
        "confidence_assessment": confidence.assessment.value,
        "energy_level": energy.level.value,
        "energy_score": energy.score,
        "anxiety_score": anxiety.score,
        "anxiety_level": anxiety.level.value,
        "anxiety_indicators": list(anxiety.indicators),
        "positivity": positive - negative,
        "primary_emotion": emotion.value,
        "secondary_emotions": list(secondary),
        "overall": confidence.level + energy_adjustment - anxiety.score,
        "signals": {
            "high_confidence_words": confidence.high,
            "low_confidence_words": confidence.low,
            "high_energy_words": energy.high_words,
            "low_energy_words": energy.low_words,
            "exclamations": energy.exclamations,
            "caps_words": energy.caps_words,
            "filler_words": anxiety.fillers,
            "repetitive_patterns": anxiety.repetitive_patterns,
            "positive_words": positive,
            "negative_words": negative,
        },
        "feedback": [item.to_payload() for item in feedback],
    }
    if duration is not None:
        result["pacing"] = analyze_pacing(text, duration, hp)
    return result


def _sentiment_energy(text: str, positive: int, hp: Hyperparameters) -> Level:
    score = positive + text.count("!") + _caps_words(text)
    if score > hp.sentiment_energy_high_min:
        return Level.HIGH
    if score > hp.sentiment_energy_moderate_min:
        return Level.MODERATE
    return Level.LOW


def analyze_sentiment(transcript: object, hyperparameters: Hyperparameters | None = None) -> dict:
    """Percentages of positive, negative, confident, and uncertain words, with advice."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text = _text(transcript)
    tokens = tokenize(text)
    total = len(tokens)

    positive = _matches(tokens, SENTIMENT_POSITIVE)
    negative = _matches(tokens, SENTIMENT_NEGATIVE)
    confident = _matches(tokens, CONFIDENCE_HIGH)
    uncertain = _matches(tokens, SENTIMENT_UNCERTAINTY)

    def percent(count: int) -> int:
        return _round_half_up(count / total * 100) if total > 0 else 0

    recommendations = []
    if total > 0:
        if positive < hp.sentiment_positive_min:
            recommendations.append("Try incorporating more positive language to engage your audience")
        if uncertain > confident:
            recommendations.append("Use more definitive language to sound more confident")
        if negative > positive:
            recommendations.append("Balance negative points with positive solutions or outcomes")

    return {
        "positive": percent(positive),
        "negative": percent(negative),
        "confidence": percent(confident),
        "uncertainty": percent(uncertain),
        "neutrality": max(0, 100 - positive - negative),
        "overall_sentiment": positive - negative,
        "confidence_level": int(_clamp((confident - uncertain) * hp.sentiment_confidence_weight + hp.confidence_base, hp)),
        "energy_level": _sentiment_energy(text, positive, hp).value,
        "recommendations": recommendations,
    }
