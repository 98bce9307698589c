from __future__ import annotations

import re
from enum import Enum

from eloquent.core import (
    DEFAULT_HYPERPARAMETERS,
    Hyperparameters,
    _deduplicate,
    _round_half_up,
    _round_tenth,
    _sentences,
    _text,
    tokenize,
)
from eloquent.emotion import analyze_sentiment
from eloquent.pacing import analyze_pacing, analyze_voice_quality


class PresentationType(str, Enum):
    GENERAL = "general"
    PITCH = "pitch"
    SPEECH = "speech"


_DIRECT_ADDRESS_RE = re.compile(r"\b(you|your|we|us|our)\b", re.IGNORECASE)
_STORY_RE = re.compile(r"\b(story|example|imagine|picture)\b", re.IGNORECASE)
_FILLER_RE = re.compile(r"\b(um|uh|like|you know|sort of|kind of)\b", re.IGNORECASE)
_TRANSITION_RE = re.compile(
    r"\b(first|second|third|next|then|finally|in conclusion|however|therefore|furthermore)\b", re.IGNORECASE
)

_PRESENTATION_TIPS = {
    PresentationType.PITCH: [
        "End with a clear call to action",
        "Use confident, assertive language throughout",
    ],
    PresentationType.SPEECH: [
        "Include personal stories to connect with your audience",
        "Use rhetorical devices for memorable impact",
    ],
    PresentationType.GENERAL: [],
}


def _engagement(text: str, sentiment: dict, hp: Hyperparameters) -> dict:
    questions = text.count("?")
    direct_address = len(_DIRECT_ADDRESS_RE.findall(text))
    stories = len(_STORY_RE.findall(text))
    score = (
        questions * hp.engagement_question_weight
        + direct_address * hp.engagement_direct_address_weight
        + stories * hp.engagement_story_weight
    )
    if sentiment["energy_level"] == "high":
        score += hp.engagement_energy_bonus
    score = min(hp.score_max, score)
    if score > hp.engagement_high_min:
        level = "high"
    elif score > hp.engagement_moderate_min:
        level = "moderate"
    else:
        level = "low"
    return {
        "score": score,
        "techniques": {"questions": questions, "direct_address": direct_address, "stories": stories},
        "level": level,
    }


def _message_clarity(text: str, pacing: dict, hp: Hyperparameters) -> dict:
    sentences = _sentences(text)
    average = sum(len(s.split()) for s in sentences) / len(sentences) if sentences else 0.0
    if average > hp.sentence_long_words:
        length_score = hp.sentence_long_score
    elif average < hp.sentence_short_words:
        length_score = hp.sentence_short_score
    else:
        length_score = hp.sentence_balanced_score
    pacing_score = pacing["pacing_quality"]["score"]
    excellent = length_score > hp.clarity_excellent_min and pacing_score > hp.clarity_excellent_min
    return {
        "score": _round_half_up((length_score + pacing_score) / 2),
        "avg_sentence_length": _round_half_up(average),
        "clarity": "excellent" if excellent else "good",
    }


def _professional_presence(text: str, word_count: int, sentiment: dict, hp: Hyperparameters) -> dict:
    fillers = len(_FILLER_RE.findall(text))
    ratio = (fillers / word_count) * 100 if word_count else 0.0
    raw = hp.score_max - ratio * hp.presence_filler_weight + sentiment["confidence_level"] * hp.presence_confidence_weight
    score = max(hp.score_min, min(hp.score_max, raw))
    if score > hp.presence_strong_min:
        level = "strong"
    elif score > hp.presence_moderate_min:
        level = "moderate"
    else:
        level = "needs work"
    return {
        "score": _round_half_up(score),
        "filler_words": fillers,
        "filler_ratio": _round_tenth(ratio),
        "level": level,
    }


def _structure(text: str, hp: Hyperparameters) -> dict:
    transitions = len(_TRANSITION_RE.findall(text))
    sentence_count = len(_sentences(text))
    if sentence_count:
        score = min(hp.score_max, (transitions / sentence_count) * hp.structure_transition_weight + hp.structure_base)
    else:
        score = hp.structure_base
    if score > hp.structure_well_organized_min:
        organization = "well-organized"
    elif score > hp.structure_moderate_min:
        organization = "moderately organized"
    else:
        organization = "needs structure"
    return {"score": _round_half_up(score), "transitions": transitions, "organization": organization}


def analyze_public_speaking(
    transcript: object,
    duration: float | None,
    presentation_type: PresentationType | str = PresentationType.GENERAL,
    hyperparameters: Hyperparameters | None = None,
) -> dict:
    """Combine sentiment, pacing, and voice estimates into a presentation report.

    Args:
        transcript: The spoken presentation text.
        duration: Elapsed speaking time in seconds.
        presentation_type: ``general``, ``pitch`` or ``speech``; adds
            type-specific tips to the recommendations.
        hyperparameters: Optional tuning overrides.

    Returns:
        Dict with keys: overall_score, audience_engagement, message_clarity,
        professional_presence, structure_quality, recommendations, sentiment,
        pacing, voice.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    kind = PresentationType(presentation_type)
    text = _text(transcript)

    sentiment = analyze_sentiment(text, hp)
    pacing = analyze_pacing(text, duration, hp)
    voice = analyze_voice_quality(text, hyperparameters=hp)

    overall = _round_half_up(
        sentiment["confidence_level"] * hp.speaking_confidence_weight
        + pacing["pacing_quality"]["score"] * hp.speaking_pacing_weight
        + voice["overall_quality"] * hp.speaking_voice_weight
    )
    recommendations = _deduplicate(
        sentiment["recommendations"]
        + pacing["recommendations"]
        + voice["recommendations"]
        + _PRESENTATION_TIPS[kind]
    )

    return {
        "overall_score": overall,
        "audience_engagement": _engagement(text, sentiment, hp),
        "message_clarity": _message_clarity(text, pacing, hp),
        "professional_presence": _professional_presence(text, len(tokenize(text)), sentiment, hp),
        "structure_quality": _structure(text, hp),
        "recommendations": recommendations,
        "sentiment": sentiment,
        "pacing": pacing,
        "voice": voice,
    }
