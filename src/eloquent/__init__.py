# SPDX-License-Identifier: Apache-2.0
"""Eloquent speech-coaching analyzers.

Deterministic text heuristics for practice transcripts: word repetition,
emotional tone, pacing, and voice-quality estimates. No model calls; the
optional remote rewrite falls back to local synonym substitution.

Usage::

    from eloquent import analyze_emotion, analyze_repetition

    analyze_repetition("the cat sat on the mat and the cat was happy")
    analyze_emotion("I am absolutely sure this will definitely work!", duration=12.0)

The Data Designer column type lives in ``eloquent.config``::

    from eloquent.config import EloquentColumnConfig

    builder.add_column(EloquentColumnConfig(
        name="coaching",
        target_columns=["transcript"],
        duration_column="seconds",
    ))
"""

from eloquent.core import Hyperparameters, analyze_repetition, analyze_speech_patterns, tokenize
from eloquent.emotion import analyze_emotion, analyze_sentiment
from eloquent.improve import GeminiImprover, ImproveOptions, ImprovementError, improve_text, improve_text_basic
from eloquent.pacing import analyze_pacing, analyze_voice_quality, estimate_pauses
from eloquent.session import Plan, SessionContext, coach_session
from eloquent.speaking import PresentationType, analyze_public_speaking

__all__ = [
    "GeminiImprover",
    "Hyperparameters",
    "ImproveOptions",
    "ImprovementError",
    "Plan",
    "PresentationType",
    "SessionContext",
    "analyze_emotion",
    "analyze_pacing",
    "analyze_public_speaking",
    "analyze_repetition",
    "analyze_sentiment",
    "analyze_speech_patterns",
    "analyze_voice_quality",
    "coach_session",
    "estimate_pauses",
    "improve_text",
    "improve_text_basic",
    "tokenize",
]
