from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, Field

from eloquent.core import Hyperparameters, analyze_repetition
from eloquent.emotion import analyze_emotion
from eloquent.speaking import PresentationType, analyze_public_speaking

logger = logging.getLogger(__name__)


class Plan(str, Enum):
    FREE = "free"
    PRO = "pro"
    TEAM = "team"


class SessionContext(BaseModel):
    """Who is practising and what their subscription allows.

    Attributes:
        user_id: Identifier of the practising user.
        session_id: Identifier of this practice session.
        plan: Subscription plan. Emotion scoring needs a paid plan; the
            public-speaking report needs ``team``.
        subscription_active: Whether the subscription is currently active.
        language: Language code of the transcript.
    """

    user_id: str
    session_id: str
    plan: Plan = Field(default=Plan.FREE, description="Subscription plan name")
    subscription_active: bool = Field(default=True, description="Subscription status is active")
    language: str = Field(default="en", min_length=2, description="Transcript language code")

    @property
    def has_emotion_access(self) -> bool:
        return self.subscription_active and self.plan in (Plan.PRO, Plan.TEAM)

    @property
    def has_advanced_emotion(self) -> bool:
        return self.subscription_active and self.plan is Plan.TEAM


def coach_session(
    transcript: str,
    context: SessionContext,
    duration: float | None = None,
    presentation_type: PresentationType | str = PresentationType.GENERAL,
    hyperparameters: Hyperparameters | None = None,
) -> dict:
    """Analyze one practice transcript and assemble the record a caller stores.

    Repetition is always scored. Emotion scoring and the public-speaking report
    are included only when ``context`` is entitled to them; otherwise their
    keys are ``None``.
    """
    logger.info(f"Coaching session {context.session_id!r} for user {context.user_id!r}")
    logger.info(f"   plan: {context.plan.value} (active={context.subscription_active})")

    emotion = None
    if context.has_emotion_access:
        emotion = analyze_emotion(transcript, duration, hyperparameters)
    else:
        logger.debug(f"Skipping emotion scoring for plan {context.plan.value!r}")

    public_speaking = None
    if context.has_advanced_emotion and duration is not None:
        public_speaking = analyze_public_speaking(transcript, duration, presentation_type, hyperparameters)

    return {
        "user_id": context.user_id,
        "session_id": context.session_id,
        "language": context.language,
        "plan": context.plan.value,
        "transcript": transcript or "",
        "repetition": analyze_repetition(transcript, hyperparameters),
        "emotion": emotion,
        "public_speaking": public_speaking,
    }
