from __future__ import annotations

import json
import logging
import os
import random
import re

import requests
from pydantic import BaseModel, Field

from eloquent.core import tokenize, word_frequency

logger = logging.getLogger(__name__)

SYNONYMS: dict[str, list[str]] = {
    "good": ["excellent", "great", "wonderful", "fantastic"],
    "bad": ["poor", "terrible", "awful", "disappointing"],
    "big": ["large", "huge", "massive", "enormous"],
    "small": ["tiny", "little", "compact", "miniature"],
    "nice": ["pleasant", "lovely", "delightful", "charming"],
    "very": ["extremely", "incredibly", "remarkably", "exceptionally"],
    "really": ["truly", "genuinely", "absolutely", "certainly"],
    "important": ["significant", "essential", "vital", "crucial"],
    "interesting": ["fascinating", "intriguing", "compelling"],
    "said": ["stated", "mentioned", "explained", "noted"],
}

LANGUAGE_NAMES = {
    "en": "English",
    "ur": "Urdu",
    "ar": "Arabic",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "hi": "Hindi",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
}

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


class ImprovementError(Exception):
    """The remote rewrite could not produce an improved text."""


class ImproveOptions(BaseModel):
    """Goals passed to the remote rewrite."""

    reduce_repetition: bool = Field(default=True, description="Replace repeated words with synonyms")
    enhance_vocabulary: bool = Field(default=True, description="Prefer richer words where they fit")
    maintain_meaning: bool = Field(default=True, description="Keep the original meaning and intent")
    improve_flow: bool = Field(default=True, description="Smooth sentence flow and readability")
    formal_tone: bool = Field(default=False, description="Shift to a formal, professional tone")


def _match_case(original: str, replacement: str) -> str:
    return replacement[:1].upper() + replacement[1:] if original[:1].isupper() else replacement


def improve_text_basic(text: str | None, rng: random.Random | None = None) -> str:
    """Swap the first occurrence of each overused common word for a synonym.

    A word is overused when it appears more than twice. Pass a seeded
    ``random.Random`` to make the choice of synonym reproducible.
    """
    if not text:
        return text or ""
    rng = rng or random.Random()
    improved = text
    for word, count in word_frequency(tokenize(text)).items():
        if count <= 2 or word not in SYNONYMS:
            continue
        synonym = rng.choice(SYNONYMS[word])
        pattern = re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)
        improved = pattern.sub(lambda m: _match_case(m.group(0), synonym), improved, count=1)
    return improved


def _improvement_prompt(text: str, language: str, options: ImproveOptions) -> str:
    goals = [
        "- Reduce word repetition by using synonyms and varied expressions" if options.reduce_repetition else "",
        "- Enhance vocabulary with more sophisticated words where appropriate" if options.enhance_vocabulary else "",
        "- Maintain the exact original meaning and intent" if options.maintain_meaning else "",
        "- Improve sentence flow and readability" if options.improve_flow else "",
        "- Make the tone more formal and professional" if options.formal_tone else "- Keep the original tone and style",
    ]
    return (
        f"Improve this {LANGUAGE_NAMES.get(language, 'English')} text by reducing word repetition and "
        "enhancing vocabulary while maintaining the original meaning:\n\n"
        f'ORIGINAL TEXT: "{text}"\n\n'
        "IMPROVEMENT GOALS:\n" + "\n".join(g for g in goals if g) + "\n\n"
        "Please provide response in this JSON format:\n"
        "{\n"
        '  "improvedText": "The improved version of the text",\n'
        '  "changes": [{"original": "good good", "improved": "excellent", "reason": "Reduced repetition"}],\n'
        '  "improvements": {"repetitionReduction": 85, "vocabularyEnhancement": 70, "readabilityScore": 90},\n'
        '  "summary": "Reduced repetition while maintaining original meaning"\n'
        "}\n\n"
        "Make it sound natural, not robotic. Respond only with valid JSON."
    )


class GeminiImprover:
    """Rewrites text through the Gemini ``generateContent`` endpoint."""

    def __init__(self, api_key: str, model: str = "gemini-pro", timeout: float = 30.0):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_env(cls, **kwargs) -> GeminiImprover:
        api_key = os.environ.get("GEMINI_API_KEY")
        if not api_key:
            raise ImprovementError("Gemini API key not configured")
        return cls(api_key, **kwargs)

    def improve(self, text: str, language: str = "en", options: ImproveOptions | None = None) -> dict:
        options = options or ImproveOptions()
        body = {
            "contents": [{"parts": [{"text": _improvement_prompt(text, language, options)}]}],
            "generationConfig": {"temperature": 0.4, "topK": 40, "topP": 0.95, "maxOutputTokens": 2048},
        }
        try:
            response = requests.post(
                GEMINI_API_URL.format(model=self.model),
                params={"key": self.api_key},
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ImprovementError(f"Gemini request failed: {exc}") from exc

        if response.status_code != 200:
            raise ImprovementError(f"Gemini API error: {response.status_code}")

        try:
            reply = response.json()["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise ImprovementError("No response from Gemini") from exc

        match = _JSON_OBJECT_RE.search(reply)
        if not match:
            raise ImprovementError("No JSON found in Gemini response")
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError as exc:
            raise ImprovementError("Failed to parse improvement response") from exc
        if not isinstance(parsed, dict) or not parsed.get("improvedText"):
            raise ImprovementError("Gemini response has no improved text")

        return {
            "improved_text": parsed["improvedText"],
            "changes": parsed.get("changes", []),
            "improvements": parsed.get("improvements", {}),
            "summary": parsed.get("summary", ""),
        }


def improve_text(
    text: str,
    language: str = "en",
    options: ImproveOptions | None = None,
    improver: GeminiImprover | None = None,
    rng: random.Random | None = None,
) -> dict:
    """Rewrite ``text`` remotely when an improver is given, else with synonyms.

    Returns:
        Dict with keys: improved_text, changes, summary, source (``gemini`` or
        ``basic``), and ``error`` when the remote rewrite failed.
    """
    error = None
    if improver is not None:
        try:
            result = improver.improve(text, language, options)
        except ImprovementError as exc:
            logger.warning(f"Remote rewrite failed, using synonym substitution: {exc}")
            error = str(exc)
        else:
            return {**result, "source": "gemini"}

    result = {
        "improved_text": improve_text_basic(text, rng),
        "changes": [],
        "summary": "Replaced overused words with synonyms",
        "source": "basic",
    }
    if error is not None:
        result["error"] = error
    return result
