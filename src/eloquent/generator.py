from __future__ import annotations

import logging

import pandas as pd
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from eloquent.config import EloquentColumnConfig
from eloquent.core import analyze_repetition
from eloquent.emotion import analyze_emotion

logger = logging.getLogger(__name__)


def _score_row(text: str, config: EloquentColumnConfig, duration: float | None = None) -> dict:
    repetition = analyze_repetition(text)
    output: dict = {
        "is_valid": repetition["repetition_rate"] <= config.max_repetition_rate,
        "repetition_rate": repetition["repetition_rate"],
        "repetition_severity": repetition["severity"],
        "total_words": repetition["total_words"],
        "repeated_words": repetition["repeated_words"],
    }
    if config.include_word_frequency:
        output["word_frequency"] = repetition["word_frequency"]
    if config.include_emotion:
        output["emotion"] = analyze_emotion(text, duration)
    return output


def _score_frame(data: pd.DataFrame, config: EloquentColumnConfig) -> list[dict]:
    # Missing cells arrive as None or NaN depending on the column dtype.
    results = []
    for _, row in data[config.required_columns].iterrows():
        text = " ".join(str(row[c]) for c in config.target_columns if not pd.isna(row[c]))
        duration = None
        if config.duration_column and not pd.isna(row[config.duration_column]):
            duration = float(row[config.duration_column])
        results.append(_score_row(text, config, duration))
    return results


class EloquentColumnGenerator(ColumnGeneratorFullColumn[EloquentColumnConfig]):
    """Column generator that scores transcripts for repetition and emotional tone."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f3a4 Scoring column {self.config.name!r} for repetition and tone")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_repetition_rate: {self.config.max_repetition_rate}")

        data = data.copy()
        data[self.config.name] = _score_frame(data, self.config)
        return data
