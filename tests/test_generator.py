import pandas as pd
import pytest

pytest.importorskip("data_designer")

from eloquent.config import EloquentColumnConfig  # noqa: E402
from eloquent.generator import _score_frame, _score_row  # noqa: E402


CAT_TEXT = "the cat sat on the mat and the cat was happy"


class TestEloquentColumnConfig:
    def test_defaults(self):
        config = EloquentColumnConfig(name="coaching", target_columns=["transcript"])
        assert config.column_type == "eloquent-coach"
        assert config.max_repetition_rate == 8.0
        assert config.required_columns == ["transcript"]
        assert config.side_effect_columns == []

    def test_duration_column_is_required(self):
        config = EloquentColumnConfig(name="coaching", target_columns=["transcript"], duration_column="seconds")
        assert config.required_columns == ["transcript", "seconds"]


class TestScoreRow:
    def test_repetition_above_threshold_is_invalid(self):
        config = EloquentColumnConfig(name="coaching", target_columns=["transcript"])
        output = _score_row(CAT_TEXT, config)
        assert output["is_valid"] is False
        assert output["repetition_severity"] == "medium"
        assert output["total_words"] == 11
        assert output["emotion"]["primary_emotion"] == "positive"
        assert "word_frequency" not in output

    def test_optional_sections(self):
        config = EloquentColumnConfig(
            name="coaching",
            target_columns=["transcript"],
            max_repetition_rate=10.0,
            include_emotion=False,
            include_word_frequency=True,
        )
        output = _score_row(CAT_TEXT, config)
        assert output["is_valid"] is True
        assert "emotion" not in output
        assert output["word_frequency"]["cat"] == 2

    def test_duration_adds_pacing(self):
        config = EloquentColumnConfig(name="coaching", target_columns=["transcript"])
        output = _score_row(CAT_TEXT, config, duration=5.5)
        assert output["emotion"]["pacing"]["words_per_minute"] == 120


class TestScoreFrame:
    def test_missing_cells_are_skipped(self):
        config = EloquentColumnConfig(name="coaching", target_columns=["transcript"], duration_column="seconds")
        data = pd.DataFrame(
            {
                "transcript": [CAT_TEXT, CAT_TEXT, None, float("nan")],
                "seconds": [5.5, float("nan"), 30.0, None],
            }
        )
        results = _score_frame(data, config)
        assert len(results) == 4
        assert results[0]["emotion"]["pacing"]["words_per_minute"] == 120
        assert "pacing" not in results[1]["emotion"]
        assert results[1]["total_words"] == 11
        assert results[2]["total_words"] == 0
        assert results[2]["emotion"]["pacing"]["pacing_quality"]["quality"] == "unknown"
        assert results[3]["total_words"] == 0

    def test_joins_several_target_columns(self):
        config = EloquentColumnConfig(name="coaching", target_columns=["opening", "closing"], include_emotion=False)
        data = pd.DataFrame({"opening": ["the plan works"], "closing": ["the plan ships"]})
        assert _score_frame(data, config)[0]["repeated_words"] == [("plan", 2)]
