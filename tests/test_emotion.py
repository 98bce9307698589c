from eloquent.emotion import PrimaryEmotion, analyze_emotion, analyze_sentiment


CONFIDENT_TEXT = "I am absolutely confident this will definitely work"
EXCLAIMING_TEXT = "We did it! We won! We celebrate!"
FILLER_TEXT = "Um so like I was um basically thinking"
STAR_TEXT = "Definitely definitely definitely definitely! Amazing!"


class TestAnalyzeEmotion:
    def test_confidence_from_keywords(self):
        result = analyze_emotion(CONFIDENT_TEXT)
        assert result["confidence_level"] == 66
        assert result["confidence_assessment"] == "moderate"
        assert result["signals"]["high_confidence_words"] == 2

    def test_exclamations_drive_energy(self):
        result = analyze_emotion(EXCLAIMING_TEXT)
        assert result["energy_score"] == 6
        assert result["energy_level"] == "high"
        assert result["primary_emotion"] == "energetic"
        assert result["secondary_emotions"] == ["excited", "animated"]
        assert result["overall"] == 70

    def test_caps_words_count_as_energy(self):
        assert analyze_emotion("THIS IS BIG")["energy_score"] == 3
        assert analyze_emotion("THIS IS BIG")["energy_level"] == "moderate"
        assert analyze_emotion("THIS IS BIG!")["energy_level"] == "high"

    def test_low_energy(self):
        result = analyze_emotion("I am tired and it is fine, whatever, okay")
        assert result["energy_score"] == -4
        assert result["energy_level"] == "low"
        categories = [item["category"] for item in result["feedback"]]
        assert "energy" in categories

    def test_high_filler_usage(self):
        result = analyze_emotion(FILLER_TEXT)
        assert "High filler word usage" in result["anxiety_indicators"]
        assert result["anxiety_score"] == 5
        assert result["anxiety_level"] == "moderate"
        assert result["primary_emotion"] == "anxious"

    def test_repetitive_patterns(self):
        result = analyze_emotion("It was really really good and and nice.")
        assert result["signals"]["repetitive_patterns"] == 2
        assert "Repetitive speech patterns" in result["anxiety_indicators"]
        assert result["anxiety_score"] == 4

    def test_rapid_speech(self):
        result = analyze_emotion(" ".join(["alpha"] * 21))
        assert "Rapid speech pace" in result["anxiety_indicators"]
        assert result["anxiety_score"] == 1

    def test_confidence_is_clamped(self):
        assert analyze_emotion("definitely " * 10)["confidence_level"] == 100
        assert analyze_emotion("maybe " * 10)["confidence_level"] == 0

    def test_confident_energetic_and_feedback_limit(self):
        result = analyze_emotion(STAR_TEXT)
        assert result["primary_emotion"] == PrimaryEmotion.CONFIDENT_ENERGETIC.value
        assert len(result["feedback"]) == 3
        assert [item["category"] for item in result["feedback"]] == ["confidence", "energy", "anxiety"]

    def test_positive_and_concerned(self):
        assert analyze_emotion("I love this great team")["primary_emotion"] == "positive"
        concerned = analyze_emotion("This is a terrible problem")
        assert concerned["primary_emotion"] == "concerned"
        assert concerned["positivity"] == -2

    def test_empty_is_neutral(self):
        result = analyze_emotion("")
        assert result["confidence_level"] == 50
        assert result["energy_level"] == "moderate"
        assert result["anxiety_score"] == 0
        assert result["positivity"] == 0
        assert result["primary_emotion"] == "neutral"
        assert result["feedback"] == []

    def test_feedback_structure(self):
        result = analyze_emotion(CONFIDENT_TEXT)
        assert result["feedback"] == [
            {"kind": "positive", "message": "You sound calm and composed", "category": "anxiety"}
        ]

    def test_pacing_only_with_duration(self):
        assert "pacing" not in analyze_emotion(CONFIDENT_TEXT)
        result = analyze_emotion(CONFIDENT_TEXT, duration=4.0)
        assert result["pacing"]["words_per_minute"] == 120

    def test_is_idempotent(self):
        assert analyze_emotion(FILLER_TEXT) == analyze_emotion(FILLER_TEXT)


class TestAnalyzeSentiment:
    def test_percentages(self):
        result = analyze_sentiment("We had a great and amazing opportunity but it failed")
        assert result["positive"] == 30
        assert result["negative"] == 20
        assert result["neutrality"] == 95
        assert result["overall_sentiment"] == 1
        assert result["confidence_level"] == 50
        assert result["energy_level"] == "moderate"
        assert result["recommendations"] == []

    def test_uncertain_language(self):
        result = analyze_sentiment("Maybe it could work")
        assert result["confidence_level"] == 30
        assert "Use more definitive language to sound more confident" in result["recommendations"]

    def test_empty(self):
        result = analyze_sentiment(None)
        assert result["positive"] == 0
        assert result["confidence_level"] == 50
        assert result["recommendations"] == []
