"""
Unit Tests for the Specialist Recommendation Engine

Condition extraction, keyword matching, department resolution and the
directory-backed consultation flow.
"""
import pytest
from typing import List, Sequence
from unittest.mock import Mock

from vitalnexus.core.recommendation import (
    DEPARTMENT_MAP,
    PREDICTION_FIELD_KEYS,
    PredictionRecord,
    RecommendationEngine,
    Specialty,
    recommend,
    resolve_departments,
)
from vitalnexus.models import PredictionPayload


class RecordingDirectory:
    """Directory double that remembers every lookup."""

    def __init__(self, records: List[dict]):
        self.records = records
        self.calls: List[List[str]] = []

    def find_by_departments(self, departments: Sequence[str]) -> List[dict]:
        self.calls.append(list(departments))
        return [r for r in self.records if r["department"] in departments]


class TestConditionExtraction:
    """Tests for flattening prediction fields into a condition list."""

    def test_fields_read_in_fixed_order(self, engine):
        record = PredictionRecord(
            sleep_disorders="Insomnia",
            additional_diseases="Anxiety",
            detected_diseases="Tachycardia; Hypertension",
        )
        assert engine.extract_conditions(record) == [
            "Anxiety", "Tachycardia", "Hypertension", "Insomnia"
        ]

    def test_items_are_trimmed(self, engine):
        record = PredictionRecord(detected_diseases="  Sleep Apnea ;Hypertension   ")
        assert engine.extract_conditions(record) == ["Sleep Apnea", "Hypertension"]

    def test_absent_marker_and_empty_fields_skipped(self, engine):
        record = PredictionRecord(
            additional_diseases="nan",
            detected_diseases="",
            sleep_disorders=None,
        )
        assert engine.extract_conditions(record) == []

    def test_duplicates_and_case_preserved(self, engine):
        record = PredictionRecord(
            additional_diseases="ANXIETY",
            detected_diseases="Anxiety; ANXIETY",
        )
        assert engine.extract_conditions(record) == ["ANXIETY", "Anxiety", "ANXIETY"]

    def test_none_prediction(self, engine):
        assert engine.extract_conditions(None) == []

    def test_empty_pieces_kept(self, engine):
        record = PredictionRecord(detected_diseases="A;;B")
        assert engine.extract_conditions(record) == ["A", "", "B"]

        stray = PredictionRecord(sleep_disorders=" ; Insomnia ;")
        assert engine.extract_conditions(stray) == ["", "Insomnia", ""]

    def test_empty_pieces_never_match(self, engine):
        assert engine.recommend(PredictionRecord(detected_diseases=";;")) == frozenset()
        assert engine.match_condition("") == set()


class TestRecommend:
    """Tests for specialty recommendation."""

    def test_all_absent_yields_empty_set(self, engine, empty_prediction):
        assert engine.recommend(empty_prediction) == frozenset()
        assert engine.recommend(PredictionRecord()) == frozenset()

    def test_tachycardia_recommends_cardiologist(self, engine):
        result = engine.recommend(PredictionRecord(detected_diseases="Tachycardia"))
        assert Specialty.CARDIOLOGIST in result

    def test_shared_keyword_triggers_both_specialties(self, engine):
        result = engine.recommend(PredictionRecord(detected_diseases="high stress"))
        assert Specialty.CARDIOLOGIST in result
        assert Specialty.PSYCHOLOGIST in result
        assert len(result) >= 2

    def test_matching_is_case_insensitive(self, engine):
        upper = engine.recommend(PredictionRecord(detected_diseases="TACHYCARDIA"))
        lower = engine.recommend(PredictionRecord(detected_diseases="tachycardia"))
        assert upper == lower
        assert Specialty.CARDIOLOGIST in upper

    def test_recommend_is_idempotent(self, engine):
        record = PredictionRecord(
            additional_diseases="Chronic Stress",
            detected_diseases="Sleep Apnea; Hypertension",
            sleep_disorders="Insomnia",
        )
        assert engine.recommend(record) == engine.recommend(record)

    def test_substring_with_surrounding_text(self, engine):
        result = engine.recommend(PredictionRecord(sleep_disorders="Mild Insomnia Symptoms"))
        assert Specialty.SLEEP_SPECIALIST in result

    def test_condition_inside_longer_phrase(self, engine):
        result = engine.recommend(PredictionRecord(detected_diseases="Severe Tachycardia Episode"))
        assert result == frozenset({Specialty.CARDIOLOGIST})

    def test_parenthetical_qualifier_not_matched(self, engine):
        # "Obesity-related diseases (Diabetes)" only matches on its literal part
        result = engine.recommend(PredictionRecord(detected_diseases="Diabetes"))
        assert Specialty.NUTRITIONIST not in result

    def test_sleep_apnea_and_hypertension(self, engine):
        result = engine.recommend(PredictionRecord(detected_diseases="Sleep Apnea; Hypertension"))
        # "Poor Sleep (Sleep Apnea)" matches on "poor sleep" only
        assert result == frozenset({
            Specialty.PULMONOLOGIST,
            Specialty.CARDIOLOGIST,
        })

    def test_sleep_specialist_from_literal_part(self, engine):
        record = PredictionRecord(
            detected_diseases="Sleep Apnea; Hypertension",
            sleep_disorders="Poor Sleep Quality",
        )
        assert engine.recommend(record) == frozenset({
            Specialty.PULMONOLOGIST,
            Specialty.SLEEP_SPECIALIST,
            Specialty.CARDIOLOGIST,
        })

    def test_generic_literal_over_recommends(self, engine):
        # Known imprecision: containment ignores negation
        result = engine.recommend(PredictionRecord(additional_diseases="No Diabetes Risk"))
        assert Specialty.ENDOCRINOLOGIST in result

    def test_unknown_condition_matches_nothing(self, engine):
        assert engine.recommend(PredictionRecord(detected_diseases="Seasonal Allergy")) == frozenset()

    def test_module_level_recommend(self):
        result = recommend(PredictionRecord(detected_diseases="Hypotension"))
        assert result == frozenset({Specialty.GENERAL_PHYSICIAN})


class TestPredictionRecordParsing:
    """Tests for building records from raw payloads."""

    def test_upper_snake_keys(self):
        record = PredictionRecord.from_dict({
            "ADDITIONAL_DISEASES": "nan",
            "DETECTED_DISEASES": "Arrhythmia",
            "SLEEP_DISORDERS": "Insomnia",
        })
        assert record.additional_diseases == "nan"
        assert record.detected_diseases == "Arrhythmia"
        assert record.sleep_disorders == "Insomnia"

    def test_camel_case_keys(self):
        record = PredictionRecord.from_dict({"detectedDiseases": "Anxiety"})
        assert record.detected_diseases == "Anxiety"
        assert record.additional_diseases is None

    def test_empty_payload(self):
        assert PredictionRecord.from_dict(None) == PredictionRecord()
        assert PredictionRecord.from_dict({}) == PredictionRecord()

    def test_numbers_are_stringified(self):
        record = PredictionRecord.from_dict({
            "ADDITIONAL_DISEASES": float("nan"),
            "DETECTED_DISEASES": 0,
        })
        assert record.additional_diseases == "nan"
        assert record.detected_diseases == "0"

    def test_non_scalar_values_treated_as_omitted(self, engine):
        record = PredictionRecord.from_dict({
            "SLEEP_DISORDERS": ["Insomnia"],
            "DETECTED_DISEASES": {"name": "Hypertension"},
            "ADDITIONAL_DISEASES": True,
        })
        assert record == PredictionRecord()
        assert engine.recommend(record) == frozenset()

    def test_non_scalar_falls_through_to_next_spelling(self):
        record = PredictionRecord.from_dict({
            "SLEEP_DISORDERS": ["Insomnia"],
            "sleepDisorders": "Insomnia",
        })
        assert record.sleep_disorders == "Insomnia"

    @pytest.mark.parametrize("field_name", sorted(PREDICTION_FIELD_KEYS))
    def test_request_model_accepts_every_wire_spelling(self, field_name):
        for key in PREDICTION_FIELD_KEYS[field_name]:
            payload = PredictionPayload.model_validate({key: "Insomnia"})
            assert getattr(payload.to_record(), field_name) == "Insomnia"
            assert PredictionRecord.from_dict({key: "Insomnia"}) == payload.to_record()


class TestResolveDepartments:
    """Tests for specialty → department mapping."""

    def test_empty_set_gives_empty_sequence(self, engine):
        assert engine.resolve_departments(frozenset()) == []

    def test_each_department_once(self, engine):
        specialties = frozenset({Specialty.CARDIOLOGIST, Specialty.PULMONOLOGIST})
        departments = engine.resolve_departments(specialties)
        assert sorted(departments) == ["Cardiologist", "Pulmonologist"]

    def test_unmapped_specialty_dropped_silently(self):
        partial_map = {
            s: d for s, d in DEPARTMENT_MAP.items() if s is not Specialty.NUTRITIONIST
        }
        engine = RecommendationEngine(department_map=partial_map)
        departments = engine.resolve_departments(
            [Specialty.NUTRITIONIST, Specialty.ENDOCRINOLOGIST]
        )
        assert departments == ["Endocrinologist"]

    def test_diverging_department_names(self):
        engine = RecommendationEngine(department_map={Specialty.CARDIOLOGIST: "Cardiology"})
        assert engine.resolve_departments([Specialty.CARDIOLOGIST]) == ["Cardiology"]

    def test_module_level_resolve(self):
        assert resolve_departments([Specialty.GENERAL_PHYSICIAN]) == ["General Physician"]


class TestConsult:
    """Tests for the directory-backed consultation flow."""

    @pytest.fixture
    def directory(self) -> RecordingDirectory:
        return RecordingDirectory([
            {"doctor_id": 1, "name": "Dr. Heart", "department": "Cardiologist"},
            {"doctor_id": 2, "name": "Dr. Lung", "department": "Pulmonologist"},
            {"doctor_id": 3, "name": "Dr. Sleep", "department": "Sleep Specialist / Neurologist"},
            {"doctor_id": 4, "name": "Dr. Sugar", "department": "Endocrinologist"},
        ])

    def test_directory_not_queried_when_nothing_matches(self, engine, empty_prediction):
        directory = Mock()
        result = engine.consult(empty_prediction, directory)

        directory.find_by_departments.assert_not_called()
        assert result.doctors == []
        assert result.directory_queried is False

    def test_matching_doctors_returned(self, engine, directory):
        record = PredictionRecord(
            detected_diseases="Sleep Apnea; Hypertension",
            sleep_disorders="Insomnia",
        )
        result = engine.consult(record, directory)

        assert len(directory.calls) == 1
        assert sorted(directory.calls[0]) == [
            "Cardiologist", "Pulmonologist", "Sleep Specialist / Neurologist"
        ]
        assert sorted(d["doctor_id"] for d in result.doctors) == [1, 2, 3]
        assert result.directory_queried is True

    def test_result_serialisation(self, engine, directory):
        record = PredictionRecord(detected_diseases="Diabetes Risk")
        data = engine.consult(record, directory).to_dict()

        assert data["conditions"] == ["Diabetes Risk"]
        assert data["specialties"] == ["Endocrinologist"]
        assert data["departments"] == ["Endocrinologist"]
        assert [d["name"] for d in data["doctors"]] == ["Dr. Sugar"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
