"""Envelope 모델 테스트"""

import pytest
from pydantic import ValidationError

from photolog.models.envelopes import (
    AssignmentData,
    AssignmentEnvelope,
    AssignmentMeta,
    ExtractionData,
    ExtractionEnvelope,
    ExtractionMeta,
)
from photolog.models.readings import Boundaries, Reading


class TestReading:
    """Reading 모델 테스트"""

    def test_defaults(self):
        reading = Reading()
        assert reading.value == ""
        assert reading.identifier is None
        assert reading.is_rule_matched is False

    def test_unique_ids(self):
        assert Reading().id != Reading().id


class TestExtractionEnvelope:
    """ExtractionEnvelope 테스트"""

    def test_create(self):
        envelope = ExtractionEnvelope(
            stage="extract",
            data=ExtractionData(readings=[Reading(time="09:00", value="1.0")]),
            meta=ExtractionMeta(images=1, engine="dummy"),
        )
        assert envelope.version == "1.0"
        assert envelope.data.readings[0].value == "1.0"
        assert envelope.meta.failed_images == []

    def test_invalid_stage(self):
        with pytest.raises(ValidationError):
            ExtractionEnvelope(stage="ocr", data=ExtractionData(), meta=ExtractionMeta())

    def test_serialization_roundtrip(self):
        envelope = ExtractionEnvelope(
            stage="extract",
            data=ExtractionData(readings=[Reading(time="09:00", value="1.0")]),
            meta=ExtractionMeta(images=1),
        )
        restored = ExtractionEnvelope.model_validate_json(envelope.model_dump_json())
        assert restored == envelope


class TestAssignmentEnvelope:
    """AssignmentEnvelope 테스트"""

    def test_create(self):
        bounds = Boundaries(overall_min=1, overall_max=22, span=21, boundary1=8, boundary2=15)
        envelope = AssignmentEnvelope(
            stage="assign",
            data=AssignmentData(),
            meta=AssignmentMeta(boundaries=bounds, patterns=["four_point_a"]),
        )
        assert envelope.meta.boundaries.boundary2 == 15
        assert envelope.meta.positions == {}
