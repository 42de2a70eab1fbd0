"""
Fixture Schema Unit Tests
Tests for proofgen/schemas/fixture.py
"""
import pytest
from pydantic import ValidationError

from fixtures import FakeProof
from proofgen.schemas.fixture import AbsenceFixtureResult, FixtureResult, Position
from proofgen.schemas.versioning import SCHEMA_VERSION


def _fixture(**overrides):
    data = {
        "key": b"k",
        "value": b"value_for_k",
        "proof": FakeProof(leaves=[("k", "v")]),
        "root_hash": b"\x00" * 32,
    }
    data.update(overrides)
    return FixtureResult(**data)


class TestPosition:

    def test_values(self):
        assert [p.value for p in Position] == ["left", "right", "middle"]

    def test_from_string(self):
        assert Position("middle") is Position.MIDDLE


class TestFixtureResult:

    def test_defaults(self):
        fixture = _fixture()

        assert fixture.schema_version == SCHEMA_VERSION
        assert fixture.position is None
        assert fixture.leaf_count == 1

    def test_frozen(self):
        fixture = _fixture()

        with pytest.raises(ValidationError):
            fixture.key = b"other"

    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError):
            _fixture(key=b"")

    def test_empty_value_rejected(self):
        with pytest.raises(ValidationError):
            _fixture(value=b"")

    def test_proof_without_leaves_rejected(self):
        with pytest.raises(ValidationError, match="leaves"):
            _fixture(proof=object())

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            _fixture(extra_field=1)


class TestAbsenceFixtureResult:

    def test_leaf_count(self):
        fixture = AbsenceFixtureResult(
            key=b"\xff\xff\xff\xff",
            proof=FakeProof(leaves=[1, 2]),
            root_hash=b"\x00" * 32,
            position=Position.RIGHT,
        )

        assert fixture.leaf_count == 2
        assert fixture.position is Position.RIGHT
