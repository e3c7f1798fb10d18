"""
Feedback Tracker Backend — Mapper Unit Tests
=============================================

What:  Tests for EntityMapper / UserMapper translation rules.
How:   Pure in-memory objects; no database, no HTTP.

What we test:
    ✅ DTO → entity → DTO keeps every scalar field
    ✅ Owner travels as a bare user_id; the relation is never materialized
    ✅ from_id() builds reference-only stubs, None for None
    ✅ to_dto is total, even for stubs whose DTO requires an owner on input
    ✅ Null fields pass through
"""

from datetime import date

from feedback.descriptors import BLOOD_PRESSURE, POINTS, WEIGHT
from feedback.mappers import UserMapper
from feedback.models import BloodPressure, Points, Weight
from feedback.schemas import BloodPressureDTO, PointsDTO, WeightDTO


class TestRoundTrip:

    def test_weight_round_trip_keeps_scalars(self):
        dto = WeightDTO(id=7, date=date(1970, 1, 1), weight=1.0, user_id=3)
        back = WEIGHT.mapper.to_dto(WEIGHT.mapper.to_entity(dto))
        assert back.model_dump(exclude={"user_login"}) == dto.model_dump(exclude={"user_login"})

    def test_blood_pressure_round_trip_keeps_scalars(self):
        dto = BloodPressureDTO(date=date(2024, 3, 1), systolic=120, diastolic=80, user_id=1)
        back = BLOOD_PRESSURE.mapper.to_dto(BLOOD_PRESSURE.mapper.to_entity(dto))
        assert back.systolic == 120
        assert back.diastolic == 80
        assert back.date == date(2024, 3, 1)
        assert back.user_id == 1
        assert back.id is None

    def test_points_round_trip_with_nulls(self):
        """Partial DTOs map field-by-field; missing values stay None."""
        dto = PointsDTO(points=3)
        entity = POINTS.mapper.to_entity(dto)
        assert entity.date is None
        assert entity.user_id is None
        back = POINTS.mapper.to_dto(entity)
        assert back.points == 3
        assert back.date is None


class TestOwnerReference:

    def test_to_entity_sets_only_the_foreign_key(self):
        dto = PointsDTO(date=date(2024, 1, 1), points=2, user_id=42, user_login="ignored")
        entity = POINTS.mapper.to_entity(dto)
        assert entity.user_id == 42
        # The relation is not built, so no User row can be inserted by accident
        assert "user" not in entity.__dict__

    def test_to_dto_without_loaded_owner_has_no_login(self):
        entity = Weight(id=1, date=date(2024, 1, 1), weight=80.5, user_id=9)
        dto = WEIGHT.mapper.to_dto(entity)
        assert dto.user_id == 9
        assert dto.user_login is None

    def test_user_from_id(self):
        user = UserMapper.user_from_id(5)
        assert user.id == 5
        assert user.login is None
        assert UserMapper.user_from_id(None) is None


class TestFromId:

    def test_from_id_builds_stub(self):
        stub = WEIGHT.mapper.from_id(42)
        assert isinstance(stub, Weight)
        assert stub.id == 42
        assert stub.date is None
        assert stub.weight is None
        assert stub.user_id is None

    def test_to_dto_of_owner_less_stub(self):
        dto = BLOOD_PRESSURE.mapper.to_dto(BLOOD_PRESSURE.mapper.from_id(5))
        assert isinstance(dto, BloodPressureDTO)
        assert dto.id == 5
        assert dto.user_id is None
        assert dto.user_login is None

    def test_from_id_none(self):
        assert WEIGHT.mapper.from_id(None) is None
        assert BLOOD_PRESSURE.mapper.from_id(None) is None

    def test_none_passes_through(self):
        assert POINTS.mapper.to_dto(None) is None
        assert POINTS.mapper.to_entity(None) is None


class TestCollections:

    def test_to_dtos_preserves_order(self):
        entities = [Points(id=i, points=i * 10) for i in (3, 1, 2)]
        dtos = POINTS.mapper.to_dtos(entities)
        assert [d.id for d in dtos] == [3, 1, 2]
        assert [d.points for d in dtos] == [30, 10, 20]

    def test_to_entities(self):
        dtos = [WeightDTO(weight=70.0), WeightDTO(weight=71.5)]
        entities = WEIGHT.mapper.to_entities(dtos)
        assert [e.weight for e in entities] == [70.0, 71.5]


class TestIdentityEquality:
    """Entities and DTOs compare by id, as long as the id is set."""

    def test_entities_equal_by_id(self):
        assert BloodPressure(id=1) == BloodPressure(id=1)
        assert BloodPressure(id=1) != BloodPressure(id=2)
        assert BloodPressure() != BloodPressure()

    def test_dtos_equal_by_id(self):
        assert WeightDTO(id=1, weight=1.0) == WeightDTO(id=1, weight=2.0)
        assert WeightDTO(id=1) != WeightDTO(id=2)
        assert WeightDTO() != WeightDTO()
