"""
Feedback Tracker Backend — Entity Service Tests
================================================

What:  Upsert, lookup and delete semantics of EntityService / PointsService.
How:   Real SQLite schema (see conftest.database); no HTTP.

What we test:
    ✅ save without id inserts and returns the server-assigned id
    ✅ save with an existing id overwrites, row count unchanged
    ✅ save with an unknown id creates a new row
    ✅ find_one of a missing id returns None (no exception)
    ✅ delete of a missing id is a no-op
    ✅ QueryScope limits find_all to one owner
    ✅ get_points_list maps every raw record
"""

from datetime import date

import pytest

from feedback.models import Points, Weight
from feedback.pagination import PageRequest
from feedback.repositories import QueryScope
from feedback.schemas import PointsDTO, WeightDTO
from feedback.services import points_service, weight_service


class TestSave:

    @pytest.mark.asyncio
    async def test_insert_assigns_id(self, db_session, count_rows):
        saved = await weight_service.save(db_session, WeightDTO(date=date(1970, 1, 1), weight=1.0))
        await db_session.commit()

        assert saved.id is not None and saved.id > 0
        assert saved.weight == 1.0
        assert await count_rows(Weight) == 1

    @pytest.mark.asyncio
    async def test_update_overwrites_in_place(self, db_session, count_rows):
        created = await weight_service.save(db_session, WeightDTO(date=date(1970, 1, 1), weight=1.0))
        updated = await weight_service.save(
            db_session, WeightDTO(id=created.id, date=date(2024, 5, 1), weight=2.0)
        )
        await db_session.commit()

        assert updated.id == created.id
        assert updated.date == date(2024, 5, 1)
        assert updated.weight == 2.0
        assert await count_rows(Weight) == 1

    @pytest.mark.asyncio
    async def test_unknown_id_creates(self, db_session, count_rows):
        saved = await weight_service.save(db_session, WeightDTO(id=999_999, weight=3.0))
        await db_session.commit()

        assert saved.id is not None
        assert saved.weight == 3.0
        assert await count_rows(Weight) == 1

    @pytest.mark.asyncio
    async def test_owner_login_is_resolved(self, db_session, users):
        saved = await points_service.save(
            db_session, PointsDTO(date=date(2024, 1, 1), points=3, user_id=users["user"].id)
        )
        assert saved.user_id == users["user"].id
        assert saved.user_login == "user"

    @pytest.mark.asyncio
    async def test_owner_change_refreshes_login(self, db_session, users):
        saved = await points_service.save(
            db_session, PointsDTO(date=date(2024, 1, 1), points=3, user_id=users["user"].id)
        )
        moved = await points_service.save(
            db_session, PointsDTO(id=saved.id, date=date(2024, 1, 1), points=3,
                                  user_id=users["other"].id)
        )
        assert moved.user_login == "other"


class TestFindAndDelete:

    @pytest.mark.asyncio
    async def test_find_one_missing_returns_none(self, db_session):
        assert await weight_service.find_one(db_session, 2**63 - 1) is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, db_session, count_rows):
        await weight_service.save(db_session, WeightDTO(weight=1.0))
        await db_session.commit()

        await weight_service.delete(db_session, 12345)
        await db_session.commit()

        assert await count_rows(Weight) == 1

    @pytest.mark.asyncio
    async def test_delete_existing(self, db_session):
        saved = await weight_service.save(db_session, WeightDTO(weight=1.0))
        await weight_service.delete(db_session, saved.id)
        assert await weight_service.find_one(db_session, saved.id) is None


class TestScopedListing:

    @pytest.mark.asyncio
    async def test_owned_by_scope(self, db_session, users):
        for owner, value in (("user", 1), ("other", 2), ("user", 3)):
            await points_service.save(
                db_session, PointsDTO(date=date(2024, 1, value), points=value,
                                      user_id=users[owner].id)
            )

        page = await points_service.find_all(
            db_session, PageRequest.of(), QueryScope.owned_by(users["user"].id)
        )
        assert page.total_elements == 2
        assert {dto.points for dto in page.content} == {1, 3}

    @pytest.mark.asyncio
    async def test_newest_first_scope(self, db_session, users):
        for day in (5, 20, 1):
            await points_service.save(
                db_session, PointsDTO(date=date(2024, 1, day), points=day,
                                      user_id=users["user"].id)
            )

        page = await points_service.find_all(db_session, PageRequest.of(), QueryScope.newest_first())
        assert [dto.date.day for dto in page.content] == [20, 5, 1]


class TestGetPointsList:

    def test_maps_each_record(self):
        records = [
            Points(id=2, date=date(2024, 2, 2), points=5, user_id=1),
            Points(id=1, date=date(2024, 2, 1), points=0, user_id=1),
        ]
        result = points_service.get_points_list(records)
        assert [dto.id for dto in result] == [2, 1]
        assert all(isinstance(dto, PointsDTO) for dto in result)
        assert result[0].points == 5

    def test_empty(self):
        assert points_service.get_points_list([]) == []
