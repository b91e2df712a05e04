# -*- coding: utf-8 -*-
"""
Integration тесты для API студентов
"""

from datetime import datetime

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.utils.coercion import utc_now
from tests.fixtures import (create_test_course, create_test_group,
                            create_test_payment, create_test_student,
                            create_test_teacher)


class TestStudentsAPI:
    """Integration тесты API студентов"""

    @pytest.mark.asyncio
    async def test_create_student(self, async_client: AsyncClient):
        """Успешное создание студента через API"""
        # Arrange
        student_data = {
            "name": {"first": "Ali", "last": "Karimov"},
            "phone": "+998901112233",
            "info": "A2",
            "payment_history": [{"date": "2024-09-01T10:00:00", "quantity": 500}],
        }

        # Act
        response = await async_client.post("/students", json=student_data)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == {"first": "Ali", "last": "Karimov"}
        assert data["phone"] == "+998901112233"
        assert data["payment_history"][0]["quantity"] == 500.0
        assert data["payment_history"][0]["date"] == "2024-09-01T10:00:00"

    @pytest.mark.asyncio
    async def test_list_students(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Список студентов с группой и преподавателем"""
        # Arrange
        student = await create_test_student(test_session)
        teacher = await create_test_teacher(test_session)
        await create_test_group(
            test_session, name="Group 1", teacher_id=teacher.id, students=[student]
        )

        # Act
        response = await async_client.get("/students")

        # Assert
        assert response.status_code == 200
        assert response.json() == [
            {
                "id": student.id,
                "name": {"first": "John", "last": "Smith"},
                "phone": "+998901234567",
                "group": "Group 1",
                "teacher": {"first": "Dilnoza", "last": "Rahimova"},
            }
        ]

    @pytest.mark.asyncio
    async def test_get_student_without_group(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Карточка студента без группы не содержит ключей group, teacher, course"""
        # Arrange
        student = await create_test_student(test_session)

        # Act
        response = await async_client.get(f"/students/select/{student.id}")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == student.id
        assert data["payment_history"] == []
        assert "group" not in data
        assert "teacher" not in data
        assert "course" not in data

    @pytest.mark.asyncio
    async def test_get_student_with_group(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        # Arrange
        student = await create_test_student(test_session)
        teacher = await create_test_teacher(test_session)
        course = await create_test_course(test_session)
        group = await create_test_group(
            test_session,
            course_id=course.id,
            teacher_id=teacher.id,
            students=[student],
        )

        # Act
        response = await async_client.get(f"/students/select/{student.id}")

        # Assert
        data = response.json()
        assert data["group"] == {
            "id": group.id,
            "name": "English A2 - вечер",
            "course": course.id,
            "teacher": teacher.id,
            "days": ["Mon", "Wed", "Fri"],
            "time": "18:00",
        }
        assert data["teacher"]["id"] == teacher.id
        assert data["course"] == {"id": course.id, "name": "English A2", "price": 500000.0}

    @pytest.mark.asyncio
    async def test_get_student_payment_history_sorted(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """История платежей отсортирована по дате по убыванию"""
        # Arrange
        student = await create_test_student(test_session)
        await create_test_payment(test_session, student.id, datetime(2024, 1, 5))
        await create_test_payment(test_session, student.id, datetime(2024, 5, 5))
        await create_test_payment(test_session, student.id, datetime(2024, 3, 5))

        # Act
        response = await async_client.get(f"/students/select/{student.id}")

        # Assert
        dates = [p["date"] for p in response.json()["payment_history"]]
        assert dates == [
            "2024-05-05T00:00:00",
            "2024-03-05T00:00:00",
            "2024-01-05T00:00:00",
        ]

    @pytest.mark.asyncio
    async def test_get_unknown_student_returns_empty_object(
        self, async_client: AsyncClient
    ):
        response = await async_client.get("/students/select/999")

        assert response.status_code == 200
        assert response.json() == {}

    @pytest.mark.asyncio
    async def test_get_student_malformed_id(self, async_client: AsyncClient):
        """Некорректный ID отклоняется валидацией"""
        response = await async_client.get("/students/select/not-an-id")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_student(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        # Arrange
        student = await create_test_student(test_session)

        # Act
        response = await async_client.patch(
            f"/students/select/{student.id}",
            json={"name": {"first": "Jonathan", "last": "Smith"}, "info": "B1"},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == {"first": "Jonathan", "last": "Smith"}
        assert data["info"] == "B1"
        assert data["phone"] == "+998901234567"

    @pytest.mark.asyncio
    async def test_update_unknown_student_returns_null(self, async_client: AsyncClient):
        response = await async_client.patch("/students/select/999", json={"info": "x"})

        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_delete_student(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Удаленный студент не появляется в списке и карточке"""
        # Arrange
        student = await create_test_student(test_session)

        # Act
        response = await async_client.delete(f"/students/select/{student.id}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Student is deleted"}
        assert (await async_client.get("/students")).json() == []
        assert (await async_client.get(f"/students/select/{student.id}")).json() == {}

    @pytest.mark.asyncio
    async def test_delete_unknown_student_reports_success(
        self, async_client: AsyncClient
    ):
        response = await async_client.delete("/students/select/999")

        assert response.json() == {"success": True, "message": "Student is deleted"}


class TestPaymentsAPI:
    """Integration тесты добавления платежей"""

    @pytest.mark.asyncio
    async def test_add_payment(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        # Arrange
        student = await create_test_student(test_session)

        # Act
        response = await async_client.post(
            f"/students/select/{student.id}",
            json={"date": "2024-10-01T09:00:00", "quantity": 250000, "method": "card"},
        )

        # Assert
        assert response.json() == {"success": True, "message": "Payment is added"}
        history = (await async_client.get(f"/students/select/{student.id}")).json()[
            "payment_history"
        ]
        assert history[0]["quantity"] == 250000.0
        assert history[0]["method"] == "card"
        assert history[0]["date"] == "2024-10-01T09:00:00"

    @pytest.mark.asyncio
    async def test_non_numeric_quantity_stored_as_zero(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        student = await create_test_student(test_session)

        await async_client.post(
            f"/students/select/{student.id}", json={"quantity": "five hundred"}
        )

        history = (await async_client.get(f"/students/select/{student.id}")).json()[
            "payment_history"
        ]
        assert history[0]["quantity"] == 0.0

    @pytest.mark.asyncio
    async def test_missing_date_set_to_request_time(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Платеж без даты получает время выполнения запроса"""
        # Arrange
        student = await create_test_student(test_session)
        before = utc_now()

        # Act
        await async_client.post(f"/students/select/{student.id}", json={"quantity": 1})
        after = utc_now()

        # Assert
        history = (await async_client.get(f"/students/select/{student.id}")).json()[
            "payment_history"
        ]
        stored = datetime.fromisoformat(history[0]["date"])
        assert before <= stored <= after


class TestSearchAPI:
    """Integration тесты поиска и студентов без группы"""

    @pytest.mark.asyncio
    async def test_search_with_typo(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Запрос "Jhon" находит студента John"""
        # Arrange
        student = await create_test_student(test_session, first_name="John")
        await create_test_teacher(test_session)

        # Act
        response = await async_client.get("/students/search", params={"search": "Jhon"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert [s["id"] for s in data["students"]] == [student.id]
        assert data["teachers"] == []

    @pytest.mark.asyncio
    async def test_search_finds_teachers(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        teacher = await create_test_teacher(test_session)

        response = await async_client.get(
            "/students/search", params={"search": "Rahimova"}
        )

        assert response.json() == {
            "students": [],
            "teachers": [
                {
                    "id": teacher.id,
                    "name": {"first": "Dilnoza", "last": "Rahimova"},
                    "phone": "+998907778899",
                }
            ],
        }

    @pytest.mark.asyncio
    async def test_search_without_match(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        await create_test_student(test_session)

        response = await async_client.get(
            "/students/search", params={"search": "Zzyzx Qwerty"}
        )

        assert response.json() == {"students": [], "teachers": []}

    @pytest.mark.asyncio
    async def test_search_without_query(self, async_client: AsyncClient):
        response = await async_client.get("/students/search")

        assert response.json() == {"students": [], "teachers": []}

    @pytest.mark.asyncio
    async def test_unassigned_students(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Студенты в группе не попадают в список без группы"""
        # Arrange
        grouped = await create_test_student(test_session, first_name="John")
        free = await create_test_student(test_session, first_name="Ali")
        await create_test_group(test_session, students=[grouped])

        # Act
        response = await async_client.get("/students/unassigned")

        # Assert
        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [free.id]
