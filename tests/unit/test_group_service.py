# -*- coding: utf-8 -*-
"""
Unit тесты для сервисов групп, преподавателей и курсов
"""

import pytest

from edcenter.service.courses import (delete_course_service,
                                      get_course_service)
from edcenter.service.groups import (create_group_service,
                                     delete_group_service, get_group_service,
                                     list_groups_service, update_group_service)
from edcenter.service.students import list_unassigned_students_service
from edcenter.service.teachers import (delete_teacher_service,
                                       get_teacher_service,
                                       update_teacher_service)
from edcenter.utils.exceptions import ErrorCode, NotFoundError
from tests.fixtures import (create_test_course, create_test_group,
                            create_test_student, create_test_teacher)


class TestGroupService:
    """Тесты операций над группами"""

    @pytest.mark.asyncio
    async def test_create_group_with_students(self, test_session):
        # Arrange
        teacher = await create_test_teacher(test_session)
        course = await create_test_course(test_session)
        first = await create_test_student(test_session, first_name="John")
        second = await create_test_student(test_session, first_name="Ali")

        # Act
        group = await create_group_service(
            test_session,
            {
                "name": "Group A",
                "course_id": course.id,
                "teacher_id": teacher.id,
                "students": [second.id, first.id, first.id],
                "days": ["Tue", "Thu"],
                "time": "10:00",
            },
        )

        # Assert
        assert group["name"] == "Group A"
        assert group["course_id"] == course.id
        assert group["teacher_id"] == teacher.id
        assert group["students"] == [first.id, second.id]
        assert group["days"] == ["Tue", "Thu"]

    @pytest.mark.asyncio
    async def test_create_group_with_unknown_teacher(self, test_session):
        """Несуществующий преподаватель дает NotFoundError"""
        with pytest.raises(NotFoundError) as exc_info:
            await create_group_service(test_session, {"name": "G", "teacher_id": 42})

        assert exc_info.value.status_code == 404
        assert exc_info.value.error_code == ErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_create_group_with_unknown_course(self, test_session):
        with pytest.raises(NotFoundError):
            await create_group_service(test_session, {"name": "G", "course_id": 42})

    @pytest.mark.asyncio
    async def test_create_group_with_unknown_students(self, test_session):
        student = await create_test_student(test_session)

        with pytest.raises(NotFoundError) as exc_info:
            await create_group_service(
                test_session, {"name": "G", "students": [student.id, 77, 78]}
            )

        assert "77, 78" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_get_group_with_relations(self, test_session):
        # Arrange
        teacher = await create_test_teacher(test_session)
        course = await create_test_course(test_session)
        student = await create_test_student(test_session)
        group = await create_test_group(
            test_session,
            course_id=course.id,
            teacher_id=teacher.id,
            students=[student],
        )

        # Act
        data = await get_group_service(test_session, group.id)

        # Assert
        assert data["course"] == {"id": course.id, "name": "English A2", "price": 500000.0}
        assert data["teacher"]["id"] == teacher.id
        assert data["students"] == [
            {
                "id": student.id,
                "name": {"first": "John", "last": "Smith"},
                "phone": "+998901234567",
            }
        ]

    @pytest.mark.asyncio
    async def test_list_groups(self, test_session):
        # Arrange
        teacher = await create_test_teacher(test_session)
        student = await create_test_student(test_session)
        await create_test_group(
            test_session, name="With teacher", teacher_id=teacher.id, students=[student]
        )
        await create_test_group(test_session, name="Empty")

        # Act
        groups = await list_groups_service(test_session)

        # Assert
        assert [g["name"] for g in groups] == ["With teacher", "Empty"]
        assert groups[0]["teacher"] == {"first": "Dilnoza", "last": "Rahimova"}
        assert groups[0]["students_count"] == 1
        assert groups[0]["course"] is None
        assert groups[1]["teacher"] is None
        assert groups[1]["students_count"] == 0

    @pytest.mark.asyncio
    async def test_update_group_replaces_students(self, test_session):
        # Arrange
        first = await create_test_student(test_session, first_name="John")
        second = await create_test_student(test_session, first_name="Ali")
        group = await create_test_group(test_session, students=[first])

        # Act
        updated = await update_group_service(
            test_session, group.id, {"students": [second.id], "time": "19:00"}
        )

        # Assert
        assert updated["students"] == [second.id]
        assert updated["time"] == "19:00"
        unassigned = await list_unassigned_students_service(test_session)
        assert [s["id"] for s in unassigned] == [first.id]

    @pytest.mark.asyncio
    async def test_update_missing_group(self, test_session):
        with pytest.raises(NotFoundError):
            await update_group_service(test_session, 999, {"name": "X"})

    @pytest.mark.asyncio
    async def test_delete_group_keeps_students(self, test_session):
        # Arrange
        student = await create_test_student(test_session)
        group = await create_test_group(test_session, students=[student])

        # Act
        result = await delete_group_service(test_session, group.id)

        # Assert
        assert result == {"success": True, "message": "Group is deleted"}
        with pytest.raises(NotFoundError):
            await get_group_service(test_session, group.id)
        unassigned = await list_unassigned_students_service(test_session)
        assert [s["id"] for s in unassigned] == [student.id]


class TestTeacherAndCourseService:
    """Тесты преподавателей и курсов"""

    @pytest.mark.asyncio
    async def test_teacher_includes_groups(self, test_session):
        teacher = await create_test_teacher(test_session)
        group = await create_test_group(test_session, name="G1", teacher_id=teacher.id)

        data = await get_teacher_service(test_session, teacher.id)

        assert data["groups"] == [{"id": group.id, "name": "G1"}]

    @pytest.mark.asyncio
    async def test_update_teacher_name(self, test_session):
        teacher = await create_test_teacher(test_session)

        data = await update_teacher_service(
            test_session, teacher.id, {"name": {"first": "Aziz", "last": "Tursunov"}}
        )

        assert data["name"] == {"first": "Aziz", "last": "Tursunov"}
        assert data["phone"] == "+998907778899"

    @pytest.mark.asyncio
    async def test_delete_teacher_unlinks_groups(self, test_session):
        """Группы удаленного преподавателя остаются без преподавателя"""
        teacher = await create_test_teacher(test_session)
        group = await create_test_group(test_session, teacher_id=teacher.id)

        await delete_teacher_service(test_session, teacher.id)

        data = await get_group_service(test_session, group.id)
        assert data["teacher"] is None
        with pytest.raises(NotFoundError):
            await get_teacher_service(test_session, teacher.id)

    @pytest.mark.asyncio
    async def test_course_includes_groups_and_delete(self, test_session):
        course = await create_test_course(test_session)
        group = await create_test_group(test_session, name="G2", course_id=course.id)

        data = await get_course_service(test_session, course.id)
        assert data["groups"] == [{"id": group.id, "name": "G2"}]

        await delete_course_service(test_session, course.id)

        assert (await get_group_service(test_session, group.id))["course"] is None

    @pytest.mark.asyncio
    async def test_delete_missing_course(self, test_session):
        with pytest.raises(NotFoundError):
            await delete_course_service(test_session, 999)
