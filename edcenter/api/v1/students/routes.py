# -*- coding: utf-8 -*-
"""
edcenter/api/v1/students/routes.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Основной роутер для всех операций со студентами.
Объединяет маршруты для CRUD операций, платежей и поиска.
"""

from fastapi import APIRouter

from .crud import create as crud_create
from .crud import delete as crud_delete
from .crud import read as crud_read
from .crud import update as crud_update
from .management import payments as management_payments
from .management import search as management_search

router = APIRouter()

# Добавление маршрутов поиска раньше /select/{student_id}
router.include_router(management_search.router)

# Добавление маршрутов CRUD операций
router.include_router(crud_read.router)
router.include_router(crud_create.router)
router.include_router(crud_update.router)
router.include_router(crud_delete.router)

# Добавление маршрутов управления
router.include_router(management_payments.router)
