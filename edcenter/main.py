# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения учебного центра.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from edcenter.api.error_handlers import register_error_handlers
from edcenter.api.v1.courses import router as courses_router
from edcenter.api.v1.groups import router as groups_router
from edcenter.api.v1.students import router as students_router
from edcenter.api.v1.teachers import router as teachers_router
from edcenter.clients.database_client import async_engine, init_db
from edcenter.config.logger import configure_logger, get_system_logger
from edcenter.config.settings import settings
from edcenter.config.uvicorn_config import setup_uvicorn_logging
from edcenter.utils.migration_manager import check_and_apply_migrations
from edcenter.utils.startup_banner import print_startup_banner

logger = configure_logger()

app = FastAPI(
    title=settings.app_title,
    description="API для администрирования учебного центра: студенты, преподаватели, группы и курсы",
    version="0.1.0",
    openapi_tags=[
        {"name": "🎓 Студенты - ➕ Создание", "description": "Создание студентов"},
        {
            "name": "🎓 Студенты - 📖 Чтение",
            "description": "Список студентов и карточка студента",
        },
        {
            "name": "🎓 Студенты - ✏️ Обновление",
            "description": "Обновление информации о студентах",
        },
        {"name": "🎓 Студенты - 🗑️ Удаление", "description": "Удаление студентов"},
        {
            "name": "🎓 Студенты - 💳 Платежи",
            "description": "Добавление платежей в историю студента",
        },
        {
            "name": "🎓 Студенты - 🔍 Поиск",
            "description": "Нечеткий поиск и студенты без группы",
        },
        {
            "name": "👨‍🏫 Преподаватели - ⚙️ Управление",
            "description": "CRUD операции для преподавателей",
        },
        {"name": "👥 Группы - ⚙️ Управление", "description": "CRUD операции для групп"},
        {"name": "📚 Курсы - ⚙️ Управление", "description": "CRUD операции для курсов"},
    ],
)

# Настройка CORS из настроек
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.get_cors_methods(),
    allow_headers=settings.get_cors_headers(),
)

register_error_handlers(app)


# Middleware для логирования всех запросов
@app.middleware("http")
async def log_all_requests(request, call_next):
    logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

    try:
        response = await call_next(request)
    except Exception:
        logger.error(f"💥 Критическая ошибка API: {request.method} {request.url.path}")
        raise

    if response.status_code >= 400:
        logger.warning(
            f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
        )
    else:
        logger.info(
            f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
        )
    return response


# Подключаем роутеры, префиксы заданы в самих роутерах
app.include_router(students_router)
app.include_router(teachers_router)
app.include_router(groups_router)
app.include_router(courses_router)


@app.on_event("startup")
async def startup_event():
    setup_uvicorn_logging()
    print_startup_banner()

    system_logger = get_system_logger()
    system_logger.info("🔧 Инициализация сервисов...")

    # Проверяем подключение к базе данных
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        system_logger.info("✅ База данных подключена")
    except Exception as e:
        logger.error(f"❌ Ошибка подключения к базе данных: {e}")
        raise

    await check_and_apply_migrations()
    await init_db()

    system_logger.info("🎉 Все сервисы готовы к работе!")


@app.on_event("shutdown")
async def shutdown_event():
    """Обработчик завершения приложения."""
    logger.info(f"🛑 Завершение работы {settings.app_title}")
    await async_engine.dispose()


@app.get("/health")
async def api_health():
    """Проверка живости приложения."""
    return {"status": "ok"}
