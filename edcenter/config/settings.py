# -*- coding: utf-8 -*-
"""
edcenter/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Этот модуль загружает конфигурацию из .env файла (если он есть) и переменных
окружения, предоставляя централизованную систему управления настройками.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Корневая папка проекта (рядом с alembic.ini)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV_PATH = (BASE_DIR / ".env").resolve()

# .env читается только если существует, иначе только переменные окружения
ENV_FILE = ENV_PATH if ENV_PATH.exists() else None


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из .env файла."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация базы данных
    database_url: str | None = None
    postgres_db: str = "edcenter"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432

    # Конфигурация приложения
    app_title: str = "Educational Center API"
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # Конфигурация логирования
    log_level: str = "INFO"
    debug: bool = False
    # Файл логов с ротацией; если не задан, логи пишутся только в консоль
    log_file: str | None = None
    log_rotation: str = "10 MB"
    log_retention: str = "14 days"

    # Конфигурация автоматических миграций
    auto_migrate: bool = True

    # Конфигурация CORS
    cors_allow_origins: str = "*"
    cors_allow_credentials: bool = True
    cors_allow_methods: str = "GET,POST,PATCH,DELETE,OPTIONS"
    cors_allow_headers: str = "Content-Type"

    # Нечеткий поиск: максимальное число правок в одном слове
    search_max_edits: int = 2

    def get_allowed_origins(self) -> list[str]:
        """Возвращает список разрешённых origins для CORS."""
        if self.cors_allow_origins == "*":
            return ["*"]
        return [
            origin.strip()
            for origin in self.cors_allow_origins.split(",")
            if origin.strip()
        ]

    def get_cors_methods(self) -> list[str]:
        """Возвращает список разрешённых HTTP методов для CORS."""
        if self.cors_allow_methods == "*":
            return ["*"]
        return [
            method.strip()
            for method in self.cors_allow_methods.split(",")
            if method.strip()
        ]

    def get_cors_headers(self) -> list[str]:
        """Возвращает список разрешённых заголовков для CORS."""
        if self.cors_allow_headers == "*":
            return ["*"]
        return [
            header.strip()
            for header in self.cors_allow_headers.split(",")
            if header.strip()
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Собираем URL базы данных из компонентов, если он не задан напрямую
        if not self.database_url:
            self.database_url = self._build_database_url()

    def _build_database_url(self) -> str:
        """Build database URL from individual components."""
        # Используем asyncpg для асинхронного подключения в FastAPI
        driver = "postgresql+asyncpg"
        return f"{driver}://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ENV_PATH.exists():
            return f".env: {ENV_PATH}"
        return "environment variables only"


settings = Settings()
