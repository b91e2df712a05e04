# -*- coding: utf-8 -*-
"""
Модуль для отображения баннера при запуске приложения.
"""

import platform
import sys
from datetime import datetime

from sqlalchemy.engine import make_url

from edcenter.config.settings import settings


def get_system_info():
    """Получает информацию о системе."""
    return {
        "os": f"{platform.system()} {platform.release()}",
        "python": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        "hostname": platform.node(),
        "architecture": platform.machine(),
    }


def get_app_banner():
    """Возвращает ASCII баннер приложения."""
    return f"""
    ╔══════════════════════════════════════════════════════════════╗
    ║                 🎓 {settings.app_title:<42}║
    ╚══════════════════════════════════════════════════════════════╝
    """


def get_startup_info():
    """Возвращает информацию о запуске приложения."""
    system = get_system_info()
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    # Пароль в баннер не попадает
    database = make_url(settings.database_url).render_as_string(hide_password=True)

    return (
        f"\n"
        f"      📅 Запуск: {now}\n"
        f"      🖥️  Система: {system['os']} ({system['architecture']})\n"
        f"      🐍 Python: {system['python']}\n"
        f"      🏠 Хост: {system['hostname']}\n"
        f"      🌐 API: http://{settings.app_host}:{settings.app_port}\n"
        f"      📊 База данных: {database}\n"
        f"      ⚙️  Конфиг: {settings.get_config_source()}\n"
    )


def print_startup_banner():
    """Выводит полный баннер при запуске."""
    try:
        print(get_app_banner())
        print(get_startup_info())
        print("    " + "=" * 80)
    except UnicodeEncodeError:
        # Консоль без поддержки UTF-8
        print("=" * 80)
        print(settings.app_title)
        print("=" * 80)
