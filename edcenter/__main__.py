# -*- coding: utf-8 -*-
"""
Запуск API: python -m edcenter
"""

import uvicorn

from edcenter.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "edcenter.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.debug,
    )
