# -*- coding: utf-8 -*-
"""
Роутер студентов.
"""

from .routes import router

__all__ = ["router"]
