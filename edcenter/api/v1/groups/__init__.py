# -*- coding: utf-8 -*-

from .crud import router

__all__ = ["router"]
