# -*- coding: utf-8 -*-
"""
edcenter/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~
Base repository operations for generic CRUD functionality.

This module provides reusable asynchronous CRUD helpers using SQLAlchemy 2.0
async ORM, with logging. It is designed to be stateless for unit testing
simplicity.
"""

from __future__ import annotations

from typing import Any, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from edcenter.config.logger import configure_logger
from edcenter.domain.models import Base

T = TypeVar("T", bound=Base)

logger = configure_logger()

# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


async def find_item(
    session: AsyncSession, model: Type[T], item_id: int, *options: Any
) -> Optional[T]:
    """Retrieve a single item by ID or None, with optional loader options."""
    stmt = (
        select(model)
        .where(getattr(model, "id") == item_id)
        .options(*options)
        .execution_options(populate_existing=True)
    )
    result = await session.execute(stmt)
    return result.scalars().first()


async def create_item(session: AsyncSession, model: Type[T], **kwargs: Any) -> T:
    """Create a new item in the database."""
    instance = model(**kwargs)
    session.add(instance)
    await session.commit()
    await session.refresh(instance)
    logger.debug(f"Создан {model.__name__} с ID {instance.id}")
    return instance


async def update_item(
    session: AsyncSession, model: Type[T], item_id: int, **kwargs: Any
) -> Optional[T]:
    """Update an existing item in the database. Returns None if it is missing."""
    instance = await find_item(session, model, item_id)
    if instance is None:
        return None
    for key, value in kwargs.items():
        setattr(instance, key, value)
    await session.commit()
    await session.refresh(instance)
    return instance


async def delete_item(
    session: AsyncSession, model: Type[T], item_id: int, *options: Any
) -> bool:
    """Delete an item from the database. Returns False if it is missing."""
    instance = await find_item(session, model, item_id, *options)
    if instance is None:
        return False
    await session.delete(instance)
    await session.commit()
    logger.debug(f"Удален {model.__name__} с ID {item_id}")
    return True


async def list_items(
    session: AsyncSession, model: Type[T], *options: Any, **filters: Any
) -> List[T]:
    """Retrieve all items filtered by the given criteria, ordered by ID."""
    stmt = (
        select(model)
        .options(*options)
        .filter_by(**filters)
        .order_by(getattr(model, "id"))
        .execution_options(populate_existing=True)
    )
    result = await session.execute(stmt)
    items = result.scalars().all()
    logger.debug(f"Retrieved {len(items)} {model.__name__} items")
    return list(items)
