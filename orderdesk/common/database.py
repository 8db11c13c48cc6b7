import functools
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import sqlalchemy as sa
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import selectinload

from .config import settings
from .db import Base
from .errors import StoreFailure
from ..catalog.model import Item
from ..catalog.schemas import ItemView
from ..orders.model import Order, OrderLineItem
from ..orders.schemas import LineItemInput, OrderSummary
from ..orders.status import INITIAL_STATUS, OrderStatus

_logger = logging.getLogger(__name__)

# Process-wide engine (connection pool) and session factory, set up by init_db()
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _ensure_sqlite_dir(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return
    if parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)


async def init_db(url: Optional[str] = None) -> None:
    global _engine, _session_factory
    if _engine is not None:
        return
    url = url or settings.DB_URL
    _ensure_sqlite_dir(url)
    engine = create_async_engine(url, echo=settings.DB_ECHO, pool_pre_ping=True)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        await engine.dispose()
        raise StoreFailure(f"Could not initialise database: {e.__class__.__name__}") from e
    _engine = engine
    _session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    _logger.info("Database ready | dialect=%s", engine.dialect.name)


async def close_db() -> None:
    global _engine, _session_factory
    if _engine is not None:
        try:
            await _engine.dispose()
        finally:
            _engine = None
            _session_factory = None


def _sessions() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        raise StoreFailure("Database is not initialised")
    return _session_factory


def _store_operation(func):
    """Translate SQLAlchemy errors raised by a store call into StoreFailure."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as e:
            raise StoreFailure(f"{func.__name__} failed: {e.__class__.__name__}") from e

    return wrapper


# Catalog


@_store_operation
async def fetch_items() -> List[ItemView]:
    async with _sessions()() as session:
        res = await session.execute(sa.select(Item).order_by(Item.id.asc()))
        return [ItemView(id=it.id, name=it.name, price=it.price) for it in res.scalars().all()]


@_store_operation
async def insert_item(name: str, price: float) -> int:
    async with _sessions()() as session:
        item = Item(name=name, price=price)
        session.add(item)
        await session.flush()  # assign PK
        item_id = int(item.id)
        await session.commit()
        return item_id


@_store_operation
async def update_item(item_id: int, name: str, price: float) -> int:
    async with _sessions()() as session:
        stmt = sa.update(Item).where(Item.id == item_id).values(name=name, price=price)
        res = await session.execute(stmt)
        await session.commit()
        return res.rowcount or 0


@_store_operation
async def delete_item(item_id: int) -> int:
    async with _sessions()() as session:
        res = await session.execute(sa.delete(Item).where(Item.id == item_id))
        await session.commit()
        return res.rowcount or 0


@_store_operation
async def seed_items(items: Iterable[Tuple[str, float]]) -> int:
    """Insert ``items`` only if the catalog is empty. Returns how many were added."""
    async with _sessions()() as session:
        async with session.begin():
            res = await session.execute(sa.select(sa.func.count(Item.id)))
            if int(res.scalar() or 0) > 0:
                return 0
            rows = [Item(name=name, price=price) for name, price in items]
            session.add_all(rows)
        return len(rows)


# Orders


@_store_operation
async def insert_order(customer_name: str, items: Sequence[LineItemInput]) -> int:
    """Write an order header and all of its line items in one transaction.

    The header is flushed first to obtain its id. If any line item fails to
    insert, ``session.begin()`` rolls back the header too, and the session
    returns its connection to the pool on every exit path, cancellation included.
    """
    async with _sessions()() as session:
        async with session.begin():
            order = Order(customer_name=customer_name, status=INITIAL_STATUS.value)
            session.add(order)
            await session.flush()  # assign PK
            order_id = int(order.id)
            session.add_all(
                OrderLineItem(order_id=order_id, product_name=item.name, price=item.price)
                for item in items
            )
            await session.flush()
        return order_id


@_store_operation
async def fetch_orders() -> List[OrderSummary]:
    async with _sessions()() as session:
        stmt = sa.select(Order).options(selectinload(Order.line_items)).order_by(Order.id.desc())
        res = await session.execute(stmt)
        return [
            OrderSummary(
                id=order.id,
                customer_name=order.customer_name,
                status=order.status,
                items=[LineItemInput(name=li.product_name, price=li.price) for li in order.line_items],
            )
            for order in res.scalars().all()
        ]


@_store_operation
async def update_order_status(order_id: int, status: OrderStatus) -> int:
    async with _sessions()() as session:
        stmt = sa.update(Order).where(Order.id == order_id).values(status=status.value)
        res = await session.execute(stmt)
        await session.commit()
        return res.rowcount or 0

