import logging
from typing import List

from ..common.database import delete_item, fetch_items, insert_item, seed_items, update_item
from .schemas import ItemInput, ItemView

_logger = logging.getLogger(__name__)

SAMPLE_ITEMS = [
    ("Coffee", 3.5),
    ("Cappuccino", 4.25),
    ("Tea", 2.75),
    ("Orange Juice", 3.0),
    ("Muffin", 2.0),
    ("Croissant", 2.5),
    ("Bagel", 3.25),
    ("Ham Sandwich", 6.5),
]


async def list_items() -> List[ItemView]:
    return await fetch_items()


async def create_item(item: ItemInput) -> int:
    item_id = await insert_item(item.name, item.price)
    _logger.info("Item created | item_id=%s name=%s price=%s", item_id, item.name, item.price)
    return item_id


async def change_item(item_id: int, item: ItemInput) -> None:
    # Updating an unknown id is accepted as a no-op
    updated = await update_item(item_id, item.name, item.price)
    if updated:
        _logger.info("Item updated | item_id=%s name=%s price=%s", item_id, item.name, item.price)
    else:
        _logger.info("Item update matched no row | item_id=%s", item_id)


async def remove_item(item_id: int) -> None:
    deleted = await delete_item(item_id)
    _logger.info("Item delete | item_id=%s deleted=%s", item_id, deleted)


async def seed_catalog() -> int:
    added = await seed_items(SAMPLE_ITEMS)
    if added:
        _logger.info("Seeded catalog with %s items", added)
    return added
