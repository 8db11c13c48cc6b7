import logging
from typing import List

from ..common.database import fetch_orders, insert_order, update_order_status
from ..common.events import ORDER_CREATED, ORDER_STATUS_CHANGED, publish_order_event
from .schemas import NewOrder, OrderSummary, StatusChange
from .status import INITIAL_STATUS

_logger = logging.getLogger(__name__)


async def create_order(new_order: NewOrder) -> int:
    """Persist ``new_order`` atomically and announce it.

    The request record has already been validated, so an empty item list or a
    blank customer name never reaches the store.
    """
    order_id = await insert_order(new_order.customer_name, new_order.items)
    _logger.info(
        "Order created | order_id=%s customer=%s items=%s",
        order_id,
        new_order.customer_name,
        len(new_order.items),
    )

    await publish_order_event(
        ORDER_CREATED,
        {
            "pedidoId": order_id,
            "cliente": new_order.customer_name,
            "estado": INITIAL_STATUS.value,
            "productos": [item.model_dump(by_alias=True) for item in new_order.items],
        },
    )
    return order_id


async def list_orders() -> List[OrderSummary]:
    return await fetch_orders()


async def set_status(order_id: int, change: StatusChange) -> None:
    # Unknown order ids are accepted as a no-op; nothing is announced for them
    updated = await update_order_status(order_id, change.status)
    if not updated:
        _logger.info("Status update matched no order | order_id=%s status=%s", order_id, change.status.value)
        return

    _logger.info("Order status set | order_id=%s status=%s", order_id, change.status.value)
    await publish_order_event(ORDER_STATUS_CHANGED, {"pedidoId": order_id, "estado": change.status.value})
