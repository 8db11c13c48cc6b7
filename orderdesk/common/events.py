"""Best-effort fan-out of order events.

Events go to the Kafka order topic and to the Redis order channel that feeds
the realtime staff view. They are sent after the database write has been
committed, so a broker outage is logged and never reported to the caller.
"""
import json
import logging
from typing import Any, Dict

from .config import settings
from .kafka_client import get_producer
from .redis_client import publish_order_message

_logger = logging.getLogger(__name__)

ORDER_CREATED = "order.created"
ORDER_STATUS_CHANGED = "order.status_changed"


async def publish_order_event(event: str, payload: Dict[str, Any]) -> None:
    message = json.dumps({"event": event, **payload})

    if settings.KAFKA_ENABLED:
        try:
            producer = await get_producer()
            await producer.send_and_wait(settings.ORDER_TOPIC, message.encode("utf-8"))
            _logger.debug("Published to Kafka | topic=%s event=%s", settings.ORDER_TOPIC, event)
        except Exception as e:
            _logger.warning("Kafka publish failed | event=%s err=%s", event, e)

    if settings.REDIS_ENABLED:
        try:
            await publish_order_message(message)
            _logger.debug("Published via Redis | channel=%s event=%s", settings.REDIS_ORDER_CHANNEL, event)
        except Exception as e:
            _logger.warning("Redis publish failed | event=%s err=%s", event, e)
