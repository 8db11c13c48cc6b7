import asyncio
import json
import logging
from typing import Any

from quart import Blueprint, Response, jsonify

from ..common.config import settings
from ..common.redis_client import close_order_subscription, open_order_subscription

_logger = logging.getLogger(__name__)

bp = Blueprint("realtime", __name__, url_prefix="/api")


def format_sse(data: Any) -> str:
    """Render one order event as an SSE ``pedido`` message."""
    try:
        payload = json.loads(data) if isinstance(data, (str, bytes)) else data
    except ValueError:
        payload = {"raw": data}
    return f"event: pedido\ndata: {json.dumps(payload)}\n\n"


async def order_event_stream():
    pubsub = None
    backoff = 1.0
    # Advise client on retry
    yield "retry: 3000\n\n"
    try:
        while True:
            try:
                if pubsub is None:
                    pubsub = await open_order_subscription()
                message = await pubsub.get_message(timeout=5.0)
                if message:
                    yield format_sse(message.get("data"))
                else:
                    # Keep-alive for proxies
                    yield ": keep-alive\n\n"
                backoff = 1.0
            except asyncio.CancelledError:
                raise
            except Exception as e:
                _logger.warning("Order feed error, retrying in %ss | err=%s", int(backoff), e)
                yield f": redis-error, retrying in {int(backoff)}s\n\n"
                await close_order_subscription(pubsub)
                pubsub = None
                await asyncio.sleep(backoff)
                backoff = min(backoff * 2, 15.0)
    finally:
        await close_order_subscription(pubsub)


@bp.get("/pedidos/events")
async def order_events():
    if not settings.REDIS_ENABLED:
        return jsonify({"error": "Realtime feed is disabled"}), 503

    headers = {
        "Cache-Control": "no-cache",
        "X-Accel-Buffering": "no",
        "Connection": "keep-alive",
    }
    return Response(order_event_stream(), mimetype="text/event-stream", headers=headers)
