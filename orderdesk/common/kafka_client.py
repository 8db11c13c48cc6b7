import asyncio
import logging
from typing import Optional

from aiokafka import AIOKafkaProducer

from .config import settings

_logger = logging.getLogger(__name__)

_producer: Optional[AIOKafkaProducer] = None
_producer_lock = asyncio.Lock()


async def get_producer() -> AIOKafkaProducer:
    global _producer
    if _producer is None:
        async with _producer_lock:
            if _producer is None:
                backoff = 1.0
                last_exc: Optional[BaseException] = None
                for attempt in range(max(1, settings.KAFKA_CONNECT_ATTEMPTS)):
                    producer = AIOKafkaProducer(bootstrap_servers=settings.KAFKA_BOOTSTRAP_SERVERS)
                    try:
                        await producer.start()
                    except Exception as e:
                        last_exc = e
                        _logger.warning("Kafka producer start failed | attempt=%s err=%s", attempt + 1, e)
                        await producer.stop()
                        await asyncio.sleep(backoff)
                        backoff = min(backoff * 2, 30.0)
                        continue
                    _producer = producer
                    break
                if _producer is None:
                    raise last_exc or RuntimeError("Kafka producer start failed")
    return _producer


async def close_producer() -> None:
    global _producer
    if _producer is not None:
        try:
            await _producer.stop()
        finally:
            _producer = None
