import os
from dataclasses import dataclass


def _get_bool(env_name: str, default: bool = False) -> bool:
    val = os.getenv(env_name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass
class Settings:
    # App
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "3000"))
    INSTANCE_ID: str = os.getenv("INSTANCE_ID", "unknown")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    STATIC_DIR: str = os.getenv("STATIC_DIR", "public")

    # Database (SQLite file next to the app by default)
    DB_URL: str = os.getenv("DB_URL", "sqlite+aiosqlite:///./db/database.sqlite")
    DB_ECHO: bool = _get_bool("DB_ECHO", False)
    SEED_CATALOG: bool = _get_bool("SEED_CATALOG", True)

    # Redis (realtime order feed)
    REDIS_ENABLED: bool = _get_bool("REDIS_ENABLED", False)
    REDIS_HOST: str = os.getenv("REDIS_HOST", "redis")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", "6379"))
    REDIS_DB: int = int(os.getenv("REDIS_DB", "0"))
    REDIS_USERNAME: str = os.getenv("REDIS_USERNAME", "")
    REDIS_PASSWORD: str = os.getenv("REDIS_PASSWORD", "")
    REDIS_SSL: bool = _get_bool("REDIS_SSL", False)
    REDIS_ORDER_CHANNEL: str = os.getenv("REDIS_ORDER_CHANNEL", "order-updates")

    # Kafka (order events)
    KAFKA_ENABLED: bool = _get_bool("KAFKA_ENABLED", False)
    KAFKA_BOOTSTRAP_SERVERS: str = os.getenv("KAFKA_BOOTSTRAP_SERVERS", "kafka:9092")
    ORDER_TOPIC: str = os.getenv("ORDER_TOPIC", "orders")
    KAFKA_CONNECT_ATTEMPTS: int = int(os.getenv("KAFKA_CONNECT_ATTEMPTS", "3"))


settings = Settings()
