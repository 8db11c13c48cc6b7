import logging
import time
from pathlib import Path

from quart import Quart, jsonify, request

from .catalog.controller import bp as catalog_bp
from .catalog.service import seed_catalog
from .common.config import settings
from .common.database import close_db, init_db
from .common.errors import StoreFailure, ValidationError
from .common.kafka_client import close_producer
from .common.redis_client import close_redis
from .orders.controller import bp as orders_bp
from .realtime.controller import bp as realtime_bp

# Prometheus metrics
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST


log = logging.getLogger(__name__)

REQUEST_COUNT = Counter("http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"])
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0, 7.5, 10.0, float("inf"))
)


def normalize_endpoint(path: str) -> str:
    """Collapse dynamic paths so metric labels stay bounded."""
    if path.startswith("/api/pedido/"):
        return "/api/pedido/<id>"
    if path.startswith("/api/productos/"):
        return "/api/productos/<id>"
    if path.startswith("/static/"):
        return "/static/*"
    return path


def create_app() -> Quart:
    static_dir = Path(settings.STATIC_DIR).resolve()

    app = Quart(
        __name__,
        static_folder=str(static_dir),
        static_url_path="/static",
    )

    # Blueprints
    app.register_blueprint(catalog_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(realtime_bp)

    @app.errorhandler(ValidationError)
    async def handle_validation_error(error: ValidationError):
        log.info("Rejected %s %s: %s", request.method, request.path, error.message)
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(StoreFailure)
    async def handle_store_failure(error: StoreFailure):
        log.error("Store failure on %s %s: %s", request.method, request.path, error.message, exc_info=error)
        return jsonify({"error": error.message}), error.status_code

    @app.before_request
    async def before_request():
        request._start_time = time.time()
        log.info("[Instance %s] %s %s", settings.INSTANCE_ID, request.method, request.path)

    @app.after_request
    async def after_request(response):
        start = getattr(request, "_start_time", None)
        if start is not None:
            endpoint = normalize_endpoint(request.path)
            REQUEST_LATENCY.labels(endpoint=endpoint).observe(time.time() - start)
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=endpoint,
                status=str(response.status_code)
            ).inc()
        response.headers["X-Instance-ID"] = settings.INSTANCE_ID
        return response

    @app.get("/metrics")
    async def metrics():
        data = generate_latest()
        return app.response_class(data, mimetype=CONTENT_TYPE_LATEST)

    @app.get("/health")
    async def health():
        return jsonify({"status": "ok"})

    @app.before_serving
    async def startup():
        logging.basicConfig(level=settings.LOG_LEVEL)
        log.info("Initializing database...")
        await init_db(settings.DB_URL)
        if settings.SEED_CATALOG:
            await seed_catalog()
        log.info("Database ready.")

    @app.after_serving
    async def shutdown():
        await close_producer()
        await close_redis()
        await close_db()
        log.info("Shutdown complete.")

    return app
