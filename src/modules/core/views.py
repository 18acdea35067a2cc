import time
from typing import Any, Callable, Dict

import structlog
from django.db import DEFAULT_DB_ALIAS, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger()


def _probe_database() -> Dict[str, Any]:
    started = time.monotonic()
    conn = connections[DEFAULT_DB_ALIAS]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return {
        "status": "up",
        "vendor": conn.vendor,
        "response_time_ms": round((time.monotonic() - started) * 1000, 2),
    }


PROBES: Dict[str, Callable[[], Dict[str, Any]]] = {
    "database": _probe_database,
}


def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness probe for load balancers: 200 when every backing service answers."""
    services: Dict[str, Dict[str, Any]] = {}
    for name, probe in PROBES.items():
        try:
            services[name] = probe()
        except Exception:
            logger.exception("health_check.probe_failed", service=name)
            services[name] = {"status": "down"}

    healthy = all(entry["status"] == "up" for entry in services.values())
    overall = "healthy" if healthy else "unhealthy"
    logger.info("health_check.completed", status=overall)

    return JsonResponse(
        {
            "status": overall,
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
