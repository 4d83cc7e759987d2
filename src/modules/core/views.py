from typing import Any, Dict

import structlog
from asgiref.sync import async_to_sync
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core import mongo

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check document store
    try:
        elapsed_ms = async_to_sync(mongo.ping)()
        services["database"] = {
            "status": "up",
            "response_time_ms": elapsed_ms,
        }
    except Exception:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure", exc_info=True)

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )
