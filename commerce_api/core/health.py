"""
Liveness, readiness and process metrics endpoints.

Response bodies follow the "Health Check Response Format for HTTP APIs" draft:
an overall ``status`` of pass/warn/fail plus one entry per component check.
"""

import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional

import psutil
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .logging_config import get_logger

logger = get_logger(__name__)


class HealthStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ServiceHealth:
    """
    Builds the health router for one service.

    ``ping`` raises when the backing store is unreachable; it is called on
    every readiness probe.
    """

    def __init__(self, service_name: str, version: str = "1.0.0", ping: Optional[Callable[[], None]] = None):
        self.service_name = service_name
        self.version = version
        self.ping = ping
        self.start_time = time.time()
        self.checks_performed = 0

    def create_health_router(self) -> APIRouter:
        router = APIRouter(tags=["health"])

        @router.get("/health", status_code=status.HTTP_200_OK)
        async def health_check() -> Dict[str, Any]:
            return {
                "status": HealthStatus.PASS,
                "service": self.service_name,
                "version": self.version,
                "timestamp": _now(),
            }

        @router.get("/health/live", status_code=status.HTTP_200_OK)
        async def liveness() -> Dict[str, Any]:
            return {"status": "alive"}

        @router.get("/health/ready")
        async def readiness() -> JSONResponse:
            checks = await run_in_threadpool(self.run_checks)
            overall = self.overall_status(checks)
            status_code = status.HTTP_503_SERVICE_UNAVAILABLE if overall == HealthStatus.FAIL else status.HTTP_200_OK
            return JSONResponse(
                status_code=status_code,
                content={
                    "status": overall.value,
                    "version": self.version,
                    "serviceId": self.service_name,
                    "checks": checks,
                    "timestamp": _now(),
                },
            )

        @router.get("/metrics")
        async def metrics() -> Dict[str, Any]:
            process = psutil.Process()
            memory = process.memory_info()
            return {
                "service": self.service_name,
                "version": self.version,
                "uptime_seconds": time.time() - self.start_time,
                "checks_performed": self.checks_performed,
                "timestamp": _now(),
                "system": {
                    "memory_rss_bytes": memory.rss,
                    "memory_vms_bytes": memory.vms,
                    "cpu_percent": process.cpu_percent(),
                    "num_threads": process.num_threads(),
                },
            }

        return router

    def run_checks(self) -> Dict[str, Dict[str, Any]]:
        self.checks_performed += 1
        return {
            "database:connectivity": self._check_database(),
            "storage:disk_space": self._check_disk_space(),
            "system:memory": self._check_memory(),
        }

    def _check_database(self) -> Dict[str, Any]:
        if self.ping is None:
            return {"status": HealthStatus.PASS.value, "componentType": "datastore", "time": _now()}
        start = time.perf_counter()
        try:
            self.ping()
        except Exception as exc:
            logger.error(f"Database health check failed: {exc}")
            return {
                "status": HealthStatus.FAIL.value,
                "componentType": "datastore",
                "output": str(exc),
                "time": _now(),
            }
        return {
            "status": HealthStatus.PASS.value,
            "componentType": "datastore",
            "observedValue": round((time.perf_counter() - start) * 1000, 2),
            "observedUnit": "ms",
            "time": _now(),
        }

    def _check_disk_space(self) -> Dict[str, Any]:
        try:
            free_gb = psutil.disk_usage('/').free / (1024 ** 3)
        except OSError as e:
            return self._unavailable("system", e)
        return {
            "status": self._grade(free_gb, fail_below=1, warn_below=5).value,
            "componentType": "system",
            "observedValue": round(free_gb, 2),
            "observedUnit": "GB",
            "time": _now(),
        }

    def _check_memory(self) -> Dict[str, Any]:
        try:
            available_mb = psutil.virtual_memory().available / (1024 ** 2)
        except (OSError, psutil.Error) as e:
            return self._unavailable("system", e)
        return {
            "status": self._grade(available_mb, fail_below=100, warn_below=500).value,
            "componentType": "system",
            "observedValue": round(available_mb, 2),
            "observedUnit": "MB",
            "time": _now(),
        }

    @staticmethod
    def _unavailable(component_type: str, error: Exception) -> Dict[str, Any]:
        return {
            "status": HealthStatus.WARN.value,
            "componentType": component_type,
            "output": str(error),
            "time": _now(),
        }

    @staticmethod
    def _grade(value: float, fail_below: float, warn_below: float) -> HealthStatus:
        if value < fail_below:
            return HealthStatus.FAIL
        if value < warn_below:
            return HealthStatus.WARN
        return HealthStatus.PASS

    @staticmethod
    def overall_status(checks: Dict[str, Dict[str, Any]]) -> HealthStatus:
        statuses = {check.get("status") for check in checks.values()}
        if HealthStatus.FAIL.value in statuses:
            return HealthStatus.FAIL
        if HealthStatus.WARN.value in statuses:
            return HealthStatus.WARN
        return HealthStatus.PASS
