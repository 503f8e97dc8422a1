# src/services/health_checker.py

"""Health payload for the proxy and connectivity probes against it."""

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone

from curl_cffi import requests as curl_requests

logger = logging.getLogger("smartshop.health")

_HEALTH_TIMEOUT = 10  # seconds per backend
_SLOW_MS = 5000


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    moment = now or datetime.now(timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def build_health_payload(
    server_name: str, now: datetime | None = None
) -> dict[str, str]:
    """Body returned by ``GET /api/health``."""
    return {
        "serverName": server_name,
        "status": "ok",
        "time": utc_timestamp(now),
    }


@dataclass
class HealthResult:
    """Result of probing one backend deployment."""

    target: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str
    server_name: str = ""


def probe_backend(
    base_url: str,
    session: curl_requests.Session | None = None,
) -> HealthResult:
    """Call ``/api/health`` on *base_url* and classify the answer."""
    client = session or curl_requests.Session()
    url = f"{base_url.rstrip('/')}/api/health"

    start = time.monotonic()
    try:
        resp = client.get(url, timeout=_HEALTH_TIMEOUT)
        elapsed_ms = (time.monotonic() - start) * 1000

        if resp.status_code != 200:
            return HealthResult(
                target=base_url,
                status="down",
                latency_ms=elapsed_ms,
                message=f"HTTP {resp.status_code}",
            )

        body = resp.json()
        server_name = str(body.get("serverName", ""))
        if body.get("status") != "ok":
            return HealthResult(
                target=base_url,
                status="down",
                latency_ms=elapsed_ms,
                message=f"status={body.get('status')!r}",
                server_name=server_name,
            )

        if elapsed_ms > _SLOW_MS:
            return HealthResult(
                target=base_url,
                status="slow",
                latency_ms=elapsed_ms,
                message="High latency",
                server_name=server_name,
            )

        return HealthResult(
            target=base_url,
            status="ok",
            latency_ms=elapsed_ms,
            message="",
            server_name=server_name,
        )

    except Exception as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult(
            target=base_url,
            status="down",
            latency_ms=elapsed_ms,
            message=str(exc)[:80],
        )


class HealthChecker:
    """Runs concurrent health probes against backend deployments."""

    def __init__(self, targets: list[str]) -> None:
        self.targets = targets

    async def check_all(self) -> list[HealthResult]:
        """Probe every configured backend concurrently."""
        tasks = [
            asyncio.to_thread(probe_backend, target)
            for target in self.targets
        ]
        results: list[HealthResult] = list(await asyncio.gather(*tasks))
        for r in results:
            logger.info(
                "Health check %s (%s): %s (%.0fms) %s",
                r.target,
                r.server_name or "?",
                r.status,
                r.latency_ms,
                r.message,
            )
        return results
