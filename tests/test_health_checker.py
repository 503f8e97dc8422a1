# tests/test_health_checker.py

"""Tests for the health payload and the backend health probe."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

from curl_cffi.requests.errors import RequestsError

from src.services.health_checker import (
    HealthChecker,
    HealthResult,
    build_health_payload,
    probe_backend,
    utc_timestamp,
)


class TestHealthPayload(unittest.TestCase):
    """Tests for the /api/health body."""

    def test_timestamp_has_millis_and_z(self) -> None:
        moment = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)
        self.assertEqual(utc_timestamp(moment), "2024-05-01T12:30:45.123Z")

    def test_timestamp_converts_to_utc(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        moment = datetime(2024, 5, 1, 14, 0, 0, tzinfo=plus_two)
        self.assertEqual(utc_timestamp(moment), "2024-05-01T12:00:00.000Z")

    def test_payload(self) -> None:
        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        self.assertEqual(
            build_health_payload("node-a", moment),
            {
                "serverName": "node-a",
                "status": "ok",
                "time": "2024-01-02T03:04:05.000Z",
            },
        )


class TestProbeBackend(unittest.TestCase):
    """Tests for the per-backend health probe."""

    def _session(self, status: int = 200, body: object = None) -> MagicMock:
        resp = MagicMock()
        resp.status_code = status
        resp.json.return_value = (
            body if body is not None
            else {"serverName": "node-a", "status": "ok"}
        )
        session = MagicMock()
        session.get.return_value = resp
        return session

    def test_ok_status(self) -> None:
        session = self._session()
        result = probe_backend("http://localhost:3000/", session=session)
        self.assertEqual(result.status, "ok")
        self.assertEqual(result.server_name, "node-a")
        self.assertEqual(result.target, "http://localhost:3000/")
        url = session.get.call_args[0][0]
        self.assertEqual(url, "http://localhost:3000/api/health")

    @patch("src.services.health_checker.time")
    def test_slow_response(self, mock_time: MagicMock) -> None:
        mock_time.monotonic.side_effect = [0.0, 6.0]
        result = probe_backend("http://b", session=self._session())
        self.assertEqual(result.status, "slow")
        self.assertGreater(result.latency_ms, 5000)

    def test_non_200_is_down(self) -> None:
        result = probe_backend("http://b", session=self._session(status=502))
        self.assertEqual(result.status, "down")
        self.assertIn("502", result.message)

    def test_bad_status_field_is_down(self) -> None:
        session = self._session(body={"serverName": "x", "status": "degraded"})
        result = probe_backend("http://b", session=session)
        self.assertEqual(result.status, "down")
        self.assertEqual(result.server_name, "x")

    def test_network_error_is_down(self) -> None:
        session = MagicMock()
        session.get.side_effect = RequestsError("connection refused")
        result = probe_backend("http://b", session=session)
        self.assertEqual(result.status, "down")
        self.assertIn("connection refused", result.message)


class TestHealthChecker(unittest.IsolatedAsyncioTestCase):
    """Tests for the concurrent HealthChecker."""

    @patch("src.services.health_checker.probe_backend")
    async def test_checks_every_target(self, mock_probe: MagicMock) -> None:
        mock_probe.side_effect = lambda target: HealthResult(
            target=target, status="ok", latency_ms=1.0, message=""
        )
        results = await HealthChecker(["http://a", "http://b"]).check_all()
        self.assertEqual([r.target for r in results], ["http://a", "http://b"])
        self.assertEqual(mock_probe.call_count, 2)


if __name__ == "__main__":
    unittest.main()
