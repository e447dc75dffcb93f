"""
Unit tests for the request cancellation service.
"""

import pytest

from contextforge.schemas.cancellation_models import CancellationRequest


BASE = "https://gateway.example.com/api/"


@pytest.mark.unit
class TestCancellationService:
    """Tests for CancellationService."""

    def test_cancel(self, client, session, ctx):
        session.queue(body={"status": "cancelled", "requestId": "req-1", "reason": "user aborted"})
        result, _ = client.cancel.cancel(ctx, CancellationRequest(request_id="req-1", reason="user aborted"))
        assert session.last_request.method == "POST"
        assert session.last_request.url == BASE + "cancellation/cancel"
        assert session.last_json() == {"requestId": "req-1", "reason": "user aborted"}
        assert result.status == "cancelled"
        assert result.request_id == "req-1"

    def test_cancel_without_reason(self, client, session, ctx):
        session.queue(body={"status": "queued", "requestId": "req-1"})
        client.cancel.cancel(ctx, CancellationRequest(request_id="req-1"))
        assert session.last_json() == {"requestId": "req-1"}

    def test_cancel_requires_request(self, client, session, ctx):
        with pytest.raises(ValueError, match="cancellation request is nil"):
            client.cancel.cancel(ctx, None)
        assert session.sent == []

    def test_status(self, client, session, ctx):
        session.queue(
            body={
                "name": "tools/call",
                "registered_at": 1714557600.5,
                "cancelled": True,
                "cancelled_at": 1714557601.0,
                "cancel_reason": "timeout",
            }
        )
        status, _ = client.cancel.status(ctx, "req 1")
        assert session.last_request.method == "GET"
        assert session.last_request.url == BASE + "cancellation/status/req%201"
        assert status.cancelled is True
        assert status.cancel_reason == "timeout"
