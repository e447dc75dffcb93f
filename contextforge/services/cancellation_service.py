"""
Request cancellation API service.
"""

import logging

from ..core.context import RequestContext
from ..schemas.cancellation_models import (
    CancellationRequest,
    CancellationResponse,
    CancellationStatus,
)
from ..schemas.response import Response
from ..utils.url_utils import escape_path_segment
from .base import BaseService


logger = logging.getLogger(__name__)


class CancellationService(BaseService):
    """Cancel in-flight gateway requests and query their status."""

    def cancel(
        self,
        ctx: RequestContext | None,
        request: CancellationRequest | None,
    ) -> tuple[CancellationResponse | None, Response]:
        """
        Request cancellation of an in-flight request.

        Raises:
            ValueError: If request is None
        """
        if request is None:
            raise ValueError("cancellation request is nil")
        logger.info(f"Cancelling request: {request.request_id}")
        return self._send(ctx, "POST", "cancellation/cancel", body=request, dest=CancellationResponse)

    def status(
        self,
        ctx: RequestContext | None,
        request_id: str,
    ) -> tuple[CancellationStatus | None, Response]:
        path = f"cancellation/status/{escape_path_segment(request_id)}"
        return self._send(ctx, "GET", path, dest=CancellationStatus)
