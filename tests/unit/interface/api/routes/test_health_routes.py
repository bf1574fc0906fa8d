"""Unit tests for health routes."""

import pytest

from votp.config import Settings
from votp.domain.value import DEFAULT_TRACKING_POLICY
from votp.interface.api.routes.health import health_check


class TestHealthCheck:
    """Tests for health_check."""

    @pytest.mark.asyncio
    async def test_reports_tracking_policy(self):
        response = await health_check(
            settings=Settings(), tracking_policy=DEFAULT_TRACKING_POLICY
        )

        assert response.status == "healthy"
        assert response.tracking_policy == "v1"
