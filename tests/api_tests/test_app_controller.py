"""Tests for the health and info endpoints."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from api.controllers import AppController


@pytest.mark.api
class TestAppController:
    @pytest.fixture
    def controller(self) -> AppController:
        return AppController(service_provider=MagicMock(), mapper=MagicMock(), mediator=MagicMock())

    @pytest.mark.asyncio
    async def test_health(self, controller: AppController) -> None:
        response = await controller.health()

        assert response["online"] is True
        assert response["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_info(self, controller: AppController, test_settings: Any) -> None:
        response = await controller.info()

        assert response == {
            "name": test_settings.app_name,
            "version": test_settings.app_version,
            "environment": test_settings.environment,
        }
