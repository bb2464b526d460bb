"""Unit tests for backend_profiles.detector."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from backend_profiles.catalog import ServiceBinding, ServiceBindingKind
from backend_profiles.cloud import VCAP_APPLICATION, VCAP_SERVICES
from backend_profiles.detector import BindingDetector
from backend_profiles.errors import PlatformAbsentError, PlatformBindingError


class TestBindingDetector:
    def test_platform_absent_yields_no_bindings(self):
        factory = MagicMock(side_effect=PlatformAbsentError("no cloud"))
        assert BindingDetector(factory).detect() == []
        factory.assert_called_once_with()

    def test_no_source_yields_no_bindings(self):
        assert BindingDetector(lambda: None).detect() == []

    def test_returns_source_bindings(self):
        bindings = [ServiceBinding(ServiceBindingKind.CACHE_STORE)]
        source = MagicMock()
        source.service_bindings.return_value = bindings
        assert BindingDetector(lambda: source).detect() == bindings

    def test_returns_a_list(self):
        source = MagicMock()
        source.service_bindings.return_value = (ServiceBinding(ServiceBindingKind.MESSAGE_BROKER),)
        assert isinstance(BindingDetector(lambda: source).detect(), list)

    def test_other_platform_errors_propagate(self):
        source = MagicMock()
        source.service_bindings.side_effect = PlatformBindingError("bad VCAP_SERVICES")
        with pytest.raises(PlatformBindingError):
            BindingDetector(lambda: source).detect()

    def test_unexpected_factory_errors_propagate(self):
        factory = MagicMock(side_effect=RuntimeError("boom"))
        with pytest.raises(RuntimeError, match="boom"):
            BindingDetector(factory).detect()


class TestDefaultFactory:
    def test_outside_cloud_foundry(self):
        assert BindingDetector().detect() == []

    def test_inside_cloud_foundry(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(VCAP_APPLICATION, "{}")
        monkeypatch.setenv(VCAP_SERVICES, '{"p-redis": [{"name": "cache", "tags": ["redis"]}]}')
        assert BindingDetector().detect() == [ServiceBinding(ServiceBindingKind.CACHE_STORE)]
