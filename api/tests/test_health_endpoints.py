# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for health check endpoints.
"""

import psutil
from unittest.mock import patch

from domain.identity import DecodedIdentity
from models.enums import IdentityErrorReason
from services.health import HealthCheckService


class TestHealthCheckEndpoint:
    """Test health check endpoint."""

    def test_health_check_success(self, client):
        """Test healthy service reports 200."""
        response = client.get('/api/healthz')

        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "healthy"
        assert data["service"] == "merchant-hub-api"
        assert data["environment"] == "test"
        assert data["checks"]["identity_decoder"]["status"] == "healthy"
        assert "response_time_ms" in data

    def test_health_check_feature_flags(self, client):
        response = client.get('/api/healthz')

        flags = response.get_json()["feature_flags"]
        assert flags["otel_enabled"] is False

    def test_health_check_hal_links(self, client):
        response = client.get('/api/healthz')

        assert response.get_json()["_links"]["self"]["href"] == "https://api.example.com/api/healthz"

    def test_health_check_unhealthy_decoder(self, client):
        """Test a failing decoder self-check reports 503."""
        with patch('services.health.decode', return_value=DecodedIdentity.invalid(IdentityErrorReason.CHECKSUM_FAILED)):
            response = client.get('/api/healthz')

        assert response.status_code == 503
        data = response.get_json()
        assert data["status"] == "unhealthy"
        assert "error" in data["checks"]["identity_decoder"]

    def test_root_endpoint(self, client):
        response = client.get('/')

        assert response.status_code == 200
        data = response.get_json()
        assert data["message"] == "Merchant Hub API"
        assert data["health"] == "/api/healthz"


class TestHealthCheckService:
    """Test health check service."""

    def test_health_service_initialization(self):
        service = HealthCheckService("merchant-hub-api", "2.1.0")

        assert service.service_name == "merchant-hub-api"
        assert service.service_version == "2.1.0"

    def test_comprehensive_health(self):
        health = HealthCheckService("merchant-hub-api").get_comprehensive_health()

        assert health["status"] == "healthy"
        assert health["version"] == "1.0.0"
        assert health["timestamp"].endswith("Z")

    def test_system_metrics_collection(self):
        health = HealthCheckService("merchant-hub-api").get_comprehensive_health()

        metrics = health["system_metrics"]
        assert "memory" in metrics
        assert metrics["memory"]["total_mb"] > 0

    def test_system_metrics_failure(self):
        """Test metric collection errors do not fail the health check."""
        with patch('services.health.psutil.virtual_memory', side_effect=psutil.Error("no access")):
            health = HealthCheckService("merchant-hub-api").get_comprehensive_health()

        assert health["status"] == "healthy"
        assert "error" in health["system_metrics"]
