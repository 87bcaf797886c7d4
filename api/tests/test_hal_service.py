# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for HAL response formatting.
"""

import pytest

from services.hal import (
    AffordanceLinkBuilder, HalFormatter, HalLinkBuilder, create_hal_formatter
)


class TestHalLinkBuilder:
    """Test HAL link construction."""

    def setup_method(self):
        """Set up test fixtures."""
        self.builder = HalLinkBuilder("https://api.example.com/")

    def test_build_link(self):
        """Test basic link construction."""
        link = self.builder.build_link("/api/healthz")

        assert link.href == "https://api.example.com/api/healthz"
        assert link.method == "GET"
        assert link.type is None

    def test_base_url_with_path_prefix(self):
        """Test links keep a base URL path prefix."""
        builder = HalLinkBuilder("https://example.com/merchant-hub")

        assert builder.build_link("/api/healthz").href == "https://example.com/merchant-hub/api/healthz"

    def test_build_action_link(self):
        """Test action links accept JSON."""
        link = self.builder.build_action_link("/api/identity/decode", title="Decode")

        assert link.method == "POST"
        assert link.type == "application/json"
        assert link.title == "Decode"


class TestAffordanceLinkBuilder:
    """Test state-dependent affordance links."""

    def setup_method(self):
        """Set up test fixtures."""
        self.builder = AffordanceLinkBuilder("https://api.example.com")

    def test_valid_identity_offers_intake(self):
        """Test a valid identifier links to employee intake."""
        links = self.builder.build_identity_affordances(True, "/api/identity/decode")

        assert set(links) == {"self", "decode", "intake"}
        assert links["intake"].href == "https://api.example.com/api/employees/intake"
        assert links["self"].method == "POST"

    @pytest.mark.parametrize("is_valid", [False, None])
    def test_invalid_identity_has_no_intake(self, is_valid):
        """Test invalid or pending identifiers do not offer intake."""
        links = self.builder.build_identity_affordances(is_valid, "/api/identity/check")

        assert set(links) == {"self", "decode"}

    def test_employee_affordances(self):
        links = self.builder.build_employee_affordances("/api/employees/intake")

        assert set(links) == {"self", "decode"}


class TestHalFormatter:
    """Test high-level HAL formatting."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = create_hal_formatter("https://api.example.com")

    def test_factory(self):
        assert isinstance(self.formatter, HalFormatter)

    def test_format_identity(self):
        """Test identity resources keep their fields and gain links."""
        data = {"valid": True, "age": 45}

        response = self.formatter.format_identity(data, "/api/identity/decode")

        assert response["valid"] is True
        assert response["age"] == 45
        assert "intake" in response["_links"]
        assert "_links" not in data

    def test_links_omit_unset_attributes(self):
        """Test serialized links drop empty attributes."""
        response = self.formatter.format_identity({"valid": False}, "/api/identity/decode")

        assert "type" not in response["_links"]["self"]
        assert response["_links"]["decode"]["type"] == "application/json"

    def test_generic_resource_has_self_link(self):
        response = self.formatter.builder.build_resource_response({"status": "healthy"}, "health", "/api/healthz")

        assert response["_links"] == {
            "self": {
                "href": "https://api.example.com/api/healthz",
                "method": "GET",
                "title": "Self",
                "templated": False
            }
        }

    def test_format_validation_error(self):
        """Test RFC 7807 validation error shape."""
        errors = [{"field": "id_number", "message": "Field required", "type": "missing", "input": None}]

        response = self.formatter.format_validation_error("Bad body", "/api/identity/decode", errors)

        assert response["type"] == "https://api.example.com/problems/validation-error"
        assert response["title"] == "Validation Error"
        assert response["status"] == 400
        assert response["detail"] == "Bad body"
        assert response["instance"] == "/api/identity/decode"
        assert response["errors"] == errors
        assert set(response["_links"]) == {"help", "schema"}

    def test_format_invalid_id_number_error(self):
        response = self.formatter.format_invalid_id_number_error(
            "Please enter a valid South African ID number",
            "/api/employees/intake",
            [{"field": "id_number", "message": "Invalid month", "type": "BAD_MONTH", "input": None}]
        )

        assert response["status"] == 422
        assert response["type"].endswith("/problems/invalid-id-number")
        assert response["errors"][0]["type"] == "BAD_MONTH"

    def test_server_error_has_no_errors_list(self):
        response = self.formatter.format_server_error("Boom", "/api/healthz")

        assert response["status"] == 500
        assert "errors" not in response
        assert set(response["_links"]) == {"help"}

    def test_format_not_found_error(self):
        response = self.formatter.format_not_found_error("Not here", "/nowhere")

        assert response["status"] == 404
        assert response["title"] == "Resource Not Found"
