# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
HAL (Hypertext Application Language) response formatting utilities.
Implements HATEOAS responses with affordance links for identity and employee resources.
"""

from typing import Dict, List, Any, Optional
from urllib.parse import urljoin

from models.responses import HalLink


class HalLinkBuilder:
    """Builder for HAL links with proper URL construction."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip('/') + '/'

    def build_link(
        self,
        path: str,
        method: str = "GET",
        content_type: Optional[str] = None,
        title: Optional[str] = None,
        templated: bool = False
    ) -> HalLink:
        """Build a HAL link with proper URL construction."""
        href = urljoin(self.base_url, path.lstrip('/'))

        return HalLink(
            href=href,
            method=method,
            type=content_type,
            title=title,
            templated=templated
        )

    def build_self_link(self, resource_path: str, method: str = "GET") -> HalLink:
        """Build self link for a resource."""
        return self.build_link(resource_path, method=method, title="Self")

    def build_action_link(
        self,
        path: str,
        title: str,
        method: str = "POST"
    ) -> HalLink:
        """Build action link accepting a JSON body."""
        return self.build_link(
            path,
            method=method,
            content_type="application/json",
            title=title
        )


class AffordanceLinkBuilder:
    """Builder for affordance links based on resource state."""

    def __init__(self, base_url: str):
        self.link_builder = HalLinkBuilder(base_url)

    def build_identity_affordances(self, is_valid: Optional[bool], self_path: str) -> Dict[str, HalLink]:
        """Build affordance links for a decoded identifier."""
        links = {
            'self': self.link_builder.build_self_link(self_path, method="POST"),
            'decode': self.link_builder.build_action_link(
                "/api/identity/decode", title="Decode an ID number"
            )
        }

        # A valid identifier can be used to take on an employee
        if is_valid:
            links['intake'] = self.link_builder.build_action_link(
                "/api/employees/intake", title="Prepare employee record"
            )

        return links

    def build_employee_affordances(self, self_path: str) -> Dict[str, HalLink]:
        """Build affordance links for a prepared, not yet stored, employee."""
        return {
            'self': self.link_builder.build_self_link(self_path, method="POST"),
            'decode': self.link_builder.build_action_link(
                "/api/identity/decode", title="Decode an ID number"
            )
        }


class HalResponseBuilder:
    """Main HAL response builder."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip('/')
        self.link_builder = HalLinkBuilder(base_url)
        self.affordance_builder = AffordanceLinkBuilder(base_url)

    def build_resource_response(
        self,
        data: Dict[str, Any],
        resource_type: str,
        resource_path: str
    ) -> Dict[str, Any]:
        """Build a HAL resource response with appropriate affordance links."""
        response = dict(data)

        if resource_type == "identity":
            links = self.affordance_builder.build_identity_affordances(
                data.get('valid'),
                resource_path
            )
        elif resource_type == "employee":
            links = self.affordance_builder.build_employee_affordances(resource_path)
        else:
            links = {'self': self.link_builder.build_self_link(resource_path)}

        response['_links'] = {rel: link.model_dump(exclude_none=True) for rel, link in links.items()}
        return response

    def build_error_response(
        self,
        error_type: str,
        title: str,
        status: int,
        detail: str,
        instance: str,
        validation_errors: Optional[List[Dict[str, Any]]] = None
    ) -> Dict[str, Any]:
        """Build RFC 7807 compliant error response with HAL links."""
        error_response = {
            'type': f"{self.base_url}/problems/{error_type}",
            'title': title,
            'status': status,
            'detail': detail,
            'instance': instance
        }

        if validation_errors:
            error_response['errors'] = validation_errors

        links = {
            'help': self.link_builder.build_link(
                f"/docs/errors#{error_type}",
                title="Error documentation"
            )
        }

        if error_type in ("validation-error", "invalid-id-number"):
            links['schema'] = self.link_builder.build_link(
                "/openapi/openapi.json",
                title="API schema"
            )

        error_response['_links'] = {rel: link.model_dump(exclude_none=True) for rel, link in links.items()}
        return error_response


class HalFormatter:
    """High-level HAL formatter with convenience methods."""

    def __init__(self, base_url: str):
        self.builder = HalResponseBuilder(base_url)

    def format_identity(self, identity: Dict[str, Any], path: str) -> Dict[str, Any]:
        """Format a decoded identifier with HAL links."""
        return self.builder.build_resource_response(identity, "identity", path)

    def format_employee(self, employee: Dict[str, Any], path: str) -> Dict[str, Any]:
        """Format a prepared employee with HAL links."""
        return self.builder.build_resource_response(employee, "employee", path)

    def format_validation_error(
        self,
        detail: str,
        instance: str,
        validation_errors: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Format a validation error response."""
        return self.builder.build_error_response(
            "validation-error",
            "Validation Error",
            400,
            detail,
            instance,
            validation_errors
        )

    def format_invalid_id_number_error(
        self,
        detail: str,
        instance: str,
        validation_errors: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Format a rejected national identifier."""
        return self.builder.build_error_response(
            "invalid-id-number",
            "Invalid ID Number",
            422,
            detail,
            instance,
            validation_errors
        )

    def format_not_found_error(
        self,
        detail: str,
        instance: str
    ) -> Dict[str, Any]:
        """Format a not found error response."""
        return self.builder.build_error_response(
            "resource-not-found",
            "Resource Not Found",
            404,
            detail,
            instance
        )

    def format_server_error(
        self,
        detail: str,
        instance: str
    ) -> Dict[str, Any]:
        """Format a server error response."""
        return self.builder.build_error_response(
            "internal-server-error",
            "Internal Server Error",
            500,
            detail,
            instance
        )


# Convenience function for creating HAL formatter
def create_hal_formatter(base_url: str) -> HalFormatter:
    """Create a HAL formatter instance."""
    return HalFormatter(base_url)
