# SPDX-License-Identifier: Apache-2.0

"""
National identifier endpoints.

Decoding never fails with an HTTP error for a bad ID number: an invalid
identifier is an ordinary result carrying its reason code. Only
malformed request bodies are rejected.
"""

from flask import request, jsonify, current_app
from flask_openapi3 import APIBlueprint, Tag
from opentelemetry import trace
import logging
from typing import Any, Dict

from domain import identity as identity_domain
from domain.identity import DecodedIdentity
from models.enums import IdentityCheckStatus
from models.requests import DecodeIdentityRequest
from models.responses import (
    DecodedIdentityResponse, IdentityCheckResponse, ValidationErrorResponse
)

# Set up logging and tracing
logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

identity_tag = Tag(name="Identity", description="South African ID number validation")
identity_bp = APIBlueprint(
    'identity',
    __name__,
    url_prefix='/api/identity',
    abp_tags=[identity_tag]
)


def identity_fields(identity: DecodedIdentity) -> Dict[str, Any]:
    """Serialize a decoded identity to its JSON fields."""
    return DecodedIdentityResponse(
        valid=identity.valid,
        date_of_birth=identity.date_of_birth,
        age=identity.age,
        sex=identity.sex,
        citizen=identity.citizen,
        error_reason=identity.error_reason,
        error_message=identity.error_message
    ).model_dump(mode="json", exclude={"links"})


@identity_bp.post('/decode', responses={200: DecodedIdentityResponse, 400: ValidationErrorResponse})
def decode_identity():
    """
    Decode a national identifier.

    Returns the date of birth, age, sex and citizenship for a valid ID
    number, or the reason code for an invalid one.
    """
    with tracer.start_as_current_span("identity.decode") as span:
        decode_request = current_app.validation_middleware.parse_json_body(DecodeIdentityRequest)

        with tracer.start_as_current_span("domain.identity.decode") as domain_span:
            identity = identity_domain.decode(decode_request.id_number)
            domain_span.set_attributes({
                "domain.operation": "decode",
                "domain.result": "valid" if identity.valid else "invalid"
            })

        if identity.error_reason is not None:
            span.set_attribute("identity.error_reason", identity.error_reason.value)

        # Digits are personal data: log the outcome only
        logger.info(
            "ID number decoded",
            extra={
                "valid": identity.valid,
                "error_reason": identity.error_reason.value if identity.error_reason else None
            }
        )

        response = current_app.hal_formatter.format_identity(identity_fields(identity), request.path)
        return jsonify(response), 200


@identity_bp.post('/check', responses={200: IdentityCheckResponse, 400: ValidationErrorResponse})
def check_identity():
    """
    Check an ID number while it is being typed.

    Reports ``pending`` until 13 characters have been entered, then the
    full decoding result.
    """
    with tracer.start_as_current_span("identity.check") as span:
        check_request = current_app.validation_middleware.parse_json_body(DecodeIdentityRequest)

        identity = identity_domain.check_identifier_as_typed(check_request.id_number)

        if identity is None:
            status = IdentityCheckStatus.PENDING
            fields = {}
        else:
            status = IdentityCheckStatus.VALID if identity.valid else IdentityCheckStatus.INVALID
            fields = identity_fields(identity)

        span.set_attribute("identity.check_status", status.value)
        logger.debug("ID number checked", extra={"check_status": status.value})

        body = IdentityCheckResponse(status=status, **fields).model_dump(mode="json", exclude={"links"})
        response = current_app.hal_formatter.format_identity(body, request.path)
        return jsonify(response), 200
