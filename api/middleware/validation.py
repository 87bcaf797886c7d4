# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Request validation middleware using Pydantic models.
Provides request body validation and error formatting.
"""

from flask import request
from typing import Type, TypeVar, Dict, Any, List
from pydantic import BaseModel, ValidationError
from opentelemetry import trace
import logging

from middleware.error_handler import ValidationException

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

M = TypeVar('M', bound=BaseModel)


class ValidationMiddleware:
    """Middleware for request validation using Pydantic models."""

    def format_validation_errors(self, validation_error: ValidationError) -> List[Dict[str, Any]]:
        """
        Format Pydantic validation errors for API response.

        Args:
            validation_error: Pydantic ValidationError

        Returns:
            List of formatted error dictionaries
        """
        errors = []

        for error in validation_error.errors():
            field_path = ".".join(str(loc) for loc in error["loc"])
            errors.append({
                "field": field_path,
                "message": error["msg"],
                "type": error["type"],
                "input": error.get("input")
            })

        return errors

    def parse_json_body(self, model_class: Type[M]) -> M:
        """
        Validate the current request's JSON body against a Pydantic model.

        Args:
            model_class: Pydantic model class for validation

        Returns:
            Validated model instance

        Raises:
            ValidationException: If the body is missing, not JSON or invalid
        """
        with tracer.start_as_current_span("validation.parse_json_body") as span:
            span.set_attributes({
                "validation.model": model_class.__name__,
                "http.method": request.method,
                "http.path": request.path
            })

            # Check content type
            if not request.is_json:
                span.set_attribute("validation.result", "invalid_content_type")
                raise ValidationException(
                    "Request must have Content-Type: application/json",
                    [{
                        "field": "content-type",
                        "message": "Expected application/json",
                        "type": "content_type_error",
                        "input": request.content_type
                    }]
                )

            json_data = request.get_json(silent=True)
            if not isinstance(json_data, dict):
                span.set_attribute("validation.result", "invalid_json")
                raise ValidationException(
                    "Invalid JSON in request body",
                    [{
                        "field": "body",
                        "message": "Expected a JSON object",
                        "type": "json_error",
                        "input": None
                    }]
                )

            try:
                validated_data = model_class(**json_data)
            except ValidationError as e:
                span.set_attribute("validation.result", "validation_error")
                validation_errors = self.format_validation_errors(e)

                logger.warning(
                    "Request validation failed",
                    extra={
                        "model": model_class.__name__,
                        "path": request.path,
                        "method": request.method,
                        "fields": [error["field"] for error in validation_errors]
                    }
                )

                raise ValidationException(
                    f"Request validation failed for {model_class.__name__}",
                    validation_errors
                ) from e

            span.set_attribute("validation.result", "success")
            logger.debug(
                "Request validation successful",
                extra={
                    "model": model_class.__name__,
                    "path": request.path,
                    "method": request.method
                }
            )
            return validated_data
