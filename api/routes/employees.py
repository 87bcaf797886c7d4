# SPDX-License-Identifier: Apache-2.0

"""
Employee intake endpoints.

Prepares new employee records: the ID number is validated, age and
gender are derived from it and the next employee ID is issued. Storing
the prepared record is left to the merchant's document store.
"""

from flask import request, jsonify, current_app
from flask_openapi3 import APIBlueprint, Tag
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
import logging

from domain import employees as employee_domain
from middleware.error_handler import InvalidIdNumberException
from models.requests import EmployeeIntakeRequest
from models.responses import EmployeeResponse, ValidationErrorResponse

# Set up logging and tracing
logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

employees_tag = Tag(name="Employees", description="Employee intake")
employees_bp = APIBlueprint(
    'employees',
    __name__,
    url_prefix='/api/employees',
    abp_tags=[employees_tag]
)


@employees_bp.post(
    '/intake',
    responses={201: EmployeeResponse, 400: ValidationErrorResponse, 422: ValidationErrorResponse}
)
def prepare_employee_intake():
    """
    Prepare a new employee record.

    Rejects the request with 422 when the ID number does not validate.
    """
    with tracer.start_as_current_span("employee.intake") as span:
        intake_request = current_app.validation_middleware.parse_json_body(EmployeeIntakeRequest)
        company_name = intake_request.company_name or current_app.config['DEFAULT_COMPANY_NAME']

        span.set_attributes({
            "merchant.code": intake_request.merchant_code,
            "employee.existing_count": len(intake_request.existing_employee_ids)
        })

        with tracer.start_as_current_span("domain.employee.prepare") as domain_span:
            result = employee_domain.prepare_employee(
                intake_request,
                merchant_code=intake_request.merchant_code,
                company_name=company_name,
                existing_ids=intake_request.existing_employee_ids
            )
            domain_span.set_attributes({
                "domain.operation": "prepare_employee",
                "domain.result": "success" if result.success else "failed"
            })

        if not result.success:
            span.set_status(Status(StatusCode.ERROR, result.error_reason.value))
            logger.warning(
                "Employee intake rejected",
                extra={
                    "merchant_code": intake_request.merchant_code,
                    "error_reason": result.error_reason.value
                }
            )
            raise InvalidIdNumberException(
                result.error_message,
                [{
                    "field": "id_number",
                    "message": message,
                    "type": result.error_reason.value,
                    "input": None
                } for message in result.validation_errors]
            )

        employee = result.employee
        logger.info(
            "Employee record prepared",
            extra={
                "merchant_code": employee.merchant_code,
                "employee_id": employee.id
            }
        )

        body = EmployeeResponse(**employee.model_dump()).model_dump(mode="json", exclude={"links"})
        response = current_app.hal_formatter.format_employee(body, request.path)
        return jsonify(response), 201
