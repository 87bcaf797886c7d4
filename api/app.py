"""
Merchant Hub API - Flask Application Entry Point

This module initializes the Flask application with OpenAPI 3.0 support,
configures middleware, and registers the identity and employee intake
endpoints of the merchant business-management platform.
"""

import os
from datetime import datetime
from flask import jsonify
from flask_openapi3 import OpenAPI, Info, Tag
from observability.config import setup_observability, SERVICE_NAME
from observability.middleware import add_observability_middleware

# Import middleware and utilities
from middleware.cors import configure_cors
from middleware.error_handler import ErrorHandlerMiddleware, register_custom_error_handlers
from middleware.validation import ValidationMiddleware
from models.responses import HealthCheckResponse
from services.hal import create_hal_formatter
from services.health import HealthCheckService

SERVICE_VERSION = os.getenv('SERVICE_VERSION', '1.0.0')
DOCS_ENABLED = os.getenv('DOCS_ENABLED', 'true').lower() == 'true'

# Initialize observability first
setup_observability()

# OpenAPI info
info = Info(
    title="Merchant Hub API",
    version=SERVICE_VERSION,
    description="South African ID number validation and employee intake for merchant workshops"
)

health_tag = Tag(name="Health", description="System health and status")

# Create Flask app with OpenAPI
app = OpenAPI(__name__, info=info, doc_ui=DOCS_ENABLED)

# Add observability middleware
add_observability_middleware(app)

# Environment configuration
app.config['ENVIRONMENT'] = os.getenv('ENVIRONMENT', 'development')
app.config['DEBUG'] = app.config['ENVIRONMENT'] == 'development'
app.config['DOCS_ENABLED'] = DOCS_ENABLED
app.config['OTEL_ENABLED'] = os.getenv('OTEL_ENABLED', 'true').lower() == 'true'

# API configuration
app.config['BASE_URL'] = os.getenv('BASE_URL', 'http://localhost:5000')

# Employee intake: company used for employee ID prefixes when none is given
app.config['DEFAULT_COMPANY_NAME'] = os.getenv('DEFAULT_COMPANY_NAME', 'ROC')

# Initialize services
health_service = HealthCheckService(SERVICE_NAME, SERVICE_VERSION)

# Initialize middleware
hal_formatter = create_hal_formatter(app.config['BASE_URL'])
validation_middleware = ValidationMiddleware()
error_handler = ErrorHandlerMiddleware(app, app.config['BASE_URL'])

# Configure CORS
cors_middleware = configure_cors(app, allow_credentials=True)

# Register custom error handlers
register_custom_error_handlers(app, hal_formatter)

# Make services available to routes
app.hal_formatter = hal_formatter
app.validation_middleware = validation_middleware

# Register routes
from routes.identity import identity_bp
from routes.employees import employees_bp

app.register_api(identity_bp)
app.register_api(employees_bp)


@app.get('/api/healthz', tags=[health_tag], responses={200: HealthCheckResponse})
def health_check():
    """Health check endpoint with decoder self-check"""
    health_data = health_service.get_comprehensive_health()
    status_code = 200 if health_data["status"] == "healthy" else 503

    health_response = hal_formatter.builder.build_resource_response(
        health_data,
        "health",
        "/api/healthz"
    )

    return jsonify(health_response), status_code


@app.get('/')
def root():
    """Root endpoint"""
    return jsonify({
        "message": "Merchant Hub API",
        "version": SERVICE_VERSION,
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "docs": "/openapi" if app.config['DOCS_ENABLED'] else None,
        "health": "/api/healthz"
    })


if __name__ == '__main__':
    # Development server
    app.run(
        host='0.0.0.0',
        port=int(os.getenv('PORT', 5000)),
        debug=app.config['DEBUG']
    )
