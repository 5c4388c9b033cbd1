"""
AWS Lambda handler for the legal-aid liquidation API.

This is the production entry point for AWS Lambda deployments.
For local development, use main.py (Flask app) instead.
"""

import base64
import json
import logging

from liquidation import LiquidationProcessor, TemplateError, config
from liquidation.court import COURT_NAME, JUDGES
from liquidation.models import CaseRecord

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

ENVIRONMENT = config.ENVIRONMENT

# Initialize processor (reused across warm invocations)
processor = LiquidationProcessor()

# CORS headers for API Gateway
CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


def _json_response(status_code, payload):
    return {"statusCode": status_code, "headers": CORS_HEADERS, "body": json.dumps(payload)}


def lambda_handler(event, context):
    """
    Main Lambda entry point.

    Handles API Gateway events for:
    - GET /health
    - GET /api
    - GET /judges
    - POST /liquidate
    - POST /decree
    - OPTIONS (CORS preflight)
    """
    # Handle CORS preflight
    http_method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method", "")
    if http_method == "OPTIONS":
        return {"statusCode": 200, "headers": CORS_HEADERS, "body": ""}

    # Get path (supports both REST API and HTTP API formats)
    path = event.get("path") or event.get("rawPath", "")

    # Route to appropriate handler
    if path == "/health" and http_method == "GET":
        return handle_health()
    elif path == "/api" and http_method == "GET":
        return handle_api_info()
    elif path == "/judges" and http_method == "GET":
        return handle_judges()
    elif path == "/liquidate" and http_method == "POST":
        return handle_liquidate(event)
    elif path == "/decree" and http_method == "POST":
        return handle_decree(event)
    else:
        return _json_response(404, {"error": "Not found", "path": path})


def handle_health():
    """Health check endpoint."""
    return _json_response(200, {"status": "healthy", "environment": ENVIRONMENT})


def handle_api_info():
    """API information endpoint."""
    return _json_response(
        200,
        {
            "status": "ok",
            "message": f"Liquidazione gratuito patrocinio - {COURT_NAME}",
            "version": "2.3",
            "environment": ENVIRONMENT,
            "runtime": "AWS Lambda",
            "endpoints": {
                "liquidate": "/liquidate [POST]",
                "decree": "/decree [POST]",
                "judges": "/judges [GET]",
                "health": "/health [GET]",
            },
        },
    )


def handle_judges():
    """Court roster endpoint."""
    return _json_response(200, {"court": COURT_NAME, "judges": list(JUDGES)})


def _parse_body(event):
    """Return the decoded JSON body, or None when the body is empty."""
    body = event.get("body", "")
    if isinstance(body, str):
        if not body:
            return None
        # Handle base64 encoded body (API Gateway)
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        return json.loads(body)
    return body


def handle_liquidate(event):
    """Compute the liquidation for a case record."""
    try:
        input_data = _parse_body(event)
        if not input_data:
            return _json_response(400, {"error": "No input data provided", "status": "failed"})

        rg_dib = input_data.get("rg_dib") or "unnumbered"
        logger.info(f"Liquidating case: {rg_dib}")

        result = processor.process_from_dict(input_data)

        logger.info(f"Case liquidated successfully: {rg_dib}")

        return _json_response(200, result)

    except json.JSONDecodeError as e:
        logger.error(f"JSON parse error: {str(e)}")
        return _json_response(400, {"error": f"Invalid JSON: {str(e)}", "status": "failed"})

    except (ValueError, KeyError, TypeError) as e:
        # Validation errors from engine (invalid tiers, policies, types)
        logger.error(f"Validation error: {str(e)}")
        return _json_response(400, {"error": f"Validation error: {str(e)}", "status": "validation_failed"})

    except Exception as e:
        # Unexpected errors - log details but return generic message to avoid information disclosure
        logger.error(f"Unexpected processing error: {str(e)}", exc_info=True)
        return _json_response(500, {"error": "An unexpected error occurred during processing", "status": "failed"})


def handle_decree(event):
    """Render the liquidation decree. Binary documents are returned base64-encoded."""
    try:
        input_data = _parse_body(event)
        if not input_data:
            return _json_response(400, {"error": "No input data provided", "status": "failed"})

        params = event.get("queryStringParameters") or {}
        case = CaseRecord.from_dict(input_data)
        logger.info(f"Generating decree for case: {case.rg_dib or 'unnumbered'}")

        document = processor.generate_decree(case, output_format=params.get("format"))

        headers = dict(CORS_HEADERS)
        headers["Content-Type"] = document.media_type
        headers["Content-Disposition"] = f'attachment; filename="{document.filename}"'
        return {
            "statusCode": 200,
            "headers": headers,
            "body": base64.b64encode(document.content).decode("ascii"),
            "isBase64Encoded": True,
        }

    except json.JSONDecodeError as e:
        logger.error(f"JSON parse error: {str(e)}")
        return _json_response(400, {"error": f"Invalid JSON: {str(e)}", "status": "failed"})

    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Validation error: {str(e)}")
        return _json_response(400, {"error": f"Validation error: {str(e)}", "status": "validation_failed"})

    except TemplateError as e:
        logger.error(f"Template error: {str(e)}")
        return _json_response(502, {"error": str(e), "status": "template_error"})

    except Exception as e:
        logger.error(f"Unexpected decree error: {str(e)}", exc_info=True)
        return _json_response(500, {"error": "An unexpected error occurred during processing", "status": "failed"})
