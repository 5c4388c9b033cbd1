"""Tests for AWS Lambda handler."""

import base64
import json

import pytest

from liquidation import config
from lambda_handler import lambda_handler

from conftest import TEXT_TEMPLATE


class TestLambdaHandler:
    """Test the Lambda handler routes and responses."""

    def test_health_check(self):
        """GET /health returns healthy status."""
        event = {"httpMethod": "GET", "path": "/health"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["status"] == "healthy"

    def test_api_info(self):
        """GET /api returns API information."""
        event = {"httpMethod": "GET", "path": "/api"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["status"] == "ok"
        assert "endpoints" in body

    def test_judges(self):
        """GET /judges returns the court roster."""
        event = {"httpMethod": "GET", "path": "/judges"}
        response = lambda_handler(event, None)

        body = json.loads(response["body"])
        assert body["court"] == "Tribunale di Brindisi"
        assert "Dott.ssa Anna Guidone" in body["judges"]

    def test_cors_preflight(self):
        """OPTIONS requests return CORS headers."""
        event = {"httpMethod": "OPTIONS", "path": "/liquidate"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        assert "Access-Control-Allow-Origin" in response["headers"]
        assert "Access-Control-Allow-Methods" in response["headers"]

    def test_not_found(self):
        """Unknown paths return 404."""
        event = {"httpMethod": "GET", "path": "/unknown"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 404

    def test_liquidate_success(self, sample_case):
        """POST /liquidate computes a valid case."""
        event = {"httpMethod": "POST", "path": "/liquidate", "body": json.dumps(sample_case)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["calculations"]["grand_total_with_vat"]["value"] == 920.22

    def test_liquidate_base64_body(self, sample_case):
        """API Gateway may deliver the body base64-encoded."""
        encoded = base64.b64encode(json.dumps(sample_case).encode("utf-8")).decode("ascii")
        event = {"httpMethod": "POST", "path": "/liquidate", "body": encoded, "isBase64Encoded": True}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200

    def test_liquidate_empty_body(self):
        """POST /liquidate with empty body returns 400."""
        event = {"httpMethod": "POST", "path": "/liquidate", "body": ""}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert "error" in body

    def test_liquidate_invalid_json(self):
        """POST /liquidate with invalid JSON returns 400."""
        event = {"httpMethod": "POST", "path": "/liquidate", "body": "not valid json"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert "error" in body

    def test_liquidate_validation_error(self, sample_case):
        """POST /liquidate with an unknown tier returns 400."""
        sample_case["tier"] = "enormous"
        event = {"httpMethod": "POST", "path": "/liquidate", "body": json.dumps(sample_case)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["status"] == "validation_failed"

    def test_http_api_format(self):
        """Supports HTTP API v2 event format."""
        event = {"requestContext": {"http": {"method": "GET"}}, "rawPath": "/health"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200


class TestDecreeRoute:
    """Test POST /decree."""

    @pytest.fixture(autouse=True)
    def bundled_template(self, monkeypatch):
        monkeypatch.setattr(config, "DECREE_TEMPLATE", str(TEXT_TEMPLATE))

    def test_text_decree(self, sample_case):
        event = {"httpMethod": "POST", "path": "/decree", "body": json.dumps(sample_case)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        assert response["isBase64Encoded"] is True
        assert "liquidazione_1234-2024.txt" in response["headers"]["Content-Disposition"]
        text = base64.b64decode(response["body"]).decode("utf-8")
        assert "Dott. Simone Falerno" in text

    def test_json_decree(self, sample_case):
        event = {
            "httpMethod": "POST",
            "path": "/decree",
            "body": json.dumps(sample_case),
            "queryStringParameters": {"format": "json"},
        }
        response = lambda_handler(event, None)

        assert response["headers"]["Content-Type"] == "application/json"
        payload = json.loads(base64.b64decode(response["body"]))
        assert payload["case"]["rg_dib"] == "1234/2024"

    def test_missing_template_returns_502(self, sample_case, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "DECREE_TEMPLATE", str(tmp_path / "missing.docx"))
        event = {"httpMethod": "POST", "path": "/decree", "body": json.dumps(sample_case)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 502
        assert json.loads(response["body"])["status"] == "template_error"

    def test_null_fields(self, sample_case):
        sample_case["rg_dib"] = None
        sample_case["lead_party"]["name"] = None
        event = {"httpMethod": "POST", "path": "/decree", "body": json.dumps(sample_case)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        assert "liquidazione_decreto.txt" in response["headers"]["Content-Disposition"]
        assert "None" not in base64.b64decode(response["body"]).decode("utf-8")
