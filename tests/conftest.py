import json

import pytest
from fastapi.testclient import TestClient

from quickmed.engines.gemini_engine import AnalysisGateway
from quickmed.services.metrics_service import MetricsService


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModels:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.reply)


class FakeClient:
    def __init__(self, reply=None, error=None):
        self.models = FakeModels(reply=reply, error=error)


@pytest.fixture(autouse=True)
def reset_health_history():
    MetricsService.reset()
    yield
    MetricsService.reset()


@pytest.fixture
def make_gateway():
    """Gateway wired to a fake genai client; `reply` may be a str or a JSON-able object."""
    def factory(reply=None, error=None, api_key="test-key", fallback_delay=0.0):
        if reply is not None and not isinstance(reply, str):
            reply = json.dumps(reply)
        client = FakeClient(reply=reply, error=error)
        gateway = AnalysisGateway(api_key=api_key, fallback_delay=fallback_delay, client=client)
        return gateway, client
    return factory


@pytest.fixture
def blood_reply():
    return {
        "bloodGroup": "AB+",
        "confidence": 87,
        "antibodies": "None",
        "agglutinationDetails": "Clumping in anti-A, anti-B and anti-D wells.",
        "recommendation": "Confirm with a certified lab before transfusion."
    }


@pytest.fixture
def skin_reply():
    return {
        "condition": "Eczema",
        "probability": 72.5,
        "description": "Dry, scaly patches on the forearm.",
        "severity": "Mild",
        "recommendation": "Moisturize and see a doctor if it spreads."
    }


@pytest.fixture
def xray_reply():
    return {
        "bodyPart": "Hand",
        "findings": "Hairline fracture of the fifth metacarpal.",
        "impression": "Possible boxer's fracture.",
        "abnormalityDetected": True,
        "advice": "Consult an orthopedic doctor."
    }


@pytest.fixture
def api_client():
    """TestClient whose analysis routes use the gateway passed to it."""
    from quickmed.main import app
    from quickmed.api.analyze import get_gateway

    def factory(gateway):
        app.dependency_overrides[get_gateway] = lambda: gateway
        return TestClient(app)

    yield factory
    app.dependency_overrides.clear()
