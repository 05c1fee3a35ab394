import httpx
import os
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger("APIClient")

API_BASE = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")

# Analysis requests wait on the model; no client-side retry
ANALYSIS_TIMEOUT = 120.0


class ApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _detail(response: httpx.Response) -> str:
    try:
        return response.json().get("detail", response.text)
    except ValueError:
        return response.text


def _request(method: str, path: str, timeout: float = 10.0, **kwargs) -> Any:
    try:
        response = httpx.request(method, f"{API_BASE}{path}", timeout=timeout, **kwargs)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"{method} {path} unreachable: {e}")
        raise ApiError(f"Backend unreachable: {e}") from e
    if response.status_code >= 400:
        detail = _detail(response)
        logger.error(f"{method} {path} failed with {response.status_code}: {detail}")
        raise ApiError(str(detail), status_code=response.status_code)
    try:
        return response.json()
    except ValueError as e:
        logger.error(f"{method} {path} returned a non-JSON body: {e}")
        raise ApiError("Backend returned an unreadable response.", status_code=response.status_code) from e


def _post_image(path: str, image: bytes, mime_type: str, data: Optional[Dict[str, str]] = None) -> Any:
    files = {"image": ("upload", image, mime_type or "image/jpeg")}
    return _request("POST", path, timeout=ANALYSIS_TIMEOUT, files=files, data=data or {})


def analyze_blood_slide(image: bytes, mime_type: str) -> Dict[str, Any]:
    return _post_image("/analyze/blood-slide", image, mime_type)


def analyze_urine(image: bytes, mime_type: str, mode: str = "standard") -> List[Dict[str, Any]]:
    return _post_image("/analyze/urine", image, mime_type, data={"mode": mode})


def analyze_skin(image: bytes, mime_type: str) -> Dict[str, Any]:
    return _post_image("/analyze/skin", image, mime_type)


def analyze_xray(image: bytes, mime_type: str) -> Dict[str, Any]:
    return _post_image("/analyze/xray", image, mime_type)


def calculate_dose(weight_kg: float, medicine_id: str, concentration_mg: float,
                   concentration_volume_ml: float) -> Dict[str, Any]:
    return _request("POST", "/dose", json={
        "weight_kg": weight_kg,
        "medicine_id": medicine_id,
        "concentration_mg": concentration_mg,
        "concentration_volume_ml": concentration_volume_ml
    })


def calculate_due_date(lmp: str) -> Dict[str, Any]:
    return _request("POST", "/due-date", json={"lmp": lmp})


def check_health() -> Dict[str, Any]:
    try:
        return _request("GET", "/health", timeout=5.0)
    except ApiError:
        return {"status": "unreachable"}


def fetch_medicines() -> List[Dict[str, Any]]:
    return _request("GET", "/medicines")


def fetch_compatibility() -> Dict[str, Any]:
    return _request("GET", "/compatibility")


def fetch_emergency_contacts() -> Dict[str, Any]:
    return _request("GET", "/reference/emergency")


def fetch_disclaimer() -> str:
    try:
        return _request("GET", "/reference/disclaimer").get("text", "")
    except ApiError:
        return ""


def fetch_transport_vehicles() -> List[Dict[str, Any]]:
    return _request("GET", "/transport/vehicles")
