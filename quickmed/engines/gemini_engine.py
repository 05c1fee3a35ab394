import json
import logging
import time
from typing import Any, List, Optional

from google import genai
from google.genai import types

from quickmed.config import settings
from quickmed.engines.analysis_kinds import (
    KindProfile, BLOOD_PROFILE, URINE_PROFILES, SKIN_PROFILE, XRAY_PROFILE
)
from quickmed.engines.errors import AnalysisProviderError, CredentialMissingError
from quickmed.middleware.observability import current_correlation_id
from quickmed.schemas.internal_models import (
    FailurePolicy, UrineMode,
    BloodAnalysisResult, UrineFinding, SkinAnalysisResult, XrayAnalysisResult
)
from quickmed.services.audit_logger import AuditLogger
from quickmed.services.metrics_service import MetricsService

DEFAULT_MIME_TYPE = "image/jpeg"
logger = logging.getLogger(__name__)

def strip_code_fence(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()

class AnalysisGateway:
    """Single-shot Gemini calls that turn an image into a kind-specific result.

    Every call issues at most one request: no retries, no caching. Whether a
    failure degrades to a placeholder result or raises is decided by the
    kind's profile.
    """

    def __init__(
        self,
        api_key: str,
        model: str = settings.GEMINI_MODEL,
        temperature: float = settings.GEMINI_TEMPERATURE,
        timeout: float = settings.GEMINI_TIMEOUT,
        fallback_delay: float = settings.FALLBACK_DELAY,
        client: Optional[Any] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.fallback_delay = fallback_delay
        if client is None and api_key:
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(timeout * 1000))
            )
        self.client = client

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)

    def analyze_blood_slide(self, image: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> BloodAnalysisResult:
        return self._run(BLOOD_PROFILE, image, mime_type)

    def analyze_urine(self, image: bytes, mode: UrineMode = UrineMode.STANDARD,
                      mime_type: str = DEFAULT_MIME_TYPE) -> List[UrineFinding]:
        return self._run(URINE_PROFILES[UrineMode(mode)], image, mime_type)

    def analyze_skin(self, image: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> SkinAnalysisResult:
        return self._run(SKIN_PROFILE, image, mime_type)

    def analyze_xray(self, image: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> XrayAnalysisResult:
        return self._run(XRAY_PROFILE, image, mime_type)

    def _run(self, profile: KindProfile, image: bytes, mime_type: str) -> Any:
        kind = profile.kind.value

        if not self.has_credential:
            if profile.failure_policy == FailurePolicy.RAISE:
                logger.error(f"{kind} analysis requested without an API Key.")
                raise CredentialMissingError(kind)
            MetricsService.record_fallback(kind, "missing_credential")
            logger.warning(f"No API Key found. Returning placeholder {kind} result.")
            time.sleep(self.fallback_delay)
            return profile.offline_result()

        start = time.time()
        try:
            text = self._generate(profile, image, mime_type)
            result = self._parse(profile, text)
        except Exception as e:
            MetricsService.record_error(kind, type(e).__name__)
            logger.error(f"Gemini {kind} analysis failed: {e}")
            if profile.failure_policy == FailurePolicy.RAISE:
                if isinstance(e, AnalysisProviderError):
                    raise
                raise AnalysisProviderError(kind, f"Analysis failed: {e}") from e
            MetricsService.record_fallback(kind, "provider_failure")
            return profile.failed_result()

        MetricsService.record_success(kind)
        MetricsService.record_latency(kind, time.time() - start)
        return result

    def _generate(self, profile: KindProfile, image: bytes, mime_type: str) -> Optional[str]:
        response = self.client.models.generate_content(
            model=self.model,
            contents=[
                types.Part.from_bytes(data=image, mime_type=mime_type or DEFAULT_MIME_TYPE),
                profile.prompt
            ],
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=profile.schema,
                temperature=self.temperature
            )
        )
        return response.text

    def _parse(self, profile: KindProfile, text: Optional[str]) -> Any:
        kind = profile.kind.value
        if not text or not text.strip():
            raise AnalysisProviderError(kind, "No response text from Gemini")

        cleaned = strip_code_fence(text)
        try:
            return profile.validate(json.loads(cleaned))
        except ValueError as format_err:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            AuditLogger.log_action(current_correlation_id(), "llm_format_violation", {
                "kind": kind, "error": str(format_err), "raw_output": cleaned
            })
            raise AnalysisProviderError(kind, f"Malformed {kind} response: {format_err}") from format_err
