"""Per-kind contracts for the analysis gateway.

Each profile bundles the instruction sent with the image, the strict response
schema handed to Gemini, the pydantic validation applied to the reply, and the
failure policy. Blood-slide and urine degrade to placeholder results; skin and
X-ray raise to their caller.
"""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from google.genai import types
from pydantic import TypeAdapter

from quickmed.schemas.internal_models import (
    AnalysisKind, UrineMode, UrineSeverity, SkinSeverity, FailurePolicy,
    BloodAnalysisResult, UrineFinding, SkinAnalysisResult, XrayAnalysisResult
)
from quickmed.utils.constants import UNKNOWN_BLOOD_GROUP


@dataclass(frozen=True)
class KindProfile:
    kind: AnalysisKind
    prompt: str
    schema: types.Schema
    validate: Callable[[Any], Any]
    failure_policy: FailurePolicy
    offline_result: Optional[Callable[[], Any]] = None
    failed_result: Optional[Callable[[], Any]] = None


def _string(description: Optional[str] = None, enum: Optional[List[str]] = None) -> types.Schema:
    return types.Schema(type=types.Type.STRING, description=description, enum=enum)


def _object(properties: dict) -> types.Schema:
    return types.Schema(type=types.Type.OBJECT, properties=properties, required=list(properties))


BLOOD_PROMPT = (
    "Analyze this image of a blood typing slide test. Identify clumping (agglutination) patterns "
    "for the anti-A, anti-B and anti-D reagents and deduce the probable ABO/Rh blood group. "
    "Educational use only."
)

URINE_STANDARD_PROMPT = (
    "Analyze this urine dipstick or urine lab report. Identify parameters such as Glucose, Protein, "
    "pH and Leukocytes. Compare pad colors against the reference chart and return a list of findings. "
    "Educational use only."
)

URINE_PREGNANCY_PROMPT = (
    "Analyze this image of a pregnancy test strip (HCG urine test).\n"
    "Look for the Control Line (C) and the Test Line (T).\n"
    "If 2 lines are visible => Positive.\n"
    "If 1 line (C only) => Negative.\n"
    "If no lines, T only, or the lines are ambiguous => Invalid.\n"
    'Return exactly one result item with parameter="HCG Pregnancy Test", '
    'finding="Positive", "Negative" or "Invalid", interpretation="Pregnant" or "Not Pregnant", '
    'and severity="Positive", "Negative" or "Invalid".'
)

SKIN_PROMPT = (
    "Analyze this skin image. Identify potential dermatological conditions. "
    "Educational use only. Be cautious."
)

XRAY_PROMPT = (
    "Analyze this medical X-ray image. Identify the body part and any obvious abnormalities "
    "(fractures, opacity). Educational use only."
)


BLOOD_SCHEMA = _object({
    "bloodGroup": _string("The probable blood group (e.g., A+, B-, O+)."),
    "confidence": types.Schema(type=types.Type.NUMBER, description="Confidence level between 0 and 100."),
    "antibodies": _string("Likely antibodies present in plasma based on the group."),
    "agglutinationDetails": _string("Description of visual clumping patterns."),
    "recommendation": _string("Safety recommendation."),
})

URINE_ITEM_SCHEMA = _object({
    "parameter": _string(),
    "finding": _string(),
    "interpretation": _string(),
    "severity": _string(enum=[s.value for s in UrineSeverity]),
    "advice": _string(),
})

SKIN_SCHEMA = _object({
    "condition": _string("Name of the potential skin condition (e.g. Eczema, Ringworm, Acne)."),
    "probability": types.Schema(type=types.Type.NUMBER, description="Confidence score 0-100."),
    "description": _string("Visual description of the rash/lesion."),
    "severity": _string(enum=[s.value for s in SkinSeverity]),
    "recommendation": _string("Home care advice or 'See Doctor'."),
})

XRAY_SCHEMA = _object({
    "bodyPart": _string("The body part shown (e.g. Chest, Hand, Knee)."),
    "findings": _string("Key visual findings (e.g. clear lungs, hairline fracture)."),
    "impression": _string("Educational summary."),
    "abnormalityDetected": types.Schema(type=types.Type.BOOLEAN),
    "advice": _string(),
})


def urine_schema(mode: UrineMode) -> types.Schema:
    max_items = 1 if mode == UrineMode.PREGNANCY else None
    return types.Schema(type=types.Type.ARRAY, items=URINE_ITEM_SCHEMA, min_items=1, max_items=max_items)


_urine_list = TypeAdapter(List[UrineFinding])

def _validate_urine(mode: UrineMode) -> Callable[[Any], List[UrineFinding]]:
    def validate(payload: Any) -> List[UrineFinding]:
        findings = _urine_list.validate_python(payload)
        if not findings:
            raise ValueError("Urine analysis returned no findings.")
        if mode == UrineMode.PREGNANCY and len(findings) != 1:
            raise ValueError(f"Pregnancy test must yield exactly one finding, got {len(findings)}.")
        return findings
    return validate


def blood_offline() -> BloodAnalysisResult:
    return BloodAnalysisResult(
        blood_group=UNKNOWN_BLOOD_GROUP,
        confidence=0,
        antibodies="Cannot determine without API Key",
        agglutination_details="Please configure a valid API Key to use the AI analysis feature. Returning placeholder data.",
        recommendation="Consult a lab technician."
    )

def blood_failed() -> BloodAnalysisResult:
    result = blood_offline()
    result.agglutination_details = "Analysis failed. Please try again."
    return result

def urine_offline() -> List[UrineFinding]:
    return [UrineFinding(
        parameter="General",
        finding="Unavailable",
        interpretation="API Key missing",
        severity=UrineSeverity.NORMAL,
        advice="Check API configuration."
    )]

def urine_failed() -> List[UrineFinding]:
    return [UrineFinding(
        parameter="Error",
        finding="Failed",
        interpretation="Could not process image.",
        severity=UrineSeverity.NORMAL,
        advice="Try again."
    )]


BLOOD_PROFILE = KindProfile(
    kind=AnalysisKind.BLOOD_SLIDE,
    prompt=BLOOD_PROMPT,
    schema=BLOOD_SCHEMA,
    validate=BloodAnalysisResult.model_validate,
    failure_policy=FailurePolicy.DEGRADE,
    offline_result=blood_offline,
    failed_result=blood_failed,
)

URINE_PROFILES = {
    mode: KindProfile(
        kind=AnalysisKind.URINE,
        prompt=URINE_PREGNANCY_PROMPT if mode == UrineMode.PREGNANCY else URINE_STANDARD_PROMPT,
        schema=urine_schema(mode),
        validate=_validate_urine(mode),
        failure_policy=FailurePolicy.DEGRADE,
        offline_result=urine_offline,
        failed_result=urine_failed,
    )
    for mode in UrineMode
}

SKIN_PROFILE = KindProfile(
    kind=AnalysisKind.SKIN,
    prompt=SKIN_PROMPT,
    schema=SKIN_SCHEMA,
    validate=SkinAnalysisResult.model_validate,
    failure_policy=FailurePolicy.RAISE,
)

XRAY_PROFILE = KindProfile(
    kind=AnalysisKind.XRAY,
    prompt=XRAY_PROMPT,
    schema=XRAY_SCHEMA,
    validate=XrayAnalysisResult.model_validate,
    failure_policy=FailurePolicy.RAISE,
)
