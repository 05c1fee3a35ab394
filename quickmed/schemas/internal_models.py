from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any

from quickmed.utils.constants import BLOOD_TYPES, UNKNOWN_BLOOD_GROUP, CONFIDENCE_MIN, CONFIDENCE_MAX

class AnalysisKind(str, Enum):
    BLOOD_SLIDE = "blood-slide"
    URINE = "urine"
    SKIN = "skin"
    XRAY = "xray"

class UrineMode(str, Enum):
    STANDARD = "standard"
    PREGNANCY = "pregnancy"

class UrineSeverity(str, Enum):
    NORMAL = "Normal"
    TRACE = "Trace"
    MODERATE = "Moderate"
    HIGH = "High"
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    INVALID = "Invalid"

class SkinSeverity(str, Enum):
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    UNKNOWN = "Unknown"

class FailurePolicy(str, Enum):
    DEGRADE = "degrade"
    RAISE = "raise"


def clamp_percentage(value: float) -> float:
    return max(CONFIDENCE_MIN, min(CONFIDENCE_MAX, value))


class GatewayResult(BaseModel):
    """Base for provider results. Field names travel as camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class BloodAnalysisResult(GatewayResult):
    blood_group: str = UNKNOWN_BLOOD_GROUP
    confidence: float = Field(allow_inf_nan=False)
    antibodies: str
    agglutination_details: str
    recommendation: str

    @field_validator("blood_group", mode="before")
    @classmethod
    def normalize_blood_group(cls, value: Any) -> str:
        if value is None:
            return UNKNOWN_BLOOD_GROUP
        group = str(value).strip().upper().replace(" ", "")
        return group if group in BLOOD_TYPES else UNKNOWN_BLOOD_GROUP

    @field_validator("confidence")
    @classmethod
    def clamp_confidence(cls, value: float) -> float:
        return clamp_percentage(value)


class UrineFinding(GatewayResult):
    parameter: str
    finding: str
    interpretation: str
    severity: UrineSeverity
    advice: str


class SkinAnalysisResult(GatewayResult):
    condition: str
    probability: float = Field(allow_inf_nan=False)
    description: str
    severity: SkinSeverity
    recommendation: str

    @field_validator("probability")
    @classmethod
    def clamp_probability(cls, value: float) -> float:
        return clamp_percentage(value)


class XrayAnalysisResult(GatewayResult):
    body_part: str
    findings: str
    impression: str
    abnormality_detected: bool
    advice: str
