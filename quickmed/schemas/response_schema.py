from datetime import date
from pydantic import BaseModel
from typing import Dict, List, Optional

class Medicine(BaseModel):
    id: str
    name: str
    default_concentration_mg: float
    default_volume_ml: float
    per_kg_min: float
    per_kg_max: float
    max_daily_dose_mg: float
    frequency_hours: int
    description: str
    citation: str
    link: str

class DoseResult(BaseModel):
    single_dose_mg_min: int
    single_dose_mg_max: int
    volume_ml_min: float
    volume_ml_max: float
    max_daily_dose: float
    safe: bool
    warning: Optional[str] = None
    report: str = ""

class DueDateResult(BaseModel):
    due_date: date
    due_date_display: str
    weeks_pregnant: int
    trimester: str
    days_left: int

class CompatibilityResponse(BaseModel):
    blood_types: List[str]
    matrix: Dict[str, Dict[str, bool]]

class CompatibilityCheck(BaseModel):
    donor: str
    recipient: str
    compatible: bool
