from fastapi import APIRouter, HTTPException, Query
from typing import List
import logging

from quickmed.core.compatibility import build_matrix, is_compatible
from quickmed.core.dose_calculator import calculate_dose, find_medicine
from quickmed.core.due_date import calculate_due_date
from quickmed.schemas.request_schema import DoseRequest, DueDateRequest
from quickmed.schemas.response_schema import (
    CompatibilityCheck, CompatibilityResponse, DoseResult, DueDateResult, Medicine
)
from quickmed.utils.constants import BLOOD_TYPES, MEDICINES

router = APIRouter(tags=["Calculators"])
logger = logging.getLogger("CalculatorAPI")

@router.get("/medicines", response_model=List[Medicine])
def list_medicines():
    return MEDICINES

@router.post("/dose", response_model=DoseResult)
def dose(data: DoseRequest):
    try:
        medicine = find_medicine(data.medicine_id)
        return calculate_dose(data.weight_kg, medicine, data.concentration_mg, data.concentration_volume_ml)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

@router.post("/due-date", response_model=DueDateResult)
def due_date(data: DueDateRequest):
    return calculate_due_date(data.lmp, data.today)

@router.get("/compatibility", response_model=CompatibilityResponse)
def compatibility():
    return CompatibilityResponse(blood_types=BLOOD_TYPES, matrix=build_matrix())

@router.get("/compatibility/check", response_model=CompatibilityCheck)
def compatibility_check(donor: str = Query(...), recipient: str = Query(...)):
    try:
        compatible = is_compatible(donor, recipient)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return CompatibilityCheck(donor=donor, recipient=recipient, compatible=compatible)
