from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, Optional

from quickmed.schemas.response_schema import DoseResult
from quickmed.utils.constants import MEDICINES

UNSAFE_DOSE_WARNING = "Calculated dose exceeds general maximum limits. Consult a doctor."

def round_half_up(value: float, places: int = 0) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))

def find_medicine(medicine_id: str) -> Dict[str, Any]:
    for med in MEDICINES:
        if med["id"] == medicine_id:
            return med
    raise ValueError(f"Unknown medicine: {medicine_id}")

def calculate_dose(
    weight_kg: float,
    medicine: Dict[str, Any],
    concentration_mg: Optional[float] = None,
    concentration_ml: Optional[float] = None,
) -> DoseResult:
    """Weight-based single dose range and the syrup volume that delivers it.

    The safety flag compares the upper single dose against the medicine's
    absolute daily cap, not a per-weight daily limit.
    """
    concentration_mg = medicine["default_concentration_mg"] if concentration_mg is None else concentration_mg
    concentration_ml = medicine["default_volume_ml"] if concentration_ml is None else concentration_ml

    if weight_kg <= 0:
        raise ValueError("Weight must be greater than zero.")
    if concentration_mg <= 0 or concentration_ml <= 0:
        raise ValueError("Concentration must be greater than zero.")

    dose_min = weight_kg * medicine["per_kg_min"]
    dose_max = weight_kg * medicine["per_kg_max"]

    vol_min = (dose_min / concentration_mg) * concentration_ml
    vol_max = (dose_max / concentration_mg) * concentration_ml

    safe = dose_max <= medicine["max_daily_dose_mg"]

    result = DoseResult(
        single_dose_mg_min=int(round_half_up(dose_min)),
        single_dose_mg_max=int(round_half_up(dose_max)),
        volume_ml_min=round_half_up(vol_min, 1),
        volume_ml_max=round_half_up(vol_max, 1),
        max_daily_dose=medicine["max_daily_dose_mg"],
        safe=safe,
        warning=None if safe else UNSAFE_DOSE_WARNING
    )
    result.report = format_dose_report(weight_kg, medicine, concentration_mg, concentration_ml, result)
    return result

def format_dose_report(
    weight_kg: float,
    medicine: Dict[str, Any],
    concentration_mg: float,
    concentration_ml: float,
    result: DoseResult,
) -> str:
    lines = [
        "QuickMed Dose Report:",
        f"Patient Weight: {weight_kg:g}kg",
        f"Medicine: {medicine['name']} ({concentration_mg:g}mg/{concentration_ml:g}ml)",
        f"Safe Dose: {result.volume_ml_min:g}ml - {result.volume_ml_max:g}ml "
        f"({result.single_dose_mg_min}-{result.single_dose_mg_max}mg)",
        f"Frequency: Every {medicine['frequency_hours']} hours.",
    ]
    return "\n".join(lines)
