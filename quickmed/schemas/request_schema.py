from datetime import date
from pydantic import BaseModel, Field
from typing import Optional

class DoseRequest(BaseModel):
    weight_kg: float = Field(..., gt=0)
    medicine_id: str
    concentration_mg: Optional[float] = Field(None, gt=0)
    concentration_volume_ml: Optional[float] = Field(None, gt=0)

    class Config:
        json_schema_extra = {
            "example": {
                "weight_kg": 15,
                "medicine_id": "paracetamol_syrup",
                "concentration_mg": 120,
                "concentration_volume_ml": 5
            }
        }

class DueDateRequest(BaseModel):
    lmp: date
    today: Optional[date] = None

    class Config:
        json_schema_extra = {
            "example": {"lmp": "2024-01-01"}
        }
