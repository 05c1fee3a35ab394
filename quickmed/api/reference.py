from fastapi import APIRouter

from quickmed.utils.constants import DISCLAIMER_TEXT, EMERGENCY_CONTACTS, TRANSPORT_VEHICLES

router = APIRouter(tags=["Reference"])

@router.get("/reference/emergency")
def emergency_contacts():
    return EMERGENCY_CONTACTS

@router.get("/reference/disclaimer")
def disclaimer():
    return {"text": DISCLAIMER_TEXT}

@router.get("/transport/vehicles")
def transport_vehicles():
    return TRANSPORT_VEHICLES
