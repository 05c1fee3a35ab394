from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from typing import List
import asyncio
import logging

from quickmed.config import settings
from quickmed.engines.gemini_engine import AnalysisGateway, DEFAULT_MIME_TYPE
from quickmed.middleware.observability import get_correlation_id
from quickmed.schemas.internal_models import (
    UrineMode, BloodAnalysisResult, UrineFinding, SkinAnalysisResult, XrayAnalysisResult
)

router = APIRouter(prefix="/analyze", tags=["Analysis"])
logger = logging.getLogger("AnalyzeAPI")

gateway = AnalysisGateway(api_key=settings.GEMINI_API_KEY)
if gateway.has_credential:
    logger.info("Analysis gateway initialized.")
else:
    logger.warning("GEMINI_API_KEY not set: blood and urine analysis will return placeholder results.")

def get_gateway() -> AnalysisGateway:
    return gateway

async def read_image(image: UploadFile) -> bytes:
    data = await image.read()
    if not data:
        raise HTTPException(status_code=400, detail="No image uploaded.")
    return data

@router.post("/blood-slide", response_model=BloodAnalysisResult)
async def analyze_blood_slide(request: Request, image: UploadFile = File(...),
                              gateway: AnalysisGateway = Depends(get_gateway)):
    data = await read_image(image)
    logger.info(f"[{get_correlation_id(request)}] Blood slide analysis ({len(data)} bytes)")
    return await asyncio.to_thread(gateway.analyze_blood_slide, data, image.content_type or DEFAULT_MIME_TYPE)

@router.post("/urine", response_model=List[UrineFinding])
async def analyze_urine(request: Request, image: UploadFile = File(...),
                        mode: UrineMode = Form(UrineMode.STANDARD),
                        gateway: AnalysisGateway = Depends(get_gateway)):
    data = await read_image(image)
    logger.info(f"[{get_correlation_id(request)}] Urine analysis, mode={mode.value} ({len(data)} bytes)")
    return await asyncio.to_thread(gateway.analyze_urine, data, mode, image.content_type or DEFAULT_MIME_TYPE)

@router.post("/skin", response_model=SkinAnalysisResult)
async def analyze_skin(request: Request, image: UploadFile = File(...),
                       gateway: AnalysisGateway = Depends(get_gateway)):
    data = await read_image(image)
    logger.info(f"[{get_correlation_id(request)}] Skin analysis ({len(data)} bytes)")
    return await asyncio.to_thread(gateway.analyze_skin, data, image.content_type or DEFAULT_MIME_TYPE)

@router.post("/xray", response_model=XrayAnalysisResult)
async def analyze_xray(request: Request, image: UploadFile = File(...),
                       gateway: AnalysisGateway = Depends(get_gateway)):
    data = await read_image(image)
    logger.info(f"[{get_correlation_id(request)}] X-ray analysis ({len(data)} bytes)")
    return await asyncio.to_thread(gateway.analyze_xray, data, image.content_type or DEFAULT_MIME_TYPE)
