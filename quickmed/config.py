import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.4"))
    GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "60.0"))

    # Offline placeholder results resolve after this delay
    FALLBACK_DELAY = float(os.getenv("FALLBACK_DELAY", "2.0"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    VERSION = "1.0.0"

    VERSION_MANIFEST = {
        "api": VERSION,
        "gateway_model": GEMINI_MODEL,
        "build_id": os.getenv("BUILD_ID", "DEV-LOCAL")
    }

settings = Config()
