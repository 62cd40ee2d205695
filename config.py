# config.py
from dotenv import load_dotenv
load_dotenv()   # <-- before any os.getenv below
from pydantic import BaseModel
import os

DEFAULT_GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.0-flash:generateContent"
)

class Settings(BaseModel):
    GEMINI_API_URL: str = os.getenv("GEMINI_API_URL", DEFAULT_GEMINI_URL)
    GEMINI_API_KEY: str | None = os.getenv("GEMINI_API_KEY")
    GEMINI_TIMEOUT: float = float(os.getenv("GEMINI_TIMEOUT", "60"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
