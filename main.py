# main.py
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import Settings, settings
from logging_setup import setup_logging
from models import GenerationRequest
from services.reply import generate_reply

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    if not settings.GEMINI_API_KEY:
        log.warning("⚠️ GEMINI_API_KEY is not set, Gemini calls will be rejected.")
    # one pooled client for the whole process
    app.state.http_client = httpx.AsyncClient(timeout=settings.GEMINI_TIMEOUT)
    log.info("✅ Email Reply Writer started")
    yield
    await app.state.http_client.aclose()


app = FastAPI(title="Email Reply Writer", lifespan=lifespan)

# ------------- CORS -------------
# the browser extension posts from whatever page the mail client runs on
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
# ------------------------------------------------


def get_settings() -> Settings:
    return settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


@app.post("/api/email/generate", response_class=PlainTextResponse)
async def generate_email(
    body: GenerationRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
    cfg: Settings = Depends(get_settings),
):
    return PlainTextResponse(await generate_reply(client, body, cfg))


@app.get("/")
def root():
    return {"status": "running", "app": "Email Reply Writer"}
