import logging

import httpx

from config import Settings
from models import GenerationRequest
from .gemini import generate_content, extract_response_content
from .prompt import build_prompt

log = logging.getLogger(__name__)

TRANSPORT_ERROR_PREFIX = "Error Communicating With AI Service: "

async def generate_reply(client: httpx.AsyncClient, request: GenerationRequest, settings: Settings) -> str:
    """Build the prompt, call Gemini and always hand back a string."""
    prompt = build_prompt(request)
    try:
        raw = await generate_content(client, settings, prompt)
    except httpx.HTTPStatusError as e:
        log.warning("Gemini HTTP error: %s -> %s", e.response.status_code, e.response.text[:200])
        return TRANSPORT_ERROR_PREFIX + f"HTTP {e.response.status_code}"
    except httpx.HTTPError as e:
        log.warning("Gemini transport error: %r", e)
        return TRANSPORT_ERROR_PREFIX + (str(e) or type(e).__name__)
    return extract_response_content(raw)
