import json
import logging

import httpx

from config import Settings

log = logging.getLogger(__name__)

SAFETY_BLOCK_MSG = "AI failed to generate reply due to safety policy: {category} (Probability: {probability})"
EMPTY_RESPONSE_MSG = "The AI returned an unexpected empty response. Check API usage or prompt content."
PARSE_ERROR_PREFIX = "Error Processing API Response: "

# marker for "not there", distinct from a JSON null
MISSING = object()


def build_payload(prompt: str) -> dict:
    return {"contents": [{"parts": [{"text": prompt}]}]}


async def generate_content(client: httpx.AsyncClient, settings: Settings, prompt: str) -> str:
    """POST the prompt to generateContent and return the raw response body.

    Transport errors and non-2xx statuses surface as ``httpx.HTTPError``.
    """
    headers = {"Content-Type": "application/json"}
    params = {"key": settings.GEMINI_API_KEY or ""}

    log.debug("Calling Gemini (%d prompt chars)", len(prompt))
    r = await client.post(settings.GEMINI_API_URL, params=params, headers=headers, json=build_payload(prompt))
    r.raise_for_status()
    return r.text


def _path(node, *keys):
    """Walk dict keys / list indexes, returning MISSING instead of raising."""
    for key in keys:
        if isinstance(key, int):
            if not isinstance(node, list) or not 0 <= key < len(node):
                return MISSING
        elif not isinstance(node, dict) or key not in node:
            return MISSING
        node = node[key]
    return node


def _as_text(node) -> str:
    # a JSON null renders the same as an absent field
    if node is MISSING or node is None:
        return ""
    if isinstance(node, str):
        return node
    return json.dumps(node)


def _non_empty_list(node) -> bool:
    return isinstance(node, list) and len(node) > 0


def extract_reply(data) -> str:
    """Pick the reply text, a safety-block explanation or the empty fallback out of a decoded payload."""
    if _non_empty_list(_path(data, "candidates")):
        text = _path(data, "candidates", 0, "content", "parts", 0, "text")
        # null or non-string text counts as no reply
        if isinstance(text, str):
            return text

    if isinstance(data, dict) and "promptFeedback" in data:
        ratings = _path(data, "promptFeedback", "safetyRatings")
        if _non_empty_list(ratings):
            first = ratings[0]
            category = _as_text(_path(first, "category"))
            probability = _as_text(_path(first, "probability"))
            log.warning("Gemini blocked the prompt: %s (%s)", category, probability)
            return SAFETY_BLOCK_MSG.format(category=category, probability=probability)

    log.warning("Gemini returned no usable candidates")
    return EMPTY_RESPONSE_MSG


def extract_response_content(raw: str) -> str:
    try:
        data = json.loads(raw)
    # RecursionError: deeply nested arrays/objects blow the decoder's stack
    except (ValueError, RecursionError) as e:
        log.warning("Could not parse Gemini response: %s", e)
        return PARSE_ERROR_PREFIX + str(e)
    return extract_reply(data)
