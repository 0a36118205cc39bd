"""Label OCR.

Primary: Google Cloud Vision (DOCUMENT_TEXT_DETECTION) if GOOGLE_VISION_API_KEY is set.
Fallback: local pytesseract if installed (requires system Tesseract with tur+eng data).
If both are unavailable or fail, returns an empty string.
"""

from __future__ import annotations

import base64
import logging
from io import BytesIO

import requests
from PIL import Image

import config

try:
    import pytesseract
except ImportError:  # pragma: no cover
    pytesseract = None

logger = logging.getLogger(__name__)


def vision_ocr(image_bytes: bytes, *, api_key: str, endpoint: str | None = None, timeout: float | None = None) -> str:
    payload = {
        "requests": [
            {
                "image": {"content": base64.b64encode(image_bytes).decode("ascii")},
                "features": [{"type": "DOCUMENT_TEXT_DETECTION", "maxResults": 1}],
                "imageContext": {"languageHints": ["tr", "en"]},
            }
        ]
    }
    try:
        r = requests.post(
            endpoint or config.VISION_ENDPOINT,
            params={"key": api_key},
            json=payload,
            timeout=timeout or config.OCR_TIMEOUT,
        )
        r.raise_for_status()
        data = r.json() or {}
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Vision OCR request failed: {e}")
        return ""

    response = (data.get("responses") or [{}])[0]
    if response.get("error"):
        logger.warning(f"Vision OCR error: {response['error'].get('message')}")
        return ""

    text = (response.get("fullTextAnnotation") or {}).get("text")
    if not text:
        text = ((response.get("textAnnotations") or [{}])[0]).get("description")
    return text or ""


def tesseract_ocr(image_bytes: bytes) -> str:
    if pytesseract is None:
        return ""
    try:
        img = Image.open(BytesIO(image_bytes)).convert("RGB")
    except Exception as e:
        logger.warning(f"Cannot decode image: {e}")
        return ""
    try:
        return pytesseract.image_to_string(img, lang="tur+eng")
    except Exception as e:
        logger.warning(f"Tesseract OCR failed: {e}")
        return ""


def extract_text(image_bytes: bytes, *, api_key: str | None = None) -> str:
    """Best-effort label text for an uploaded image."""
    if not image_bytes:
        return ""
    key = api_key if api_key is not None else config.GOOGLE_VISION_API_KEY
    if key:
        text = vision_ocr(image_bytes, api_key=key)
        if text:
            return text
    text = tesseract_ocr(image_bytes)
    if not text:
        logger.info("No text detected in image")
    return text
