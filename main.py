"""FastAPI application for Katkısız label analysis.

Practical MVP:
 - Label text (OCR or typed) -> ingredient list -> detected additives
 - Red / yellow / green verdict with recommendations
 - Image upload -> OCR (Google Vision, Tesseract fallback) -> same analysis
 - Read-only additive table lookup
"""

import logging

from fastapi import FastAPI, Form, UploadFile, File
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
import uvicorn

import config
from services.analyzer import AnalysisResult, analyze_ingredients, analyze_text
from services.knowledge_base import load_knowledge_base
from services.ocr import extract_text
from services.scoring import get_score_label, score_additives

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

# Loaded once per process; shared read-only by every request.
KNOWLEDGE_BASE = load_knowledge_base(config.ADDITIVES_PATH or None, duplicate_policy=config.KB_DUPLICATE_POLICY)

app = FastAPI(title="Katkısız", version="1.0.0")


def _result_payload(result: AnalysisResult, **extra):
    score = score_additives(result.additives)
    payload = result.to_dict()
    payload.update({"score": score, "score_label": get_score_label(score)})
    payload.update(extra)
    return payload


def _respond(result: AnalysisResult, **extra):
    payload = _result_payload(result, **extra)
    if not result.ingredients_found:
        return JSONResponse(
            {
                "error": "no_ingredients",
                "message": "Could not detect an ingredients list. Please try a clearer photo.",
                "result": payload,
            },
            status_code=422,
        )
    return payload


@app.post("/api/analyze", response_class=JSONResponse)
async def analyze(text: str = Form(""), locale: str = Form(config.DEFAULT_LOCALE)):
    """Analyze raw label text."""
    if not text.strip():
        return JSONResponse({"error": "missing_text"}, status_code=400)
    result = analyze_text(
        text,
        KNOWLEDGE_BASE,
        locale=locale,
        max_items=config.MAX_INGREDIENTS,
        max_length=config.MAX_INGREDIENT_LENGTH,
    )
    logger.info(f"Text analysis: {result.status.value} ({result.counts.total} additives)")
    return _respond(result)


@app.post("/api/analyze/ingredients", response_class=JSONResponse)
async def analyze_list(ingredients: list[str] = Form([]), locale: str = Form(config.DEFAULT_LOCALE)):
    """Analyze an ingredient list the client already split."""
    if not any(i.strip() for i in ingredients):
        return JSONResponse({"error": "missing_text"}, status_code=400)
    result = analyze_ingredients(
        ingredients,
        KNOWLEDGE_BASE,
        locale=locale,
        max_items=config.MAX_INGREDIENTS,
        max_length=config.MAX_INGREDIENT_LENGTH,
    )
    logger.info(f"List analysis: {result.status.value} ({result.counts.total} additives)")
    return _respond(result)


@app.post("/api/analyze/image", response_class=JSONResponse)
async def analyze_image(image: UploadFile = File(...), locale: str = Form(config.DEFAULT_LOCALE)):
    """OCR a label photo, then analyze the text."""
    if not config.ENABLE_IMAGE_ANALYSIS:
        return JSONResponse({"error": "disabled"}, status_code=404)
    content = await image.read()
    if not content:
        return JSONResponse({"error": "missing_image"}, status_code=400)

    # OCR does blocking HTTP; keep it off the event loop.
    full_text = await run_in_threadpool(extract_text, content)
    if not full_text.strip():
        return JSONResponse(
            {"error": "no_text", "message": "No text detected in image."},
            status_code=422,
        )

    result = analyze_text(
        full_text,
        KNOWLEDGE_BASE,
        locale=locale,
        max_items=config.MAX_INGREDIENTS,
        max_length=config.MAX_INGREDIENT_LENGTH,
    )
    logger.info(f"Image analysis ({image.filename}): {result.status.value}")
    return _respond(result, full_text=full_text)


@app.get("/api/additives")
async def list_additives():
    return {
        "version": KNOWLEDGE_BASE.version,
        "additives": [r.to_dict() for r in KNOWLEDGE_BASE],
    }


@app.get("/api/additives/{code}")
async def get_additive(code: str):
    record = KNOWLEDGE_BASE.get(code)
    if record is None:
        return JSONResponse({"error": "not_found"}, status_code=404)
    return record.to_dict()


# Health check
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "Katkısız",
        "knowledge_base_version": KNOWLEDGE_BASE.version,
        "additives": len(KNOWLEDGE_BASE),
    }

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=config.DEBUG)
