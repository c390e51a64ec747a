from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from charlm.config import settings
from charlm.services.language_model import LanguageModel, train_from_text
from charlm.utils.logger import log_info

router = APIRouter()

# In-memory model cache, oldest entry evicted first
MODEL_CACHE: dict[str, LanguageModel] = {}


class TrainRequest(BaseModel):
    corpus: str
    window_length: int = Field(default=settings.DEFAULT_WINDOW_LENGTH, ge=1)
    seed: Optional[int] = None
    model_name: str = "default"


class GenerateRequest(BaseModel):
    model_name: str = "default"
    initial_text: str
    text_length: int = Field(default=settings.DEFAULT_TEXT_LENGTH, ge=0)


def _cache_model(name: str, model: LanguageModel) -> None:
    MODEL_CACHE.pop(name, None)
    while MODEL_CACHE and len(MODEL_CACHE) >= settings.MAX_CACHED_MODELS:
        evicted = next(iter(MODEL_CACHE))
        MODEL_CACHE.pop(evicted)
        log_info("Evicted cached model", model=evicted)
    MODEL_CACHE[name] = model


def _get_model(name: str) -> LanguageModel:
    model = MODEL_CACHE.get(name)
    if model is None:
        raise HTTPException(status_code=404, detail="model not found, train first")
    return model


@router.post("/train")
async def train(req: TrainRequest):
    if not req.corpus:
        raise HTTPException(status_code=400, detail="corpus is empty")
    model = train_from_text(req.corpus, req.window_length, seed=req.seed)
    _cache_model(req.model_name, model)
    return {"ok": True, "model": req.model_name, "stats": asdict(model.get_stats())}


@router.post("/generate")
async def generate(req: GenerateRequest):
    model = _get_model(req.model_name)
    text = model.generate(req.initial_text, req.text_length)
    return {"ok": True, "data": {"text": text}}


@router.get("/models/{model_name}")
async def describe(model_name: str):
    model = _get_model(model_name)
    return {
        "ok": True,
        "data": {
            "stats": asdict(model.get_stats()),
            "dump": str(model),
        },
    }
