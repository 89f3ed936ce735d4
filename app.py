"""Placeholder text API layer.

This module exposes a FastAPI app with a lorem endpoint that validates the
requested shape and sizes and returns generated placeholder text. Fields
missing from a request fall back to defaults stored in Redis, then to the
generator's built-in defaults.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Union

import redis
from fastapi import Depends, FastAPI, HTTPException
from loguru import logger
from pydantic import BaseModel, Field, validator

from lorem import ConfigurationError, GeneratorConfig, LoremGenerator, Shape, configure_logging, load_dictionary

DEFAULTS_KEY = "lorem:defaults"
REQUEST_FIELDS = ("shape", "length", "wordsPerUnit", "sentencesPerParagraph", "seed")


@dataclass
class Settings:
    redis_url: str = field(default_factory=lambda: os.getenv("REDIS_URL", "redis://localhost:6379/0"))
    dictionary_path: Optional[str] = field(default_factory=lambda: os.getenv("LOREM_DICTIONARY_PATH"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    def client(self) -> redis.Redis:
        return redis.Redis.from_url(self.redis_url, decode_responses=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def get_redis_client(settings: Settings = Depends(get_settings)) -> redis.Redis:
    return settings.client()


@lru_cache(maxsize=1)
def get_generator() -> LoremGenerator:
    return LoremGenerator(load_dictionary(get_settings().dictionary_path))


app = FastAPI(title="Lorem API", version="1.0.0")
configure_logging(get_settings().log_level)


class LoremRequest(BaseModel):
    shape: Optional[str] = Field(default=None, description="word-list, sentence, title, paragraph, ordered-list, unordered-list or definition-list")
    length: Optional[Union[int, str]] = Field(
        default=None,
        description="Words, sentences, paragraphs or items. A number or a range such as 3-5.",
    )
    wordsPerUnit: Optional[Union[int, str]] = Field(default=None, description="Words per sentence or list item")
    sentencesPerParagraph: Optional[Union[int, str]] = Field(default=None, description="Sentences per paragraph")
    seed: Optional[float] = Field(default=None, description="Seed for reproducible output")

    @validator("shape")
    def validate_shape(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            return Shape.parse(value).value
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc


class LoremResponse(BaseModel):
    shape: str
    seed: Optional[float] = None
    content: str


@app.post("/lorem", response_model=LoremResponse)
def handle_lorem(
    request: LoremRequest,
    redis_client: redis.Redis = Depends(get_redis_client),
    generator: LoremGenerator = Depends(get_generator),
):
    values = _merge_defaults(request, _read_defaults(redis_client))
    try:
        config = GeneratorConfig.from_values(
            shape=values["shape"],
            length=values["length"],
            words_per_unit=values["wordsPerUnit"],
            sentences_per_paragraph=values["sentencesPerParagraph"],
            seed=values["seed"],
        )
        content = generator.generate(config)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    logger.info(f"Generated {config.shape.value} with {len(content)} chars (seed={config.seed})")
    return LoremResponse(shape=config.shape.value, seed=config.seed, content=content)


@app.get("/lorem/shapes")
def list_shapes() -> dict:
    return {"shapes": [shape.value for shape in Shape]}


@app.get("/healthz")
def healthz(generator: LoremGenerator = Depends(get_generator)) -> dict:
    return {"status": "ok", "words": len(generator.dictionary)}


def _read_defaults(redis_client: redis.Redis) -> dict:
    raw = redis_client.get(DEFAULTS_KEY)
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning(f"Ignoring malformed JSON under {DEFAULTS_KEY}")
        return {}
    if not isinstance(payload, dict):
        logger.warning(f"Ignoring non-object value under {DEFAULTS_KEY}")
        return {}
    return {key: payload[key] for key in REQUEST_FIELDS if payload.get(key) is not None}


def _merge_defaults(request: LoremRequest, defaults: dict) -> dict:
    provided = request.dict()
    return {key: provided[key] if provided[key] is not None else defaults.get(key) for key in REQUEST_FIELDS}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
