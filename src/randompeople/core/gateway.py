from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from randompeople import __version__
from randompeople.core.config import Settings
from randompeople.core.logging_config import log_generated, setup_logging
from randompeople.core.names import (
    InvalidArgument,
    NameCategory,
    fetch_names,
    generate_full_name,
    generate_names,
)
from randompeople.core.url_params import get_url_parameter

logger = logging.getLogger("randompeople.gateway")


class NameResponse(BaseModel):
    name: str
    first: str
    last: str
    gender: str


class NameBatchResponse(BaseModel):
    names: list[NameResponse]


class PoolResponse(BaseModel):
    category: str
    names: list[str]


class ParamResponse(BaseModel):
    name: str
    value: Optional[str] = None


def _parse_count(raw: str, max_batch: int) -> int:
    try:
        count = int(raw)
    except ValueError as exc:
        raise InvalidArgument(f"count must be an integer, got {raw!r}") from exc
    if count < 0 or count > max_batch:
        raise InvalidArgument(f"count must be between 0 and {max_batch}, got {count}")
    return count


def create_app() -> FastAPI:
    # Ensure .env is loaded before anything reads os.getenv
    load_dotenv(override=False)

    settings = Settings.from_env()
    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level)

    app = FastAPI(title="randompeople", version=__version__)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/names", response_model=None)
    def names(request: Request) -> NameResponse | NameBatchResponse:
        query = request.url.query
        gender = get_url_parameter("gender", query) or settings.default_gender
        seed = get_url_parameter("seed", query)
        raw_count = get_url_parameter("count", query)
        try:
            if raw_count is None:
                generated = [generate_full_name(gender, seed=seed)]
            else:
                generated = generate_names(
                    _parse_count(raw_count, settings.max_batch), gender, seed=seed,
                )
        except InvalidArgument as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        for item in generated:
            log_generated(item.full, item.gender.value, seed=seed, source="api")
        results = [NameResponse(**item.to_dict()) for item in generated]
        if raw_count is None:
            return results[0]
        return NameBatchResponse(names=results)

    @app.get("/pools")
    def pools() -> dict[str, list[str]]:
        return {"categories": [c.value for c in NameCategory]}

    @app.get("/pools/{category}", response_model=PoolResponse)
    def pool(category: str) -> PoolResponse:
        names = fetch_names(category)
        if not names:
            logger.info("Requested unknown name pool %r", category)
        return PoolResponse(category=category, names=list(names))

    @app.get("/params/{name}", response_model=ParamResponse)
    def param(name: str, request: Request) -> ParamResponse:
        return ParamResponse(name=name, value=get_url_parameter(name, request.url.query))

    return app
