from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from metrodle.adapters.api.controllers.game import router as game_router
from metrodle.adapters.api.dependencies import (
    build_key_value_store,
    build_puzzle_context,
)
from metrodle.adapters.settings import GameSettings, env_bool
from metrodle.domain.exceptions import (
    DataIntegrityFault,
    StationNotFound,
    UserInputRejected,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # The only async boundary: load and validate the network before serving.
    settings = GameSettings.from_env()
    app.state.settings = settings
    app.state.puzzle = await build_puzzle_context(settings)
    app.state.store = build_key_value_store(settings)
    yield


app = FastAPI(title="Metrodle SP", lifespan=lifespan)
app.include_router(game_router)


@app.exception_handler(UserInputRejected)
async def user_input_rejected_handler(
    request: Request, exc: UserInputRejected
) -> JSONResponse:
    status_code = 404 if isinstance(exc, StationNotFound) else 409
    return JSONResponse(
        status_code=status_code, content={"detail": exc.message, "code": exc.code}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the frontend can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = env_bool("METRODLE_REVEAL_ERRORS", False)

    if reveal or isinstance(exc, (DataIntegrityFault, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
