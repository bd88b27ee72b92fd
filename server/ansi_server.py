"""ansi-spans FastAPI server — renders ANSI terminal output as styled runs."""

from __future__ import annotations

import logging
import os
import socket
import time
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, model_validator

from ansi_parser import handle_ansi_output, parse_lines
from html_render import render_html
from logging_setup import init_logging
from theme import available_themes, get_theme

logger = logging.getLogger(__name__)


def _env_int(name: str, fallback: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return fallback
    try:
        return int(raw)
    except ValueError:
        return fallback


TOKEN = os.environ.get("ANSI_SPANS_TOKEN", "").strip()
MAX_INPUT = _env_int("ANSI_SPANS_MAX_INPUT", 200_000)
RATE_LIMIT = _env_int("ANSI_SPANS_RATE_LIMIT", 50)
DEFAULT_THEME = os.environ.get("ANSI_SPANS_THEME", "dark").strip() or "dark"

app = FastAPI(title="ansi-spans", version="1.0.0")
_security = HTTPBearer(auto_error=False)


def _verify(creds: Optional[HTTPAuthorizationCredentials] = Depends(_security)) -> None:
    if not TOKEN:
        return
    if creds is None or creds.credentials != TOKEN:
        logger.warning("Rejected request with missing or invalid token")
        raise HTTPException(status_code=401, detail="Invalid token")


class _RateLimiter:
    """Simple in-memory sliding-window rate limiter."""

    def __init__(self, max_per_sec: int = 20):
        self._max = max_per_sec
        self._timestamps: list[float] = []

    def check(self) -> None:
        now = time.monotonic()
        self._timestamps = [t for t in self._timestamps if now - t < 1.0]
        if len(self._timestamps) >= self._max:
            logger.warning("Rate limit of %d requests/s exceeded", self._max)
            raise HTTPException(status_code=429, detail="Rate limit exceeded")
        self._timestamps.append(now)


_render_limiter = _RateLimiter(max_per_sec=RATE_LIMIT)


class RenderRequest(BaseModel):
    text: str
    bright: bool = False
    lines: bool = False

    @model_validator(mode="after")
    def within_limit(self):
        if len(self.text) > MAX_INPUT:
            raise ValueError(f"text exceeds {MAX_INPUT} characters")
        return self


class RenderHtmlRequest(BaseModel):
    text: str
    bright: bool = False
    theme: Optional[str] = None

    @model_validator(mode="after")
    def within_limit(self):
        if len(self.text) > MAX_INPUT:
            raise ValueError(f"text exceeds {MAX_INPUT} characters")
        return self


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "hostname": socket.gethostname(),
        "themes": available_themes(),
    }


@app.post("/render")
async def render(body: RenderRequest, _: None = Depends(_verify)):
    _render_limiter.check()
    if not body.lines:
        nodes = handle_ansi_output(body.text, bright=body.bright)
        return {"nodes": [node.to_run() for node in nodes]}

    parsed = parse_lines(body.text, bright=body.bright)
    # Strip trailing empty lines
    while parsed and all(node.text.strip() == "" for node in parsed[-1]):
        parsed.pop()
    return {"lines": [[node.to_run() for node in line] for line in parsed]}


@app.post("/render/html")
async def render_as_html(body: RenderHtmlRequest, _: None = Depends(_verify)):
    _render_limiter.check()
    name = body.theme or DEFAULT_THEME
    try:
        theme = get_theme(name)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    nodes = handle_ansi_output(body.text, bright=body.bright)
    return {"html": render_html(nodes, theme), "theme": theme.name}


def main() -> None:
    import uvicorn

    init_logging()
    host = os.environ.get("ANSI_SPANS_HOST", "127.0.0.1")
    port = _env_int("ANSI_SPANS_PORT", 8787)
    logger.info("Starting ansi-spans on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
