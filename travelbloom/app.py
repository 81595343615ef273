from __future__ import annotations

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from .catalog.data_store import DataStore
from .clock.scheduler import describe_clock, format_clock_time, single_clock_text
from .clock.timezones import COUNTRY_TIME_ZONES, resolve_time_zone
from .config import DEFAULT_APP_CONFIG
from .errors import DatasetNotReadyError, EmptyQueryError
from .rendering.cards import NO_MATCH_MESSAGE, NO_RESULTS_MESSAGE, build_cards, build_header
from .rendering.surface import CommandSurface
from .search.matcher import search
from .search.models import SearchRequest, SearchResponse, SocketMessage
from .session import SearchSession

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await app.state.store.load()
    yield


app = FastAPI(title="TravelBloom Recommendation API", version="1.0.0", lifespan=lifespan)
app.state.store = DataStore(DEFAULT_APP_CONFIG.data_path)

_STATIC_DIR = Path(__file__).resolve().parent / "static"


def _store(app: FastAPI) -> DataStore:
    return app.state.store


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata(request: Request) -> dict:
    store = _store(request.app)
    return {
        "ready": store.is_ready,
        "load_failed": store.load_error is not None,
        "keywords": ["beach", "temple", "country"],
        "countries": [c.name for c in store.countries()],
        "time_zones": dict(COUNTRY_TIME_ZONES),
    }


@app.post("/search", response_model=SearchResponse)
def search_places(body: SearchRequest, request: Request) -> SearchResponse:
    try:
        result = search(body.query, _store(request.app))
    except EmptyQueryError as exc:
        raise HTTPException(status_code=400, detail=exc.message)
    except DatasetNotReadyError as exc:
        raise HTTPException(status_code=503, detail=exc.message)

    raw = body.query.strip()
    if not result.matched:
        return SearchResponse(
            query=raw,
            label=None,
            tier=result.tier,
            total_found=0,
            header=build_header(raw, 0, None),
            message=NO_MATCH_MESSAGE,
        )

    cards = build_cards(
        result.items,
        result.badge or result.label,
        DEFAULT_APP_CONFIG.max_cards,
        DEFAULT_APP_CONFIG.min_cards,
    )
    return SearchResponse(
        query=raw,
        label=result.label,
        tier=result.tier,
        total_found=len(result.items),
        header=build_header(raw, len(result.items), result.label),
        cards=cards,
        message=None if cards else NO_RESULTS_MESSAGE,
        clock=describe_clock(result.clock),
    )


@app.get("/time/{country}")
def country_time(country: str) -> dict:
    time_zone = resolve_time_zone(country)
    if time_zone is None:
        raise HTTPException(
            status_code=404,
            detail=f"Time zone not configured for {country.strip()}",
        )
    label = country.strip()
    return {
        "country": label,
        "time_zone": time_zone,
        "time": format_clock_time(time_zone),
        "text": single_clock_text(label, time_zone),
    }


# ── Live page session ────────────────────────────────────────────────────


def _dispatch(session: SearchSession, message: SocketMessage) -> None:
    if message.action == "search":
        session.search(message.query)
    elif message.action == "reset":
        session.reset()
    elif message.action == "navigate":
        session.navigate(message.page or "home")


async def _pump(websocket: WebSocket, outbox: asyncio.Queue[dict[str, Any]]) -> None:
    while True:
        command = await outbox.get()
        await websocket.send_json(command)


@app.websocket("/ws")
async def search_socket(websocket: WebSocket) -> None:
    await websocket.accept()

    outbox: asyncio.Queue[dict[str, Any]] = asyncio.Queue()
    store = _store(websocket.app)
    session = SearchSession(store, CommandSurface(outbox.put_nowait), DEFAULT_APP_CONFIG)
    sender = asyncio.create_task(_pump(websocket, outbox))

    if store.load_error is not None:
        session.announce_load_failure()

    try:
        while True:
            text = await websocket.receive_text()
            try:
                message = SocketMessage.model_validate(json.loads(text))
            except (ValueError, ValidationError):
                logger.warning("Ignoring malformed page message: %r", text[:200])
                continue
            _dispatch(session, message)
    except WebSocketDisconnect:
        logger.debug("Page session closed")
    finally:
        session.close()
        sender.cancel()
        await asyncio.gather(sender, return_exceptions=True)


# ── Static page ──────────────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.get("/")
def root():
    return FileResponse(str(_STATIC_DIR / "index.html"))
