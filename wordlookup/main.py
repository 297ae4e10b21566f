from __future__ import annotations
import logging
from typing import Dict

import socketio
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .schemas import LookupNotFound, SourceInfo, Suggestions
from .managers.search import SearchManager
from .routers import ws
from .dictionary import service as dict_service
from .spelling import speller

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins='*')
app = FastAPI(title="Word Lookup Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=['*'],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# Plain WebSocket surface for clients without a Socket.IO library
app.include_router(ws.router)

searches = SearchManager(sio)

def _clean_term(term: str) -> str:
    term = term.strip()
    if not term:
        raise HTTPException(status_code=422, detail='term must not be blank')
    return term

# REST Endpoints
@app.get('/health')
async def health() -> Dict[str, bool]:
    return { 'ok': True }

@app.get('/sources')
async def list_sources():
    sources = [
        SourceInfo(key=key, name=info['name'], tier=info['tier'], enabled=info['enabled']).model_dump()
        for key, info in config.SOURCES.items()
    ]
    return { 'sources': sources, 'available': config.available_sources(), 'premium': config.has_premium_sources() }

@app.get('/lookup')
async def lookup(term: str = Query(..., min_length=1, max_length=100)):
    term = _clean_term(term)
    result = await dict_service.lookup(term)
    if isinstance(result, LookupNotFound):
        return JSONResponse(status_code=404, content=result.model_dump(by_alias=True))
    return result.model_dump(by_alias=True)

@app.get('/suggest')
async def suggest(term: str = Query(..., min_length=1, max_length=100)):
    term = _clean_term(term)
    suggestions = await speller.suggest(term)
    return Suggestions(word=term, suggestions=suggestions).model_dump(by_alias=True)

# Socket.IO Events
def _payload_value(payload, key: str) -> str:
    # Clients may send the bare string or an object like {'term': ...}
    if isinstance(payload, dict):
        payload = payload.get(key)
    return payload if isinstance(payload, str) else ''

@sio.event
async def connect(sid, environ, auth):
    searches.get_or_create(sid)
    # Same handshake as the /ws surface
    await sio.emit('ready', { 'sources': config.available_sources() }, to=sid)

@sio.event
async def disconnect(sid):
    searches.remove(sid)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

@sio.on('search:lookup')
async def search_lookup(sid, payload):
    searches.search(sid, _payload_value(payload, 'term'))

@sio.on('search:suggestion')
async def search_suggestion(sid, payload):
    searches.choose_suggestion(sid, _payload_value(payload, 'word'))

@sio.on('search:clear')
async def search_clear(sid, payload=None):
    await searches.clear(sid)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordlookup.main:application --reload --host 0.0.0.0 --port 8000
