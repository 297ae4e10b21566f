from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from wordlookup.config import available_sources
from wordlookup.managers.search import SearchSession

router = APIRouter()

def _text(data: dict, key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ''

@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()

    async def emit(event: str, payload: dict):
        await websocket.send_json({"type": event, **payload})

    session = SearchSession(f"ws-{id(websocket):x}", emit)

    # Let the client know which sources will be consulted
    await websocket.send_json({"type": "ready", "sources": available_sources()})

    try:
        while True:
            try:
                data = await websocket.receive_json()
            except (ValueError, KeyError):
                # not JSON, or a binary frame
                await websocket.send_json({"type": "error", "message": "Message must be a JSON object"})
                continue
            kind = data.get("type") if isinstance(data, dict) else None
            if kind == "lookup":
                session.start_search(_text(data, "term"))
            elif kind == "suggestion":
                session.start_search(_text(data, "word"))
            elif kind == "clear":
                await session.clear()
            else:
                await websocket.send_json({"type": "error", "message": "Unknown message type"})
    except WebSocketDisconnect:
        pass
    finally:
        session.close()
