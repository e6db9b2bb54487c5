from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse

from core.store import GameNotFound, SnapshotStore


def create_app(store: SnapshotStore) -> FastAPI:
    """Build the read-only HTTP surface over ``store``.

    Both routes respond with a JSON list of game snapshots.
    """
    app = FastAPI(title="Game Status", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/")
    async def list_games() -> JSONResponse:
        return JSONResponse([s.to_dict() for s in store.list_all()])

    @app.get("/{name}")
    async def get_game(name: str):
        result = store.get(name)
        if isinstance(result, GameNotFound):
            return PlainTextResponse(
                f"Invalid parameter try: {', '.join(sorted(result.valid_names))}",
                status_code=404,
            )
        return JSONResponse([result.to_dict()])

    return app
