"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from calorie_climb.api.foods import router as foods_router
from calorie_climb.api.models import (
    FeedRequest,
    FeedResponse,
    GameSettingsRequest,
    GameStateModel,
)
from calorie_climb.app_logging import configure_logging
from calorie_climb.containers import AppContainer
from calorie_climb.services.game import GameSession, SessionNotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Calorie Climb starting: food data %s, search mode %s",
            app.state.container.resolver.mode,
            app.state.container.resolver.search_mode.value,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(foods_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok", "food_data": container.resolver.mode}

    @app.post("/games", status_code=status.HTTP_201_CREATED)
    async def start_game(request: Request) -> GameStateModel:
        """Start a new game session."""
        state_container: AppContainer = request.app.state.container
        session = state_container.game_service.start()
        return _game_payload(session)

    @app.get("/games/{session_id}")
    async def get_game(session_id: UUID, request: Request) -> GameStateModel:
        """Return the current state of a game."""
        state_container: AppContainer = request.app.state.container
        session = _get_session(state_container, session_id)
        return _game_payload(session)

    @app.post("/games/{session_id}/feed")
    async def feed(
        session_id: UUID, payload: FeedRequest, request: Request
    ) -> FeedResponse:
        """Feed a food to the character."""
        state_container: AppContainer = request.app.state.container
        _get_session(state_container, session_id)
        result = await state_container.game_service.feed(session_id, payload.food)
        return FeedResponse(
            accepted=result.accepted,
            resolution_failed=result.resolution_failed,
            game=GameStateModel.from_state(session_id, result.state),
        )

    @app.post("/games/{session_id}/reset")
    async def reset(session_id: UUID, request: Request) -> GameStateModel:
        """Start over, keeping the longest streak and calorie ceiling."""
        state_container: AppContainer = request.app.state.container
        _get_session(state_container, session_id)
        session = state_container.game_service.reset(session_id)
        return _game_payload(session)

    @app.put("/games/{session_id}/settings")
    async def update_settings(
        session_id: UUID, payload: GameSettingsRequest, request: Request
    ) -> GameStateModel:
        """Update per-game settings."""
        state_container: AppContainer = request.app.state.container
        _get_session(state_container, session_id)
        session = state_container.game_service.set_max_calories(
            session_id, payload.max_calories
        )
        return _game_payload(session)

    return app


def _get_session(container: AppContainer, session_id: UUID) -> GameSession:
    try:
        return container.game_service.get(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Game not found"
        ) from exc


def _game_payload(session: GameSession) -> GameStateModel:
    return GameStateModel.from_state(session.id, session.state)
