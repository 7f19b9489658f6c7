"""Game session orchestration around the rules reducer."""

import logging
from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

from calorie_climb.domain.game import (
    FeedFood,
    GameState,
    ResetGame,
    SetLoading,
    SetMaxCalories,
    SetOnlineMode,
)
from calorie_climb.domain.nutrition import SearchMode
from calorie_climb.services.cache import Cache, InMemoryCache
from calorie_climb.services.feedback import FeedbackService
from calorie_climb.services.resolver import FoodResolver
from calorie_climb.services.rules import initial_state, is_valid_move, reduce

MIN_MAX_CALORIES = 100
MAX_SESSIONS = 10_000

_logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when a game session id is unknown."""


@dataclass
class GameSession:
    """A live game; ``generation`` changes on every reset."""

    id: UUID
    state: GameState
    generation: int = 0


@dataclass(frozen=True)
class FeedResult:
    """Outcome of a feed request."""

    state: GameState
    accepted: bool
    resolution_failed: bool = False


@dataclass
class GameService:
    """Run game sessions held in process memory.

    Sessions expire after ``session_ttl_seconds`` without being touched, and
    the least recently used are evicted once ``MAX_SESSIONS`` are live.
    """

    resolver: FoodResolver
    feedback_service: FeedbackService
    default_max_calories: int = 2000
    session_ttl_seconds: float = 6 * 60 * 60
    sessions: Cache = field(
        default_factory=lambda: InMemoryCache(max_entries=MAX_SESSIONS)
    )

    def start(self) -> GameSession:
        """Create a new game session."""
        session = GameSession(
            id=uuid4(),
            state=initial_state(self.default_max_calories, self.resolver.is_online),
        )
        self._store(session)
        _logger.info("Started game session %s", session.id)
        return session

    def get(self, session_id: UUID) -> GameSession:
        """Return a live session and refresh its idle timeout."""
        session = self.sessions.get(_session_key(session_id))
        if not isinstance(session, GameSession):
            raise SessionNotFoundError(str(session_id))
        self._store(session)
        return session

    def _store(self, session: GameSession) -> None:
        self.sessions.set(
            _session_key(session.id), session, ttl_seconds=self.session_ttl_seconds
        )

    async def feed(self, session_id: UUID, food_name: str) -> FeedResult:
        """Resolve ``food_name`` and apply it to the session.

        Submissions are ignored while a previous feed is loading or after the
        game has ended. Results that arrive after a reset are discarded.
        """
        session = self.get(session_id)
        if session.state.is_loading or session.state.game_over:
            return FeedResult(state=session.state, accepted=False)

        generation = session.generation
        session.state = reduce(session.state, SetLoading(True))
        try:
            food = await self.resolver.resolve(food_name)
        except Exception:
            _logger.exception("Food resolution failed for %r", food_name)
            if session.generation == generation:
                session.state = reduce(session.state, SetLoading(False))
            return FeedResult(
                state=session.state, accepted=False, resolution_failed=True
            )
        if session.generation != generation:
            _logger.info("Discarding stale feed result for session %s", session.id)
            return FeedResult(state=session.state, accepted=False)

        prior = session.state
        next_state = reduce(prior, FeedFood(food_name=food_name, food=food))
        if food is not None:
            valid = food.is_toxic or is_valid_move(prior, food)
            message = await self.feedback_service.message(
                food, prior.current_food, valid, next_state.character
            )
            if valid and next_state.game_over:
                message = (
                    await self.feedback_service.game_over_message(next_state)
                    or message
                )
            next_state = replace(next_state, feedback_message=message)

        if session.generation != generation:
            _logger.info("Discarding stale feed result for session %s", session.id)
            return FeedResult(state=session.state, accepted=False)

        session.state = reduce(next_state, SetOnlineMode(self.resolver.is_online))
        return FeedResult(state=session.state, accepted=True)

    def reset(self, session_id: UUID) -> GameSession:
        """Start over, keeping the longest streak and calorie ceiling."""
        session = self.get(session_id)
        session.generation += 1
        session.state = reduce(session.state, ResetGame())
        session.state = reduce(session.state, SetOnlineMode(self.resolver.is_online))
        return session

    def set_max_calories(self, session_id: UUID, calories: int) -> GameSession:
        """Change the calorie ceiling without re-checking past moves."""
        if calories < MIN_MAX_CALORIES:
            raise ValueError(f"max_calories must be at least {MIN_MAX_CALORIES}")
        session = self.get(session_id)
        session.state = reduce(session.state, SetMaxCalories(calories))
        return session

    def set_search_mode(self, mode: SearchMode) -> SearchMode:
        """Change how broadly foods are searched for every session."""
        self.resolver.set_search_mode(mode)
        _logger.info("Search mode set to %s", mode.value)
        return self.resolver.search_mode


def _session_key(session_id: UUID) -> str:
    return f"game:{session_id}"
