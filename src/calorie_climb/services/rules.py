"""Game rules: a pure reducer over game actions."""

from dataclasses import replace

from calorie_climb.domain.foods import Food
from calorie_climb.domain.game import (
    CharacterState,
    Expression,
    FeedFood,
    GameAction,
    GameOverCheck,
    GameState,
    ResetGame,
    SetLoading,
    SetMaxCalories,
    SetOnlineMode,
)
from calorie_climb.services.character import evolve

WIN_MIN_HEALTH = 6
WIN_MIN_HAPPINESS = 6
COLLAPSE_HEALTH = 2


def initial_state(
    max_calories: int | None = None, is_online_mode: bool = False
) -> GameState:
    """Create the opening state of a new game."""
    state = GameState(is_online_mode=is_online_mode)
    if max_calories is not None:
        state = replace(state, max_calories=max_calories)
    return replace(state, feedback_message=welcome_message(is_online_mode))


def welcome_message(is_online_mode: bool) -> str:
    message = (
        "Welcome to Calorie Climb! The person just had some water (0 calories). "
        "Now find something with more calories to keep the game going!"
    )
    if is_online_mode:
        message += " ✨ Enhanced with real food data!"
    return message


def is_valid_move(state: GameState, food: Food) -> bool:
    """True when ``food`` climbs above the current food's calories."""
    return food.calories > state.current_food.calories


def reduce(state: GameState, action: GameAction) -> GameState:  # noqa: PLR0911
    """Return the next game state for ``action``."""
    if isinstance(action, SetLoading):
        return replace(state, is_loading=action.is_loading)
    if isinstance(action, SetOnlineMode):
        return replace(state, is_online_mode=action.is_online)
    if isinstance(action, SetMaxCalories):
        return replace(state, max_calories=action.calories)
    if isinstance(action, ResetGame):
        fresh = initial_state(state.max_calories, state.is_online_mode)
        return replace(fresh, longest_streak=state.longest_streak)
    if isinstance(action, FeedFood):
        if state.game_over:
            return replace(state, is_loading=False)
        return _feed(state, action)
    raise TypeError(f"Unsupported game action: {action!r}")


def check_game_over(
    food: Food, total_calories: int, max_calories: int, character: CharacterState
) -> GameOverCheck:
    """Evaluate terminal conditions after a move has been applied."""
    if food.is_toxic:
        return GameOverCheck(
            game_over=True,
            reason=(
                f"Game Over! The person ate {food.name} which is toxic and "
                "dangerous. Always remember to only eat safe, real food! "
                "The person needs medical attention right away."
            ),
        )

    if total_calories >= max_calories:
        if (
            character.health >= WIN_MIN_HEALTH
            and character.happiness >= WIN_MIN_HAPPINESS
        ):
            return GameOverCheck(
                game_over=True,
                reason=(
                    f"🎉 CONGRATULATIONS! You've successfully reached "
                    f"{total_calories} calories while keeping your person healthy "
                    "and happy! You've mastered the art of balanced eating! 🎉"
                ),
                is_win=True,
            )
        return GameOverCheck(
            game_over=True,
            reason=(
                f"Game Over! The person has eaten {total_calories} calories, which "
                "is way too much for one day! Their stomach hurts and they feel "
                "very sick. Remember, eating too much can make us feel awful and "
                "hurt our health."
            ),
        )

    if character.health <= COLLAPSE_HEALTH and character.expression is Expression.SICK:
        return GameOverCheck(
            game_over=True,
            reason=(
                "Game Over! The person has eaten too many unhealthy foods and is "
                "feeling very sick. Their body can't handle all the junk food! "
                "Remember, our bodies work best with nutritious, healthy foods."
            ),
        )

    return GameOverCheck(game_over=False)


def _feed(state: GameState, action: FeedFood) -> GameState:
    food = action.food
    if food is None:
        return replace(
            state,
            feedback_message=(
                f'Sorry, I don\'t know about "{action.food_name}". Try something '
                'like "apple", "banana", "pizza", or "chocolate"!'
            ),
            is_loading=False,
        )

    current = state.current_food
    if not food.is_toxic and not is_valid_move(state, food):
        return replace(
            state,
            game_over=True,
            game_over_reason=(
                f"Game Over! {food.name} ({food.calories} calories) does not have "
                f"more calories than {current.name} ({current.calories} calories). "
                "You needed to find something with more calories to continue the "
                "calorie climb!"
            ),
            feedback_message=action.feedback_message
            or (
                f"Oops! {food.name} does not have more calories than "
                f"{current.name}. Try again!"
            ),
            is_loading=False,
            is_win=False,
        )

    total_calories = state.total_calories + food.calories
    character = evolve(food, state.character, total_calories, state.max_calories)
    outcome = check_game_over(food, total_calories, state.max_calories, character)
    history = (*state.food_history, food)

    if outcome.game_over:
        return replace(
            state,
            current_food=food,
            character=character,
            total_calories=total_calories,
            food_history=history,
            game_over=True,
            game_over_reason=outcome.reason,
            feedback_message=action.feedback_message or outcome.reason,
            is_loading=False,
            is_win=outcome.is_win,
        )

    streak = state.streak + 1
    return replace(
        state,
        previous_food=current,
        current_food=food,
        score=state.score + 1,
        streak=streak,
        longest_streak=max(state.longest_streak, streak),
        total_calories=total_calories,
        food_history=history,
        character=character,
        feedback_message=action.feedback_message
        or f"Great choice! {food.name} has {food.calories} calories.",
        is_loading=False,
    )
