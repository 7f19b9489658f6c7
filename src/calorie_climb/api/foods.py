"""Food lookup endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from calorie_climb.api.models import (
    FoodModel,
    SearchModeModel,
    SearchPageModel,
    SuggestionsResponse,
)
from calorie_climb.services.food_profile import food_from_details
from calorie_climb.services.safety import contains_restricted

if TYPE_CHECKING:
    from calorie_climb.containers import AppContainer

SEARCH_PAGE_SIZE = 20

router = APIRouter(tags=["foods"])
_logger = logging.getLogger(__name__)


@router.get("/foods/suggestions")
async def suggestions(
    request: Request,
    q: str = Query(default="", max_length=200),
    client: str = Query(default="default", max_length=64),
) -> SuggestionsResponse:
    """Return debounced suggestions for partially typed input."""
    container: AppContainer = request.app.state.container
    results = await container.suggestion_debouncer.lookup(client, q)
    if results is None:
        return SuggestionsResponse(query=q, superseded=True)
    return SuggestionsResponse(
        query=q, suggestions=[FoodModel.from_food(food) for food in results]
    )


@router.get("/foods/resolve")
async def resolve(
    request: Request, name: str = Query(min_length=1, max_length=200)
) -> FoodModel:
    """Resolve a food name the same way feeding does."""
    container: AppContainer = request.app.state.container
    food = await container.resolver.resolve(name)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return FoodModel.from_food(food)


@router.get("/foods/search")
async def search(
    request: Request,
    q: str = Query(min_length=1, max_length=200),
    page: int = Query(default=1, ge=1),
) -> SearchPageModel:
    """Browse FoodData Central one page at a time."""
    container: AppContainer = request.app.state.container
    if container.nutrition_service is None or not container.resolver.is_online:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    if contains_restricted(q):
        return SearchPageModel(foods=[], total_hits=0, current_page=page, total_pages=0)
    try:
        result = await container.nutrition_service.search(
            q,
            limit=SEARCH_PAGE_SIZE,
            mode=container.resolver.search_mode,
            page_number=page,
        )
    except Exception as exc:
        _logger.exception("Food search failed", extra={"query": q})
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY) from exc
    return SearchPageModel.from_page(result)


@router.get("/foods/{fdc_id}")
async def food_detail(fdc_id: int, request: Request) -> FoodModel:
    """Return one FoodData Central record as a playable food."""
    container: AppContainer = request.app.state.container
    if container.nutrition_service is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    try:
        details = await container.nutrition_service.get_food(fdc_id)
    except Exception as exc:
        _logger.exception("Food detail failed", extra={"fdc_id": fdc_id})
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY) from exc
    food = food_from_details(details, container.resolver.search_mode)
    if contains_restricted(food.name) or contains_restricted(food.description):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return FoodModel.from_food(food)


@router.get("/settings/search-mode")
async def get_search_mode(request: Request) -> SearchModeModel:
    """Return the current search breadth."""
    container: AppContainer = request.app.state.container
    return SearchModeModel(search_mode=container.resolver.search_mode)


@router.put("/settings/search-mode")
async def set_search_mode(payload: SearchModeModel, request: Request) -> SearchModeModel:
    """Change the search breadth for all sessions."""
    container: AppContainer = request.app.state.container
    mode = container.game_service.set_search_mode(payload.search_mode)
    return SearchModeModel(search_mode=mode)
