"""
FastAPI dependencies.

The store is owned by the application (``app.state.store``) and handed to
route handlers through ``get_store``; tests replace it by passing their own
store to ``create_app``.
"""

from fastapi import Depends, Request

from adtracker.core import StatsService, Store


def get_store(request: Request) -> Store:
    """Return the application's store."""
    return request.app.state.store


def get_stats_service(store: Store = Depends(get_store)) -> StatsService:
    return StatsService(store)
