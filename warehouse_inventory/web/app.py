"""FastAPI-based web interface for the warehouse inventory."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, Dict, Optional, Type
from urllib.parse import urlencode

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, StrictInt

from ..domain import DurableGood, InvalidEntityError, InventoryItem, PerishableGood
from ..repository import (
    DuplicateIdError,
    InMemoryRepository,
    InvalidQuantityError,
    NotFoundError,
    RepositoryError,
    RepositoryOptions,
)
from ..result import Result
from ..services import WarehouseManager

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

ERROR_STATUS: Dict[Type[RepositoryError], int] = {
    DuplicateIdError: 409,
    NotFoundError: 404,
    InvalidQuantityError: 422,
}


@dataclass(slots=True)
class WebSettings:
    """Configuration values for :func:`create_app`."""

    title: str = "Warehouse Inventory"
    seed_demo_data: bool = True
    repository_options: RepositoryOptions = field(default_factory=RepositoryOptions)


class DurableGoodIn(BaseModel):
    id: StrictInt
    name: str
    quantity: StrictInt
    brand: str
    warranty_months: StrictInt


class PerishableGoodIn(BaseModel):
    id: StrictInt
    name: str
    quantity: StrictInt
    expiry_date: date


class QuantityIn(BaseModel):
    quantity: StrictInt


class DeltaIn(BaseModel):
    delta: StrictInt


def _redirect(outcome: Result, success_message: str) -> RedirectResponse:
    if outcome.is_success:
        params = {"message": success_message}
    else:
        params = {"error": f"{type(outcome.error).__name__}: {outcome.error}"}
    return RedirectResponse("/?" + urlencode(params), status_code=303)


def _error_redirect(message: str) -> RedirectResponse:
    return RedirectResponse("/?" + urlencode({"error": message}), status_code=303)


def _json_outcome(outcome: Result, on_success: Callable[[], object]) -> JSONResponse:
    if outcome.is_success:
        return JSONResponse(on_success())
    error = outcome.error
    return JSONResponse(
        {"detail": str(error), "error": type(error).__name__},
        status_code=ERROR_STATUS.get(type(error), 400),
    )


def create_app(settings: Optional[WebSettings] = None) -> FastAPI:
    settings = settings or WebSettings()
    options = settings.repository_options
    manager = WarehouseManager(
        electronics=InMemoryRepository(
            RepositoryOptions(
                name="electronics", validate_on_insert=options.validate_on_insert
            ),
            item_type=DurableGood,
        ),
        groceries=InMemoryRepository(
            RepositoryOptions(
                name="groceries", validate_on_insert=options.validate_on_insert
            ),
            item_type=PerishableGood,
        ),
    )
    if settings.seed_demo_data:
        manager.seed_data()

    app = FastAPI(title=settings.title)
    app.state.manager = manager

    def repository_for(request: Request, kind: str) -> InMemoryRepository:
        manager: WarehouseManager = request.app.state.manager
        if kind == "electronics":
            return manager.electronics
        if kind == "groceries":
            return manager.groceries
        raise HTTPException(status_code=404, detail=f"Unknown inventory {kind!r}")

    # ------------------------------------------------------------------
    # HTML dashboard
    # ------------------------------------------------------------------
    @app.get("/")
    async def dashboard(request: Request):
        manager: WarehouseManager = request.app.state.manager
        electronics = sorted(manager.electronics.list_all(), key=lambda item: item.id)
        groceries = sorted(
            manager.groceries.list_all(), key=lambda item: item.expiry_date
        )
        expired_ids = {item.id for item in manager.expired_groceries()}
        return templates.TemplateResponse(
            request,
            "inventory.html",
            {
                "title": settings.title,
                "electronics": electronics,
                "groceries": groceries,
                "expired_ids": expired_ids,
                "message": request.query_params.get("message"),
                "error": request.query_params.get("error"),
            },
        )

    @app.post("/electronics")
    async def create_electronic_item(
        request: Request,
        item_id: int = Form(...),
        name: str = Form(...),
        quantity: int = Form(0),
        brand: str = Form(...),
        warranty_months: int = Form(0),
    ):
        try:
            item = DurableGood(item_id, name, quantity, brand, warranty_months)
        except InvalidEntityError as exc:
            return _error_redirect(f"InvalidEntityError: {exc}")
        outcome = repository_for(request, "electronics").insert(item)
        return _redirect(outcome, f"Added {item.name}")

    @app.post("/groceries")
    async def create_grocery_item(
        request: Request,
        item_id: int = Form(...),
        name: str = Form(...),
        quantity: int = Form(0),
        expiry_date: date = Form(...),
    ):
        try:
            item = PerishableGood(item_id, name, quantity, expiry_date)
        except InvalidEntityError as exc:
            return _error_redirect(f"InvalidEntityError: {exc}")
        outcome = repository_for(request, "groceries").insert(item)
        return _redirect(outcome, f"Added {item.name}")

    @app.post("/{kind}/{item_id}/increase")
    async def increase_stock(
        kind: str, item_id: int, request: Request, delta: int = Form(...)
    ):
        repo = repository_for(request, kind)
        outcome = request.app.state.manager.increase_stock(repo, item_id, delta)
        return _redirect(outcome, f"Increased item {item_id} by {delta}")

    @app.post("/{kind}/{item_id}/quantity")
    async def set_quantity(
        kind: str, item_id: int, request: Request, quantity: int = Form(...)
    ):
        outcome = repository_for(request, kind).set_quantity(item_id, quantity)
        return _redirect(outcome, f"Set quantity of item {item_id} to {quantity}")

    @app.post("/{kind}/{item_id}/remove")
    async def remove_item(kind: str, item_id: int, request: Request):
        repo = repository_for(request, kind)
        outcome = request.app.state.manager.remove_item_by_id(repo, item_id)
        return _redirect(outcome, f"Removed item {item_id}")

    # ------------------------------------------------------------------
    # JSON API
    # ------------------------------------------------------------------
    @app.get("/api/{kind}")
    async def list_items(kind: str, request: Request):
        repo = repository_for(request, kind)
        return list(repo.as_dicts())

    @app.get("/api/{kind}/{item_id}")
    async def get_item(kind: str, item_id: int, request: Request):
        outcome = repository_for(request, kind).get(item_id)
        return _json_outcome(outcome, lambda: outcome.value.to_dict())

    @app.post("/api/electronics", status_code=201)
    async def insert_electronic_item(payload: DurableGoodIn, request: Request):
        return _insert_json(
            repository_for(request, "electronics"),
            lambda: DurableGood(
                payload.id,
                payload.name,
                payload.quantity,
                payload.brand,
                payload.warranty_months,
            ),
        )

    @app.post("/api/groceries", status_code=201)
    async def insert_grocery_item(payload: PerishableGoodIn, request: Request):
        return _insert_json(
            repository_for(request, "groceries"),
            lambda: PerishableGood(
                payload.id, payload.name, payload.quantity, payload.expiry_date
            ),
        )

    @app.put("/api/{kind}/{item_id}/quantity")
    async def put_quantity(
        kind: str, item_id: int, payload: QuantityIn, request: Request
    ):
        repo = repository_for(request, kind)
        outcome = repo.set_quantity(item_id, payload.quantity)
        return _json_outcome(outcome, lambda: repo.get(item_id).unwrap().to_dict())

    @app.post("/api/{kind}/{item_id}/increase")
    async def post_increase(
        kind: str, item_id: int, payload: DeltaIn, request: Request
    ):
        repo = repository_for(request, kind)
        outcome = repo.increase_quantity(item_id, payload.delta)
        return _json_outcome(outcome, lambda: repo.get(item_id).unwrap().to_dict())

    @app.delete("/api/{kind}/{item_id}")
    async def delete_item(kind: str, item_id: int, request: Request):
        outcome = repository_for(request, kind).remove(item_id)
        return _json_outcome(outcome, lambda: {"removed": item_id})

    return app


def _insert_json(
    repo: InMemoryRepository, build: Callable[[], InventoryItem]
) -> JSONResponse:
    try:
        item = build()
    except InvalidEntityError as exc:
        return JSONResponse(
            {"detail": str(exc), "error": "InvalidEntityError"}, status_code=422
        )
    outcome = repo.insert(item)
    if outcome.is_success:
        return JSONResponse(item.to_dict(), status_code=201)
    return _json_outcome(outcome, item.to_dict)


__all__ = ["create_app", "WebSettings"]
