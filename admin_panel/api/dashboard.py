"""Routes en lecture seule sur le registre du tableau de bord."""
from __future__ import annotations

from typing import Any, Iterator

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse

from admin_panel.core import assets, config, models
from admin_panel.core.bootstrap import DEFAULT_BOOTSTRAPPERS, build_dashboard
from admin_panel.core.dashboard import Dashboard
from admin_panel.core.menu_render import split_columns

router = APIRouter()


def get_dashboard(request: Request) -> Iterator[Dashboard]:
    """Construit un registre propre à la requête puis le vide en fin de requête."""

    bootstrappers = getattr(request.app.state, "bootstrappers", DEFAULT_BOOTSTRAPPERS)
    dashboard = build_dashboard(bootstrappers)
    try:
        yield dashboard
    finally:
        dashboard.flush_state()


@router.get("/menu/{location}", response_class=HTMLResponse)
def render_menu(location: str, dashboard: Dashboard = Depends(get_dashboard)) -> HTMLResponse:
    return HTMLResponse(dashboard.render_menu(location))


@router.get("/menu/{location}/entries", response_model=models.MenuEntriesResponse)
def list_menu_entries(
    location: str,
    columns: int | None = None,
    dashboard: Dashboard = Depends(get_dashboard),
) -> models.MenuEntriesResponse:
    entries = dashboard.menu_entries(location)
    chunks = None
    if columns is not None:
        try:
            chunks = split_columns(entries, columns)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    return models.MenuEntriesResponse(location=location, entries=entries, columns=chunks)


@router.get("/permissions")
def list_permissions(
    group: list[str] | None = Query(default=None),
    dashboard: Dashboard = Depends(get_dashboard),
) -> dict[str, Any]:
    return dashboard.get_permission(group)


@router.get("/permissions/allow-all")
def list_allow_all_permissions(
    group: list[str] | None = Query(default=None),
    dashboard: Dashboard = Depends(get_dashboard),
) -> dict[str, bool]:
    return dashboard.get_allow_all_permission(group)


@router.get("/resources")
def list_resources(dashboard: Dashboard = Depends(get_dashboard)) -> dict[str, list[Any]]:
    return dashboard.get_resource()


@router.get("/resources/{key}")
def get_resource(key: str, dashboard: Dashboard = Depends(get_dashboard)) -> list[Any]:
    bundle = dashboard.get_resource(key)
    if bundle is None:
        raise HTTPException(status_code=404, detail="Ressource introuvable")
    return bundle


@router.get("/assets/status", response_model=models.AssetsStatus)
def get_assets_status() -> models.AssetsStatus:
    try:
        current = assets.assets_are_current()
    except assets.StaleAssetsError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    return models.AssetsStatus(current=current, version=config.version())
