"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from project root or backend/.env
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from eventbudget.data.templates import EVENT_TEMPLATES
from eventbudget.engine import ENGINE_VERSION, BudgetEngine
from eventbudget.exceptions import EventBudgetError
from eventbudget.models.budget import BudgetResult, CustomExpense
from eventbudget.models.params import EventParameters  # noqa: TCH001 (FastAPI resolves at runtime)
from eventbudget.services.expenses import apply_custom_expenses
from eventbudget.services.scenarios import ScenarioComparison

logger = logging.getLogger(__name__)


class CustomBudgetRequest(BaseModel):
    params: EventParameters
    expenses: list[CustomExpense] = Field(default_factory=list)


class ScenarioRequest(BaseModel):
    name: str | None = None
    params: EventParameters


class CompareRequest(BaseModel):
    scenarios: list[ScenarioRequest]


def create_app(*, engine: BudgetEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built budget engine (e.g. a mock in tests). If not
        provided, one is created from environment variables on first use.
    """
    from eventbudget.api.deps import get_cors_origins

    app = FastAPI(title="Event Budget", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine

    def _get_engine() -> BudgetEngine:
        eng: BudgetEngine | None = app.state.engine
        if eng is not None:
            return eng
        from eventbudget.api.deps import create_engine

        eng = create_engine()
        app.state.engine = eng
        return eng

    def _calculate(params: EventParameters) -> BudgetResult:
        try:
            return _get_engine().calculate(params)
        except EventBudgetError as exc:
            logger.warning("Rejected budget parameters: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/pricing, /api/templates
    # ------------------------------------------------------------------

    @app.get("/api/pricing")
    def pricing() -> dict[str, Any]:
        return _get_engine().pricing.model_dump(mode="json")

    @app.get("/api/templates")
    def templates() -> list[dict[str, Any]]:
        return [t.model_dump(mode="json") for t in EVENT_TEMPLATES]

    # ------------------------------------------------------------------
    # POST /api/budget
    # ------------------------------------------------------------------

    @app.post("/api/budget")
    def budget(params: EventParameters) -> dict[str, Any]:
        result = _calculate(params)
        return {
            "budget": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(params),
        }

    @app.post("/api/budget/custom")
    def budget_with_expenses(request: CustomBudgetRequest) -> dict[str, Any]:
        result = apply_custom_expenses(_calculate(request.params), request.expenses)
        return {
            "budget": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(request.params),
        }

    @app.post("/api/budget/export")
    def export(params: EventParameters) -> dict[str, Any]:
        eng = _get_engine()
        result = _calculate(params)
        return result.to_export_dict(params, pricing_version=eng.pricing_version)

    # ------------------------------------------------------------------
    # POST /api/budget/compare
    # ------------------------------------------------------------------

    @app.post("/api/budget/compare")
    def compare(request: CompareRequest) -> dict[str, Any]:
        comparison = ScenarioComparison(_get_engine())
        try:
            for item in request.scenarios:
                comparison.add(item.params, name=item.name)
        except EventBudgetError as exc:
            logger.warning("Scenario comparison rejected: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        insights = comparison.insights()
        return {
            "scenarios": [s.model_dump(mode="json") for s in comparison.scenarios],
            "insights": insights.model_dump(mode="json") if insights else None,
        }

    return app
