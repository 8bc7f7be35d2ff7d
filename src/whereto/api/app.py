"""FastAPI entrypoint for the whereto flight search."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from whereto.adapters.io.exports import serialize_codes, serialize_schedules
from whereto.api.auth import AnonymousAuthenticator, Authenticator
from whereto.api.schemas import SaveSelectionPayload, validate_find_flights
from whereto.core.errors import AuthError, NotImplementedFeatureError, ValidationError, WheretoError
from whereto.pipeline.search import FlightSearch

LOG = logging.getLogger(__name__)


def error_response(exc: WheretoError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


def _query_params(request: Request) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for name in request.query_params.keys():
        values = request.query_params.getlist(name)
        params[name] = values[0] if len(values) == 1 else values
    return params


def create_app(
    search: Optional[FlightSearch] = None,
    authenticator: Optional[Authenticator] = None,
) -> FastAPI:
    app = FastAPI(title="Whereto API")
    app.state.search = search or FlightSearch.from_settings()
    app.state.authenticator = authenticator or AnonymousAuthenticator()

    @app.exception_handler(WheretoError)
    async def handle_whereto_error(request: Request, exc: WheretoError) -> JSONResponse:
        return error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        LOG.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/find-flights", response_model=None)
    def find_flights(request: Request) -> Any:
        validation = validate_find_flights(_query_params(request))
        if not validation.ok:
            return error_response(validation.as_error())
        outcome = request.app.state.search.find_flights(validation.query)
        if not outcome.ok:
            return error_response(outcome.as_error())
        return serialize_schedules(outcome.schedules)

    @app.get("/airports")
    def list_airports(request: Request) -> List[str]:
        return serialize_codes(request.app.state.search.list_airports())

    @app.get("/carriers")
    def list_carriers(request: Request) -> List[str]:
        return serialize_codes(request.app.state.search.list_carriers())

    @app.post("/saved-flights", response_model=None)
    async def save_flights(request: Request) -> Any:
        user = request.app.state.authenticator.identify(request)
        if not user:
            raise AuthError("Sorry, saving of flights is only available to registered users")
        try:
            SaveSelectionPayload.model_validate(await request.json())
        except (ValueError, PydanticValidationError) as exc:
            raise ValidationError("selections must be a non-empty list of flight schedules") from exc
        raise NotImplementedFeatureError("Saving flight selections is not available yet")

    @app.api_route("/", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    def welcome() -> Dict[str, str]:
        return {"message": "welcome to whereto"}

    return app


app = create_app()
