"""OpenAPI document in JSON and YAML form."""
from __future__ import annotations

import yaml
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

router = APIRouter(include_in_schema=False)


def _yaml_document(request: Request) -> str:
    # FastAPI caches the schema dict itself; the YAML rendering is cached here
    state = request.app.state
    cached = getattr(state, "openapi_yaml", None)
    if cached is None:
        cached = yaml.safe_dump(request.app.openapi(), sort_keys=False, allow_unicode=True)
        state.openapi_yaml = cached
    return cached


@router.get("/v3/api-docs")
def api_docs(request: Request) -> JSONResponse:
    return JSONResponse(request.app.openapi())


@router.get("/openapi.yaml")
def api_docs_yaml(request: Request) -> Response:
    return Response(content=_yaml_document(request), media_type="application/yaml")


@router.get("/v3/api-docs/health")
def api_docs_health() -> dict:
    return {"status": "UP", "openapi": "available"}
