"""Relation definition API: programmatic registry keyed by (source_type, key)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import (
    CurrentUser,
    get_relation_registry,
    get_relation_registry_for_write,
    require_capability,
)
from app.application.services import RelationRegistry
from app.core.constants import CAPABILITY_MANAGE_OPTIONS
from app.core.limiter import limit_writes
from app.domain.enums import UpsertOutcome
from app.schemas.relation_definition import (
    RelationDefinitionResponse,
    RelationDefinitionUpsertRequest,
    RemoveResponse,
    UpsertResponse,
)

router = APIRouter()

_UPSERT_STATUS = {
    UpsertOutcome.CREATED: 201,
    UpsertOutcome.UPDATED: 200,
    UpsertOutcome.REJECTED: 400,
}


@router.get("", response_model=list[RelationDefinitionResponse])
async def list_definitions(
    registry: Annotated[RelationRegistry, Depends(get_relation_registry)],
    source_type: str | None = Query(None),
    key: str | None = Query(None),
):
    """Definitions matching source_type and/or key, in storage order."""
    definitions = await registry.list(source_type=source_type, key=key)
    return [RelationDefinitionResponse.model_validate(d) for d in definitions]


@router.put(
    "",
    response_model=UpsertResponse,
    responses={
        201: {"description": "Definition created", "model": UpsertResponse},
        400: {"description": "Definition rejected", "model": UpsertResponse},
    },
)
@limit_writes
async def upsert_definition(
    request: Request,
    body: RelationDefinitionUpsertRequest,
    registry: Annotated[RelationRegistry, Depends(get_relation_registry_for_write)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_MANAGE_OPTIONS))],
):
    """Create or update the definition for (source_type, key).

    201 when created, 200 when updated, 400 with a reason when rejected.
    """
    result = await registry.upsert(
        body.source_type, body.key, body.target_types, body.title
    )
    payload = UpsertResponse.model_validate(result)
    return JSONResponse(
        status_code=_UPSERT_STATUS[result.outcome],
        content=payload.model_dump(mode="json"),
    )


@router.delete("", response_model=RemoveResponse)
@limit_writes
async def remove_definitions(
    request: Request,
    registry: Annotated[RelationRegistry, Depends(get_relation_registry_for_write)],
    _: Annotated[CurrentUser, Depends(require_capability(CAPABILITY_MANAGE_OPTIONS))],
    source_type: str = Query(..., min_length=1),
    key: str = Query(..., min_length=1),
):
    """Delete every definition for (source_type, key). Attachment rows stay."""
    removed = await registry.remove(source_type, key)
    return RemoveResponse(removed=removed)


@router.get("/{internal_id}", response_model=RelationDefinitionResponse)
async def get_definition(
    internal_id: int,
    registry: Annotated[RelationRegistry, Depends(get_relation_registry)],
):
    definition = await registry.get(internal_id)
    if not definition:
        raise HTTPException(status_code=404, detail="Relation definition not found")
    return RelationDefinitionResponse.model_validate(definition)
