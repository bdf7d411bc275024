"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    admin,
    attachments,
    content_types,
    editor,
    health,
    records,
    relation_definitions,
    rendering,
    widgets,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    content_types.router, prefix="/content-types", tags=["content-types"]
)
api_router.include_router(records.router, prefix="/records", tags=["records"])
api_router.include_router(
    relation_definitions.router,
    prefix="/references/definitions",
    tags=["relation-definitions"],
)
api_router.include_router(attachments.router, prefix="/records", tags=["attachments"])
api_router.include_router(
    rendering.records_router, prefix="/records", tags=["rendering"]
)
api_router.include_router(rendering.router, prefix="/render", tags=["rendering"])
api_router.include_router(
    widgets.router, prefix="/widgets/references", tags=["widgets"]
)
api_router.include_router(editor.router, prefix="/records", tags=["editor"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
