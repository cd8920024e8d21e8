"""Metadata endpoints for exposing system information."""

from fastapi import APIRouter

from mediarecords.core.modules.record.models import RecordKind
from mediarecords.web.deps import AppDep

router = APIRouter(tags=["metadata"])


@router.get(
    "/metadata/kinds",
    summary="Get record kinds",
    description="Returns every record kind with its form fields, media folder, and numbering counter.",
    operation_id="getRecordKinds",
    responses={200: {"description": "List of record kinds"}},
)
async def get_record_kinds(app: AppDep) -> list[RecordKind]:
    return app.list_kinds()


@router.get(
    "/metadata/version",
    summary="Get version information",
    description="Returns build and version information including package version, git commit hash, commit date, and build time.",
    operation_id="getVersion",
    responses={200: {"description": "Version and build information"}},
)
async def get_version(app: AppDep) -> dict[str, str]:
    return app.get_version()
