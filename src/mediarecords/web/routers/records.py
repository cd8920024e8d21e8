from typing import Any

from fastapi import APIRouter, Request
from starlette.datastructures import UploadFile

from mediarecords.core.modules.record.models import MediaRecord, RecordKind
from mediarecords.web.deps import AppDep
from mediarecords.web.openapi import ErrorResponse

IMAGE_FIELD = "image"


def build_upload_schema(kind: RecordKind) -> dict[str, Any]:
    """OpenAPI request body for a kind's multipart upload form."""
    properties: dict[str, Any] = {IMAGE_FIELD: {"type": "string", "format": "binary", "description": "Image file"}}
    for field in kind.fields:
        properties[field.form_name] = {"type": "string", "description": f"Stored as `{field.stored_name}`"}
    required = [IMAGE_FIELD, *(field.form_name for field in kind.required_fields)]
    return {
        "required": True,
        "content": {"multipart/form-data": {"schema": {"type": "object", "properties": properties, "required": required}}},
    }


def build_records_router(kind: RecordKind) -> APIRouter:
    """Create POST/GET routes for one record kind."""
    router = APIRouter(tags=[kind.name])
    title = kind.name.capitalize()
    identifier = f"`{kind.id_field}` (integer)" if kind.id_field else "record ID (UUID)"

    @router.post(
        f"/{kind.name}",
        summary=f"Create {kind.name} record",
        description=(
            f"Upload an image to the `{kind.folder}` media folder and store a new {kind.name} record "
            "with the image URL and the submitted fields."
        ),
        operation_id=f"create{title}",
        status_code=201,
        responses={
            201: {"description": "Record created"},
            400: {"model": ErrorResponse, "description": "Missing file or field, or file is not an image"},
            502: {"model": ErrorResponse, "description": "Media host upload failed"},
        },
        openapi_extra={"requestBody": build_upload_schema(kind)},
    )
    async def create_record(request: Request, app: AppDep) -> MediaRecord:
        async with request.form() as form:
            upload = form.get(IMAGE_FIELD)
            content: bytes | None = None
            filename = "unnamed"
            if isinstance(upload, UploadFile):
                content = await upload.read()
                filename = upload.filename or filename
            form_values = {key: value for key, value in form.items() if isinstance(value, str)}
        return await app.create_record(kind.name, form_values, content, filename)

    @router.get(
        f"/{kind.name}",
        summary=f"List {kind.name} records",
        description=f"Get all {kind.name} records.",
        operation_id=f"list{title}",
        responses={200: {"description": "List of records"}},
    )
    async def list_records(app: AppDep) -> list[MediaRecord]:
        return await app.list_records(kind.name)

    @router.get(
        f"/{kind.name}/{{record_id}}",
        summary=f"Get {kind.name} record",
        description=f"Get a single {kind.name} record by {identifier}.",
        operation_id=f"get{title}",
        responses={
            200: {"description": "Record"},
            404: {"model": ErrorResponse, "description": "Record not found"},
        },
    )
    async def get_record(record_id: str, app: AppDep) -> MediaRecord:
        return await app.get_record(kind.name, record_id)

    return router
