from fastapi import APIRouter

from mediarecords.core.modules.record.kinds import RECORD_KINDS
from mediarecords.web.routers.metadata import router as metadata_router
from mediarecords.web.routers.records import build_records_router

records_routers: list[APIRouter] = [build_records_router(kind) for kind in RECORD_KINDS.values()]

__all__ = [
    "metadata_router",
    "records_routers",
]
