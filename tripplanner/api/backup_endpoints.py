"""
Backup API endpoints - export and import of planner data
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from tripplanner.core.dependencies import get_planner
from tripplanner.core.exceptions import TripNotFoundError
from tripplanner.schemas.base import Envelope
from tripplanner.schemas.transfer import ImportResult
from tripplanner.services.planner import Planner

router = APIRouter(prefix="/backup", tags=["backup"])


def _download(data, filename: str) -> JSONResponse:
    return JSONResponse(
        content=data.to_json_dict(),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/export")
def export_all(planner: Planner = Depends(get_planner)):
    """
    Export every store as one document
    """
    transfer = planner.transfer
    return _download(transfer.export_all(), transfer.export_filename())


@router.get("/export/{trip_id}")
def export_trip(trip_id: str, planner: Planner = Depends(get_planner)):
    transfer = planner.transfer
    data = transfer.export_trip(trip_id)
    if data is None:
        raise TripNotFoundError(trip_id)
    return _download(data, transfer.export_filename(data.data.trips[0].name))


@router.post("/import", response_model=Envelope[ImportResult])
def import_backup(
    payload: Dict[str, Any] = Body(...),
    merge: bool = Query(False),
    planner: Planner = Depends(get_planner),
):
    """
    Import a previously exported document

    - **merge**: keep existing records and add unknown ids only (default: replace)

    The document is validated before anything is written; on failure the
    response lists every violation and no store changes.
    """
    result = planner.transfer.validate_and_import(payload, merge=merge)
    return Envelope.ok(result)
