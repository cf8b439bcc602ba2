"""Import endpoints: the only way the wizard reaches the archive."""

from __future__ import annotations

from fastapi import APIRouter, File, Request, Response, UploadFile
from fastapi.responses import JSONResponse

from rostercheck.core.exceptions import ImportFailed, ImportSuperseded
from rostercheck.session.rehydrator import ImportSession
from rostercheck.verification.checklist import build_checklist, pending_checklist

router = APIRouter(tags=["imports"])


def _session(request: Request) -> ImportSession:
    return request.app.state.session


@router.post("")
async def import_archive(request: Request, file: UploadFile = File(...)):
    """Verify an uploaded archive and make it the current import."""
    data = await file.read()
    name = file.filename or request.app.state.settings.session.default_file_name
    try:
        state = await _session(request).import_archive(data, name)
    except ImportFailed as exc:
        return JSONResponse(status_code=400, content={"error": str(exc), "kind": type(exc).__name__})
    except ImportSuperseded as exc:
        return JSONResponse(status_code=409, content={"error": str(exc), "kind": type(exc).__name__})
    return state.model_dump(by_alias=True, mode="json")


@router.get("/current")
async def current_import(request: Request):
    state = _session(request).current
    if state is None:
        return JSONResponse(status_code=404, content={"error": "No archive imported"})
    return state.model_dump(by_alias=True, mode="json")


@router.get("/current/checklist")
async def current_checklist(request: Request):
    state = _session(request).current
    if state is None:
        return pending_checklist().model_dump(by_alias=True, mode="json")
    limit = request.app.state.settings.preview_limit
    return build_checklist(state.report, preview_limit=limit).model_dump(by_alias=True, mode="json")


@router.delete("/current", status_code=204)
async def reset_import(request: Request) -> Response:
    await _session(request).reset()
    return Response(status_code=204)
