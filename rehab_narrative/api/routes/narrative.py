"""Narrative note endpoints: compose, picker taxonomy, unit confirmation, archive."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from rehab_narrative.api.dependencies import get_archive, get_lexicon_dependency
from rehab_narrative.errors import SelectionError
from rehab_narrative.lexicon import ClinicalActivity, Lexicon, get_activity, visible_activities
from rehab_narrative.models.session import TreatmentUnit
from rehab_narrative.session import NoteSession, SavedSession, SessionArchive, UnitDraft

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/narrative", tags=["narrative"])


class ComposeResponse(BaseModel):
    """Generated note with the codes that need minutes entered."""

    note: str
    billing_codes: list[str] = Field(default_factory=list)
    archived_id: Optional[str] = None


class ConfirmUnitRequest(BaseModel):
    """Picker position plus matrix input for one subtask."""

    activity_id: str
    phase_id: str
    subtask: str
    draft: UnitDraft = Field(default_factory=UnitDraft)


class ConfirmUnitResponse(BaseModel):
    unit: TreatmentUnit
    warnings: list[str] = Field(default_factory=list)


@router.post("/compose", response_model=ComposeResponse)
async def compose_note(
    session: NoteSession,
    archive: bool = Query(False, description="Save the generated note to the archive"),
    lexicon: Lexicon = Depends(get_lexicon_dependency),
    store: SessionArchive = Depends(get_archive),
):
    """Compose the narrative note for a session."""
    note = session.generate(lexicon)
    logger.info(f"Composed note for {len(session.units)} units")

    archived_id = None
    if archive:
        saved = store.save(session)
        archived_id = saved.id if saved else None

    return ComposeResponse(
        note=note,
        billing_codes=session.billing_codes(),
        archived_id=archived_id,
    )


@router.get("/activities", response_model=list[ClinicalActivity])
async def list_activities(include_hidden: bool = Query(False)):
    """Activity taxonomy offered by the picker."""
    return visible_activities(include_hidden=include_hidden)


@router.get("/lexicon", response_model=Lexicon)
async def show_lexicon(lexicon: Lexicon = Depends(get_lexicon_dependency)):
    """Deficit phrases and narrative vocabulary in use."""
    return lexicon


@router.post("/units", response_model=ConfirmUnitResponse)
async def confirm_unit(request: ConfirmUnitRequest):
    """Turn matrix input into a treatment unit."""
    activity = get_activity(request.activity_id)
    if activity is None:
        raise HTTPException(status_code=404, detail=f"Unknown activity: {request.activity_id}")

    phase = activity.phase(request.phase_id)
    if phase is None:
        raise HTTPException(status_code=404, detail=f"Unknown phase: {request.phase_id}")

    subtask = phase.subtask(request.subtask)
    if subtask is None:
        raise HTTPException(status_code=404, detail=f"Unknown subtask: {request.subtask}")

    try:
        unit = request.draft.confirm(activity, phase, subtask)
    except SelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ConfirmUnitResponse(unit=unit, warnings=request.draft.audit_warnings())


@router.get("/archive", response_model=list[SavedSession])
async def list_archive(store: SessionArchive = Depends(get_archive)):
    """Archived notes, newest first."""
    return store.all()


@router.get("/archive/{session_id}", response_model=SavedSession)
async def get_archived(session_id: str, store: SessionArchive = Depends(get_archive)):
    saved = store.get(session_id)
    if saved is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return saved


@router.post("/archive", response_model=SavedSession)
async def archive_session(session: NoteSession, store: SessionArchive = Depends(get_archive)):
    """Archive a session's note as edited by the therapist."""
    saved = store.save(session)
    if saved is None:
        raise HTTPException(status_code=400, detail="Session has no note text to archive")
    return saved


@router.delete("/archive")
async def clear_archive(store: SessionArchive = Depends(get_archive)) -> dict:
    cleared = len(store)
    store.clear()
    return {"cleared": cleared}
