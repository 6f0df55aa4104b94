"""REST endpoints for interactive team building sessions."""

import logging
import threading
import time
import uuid
from dataclasses import dataclass, field

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from squad_builder.config import settings
from squad_builder.errors import (
    DuplicatePlayer,
    InsufficientMembers,
    InvalidSlot,
    InvalidTeamName,
    InvalidTeamInput,
    PlayerNotFound,
    RoleUnavailable,
)
from squad_builder.services.roster_validator import role_options, selectable_players
from squad_builder.services.team_builder_service import TeamBuilderSession
from squad_builder.utils.role_normalizer import normalize_role

logger = logging.getLogger(__name__)

SESSION_CLEANUP_INTERVAL_SECONDS = 60

router = APIRouter(prefix="/api/team-builder", tags=["team-builder"])


@dataclass
class BuilderSessionEntry:
    """A builder session plus bookkeeping for expiry."""

    session_id: str
    builder: TeamBuilderSession
    created_at: float = field(default_factory=time.time)
    last_access: float = field(default_factory=time.time)


# In-memory session storage with thread-safe access
_sessions: dict[str, BuilderSessionEntry] = {}
_sessions_lock = threading.Lock()
_session_locks: dict[str, threading.Lock] = {}
_cleanup_lock = threading.Lock()
_last_cleanup = 0.0


def _is_session_expired(entry: BuilderSessionEntry, now: float) -> bool:
    return (now - entry.last_access) >= settings.session_ttl_seconds


def _prune_expired_sessions(now: float | None = None) -> None:
    """Remove expired sessions opportunistically."""
    global _last_cleanup
    now = now or time.time()
    if now - _last_cleanup < SESSION_CLEANUP_INTERVAL_SECONDS:
        return

    with _cleanup_lock:
        if now - _last_cleanup < SESSION_CLEANUP_INTERVAL_SECONDS:
            return

        with _sessions_lock:
            expired: list[str] = []
            for session_id, entry in _sessions.items():
                lock = _session_locks.get(session_id)
                if lock and lock.locked():
                    continue
                if _is_session_expired(entry, now):
                    expired.append(session_id)

            for session_id in expired:
                _sessions.pop(session_id, None)
                _session_locks.pop(session_id, None)

        if expired:
            logger.info(f"Pruned {len(expired)} expired team builder sessions")
        _last_cleanup = now


def _get_session_with_lock(session_id: str) -> tuple[BuilderSessionEntry, threading.Lock]:
    """Fetch session and its lock, creating the lock if needed."""
    _prune_expired_sessions()
    with _sessions_lock:
        entry = _sessions.get(session_id)
        if not entry:
            raise HTTPException(status_code=404, detail="Session not found")
        lock = _session_locks.setdefault(session_id, threading.Lock())

    entry.last_access = time.time()
    return entry, lock


def _session_response(entry: BuilderSessionEntry) -> dict:
    return {"session_id": entry.session_id, **entry.builder.to_dict()}


class SelectPlayerRequest(BaseModel):
    nickname: str


class AssignRoleRequest(BaseModel):
    role: str


class SaveTeamRequest(BaseModel):
    name: str


@router.post("/sessions", status_code=201)
async def start_session():
    """Create a new builder session with an empty roster."""
    _prune_expired_sessions()
    session_id = f"tb_{uuid.uuid4().hex[:12]}"
    entry = BuilderSessionEntry(session_id=session_id, builder=TeamBuilderSession())

    with _sessions_lock:
        _sessions[session_id] = entry
        _session_locks[session_id] = threading.Lock()

    logger.info(f"Started team builder session {session_id}")
    return _session_response(entry)


@router.get("/sessions/{session_id}")
async def get_session(session_id: str):
    entry, lock = _get_session_with_lock(session_id)
    with lock:
        return _session_response(entry)


@router.delete("/sessions/{session_id}", status_code=204)
async def end_session(session_id: str):
    """Discard a session and its unsaved roster."""
    with _sessions_lock:
        if _sessions.pop(session_id, None) is None:
            raise HTTPException(status_code=404, detail="Session not found")
        _session_locks.pop(session_id, None)


@router.get("/sessions/{session_id}/options/players")
async def get_player_options(request: Request, session_id: str):
    """Players that can still be added to this roster, highest ELO first."""
    entry, lock = _get_session_with_lock(session_id)
    pool = request.app.state.player_repository.list_players()
    with lock:
        available = selectable_players(entry.builder.roster, pool)
    return [
        {"nickname": p.nickname, "elo": p.elo, "preferred_role": p.preferred_role}
        for p in available
    ]


@router.get("/sessions/{session_id}/slots/{slot_id}/roles")
async def get_role_options(session_id: str, slot_id: int):
    """Role picker options for one slot."""
    entry, lock = _get_session_with_lock(session_id)
    with lock:
        try:
            return role_options(entry.builder.roster, slot_id)
        except InvalidSlot as e:
            raise HTTPException(status_code=422, detail=str(e))


@router.put("/sessions/{session_id}/slots/{slot_id}/player")
async def select_player(request: Request, session_id: str, slot_id: int, body: SelectPlayerRequest):
    """Put a stored player into a slot."""
    entry, lock = _get_session_with_lock(session_id)
    try:
        player = request.app.state.player_repository.get_player_strict(body.nickname)
    except PlayerNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    with lock:
        try:
            entry.builder.select_player(slot_id, player)
        except InvalidSlot as e:
            raise HTTPException(status_code=422, detail=str(e))
        except DuplicatePlayer as e:
            raise HTTPException(status_code=409, detail=str(e))
        return _session_response(entry)


@router.put("/sessions/{session_id}/slots/{slot_id}/role")
async def assign_role(session_id: str, slot_id: int, body: AssignRoleRequest):
    """Manually set the role of an occupied slot."""
    role = normalize_role(body.role)
    if role is None:
        raise HTTPException(status_code=422, detail=f"Unknown role: {body.role}")

    entry, lock = _get_session_with_lock(session_id)
    with lock:
        try:
            entry.builder.assign_role(slot_id, role)
        except InvalidSlot as e:
            raise HTTPException(status_code=422, detail=str(e))
        except RoleUnavailable as e:
            raise HTTPException(status_code=409, detail=str(e))
        return _session_response(entry)


@router.delete("/sessions/{session_id}/slots/{slot_id}")
async def remove_member(session_id: str, slot_id: int):
    entry, lock = _get_session_with_lock(session_id)
    with lock:
        try:
            entry.builder.remove_member(slot_id)
        except InvalidSlot as e:
            raise HTTPException(status_code=422, detail=str(e))
        return _session_response(entry)


@router.post("/sessions/{session_id}/reset")
async def reset_roster(session_id: str):
    entry, lock = _get_session_with_lock(session_id)
    with lock:
        entry.builder.reset()
        return _session_response(entry)


@router.post("/sessions/{session_id}/save", status_code=201)
async def save_team(request: Request, session_id: str, body: SaveTeamRequest):
    """Save the current roster as a team and clear it."""
    entry, lock = _get_session_with_lock(session_id)
    with lock:
        try:
            saved = entry.builder.save_team(body.name, request.app.state.team_repository)
        except (InvalidTeamName, InsufficientMembers, InvalidTeamInput) as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"team": saved.to_dict(), **_session_response(entry)}
