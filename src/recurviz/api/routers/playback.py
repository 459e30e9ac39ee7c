"""
API Routes for playback sessions.

Endpoints
---------
- `GET  /algorithms`: built-in algorithms and their source listings.
- `POST /sessions`: create a session (one playback controller).
- `GET  /sessions/{session_id}`: current view (poll this during a run).
- `POST /sessions/{session_id}/run`: start a paced run in the background.
- `POST /sessions/{session_id}/reset`: clear the session.
- `PUT  /sessions/{session_id}/speed`: change the pacing multiplier.
- `POST /sessions/{session_id}/seek`: display a recorded step.

Design Decisions
----------------
- **Asynchronous Handoff**: `run` returns 202 Accepted immediately; the
  controller commits step by step in a background task.
- **Refusals are not errors**: commands the controller refuses (e.g. a seek
  during a run) answer 200/202 with `accepted=false` and a `detail`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, BackgroundTasks, HTTPException, status

from recurviz.algorithms.registry import all_algorithms, resolve
from recurviz.api.background import run_session_task
from recurviz.api.schemas import (
    AlgorithmInfo,
    CommandResponse,
    RunRequest,
    SeekRequest,
    SessionInfo,
    SpeedRequest,
)
from recurviz.api.session_store import get_session_store
from recurviz.core.result import Result
from recurviz.playback.controller import PlaybackController

router = APIRouter(tags=["Playback"])


def _controller(session_id: str) -> PlaybackController:
    controller = get_session_store().get(session_id)
    if controller is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found",
        )
    return controller


def _respond(controller: PlaybackController, outcome: Result[Any, str]) -> CommandResponse:
    return CommandResponse(
        accepted=outcome.is_ok(),
        detail=None if outcome.is_ok() else outcome.unwrap_err(),
        view=controller.view(),
    )


@router.get("/algorithms", response_model=list[AlgorithmInfo], summary="List algorithms")
async def list_algorithms() -> list[AlgorithmInfo]:
    return [
        AlgorithmInfo(
            name=algo.kind.value.lower(),
            title=algo.title,
            input_kind=algo.input_kind,
            default_input=algo.default_input,
            max_input=algo.max_input,
            source=algo.source,
        )
        for algo in all_algorithms()
    ]


@router.post(
    "/sessions",
    response_model=SessionInfo,
    status_code=status.HTTP_201_CREATED,
    summary="Create a playback session",
)
async def create_session() -> SessionInfo:
    store = get_session_store()
    session_id = store.create_session()
    return SessionInfo(session_id=session_id, view=_controller(session_id).view())


@router.get("/sessions/{session_id}", response_model=SessionInfo, summary="Get session view")
async def get_session(session_id: str) -> SessionInfo:
    return SessionInfo(session_id=session_id, view=_controller(session_id).view())


@router.post(
    "/sessions/{session_id}/run",
    response_model=CommandResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start a run",
)
async def start_run(
    session_id: str,
    request: RunRequest,
    background_tasks: BackgroundTasks,
) -> CommandResponse:
    """
    Validate the request and schedule the run.

    Client Workflow
    ---------------
    1. Check `accepted` in this response.
    2. Poll `GET /sessions/{session_id}` until `view.in_progress` is false.
    3. Scrub the timeline with `POST /sessions/{session_id}/seek`.
    """
    controller = _controller(session_id)
    try:
        kind = resolve(request.algorithm)
    except KeyError as e:
        # Surfaces as HTTP 400 via the app-level ValueError handler.
        raise ValueError(e.args[0]) from e

    # Claim the controller now: a request arriving before the background task
    # starts must already see the session as busy.
    started = controller.start(kind, request.input)
    if started.is_err():
        return _respond(controller, started)
    if request.speed is not None:
        controller.set_speed(request.speed)

    background_tasks.add_task(run_session_task, session_id, started.unwrap())
    return _respond(controller, started)


@router.post(
    "/sessions/{session_id}/reset", response_model=CommandResponse, summary="Reset session"
)
async def reset_session(session_id: str) -> CommandResponse:
    controller = _controller(session_id)
    return _respond(controller, controller.reset())


@router.put(
    "/sessions/{session_id}/speed", response_model=CommandResponse, summary="Set speed"
)
async def set_speed(session_id: str, request: SpeedRequest) -> CommandResponse:
    controller = _controller(session_id)
    return _respond(controller, controller.set_speed(request.speed))


@router.post(
    "/sessions/{session_id}/seek", response_model=CommandResponse, summary="Seek timeline"
)
async def seek(session_id: str, request: SeekRequest) -> CommandResponse:
    controller = _controller(session_id)
    return _respond(controller, controller.seek(request.step))


__all__ = ["router"]
