"""Sequence endpoints — atomic increment by name."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.application.use_cases.increment_sequence import IncrementSequenceUseCase
from app.domain.errors import InvalidArgument, SequenceNotFound, StorageFailure
from app.infrastructure.api.dependencies import get_increment_sequence_uc

router = APIRouter(tags=["sequences"])

# Sent in place of a count whenever the increment did not happen.
NO_COUNT = -1


@router.api_route("/increment", methods=["GET", "POST"])
async def increment_sequence(
    sequence_name: str | None = Query(default=None),
    uc: IncrementSequenceUseCase = Depends(get_increment_sequence_uc),
):
    """Add one to the named counter and return the new value."""
    try:
        new_count = await uc.execute(sequence_name)
    except InvalidArgument as e:
        return _error_response(400, str(e))
    except SequenceNotFound:
        return _error_response(404, "Sequence not found")
    except StorageFailure:
        # Cause already logged by the use case; callers get no internals.
        return _error_response(500, "Something went wrong!")

    return {"visit_count": new_count}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"visit_count": NO_COUNT, "error": message},
    )
