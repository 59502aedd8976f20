"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from models.diff import DiffRequest, DiffResult, InlineDiffRequest, InlineDiffResult
from services.config_manager import ConfigManager
from services.diff_service import DiffService

router = APIRouter()
diff_service = DiffService()


def check_input_size(*values: str):
    """Reject inputs above the configured maxInputLength (0 = unlimited)"""
    limit = ConfigManager.get_instance().get_max_input_length()
    if limit and any(len(value) > limit for value in values):
        raise HTTPException(
            status_code=413,
            detail=f"Input exceeds maximum length of {limit} characters",
        )


def require_texts(request: DiffRequest) -> tuple[str, str]:
    if not request.oldText or not request.newText:
        raise HTTPException(status_code=400, detail="Both old and new text are required")
    check_input_size(request.oldText, request.newText)
    return request.oldText, request.newText


@router.post("/compute", response_model=DiffResult, response_model_exclude_none=True)
async def compute_diff(request: DiffRequest) -> DiffResult:
    """Line-by-line diff of two texts"""
    old_text, new_text = require_texts(request)
    return diff_service.compute_diff(old_text, new_text)


@router.post("/inline", response_model=InlineDiffResult)
async def compute_inline_diff(request: InlineDiffRequest) -> InlineDiffResult:
    """Character-level diff of two lines"""
    if not request.oldLine or not request.newLine:
        raise HTTPException(status_code=400, detail="Both old and new lines are required")
    check_input_size(request.oldLine, request.newLine)

    return diff_service.compute_inline_diff(request.oldLine, request.newLine)


@router.post("/render", response_class=PlainTextResponse)
async def render_diff(request: DiffRequest) -> str:
    """Line diff rendered as +/- prefixed plain text"""
    old_text, new_text = require_texts(request)
    result = diff_service.compute_diff(old_text, new_text)
    return diff_service.render_text(result)
