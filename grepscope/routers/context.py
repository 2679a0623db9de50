"""Context API — renders the structural excerpt of a file around matches."""

import logging
import os

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..models import ContextRequest, ContextResponse
from ..tree import InvalidPattern, UnsupportedFileType, build_context, filename_to_lang

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Context"])


def _read_source(path: str) -> str:
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail="File not found")

    if os.path.getsize(path) > settings.max_file_size_kb * 1024:
        raise HTTPException(status_code=413, detail="File too large")

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Could not read file: {exc}")


@router.post("/context", response_model=ContextResponse)
async def get_context(request: ContextRequest):
    """Render the lines of interest of a file with their enclosing scopes."""
    if not request.pattern and not request.lines:
        raise HTTPException(400, "Either 'pattern' or 'lines' is required")

    filename = request.filename or request.path
    code = request.code if request.code is not None else _read_source(request.path)
    options = request.options or settings.context_options()

    try:
        tc = build_context(filename, code, options)
    except UnsupportedFileType as e:
        logger.warning(f"Rejected {filename}: {e}")
        raise HTTPException(415, str(e))

    # Caller lines are 1-based; ignore anything outside the file
    wanted = {n - 1 for n in request.lines if 1 <= n <= len(tc.lines)}
    if request.pattern:
        try:
            wanted |= tc.grep(request.pattern, request.ignore_case)
        except InvalidPattern as e:
            raise HTTPException(400, str(e))

    tc.add_lines_of_interest(wanted)
    tc.add_context()

    return ContextResponse(
        filename=filename,
        language=filename_to_lang(filename),
        lines_of_interest=[n + 1 for n in sorted(tc.lines_of_interest)],
        shown_lines=[n + 1 for n in sorted(tc.show_lines) if n < len(tc.lines)],
        text=tc.format(),
    )
