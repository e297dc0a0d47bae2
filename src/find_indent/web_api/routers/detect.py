"""
Detect Router
=============
Endpoint for detecting the indentation style of posted text.
"""
from fastapi import APIRouter, HTTPException

from find_indent import api as core_api
from find_indent.web_api.config import settings
from find_indent.web_api.schemas.detect import DetectRequest, DetectResponse

router = APIRouter()


@router.post("/", response_model=DetectResponse)
def detect(request: DetectRequest):
    """
    Detect the indentation style of a text.

    - **text**: Source text to inspect
    - **skip_doc_comments**: Ignore POD blocks (default: false)
    """
    size = len(request.text.encode("utf-8"))
    if size > settings.MAX_TEXT_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Text too large: {size} bytes (limit {settings.MAX_TEXT_BYTES})",
        )

    signature = core_api.detect_text(
        request.text, skip_doc_comments=request.skip_doc_comments
    )
    return DetectResponse(**signature.to_dict())
