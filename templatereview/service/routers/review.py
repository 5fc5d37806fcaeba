"""
Review Router - handles template analysis, validation and enhancement
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Dict, Any, Optional

from ...core.errors import TemplateInputError, UnknownOperationError
from ...core.operations import OPERATIONS, run_operation

router = APIRouter(prefix="/api", tags=["review"])


class ReviewRequest(BaseModel):
    template: str = ""
    metadata: Optional[Dict[str, Any]] = None


def _dispatch(operation: str, request: ReviewRequest) -> Dict:
    try:
        return run_operation(operation, request.model_dump(exclude_none=True))
    except UnknownOperationError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TemplateInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/operations")
async def list_operations():
    """List supported operation names."""
    return {"operations": list(OPERATIONS)}


@router.post("/analyze")
async def analyze_endpoint(request: ReviewRequest):
    """Analyze a template."""
    return _dispatch("analyze_template", request)


@router.post("/validate")
async def validate_endpoint(request: ReviewRequest):
    """Validate a template."""
    return _dispatch("validate_template", request)


@router.post("/enhance")
async def enhance_endpoint(request: ReviewRequest):
    """Enhance a template."""
    return _dispatch("enhance_template", request)


@router.post("/review/{operation}")
async def review_endpoint(operation: str, request: ReviewRequest):
    """Run any operation by name."""
    return _dispatch(operation, request)
