"""
TemplateReview - CORE: Operations
Name -> core call table shared by the CLI and the HTTP service
"""

import logging
from typing import Any, Callable, Dict

from .analyzer import analyze_template
from .errors import TemplateInputError, UnknownOperationError
from .optimizer import enhance_template
from .rules import validate_template

logger = logging.getLogger(__name__)


OPERATIONS: Dict[str, Callable[..., Dict]] = {
    "analyze_template": analyze_template,
    "enhance_template": enhance_template,
    "validate_template": validate_template,
}


def check_operation(name: str) -> Callable[..., Dict]:
    if name not in OPERATIONS:
        raise UnknownOperationError(name, list(OPERATIONS))
    return OPERATIONS[name]


def check_payload(payload: Any) -> str:
    """Return the template text or raise TemplateInputError."""
    if not isinstance(payload, dict):
        raise TemplateInputError('Invalid input: expected JSON with a "template" field')
    template = payload.get("template")
    if not isinstance(template, str) or not template.strip():
        raise TemplateInputError('Invalid input: expected JSON with a "template" field')
    return template


def run_operation(name: str, payload: Any) -> Dict:
    """Validate the request, then dispatch to the core operation."""
    operation = check_operation(name)
    template = check_payload(payload)

    logger.info(f"{name}: {len(template)} chars")

    if operation is analyze_template:
        metadata = payload.get("metadata")
        if metadata is not None and not isinstance(metadata, dict):
            raise TemplateInputError('Invalid input: "metadata" must be an object')
        return analyze_template(template, metadata)
    return operation(template)
