"""
TemplateReview - CORE: Errors
Exceptions raised at the operation boundary + enhancement pass guard
"""

import functools
import logging
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)


class TemplateReviewError(Exception):
    """Base error for the review service"""
    pass


class TemplateInputError(TemplateReviewError):
    """Request payload is missing or has no usable template text"""
    pass


class UnknownOperationError(TemplateReviewError):
    """Operation name is not one of the supported operations"""

    def __init__(self, name: str, known: List[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown command: {name}. Expected one of: {', '.join(known)}")


def safe_pass(func: Callable[[str], Tuple[str, List[str]]]) -> Callable[[str], Tuple[str, List[str]]]:
    """
    Guard an enhancement pass.

    A pass maps content -> (new_content, changes). If it raises, the
    failure is logged and the input comes back untouched with no changes.
    """
    @functools.wraps(func)
    def wrapper(content: str) -> Tuple[str, List[str]]:
        try:
            return func(content)
        except Exception as e:
            logger.warning(f"Enhancement pass {func.__name__} failed: {type(e).__name__} - {e}")
            return content, []
    return wrapper
