"""
TemplateReview - CORE Module
Section Locator + Variable Extractor + Quality Scorer + Pattern Matcher
+ Rule Validator + Template Enhancer

Three pure operations: analyze_template, validate_template, enhance_template
"""

from .analyzer import analyze_template
from .rules import validate_template, Violation, AMBIGUOUS_TERMS
from .optimizer import enhance_template, ENHANCEMENT_PASSES
from .patterns import analyze_patterns, ANTI_PATTERNS, FORMATTING_PATTERNS, PatternRule
from .content import analyze_content
from .quality import calculate_clarity, calculate_conciseness, calculate_consistency
from .sections import locate_sections, find_section_order
from .variables import extract_variables
from .errors import TemplateReviewError, TemplateInputError, UnknownOperationError
from .operations import OPERATIONS, run_operation

__all__ = [
    "analyze_template",
    "validate_template",
    "enhance_template",
    "analyze_patterns",
    "analyze_content",
    "calculate_clarity",
    "calculate_conciseness",
    "calculate_consistency",
    "locate_sections",
    "find_section_order",
    "extract_variables",
    "Violation",
    "PatternRule",
    "ANTI_PATTERNS",
    "FORMATTING_PATTERNS",
    "AMBIGUOUS_TERMS",
    "ENHANCEMENT_PASSES",
    "TemplateReviewError",
    "TemplateInputError",
    "UnknownOperationError",
    "OPERATIONS",
    "run_operation",
]
