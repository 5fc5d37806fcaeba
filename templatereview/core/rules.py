"""
TemplateReview - CORE: Rule Validator
Pass/fail verdict over structure, content, variable and format rules

All checks run and accumulate - validation never stops at the first violation.
"""

import logging
import re
from dataclasses import dataclass, asdict
from typing import Dict, List

from .sections import (
    CANONICAL_ORDER,
    locate_sections,
    find_section_order,
    find_order_violations,
    find_section_headers,
)
from .variables import extract_variables
from .quality import split_sentences, bullet_glyphs, NESTED_PARENS_RE

logger = logging.getLogger(__name__)


@dataclass
class Violation:
    rule: str
    message: str
    severity: str  # error, warning


# ============================================================
# RULE CONSTANTS
# ============================================================

MAX_SENTENCE_LENGTH = 150
VARIABLE_USAGE_THRESHOLD = 500

AMBIGUOUS_TERMS = ["maybe", "probably", "possibly", "might", "could", "should", "would"]

BLANK_RUN_RE = re.compile(r"(?:^[ \t]*\n){3,}", re.MULTILINE)
TRAILING_WS_RE = re.compile(r"[ \t]+$", re.MULTILINE)

REQUIRED_SECTIONS = [
    ("role", "Missing ROLE section", "error"),
    ("context", "Missing CONTEXT section", "error"),
    ("task", "Missing TASK section", "error"),
    ("format", "Missing FORMAT/OUTPUT section", "warning"),
]


# ============================================================
# CHECKS
# ============================================================

def check_schema(content: str, violations: List[Violation]):
    if not content.strip():
        violations.append(Violation("schema", "Template content cannot be empty", "error"))


def check_structure(content: str, violations: List[Violation]):
    sections = locate_sections(content)
    for key, message, severity in REQUIRED_SECTIONS:
        if not sections[key]:
            violations.append(Violation("required-sections", message, severity))

    for label in find_order_violations(find_section_order(content)):
        violations.append(Violation(
            "section-order",
            f"Section {label} is out of order. Expected order: {CANONICAL_ORDER}",
            "warning",
        ))


def check_content(content: str, violations: List[Violation]):
    for sentence in split_sentences(content):
        if len(sentence.strip()) > MAX_SENTENCE_LENGTH:
            violations.append(Violation(
                "sentence-length",
                f"Sentence exceeds recommended length of {MAX_SENTENCE_LENGTH} characters",
                "warning",
            ))

    if NESTED_PARENS_RE.search(content):
        violations.append(Violation(
            "nested-instructions", "Avoid nested parentheses in instructions", "warning"
        ))

    for term in AMBIGUOUS_TERMS:
        if re.search(rf"\b{term}\b", content, re.IGNORECASE):
            violations.append(Violation(
                "ambiguous-language", f'Avoid ambiguous terms like "{term}"', "warning"
            ))


def check_variables(content: str, violations: List[Violation]):
    report = extract_variables(content)

    if report.mixed:
        violations.append(Violation(
            "variable-format",
            "Inconsistent variable formats detected. Use {{variableName}} format consistently",
            "error",
        ))

    for token in report.malformed:
        violations.append(Violation(
            "variable-naming",
            f"Invalid variable format: {token}. Use alphanumeric characters, underscores and hyphens only",
            "error",
        ))

    if not report.unique and len(content) > VARIABLE_USAGE_THRESHOLD:
        violations.append(Violation(
            "variable-usage",
            "Consider using variables for dynamic content in longer templates",
            "warning",
        ))


def check_format(content: str, violations: List[Violation]):
    if len(bullet_glyphs(content)) > 1:
        violations.append(Violation(
            "bullet-consistency", "Use consistent bullet point style throughout the template", "warning"
        ))

    if any(header != header.upper() for header in find_section_headers(content)):
        violations.append(Violation(
            "section-case",
            "Use consistent uppercase for section headers (ROLE:, CONTEXT:, etc.)",
            "warning",
        ))

    if BLANK_RUN_RE.search(content):
        violations.append(Violation(
            "section-spacing", "Use exactly one blank line between sections", "warning"
        ))

    if TRAILING_WS_RE.search(content):
        violations.append(Violation("trailing-whitespace", "Remove trailing whitespace", "warning"))


CHECKS = [check_schema, check_structure, check_content, check_variables, check_format]


# ============================================================
# MAIN VALIDATE FUNCTION
# ============================================================

def validate_template(content: str) -> Dict:
    """
    Validate a template against every rule.

    Returns {"isValid": bool, "violations": [{rule, message, severity}, ...]}
    """
    if not isinstance(content, str):
        violation = Violation("schema", "Template content must be a string", "error")
        return {"isValid": False, "violations": [asdict(violation)]}

    violations: List[Violation] = []
    for check in CHECKS:
        check(content, violations)

    errors = sum(1 for v in violations if v.severity == "error")
    logger.debug(f"Validation: {errors} errors, {len(violations) - errors} warnings")

    return {
        "isValid": len(violations) == 0,
        "violations": [asdict(v) for v in violations],
    }
