"""
TemplateReview - CORE: Pattern Matcher
Scans a template against fixed anti-pattern and formatting catalogues

Every occurrence is recorded with its line/column position.
Issues and suggestions are deduplicated by message, matches are not.
"""

import logging
import re
from dataclasses import dataclass, asdict
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternRule:
    """Static detection rule."""
    name: str
    pattern: re.Pattern
    severity: str  # error, warning, info
    message: str


@dataclass
class PatternMatch:
    """One occurrence of a rule in the template."""
    pattern: str
    line: int
    column: int
    severity: str
    message: str


# ============================================================
# CATALOGUES
# ============================================================

ANTI_PATTERNS = [
    PatternRule(
        name="mustache-syntax",
        pattern=re.compile(r"\{\{.*?\}\}"),
        severity="error",
        message="Mustache-style templating syntax detected - use native string interpolation outside templating contexts",
    ),
    PatternRule(
        name="string-interpolation",
        pattern=re.compile(r"\$\{[^}]+\}"),
        severity="warning",
        message="String interpolation should be used sparingly in templates",
    ),
    PatternRule(
        name="mutable-declaration",
        pattern=re.compile(r"\b(var|let)\b"),
        severity="warning",
        message="Prefer const for template variables unless reassignment is necessary",
    ),
    PatternRule(
        name="any-type",
        pattern=re.compile(r"\b(any)\b"),
        severity="error",
        message='Avoid using "any" type - specify proper types for template variables',
    ),
    PatternRule(
        name="debug-statement",
        pattern=re.compile(r"\bconsole\.(log|warn|error)\b"),
        severity="warning",
        message="Remove debug console statements from template",
    ),
]

FORMATTING_PATTERNS = [
    PatternRule(
        name="blank-lines",
        pattern=re.compile(r"(?:^[ \t]*\n){3,}", re.MULTILINE),
        severity="warning",
        message="Multiple consecutive blank lines detected",
    ),
    PatternRule(
        name="tabs",
        pattern=re.compile(r"\t"),
        severity="warning",
        message="Use spaces for indentation instead of tabs",
    ),
    PatternRule(
        name="trailing-whitespace",
        pattern=re.compile(r"[ \t]+$", re.MULTILINE),
        severity="info",
        message="Trailing whitespace detected",
    ),
    PatternRule(
        name="final-newline",
        pattern=re.compile(r"[^\n]\Z"),
        severity="info",
        message="File should end with a newline",
    ),
]

SEVERITY_PENALTIES = {"error": 15, "warning": 5, "info": 2}


# ============================================================
# MATCHING
# ============================================================

def locate(content: str, index: int) -> Tuple[int, int]:
    """1-based line and column of a character offset."""
    line = content.count("\n", 0, index) + 1
    column = index - content.rfind("\n", 0, index + 1)
    return line, column


def find_matches(content: str, rules: List[PatternRule]) -> List[PatternMatch]:
    matches = []
    for rule in rules:
        for found in rule.pattern.finditer(content):
            line, column = locate(content, found.start())
            matches.append(PatternMatch(
                pattern=rule.pattern.pattern,
                line=line,
                column=column,
                severity=rule.severity,
                message=rule.message,
            ))
    return matches


def score_matches(matches: List[PatternMatch]) -> int:
    penalty = sum(SEVERITY_PENALTIES.get(m.severity, 0) for m in matches)
    return max(0, 100 - penalty)


def analyze_patterns(content: str) -> Dict:
    """
    Check anti-patterns and formatting rules.

    Returns an analysis result:
        score        100 minus per-occurrence penalties, floor 0
        issues       distinct rule messages
        suggestions  one fix hint per distinct message
        details      {"patternMatches": [...every occurrence...]}
    """
    issues = []
    suggestions = []
    matches = []

    catalogues = [
        (ANTI_PATTERNS, "Fix {severity}: {message}"),
        (FORMATTING_PATTERNS, "Fix formatting: {message}"),
    ]
    for rules, hint in catalogues:
        for match in find_matches(content, rules):
            matches.append(match)
            if match.message not in issues:
                issues.append(match.message)
                suggestions.append(hint.format(severity=match.severity, message=match.message))

    logger.debug(f"Pattern scan: {len(matches)} matches, {len(issues)} distinct issues")

    return {
        "score": score_matches(matches),
        "issues": issues,
        "suggestions": suggestions,
        "details": {
            "patternMatches": [asdict(m) for m in matches]
        }
    }
