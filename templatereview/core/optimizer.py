"""
TemplateReview - CORE: Template Enhancer
Rewrites a template to fix detected issues

PASSES (in order, each consumes the previous output):
1. Structure    - add missing ROLE/CONTEXT/TASK/FORMAT sections
2. Variables    - rewrite [name] / ${name} to {{name}}
3. Formatting   - LF line endings, header case, section spacing, bullets,
                  trailing whitespace
4. Redundancy   - drop duplicate instruction lines

Every applied transformation is appended to a human-readable change log.
A pass that fails returns its input untouched (see errors.safe_pass).
"""

import logging
import re
from typing import Dict, List, Tuple

from .errors import safe_pass
from .sections import (
    LABEL_HEADER_RE,
    locate_sections,
    has_any_section,
    is_section_label,
)
from .variables import ANY_VARIABLE_RE, canonical_name, to_canonical

logger = logging.getLogger(__name__)


# ============================================================
# BOILERPLATE
# ============================================================

ROLE_PREFIX = "ROLE: You are an AI assistant tasked with "
DEFAULT_CONTEXT = "CONTEXT: Working with the following information and requirements."
DEFAULT_TASK = "TASK: Complete the following objectives."
DEFAULT_FORMAT = "FORMAT: Provide your response in a clear, structured manner."

STRUCTURE_ADDED = "Added basic template structure (ROLE, CONTEXT, TASK, FORMAT sections)"

ROLE_KEYWORDS = [
    (("review", "analyze"), "reviewing and analyzing content"),
    (("create", "generate"), "creating and generating content"),
    (("improve", "enhance"), "improving and enhancing content"),
    (("explain", "teach"), "explaining concepts and teaching"),
]
DEFAULT_ROLE = "assisting with the specified task"

ROLE_LINE_RE = re.compile(r"^ROLE:", re.IGNORECASE)
BULLET_NORMALIZE_RE = re.compile(r"^([*•][ \t]+|-[ \t]{2,}|-\t[ \t]*)", re.MULTILINE)
TRAILING_WS_RE = re.compile(r"[ \t]+$", re.MULTILINE)


def infer_role(text: str) -> str:
    """Guess the assistant role from keywords."""
    text_lower = text.lower()
    for keywords, role in ROLE_KEYWORDS:
        if any(keyword in text_lower for keyword in keywords):
            return role
    return DEFAULT_ROLE


def _join(lines: List[str]) -> str:
    """Blank lines still count as lines, they just add no text."""
    return " ".join(line for line in lines if line)


def _insert_after_role(content: str, block: str) -> str:
    """Put `block` right after the ROLE line, one blank line on each side."""
    lines = content.split("\n")
    for i, line in enumerate(lines):
        if ROLE_LINE_RE.match(line):
            head, tail = lines[:i + 1], lines[i + 1:]
            had_tail = bool(tail)
            while tail and not tail[0].strip():
                tail.pop(0)
            result = head + ["", block]
            if tail:
                result += [""] + tail
            elif had_tail:
                result.append("")
            return "\n".join(result)
    return block + "\n\n" + content


# ============================================================
# PASSES
# ============================================================

@safe_pass
def add_missing_sections(content: str) -> Tuple[str, List[str]]:
    sections = locate_sections(content)

    # Completely unstructured: rebuild the whole document
    if not has_any_section(sections):
        lines = [line.strip() for line in content.strip().split("\n")]
        first = lines[0]
        parts = [
            ROLE_PREFIX + infer_role(first),
            f"CONTEXT: {_join(lines[:3])}".rstrip(),
            f"TASK: {_join(lines[3:])}".rstrip(),
            DEFAULT_FORMAT,
        ]
        return "\n\n".join(parts), [STRUCTURE_ADDED]

    enhanced = content
    changes = []

    if not sections["role"]:
        enhanced = ROLE_PREFIX + infer_role(content) + "\n\n" + enhanced.lstrip("\n")
        changes.append("Added missing ROLE section")

    if not sections["context"]:
        enhanced = _insert_after_role(enhanced, DEFAULT_CONTEXT)
        changes.append("Added missing CONTEXT section")

    if not sections["task"]:
        enhanced = enhanced.strip() + "\n\n" + DEFAULT_TASK + "\n"
        changes.append("Added missing TASK section")

    if not sections["format"]:
        enhanced = enhanced.strip() + "\n\n" + DEFAULT_FORMAT + "\n"
        changes.append("Added missing FORMAT section")

    return enhanced, changes


@safe_pass
def normalize_variables(content: str) -> Tuple[str, List[str]]:
    normalized: Dict[str, str] = {}

    def _replace(match) -> str:
        token = match.group(0)
        if not canonical_name(token):
            return token
        canonical = to_canonical(token)
        if canonical != token:
            normalized.setdefault(token, canonical)
        return canonical

    enhanced = ANY_VARIABLE_RE.sub(_replace, content)
    if not normalized:
        return content, []

    mapping = ", ".join(f"{old} → {new}" for old, new in normalized.items())
    return enhanced, [f"Normalized variable format to {{{{variableName}}}} style: {mapping}"]


def _space_sections(content: str) -> str:
    lines = []
    for line in content.split("\n"):
        if lines and is_section_label(line) and lines[-1].strip():
            lines.append("")
        lines.append(line)
    return "\n".join(lines)


@safe_pass
def improve_formatting(content: str) -> Tuple[str, List[str]]:
    changes = []

    steps = [
        (lambda text: text.replace("\r\n", "\n"), "Normalized line endings to LF"),
        (lambda text: LABEL_HEADER_RE.sub(lambda m: m.group(0).upper(), text),
         "Standardized section header capitalization"),
        (_space_sections, "Added blank line before section headers"),
        (lambda text: BULLET_NORMALIZE_RE.sub("- ", text),
         'Standardized bullet point format to "-"'),
        (lambda text: TRAILING_WS_RE.sub("", text), "Removed trailing whitespace"),
    ]

    enhanced = content
    for step, description in steps:
        updated = step(enhanced)
        if updated != enhanced:
            enhanced = updated
            changes.append(description)

    return enhanced, changes


@safe_pass
def remove_redundancies(content: str) -> Tuple[str, List[str]]:
    seen = set()
    kept = []
    removed = 0

    for line in content.split("\n"):
        normalized = line.strip().lower()
        if not normalized or is_section_label(normalized):
            kept.append(line)
            continue
        if normalized in seen:
            removed += 1
            continue
        seen.add(normalized)
        kept.append(line)

    if not removed:
        return content, []
    return "\n".join(kept), [f"Removed {removed} duplicate instruction(s)"]


ENHANCEMENT_PASSES = [
    add_missing_sections,
    normalize_variables,
    improve_formatting,
    remove_redundancies,
]


# ============================================================
# MAIN ENHANCE FUNCTION
# ============================================================

def enhance_template(content: str) -> Dict:
    """
    Apply every enhancement pass in order.

    Returns {"enhancedContent", "changes", "originalContent"}; never raises.
    """
    if not isinstance(content, str):
        logger.warning(f"Enhancement skipped: expected text, got {type(content).__name__}")
        return {"enhancedContent": content, "changes": [], "originalContent": content}

    enhanced = content
    changes: List[str] = []
    for enhancement in ENHANCEMENT_PASSES:
        enhanced, applied = enhancement(enhanced)
        changes.extend(applied)

    logger.debug(f"Enhancement: {len(changes)} changes applied")

    return {
        "enhancedContent": enhanced,
        "changes": changes,
        "originalContent": content,
    }
