"""
TemplateReview - CORE: Section Locator
Finds the labeled sections of a template (ROLE, CONTEXT, TASK, FORMAT/OUTPUT)

A section is present when a line starts with its label followed by a colon.
FORMAT and OUTPUT are two names for the same response-format section.
"""

import re
from typing import Dict, List


# ============================================================
# SECTION LABELS
# ============================================================

# Rank in the canonical order - FORMAT and OUTPUT share a slot
SECTION_RANK = {
    "ROLE": 0,
    "CONTEXT": 1,
    "TASK": 2,
    "FORMAT": 3,
    "OUTPUT": 3,
}

CANONICAL_ORDER = "ROLE, CONTEXT, TASK, FORMAT/OUTPUT"

SECTION_PATTERNS = {
    "role": re.compile(r"^ROLE:", re.IGNORECASE | re.MULTILINE),
    "context": re.compile(r"^CONTEXT:", re.IGNORECASE | re.MULTILINE),
    "task": re.compile(r"^TASK:", re.IGNORECASE | re.MULTILINE),
    "format": re.compile(r"^(FORMAT|OUTPUT):", re.IGNORECASE | re.MULTILINE),
}

LABEL_LINE_RE = re.compile(r"^(ROLE|CONTEXT|TASK|FORMAT|OUTPUT):", re.IGNORECASE)
LABEL_HEADER_RE = re.compile(r"^(ROLE|CONTEXT|TASK|FORMAT|OUTPUT):", re.IGNORECASE | re.MULTILINE)


# ============================================================
# LOCATOR
# ============================================================

def locate_sections(content: str) -> Dict[str, bool]:
    """Report which logical sections are present."""
    return {name: bool(pattern.search(content)) for name, pattern in SECTION_PATTERNS.items()}


def find_section_order(content: str) -> List[str]:
    """Uppercased section labels in the order they appear."""
    found = []
    for line in content.split("\n"):
        match = LABEL_LINE_RE.match(line)
        if match:
            found.append(match.group(1).upper())
    return found


def find_order_violations(found: List[str]) -> List[str]:
    """
    Labels ranked before the label seen just before them.

    ROLE, TASK, CONTEXT -> ["CONTEXT"]
    """
    out_of_order = []
    last_rank = -1
    for label in found:
        rank = SECTION_RANK[label]
        if rank < last_rank:
            out_of_order.append(label)
        last_rank = rank
    return out_of_order


def find_section_headers(content: str) -> List[str]:
    """Literal header text (original case) of every recognized label."""
    return [m.group(0) for m in LABEL_HEADER_RE.finditer(content)]


def is_section_label(line: str) -> bool:
    return bool(LABEL_LINE_RE.match(line))


def has_any_section(sections: Dict[str, bool]) -> bool:
    return any(sections.values())
