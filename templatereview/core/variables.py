"""
TemplateReview - CORE: Variable Extractor
Finds template variables in the three competing syntaxes

    {{name}}   double-brace (canonical)
    [name]     bracket
    ${name}    dollar-brace
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List


# ============================================================
# VARIABLE SYNTAXES
# ============================================================

VARIABLE_SYNTAXES = {
    "double_brace": re.compile(r"\{\{[^}]+\}\}"),
    "bracket": re.compile(r"\[[A-Za-z0-9_-]+\]"),
    "dollar_brace": re.compile(r"\$\{[A-Za-z0-9_-]+\}"),
}

CANONICAL_VARIABLE_RE = re.compile(r"^\{\{[A-Za-z0-9_-]+\}\}$")

# Any syntax, in textual order
ANY_VARIABLE_RE = re.compile(r"\{\{[^}]+\}\}|\[[A-Za-z0-9_-]+\]|\$\{[A-Za-z0-9_-]+\}")


@dataclass
class VariableReport:
    """Variables found in one template."""
    counts: Dict[str, int] = field(default_factory=dict)
    tokens: List[str] = field(default_factory=list)
    malformed: List[str] = field(default_factory=list)
    unique: List[str] = field(default_factory=list)

    @property
    def mixed(self) -> bool:
        return sum(1 for count in self.counts.values() if count > 0) > 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def to_dict(self) -> Dict:
        return {
            "counts": dict(self.counts),
            "unique": len(self.unique),
            "mixed": self.mixed,
            "malformed": list(self.malformed),
        }


# ============================================================
# EXTRACTION
# ============================================================

def extract_variables(content: str) -> VariableReport:
    """Scan all syntaxes, count them and check double-brace names."""
    report = VariableReport()

    for syntax, pattern in VARIABLE_SYNTAXES.items():
        report.counts[syntax] = len(pattern.findall(content))

    report.tokens = ANY_VARIABLE_RE.findall(content)

    # Every malformed occurrence is kept, repeats included
    report.malformed = [
        token for token in VARIABLE_SYNTAXES["double_brace"].findall(content)
        if not CANONICAL_VARIABLE_RE.match(token)
    ]

    seen = set()
    for token in report.tokens:
        key = token.lower()
        if key not in seen:
            seen.add(key)
            report.unique.append(token)

    return report


def canonical_name(token: str) -> str:
    """`[ first name ]` -> `first_name`"""
    name = re.sub(r"[{}\[\]$]", "", token).strip()
    return re.sub(r"\s+", "_", name)


def to_canonical(token: str) -> str:
    return "{{" + canonical_name(token) + "}}"
