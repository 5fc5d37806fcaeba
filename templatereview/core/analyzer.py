"""
TemplateReview - CORE: Template Analyzer
Structure flags + quality scores + content and pattern findings
"""

import logging
from typing import Any, Dict, Optional

from .sections import locate_sections, find_section_order
from .variables import extract_variables
from .quality import score_quality
from .content import analyze_content
from .patterns import analyze_patterns

logger = logging.getLogger(__name__)


STRUCTURE_SUGGESTIONS = [
    ("role", 'Add a clear role definition using "ROLE:" section'),
    ("context", 'Include context information using "CONTEXT:" section'),
    ("task", 'Specify the task using "TASK:" section'),
    ("format", 'Define expected response format using "FORMAT:" or "OUTPUT:" section'),
]

VARIABLE_SUGGESTION = "Consider using template variables (e.g., {{variableName}}) for dynamic content"
CONVERSATION_SUGGESTION = (
    "For conversation templates, consider adding turn-taking markers or conversation flow indicators"
)


def analyze_template(content: str, metadata: Optional[Dict[str, Any]] = None) -> Dict:
    """
    Full analysis of a template.

    metadata (type, version, ...) is echoed back untouched.
    """
    issues = []
    if not isinstance(content, str):
        issues.append("Template content must be a string")
        content = ""
    elif not content.strip():
        issues.append("Template content cannot be empty")

    sections = locate_sections(content)
    variables = extract_variables(content)

    suggestions = [message for key, message in STRUCTURE_SUGGESTIONS if not sections[key]]
    if not variables.unique:
        suggestions.append(VARIABLE_SUGGESTION)
    if metadata and metadata.get("type") == "conversation":
        suggestions.append(CONVERSATION_SUGGESTION)

    patterns = analyze_patterns(content)
    logger.debug(f"Analysis: {len(suggestions)} suggestions, pattern score {patterns['score']}")

    return {
        "structure": {
            "hasRole": sections["role"],
            "hasContext": sections["context"],
            "hasTask": sections["task"],
            "hasResponseFormat": sections["format"],
        },
        "sections": find_section_order(content),
        "variables": variables.to_dict(),
        "quality": score_quality(content),
        "issues": issues,
        "suggestions": suggestions,
        "content": analyze_content(content),
        "patterns": patterns,
        "metadata": dict(metadata or {}),
    }
