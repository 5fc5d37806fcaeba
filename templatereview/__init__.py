"""
TemplateReview
Prompt template analysis, validation and enhancement
"""

from pathlib import Path as _Path
_version_file = _Path(__file__).parent.parent / "VERSION"
__version__ = _version_file.read_text().strip() if _version_file.exists() else "0.0.0"

from .core import analyze_template, validate_template, enhance_template

__all__ = ["analyze_template", "validate_template", "enhance_template", "__version__"]
