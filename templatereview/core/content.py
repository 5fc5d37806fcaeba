"""
TemplateReview - CORE: Content Scorer
Tone, sentence length, jargon and vague wording
"""

import re
from typing import Dict

from .quality import split_sentences


PRESCRIPTIVE_RE = re.compile(r"\byou\s+(must|should)\b", re.IGNORECASE)
COMPLEX_WORD_RE = re.compile(r"\b[A-Za-z]{15,}\b")

VAGUE_TERMS = ["etc", "and so on", "things", "stuff"]

MAX_WORDS_PER_SENTENCE = 25


def analyze_content(content: str) -> Dict:
    """Score = 100 - 10 per issue (floor 0)."""
    issues = []
    suggestions = []

    if PRESCRIPTIVE_RE.search(content):
        issues.append("Tone is too prescriptive")
        suggestions.append("Consider using more collaborative language")

    sentences = split_sentences(content)
    avg_words = sum(len(s.split()) for s in sentences) / len(sentences)
    if avg_words > MAX_WORDS_PER_SENTENCE:
        issues.append("Sentences are too long")
        suggestions.append("Break down long sentences into smaller, clearer statements")

    complex_words = COMPLEX_WORD_RE.findall(content)
    if complex_words:
        issues.append("Contains complex or technical jargon")
        suggestions.append("Consider using simpler, more accessible language")

    for term in VAGUE_TERMS:
        if re.search(rf"\b{re.escape(term)}\b", content, re.IGNORECASE):
            issues.append(f'Contains vague term: "{term}"')
            suggestions.append("Be more specific and explicit")

    return {
        "score": max(0, 100 - len(issues) * 10),
        "issues": issues,
        "suggestions": suggestions,
        "details": {
            "avgWordsPerSentence": round(avg_words, 2),
            "complexWordCount": len(complex_words),
        }
    }
