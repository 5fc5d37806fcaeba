"""
TemplateReview - CORE: Quality Scorer
Clarity, conciseness and consistency scores (0.0 - 1.0)

Each metric starts at 1.0, applies its penalties/bonuses and is clamped.
The three metrics are independent single-pass heuristics over the raw text.
"""

import re
from collections import Counter
from typing import Dict, List, Set


SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
NESTED_PARENS_RE = re.compile(r"\([^()]*\([^()]*\)[^()]*\)")
CAPS_LABEL_RE = re.compile(r"^[A-Z]+:", re.MULTILINE)
PRESENT_TENSE_RE = re.compile(r"\b(is|are|am)\b")
PAST_TENSE_RE = re.compile(r"\b(was|were)\b")
BULLET_RE = re.compile(r"^([-*•])[ \t]", re.MULTILINE)


def split_sentences(content: str) -> List[str]:
    return SENTENCE_SPLIT_RE.split(content)


def bullet_glyphs(content: str) -> Set[str]:
    """Distinct bullet characters used at line starts."""
    return set(BULLET_RE.findall(content))


def _clamp(score: float) -> float:
    return round(max(0.0, min(1.0, score)), 2)


# ============================================================
# METRICS
# ============================================================

def calculate_clarity(content: str) -> float:
    score = 1.0

    # Long sentences (penalties stack)
    sentences = split_sentences(content)
    avg_length = sum(len(s) for s in sentences) / len(sentences)
    if avg_length > 100:
        score -= 0.2
    if avg_length > 150:
        score -= 0.3

    # Nested qualifiers
    score -= len(NESTED_PARENS_RE.findall(content)) * 0.1

    # Explicit structure
    if CAPS_LABEL_RE.search(content):
        score += 0.2

    return _clamp(score)


def calculate_conciseness(content: str) -> float:
    score = 1.0

    freq = Counter(content.lower().split())
    repetitive = sum(1 for count in freq.values() if count > 3)
    score -= repetitive * 0.1

    if len(content) > 500:
        score -= 0.2
    if len(content) > 1000:
        score -= 0.3

    return _clamp(score)


def calculate_consistency(content: str) -> float:
    score = 1.0

    if PRESENT_TENSE_RE.search(content) and PAST_TENSE_RE.search(content):
        score -= 0.2

    if len(bullet_glyphs(content)) > 1:
        score -= 0.2

    return _clamp(score)


def score_quality(content: str) -> Dict[str, float]:
    return {
        "clarity": calculate_clarity(content),
        "conciseness": calculate_conciseness(content),
        "consistency": calculate_consistency(content),
    }
