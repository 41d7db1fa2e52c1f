"""
passgen.evaluator

Password strength evaluator:
- score_password(password): one point per length threshold (8, 12, 16) and
  per character class present (lower, upper, digit, symbol), for a 0-7 score
- strength_level(score): map a score to Weak / Medium / Strong / Very Strong
- feedback is produced for short passwords and missing classes only
"""

import re
from typing import List

from .models import StrengthLevel, StrengthReport

LENGTH_THRESHOLDS = (8, 12, 16)

FEEDBACK_TOO_SHORT = "Password is too short"
FEEDBACK_NO_LOWER = "Add lowercase letters"
FEEDBACK_NO_UPPER = "Add uppercase letters"
FEEDBACK_NO_DIGIT = "Add numbers"
FEEDBACK_NO_SYMBOL = "Add symbols"
FEEDBACK_SECURE = "Password is secure!"


def strength_level(score: int) -> StrengthLevel:
    if score <= 3:
        return StrengthLevel.WEAK
    elif score <= 5:
        return StrengthLevel.MEDIUM
    elif score == 6:
        return StrengthLevel.STRONG
    return StrengthLevel.VERY_STRONG


def score_password(password: str) -> StrengthReport:
    """
    Score the strength of a password on a scale of 0-7 with a level and
    ordered feedback. Any string is accepted, including the empty one.
    """
    score = 0
    feedback: List[str] = []

    # --- Length ---
    length = len(password)
    for threshold in LENGTH_THRESHOLDS:
        if length >= threshold:
            score += 1
    if length < LENGTH_THRESHOLDS[0]:
        feedback.append(FEEDBACK_TOO_SHORT)

    # --- Character variety ---
    checks = (
        (r"[a-z]", FEEDBACK_NO_LOWER),
        (r"[A-Z]", FEEDBACK_NO_UPPER),
        (r"[0-9]", FEEDBACK_NO_DIGIT),
        (r"[^a-zA-Z0-9]", FEEDBACK_NO_SYMBOL),
    )
    for pattern, remark in checks:
        if re.search(pattern, password):
            score += 1
        else:
            feedback.append(remark)

    if not feedback:
        feedback.append(FEEDBACK_SECURE)

    return StrengthReport(score=score, level=strength_level(score), feedback=tuple(feedback))
