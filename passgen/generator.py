"""
passgen.generator
Secure password generator using Python's secrets module.
"""

import logging
from secrets import choice, SystemRandom
import string
from typing import List, Optional, Tuple

from .errors import InvalidPolicyError
from .models import GenerationPolicy

logger = logging.getLogger(__name__)

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
AMBIGUOUS = "il1Lo0O"

_sysrand = SystemRandom()


def _strip_ambiguous(alphabet: str) -> str:
    return "".join(c for c in alphabet if c not in AMBIGUOUS)


def character_classes(policy: GenerationPolicy) -> List[Tuple[str, str]]:
    """
    Return (name, alphabet) for every enabled class, in the fixed order
    lowercase, uppercase, numbers, symbols. Alphabets are already filtered
    when the policy excludes ambiguous characters.
    """
    classes = []
    if policy.include_lowercase:
        classes.append(("lowercase", LOWERCASE))
    if policy.include_uppercase:
        classes.append(("uppercase", UPPERCASE))
    if policy.include_numbers:
        classes.append(("numbers", NUMBERS))
    if policy.include_symbols:
        classes.append(("symbols", SYMBOLS))
    if policy.exclude_ambiguous:
        classes = [(name, _strip_ambiguous(alphabet)) for name, alphabet in classes]
    return classes


def generate(policy: Optional[GenerationPolicy] = None) -> str:
    """
    Generate a cryptographically secure password.

    One character from every enabled class is always included. If the policy
    length is shorter than the number of enabled classes, the password is
    returned with one character per class and is longer than requested.
    """
    policy = policy or GenerationPolicy()
    pools = character_classes(policy)

    all_chars = "".join(alphabet for _, alphabet in pools)
    if not all_chars:
        logger.debug("rejecting policy with empty charset: %s", policy)
        raise InvalidPolicyError("At least one character type must be selected")

    password_chars = []
    for _, alphabet in pools:
        if alphabet:
            password_chars.append(choice(alphabet))

    remaining = policy.length - len(password_chars)
    for _ in range(remaining):
        password_chars.append(choice(all_chars))

    # Fisher-Yates driven by the OS random source
    _sysrand.shuffle(password_chars)
    return "".join(password_chars)


def generate_many(policy: Optional[GenerationPolicy], count: int) -> List[str]:
    return [generate(policy) for _ in range(count)]
