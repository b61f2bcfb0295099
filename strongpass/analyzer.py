"""Password strength analysis.

``analyze_password`` maps a password to an immutable :class:`Analysis`:
eight pass/fail checks, a 0-100 score with its strength label, remediation
feedback, the dictionary entries found inside the password and an entropy
estimate in bits.  Nothing here keeps state between calls.
"""

import enum
import functools
import logging
import math
import re
import string
from dataclasses import astuple, dataclass, fields

from .wordlists import DICTIONARY, MIN_WORD_LENGTH, SYMBOLS

log = logging.getLogger(__name__)

MIN_LENGTH = 12
SHORT_LENGTH = 8
SHORT_PENALTY = 2
LENGTH_BONUSES = (16, 20)
MAX_RAW_SCORE = 10


def _windows(alphabet, size=3):
    return tuple(alphabet[i:i + size] for i in range(len(alphabet) - size + 1))


# abc .. xyz and 123 .. 890
SEQUENCES = _windows(string.ascii_lowercase) + _windows("1234567890")

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile("[" + re.escape(SYMBOLS) + "]")
_REPEAT = re.compile(r"(.)\1{2,}", re.DOTALL)


@functools.total_ordering
class Strength(enum.Enum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"

    @property
    def rank(self):
        return list(Strength).index(self)

    def __lt__(self, other):
        if not isinstance(other, Strength):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def from_score(cls, score):
        for threshold, strength in STRENGTH_THRESHOLDS:
            if score >= threshold:
                return strength
        return cls.VERY_WEAK


# inclusive lower bounds, highest first
STRENGTH_THRESHOLDS = (
    (90, Strength.VERY_STRONG),
    (75, Strength.STRONG),
    (60, Strength.GOOD),
    (40, Strength.FAIR),
    (20, Strength.WEAK),
)


@dataclass(frozen=True)
class Checks:
    """The eight predicates, in the order they are reported."""

    length: bool
    uppercase: bool
    lowercase: bool
    numbers: bool
    symbols: bool
    common_words: bool
    repeated_chars: bool
    sequential: bool

    def items(self):
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def passed(self):
        return sum(astuple(self))

    def to_dict(self):
        return {_camel(name): value for name, value in self.items()}


FEEDBACK = {
    "length": "Use at least 12 characters",
    "uppercase": "Add uppercase letters",
    "lowercase": "Add lowercase letters",
    "numbers": "Add numbers",
    "symbols": "Add special characters",
    "common_words": "Avoid common words",
    "repeated_chars": "Avoid repeated characters",
    "sequential": "Avoid sequential characters",
}
ALL_PASSED = "Excellent! Your password is very strong."


@dataclass(frozen=True)
class Analysis:
    score: float
    strength: Strength
    checks: Checks
    feedback: tuple
    dictionary_words: tuple
    entropy: float
    raw_score: int

    def to_dict(self):
        return {
            "score": self.score,
            "strength": self.strength.value,
            "feedback": list(self.feedback),
            "checks": self.checks.to_dict(),
            "dictionaryWords": list(self.dictionary_words),
            "entropy": self.entropy,
        }


def _camel(name):
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def charset_size(password):
    size = 0
    if _LOWER.search(password):
        size += 26
    if _UPPER.search(password):
        size += 26
    if _DIGIT.search(password):
        size += 10
    if _SYMBOL.search(password):
        size += 32
    return size or 1


def password_entropy(password):
    # E = L * log2(R)
    return len(password) * math.log2(charset_size(password))


def raw_score(checks, length):
    score = checks.passed()
    for bonus in LENGTH_BONUSES:
        if length >= bonus:
            score += 1
    if length < SHORT_LENGTH:
        score = max(0, score - SHORT_PENALTY)
    return score


def feedback_for(checks):
    feedback = [FEEDBACK[name] for name, ok in checks.items() if not ok]
    return tuple(feedback) if feedback else (ALL_PASSED,)


class PasswordAnalyzer:
    """Scores passwords against a fixed dictionary.

    The dictionary is captured once at construction and only read afterwards,
    so a single instance can be shared freely.
    """

    def __init__(self, dictionary=DICTIONARY):
        self.words = tuple(w for w in dictionary if len(w) > MIN_WORD_LENGTH)

    def find_words(self, password):
        lowered = password.lower()
        return tuple(w for w in self.words if w.lower() in lowered)

    def check(self, password, found=None):
        if found is None:
            found = self.find_words(password)
        lowered = password.lower()
        return Checks(
            length=len(password) >= MIN_LENGTH,
            uppercase=bool(_UPPER.search(password)),
            lowercase=bool(_LOWER.search(password)),
            numbers=bool(_DIGIT.search(password)),
            symbols=bool(_SYMBOL.search(password)),
            common_words=not found,
            repeated_chars=not _REPEAT.search(password),
            sequential=not any(seq in lowered for seq in SEQUENCES),
        )

    def analyze(self, password):
        found = self.find_words(password)
        checks = self.check(password, found)
        # nothing typed yet scores nothing, whatever the negative checks say
        raw = raw_score(checks, len(password)) if password else 0
        score = min(raw * 100 / MAX_RAW_SCORE, 100)
        analysis = Analysis(
            score=score,
            strength=Strength.from_score(score),
            checks=checks,
            feedback=feedback_for(checks),
            dictionary_words=found,
            entropy=password_entropy(password),
            raw_score=raw,
        )
        log.debug("analyzed password of length %d: score=%s, %d/8 checks",
                  len(password), score, checks.passed())
        return analysis


_default = PasswordAnalyzer()


def analyze_password(password):
    return _default.analyze(password)
