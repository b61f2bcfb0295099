import logging
import random

from .wordlists import DIGITS, GENERATOR_SYMBOLS, LOWERCASE, UPPERCASE

log = logging.getLogger(__name__)

PASSWORD_LENGTH = 16
CHARSETS = (LOWERCASE, UPPERCASE, DIGITS, GENERATOR_SYMBOLS)


class PasswordGenerator:
    """Builds 16-character passwords with every character class present.

    ``rng`` is any object with a ``random.Random``-style ``randrange``;
    pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.SystemRandom()

    def pick(self, chars):
        return chars[self.rng.randrange(len(chars))]

    def shuffle(self, chars):
        # Fisher-Yates
        for i in range(len(chars) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            chars[i], chars[j] = chars[j], chars[i]

    def generate(self):
        chars = [self.pick(charset) for charset in CHARSETS]
        pool = "".join(CHARSETS)
        while len(chars) < PASSWORD_LENGTH:
            chars.append(self.pick(pool))
        self.shuffle(chars)
        log.debug("generated %d-character password", len(chars))
        return "".join(chars)


def generate_password(rng=None):
    return PasswordGenerator(rng).generate()
