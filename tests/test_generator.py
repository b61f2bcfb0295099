import random
import string

from strongpass.generator import PASSWORD_LENGTH, PasswordGenerator, generate_password
from strongpass.wordlists import GENERATOR_SYMBOLS


def check_classes(password):
    assert len(password) == PASSWORD_LENGTH
    assert any(c in string.ascii_lowercase for c in password)
    assert any(c in string.ascii_uppercase for c in password)
    assert any(c in string.digits for c in password)
    assert any(c in GENERATOR_SYMBOLS for c in password)


def test_every_password_has_all_classes():
    for _ in range(500):
        check_classes(generate_password())


def test_seeded_classes():
    generator = PasswordGenerator(random.Random(1234))
    for _ in range(500):
        check_classes(generator.generate())


def test_seeded_is_reproducible():
    first = PasswordGenerator(random.Random(42)).generate()
    second = generate_password(random.Random(42))
    assert first == second


def test_alphabet():
    allowed = set(string.ascii_letters + string.digits + GENERATOR_SYMBOLS)
    for _ in range(100):
        assert set(generate_password()) <= allowed


def test_forced_characters_are_shuffled():
    generator = PasswordGenerator(random.Random(7))
    first = {generator.generate()[0] for _ in range(200)}
    assert not first <= set(string.ascii_lowercase)


def test_default_source():
    assert isinstance(PasswordGenerator().rng, random.SystemRandom)
