"""Static word lists and character classes shared by the analyzer and generator."""

import string

# --- Known weak / breached passwords ---
WEAK_PASSWORDS = (
    "password", "123456", "123456789", "qwerty", "abc123", "password123",
    "admin", "letmein", "welcome", "monkey", "1234567890", "dragon",
    "master", "hello", "login", "pass", "admin123", "root", "user",
    "test", "guest", "info", "administrator", "demo", "sample",
)

# --- Common English words (entries of 2 letters never match, see MIN_WORD_LENGTH) ---
COMMON_WORDS = (
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
    "how", "man", "new", "now", "old", "see", "two", "way", "who", "boy",
    "did", "its", "let", "put", "say", "she", "too", "use", "love", "time",
    "work", "life", "home", "good", "make", "come", "know", "take", "year",
    "look", "first", "never", "after", "back", "other", "many", "than",
    "then", "them", "these", "so", "some", "her", "would", "make", "like",
    "into", "him", "has", "two", "more", "very", "what", "know", "just",
    "first", "also", "after", "back", "other", "many", "than", "then",
)

# weak passwords first, then common words; duplicates dropped, order kept
DICTIONARY = tuple(dict.fromkeys(WEAK_PASSWORDS + COMMON_WORDS))

# only dictionary entries longer than this are matched
MIN_WORD_LENGTH = 2

# --- Characters recognised as symbols by the analyzer ---
SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~`"

# --- Character classes used by the generator ---
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
GENERATOR_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
