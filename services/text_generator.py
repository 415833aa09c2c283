# services/text_generator.py
from __future__ import annotations
import logging
import random
from typing import Optional, Sequence

from utils.file_handler import read_words

log = logging.getLogger(__name__)

DEFAULT_WORDS = (
    "the of and to in is you that it he was for on are as with his they at be "
    "this have from or one had by word but not what all were we when your can "
    "said there use an each which she do how their if will up other about out "
    "many then them these so some her would make like him into time has look "
    "two more write go see number no way could people my than first water been "
    "call who oil its now find long down day did get come made may part over "
    "new sound take only little work know place year live me back give most "
    "very after thing our just name good sentence man think say great where "
    "help through much before line right too mean old any same tell boy follow "
    "came want show also around form three small set put end does another well "
    "large must big even such because turn here why ask went men read need land "
    "different home us move try kind hand picture again change off play spell "
    "air away animal house point page letter mother answer found study still "
    "learn should world high every near add food between own below country plant"
).split()


class TextGenerator:
    def __init__(self, words: Optional[Sequence[str]] = None, rng: Optional[random.Random] = None):
        self.words = list(words) if words else list(DEFAULT_WORDS)
        self.rng = rng or random.Random()

    @classmethod
    def from_file(cls, path, rng: Optional[random.Random] = None) -> "TextGenerator":
        try:
            words = read_words(path)
        except OSError as e:
            log.warning("Failed to read word list %s: %s", path, e)
            words = []
        if not words:
            log.warning("Word list %s missing or empty, using built-in words", path)
        return cls(words, rng)

    def generate_text(self, size: int) -> str:
        """`size` random words joined by single spaces."""
        count = max(1, int(size))
        return " ".join(self.rng.choice(self.words) for _ in range(count))
