"""
spaCy-based tokenization and part-of-speech tagging.

Produces the tokenized view used for anchor matching: every non-whitespace
token with its character span in the original text, plus the noun and verb
phrases found in the same text.
"""
from __future__ import annotations

import threading
from typing import Optional, Set

import spacy

from ..config import Config
from ..logger import get_logger
from ..models import RawToken, TaggedText

logger = get_logger(__name__)

NOUN_POS = frozenset({"NOUN", "PROPN"})
VERB_POS = frozenset({"VERB", "AUX"})

_nlp = None
_nlp_lock = threading.Lock()


def load_model(name: Optional[str] = None):
    """
    Load the spaCy pipeline once per process.

    Downloads the model on first use if it is not installed.
    """
    global _nlp

    if _nlp is not None:
        return _nlp

    name = name or Config.SPACY_MODEL
    with _nlp_lock:
        if _nlp is None:
            try:
                _nlp = spacy.load(name, disable=["ner"])
                logger.debug("spaCy model %s loaded", name)
            except OSError:
                logger.warning("spaCy model %s not found, attempting to download...", name)
                from spacy.cli import download
                download(name)
                _nlp = spacy.load(name, disable=["ner"])
    return _nlp


class SpacyTagger:
    """
    Tokenize text and collect noun/verb phrases with spaCy.

    Noun phrases are noun-chunk texts plus single noun tokens; verb phrases
    are single verb and auxiliary tokens. Instances are callable so they can
    be handed to the insertion engine as its ``tokenize_and_tag``.
    """

    def __init__(self, nlp=None) -> None:
        self._nlp = nlp

    @property
    def nlp(self):
        if self._nlp is None:
            self._nlp = load_model()
        return self._nlp

    def __call__(self, text: str) -> TaggedText:
        return self.tokenize_and_tag(text)

    def tokenize_and_tag(self, text: str) -> TaggedText:
        doc = self.nlp(text)

        tokens = [
            RawToken(value=tok.text, start=tok.idx, end=tok.idx + len(tok.text))
            for tok in doc
            if not tok.is_space
        ]

        noun_phrases: Set[str] = set()
        verb_phrases: Set[str] = set()

        for chunk in doc.noun_chunks:
            noun_phrases.add(chunk.text)

        for tok in doc:
            if tok.pos_ in NOUN_POS:
                noun_phrases.add(tok.text)
            elif tok.pos_ in VERB_POS:
                verb_phrases.add(tok.text)

        logger.debug(
            "Tagged %d tokens: %d noun phrases, %d verb phrases",
            len(tokens), len(noun_phrases), len(verb_phrases)
        )

        return TaggedText(tokens=tokens, noun_phrases=noun_phrases, verb_phrases=verb_phrases)


__all__ = ["SpacyTagger", "load_model"]
