# corpusstats/tokenizer.py
"""
Normalizer module.

Using nltk, raw document text is cleaned, stemmed and reduced to
the list of terms that the frequency table counts.

The cleaning steps always run in the same order, so two documents
with the same text always produce the same terms.
"""

import os, re, nltk
from typing import Iterable, Iterator, List, Optional
from nltk.corpus import stopwords
from nltk.stem.porter import PorterStemmer

from .documents import Document, RawDocument


class Normalizer:
    """
    The Normalizer class.

    Here we are defining a clean and reusable text normalizer object.

    Responsibilities:
      - Case-fold text.
      - Strip punctuation and digits.
      - Collapse whitespace.
      - Optionally stem words (reduce to root form).
      - Remove stopwords.

    Any callable taking a string and returning terms can stand in for a
    Normalizer in the pipeline; instances are callable for that reason.

    Parameters:
        custom_stopwords : Optional[Iterable[str]]
            A custom list of stopwords (if provided, overrides defaults).
        use_stemmer : bool
            Whether to apply stemming using Porter Stemmer.
        language : str
            Which nltk stopword list to load when no custom list is given.
    """
    def __init__(self, custom_stopwords: Optional[Iterable[str]] = None, use_stemmer: bool = True,
                 language: str = "english", nltk_dir="nltk_data", nltk_download: bool = True):

        # nltk stopwords
        if nltk_dir not in nltk.data.path:
            nltk.data.path.append(nltk_dir)
        if nltk_download and custom_stopwords is None:
            os.makedirs(nltk_dir, exist_ok=True)
            nltk.download("stopwords", download_dir=nltk_dir, quiet=True)
        self.nltk_dir = nltk_dir
        self.stopwords = set(custom_stopwords) if custom_stopwords is not None else set(stopwords.words(language))

        # Anything that is not a letter, digit or whitespace.
        # \w also matches underscores, which count as punctuation here.
        self._punct_re = re.compile(r"[^\w\s]|_", flags=re.UNICODE)
        self._digit_re = re.compile(r"\d+", flags=re.UNICODE)

        # Enable or disable stemming functionality
        self.use_stemmer = use_stemmer
        if self.use_stemmer:
            self.stemmer = PorterStemmer()

    def normalize(self, text: str) -> List[str]:
        """
        Normalize an input string into terms.

        Here we are performing the full normalization pipeline step-by-step:
          1. Convert text to lowercase (for case-insensitivity)
          2. Delete punctuation
          3. Delete digits
          4. Collapse whitespace
          5. Apply stemming if requested (repeated until the stem is stable)
          6. Drop stopwords (checked against the word and its stem)

        Parameters
        ----------
        text : str
            The raw document text.

        Returns
        -------
        List[str]
            The term occurrences of the document, in reading order.
        """
        if text is None:
            return []

        text = text.lower()
        text = self._punct_re.sub("", text)
        text = self._digit_re.sub("", text)

        terms = []
        for word in text.split():
            term = self._stem(word) if self.use_stemmer else word

            if word in self.stopwords or term in self.stopwords:
                continue

            terms.append(term)

        return terms

    def _stem(self, word: str) -> str:
        # Porter is not idempotent (agreed -> agre -> agr); stem until the
        # term no longer changes so normalized text normalizes to itself
        seen = {word}
        term = self.stemmer.stem(word)
        while term not in seen:
            seen.add(term)
            term = self.stemmer.stem(term)
        return term

    def __call__(self, text: str) -> List[str]:
        return self.normalize(text)

    def clean(self, text: str) -> str:
        """
        Normalized text as a single space separated string.
        """
        return " ".join(self.normalize(text))

    def normalize_document(self, raw: RawDocument) -> Document:
        return Document(raw.doc_id, tuple(self.normalize(raw.text)))

    def term_stream(self, stream: Iterable[str]) -> Iterator[str]:
        """
        Normalize, but with i/o stream (one line at a time)
        """
        for text in stream:
            for term in self.normalize(text):
                yield term
