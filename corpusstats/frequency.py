# corpusstats/frequency.py
"""
Term-by-document frequency table.

Supports:
 - counting term occurrences per document (term → document → count)
 - a zero-filled pandas matrix over the union of all terms
 - the "combined" pseudo-document (per-term sum over all documents)
 - dropping sparse terms
"""

from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional

import pandas as pd

from .documents import COMBINED, Document


class FrequencyTable:
    def __init__(self):
        # doc_id → {term: count}, kept in insertion order (the column order)
        self._counts: Dict[str, Dict[str, int]] = {}

        # rows = terms (sorted), columns = documents
        self._matrix: Optional[pd.DataFrame] = None

        # Whether the matrix has to be rebuilt before reading
        self._needs_build = True

    # ---------------------------------------------------------
    # DOCUMENT COUNTING
    # ---------------------------------------------------------
    def add_document(self, doc_id: str, terms: Iterable[str]) -> None:
        """
        Count the terms of one document.
        """
        self.add_document_counts(doc_id, Counter(terms))

    def add_document_counts(self, doc_id: str, counts: Mapping[str, int]) -> None:
        if doc_id == COMBINED:
            raise ValueError(f"{COMBINED!r} is reserved for the whole-corpus column.")
        if doc_id in self._counts:
            raise ValueError(f"Document {doc_id} already exists.")

        self._counts[doc_id] = {t: int(c) for t, c in counts.items() if c > 0}
        self._needs_build = True

    # ---------------------------------------------------------
    # BUILD MATRIX
    # ---------------------------------------------------------
    def build(self) -> None:
        """
        Finalize the matrix: one row per distinct term across all documents,
        one column per document, absent terms counted as 0.
        """
        terms = sorted(set().union(*(c.keys() for c in self._counts.values())))

        data = {
            doc_id: [counts.get(t, 0) for t in terms]
            for doc_id, counts in self._counts.items()
        }
        self._matrix = pd.DataFrame(
            data,
            index=pd.Index(terms, name="term", dtype=object),
            columns=list(self._counts),
            dtype="int64",
        )
        self._needs_build = False

    @property
    def matrix(self) -> pd.DataFrame:
        if self._needs_build:
            self.build()
        return self._matrix

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "FrequencyTable":
        """
        Rebuild a table from a term-by-document count frame.
        A "combined" column, if present, is ignored and recomputed.
        """
        table = cls()
        for doc_id in frame.columns:
            if doc_id == COMBINED:
                continue
            column = frame[doc_id]
            table.add_document_counts(doc_id, column[column > 0].to_dict())
        table.build()
        return table

    # ---------------------------------------------------------
    # ACCESS HELPERS
    # ---------------------------------------------------------
    def doc_ids(self) -> List[str]:
        return list(self._counts)

    def vocab(self) -> List[str]:
        """
        here, we are returning the sorted list of all terms in the table.
        """
        return list(self.matrix.index)

    def counts(self, doc_id: str) -> pd.Series:
        """
        Term counts of one document (zero-filled over the whole vocabulary).
        `combined` returns the whole-corpus counts.
        """
        if doc_id == COMBINED:
            return self.combined()
        if doc_id not in self._counts:
            raise KeyError(doc_id)
        return self.matrix[doc_id]

    def combined(self) -> pd.Series:
        # here, we are summing every document column term by term
        return self.matrix.sum(axis=1).astype("int64").rename(COMBINED)

    def doc_lengths(self) -> pd.Series:
        """
        Total token count per document.
        """
        return self.matrix.sum(axis=0).astype("int64")

    def to_frame(self, include_combined: bool = True) -> pd.DataFrame:
        frame = self.matrix.copy()
        if include_combined:
            frame[COMBINED] = self.combined()
        return frame

    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        return len(self.matrix.index)

    # ---------------------------------------------------------
    # SPARSE TERMS
    # ---------------------------------------------------------
    def remove_sparse_terms(self, sparsity: float) -> "FrequencyTable":
        """
        New table without the terms that are missing from too many documents.

        A term is dropped when the share of documents in which its count
        is 0 exceeds `sparsity`, which must lie in [0, 1).
        """
        if not 0 <= sparsity < 1:
            raise ValueError("sparsity must be in [0, 1).")

        matrix = self.matrix
        n_docs = len(matrix.columns)
        if n_docs == 0:
            return FrequencyTable.from_frame(matrix)

        absent = (matrix == 0).sum(axis=1) / n_docs
        return FrequencyTable.from_frame(matrix[absent <= sparsity])


def build_frequency_table(documents: Iterable[Document]) -> FrequencyTable:
    table = FrequencyTable()
    for doc in documents:
        table.add_document(doc.doc_id, doc.terms)
    table.build()
    return table
