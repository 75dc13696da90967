# corpusstats/stats.py
# here, we are computing frequency and lexical-diversity statistics over a FrequencyTable.

from typing import List, Mapping, Set, Tuple, Union

import numpy as np
import pandas as pd

from .frequency import COMBINED, FrequencyTable

Counts = Union[pd.Series, Mapping[str, int]]


def _as_series(counts: Counts) -> pd.Series:
    if isinstance(counts, pd.Series):
        return counts
    return pd.Series(dict(counts), dtype="int64")


def _ranked(counts: pd.Series) -> List[Tuple[str, int]]:
    # descending by count, ties broken by ascending term
    pairs = [(term, int(c)) for term, c in counts.items()]
    pairs.sort(key=lambda x: (-x[1], x[0]))
    return pairs


def top_frequent(table: FrequencyTable, doc_id: str, n: int) -> List[Tuple[str, int]]:
    """
    The n most frequent terms of a document as (term, count) pairs.

    Terms with a zero count are never returned, so the result is shorter
    than n when the document has fewer distinct terms.
    """
    if n < 0:
        raise ValueError("n must be non-negative.")
    counts = table.counts(doc_id)
    return _ranked(counts[counts > 0])[:n]


def terms_above_threshold(table: FrequencyTable, threshold: int) -> Set[str]:
    # here, we are keeping terms whose whole-corpus count is strictly above the threshold
    combined = table.combined()
    return set(combined[combined > threshold].index)


def frequent_terms(table: FrequencyTable, min_count: int) -> List[Tuple[str, int]]:
    """
    Whole-corpus (term, count) pairs with count >= min_count, most frequent first.
    """
    combined = table.combined()
    return _ranked(combined[combined >= min_count])


def total_tokens(counts: Counts) -> int:
    return int(_as_series(counts).sum())


def unique_terms(counts: Counts) -> int:
    return int((_as_series(counts) > 0).sum())


def type_token_ratio(counts: Counts) -> float:
    """
    Distinct terms / total term occurrences of one document, 0 for an empty one.
    """
    total = total_tokens(counts)
    if total == 0:
        return 0.0
    return unique_terms(counts) / float(total)


def hapax_ratio(counts: Counts) -> float:
    """
    Terms occurring exactly once / total term occurrences, 0 for an empty document.
    Evaluated on the counts given: for the combined document a term seen
    once in each of two documents counts 2 and is not a hapax.
    """
    series = _as_series(counts)
    total = total_tokens(series)
    if total == 0:
        return 0.0
    return int((series == 1).sum()) / float(total)


def _documents(table: FrequencyTable) -> List[str]:
    # Every real document followed by the combined pseudo-document.
    # An empty corpus has no rows at all.
    doc_ids = table.doc_ids()
    return doc_ids + [COMBINED] if doc_ids else []


def corpus_summary(table: FrequencyTable) -> pd.DataFrame:
    rows = []
    for doc_id in _documents(table):
        counts = table.counts(doc_id)
        rows.append((doc_id, total_tokens(counts), unique_terms(counts)))
    return pd.DataFrame(rows, columns=["document", "tokens", "unique_terms"])


def complexity_records(table: FrequencyTable) -> pd.DataFrame:
    """
    One row per document (plus "combined") with its type-token ratio and hapax ratio.
    """
    rows = []
    for doc_id in _documents(table):
        counts = table.counts(doc_id)
        rows.append((doc_id, type_token_ratio(counts), hapax_ratio(counts)))
    return pd.DataFrame(rows, columns=["document", "ttr", "hapax"])


def find_associations(table: FrequencyTable, term: str, min_corr: float) -> List[Tuple[str, float]]:
    """
    Terms whose counts across documents correlate with `term`.

    Parameters
    ----------
    table : FrequencyTable
    term : str
        Must be in the vocabulary, otherwise KeyError.
    min_corr : float
        Lower bound on the Pearson correlation (inclusive).

    Returns
    -------
    List[Tuple[str, float]]
        (term, correlation rounded to 2 decimals), strongest first.
        Terms with an undefined correlation are left out.
    """
    matrix = table.to_frame(include_combined=False).astype(float)
    if term not in matrix.index:
        raise KeyError(term)
    if len(matrix.columns) < 2:
        return []

    target = matrix.loc[term].to_numpy()
    others = matrix.drop(index=term)

    # Pearson correlation of every row against the target row
    x = others.to_numpy() - others.to_numpy().mean(axis=1, keepdims=True)
    y = target - target.mean()
    with np.errstate(divide="ignore", invalid="ignore"):
        corr = (x @ y) / (np.sqrt((x * x).sum(axis=1)) * np.sqrt((y * y).sum()))

    out = []
    for other, r in zip(others.index, corr):
        if np.isnan(r):
            continue
        r = round(float(r), 2)
        if r >= min_corr:
            out.append((other, r))
    out.sort(key=lambda x: (-x[1], x[0]))
    return out
