# corpusstats/pipeline.py
# Loader → Normalizer → FrequencyTable → statistics, in one call.

from typing import Callable, Iterable, List, Optional

import pandas as pd

from .documents import Document, RawDocument, load_documents
from .frequency import FrequencyTable, build_frequency_table
from .stats import complexity_records, corpus_summary
from .tokenizer import Normalizer

NormalizeFn = Callable[[str], Iterable[str]]


class CorpusAnalysis:
    def __init__(self, documents: List[Document], table: FrequencyTable):
        self.documents = documents
        self.table = table
        self.summary: pd.DataFrame = corpus_summary(table)
        self.records: pd.DataFrame = complexity_records(table)

    def doc_ids(self) -> List[str]:
        return [d.doc_id for d in self.documents]


def normalize_documents(raw_documents: Iterable[RawDocument], normalize: NormalizeFn) -> List[Document]:
    return [Document(raw.doc_id, tuple(normalize(raw.text))) for raw in raw_documents]


def analyze_corpus(path: str, normalizer: Optional[NormalizeFn] = None, pattern: str = "*.txt") -> CorpusAnalysis:
    """
    Load every document of `path`, normalize it and compute the corpus tables.

    `normalizer` is any callable mapping a text to its terms; a default
    Normalizer (nltk english stopwords, Porter stemming) is used when omitted.
    """
    normalize = normalizer or Normalizer()
    documents = normalize_documents(load_documents(path, pattern), normalize)
    return CorpusAnalysis(documents, build_frequency_table(documents))
