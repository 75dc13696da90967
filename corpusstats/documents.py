# corpusstats/documents.py
"""
Loading plain-text documents from a directory.

Every file becomes one document, identified by its file name without
the extension. Files are read in sorted order so the document order
(and therefore the column order of the frequency table) is stable.
"""

import glob
import os
from typing import Iterator, List, NamedTuple, Tuple


# Label of the whole-corpus pseudo-document; no loaded document may use it
COMBINED = "combined"


class InputError(Exception):
    """The input directory, or a file inside it, cannot be read."""


class RawDocument(NamedTuple):
    doc_id: str
    text: str


class Document(NamedTuple):
    doc_id: str
    terms: Tuple[str, ...]


def list_document_paths(path: str, pattern: str = "*.txt") -> List[str]:
    """
    Sorted list of the files directly inside `path` matching `pattern`.
    Hidden files (names starting with a dot) are not matched, as with
    any glob pattern that does not start with a dot itself.
    """
    if not os.path.exists(path):
        raise InputError(f"Input directory not found: {path}")
    if not os.path.isdir(path):
        raise InputError(f"Input path is not a directory: {path}")
    if not os.access(path, os.R_OK | os.X_OK):
        raise InputError(f"Input directory is not readable: {path}")

    paths = glob.glob(os.path.join(glob.escape(path), pattern))
    return sorted(p for p in paths if os.path.isfile(p))


def doc_id_for(filepath: str) -> str:
    return os.path.splitext(os.path.basename(filepath))[0]


def read_document(filepath: str, encoding: str = "utf8") -> str:
    try:
        with open(filepath, "r", encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {filepath}: {e}") from e


def read_document_stream(filepath: str, encoding: str = "utf8") -> Iterator[str]:
    try:
        with open(filepath, "r", encoding=encoding) as f:
            for line in f:
                yield line
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {filepath}: {e}") from e


def load_documents(path: str, pattern: str = "*.txt", encoding: str = "utf8") -> List[RawDocument]:
    """
    Read every matching file of a directory into memory.

    Parameters
    ----------
    path : str
        Directory holding the documents. Missing or unreadable
        directories raise InputError; an empty one yields [].
    pattern : str
        Glob pattern for the files to pick up.

    Returns
    -------
    List[RawDocument]
        One (doc_id, text) pair per file, sorted by file name. The id is
        the file name without its extension, or the whole file name when
        that stem is taken or is the reserved "combined" label.
    """
    documents = []
    seen = set()
    for filepath in list_document_paths(path, pattern):
        doc_id = doc_id_for(filepath)
        if doc_id in seen or doc_id == COMBINED:
            # here, we are falling back to the full file name (unique in a directory)
            doc_id = os.path.basename(filepath)
        if doc_id in seen:
            raise InputError(f"Duplicate document id {doc_id!r} ({filepath})")
        seen.add(doc_id)
        documents.append(RawDocument(doc_id, read_document(filepath, encoding)))
    return documents
