# ======================================================
# tests/test_documents.py
# ======================================================
# Here, we are testing document loading to ensure:
#   - every .txt file becomes one document, in file name order
#   - missing or invalid directories raise InputError
#   - an empty directory is not an error
# ======================================================

import os
import shutil
import tempfile
import unittest

from corpusstats.documents import (
    InputError,
    RawDocument,
    list_document_paths,
    load_documents,
    read_document_stream,
)


class TestLoadDocuments(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmp)

    def write(self, name, text, encoding="utf8"):
        path = os.path.join(self.tmp, name)
        with open(path, "w", encoding=encoding) as f:
            f.write(text)
        return path

    def test_loads_sorted_by_name(self):
        self.write("b_second.txt", "dog dog fish")
        self.write("a_first.txt", "cat dog cat")
        self.write("notes.md", "ignored")
        os.mkdir(os.path.join(self.tmp, "sub.txt"))

        docs = load_documents(self.tmp)
        self.assertEqual(docs, [
            RawDocument("a_first", "cat dog cat"),
            RawDocument("b_second", "dog dog fish"),
        ])

    def test_pattern(self):
        self.write("a.txt", "x")
        self.write("b.md", "y")
        docs = load_documents(self.tmp, pattern="*.md")
        self.assertEqual([d.doc_id for d in docs], ["b"])

    def test_empty_directory(self):
        self.assertEqual(load_documents(self.tmp), [])

    def test_missing_directory(self):
        with self.assertRaises(InputError):
            load_documents(os.path.join(self.tmp, "nope"))

    def test_file_instead_of_directory(self):
        path = self.write("a.txt", "cat")
        with self.assertRaises(InputError):
            list_document_paths(path)

    def test_undecodable_file(self):
        with open(os.path.join(self.tmp, "bad.txt"), "wb") as f:
            f.write(b"\xff\xfe\xfa caf\xe9")
        with self.assertRaises(InputError):
            load_documents(self.tmp)

    def test_duplicate_stems_use_file_name(self):
        self.write("a.txt", "x")
        self.write("a.md", "y")
        docs = load_documents(self.tmp, pattern="a.*")
        self.assertEqual(docs, [RawDocument("a", "y"), RawDocument("a.txt", "x")])

    def test_combined_file_name(self):
        # here, we are checking that a file called combined.txt is still a normal document
        self.write("combined.txt", "cat dog")
        self.write("other.txt", "dog")
        docs = load_documents(self.tmp)
        self.assertEqual([d.doc_id for d in docs], ["combined.txt", "other"])
        self.assertEqual(docs[0].text, "cat dog")

    def test_hidden_files_skipped(self):
        self.write(".notes.txt", "hidden")
        self.write("visible.txt", "shown")
        self.assertEqual([d.doc_id for d in load_documents(self.tmp)], ["visible"])
        self.assertEqual([d.doc_id for d in load_documents(self.tmp, pattern=".*.txt")], [".notes"])

    def test_read_document_stream(self):
        path = self.write("a.txt", "first line\nsecond line\n")
        self.assertEqual(list(read_document_stream(path)), ["first line\n", "second line\n"])


if __name__ == "__main__":
    unittest.main()
