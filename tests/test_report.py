# ======================================================
# tests/test_report.py
# ======================================================
# Here, we are testing the reporting helpers to ensure:
#   - the metric table has (document, metric, value) rows
#   - the word cloud keeps terms at or above the mean frequency
#   - charts and word clouds are written as image files
# ======================================================

import os
import shutil
import tempfile
import unittest

from corpusstats.documents import Document
from corpusstats.frequency import COMBINED, build_frequency_table
from corpusstats.report import (
    metrics_table,
    plot_metrics,
    plot_top_terms,
    render_word_cloud,
    word_cloud_frequencies,
)
from corpusstats.stats import complexity_records, top_frequent


class TestReport(unittest.TestCase):

    def setUp(self):
        self.table = build_frequency_table([
            Document("A", ("cat", "dog", "cat")),
            Document("B", ("dog", "dog", "fish")),
        ])
        self.tmp = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmp)

    def test_metrics_table(self):
        metrics = metrics_table(complexity_records(self.table))
        self.assertEqual(list(metrics.columns), ["document", "metric", "value"])
        self.assertEqual(len(metrics), 6)
        self.assertEqual(set(metrics["metric"]), {"ttr", "hapax"})
        value = metrics[(metrics["document"] == COMBINED) & (metrics["metric"] == "hapax")]["value"].iloc[0]
        self.assertAlmostEqual(value, 1 / 6)

    def test_word_cloud_frequencies(self):
        # here, we are checking the mean filter: mean of (2, 3, 1) is 2
        self.assertEqual(word_cloud_frequencies(self.table), [("dog", 3), ("cat", 2)])
        self.assertEqual(word_cloud_frequencies(build_frequency_table([])), [])

    def test_plot_metrics(self):
        path = os.path.join(self.tmp, "complexity.png")
        plot_metrics(metrics_table(complexity_records(self.table)), path)
        self.assertGreater(os.path.getsize(path), 0)

    def test_plot_metrics_empty(self):
        metrics = metrics_table(complexity_records(build_frequency_table([])))
        with self.assertRaises(ValueError):
            plot_metrics(metrics, os.path.join(self.tmp, "x.png"))

    def test_plot_top_terms(self):
        path = os.path.join(self.tmp, "top.png")
        plot_top_terms(top_frequent(self.table, COMBINED, 3), path)
        self.assertGreater(os.path.getsize(path), 0)

    def test_render_word_cloud(self):
        path = os.path.join(self.tmp, "cloud.png")
        render_word_cloud(word_cloud_frequencies(self.table), path, width=200, height=100)
        self.assertGreater(os.path.getsize(path), 0)
        with self.assertRaises(ValueError):
            render_word_cloud({}, os.path.join(self.tmp, "empty.png"))


if __name__ == "__main__":
    unittest.main()
