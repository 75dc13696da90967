# corpusstats/report.py
"""
Reporting helpers.

The tabular shapes (metric triples, word cloud frequencies) are plain
pandas / python data; rendering is a thin layer over matplotlib and
wordcloud that writes PNG files.
"""

from typing import Iterable, List, Mapping, Tuple, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from wordcloud import WordCloud

from .frequency import FrequencyTable

Frequencies = Union[Mapping[str, int], Iterable[Tuple[str, int]]]


def metrics_table(records: pd.DataFrame) -> pd.DataFrame:
    """
    Long (document, metric, value) table from the complexity records.
    """
    value_vars = [c for c in records.columns if c != "document"]
    return records.melt(
        id_vars="document", value_vars=value_vars, var_name="metric", value_name="value"
    )


def word_cloud_frequencies(table: FrequencyTable) -> List[Tuple[str, int]]:
    """
    (term, frequency) pairs of the whole corpus at or above the mean term frequency.
    """
    combined = table.combined()
    if combined.empty:
        return []
    kept = combined[combined >= combined.mean()]
    pairs = [(term, int(c)) for term, c in kept.items()]
    pairs.sort(key=lambda x: (-x[1], x[0]))
    return pairs


def plot_metrics(metrics: pd.DataFrame, path: str, title: str = "Lexical complexity") -> str:
    """
    Grouped bar chart: one group per document, one bar per metric.
    """
    if metrics.empty:
        raise ValueError("No metrics to plot.")

    # keep the documents in the order they appear
    documents = list(pd.unique(metrics["document"]))
    metric_names = list(pd.unique(metrics["metric"]))
    wide = metrics.pivot(index="document", columns="metric", values="value")
    wide = wide.reindex(index=documents, columns=metric_names)

    x = np.arange(len(documents))
    width = 0.8 / len(metric_names)

    fig, ax = plt.subplots(figsize=(max(6, 1.5 * len(documents)), 4.5))
    for i, name in enumerate(metric_names):
        ax.bar(x + (i - (len(metric_names) - 1) / 2) * width, wide[name].to_numpy(), width, label=name)

    ax.set_xticks(x)
    ax.set_xticklabels(documents, rotation=30, ha="right")
    ax.set_ylabel("ratio")
    ax.set_title(title)
    ax.legend()
    plt.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_top_terms(pairs: List[Tuple[str, int]], path: str, title: str = "Most frequent terms") -> str:
    if not pairs:
        raise ValueError("No terms to plot.")

    terms = [t for t, _ in pairs]
    counts = [c for _, c in pairs]

    fig, ax = plt.subplots(figsize=(8, max(3, 0.35 * len(pairs))))
    # most frequent at the top
    ax.barh(terms[::-1], counts[::-1], color="#3498db")
    ax.set_xlabel("frequency")
    ax.set_title(title)
    plt.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path


def render_word_cloud(frequencies: Frequencies, path: str, width: int = 800, height: int = 400,
                      background_color: str = "white", random_state: int = 42) -> str:
    freqs = dict(frequencies)
    if not freqs:
        raise ValueError("Need at least one term to draw a word cloud.")

    cloud = WordCloud(
        width=width, height=height, background_color=background_color, random_state=random_state
    ).generate_from_frequencies(freqs)
    cloud.to_file(path)
    return path
