# ======================================================
# run_demo.py
# ======================================================
import argparse
import os
import sys

from corpusstats.documents import InputError, list_document_paths
from corpusstats.frequency import COMBINED
from corpusstats.pipeline import analyze_corpus
from corpusstats.report import (
    metrics_table,
    plot_metrics,
    plot_top_terms,
    render_word_cloud,
    word_cloud_frequencies,
)
from corpusstats.stats import terms_above_threshold, top_frequent
from corpusstats.tokenizer import Normalizer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Term frequencies and lexical statistics for a folder of text files."
    )
    parser.add_argument("input_dir", help="Directory holding the .txt documents")
    parser.add_argument("--threshold", type=int, default=2,
                        help="List terms whose corpus count is above this value (default: 2)")
    parser.add_argument("--top", type=int, default=10,
                        help="Number of most frequent terms to list per document (default: 10)")
    parser.add_argument("--output", default="report", help="Where tables and figures are written")
    parser.add_argument("--pattern", default="*.txt", help="File pattern inside the input directory")
    parser.add_argument("--language", default="english", help="nltk stopword list")
    parser.add_argument("--no-stem", action="store_true", help="Disable Porter stemming")
    parser.add_argument("--nltk-dir", default="nltk_data", help="Where nltk data is downloaded")
    return parser.parse_args(argv)


def build_report(args):
    print("=== Loading and normalizing documents ===")
    # fail on a bad input directory before any nltk download
    list_document_paths(args.input_dir, args.pattern)
    normalizer = Normalizer(use_stemmer=not args.no_stem, language=args.language, nltk_dir=args.nltk_dir)
    analysis = analyze_corpus(args.input_dir, normalizer, pattern=args.pattern)
    table = analysis.table

    # If no documents are found, warn the user.
    if not analysis.documents:
        print(f"No documents found in {args.input_dir}.")
        return analysis

    print(f"Loaded {len(analysis.documents)} documents.")
    print(f"Vocabulary size: {len(table)} unique terms.")

    print("=== Corpus summary ===")
    print(analysis.summary.to_string(index=False))

    for doc_id in analysis.doc_ids() + [COMBINED]:
        print(f"=== Top {args.top} terms: {doc_id} ===")
        for term, count in top_frequent(table, doc_id, args.top):
            print(f"{term}\t{count}")

    print(f"=== Terms with corpus count above {args.threshold} ===")
    print(", ".join(sorted(terms_above_threshold(table, args.threshold))) or "(none)")

    print("=== Lexical complexity ===")
    print(analysis.records.to_string(index=False, float_format=lambda v: f"{v:.4f}"))

    os.makedirs(args.output, exist_ok=True)
    table.to_frame().to_csv(os.path.join(args.output, "frequency_table.csv"))
    analysis.records.to_csv(os.path.join(args.output, "complexity.csv"), index=False)

    figures = [plot_metrics(metrics_table(analysis.records), os.path.join(args.output, "complexity.png"))]
    top_terms = top_frequent(table, COMBINED, args.top)
    if top_terms:
        figures.append(plot_top_terms(top_terms, os.path.join(args.output, "top_terms.png")))
    cloud = word_cloud_frequencies(table)
    if cloud:
        figures.append(render_word_cloud(cloud, os.path.join(args.output, "wordcloud.png")))

    print(f"Tables and figures written to {args.output}/")
    for path in figures:
        print(f"  {path}")
    return analysis


def main(argv=None):
    args = parse_args(argv)
    try:
        build_report(args)
    except InputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
