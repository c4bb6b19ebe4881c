"""Run the reasoning engine locally over a few sample queries and print the results.

Usage:
  python scripts/run_sample_queries.py
  python scripts/run_sample_queries.py --corpus data/corpus.json --k 5 "what is cloud computing"
"""
import os
import sys
import json
import argparse

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from hybrid_reasoner.engine import ReasoningEngine, load_corpus  # noqa: E402

SAMPLE_QUERIES = [
    "neural networks and deep learning",
    "machine learning",
    "cloud computing resources",
    "what is quantum computing",
    "blockchain",
]


def main():
    ap = argparse.ArgumentParser(description="Run sample queries through the hybrid reasoning engine")
    ap.add_argument("queries", nargs="*", help="Queries to run (defaults to the built-in samples)")
    ap.add_argument("--corpus", default=None, help="Corpus file (.json list or one document per line)")
    ap.add_argument("--k", type=int, default=3, help="Hits per ranker")
    args = ap.parse_args()

    documents = load_corpus(args.corpus) if args.corpus else None
    engine = ReasoningEngine(documents=documents, top_k=args.k)

    print("=" * 80)
    print("HYBRID REASONING SAMPLE QUERIES")
    print("=" * 80)
    for query in args.queries or SAMPLE_QUERIES:
        result = engine.reason(query)
        print(f"\nQuery: \"{query}\"")
        print("-" * 80)
        print(json.dumps(result.to_dict(), indent=2))
    print("\n" + "=" * 80)
    print("DONE")
    print("=" * 80)


if __name__ == "__main__":
    main()
