# src/grapheme_porter/demo.py
import argparse
import json
import logging
import sys
from collections import Counter

DEFAULT_TEXT = (
    "Almost forty years later, these fair information practices have become the standard "
    "for privacy protection around the world. And yet, over that same time period, we have "
    "seen an exponential growth in the use of surveillance technologies, and our daily "
    "interactions are now routinely captured, recorded, and manipulated by small and large "
    "institutions alike."
)


def main(argv=None):
    """CLI demo: tokenize text, stem every word, print the original and stemmed text."""
    from .stemmer import graphemes
    from .token import load_settings, stem_token, tokenize
    from .utils.log import debug as debug_log

    parser = argparse.ArgumentParser(
        prog="porter-demo",
        description="Stem every word of a text with the grapheme-aware Porter stemmer.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to stem (default: a short paragraph about privacy)",
    )
    parser.add_argument("--json", action="store_true", help="Print per-token stems and counts as JSON")
    parser.add_argument("--graphemes", action="store_true", help="Include grapheme clusters in JSON output")
    parser.add_argument("--debug", action="store_true", help="Log every rule that fires")

    args = parser.parse_args(argv)
    text = " ".join(args.text) or DEFAULT_TEXT

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        settings = load_settings()
        tokens = tokenize(text, settings)
        stems = [stem_token(t, settings, debug=args.debug) for t in tokens]
        debug_log(f"{len(tokens)} tokens → {len(set(stems))} distinct stems", topic="cli")
        if args.json:
            rows = []
            for tok, st in zip(tokens, stems):
                row = {"token": tok, "stem": st}
                if args.graphemes:
                    row["graphemes"] = list(graphemes(tok))
                rows.append(row)
            result = {"tokens": rows, "counts": dict(Counter(stems))}
            print(json.dumps(result, indent=2, ensure_ascii=False))
        else:
            print(f"Original:\n{text}")
            print(f"Stemmed:\n{' '.join(stems)}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
