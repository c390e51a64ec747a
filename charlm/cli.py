"""
Command-line entry point: train on a corpus file and print generated text.

    charlm 7 "Now is the" 500 fixed corpus.txt
"""

import argparse
import sys

from charlm.config import settings
from charlm.services.language_model import LanguageModel
from charlm.utils.logger import log_error


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate text with a character-level Markov model")

    parser.add_argument("window_length", type=int, help="Number of preceding characters used as context")
    parser.add_argument("initial_text", help="Text to start generating from")
    parser.add_argument("text_length", type=int, help="Total length of the generated text")
    parser.add_argument("mode", choices=["fixed", "random"],
                        help="fixed = reproducible output, random = different output on every run")
    parser.add_argument("corpus", help="Path to the training text")

    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed used in fixed mode (defaults to RANDOM_SEED setting)")
    parser.add_argument("--encoding", default=settings.CORPUS_ENCODING, help="Corpus file encoding")
    parser.add_argument("--dump", action="store_true", help="Print the trained model before the text")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.window_length < 1:
        print("Error: window_length must be at least 1", file=sys.stderr)
        return 2
    if args.text_length < 0:
        print("Error: text_length must be non-negative", file=sys.stderr)
        return 2

    seed = None
    if args.mode == "fixed":
        seed = args.seed if args.seed is not None else settings.RANDOM_SEED

    model = LanguageModel(args.window_length, seed=seed)
    try:
        model.train_file(args.corpus, encoding=args.encoding)
    except FileNotFoundError:
        log_error("Corpus file not found", path=args.corpus)
        print(f"Error: corpus file '{args.corpus}' does not exist", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError, LookupError) as e:
        log_error("Failed to read corpus", path=args.corpus, reason=e)
        print(f"Error: cannot read corpus file '{args.corpus}': {e}", file=sys.stderr)
        return 1

    if args.dump:
        print(model, end="")
    print(model.generate(args.initial_text, args.text_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())
