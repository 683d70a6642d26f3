"""
cli.py - Command-line word similarity
======================================

Usage:
    sememe-sim 牛 猪
    sememe-sim 男人 女人 孩子 牛
    sememe-sim 中国 联合国 --glossary my_glossary.dat --hierarchy my_whole.dat

Two words print their similarity and the best sense pair; more words
print the pairwise similarity matrix.
"""

import argparse
import sys

from .core import SememeSimilarity
from .glossary import GlossaryLoadError


def format_matrix(words, matrix) -> str:
    width = max(6, max(len(w) for w in words) * 2)
    lines = [" " * width + "".join(f"{w:>{width}}" for w in words)]
    for w, row in zip(words, matrix):
        lines.append(f"{w:<{width}}" + "".join(f"{v:>{width}.4f}" for v in row))
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="sememe-sim",
        description="Sememe-based word similarity")
    parser.add_argument("words", nargs="+", help="Two or more words to compare")
    parser.add_argument("--glossary", type=str, default=None,
                        help="Glossary file (default: packaged sample)")
    parser.add_argument("--hierarchy", type=str, default=None,
                        help="Sememe hierarchy file (default: packaged sample)")
    args = parser.parse_args(argv)

    if len(args.words) < 2:
        parser.error("need at least two words")

    try:
        ss = SememeSimilarity.from_files(args.hierarchy, args.glossary)
    except (GlossaryLoadError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if len(args.words) == 2:
        word1, word2 = args.words
        print(f"sim({word1}, {word2}) = {ss.similarity_of_words(word1, word2):.4f}")
        comparison = ss.explain(word1, word2)
        if comparison is not None:
            print(comparison.report())
    else:
        print(format_matrix(args.words, ss.similarity_matrix(args.words)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
