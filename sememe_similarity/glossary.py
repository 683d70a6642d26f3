"""
glossary.py - Glossary Line Parser and Loader
==============================================

Each glossary line describes one sense of one word:

    WORD  POS  SPEC

    北京 N place|地方,capital|国都,ProperName|专,(China|中国)
    吃 V eat|吃,patient=food|食品
    的 STRU {DeChinese|的}

SPEC is a comma-separated list of segments. A segment is ``token|gloss``
(the gloss is what gets stored; the token is used when there is no gloss)
or ``key=token|gloss`` for a relational primitive. Parenthesized segments
are literal words rather than sememes; the parentheses are dropped.

Segment classes, decided by the first character of the token:

    0 - sememe           first one -> first_primitive, rest -> other_primitives
    1 - relation symbol  one of  # % $ * + & @ ? !   (keyed by that symbol)
    2 - special          {       -> structural word

Once a ``key=`` or relation-symbol segment has been seen, the following
plain segments belong to that group until another group starts.

Whitespace in a line is normalized before splitting: the first two
fields are WORD and POS, the rest (re-joined by single spaces) is SPEC.
"""

import warnings
from typing import Iterator, Optional, Tuple

from .word import WordRecord
from .store import WordStore

__all__ = [
    'GlossaryParseError',
    'GlossaryLoadError',
    'RELATIONAL_SYMBOLS',
    'SPECIAL_SYMBOLS',
    'primitive_type',
    'parse_line',
    'parse_spec',
    'format_record',
    'iter_glossary',
    'load_glossary',
]

RELATIONAL_SYMBOLS = "#%$*+&@?!"
SPECIAL_SYMBOLS = "{"

PRIMITIVE = 0
RELATION_SYMBOL = 1
SPECIAL = 2


class GlossaryParseError(ValueError):
    """A glossary line that cannot be turned into a WordRecord."""


class GlossaryLoadError(OSError):
    """The glossary file could not be read."""


def primitive_type(token: str) -> int:
    """Classify a segment token: 0 sememe, 1 relation symbol, 2 special."""
    if not token:
        raise GlossaryParseError("empty segment")
    first = token[0]
    if first in RELATIONAL_SYMBOLS:
        return RELATION_SYMBOL
    if first in SPECIAL_SYMBOLS:
        return SPECIAL
    return PRIMITIVE


def _strip_closing(text: str) -> str:
    if text.endswith(')') or text.endswith('}'):
        return text[:-1]
    return text


def _split_segment(segment: str) -> Tuple[str, str]:
    token, _, gloss = segment.partition('|')
    return _strip_closing(token), _strip_closing(gloss)


def parse_spec(spec: str, record: WordRecord) -> WordRecord:
    """Parse the SPEC field of a glossary line into ``record``."""
    is_first = True
    # ("relational" | "symbol", key) that later plain segments attach to
    group: Optional[Tuple[str, str]] = None

    for segment in spec.split(','):
        if segment.startswith('('):
            segment = _strip_closing(segment[1:])
        if not segment:
            raise GlossaryParseError(f"empty segment in {spec!r}")

        if '=' in segment:
            key, _, value = segment.partition('=')
            token, gloss = _split_segment(value)
            if not key or not (gloss or token):
                raise GlossaryParseError(f"bad relational segment {segment!r}")
            group = ("relational", key)
            record.add_relational_primitive(key, gloss or token)
            continue

        token, gloss = _split_segment(segment)
        kind = primitive_type(token)

        if kind == PRIMITIVE:
            value = gloss or token
            if group is not None:
                group_kind, key = group
                if group_kind == "symbol":
                    record.add_relation_symbol_primitive(key, value)
                else:
                    record.add_relational_primitive(key, value)
            elif is_first:
                record.first_primitive = value
                is_first = False
            else:
                record.add_other_primitive(value)

        elif kind == RELATION_SYMBOL:
            symbol = token[0]
            value = gloss or token[1:]
            if not value:
                raise GlossaryParseError(f"relation symbol without value {segment!r}")
            group = ("symbol", symbol)
            record.add_relation_symbol_primitive(symbol, value)

        else:
            value = gloss or token[1:]
            if not value:
                raise GlossaryParseError(f"empty structural word {segment!r}")
            record.add_structural_word(value)

    return record


def parse_line(line: str) -> WordRecord:
    """
    Parse one glossary line.

    Raises:
        GlossaryParseError: If the line is malformed
    """
    fields = line.split()
    if len(fields) < 3:
        raise GlossaryParseError(f"expected 'WORD POS SPEC', got {len(fields)} field(s)")

    record = WordRecord(word=fields[0], pos=fields[1])
    parse_spec(" ".join(fields[2:]), record)
    try:
        record.validate()
    except ValueError as e:
        raise GlossaryParseError(str(e)) from e
    return record


def format_record(record: WordRecord) -> str:
    """
    Serialize a record back to glossary-line shape.

    Values are written without glosses, so ``parse_line`` reads each value
    back from its token.
    """
    segments = []
    if record.is_structural:
        segments.extend("{" + w + "}" for w in record.structural_words)
    else:
        if record.first_primitive is not None:
            segments.append(record.first_primitive)
        segments.extend(record.other_primitives)
        for key, values in record.relational_primitives.items():
            segments.append(f"{key}={values[0]}")
            segments.extend(values[1:])
        for symbol, values in record.relation_symbol_primitives.items():
            segments.append(f"{symbol}{values[0]}")
            segments.extend(values[1:])
    return f"{record.word} {record.pos} {','.join(segments)}"


# =============================================================================
# File loading
# =============================================================================

def iter_glossary(path: str) -> Iterator[WordRecord]:
    """
    Yield a WordRecord for every well-formed line of a glossary file.

    Malformed lines, including lines that are not valid UTF-8, are reported
    with ``warnings.warn`` and skipped.

    Raises:
        GlossaryLoadError: If the file cannot be opened or read
    """
    try:
        f = open(path, 'rb')
    except OSError as e:
        raise GlossaryLoadError(f"Cannot open glossary {path}: {e}") from e

    with f:
        try:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode('utf-8')
                except UnicodeDecodeError as e:
                    warnings.warn(f"Skipping glossary line {lineno}: {raw.rstrip()!r} ({e})")
                    continue
                if not line.strip():
                    continue
                try:
                    record = parse_line(line)
                except GlossaryParseError as e:
                    warnings.warn(f"Skipping glossary line {lineno}: {line.rstrip()!r} ({e})")
                    continue
                yield record
        except OSError as e:
            raise GlossaryLoadError(f"Error reading glossary {path}: {e}") from e


def load_glossary(
    path: str,
    store: WordStore = None,
    freeze: bool = True,
    verbose: bool = False
) -> WordStore:
    """
    Load a glossary file into a WordStore.

    Args:
        path: Glossary file (UTF-8)
        store: Store to insert into (a new one when None)
        freeze: Freeze the store once the file is read
        verbose: Print a load summary

    Returns:
        The populated store
    """
    if store is None:
        store = WordStore()

    n_before = store.n_senses
    for record in iter_glossary(path):
        store.insert(record)

    if freeze:
        store.freeze()

    if verbose:
        print(f"Loaded {store.n_senses - n_before} senses from {path} "
              f"({len(store)} words total)")
    return store
