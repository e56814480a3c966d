from .doc import (
    Doc,
    FlatChoice,
    Nest,
    Text,
    NIL,
    SOFTLINE,
    SOFTBREAK,
    HARDLINE,
    cast_doc,
    flatten,
)


def text(x):
    """Returns a Doc for the literal ``x``. Raises ``ValueError`` if
    ``x`` contains a line break."""
    return Text(x)


def nest(i, doc):
    """Indents line breaks in ``doc`` by ``i`` more columns than the
    current indentation."""
    if not isinstance(i, int):
        raise TypeError(
            f"Got {repr(i)} of type {type(i).__name__}, expected 'int'"
        )
    return Nest(i, cast_doc(doc))


def align(doc):
    """Aligns each new line in ``doc`` with the column where ``doc``
    starts."""
    return Nest(None, cast_doc(doc))


def hang(i, doc):
    return align(nest(i, doc))


def group(doc):
    """Annotates doc with special meaning to the layout algorithm, so that the
    document is attempted to output on a single line if it is possible within
    the layout constraints. If ``doc`` contains a hard line break it can
    never be flat, and it is returned unchanged."""
    doc = cast_doc(doc)
    flat = flatten(doc)
    if flat is None:
        return doc
    return FlatChoice(flat, doc)


def fold(docs, fn):
    """Right-associative reduction of ``docs`` with the binary function
    ``fn``. Returns ``NIL`` for no docs."""
    docs = [cast_doc(doc) for doc in docs]
    if not docs:
        return NIL

    res = docs[-1]
    for doc in reversed(docs[:-1]):
        res = fn(doc, res)
    return res


def concat(docs):
    """Returns a concatenation of the documents in the iterable argument"""
    return fold(docs, Doc.__add__)


def hsep(docs):
    return fold(docs, Doc.__and__)


def vsep(docs):
    return fold(docs, Doc.__truediv__)


def stack(*docs):
    """Joins ``docs`` with hard line breaks."""
    return fold(docs, Doc.__or__)


def text_block(lines):
    """Joins literal ``lines`` with hard line breaks, aligned to the
    column where the block starts. Used for multiline strings and
    comments, which must keep their line breaks at any width."""
    return align(stack(*(text(line) for line in lines)))


def spread(docs, sep=None):
    """Joins ``docs`` with ``sep`` on a single line if that fits,
    otherwise puts every doc on its own line. ``sep`` defaults to a
    comma followed by a line break."""
    if sep is None:
        sep = ',' + SOFTLINE
    sep = cast_doc(sep)
    return group(fold(docs, lambda x, y: x + sep + y))


def binary(x, op, y, indent=0):
    """Lays out a binary operation, moving ``y`` to a new line
    indented by ``indent`` if the expression doesn't fit."""
    return group(
        cast_doc(x) & cast_doc(op) + nest(indent, SOFTLINE + cast_doc(y))
    )


def bracket(left, doc, right, indent=2, tight=True):
    """Encloses ``doc`` in ``left`` and ``right``. When broken, ``doc``
    goes on its own lines indented by ``indent``. When flat, a ``tight``
    bracket hugs ``doc``, otherwise it is padded with spaces."""
    nl = SOFTBREAK if tight else SOFTLINE
    return group(
        cast_doc(left) + nest(indent, nl + cast_doc(doc)) + nl + cast_doc(right)
    )
