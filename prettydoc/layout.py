from .doc import (
    Concat,
    FlatChoice,
    ForcedBreak,
    Line,
    Nest,
    Nil,
    Text,
)
from .sdoc import (
    SNIL,
    SLine,
    SText,
)


def fits(width, sdocs):
    """Returns True if the output in ``sdocs`` up to the first line
    break fits in ``width`` characters."""
    for sdoc in sdocs:
        if width < 0:
            return False
        if isinstance(sdoc, SText):
            width -= len(sdoc.value)
        else:
            # A line break resets the width.
            return True
    return width >= 0


def best(width, doc, pull):
    """Resolves ``doc`` for a page ``width`` characters wide, yielding
    SDocs in output order. Every yielded SDoc reads its successor with
    ``pull``.

    The work list is a linked list of ``(indent, doc, rest)`` triples
    terminated by ``None``. It is never mutated, so a ``FlatChoice`` can
    keep its broken alternative around at no cost while the flat one
    is tried.

    A tried ``FlatChoice`` stays pending until the output reaches a line
    break or the end, where it is known to fit. Its output is held back
    meanwhile. If the line overflows first, the most recent pending
    choice is rolled back and laid out broken."""
    worklist = (0, doc, None)
    column = 0
    # (column, broken worklist, len(tentative)) per pending choice.
    pending = []
    tentative = []

    while worklist is not None:
        indent, doc, rest = worklist

        if isinstance(doc, (Nil, ForcedBreak)):
            worklist = rest
        elif isinstance(doc, Concat):
            worklist = (indent, doc.left, (indent, doc.right, rest))
        elif isinstance(doc, Nest):
            if doc.indent is None:
                next_indent = column
            else:
                next_indent = indent + doc.indent
            worklist = (next_indent, doc.doc, rest)
        elif isinstance(doc, Text):
            sdoc = SText(doc.value, pull)
            if not pending:
                yield sdoc
            elif fits(width - column, (sdoc, )):
                tentative.append(sdoc)
            else:
                column, worklist, start = pending.pop()
                del tentative[start:]
                continue
            column += len(doc.value)
            worklist = rest
        elif isinstance(doc, Line):
            committed, tentative = tentative, []
            pending.clear()
            yield from committed
            yield SLine(indent, pull)
            column = indent
            worklist = rest
        elif isinstance(doc, FlatChoice):
            broken = (indent, doc.when_broken, rest)
            if column > width:
                worklist = broken
            else:
                pending.append((column, broken, len(tentative)))
                worklist = (indent, doc.when_flat, rest)
        else:
            raise TypeError(
                f"Got {repr(doc)} of type {type(doc).__name__}, "
                "expected 'Doc'"
            )

    yield from tentative


def layout(doc, width):
    """Lays out ``doc`` for a page ``width`` characters wide.
    Returns the first SDoc of the resulting stream."""
    def pull():
        return next(sdocs, SNIL)

    sdocs = best(width, doc, pull)
    return pull()
