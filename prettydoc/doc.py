LINE_BREAK_CHARS = ('\n', '\r')


def cast_doc(doc):
    """Casts value to doc, if possible.

    ``None`` casts to ``NIL`` so optional parts of a layout can be
    passed straight through."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return NIL
        return Text(doc)
    elif doc is None:
        return NIL

    raise TypeError(
        f"Got {repr(doc)} of type {type(doc).__name__}, "
        "expected 'Doc' or 'str'"
    )


class Doc:
    __slots__ = ()

    def __add__(self, other):
        return Concat(self, cast_doc(other))

    def __radd__(self, other):
        return Concat(cast_doc(other), self)

    def __and__(self, other):
        return Concat(Concat(self, SPACE), cast_doc(other))

    def __rand__(self, other):
        return Concat(Concat(cast_doc(other), SPACE), self)

    def __truediv__(self, other):
        return Concat(Concat(self, SOFTLINE), cast_doc(other))

    def __rtruediv__(self, other):
        return Concat(Concat(cast_doc(other), SOFTLINE), self)

    def __floordiv__(self, other):
        return Concat(Concat(self, SOFTBREAK), cast_doc(other))

    def __rfloordiv__(self, other):
        return Concat(Concat(cast_doc(other), SOFTBREAK), self)

    def __or__(self, other):
        return Concat(Concat(self, HARDLINE), cast_doc(other))

    def __ror__(self, other):
        return Concat(Concat(cast_doc(other), HARDLINE), self)


class Nil(Doc):
    __slots__ = ()

    def __repr__(self):
        return 'NIL'


NIL = Nil()


class ForcedBreak(Doc):
    """Marks the enclosing document as impossible to lay out on
    a single line. Renders nothing by itself."""
    __slots__ = ()

    def __repr__(self):
        return 'FORCED_BREAK'


FORCED_BREAK = ForcedBreak()


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        if any(char in value for char in LINE_BREAK_CHARS):
            raise ValueError(
                f"Text cannot contain line breaks, got {repr(value)}"
            )
        self.value = value

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Line(Doc):
    __slots__ = ('flat_substitute', )

    def __init__(self, flat_substitute):
        assert isinstance(flat_substitute, str)
        self.flat_substitute = flat_substitute

    def __repr__(self):
        return f'Line({repr(self.flat_substitute)})'


class Concat(Doc):
    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        assert isinstance(left, Doc)
        assert isinstance(right, Doc)

        self.left = left
        self.right = right

    def __repr__(self):
        return f'Concat({repr(self.left)}, {repr(self.right)})'


class Nest(Doc):
    """Indents line breaks inside ``doc``.

    ``indent`` is either an increment to the current indentation, or
    ``None`` to indent to the column where the layout algorithm
    reaches this node."""
    __slots__ = ('indent', 'doc')

    def __init__(self, indent, doc):
        assert indent is None or isinstance(indent, int)
        assert isinstance(doc, Doc)

        self.indent = indent
        self.doc = doc

    def __repr__(self):
        return f'Nest({repr(self.indent)}, {repr(self.doc)})'


class FlatChoice(Doc):
    __slots__ = ('when_flat', 'when_broken')

    def __init__(self, when_flat, when_broken):
        self.when_flat = when_flat
        self.when_broken = when_broken

    def __repr__(self):
        return (
            f'FlatChoice(when_flat={repr(self.when_flat)}, '
            f'when_broken={repr(self.when_broken)})'
        )


SPACE = Text(' ')
SOFTLINE = Line(' ')
SOFTBREAK = Line('')
HARDLINE = Concat(FORCED_BREAK, SOFTBREAK)


def _flat_line(line):
    if line.flat_substitute == '':
        return NIL
    return Text(line.flat_substitute)


def flatten(doc):
    """Returns the single-line equivalent of ``doc``, or ``None`` if
    ``doc`` contains a ``FORCED_BREAK`` anywhere."""
    # Pending entries are (doc, expanded). Children of a Concat leave
    # their flattened forms on ``results`` for the Concat to collect.
    pending = [(doc, False)]
    results = []

    while pending:
        doc, expanded = pending.pop()

        if isinstance(doc, ForcedBreak):
            return None
        elif isinstance(doc, (Nil, Text)):
            results.append(doc)
        elif isinstance(doc, Line):
            results.append(_flat_line(doc))
        elif isinstance(doc, FlatChoice):
            results.append(doc.when_flat)
        elif isinstance(doc, Nest):
            pending.append((doc.doc, False))
        elif isinstance(doc, Concat):
            if expanded:
                right = results.pop()
                left = results.pop()
                if left is doc.left and right is doc.right:
                    results.append(doc)
                else:
                    results.append(Concat(left, right))
            else:
                pending.append((doc, True))
                pending.append((doc.right, False))
                pending.append((doc.left, False))
        else:
            raise TypeError(
                f"Got {repr(doc)} of type {type(doc).__name__}, "
                "expected 'Doc'"
            )

    assert len(results) == 1
    return results[0]
