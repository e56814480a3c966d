class SDoc(object):
    __slots__ = ()


class SNil(SDoc):
    __slots__ = ()

    def __repr__(self):
        return 'SNIL'


SNIL = SNil()


class SChain(SDoc):
    """An SDoc followed by more output. The successor is computed by
    calling ``thunk`` the first time ``next`` is read, then kept."""
    __slots__ = ('_thunk', '_next')

    def __init__(self, thunk):
        self._thunk = thunk
        self._next = None

    @property
    def next(self):
        if self._thunk is not None:
            self._next = self._thunk()
            self._thunk = None
        return self._next


class SText(SChain):
    __slots__ = ('value', )

    def __init__(self, value, thunk):
        super().__init__(thunk)
        self.value = value

    def __repr__(self):
        return f'SText({repr(self.value)})'


class SLine(SChain):
    __slots__ = ('indent', )

    def __init__(self, indent, thunk):
        assert isinstance(indent, int)
        super().__init__(thunk)
        self.indent = indent

    def __repr__(self):
        return f'SLine({repr(self.indent)})'


def iter_sdocs(sdoc):
    """Yields every SDoc in the chain starting at ``sdoc``, up to and
    excluding ``SNIL``."""
    while not isinstance(sdoc, SNil):
        yield sdoc
        sdoc = sdoc.next
