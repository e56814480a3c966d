# -*- coding: utf-8 -*-

"""Top-level package for prettydoc."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

import sys

from .api import (
    align,
    binary,
    bracket,
    concat,
    fold,
    group,
    hang,
    hsep,
    nest,
    spread,
    stack,
    text,
    text_block,
    vsep,
)
from .doc import (
    Doc,
    cast_doc,
    flatten,
    NIL,
    SPACE,
    SOFTLINE,
    SOFTBREAK,
    HARDLINE,
)
from .layout import layout
from .render import (
    default_render_to_stream,
    default_render_to_str,
    strip_trailing_whitespace,
)


__all__ = [
    'render',
    'pprint',
    'layout',
    'default_render_to_stream',
    'default_render_to_str',
    'strip_trailing_whitespace',
    'Doc',
    'cast_doc',
    'flatten',
    'text',
    'nest',
    'align',
    'hang',
    'group',
    'concat',
    'fold',
    'hsep',
    'vsep',
    'stack',
    'text_block',
    'spread',
    'binary',
    'bracket',
    'NIL',
    'SPACE',
    'SOFTLINE',
    'SOFTBREAK',
    'HARDLINE',
]


def render(doc, width=80):
    """Lays out ``doc`` to fit in ``width`` columns where possible,
    and returns the result with trailing whitespace removed from
    every line."""
    return strip_trailing_whitespace(
        default_render_to_str(layout(cast_doc(doc), width))
    )


def pprint(doc, stream=None, width=80, end='\n'):
    if stream is None:
        stream = sys.stdout
    stream.write(render(doc, width))
    if end:
        stream.write(end)
