from io import StringIO

from .sdoc import (
    SText,
    SLine,
    iter_sdocs,
)

# Horizontal whitespace; Text never holds '\n' or '\r'.
TRAILING_WHITESPACE = ' \t\x0b\x0c'


def default_render_to_stream(stream, sdoc):
    for sdoc in iter_sdocs(sdoc):
        if isinstance(sdoc, SText):
            stream.write(sdoc.value)
        elif isinstance(sdoc, SLine):
            stream.write('\n' + ' ' * sdoc.indent)


def default_render_to_str(sdoc):
    stream = StringIO()
    default_render_to_stream(stream, sdoc)
    return stream.getvalue()


def strip_trailing_whitespace(s):
    """Strips trailing whitespace from every line of ``s``. A final
    line break doesn't start a new line."""
    lines = s.split('\n')
    if lines[-1] == '':
        lines.pop()
    return '\n'.join(line.rstrip(TRAILING_WHITESPACE) for line in lines)
