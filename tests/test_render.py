from io import StringIO
from textwrap import dedent

import pytest

from prettydoc import (
    align,
    group,
    nest,
    pprint,
    render,
    spread,
    text,
    text_block,
    concat,
    default_render_to_stream,
    hsep,
    layout,
    SOFTBREAK,
    HARDLINE,
    SOFTLINE,
)


def check(doc, width, expected):
    assert render(doc, width) == dedent(expected).strip()


@pytest.mark.parametrize('width', [10, 2])
def test_spaces_never_break(width):
    check(text('1') & '+' & '2', width, '1 + 2')
    check(group(text('1') & '+' & '2'), width, '1 + 2')


@pytest.mark.parametrize('width', [10, 2])
def test_line_outside_group_always_breaks(width):
    check((text('1') & '+') / '2', width, """
        1 +
        2
    """)


def test_group_collapses_when_it_fits():
    doc = group((text('1') & '+') / '2')
    check(doc, 10, '1 + 2')
    check(doc, 5, '1 + 2')
    check(doc, 4, """
        1 +
        2
    """)
    check(doc, 2, """
        1 +
        2
    """)


@pytest.mark.parametrize('width', [10, 2])
def test_hard_line_ignores_width(width):
    check(group(text('1') & '+' | '2'), width, """
        1 +
        2
    """)


def test_spread_aligned_to_column():
    doc = 'println(' + align(spread(['lol', 'very long thing', 'toto'])) + ')'
    check(doc, 80, 'println(lol, very long thing, toto)')
    check(doc, 5, """
        println(lol,
                very long thing,
                toto)
    """)


def test_text_block_keeps_line_breaks():
    doc = 'println(' + text_block([
        '"Hello,',
        '|',
        '|This, is a multiline string."',
    ]) + ')'
    check(doc, 80, """
        println("Hello,
                |
                |This, is a multiline string.")
    """)


def test_fixed_nesting():
    doc = (
        'math.min(' + nest(2, SOFTLINE + text('1,') / '2,' / '3') / ')'
        & '+' & '10'
    )
    check(doc, 40, """
        math.min(
          1,
          2,
          3
        ) + 10
    """)


def test_column_nesting():
    doc = 'math.min(' + align(text('1,') / '2,' / '3') + ')' & '+' & '10'
    check(doc, 40, """
        math.min(1,
                 2,
                 3) + 10
    """)


def test_align_uses_column_at_layout_time():
    doc = nest(4, text('xx') + align(SOFTLINE + 'y'))
    assert render(doc, 80) == 'xx\n  y'

    doc = nest(2, nest(3, text('a') / 'b'))
    assert render(doc, 80) == 'a\n     b'


def test_nested_groups_break_outermost_first():
    inner = group(text('inner(') + nest(2, SOFTBREAK + text('a,') / 'b') + ')')
    doc = group(text('outer(') + nest(2, SOFTBREAK + inner) // ')')

    check(doc, 80, 'outer(inner(a, b))')
    check(doc, 16, """
        outer(
          inner(a, b)
        )
    """)
    check(doc, 10, """
        outer(
          inner(
            a,
            b)
        )
    """)


def test_trailing_whitespace_is_stripped():
    assert render((text('a') + '  \t') / 'b', 80) == 'a\nb'
    assert render(nest(2, text('a') + SOFTBREAK + SOFTBREAK + 'b'), 80) == (
        'a\n\n  b'
    )
    assert render(nest(2, text('a') + SOFTBREAK), 80) == 'a\n'
    assert render(text('a') + '\x0c \x0b' + SOFTBREAK + 'b', 80) == 'a\nb'


def test_final_line_break_is_dropped():
    assert render(text('a') + HARDLINE, 80) == 'a'
    assert render(text('a') + SOFTBREAK, 80) == 'a'
    assert render(text('a') + HARDLINE + HARDLINE, 80) == 'a\n'
    assert render(HARDLINE, 80) == ''


def test_render_str_and_empty():
    assert render('hello', 1) == 'hello'
    assert render('', 80) == ''


def test_render_is_deterministic():
    doc = 'f(' + align(spread(['alpha', 'beta', 'gamma', 'delta'])) + ')'
    for width in (5, 20, 80):
        assert render(doc, width) == render(doc, width)


def test_group_renders_flat_form_when_it_fits():
    doc = text('f(') + nest(2, SOFTBREAK + text('a,') / 'b,' / 'c') // ')'
    flat = 'f(a, b, c)'

    for width in (len(flat), len(flat) + 1, 100):
        assert render(group(doc), width) == flat
    assert render(group(doc), len(flat) - 1) == render(doc, len(flat) - 1)


def test_deeply_nested_groups():
    doc = text('x')
    for _ in range(3000):
        doc = group(text('[') + nest(1, doc) + ']')

    assert render(doc, 10) == '[' * 3000 + 'x' + ']' * 3000


def test_long_spread():
    doc = spread([str(i) for i in range(5000)])
    expected = '\n'.join(f'{i},' for i in range(4999)) + '\n4999'
    assert render(doc, 80) == expected


def test_many_groups_on_one_line():
    doc = text('x') + concat([group(SOFTBREAK) for _ in range(3000)]) + 'y'
    assert render(doc, 80) == 'xy'
    assert render(doc, 1) == 'x\ny'

    doc = hsep([group(text('a') // 'b') for _ in range(2000)])
    assert render(doc, 100000) == ' '.join(['ab'] * 2000)

    out = render(doc, 10)
    assert out.replace('\n', '') == ' '.join(['ab'] * 2000)
    assert max(len(line) for line in out.split('\n')) == 10


def test_pprint():
    stream = StringIO()
    pprint(group((text('1') & '+') / '2'), stream=stream, width=10)
    assert stream.getvalue() == '1 + 2\n'

    stream = StringIO()
    pprint(group((text('1') & '+') / '2'), stream=stream, width=2, end='')
    assert stream.getvalue() == '1 +\n2'


def test_render_to_stream():
    stream = StringIO()
    default_render_to_stream(stream, layout(nest(2, text('a') / 'b  '), 80))
    assert stream.getvalue() == 'a\n  b  '
