# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import FrozenInstanceError
from html import escape

from tinymu import Attr, El, InvalidArity, Raw, render, Text
from utest import utest, utest_call, utest_exc, utest_val


# Elements.

utest('<br/>', render, El('br'))
utest('<x-anything at all/>', render, El('x-anything at all')) # Names are not validated.
utest('<input required/>', render, El('input', Attr('required')))
utest('<input type="text" required/>', render, El('input', Attr('type', 'text'), Attr('required')))
utest('<p>hi</p>', render, El('p', Text('hi')))
utest('<p/>', render, El('p', Text(''))) # Content that renders to nothing is self-closing.
utest('<p class="c"/>', render, El('p', Text(''), Attr('class', 'c')))

utest('<a href="/x">go</a>', render, El('a', Attr('href', '/x'), Text('go')))
utest('<ul><li>one</li><li>two</li></ul>', render, El('ul', El('li', Text('one')), El('li', Text('two'))))

# Attributes are hoisted into the opening tag regardless of position; both partitions keep their relative order.
utest('<div id="d" class="c" hidden>abc</div>', render,
  El('div', Text('a'), Attr('id', 'd'), Raw('b'), Attr('class', 'c'), Text('c'), Attr('hidden')))

utest('<div><span a="1"/>x</div>', render, El('div', El('span', Attr('a', '1')), Text('x')))


@utest_call
def test_all_attr_children() -> None:
  attrs = [Attr('a', '1'), Attr('b'), Attr('c', '')]
  utest_val('<t a="1" b c=""/>', El('t', *attrs).render(), 'only attribute children')


@utest_call
def test_interleavings() -> None:
  a0 = Attr('x', '0')
  a1 = Attr('y')
  t0 = Text('<')
  t1 = Raw('<i/>')
  for children in [(a0, a1, t0, t1), (t0, a0, t1, a1), (t0, t1, a0, a1), (a0, t0, a1, t1)]:
    utest_val('<e x="0" y>&lt;<i/></e>', El('e', *children).render(), children)


# Attributes.

utest(' required', render, Attr('required'))
utest(' class="header"', render, Attr('class', 'header'))
utest(' alt=""', render, Attr('alt', ''))
utest(' title="a<b"', render, Attr('title', 'a<b')) # Values are not escaped.
utest(None, lambda: Attr('required').value)
utest('', lambda: Attr('alt', '').value)

utest_exc(InvalidArity, Attr, 'class', 'a', 'b')
utest_exc(TypeError, Attr, 'class', 'a', 'b', 'c')

@utest_call
def test_invalid_arity() -> None:
  for n in range(2, 6):
    try: Attr('name', *['v'] * n)
    except InvalidArity as e:
      utest_val('name', e.name, 'InvalidArity.name')
      utest_val(n, e.count, 'InvalidArity.count')
    else: utest_val(InvalidArity, None, f'Attr with {n} values')


# Text and raw.

utest('&lt;b&gt;', render, Text('<b>'))
utest('', render, Text(''))
utest('&amp;&lt;&gt;&quot;&#x27;', render, Text('&<>"\''))
utest('&amp;amp;', render, Text('&amp;'))
utest('café ☃ \t\x01', render, Text('café ☃ \t\x01'))

@utest_call
def test_text_matches_reference_escape() -> None:
  for s in ['', 'plain', '<script>alert("x")</script>', "it's & that", 'é<é']:
    utest_val(escape(s, quote=True), Text(s).render(), s)

utest('<b>', render, Raw('<b>'))
utest('<b><i>', render, Raw('<b><i>')) # Malformed markup passes through.
utest('', render, Raw(''))


# Nodes are immutable values.

utest_exc(FrozenInstanceError, setattr, El('p'), 'name', 'q')
utest_exc(FrozenInstanceError, setattr, Attr('a'), 'value', 'v')
utest_exc(FrozenInstanceError, setattr, Text('t'), 'text', 'u')
utest_exc(FrozenInstanceError, setattr, Raw('r'), 'string', 's')

utest(True, lambda: El('p', Text('x')) == El('p', Text('x')))
utest(False, lambda: Text('x') == Raw('x'))


@utest_call
def test_idempotent() -> None:
  page = El('html',
    El('head', El('title', Text('T & U'))),
    El('body', Attr('class', 'main'), El('p', Text('one')), Raw('<!-- c -->'), El('hr')))
  first = render(page)
  utest_val(first, render(page), 'second render')
  utest_val(
    '<html><head><title>T &amp; U</title></head><body class="main"><p>one</p><!-- c --><hr/></body></html>',
    first, 'page')
  utest_val(first, str(page), 'str')
  utest_val(first.encode('utf-8'), bytes(page), 'bytes')
