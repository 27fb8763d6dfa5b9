# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`markup` provides the built-in node kinds: `El` for tagged elements, `Attr` for attributes,
`Text` for escaped text, and `Raw` for markup that is emitted verbatim.

Trees are built bottom-up and never mutated; rendering is a pure recursive fold over the tree.
Tag and attribute names are not validated, and no HTML content model is enforced.

>>> str(El('a', Attr('href', '/x'), Text('go')))
'<a href="/x">go</a>'
'''

from dataclasses import dataclass
from html import escape as _escape
from typing import Optional

from .exceptions import InvalidArity
from .node import as_node, Node, NodeBase, NodeLike


@dataclass(frozen=True)
class El(NodeBase):
  '''
  A tagged element with an ordered sequence of children.

  `Attr` children are rendered into the opening tag, in the order they appear among the children,
  regardless of where they are interleaved with content children.
  An element with no content renders in self-closing form, e.g. `<br/>` or `<input required/>`.
  Bare render functions are accepted as children and wrapped in `NodeFunc`.
  '''

  name:str
  children:tuple[Node,...]

  def __init__(self, name:str, *children:NodeLike) -> None:
    set_ = super().__setattr__
    set_('name', name)
    set_('children', tuple(as_node(c) for c in children))


  def render(self) -> str:
    name = self.name
    if not self.children: return f'<{name}/>'

    attr_parts:list[str] = []
    content_parts:list[str] = []
    for child in self.children: # Single pass; each child is rendered exactly once.
      if isinstance(child, Attr): attr_parts.append(child.render())
      else: content_parts.append(child.render())

    attrs_str = ''.join(attr_parts)
    content = ''.join(content_parts)
    # Self-closing is determined by the rendered content, so children that render to nothing count as no content.
    if not content: return f'<{name}{attrs_str}/>'
    return f'<{name}{attrs_str}>{content}</{name}>'


@dataclass(frozen=True)
class Attr(NodeBase):
  '''
  An attribute, rendered inline with a leading space.
  `Attr('required')` is a boolean attribute; `Attr('class', 'header')` is a name/value pair.
  The value is quoted but not escaped; callers must sanitize values that may contain a double quote.
  Supplying more than one value raises `InvalidArity`.
  '''

  name:str
  value:Optional[str] # None means absent, which is distinct from the empty string.

  def __init__(self, name:str, *value:str) -> None:
    if len(value) > 1: raise InvalidArity(name=name, values=value)
    set_ = super().__setattr__
    set_('name', name)
    set_('value', value[0] if value else None)


  def render(self) -> str:
    if self.value is None: return f' {self.name}'
    return f' {self.name}="{self.value}"'


@dataclass(frozen=True)
class Text(NodeBase):
  'Text content. The five HTML-significant characters `&<>"\'` are replaced with character references.'

  text:str

  def render(self) -> str: return _escape(self.text, quote=True)


@dataclass(frozen=True)
class Raw(NodeBase):
  '''
  Markup that has already been properly escaped, or is trusted, and is rendered verbatim.
  This is unsafe with untrusted input.
  '''

  string:str

  def render(self) -> str: return self.string
