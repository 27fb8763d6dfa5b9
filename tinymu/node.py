# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`node` defines the `Node` protocol, the single capability shared by every kind of markup node:
rendering itself to a string.
'''

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from .reprs import repr_lim


@runtime_checkable
class Node(Protocol):
  '''
  A protocol for values that render to a markup string.
  Any object with a conforming `render` method qualifies; subclassing is not required.
  '''

  def render(self) -> str: ...


RenderFn = Callable[[], str]
NodeLike = Node | RenderFn


class NodeBase:
  '''
  Mixin for the built-in node kinds.
  `str(node)` is the rendered markup and `bytes(node)` is its UTF-8 encoding.
  '''

  __slots__ = ()

  def render(self) -> str: raise NotImplementedError(type(self))

  def __str__(self) -> str: return self.render()

  def __bytes__(self) -> bytes: return self.render().encode('utf-8')


@dataclass(frozen=True)
class NodeFunc(NodeBase):
  'A node that renders by calling a zero-argument function.'

  fn:RenderFn

  def render(self) -> str: return self.fn()


def render(node:Node) -> str:
  'Render `node` to a string. Rendering is pure, so repeated calls return equal strings.'
  return node.render()


def is_node_like(obj:Any) -> bool:
  return isinstance(obj, Node) or callable(obj)


def as_node(obj:NodeLike) -> Node:
  '''
  Return `obj` if it is already a node; wrap a bare render function in `NodeFunc`.
  Raise TypeError for anything else.
  '''
  if isinstance(obj, Node): return obj
  if callable(obj): return NodeFunc(obj)
  raise TypeError(f'Invalid node type: {type(obj)!r}; value: {repr_lim(obj)!r}')
