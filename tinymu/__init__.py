# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
tinymu is a minimal declarative HTML construction library.
Build a tree of `El`, `Attr`, `Text`, and `Raw` nodes (or any object with a `render` method), then call `render`.
'''

from .exceptions import InvalidArity
from .markup import Attr, El, Raw, Text
from .node import as_node, is_node_like, Node, NodeBase, NodeFunc, NodeLike, render, RenderFn


__all__ = [
  'as_node',
  'Attr',
  'El',
  'InvalidArity',
  'is_node_like',
  'Node',
  'NodeBase',
  'NodeFunc',
  'NodeLike',
  'Raw',
  'render',
  'RenderFn',
  'Text',
]
