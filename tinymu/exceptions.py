# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for node construction.
'''

from typing import Any


class InvalidArity(TypeError):
  '''
  Raised when an attribute is constructed with more than one value.
  This is a malformed call rather than bad data, so it subclasses TypeError,
  which Python raises for other argument count mistakes.
  '''
  def __init__(self, *, name:str, values:tuple[Any,...]) -> None:
    self.name = name
    self.count = len(values)
    super().__init__(f'attribute {name!r} takes a name and at most one value; received {self.count} values')
