# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any


def repr_lim(obj:Any, limit=64) -> str:
  'Return a repr of `obj` that is at most `limit` characters long, marking truncation with an ellipsis.'
  r = repr(obj)
  if limit <= 2 or len(r) <= limit: return r
  q = r[0]
  if q in '\'"': return f'{r[:limit-2]}{q}…' # Keep the closing quote so the truncated text still reads as a string.
  return f'{r[:limit-1]}…'
