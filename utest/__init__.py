'''
utest is a tiny unit testing library.

Each check runs immediately when called. Failures are reported to stderr as they occur,
and at process exit a summary is printed and the exit status is forced to 1 if anything failed.
'''


import atexit as _atexit
import inspect as _inspect
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import print_exception as _print_exception
from typing import Any, Callable, Iterable, TypeVar


__all__ = [
  'utest',
  'utest_call',
  'utest_exc',
  'utest_seq',
  'utest_val',
]


_utest_test_count = 0
_utest_failure_count = 0

_no_value = object()


_C = TypeVar('_C', bound=Callable)
def utest_call(callable:_C) -> _C:
  'A function decorator to call the defined function immediately. Useful for wrapping test state in a local function scope.'
  callable()
  return callable


def utest(exp:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  ret, exc = _invoke(fn, args, kwargs)
  if exc is not None:
    _utest_failure(_utest_depth, exp_label='value', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  elif exp != ret:
    _utest_failure(_utest_depth, exp_label='value', exp=exp, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if no exception is raised, or if the raised exception does not match `exp_exc`.
  '''
  ret, exc = _invoke(fn, args, kwargs)
  if exc is None:
    _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, ret_label='value', ret=ret, subj=fn, args=args, kwargs=kwargs)
  elif not _compare_exceptions(exp_exc, exc):
    _utest_failure(_utest_depth, exp_label='exception', exp=exp_exc, exc=exc, subj=fn, args=args, kwargs=kwargs)


def utest_seq(exp_seq:Iterable[Any], fn:Callable, *args:Any, _utest_depth=0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`, and convert the resulting iterable into a list.
  Log a test failure if an exception is raised, or if the items do not equal the items of `exp_seq`.
  '''
  exp = list(exp_seq) # Copy for referential isolation and a consistent repr.
  ret, exc = _invoke(lambda: list(fn(*args, **kwargs)), (), {})
  if exc is not None:
    _utest_failure(_utest_depth, exp_label='sequence', exp=exp, exc=exc, subj=fn, args=args, kwargs=kwargs)
  elif exp != ret:
    _utest_failure(_utest_depth, exp_label='sequence', exp=exp, ret_label='sequence', ret=ret, subj=fn, args=args, kwargs=kwargs)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  '''
  Log a test failure if `exp_val` does not equal `act_val`.
  Describe the test with the optional `desc`.
  '''
  global _utest_test_count
  _utest_test_count += 1
  if exp_val != act_val:
    _utest_failure(0, exp_label='value', exp=exp_val, ret_label='value', ret=act_val, subj=desc)


def _invoke(fn:Callable, args:tuple[Any,...], kwargs:dict[str,Any]) -> tuple[Any,BaseException|None]:
  global _utest_test_count
  _utest_test_count += 1
  try: return fn(*args, **kwargs), None
  except Exception as exc: return _no_value, exc


def _utest_failure(depth:int, exp_label:str, exp:Any, ret_label:str='', ret:Any=None, exc:BaseException|None=None,
 subj:Any=None, args:tuple[Any,...]=(), kwargs:dict[str,Any]={}) -> None:

  global _utest_failure_count
  _utest_failure_count += 1

  info = _inspect.getframeinfo(_inspect.stack()[2 + depth][0]) # The test script line that called the utest function.
  name = getattr(subj, '__qualname__', None) or repr(subj)
  path = _rel_path(info.filename)
  if '/' not in path: path = f'./{path}'
  _errL(f'\n{path}:{info.lineno}: utest failure: {name}')

  for i, el in enumerate(args):
    _errL(f'  arg {i} = {el!r}')
  for k, v in kwargs.items():
    _errL(f'  arg {k} = {v!r}')

  _errL(f'  expected {exp_label}: {exp!r}')
  if exc is None:
    _errL(f'  returned {ret_label}: {ret!r}')
  else:
    _errL(f'  raised exception: {exc!r}')
    _print_exception(exc, file=_stderr)


def _compare_exceptions(exp:Any, act:BaseException) -> bool:
  '''
  Compare two exceptions for approximate value equality.
  * if `exp` is a string, compare it to the repr of `act`.
  * if `exp` is a type, test if `act` is an instance of `exp`.
  * otherwise compare the types and args of `exp` and `act`.
  '''
  if isinstance(exp, str): return exp == repr(act)
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _errL(*items:Any) -> None: print(*items, sep='', file=_stderr)


@_atexit.register
def report() -> None:
  'At process exit, if any test failures occured, print a summary message and force process to exit with status code 1.'
  from os import _exit
  if _utest_failure_count > 0:
    _errL(f'\nutest ran: {_utest_test_count}; failed: {_utest_failure_count}')
    _stderr.flush()
    _exit(1) # Raising SystemExit has no effect in an atexit handler.
