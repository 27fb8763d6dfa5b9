#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())

  ok = True
  for path in walk_tests(args.paths):
    print(path)
    if run([executable, str(path)], env=env).returncode != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_tests(paths:list[str]) -> list[Path]:
  found:list[Path] = []
  for p in map(Path, paths):
    if p.is_dir(): found.extend(sorted(p.rglob('*.ut.py')))
    else: found.append(p)
  return found


if __name__ == '__main__': main()
