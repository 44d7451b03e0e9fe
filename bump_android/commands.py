"""
外部命令执行封装：grep / git / envman 均通过这里调用。
"""
from __future__ import annotations

import logging
import shlex
import subprocess
from typing import Optional, Sequence


class CommandError(RuntimeError):
  """外部命令无法启动或返回了非预期的退出码。"""

  def __init__(self, args: Sequence[str], returncode: Optional[int], detail: str = '') -> None:
    self.command = list(args)
    self.returncode = returncode
    self.detail = detail
    message = f'command `{printable_command(args)}` '
    if returncode is None:
      message += 'could not be started'
    else:
      message += f'exited with status {returncode}'
    if detail:
      message += f': {detail}'
    super().__init__(message)


def printable_command(args: Sequence[str]) -> str:
  return shlex.join([str(arg) for arg in args])


def run_command(
  args: Sequence[str],
  *,
  stdin: Optional[str] = None,
  capture: bool = False,
  allowed_returncodes: Sequence[int] = (0,)
) -> subprocess.CompletedProcess:
  """执行命令并返回结果；capture=False 时输出直接写到当前终端。"""
  argv = [str(arg) for arg in args]
  logging.debug('$ %s', printable_command(argv))
  try:
    result = subprocess.run(
      argv,
      input=stdin,
      stdout=subprocess.PIPE if capture else None,
      stderr=subprocess.PIPE if capture else None,
      text=True,
      check=False
    )
  except OSError as exc:
    raise CommandError(argv, None, str(exc)) from exc
  if result.returncode not in allowed_returncodes:
    detail = (result.stderr or '').strip() if capture else ''
    raise CommandError(argv, result.returncode, detail)
  return result


__all__ = ['CommandError', 'printable_command', 'run_command']
