"""
固定的 git 发布流程：提交版本变更、打标签、推送，并把开发分支合并到发布分支。
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .commands import run_command

COMMIT_MESSAGE = 'Bump version to {version}'


def git(*args: str) -> None:
  """执行 git 子命令，输出直接写到终端，失败时抛出 CommandError。"""
  run_command(['git', *args])


class GitWorkflow:
  """按顺序驱动版本提交与发布所需的 git 操作。"""

  def __init__(
    self,
    remote: str = 'origin',
    develop_branch: str = 'develop',
    release_branch: str = 'master',
    tag_format: str = '{version}'
  ) -> None:
    self.remote = remote
    self.develop_branch = develop_branch
    self.release_branch = release_branch
    self.tag_format = tag_format

  def tag_name(self, version_name: str) -> str:
    return self.tag_format.format(version=version_name)

  def show_diff(self, path: Union[str, Path]) -> None:
    logging.info('Git diff:')
    git('diff', str(path))

  def commit(self, path: Union[str, Path], version_name: str) -> None:
    git('add', str(path))
    git('commit', '-m', COMMIT_MESSAGE.format(version=version_name))

  def tag(self, version_name: str) -> str:
    name = self.tag_name(version_name)
    git('tag', name)
    return name

  def push(self, tag_name: str) -> None:
    git('push', self.remote, 'HEAD')
    git('push', self.remote, tag_name)

  def promote(self) -> None:
    """检出发布分支并合并开发分支；未配置发布分支时跳过。"""
    if not self.release_branch:
      logging.info('release branch not configured, skip merge')
      return
    logging.info('merging %s into %s', self.develop_branch, self.release_branch)
    git('checkout', self.release_branch)
    git('merge', self.develop_branch)
    git('push', self.remote, 'HEAD')

  def publish(self, path: Union[str, Path], version_name: str) -> None:
    self.show_diff(path)
    self.commit(path, version_name)
    tag_name = self.tag(version_name)
    self.push(tag_name)
    self.promote()


__all__ = ['COMMIT_MESSAGE', 'GitWorkflow', 'git']
