"""
build.gradle 读写：定位唯一的构建文件，并解析/回写 versionCode 与 versionName。
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Union

from .commands import run_command
from .versioning import MAX_VERSION_CODE, VersionPair

VERSION_NAME_RE = re.compile(r'versionName\s+"([0-9.]+)"')
VERSION_CODE_RE = re.compile(r'versionCode\s+(\d+)')

PathLike = Union[str, Path]


def find_build_files(directory: PathLike, file_name: str) -> List[Path]:
  """用 grep 查找目录下包含 versionCode 的构建文件。"""
  result = run_command(
    ['grep', '-l', '-r', 'versionCode', '--include', file_name, str(directory)],
    capture=True,
    allowed_returncodes=(0, 1)
  )
  files: List[Path] = []
  for line in (result.stdout or '').splitlines():
    trimmed = line.strip()
    if trimmed:
      files.append(Path(trimmed))
  return files


def locate_build_file(directory: PathLike, file_name: str) -> Path:
  """要求恰好匹配到一个构建文件，否则抛出 ValueError。"""
  files = find_build_files(directory, file_name)
  if not files:
    raise ValueError(f'no `{file_name}` file found in {directory}')
  if len(files) != 1:
    listing = ', '.join(str(item) for item in files)
    raise ValueError(f'found more than one `{file_name}` file: {listing}')
  logging.info('- found %s', files[0])
  return files[0]


def parse_versions(text: str) -> VersionPair:
  """从构建文件内容中取出首个 versionCode 与 versionName。"""
  name_match = VERSION_NAME_RE.search(text)
  if not name_match:
    raise ValueError('failed to match `versionName`')
  code_match = VERSION_CODE_RE.search(text)
  if not code_match:
    raise ValueError('failed to match `versionCode`')
  code = int(code_match.group(1))
  if code > MAX_VERSION_CODE:
    raise ValueError(f'`versionCode` {code} is out of range')
  return VersionPair(code=code, name=name_match.group(1))


def read_versions(path: PathLike) -> VersionPair:
  return parse_versions(Path(path).read_text(encoding='utf-8'))


def render_versions(text: str, pair: VersionPair) -> str:
  """替换所有 versionName/versionCode 声明，其余内容保持不变。"""
  body = VERSION_NAME_RE.sub(lambda _match: f'versionName "{pair.name}"', text)
  return VERSION_CODE_RE.sub(lambda _match: f'versionCode {pair.code}', body)


def write_versions(path: PathLike, pair: VersionPair) -> None:
  target = Path(path)
  # newline='' 保留原文件的换行符
  with target.open('r', encoding='utf-8', newline='') as handle:
    text = handle.read()
  with target.open('w', encoding='utf-8', newline='') as handle:
    handle.write(render_versions(text, pair))


__all__ = [
  'find_build_files',
  'locate_build_file',
  'parse_versions',
  'read_versions',
  'render_versions',
  'write_versions',
]
