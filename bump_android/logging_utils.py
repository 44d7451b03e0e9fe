"""
统一的日志配置工具，供 CLI 入口与流水线步骤共同调用。
"""
import logging
from typing import Iterable, Tuple


def configure_logging(level: str) -> None:
  """使用统一格式配置日志输出。"""
  logging.basicConfig(
    level=getattr(logging, level.upper(), logging.INFO),
    format='%(asctime)s | %(levelname)s | %(message)s'
  )


def log_section(title: str, details: Iterable[Tuple[str, object]] = ()) -> None:
  """输出一个小节标题及其下的明细行。"""
  logging.info(title)
  for label, value in details:
    logging.info('- %s: %s', label, value)


__all__ = ['configure_logging', 'log_section']
