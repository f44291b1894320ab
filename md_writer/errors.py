# errors.py
# -*- coding: utf-8 -*-
"""
md_writer 对外抛出的唯一异常
"""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MdWriterError"]


@dataclass
class MdWriterError(TypeError):
    """参数类型不符时抛出；同时是 TypeError，调用方可任选其一捕获"""
    message: str
    type: str = "MdWriterError"
    def __str__(self): return f"{self.type}: {self.message}"
