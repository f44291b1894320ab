# md_utils.py
# -*- coding: utf-8 -*-
"""
Markdown 片段生成工具（纯函数，无状态）
-----------------------------------------------------------------
外部接口
    code_fence(info_string=None)              -> "```rust"
    code_span(code)                           -> "`code`"
    fenced_code_block(code, info_string=None) -> 围栏代码块
    fenced_js/rs/sh/ts_code_block(code)       -> 固定语言的围栏代码块
    fence_md(txt)                             -> ```md 围栏，防 prompt 注入
    h1 / h2(text)                             -> setext 标题
    h3 ~ h6(text)                             -> ATX 标题
不做转义、不做校验：内容原样输出，Markdown 是否合法由调用方负责
参考：https://spec.commonmark.org/0.30/
"""
from __future__ import annotations

import logging
from typing import Optional

from .. import config
from ..config import LF
from ..errors import MdWriterError

__all__ = [
    "LF",
    "code_fence",
    "code_span",
    "fenced_code_block",
    "fenced_js_code_block",
    "fenced_rs_code_block",
    "fenced_sh_code_block",
    "fenced_ts_code_block",
    "fence_md",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
]

LOG = logging.getLogger(__name__)

_FENCE = config.FENCE_CHAR * config.FENCE_LEN


# ───────── 私有工具 ─────────
def _ensure_text(value, name: str = "text") -> str:
    if not isinstance(value, str):
        raise MdWriterError(f"{name} 必须是 str，实际为 {type(value).__name__}", "InvalidText")
    return value


def _ensure_info(info_string) -> str:
    """None 与空串等价：都返回空串"""
    if info_string is None:
        return ""
    return _ensure_text(info_string, "info_string")


def _setext(text: str, char: str) -> str:
    text = _ensure_text(text)
    if LF in text:
        LOG.debug("setext 标题含换行，下划线只按字符总数计算：%r", text)
    # 下划线长度 = 字符（code point）数，不做显示宽度换算
    return f"{text}{LF}{char * len(text)}"


def _atx(text: str, level: int) -> str:
    return f"{config.ATX_CHAR * level} {_ensure_text(text)}"


# ───────── 代码 ─────────
def code_fence(info_string: Optional[str] = None) -> str:
    """
    生成代码围栏，info string 紧跟其后（无空格）

    >>> code_fence("rust")
    '```rust'
    >>> code_fence(None)
    '```'
    """
    return f"{_FENCE}{_ensure_info(info_string)}"


def code_span(code: str) -> str:
    """
    行内代码；内嵌反引号不转义

    >>> code_span("x")
    '`x`'
    """
    code = _ensure_text(code, "code")
    if config.FENCE_CHAR in code:
        LOG.debug("code span 内含反引号，原样输出：%r", code)
    return f"{config.FENCE_CHAR}{code}{config.FENCE_CHAR}"


def fenced_code_block(code: str, info_string: Optional[str] = None) -> str:
    """
    开围栏(带 info string) + 换行 + 代码原文 + 换行 + 闭围栏(不带 info string)

    >>> print(fenced_code_block('println!("Hello world!");', "rust"))
    ```rust
    println!("Hello world!");
    ```
    """
    code = _ensure_text(code, "code")
    if _FENCE in code:
        LOG.debug("代码块正文内含围栏，可能提前闭合")
    return LF.join([code_fence(info_string), code, code_fence(None)])


def fenced_js_code_block(code: str) -> str:
    """
    >>> print(fenced_js_code_block("console.log(1);"))
    ```javascript
    console.log(1);
    ```
    """
    return fenced_code_block(code, config.get("js"))


def fenced_rs_code_block(code: str) -> str:
    return fenced_code_block(code, config.get("rs"))


def fenced_sh_code_block(code: str) -> str:
    return fenced_code_block(code, config.get("sh"))


def fenced_ts_code_block(code: str) -> str:
    return fenced_code_block(code, config.get("ts"))


def fence_md(txt: str) -> str:
    "```md\n...\n``` 包装，防 prompt 注入"
    return fenced_code_block(txt, config.get("md"))


# ───────── 标题 ─────────
def h1(text: str) -> str:
    """
    一级 setext 标题：下划线 "=" 与文本等长

    >>> print(h1("Hello world!"))
    Hello world!
    ============
    """
    return _setext(text, config.H1_CHAR)


def h2(text: str) -> str:
    """
    二级 setext 标题：下划线 "-" 与文本等长

    >>> print(h2("Hi"))
    Hi
    --
    """
    return _setext(text, config.H2_CHAR)


def h3(text: str) -> str:
    """
    >>> h3("Hi")
    '### Hi'
    """
    return _atx(text, 3)


def h4(text: str) -> str:
    return _atx(text, 4)


def h5(text: str) -> str:
    return _atx(text, 5)


def h6(text: str) -> str:
    return _atx(text, 6)
