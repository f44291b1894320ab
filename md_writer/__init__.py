"""
MD Writer
=========
编写 Markdown 的小工具集：代码围栏、行内代码、围栏代码块、setext / ATX 标题
"""
from .errors import MdWriterError
from .modules.md_utils import (
    LF,
    code_fence,
    code_span,
    fence_md,
    fenced_code_block,
    fenced_js_code_block,
    fenced_rs_code_block,
    fenced_sh_code_block,
    fenced_ts_code_block,
    h1,
    h2,
    h3,
    h4,
    h5,
    h6,
)

__version__ = "0.1.0"

__all__ = [
    "LF",
    "MdWriterError",
    "code_fence",
    "code_span",
    "fence_md",
    "fenced_code_block",
    "fenced_js_code_block",
    "fenced_rs_code_block",
    "fenced_sh_code_block",
    "fenced_ts_code_block",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
]
