"""
Markdown 片段的静态格式常量
只读：无配置文件、无环境变量，导入即生效
"""
from typing import Dict, Optional

# ① 换行与分隔符
LF         = "\n"
FENCE_CHAR = "`"
FENCE_LEN  = 3            # CommonMark 最短围栏长度
H1_CHAR    = "="
H2_CHAR    = "-"
ATX_CHAR   = "#"

# ② 便捷函数使用的 info string
INFO_STRINGS: Dict[str, str] = {
    "js": "javascript",
    "rs": "rust",
    "sh": "shell",
    "ts": "typescript",
    "md": "md",
}


def get(key_name: str) -> Optional[str]:
    return INFO_STRINGS.get(key_name) or None
