from md_writer import config


def test_info_string_lookup():
    assert config.get("js") == "javascript"
    assert config.get("rs") == "rust"
    assert config.get("sh") == "shell"
    assert config.get("ts") == "typescript"
    assert config.get("md") == "md"


def test_unknown_key_returns_none():
    assert config.get("cobol") is None


def test_fence_constants():
    assert config.FENCE_CHAR * config.FENCE_LEN == "```"
    assert config.LF == "\n"
