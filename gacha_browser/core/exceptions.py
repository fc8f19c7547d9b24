class GachaBrowserError(Exception):
    """Base exception for all gacha_browser errors"""
    pass

class ConfigError(GachaBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class LoadError(GachaBrowserError):
    """
    The data source could not be read: unreachable URL, HTTP error,
    missing file or bytes that are not valid UTF-8
    """
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load data from '{source}': {reason}")

class HeaderMismatch(GachaBrowserError):
    """The header line does not match the expected Name / location / Percent columns"""
    def __init__(self, found: list[str], expected: list[str]):
        self.found = found
        self.expected = expected
        super().__init__(
            f"Unexpected header {found!r}; expected {' / '.join(expected)}"
        )
