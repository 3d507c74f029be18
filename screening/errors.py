class ScreenerError(Exception):
    """Base error for dictionary loading and lookup setup"""


class DictionaryLoadError(ScreenerError):
    """Raised when the wordlist can't be read"""


class TableSaturatedError(ScreenerError):
    """Raised when a probing table has no free slot left for another word"""
