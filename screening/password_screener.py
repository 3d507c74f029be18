import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from configuration.config_manager import ScreenerConfig
from screening.chained_dictionary import ChainedDictionary
from screening.hashing import code_unit_length
from screening.probed_dictionary import ProbedDictionary
from screening.wordlist import load_dictionaries, read_wordlist

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class Verdict(str, Enum):
    """Outcome of a password check"""
    STRONG = "strong"
    WEAK = "weak"


class WeakReason(str, Enum):
    """The first rule a weak password failed"""
    TOO_SHORT = "too_short"
    DICTIONARY_WORD = "dictionary_word"
    DICTIONARY_WORD_WITH_DIGIT = "dictionary_word_with_digit"


@dataclass(frozen=True)
class ScreeningResult:
    verdict: Verdict
    reason: Optional[WeakReason] = None
    matched_word: Optional[str] = None

    @property
    def is_strong(self) -> bool:
        return self.verdict is Verdict.STRONG


class PasswordScreener():
    """
    Password screener that looks candidates up in a chained and a probed
    hash table built from the same wordlist
    A password is weak when it is shorter than min_length, is a dictionary
    word, becomes a dictionary word once a single digit is appended, or is a
    dictionary word followed by a single digit. That last rule goes beyond the
    append-a-digit lookup: with only "password" listed, "password7" is weak here.
    Length is counted in UTF-16 code units, the same units the hashes use.
    Args:
        chained: separate chaining table holding the wordlist
        probed: linear probing table holding the same wordlist
        min_length: shortest acceptable password
    """

    def __init__(self, chained: ChainedDictionary, probed: ProbedDictionary,
                 min_length: int = MIN_PASSWORD_LENGTH):
        self.chained = chained
        self.probed = probed
        self.min_length = min_length

    @classmethod
    def from_words(cls, words: Iterable[str], config: Optional[ScreenerConfig] = None) -> 'PasswordScreener':
        config = config or ScreenerConfig()
        chained, probed = load_dictionaries(
            words,
            chaining_size=config.chaining_size,
            probing_size=config.probing_size,
            parallel=config.parallel_load
        )
        return cls(chained, probed, config.min_password_length)

    @classmethod
    def from_wordlist(cls, path: Optional[str] = None, config: Optional[ScreenerConfig] = None) -> 'PasswordScreener':
        """Builds a screener from a wordlist file, the config path is used when none is given"""
        config = config or ScreenerConfig()
        path = path or config.wordlist_path
        logger.info(f"Building password screener from {path}")
        words = (
            word for _, word in read_wordlist(
                path,
                encoding=config.encoding,
                skip_blank_lines=config.skip_blank_lines
            )
        )
        return cls.from_words(words, config)

    def _in_dictionary(self, word: str) -> bool:
        return self.chained.contains(word) or self.probed.contains(word)

    def _find_match(self, password: str):
        if self._in_dictionary(password):
            return WeakReason.DICTIONARY_WORD, password
        for digit in string.digits:
            candidate = password + digit
            if self._in_dictionary(candidate):
                return WeakReason.DICTIONARY_WORD_WITH_DIGIT, candidate
        # The password itself may be a listed word with one digit appended
        if password and password[-1] in string.digits and self._in_dictionary(password[:-1]):
            return WeakReason.DICTIONARY_WORD_WITH_DIGIT, password[:-1]
        return None, None

    def is_password_compromised(self, password: str) -> bool:
        """Checks only the dictionary rules, regardless of length"""
        reason, _ = self._find_match(password)
        return reason is not None

    def screen(self, password: str) -> ScreeningResult:
        if code_unit_length(password) < self.min_length:
            return ScreeningResult(Verdict.WEAK, WeakReason.TOO_SHORT)
        reason, matched_word = self._find_match(password)
        if reason is not None:
            return ScreeningResult(Verdict.WEAK, reason, matched_word)
        return ScreeningResult(Verdict.STRONG)

    def check_password(self, password: str) -> Verdict:
        return self.screen(password).verdict

    def is_strong(self, password: str) -> bool:
        return self.screen(password).is_strong
