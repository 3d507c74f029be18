"""Reading the dictionary source and bulk loading it into both tables."""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, Tuple

from screening.chained_dictionary import ChainedDictionary, DEFAULT_CHAINING_SIZE
from screening.errors import DictionaryLoadError
from screening.probed_dictionary import ProbedDictionary, DEFAULT_PROBING_SIZE

logger = logging.getLogger(__name__)


def read_wordlist(path: str, encoding: str = "utf-8",
                  skip_blank_lines: bool = False) -> Iterator[Tuple[int, str]]:
    """
    Yields (line_number, word) for every line of the wordlist
    Only the line terminator is stripped, any other whitespace is part of
    the word.
    Args:
        path: location of the wordlist, one word per line
        encoding: text encoding of the file
        skip_blank_lines: drop empty lines instead of yielding empty words
    """
    try:
        with open(path, 'r', encoding=encoding, newline='') as file:
            for line_number, line in enumerate(file, 1):
                word = line.rstrip('\r\n')
                if not word and skip_blank_lines:
                    logger.debug(f"Skipping blank line {line_number} in {path}")
                    continue
                yield line_number, word
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Reading the wordlist {path} failed:\n{e}")


def load_dictionaries(words: Iterable[str],
                      chaining_size: int = DEFAULT_CHAINING_SIZE,
                      probing_size: int = DEFAULT_PROBING_SIZE,
                      parallel: bool = False) -> Tuple[ChainedDictionary, ProbedDictionary]:
    """
    Inserts every word into a fresh chained table and a fresh probed table
    Both tables are completely filled when this returns. With parallel set,
    each table is filled by its own worker and both are joined before
    returning; an error in either worker is raised here.
    """
    words = list(words)
    chained = ChainedDictionary(chaining_size)
    probed = ProbedDictionary(probing_size)
    logger.info(f"Loading {len(words)} dictionary words")

    if parallel:
        logger.debug("Filling both tables in parallel")
        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [
                executor.submit(chained.insert_all, words),
                executor.submit(probed.insert_all, words),
            ]
            for future in futures:
                future.result()
    else:
        for word in words:
            chained.insert(word)
            probed.insert(word)

    logger.info(
        f"Dictionary loaded: chaining load factor {chained.get_info()['load_factor']:.3f}, "
        f"probing load factor {probed.get_info()['load_factor']:.3f}"
    )
    return chained, probed
