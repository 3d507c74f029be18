import dataclasses
import json
import os
from dataclasses import dataclass
from typing import Mapping, Optional


class ConfigurationError(ValueError):
    """Raised when the screener configuration is unreadable or invalid"""


@dataclass(frozen=True)
class ScreenerConfig:
    """Settings for building the dictionaries and checking passwords"""
    wordlist_path: str = "lib/wordlist.txt"
    chaining_size: int = 1000
    probing_size: int = 20000
    min_password_length: int = 8
    skip_blank_lines: bool = False
    encoding: str = "utf-8"
    parallel_load: bool = False


def _parse_positive_int(value) -> int:
    if isinstance(value, bool):
        raise ValueError("expected an integer, got a boolean")
    if not isinstance(value, (int, str)):
        raise ValueError(f"expected an integer, got {value!r}")
    number = int(value)
    if number <= 0:
        raise ValueError("must be greater than zero")
    return number


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ('true', '1', 'yes', 'on'):
        return True
    if text in ('false', '0', 'no', 'off'):
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _parse_text(value) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError("expected a non-empty string")
    return value


class ConfigManager():
    """
    Builds a ScreenerConfig from defaults, an optional JSON file and the
    environment, in that order of precedence (later wins)
    Args:
        environ: mapping to read overrides from, defaults to os.environ
    """
    ENV_PREFIX = "PASSWORD_SCREENER_"

    FIELD_PARSERS = {
        'wordlist_path': _parse_text,
        'chaining_size': _parse_positive_int,
        'probing_size': _parse_positive_int,
        'min_password_length': _parse_positive_int,
        'skip_blank_lines': _parse_bool,
        'encoding': _parse_text,
        'parallel_load': _parse_bool,
    }

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def load(self, json_file_path: Optional[str] = None) -> ScreenerConfig:
        """Loads configuration, raising ConfigurationError on any bad value"""
        values = {}
        if json_file_path is not None:
            values.update(self._read_json(json_file_path))
        for field_name in self.FIELD_PARSERS:
            env_key = self.ENV_PREFIX + field_name.upper()
            if env_key in self.environ:
                values[field_name] = self.environ[env_key]
        return self._build(values)

    def override(self, config: ScreenerConfig, **changes) -> ScreenerConfig:
        """Applies explicit overrides, None values are left untouched"""
        values = dataclasses.asdict(config)
        values.update({key: value for key, value in changes.items() if value is not None})
        return self._build(values)

    def _read_json(self, json_file_path: str) -> dict:
        try:
            with open(json_file_path, 'r') as file:
                data = json.load(file)
        except OSError as e:
            raise ConfigurationError(f"Reading the configuration file {json_file_path} failed:\n{e}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {json_file_path} is not valid JSON:\n{e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {json_file_path} must contain a JSON object")
        return data

    def _build(self, values: dict) -> ScreenerConfig:
        parsed = {}
        for key, value in values.items():
            parser = self.FIELD_PARSERS.get(key)
            if parser is None:
                raise ConfigurationError(f"Unknown configuration key: {key}")
            try:
                parsed[key] = parser(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid value for {key}:\n{e}")
        return ScreenerConfig(**parsed)
