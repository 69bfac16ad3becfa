from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import cast

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "default_config.yaml"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DecoderConfigError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


@dataclass(frozen=True, slots=True)
class DecoderConfig:
    kradfile: Path | None
    kradfile_encoding: str
    log_level: int
    fail_fast: bool


def load_decoder_config(path: str | Path | None = None) -> DecoderConfig:
    selected_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    return _load_decoder_config_cached(str(selected_path.resolve()))


@cache
def _load_decoder_config_cached(path: str) -> DecoderConfig:
    target = Path(path)
    raw = _read_yaml_file(target)
    decomposition = _require_mapping(raw, "decomposition")
    logging_block = _require_mapping(raw, "logging")
    corpus = _require_mapping(raw, "corpus")
    return DecoderConfig(
        kradfile=_optional_path(decomposition, "kradfile", target.parent),
        kradfile_encoding=_require_encoding(decomposition, "encoding"),
        log_level=_require_log_level(logging_block, "level"),
        fail_fast=_require_bool(corpus, "fail_fast"),
    )


def _read_yaml_file(path: Path) -> dict[str, object]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DecoderConfigError(
            "E_DECODER_CONFIG_READ_FAILED",
            f"unable to read decoder config '{path}': {exc}",
        ) from exc
    try:
        payload = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise DecoderConfigError(
            "E_DECODER_CONFIG_PARSE_FAILED",
            f"invalid decoder config yaml in '{path}': {exc}",
        ) from exc
    if not isinstance(payload, dict):
        raise DecoderConfigError(
            "E_DECODER_CONFIG_INVALID",
            "decoder config root must be a mapping",
        )
    return cast(dict[str, object], payload)


def _require_mapping(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return cast(dict[str, object], value)
    raise DecoderConfigError(
        "E_DECODER_CONFIG_INVALID", f"missing or invalid mapping for key '{key}'"
    )


def _require_string(data: dict[str, object], key: str) -> str:
    value = data.get(key)
    if isinstance(value, str) and value:
        return value
    raise DecoderConfigError(
        "E_DECODER_CONFIG_INVALID", f"missing or invalid string for key '{key}'"
    )


def _require_bool(data: dict[str, object], key: str) -> bool:
    value = data.get(key)
    if isinstance(value, bool):
        return value
    raise DecoderConfigError("E_DECODER_CONFIG_INVALID", f"missing or invalid bool for key '{key}'")


def _optional_path(data: dict[str, object], key: str, base: Path) -> Path | None:
    if data.get(key) is None:
        return None
    # relative paths are taken from the config file's directory
    return (base / _require_string(data, key)).resolve()


def _require_encoding(data: dict[str, object], key: str) -> str:
    name = _require_string(data, key)
    try:
        return codecs.lookup(name).name
    except LookupError as exc:
        raise DecoderConfigError(
            "E_DECODER_CONFIG_INVALID", f"unknown text encoding '{name}' for key '{key}'"
        ) from exc


def _require_log_level(data: dict[str, object], key: str) -> int:
    name = _require_string(data, key).upper()
    if name not in _LOG_LEVELS:
        raise DecoderConfigError(
            "E_DECODER_CONFIG_INVALID",
            f"log level for key '{key}' must be one of {', '.join(_LOG_LEVELS)}",
        )
    return logging.getLevelNamesMapping()[name]
