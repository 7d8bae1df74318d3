from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for 3.10
    import tomli as tomllib  # type: ignore[no-redef]

from .errors import ConfigError
from .rules import RuleStore

LOG = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class GeneratorConfig:
    files: Sequence[Path] = ()
    rule: Optional[str] = None
    count: int = 1
    seed: Optional[int] = None
    recursion_limit: Optional[int] = None


@dataclass(frozen=True)
class WebConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class Config:
    psr: GeneratorConfig = field(default_factory=GeneratorConfig)
    web: WebConfig = field(default_factory=WebConfig)


def _optional_int(section: Mapping[str, Any], key: str, minimum: Optional[int] = None) -> Optional[int]:
    value = section.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"psr.{key} must be an integer.")
    if minimum is not None and value < minimum:
        raise ConfigError(f"psr.{key} must be at least {minimum}.")
    return value


def _parse_files(raw: Any, base: Path) -> List[Path]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        raise ConfigError("psr.files must be a string or a list of strings.")
    files: List[Path] = []
    for entry in raw:
        if not isinstance(entry, str) or not entry.strip():
            raise ConfigError("psr.files entries must be non-empty strings.")
        path = Path(entry)
        if not path.is_absolute():
            path = (base / path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Grammar file not found: {path}")
        files.append(path)
    return files


def _parse_generator_section(raw: Any, base: Path) -> GeneratorConfig:
    if raw is None:
        return GeneratorConfig()
    if not isinstance(raw, Mapping):
        raise ConfigError("[psr] must be a table.")
    rule = raw.get("rule")
    if rule is not None and not isinstance(rule, str):
        raise ConfigError("psr.rule must be a string.")
    count = _optional_int(raw, "count", minimum=1)
    return GeneratorConfig(
        files=tuple(_parse_files(raw.get("files", []), base)),
        rule=rule,
        count=count if count is not None else 1,
        seed=_optional_int(raw, "seed"),
        recursion_limit=_optional_int(raw, "recursion_limit", minimum=1),
    )


def _parse_web_section(raw: Any) -> WebConfig:
    if raw is None:
        return WebConfig()
    if not isinstance(raw, Mapping):
        raise ConfigError("[web] must be a table.")
    port = raw.get("port", DEFAULT_PORT)
    if isinstance(port, bool) or not isinstance(port, int):
        raise ConfigError("web.port must be an integer.")
    return WebConfig(host=str(raw.get("host", DEFAULT_HOST)), port=port)


def load_config(path: str | Path) -> Config:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("rb") as handle:
        try:
            raw = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Malformed config file {config_path}: {exc}") from exc

    base = config_path.parent
    return Config(
        psr=_parse_generator_section(raw.get("psr"), base),
        web=_parse_web_section(raw.get("web")),
    )


def load_store(files: Sequence[Path], store: Optional[RuleStore] = None) -> RuleStore:
    """Parse every grammar file, in order, into one store."""
    if store is None:
        store = RuleStore()
    for path in files:
        LOG.debug("loading grammar file %s", path)
        store.parse(path.read_text(encoding="utf-8"))
    return store
