"""Runtime settings read from the environment and an optional ``.env`` file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "GAUSSIAN_BAYES_"

BUNDLED_DATA_DIR = Path(str(resources.files("gaussian_bayes") / "datasets"))

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class BuiltinDataset:
    """A dataset offered by the interactive menu."""

    key: str
    title: str
    filename: str


BUILTIN_DATASETS: tuple[BuiltinDataset, ...] = (
    BuiltinDataset("iris", "Iris Dataset", "iris.csv"),
    BuiltinDataset("banknote", "Banknote Dataset", "banknote_authentication.csv"),
)


@dataclass
class Settings:
    """Settings shared by the CLI commands.

    Attributes:
        data_dir: Directory holding the built-in dataset files. ``None``
            means the files shipped inside the package.
        strict: Fail on classes with fewer than two training rows.
        log_level: Name of the root logging level.
    """

    data_dir: Optional[Path] = None
    strict: bool = False
    log_level: str = "WARNING"

    @property
    def resolved_data_dir(self) -> Path:
        return self.data_dir if self.data_dir is not None else BUNDLED_DATA_DIR

    def dataset_path(self, key: str) -> Path:
        """Path of a built-in dataset file.

        Raises:
            ValueError: If ``key`` is not a built-in dataset.
        """
        for builtin in BUILTIN_DATASETS:
            if builtin.key == key:
                return self.resolved_data_dir / builtin.filename
        known = ", ".join(b.key for b in BUILTIN_DATASETS)
        raise ValueError(f"Unknown dataset '{key}'. Known: {known}")


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_log_level(name: str, value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {value!r}")
    return level


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build ``Settings`` from ``GAUSSIAN_BAYES_*`` environment variables.

    Values in ``env_file`` (or a ``.env`` found from the working directory)
    fill in variables that are not already set.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))
    defaults = Settings()

    data_dir = os.getenv(f"{ENV_PREFIX}DATA_DIR")
    strict = os.getenv(f"{ENV_PREFIX}STRICT")
    log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")

    return Settings(
        data_dir=Path(data_dir) if data_dir else defaults.data_dir,
        strict=_parse_bool(f"{ENV_PREFIX}STRICT", strict) if strict is not None else defaults.strict,
        log_level=(
            _parse_log_level(f"{ENV_PREFIX}LOG_LEVEL", log_level)
            if log_level
            else defaults.log_level
        ),
    )
