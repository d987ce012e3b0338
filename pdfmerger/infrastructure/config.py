from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from pdfmerger.domain.errors import ConfigurationError

VALIDATION_MODES = ("relaxed", "strict")
DIRECTORY_SEPARATOR = "::"


def _get_choice_env(name: str, default: str, choices: Sequence[str]) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    return value if value in choices else default


def _get_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class AppConfig:
    validation_mode: str = field(
        default_factory=lambda: _get_choice_env(
            "PDFMERGER_VALIDATION_MODE", "relaxed", VALIDATION_MODES
        )
    )
    log_file_name: str = field(
        default_factory=lambda: _get_str_env("PDFMERGER_LOG_FILE", "log.txt")
    )


@dataclass(frozen=True)
class RunContext:
    input_dir: Path
    output_dir: Path
    config: AppConfig = field(default_factory=AppConfig)
    dry_run: bool = False

    @property
    def log_file(self) -> Path | None:
        # dry runs log to the console only
        if self.dry_run:
            return None
        return self.output_dir / self.config.log_file_name


def resolve_directories(
    input_dir: str | None, output_dir: str | None, args: Sequence[str]
) -> tuple[Path, Path]:
    """Pick the input and output directories from flags or a combined argument.

    Either both flags are given, or neither is and the positional arguments
    form a single ``INPUT::OUTPUT`` value.
    """
    if input_dir and output_dir:
        return Path(input_dir), Path(output_dir)

    if input_dir or output_dir:
        raise ConfigurationError("must use both -i and -o or neither")

    line = " ".join(args)
    parts = line.split(DIRECTORY_SEPARATOR)
    if len(parts) != 2:
        raise ConfigurationError(
            f"expected INPUT{DIRECTORY_SEPARATOR}OUTPUT, got {line!r}"
        )

    resolved_input = parts[0].strip()
    resolved_output = parts[1].strip()
    if not resolved_input or not resolved_output:
        raise ConfigurationError(
            f"both directories are required in INPUT{DIRECTORY_SEPARATOR}OUTPUT, got {line!r}"
        )
    return Path(resolved_input), Path(resolved_output)
