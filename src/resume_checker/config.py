"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_TARGET_ROLE = "Software Developer (Fresher)"


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 4096
    temperature: float = 0.0
    timeout: int = 60


@dataclass(frozen=True)
class ExtractionConfig:
    min_chars: int = 50
    ocr_language: str = "eng"
    ocr_timeout: int = 90
    ocr_dpi: int = 200


@dataclass(frozen=True)
class PipelineConfig:
    default_target_role: str = DEFAULT_TARGET_ROLE


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    server: ServerConfig = field(default_factory=ServerConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    server_raw = dict(raw.get("server", {}))
    if "cors_origins" in server_raw:
        server_raw["cors_origins"] = tuple(server_raw["cors_origins"])

    config = AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        extraction=ExtractionConfig(**raw.get("extraction", {})),
        pipeline=PipelineConfig(**raw.get("pipeline", {})),
        server=ServerConfig(**server_raw),
    )
    _validate(config)
    return config


def get_api_key() -> str | None:
    """Return the model provider credential from the environment."""
    return os.environ.get("ANTHROPIC_API_KEY") or None


def _validate(config: AppConfig) -> None:
    checks = [
        ("timeout", config.llm.timeout, 1, 600),
        ("max_tokens", config.llm.max_tokens, 1, 64000),
        ("min_chars", config.extraction.min_chars, 0, 10000),
        ("ocr_timeout", config.extraction.ocr_timeout, 1, 3600),
        ("ocr_dpi", config.extraction.ocr_dpi, 72, 600),
        ("port", config.server.port, 1, 65535),
    ]
    for name, value, low, high in checks:
        if not low <= value <= high:
            raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    if not config.extraction.ocr_language.strip():
        raise ValueError("ocr_language must not be empty")
    if not config.pipeline.default_target_role.strip():
        raise ValueError("default_target_role must not be empty")
