from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

DEFAULT_CSV_PATH = "problems.csv"
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_SEED = 1


def _as_int(name: str, value: Any) -> int:
    """Accept ints and integer strings such as "10"; reject everything else."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"{name} must be an integer, got {value!r}")


def _as_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def _as_str(name: str, value: Any, optional: bool = False) -> Optional[str]:
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")
    return value


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    log_dir: Optional[str] = None  # no log file unless set
    filename: str = "quizrunner.log"
    console: bool = False

    def __post_init__(self) -> None:
        self.level = _as_str("logging.level", self.level)
        self.log_dir = _as_str("logging.log_dir", self.log_dir, optional=True)
        self.filename = _as_str("logging.filename", self.filename)
        self.console = _as_bool("logging.console", self.console)

    def file_path(self) -> Optional[Path]:
        if not self.log_dir:
            return None
        return Path(self.log_dir) / self.filename


@dataclass
class DeterminismConfig:
    seed: int = DEFAULT_SEED  # used for the unshuffled order

    def __post_init__(self) -> None:
        self.seed = _as_int("determinism.seed", self.seed)


@dataclass
class QuizConfig:
    csv_path: str = DEFAULT_CSV_PATH
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    shuffle: bool = False

    def __post_init__(self) -> None:
        self.csv_path = _as_str("quiz.csv_path", self.csv_path)
        self.timeout_seconds = _as_int("quiz.timeout_seconds", self.timeout_seconds)
        self.shuffle = _as_bool("quiz.shuffle", self.shuffle)


@dataclass
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    determinism: DeterminismConfig = field(default_factory=DeterminismConfig)
    quiz: QuizConfig = field(default_factory=QuizConfig)

    @staticmethod
    def from_json(path: str | Path) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        return AppConfig(
            logging=LoggingConfig(**payload.get("logging", {})),
            determinism=DeterminismConfig(**payload.get("determinism", {})),
            quiz=QuizConfig(**payload.get("quiz", {})),
        )

    def to_json(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump({
                "logging": asdict(self.logging),
                "determinism": asdict(self.determinism),
                "quiz": asdict(self.quiz),
            }, f, indent=2, ensure_ascii=False)

    def with_overrides(
        self,
        csv_path: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
        shuffle: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> "AppConfig":
        """Return a copy with every explicitly given value applied."""
        quiz_changes: dict[str, Any] = {}
        if csv_path is not None:
            quiz_changes["csv_path"] = csv_path
        if timeout_seconds is not None:
            quiz_changes["timeout_seconds"] = timeout_seconds
        if shuffle is not None:
            quiz_changes["shuffle"] = shuffle

        logging_cfg = self.logging
        if log_level is not None:
            logging_cfg = replace(logging_cfg, level=log_level)

        return replace(self, logging=logging_cfg, quiz=replace(self.quiz, **quiz_changes))


def default_app_config() -> AppConfig:
    return AppConfig(
        logging=LoggingConfig(),
        determinism=DeterminismConfig(),
        quiz=QuizConfig(),
    )
