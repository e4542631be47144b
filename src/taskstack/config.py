"""Configuration management for taskstack."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


@dataclass
class HistoryConfig:
    """Undo history configuration."""
    # Maximum undo depth, 0 for unbounded
    max_undo: int = 100


@dataclass
class PathConfig:
    """Path configuration."""
    # Input history for the interactive prompt, None disables it
    prompt_history: Optional[Path] = field(
        default_factory=lambda: Path.home() / ".taskstack_history"
    )


@dataclass
class Config:
    """Main configuration class."""
    history: HistoryConfig = field(default_factory=HistoryConfig)
    paths: PathConfig = field(default_factory=PathConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        history_file = os.getenv("TASKSTACK_HISTORY_FILE")
        if history_file is None:
            prompt_history = Path.home() / ".taskstack_history"
        else:
            prompt_history = Path(history_file).expanduser() if history_file.strip() else None

        return cls(
            history=HistoryConfig(
                max_undo=int(os.getenv("TASKSTACK_MAX_HISTORY", "100")),
            ),
            paths=PathConfig(prompt_history=prompt_history),
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
        )


# Global config instance
config = Config.from_env()
