import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DB_PATH = "data/infokeeper.db"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs"


def load_env(env_path: Optional[Path] = None) -> bool:
    """Load .env from the working directory if present.
    Variables already set in the environment win over the file.
    """
    env_path = env_path or Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(dotenv_path=env_path, override=False)


@dataclass(frozen=True)
class Settings:
    db_path: Path
    log_level: str
    log_dir: Path

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            db_path=Path(os.getenv("INFOKEEPER_DB", DEFAULT_DB_PATH)),
            log_level=os.getenv("INFOKEEPER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            log_dir=Path(os.getenv("INFOKEEPER_LOG_DIR", DEFAULT_LOG_DIR)),
        )
