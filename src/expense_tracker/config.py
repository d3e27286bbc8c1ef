import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    data_path: Path
    storage_key: str
    log_level: str


def get_settings() -> Settings:
    return Settings(
        data_path=Path(os.getenv("EXPENSE_TRACKER_DATA_PATH", "data/expense_tracker.json")),
        storage_key=os.getenv("EXPENSE_TRACKER_STORAGE_KEY", "transactions"),
        log_level=os.getenv("EXPENSE_TRACKER_LOG_LEVEL", "INFO").upper(),
    )
