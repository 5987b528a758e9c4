import json
import os
from typing import Optional, Dict, Any

from packages.ais_core.logging import get_logger
from packages.ais_usage.repository import UsageCounterStore

logger = get_logger("ais_usage.file_repo")

class FileUsageCounterStore(UsageCounterStore):
    """
    JSON file store holding a single {"date": ..., "count": ...} record.
    Only the latest date is kept; any other date reads as zero.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path

    def _read(self) -> Optional[Dict[str, Any]]:
        if not os.path.exists(self.file_path):
            return None
        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read usage counter from {self.file_path}: {e}")
            return None
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed usage record in {self.file_path}")
            return None
        return data

    def _write(self, date_key: str, count: int) -> None:
        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.file_path, 'w', encoding='utf-8') as f:
            json.dump({"date": date_key, "count": count}, f)

    def get(self, date_key: str) -> int:
        data = self._read()
        if data and data.get("date") == date_key:
            return int(data.get("count", 0))
        return 0

    def increment(self, date_key: str) -> int:
        count = self.get(date_key) + 1
        self._write(date_key, count)
        logger.info(f"Usage for {date_key} is now {count}")
        return count

    def clear(self) -> None:
        if os.path.exists(self.file_path):
            os.remove(self.file_path)
            logger.info(f"Cleared usage counter at {self.file_path}")
