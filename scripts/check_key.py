import sys
import os

# Add the project root to sys.path
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../"))
sys.path.append(BASE_DIR)

from openai import OpenAI, APIConnectionError, APIStatusError

from packages.ais_core.config import AISConfig
from packages.ais_core.errors import ConfigurationError
from packages.ais_core.logging import get_logger

logger = get_logger("check_key")

def check_key() -> int:
    """
    Validate OPENAI_API_KEY by listing models. Returns a process exit code.
    """
    try:
        config = AISConfig.load()
    except ConfigurationError as e:
        print(f"[FAILURE] {e}")
        return 2

    key = (config.OPENAI_API_KEY or "").strip()
    if not key:
        print("[FAILURE] OPENAI_API_KEY is not set (environment or .env)")
        return 3

    client = OpenAI(api_key=key, timeout=config.NARRATION_TIMEOUT_SEC, max_retries=0)
    try:
        models = client.models.list()
    except APIStatusError as e:
        print(f"[FAILURE] OpenAI API responded with {e.status_code}")
        logger.error(f"Key check failed: {e}")
        return 5
    except APIConnectionError as e:
        print(f"[FAILURE] Network error: {e}")
        logger.error(f"Key check failed: {e}")
        return 6

    count = len(models.data)
    print(f"[SUCCESS] OpenAI key looks valid. Models received: {count}")
    return 0

if __name__ == "__main__":
    sys.exit(check_key())
