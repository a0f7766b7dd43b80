import os
import logging

# --- Logging Setup ---
LOG_LEVEL = os.getenv("GEOCONVERT_LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# --- Environment Variables & Basic Config ---
_DEFAULT_CORS_ORIGINS = "http://localhost,http://localhost:5173,http://127.0.0.1:5173"

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("GEOCONVERT_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS).split(",")
    if origin.strip()
]

# 格式化 UTM 結果時預設保留的小數位數
_precision = os.getenv("GEOCONVERT_DEFAULT_UTM_PRECISION", "0")
try:
    DEFAULT_UTM_PRECISION = int(_precision)
except ValueError:
    logger.critical(
        f"GEOCONVERT_DEFAULT_UTM_PRECISION must be an integer. Received: {_precision}"
    )
    raise

if DEFAULT_UTM_PRECISION < 0:
    logger.warning(
        f"GEOCONVERT_DEFAULT_UTM_PRECISION is negative ({DEFAULT_UTM_PRECISION}), using 0."
    )
    DEFAULT_UTM_PRECISION = 0
