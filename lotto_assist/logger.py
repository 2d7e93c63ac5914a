# app-wide logging setup, modules import this shared logger directly
import logging

from .config import LOG_FILE, LOG_LEVEL

logger = logging.getLogger("lotto_assist")
logger.setLevel(LOG_LEVEL)

# only attach a handler once, reloads and repeated imports reuse it
if not logger.handlers:
    handler: logging.Handler = (
        logging.FileHandler(LOG_FILE, encoding="utf-8") if LOG_FILE else logging.StreamHandler()
    )
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
