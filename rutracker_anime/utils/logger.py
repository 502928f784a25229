import sys
import logging
from loguru import logger


# ===========================
# Log Contexts Configuration
# ===========================
CONTEXT_COLORS = {
    "PROVIDER": "green",
    "API": "cyan",
    "PIPELINE": "yellow",
    "SCRAPER": "blue",
}


# ===========================
# Log Formatter
# ===========================
def format_log(record):
    color = CONTEXT_COLORS.get(record["extra"].get("context"), "white")

    return (
        "<white>{time:YYYY-MM-DD HH:mm:ss}</white> | "
        "<level>{level: <8}</level> | "
        f"<{color}>{{extra[context]: <8}}</{color}> | "
        "<level>{message}</level>\n"
    )


# ===========================
# Logger Setup Function
# ===========================
def setup_logger(level: str = "INFO"):
    logger.remove()
    logger.configure(extra={"context": "PROVIDER"})
    logger.add(sys.stderr, level=level, format=format_log, colorize=True, backtrace=True, diagnose=False)


# ===========================
# Logger Instances
# ===========================
provider_logger = logger.bind(context="PROVIDER")
api_logger = logger.bind(context="API")
pipeline_logger = logger.bind(context="PIPELINE")
scraper_logger = logger.bind(context="SCRAPER")


# ===========================
# External Loggers Suppression
# ===========================
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").disabled = True
