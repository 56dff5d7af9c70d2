import sys
from loguru import logger
from resume_screener.core.config import settings

# Configure Logging
def setup_logging():
    # Remove default handler
    logger.remove()

    # Add Console Handler (for Docker/Dev)
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=settings.LOG_LEVEL,
    )

    # Add File Handler (Rotation every 10MB, Retention 10 days)
    if settings.LOG_TO_FILE:
        logger.add(
            settings.LOG_DIR / "app.log",
            rotation="10 MB",
            retention="10 days",
            level="DEBUG",
            compression="zip"
        )

    return logger

# Initialize
app_logger = setup_logging()
