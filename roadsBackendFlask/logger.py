"""
Logging configuration for the Roads backend
"""
import logging

from .config import LOG_LEVEL

def setup_logging():
    """Configure logging for the application"""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s %(message)s")

def get_logger(name: str = "roads") -> logging.Logger:
    """Get a logger instance with the given name"""
    return logging.getLogger(name)

# setup_logging() is called in app.py.
log = get_logger("roads")
