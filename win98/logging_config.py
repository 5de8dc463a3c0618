"""
Logging Configuration
Sets up the package logger for the desktop skin.
"""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configures the logger for the 'win98' namespace.

    Streamlit re-executes the script on every interaction, so this is called
    many times per session; existing handlers are replaced, not stacked.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
    """
    logger = logging.getLogger("win98")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    logger.debug("Logging initialized.")
