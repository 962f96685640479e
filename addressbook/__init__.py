"""addressbook - a prefix-based command argument tokenizer."""

from loguru import logger

__version__ = "0.1.0"

# Silent when used as a library; setup_logger turns logging back on
logger.disable("addressbook")
