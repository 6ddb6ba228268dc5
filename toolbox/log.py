"""
Logging setup for toolbox
"""

import logging
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: Union[str, int] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the root logger and return the toolbox logger"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    logger = logging.getLogger('toolbox')
    logger.setLevel(level)
    return logger

def setup_logging_from_config(config) -> logging.Logger:
    """Configure logging from a ToolboxConfig"""
    return setup_logging(config.log_level, config.log_file)
