"""Logging configuration for applications built on pyplaid.

Standard usage:
    ```python
    import logging
    from pyplaid.logging import setup_logging

    # Configure once at application startup
    setup_logging()

    # Get loggers in each module
    logger = logging.getLogger(__name__)
    ```
"""

from .config import LoggingConfig, setup_logging

__all__ = ["LoggingConfig", "setup_logging"]
