from cli2048.utils.log import LOG_FORMAT, setup_logging

__all__ = ["LOG_FORMAT", "setup_logging"]
