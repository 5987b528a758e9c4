from .config import get_logger, setup_logging, build_logging_config, LOG_FORMAT, LOG_DATEFMT

__all__ = ["get_logger", "setup_logging", "build_logging_config", "LOG_FORMAT", "LOG_DATEFMT"]
