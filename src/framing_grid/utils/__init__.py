from .logging_config import FramingGridLogger, TRACE_LEVEL, get_logger

__all__ = ["FramingGridLogger", "TRACE_LEVEL", "get_logger"]
