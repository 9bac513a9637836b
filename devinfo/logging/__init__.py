# Module de logging sécurisé
from .safe_logger import get_safe_logger, SafeLoggerAdapter, configure_logging

__all__ = ['get_safe_logger', 'SafeLoggerAdapter', 'configure_logging']
