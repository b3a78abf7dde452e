"""Base service logging mixin.

Every application service logs through the same structured pattern so the
host can filter Exam Guard entries by service and operation.

Usage:
    from examguard.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, dependency: SomePort) -> None:
            self._dependency = dependency
            self._init_logger()

        async def do_something(self, activity_id: int) -> None:
            log = self._log_operation("do_something", activity_id=activity_id)
            log.info("operation_started")
            # ... do work ...
            log.info("operation_completed")
"""

import structlog


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with:
    - service: The class name of the service
    - component: The component type (default: "examguard")

    Each operation adds an `operation` key plus any context passed to
    _log_operation(). Request-scoped keys bound by the host through
    structlog contextvars are merged in at render time.

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "examguard") -> None:
        """Initialize the logger with service name binding.

        Should be called in __init__ after setting up dependencies.

        Args:
            component: The component type for log categorization.
        """
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create an operation-scoped logger.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation context.

        Example:
            log = self._log_operation("apply_extension", activity_id=42)
            log.info("extension_started", minutes=15)
        """
        return self._log.bind(operation=operation, **context)
