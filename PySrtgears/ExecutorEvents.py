import logging
from blinker import Signal

from PySrtgears.Helpers import GetValueName


class ExecutorEvents:
    """
    Container for blinker signals emitted while executing subtitle transformations.

    Signals:
        operation_applied(sender, operation):
            Emitted after each transformation is applied to the subtitles

        warning(sender, message):
            Signals a problem that did not stop the execution

        info(sender, message):
            General informational message
    """
    operation_applied: Signal
    warning: Signal
    info: Signal

    def __init__(self):
        self.operation_applied = Signal("executor-operation-applied")
        self.warning = Signal("executor-warning")
        self.info = Signal("executor-info")

        # Wrapper functions to adapt signal kwargs to logger positional args
        self._default_operation_wrapper = lambda sender, operation: logging.info(f"Applied {GetValueName(operation)}")
        self._default_warning_wrapper = lambda sender, message: logging.warning(message)
        self._default_info_wrapper = lambda sender, message: logging.info(message)

    def connect_default_loggers(self):
        """
        Connect default logging handlers to the signals.
        """
        self.operation_applied.connect(self._default_operation_wrapper, weak=False)
        self.warning.connect(self._default_warning_wrapper, weak=False)
        self.info.connect(self._default_info_wrapper, weak=False)

    def disconnect_default_loggers(self):
        """
        Disconnect default logging handlers from the signals.
        """
        self.operation_applied.disconnect(self._default_operation_wrapper)
        self.warning.disconnect(self._default_warning_wrapper)
        self.info.disconnect(self._default_info_wrapper)
