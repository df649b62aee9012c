import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class AppHooks(Protocol):
    """
    Protocol for application hooks to follow a comparison run.
    This can be implemented by the main application (CLI, upload server)
    to show progress and to cancel long runs.

    Methods:
        report_step(...) -> None:
            Report progress of the comparison.
        stop_requested() -> bool:
            Ask whether the run should stop.
    """
    def report_step(self, info: str = "", target: int = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from the comparison process.

        Args:
            info (str): Progress message.
            target (int): Number of steps expected in this stage.
            reset_counter (bool): Start counting from zero.
            plus_step (int): Steps completed since the last report.
        """
        pass

    def stop_requested(self) -> bool:
        """
        Check if a stop has been requested by the user.

        Returns:
            bool: True if stop is requested, False otherwise.
        """
        return False


class HookedProcess:
    """
    Mixin for steps of a comparison run that talk to optional AppHooks.

    The host class provides an ``app_hooks`` attribute (None when the caller
    passes no hooks).
    """
    app_hooks: Optional[AppHooks]

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False,
                     plus_step: int = 0) -> None:
        if self.app_hooks is not None and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        elif info:
            logger.debug(info)

    def _stop_requested(self, stop_message: str = "Stop requested by user") -> bool:
        """True if the hooks ask to stop; the message is logged once."""
        if self.app_hooks is None or not callable(getattr(self.app_hooks, "stop_requested", None)):
            return False
        if not self.app_hooks.stop_requested():
            return False
        logger.info(stop_message)
        return True
