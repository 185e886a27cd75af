"""
Tiered logging system for PHYS 2150 simulation applications.

Provides three output tiers:
- Tier 1 (student): status line, plain language, pedagogically relevant
- Tier 2 (info): Console output, parameters and results
- Tier 3 (debug): Log file only, full technical details for staff debugging

Staff debug mode promotes debug messages to console.
"""

import logging
from pathlib import Path
from typing import Optional, Callable, List, Dict
from logging.handlers import RotatingFileHandler


class MeasurementStats:
    """Spread of the repeated readings behind one averaged measurement."""

    # (upper CV %, label), checked in order
    QUALITY_LEVELS = ((1.0, "Excellent"), (5.0, "Good"), (10.0, "Fair"))

    def __init__(
        self,
        mean: float,
        std_dev: float,
        n_measurements: int,
        cv_percent: float = 0.0,
        voltage: Optional[float] = None,
        unit: str = "µA"
    ):
        self.mean = mean
        self.std_dev = std_dev
        self.n_measurements = n_measurements
        self.cv_percent = cv_percent
        self.voltage = voltage
        self.unit = unit

    @property
    def quality(self) -> str:
        """Reading spread label; zero current has no meaningful CV."""
        if self.mean == 0:
            return "No current"
        for limit, label in self.QUALITY_LEVELS:
            if self.cv_percent < limit:
                return label
        return "Noisy"

    def format_for_student(self) -> str:
        """Format statistics for student-facing display."""
        location = f" at {self.voltage:.1f} V" if self.voltage is not None else ""
        return (
            f"Measurement{location}: {self.mean:.3f} ± {self.std_dev:.3f} {self.unit} "
            f"({self.n_measurements} readings, {self.quality})"
        )

    def format_for_console(self) -> str:
        """Format statistics for console output."""
        location = f"{self.voltage:+.2f} V: " if self.voltage is not None else ""
        return (
            f"{location}{self.mean:.4f} ± {self.std_dev:.4f} {self.unit} "
            f"(n={self.n_measurements}, CV={self.cv_percent:.1f}%)"
        )


class TieredLogger:
    """
    Tiered logging system for undergraduate lab software.

    Routes messages to appropriate outputs based on audience:
    - student(): status line, plain language
    - info(): Console, brief technical info
    - debug(): File only (or console in staff mode)

    Usage:
        logger = TieredLogger("photoelectric")
        logger.student("Light ON - adjust voltage to take measurements")
        logger.info("Sodium, 400 nm: stopping potential 0.82 V")
        logger.debug("Box-Muller draws: 20")
    """

    _instances: Dict[str, 'TieredLogger'] = {}
    _staff_debug_mode: bool = False

    def __init__(
        self,
        name: str,
        log_dir: Optional[Path] = None,
        status_callback: Optional[Callable[[str], None]] = None,
        stats_callback: Optional[Callable[[MeasurementStats], None]] = None,
        error_callback: Optional[Callable[[str, str, List[str], List[str]], None]] = None
    ):
        """
        Initialize the tiered logger.

        Args:
            name: Logger name (e.g., "photoelectric")
            log_dir: Directory for log files (default: current directory)
            status_callback: Callback for student-tier messages (status line)
            stats_callback: Callback for measurement statistics
            error_callback: Callback for error dialogs (title, message, causes, actions)
        """
        self.name = name
        self.log_dir = log_dir or Path.cwd()
        self.status_callback = status_callback
        self.stats_callback = stats_callback
        self.error_callback = error_callback

        self._setup_logging()

        TieredLogger._instances[name] = self

    def _setup_logging(self) -> None:
        """Configure Python logging handlers."""
        self._logger = logging.getLogger(f"phys2150.{self.name}")
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers.clear()

        # Console handler (INFO level by default)
        self._console_handler = logging.StreamHandler()
        self._console_handler.setLevel(TieredLogger._console_level())
        console_format = logging.Formatter(
            '%(asctime)s %(message)s',
            datefmt='%H:%M:%S'
        )
        self._console_handler.setFormatter(console_format)
        self._logger.addHandler(self._console_handler)

        # File handler (DEBUG level, with rotation)
        log_file = self.log_dir / f"{self.name}_debug.log"
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=5*1024*1024,  # 5 MB
                backupCount=3
            )
        except OSError as e:
            self._logger.warning(f"Debug log file unavailable ({log_file}): {e}")
            return
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        self._logger.addHandler(file_handler)

    @classmethod
    def get_logger(cls, name: str) -> 'TieredLogger':
        """Get or create a logger instance by name."""
        if name not in cls._instances:
            cls._instances[name] = TieredLogger(name)
        return cls._instances[name]

    @classmethod
    def set_staff_debug_mode(cls, enabled: bool) -> None:
        """
        Enable or disable staff debug mode.

        When enabled, DEBUG-level messages appear in console.
        """
        cls._staff_debug_mode = enabled
        for logger in cls._instances.values():
            logger._console_handler.setLevel(cls._console_level())

    @classmethod
    def _console_level(cls) -> int:
        return logging.DEBUG if cls._staff_debug_mode else logging.INFO

    @classmethod
    def is_staff_debug_mode(cls) -> bool:
        """Check if staff debug mode is enabled."""
        return cls._staff_debug_mode

    def set_status_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set callback for student-tier messages."""
        self.status_callback = callback

    def set_stats_callback(
        self,
        callback: Optional[Callable[[MeasurementStats], None]]
    ) -> None:
        """Set callback for measurement statistics display."""
        self.stats_callback = callback

    def set_error_callback(
        self,
        callback: Optional[Callable[[str, str, List[str], List[str]], None]]
    ) -> None:
        """Set callback for error dialogs."""
        self.error_callback = callback

    # -------------------------------------------------------------------------
    # Tier 1: Student-facing messages
    # -------------------------------------------------------------------------

    def student(self, message: str) -> None:
        """
        Log a student-facing message.

        These appear in the status line and should be plain language,
        connected to the physics being demonstrated.

        Args:
            message: Student-friendly status message
        """
        self._logger.info(f"[STUDENT] {message}")

        if self.status_callback:
            self.status_callback(message)

    def student_stats(self, stats: MeasurementStats) -> None:
        """
        Display measurement statistics to students.

        Args:
            stats: MeasurementStats object with mean, std_dev, etc.
        """
        self._logger.info(stats.format_for_console())

        if self.stats_callback:
            self.stats_callback(stats)

    def student_error(
        self,
        title: str,
        message: str,
        causes: Optional[List[str]] = None,
        actions: Optional[List[str]] = None
    ) -> None:
        """
        Show an error with actionable guidance.

        Every error students see should answer:
        1. What happened?
        2. Why might it have happened?
        3. What should I do?

        Args:
            title: Short error title
            message: Explanation of what went wrong
            causes: List of possible causes
            actions: List of suggested actions
        """
        causes = causes or []
        actions = actions or []

        self._logger.error(f"{title}: {message}")
        for cause in causes:
            self._logger.error(f"  Possible cause: {cause}")
        for action in actions:
            self._logger.error(f"  Suggested action: {action}")

        if self.error_callback:
            self.error_callback(title, message, causes, actions)

    # -------------------------------------------------------------------------
    # Tier 2: Console messages (INFO level)
    # -------------------------------------------------------------------------

    def info(self, message: str) -> None:
        """Log an informational message to console."""
        self._logger.info(message)

    def error(self, message: str) -> None:
        """
        Log an error message (technical, for staff).

        For student-facing errors, use student_error() instead.
        """
        self._logger.error(message)

    # -------------------------------------------------------------------------
    # Tier 3: Debug messages (file only, unless staff mode)
    # -------------------------------------------------------------------------

    def debug(self, message: str) -> None:
        """
        Log a debug message.

        Only visible in the log file, or in the console when staff
        debug mode is enabled.
        """
        self._logger.debug(message)


def get_logger(name: str) -> TieredLogger:
    """Get or create a TieredLogger instance."""
    return TieredLogger.get_logger(name)
