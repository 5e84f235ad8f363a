"""Logger shared by the psychrometric solvers and the configuration loader.

Messages emitted by the library:

- DEBUG: `newton_raphson` and `bisect_increasing` report the converged estimate and the
  iteration count of every dew point and wet bulb search.
- DEBUG: `Calculator` construction, `PreferredUnitSystem.set`, and the location of a
  discovered `.pypsy.toml`.
- WARNING: the dew point search fell back from Newton-Raphson to bisection, or a config
  file has no `pypsy.unit_system` value.

The console handler is attached at import and the logger level is INFO, so the solver
traces are hidden until the level is lowered. `enable_file_logging` adds a DEBUG file
handler with timestamps for collecting those traces.

Examples:
    ```python
    import logging
    from py_psychrocalc import Calculator
    from py_psychrocalc.logger import logger, enable_file_logging, disable_file_logging

    logger.setLevel(logging.DEBUG)
    enable_file_logging("psychro_debug.log")
    Calculator(unit_system='SI').t_dew_point_from_rel_hum(25.0, 0.5)
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

LOGGER_NAME = 'py_psychro'

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
console_handler.setLevel(logging.DEBUG)

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# Set by enable_file_logging, None otherwise
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Write every library message, including solver traces, to `filename`.

    Replaces a previously enabled file handler. The file is opened in append mode. The
    logger level still applies, so lower it to DEBUG to capture iteration counts.

    Args:
        filename: Log file path. Defaults to "debug.log".
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Detach and close the file handler. Does nothing when file logging is off."""
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
