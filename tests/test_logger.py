import importlib
import logging

from py_psychrocalc import Psychrometrics, UnitSystem
from py_psychrocalc import logger as package_logger
from py_psychrocalc.logger import logger, enable_file_logging, disable_file_logging


logger_module = importlib.import_module("py_psychrocalc.logger")


class TestLogger:

    def test_single_logger(self):
        assert package_logger is logger
        assert logger.name == 'py_psychro'

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "psychro.log"
        enable_file_logging(str(log_file))
        try:
            assert isinstance(logger_module.file_handler, logging.FileHandler)
            logger.debug("dew point trace")
        finally:
            disable_file_logging()
        assert logger_module.file_handler is None
        assert "dew point trace" in log_file.read_text()

    def test_disable_without_enable(self):
        disable_file_logging()
        assert logger_module.file_handler is None

    def test_solver_trace_in_file(self, tmp_path):
        log_file = tmp_path / "solver.log"
        enable_file_logging(str(log_file))
        try:
            Psychrometrics(UnitSystem.SI).t_dew_point_from_rel_hum(25.0, 0.5)
        finally:
            disable_file_logging()
        text = log_file.read_text()
        assert "DEBUG:newton_raphson converged to" in text
        assert "iterations" in text
