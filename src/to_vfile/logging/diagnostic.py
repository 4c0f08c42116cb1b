import logging
from typing import Optional

logger = logging.getLogger("to_vfile")


class DiagnosticLogger:
    @staticmethod
    def debug(msg: str):
        logger.debug(f"[DIAG_DEBUG] {msg}")

diagnostic_logger = DiagnosticLogger()

def log_io_start(op: str, path: str):
    diagnostic_logger.debug(f"{op} start: path={path}")

def log_io_done(op: str, path: str, elapsed_ms: float, error: Optional[BaseException] = None):
    if error is not None:
        diagnostic_logger.debug(f"{op} failed: path={path} durationMs={int(elapsed_ms)} error=\"{error}\"")
    else:
        diagnostic_logger.debug(f"{op} done: path={path} durationMs={int(elapsed_ms)}")
