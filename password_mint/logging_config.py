"""
Logging configuration
Derivation events are logged but never include the phrase or the password
"""

import logging
import sys
from typing import Set, Union


class SecretFilter(logging.Filter):
    """Filter that redacts anything resembling a secret assignment"""

    SENSITIVE_KEYS: Set[str] = {
        "phrase",
        "password",
        "hardened",
        "secret",
        "derived",
        "key",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Mismatched format args are reported later by Handler.handleError
            message = str(record.msg)
        lowered = message.lower()
        for key in self.SENSITIVE_KEYS:
            if key in lowered and "=" in message:
                record.msg = "[REDACTED - Sensitive data filtered]"
                record.args = None
                break
        return True


def setup_logging(level: Union[str, int] = logging.WARNING):
    """Configure application logging on stderr (stdout carries passwords)"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    root = logging.getLogger()
    root.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)


derivation_logger = logging.getLogger("password_mint.derivation")


def log_derivation_started(site: str, version: str, level: str, length: int):
    """Log derivation parameters (site and version are not secret)"""
    derivation_logger.info(
        "Deriving for site %r version %r (%s, %d chars)", site, version, level, length
    )


def log_derivation_completed(site: str, elapsed_seconds: float):
    derivation_logger.info("Derivation for %r finished in %.2fs", site, elapsed_seconds)


def log_derivation_failed(error_code: str):
    derivation_logger.warning("Derivation failed: %s", error_code)


def log_primitive_unavailable(reason: str):
    derivation_logger.error("Key derivation primitive unavailable: %s", reason)


def log_phrase_remembered():
    derivation_logger.info("Phrase held in memory for this session")


def log_phrase_forgotten():
    derivation_logger.info("Remembered phrase cleared")
