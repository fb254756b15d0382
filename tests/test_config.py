import logging

from reservation_engine.core.config import Settings
from reservation_engine.core.logging import PACKAGE_LOGGER, configure_logging


class TestSettings:

    def test_defaults(self, settings):
        assert settings.SEATLESS_RESERVATION_TYPES == ["GENERAL_ADMISSION"]
        assert settings.GRID_DUPLICATE_POLICY == "last_write_wins"
        assert settings.ENFORCE_RESERVATION_EXPIRY is True
        assert settings.is_seatless("GENERAL_ADMISSION")
        assert not settings.is_seatless("RESERVED_SEATS")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SEATLESS_RESERVATION_TYPES", '["GENERAL_ADMISSION", "STANDING"]')
        monkeypatch.setenv("GRID_DUPLICATE_POLICY", "error")

        configured = Settings(_env_file=None)

        assert configured.is_seatless("STANDING")
        assert configured.GRID_DUPLICATE_POLICY == "error"


class TestConfigureLogging:

    def test_sets_level_and_single_handler(self):
        logger = configure_logging(Settings(_env_file=None, LOG_LEVEL="debug"))
        configure_logging(Settings(_env_file=None, LOG_LEVEL="WARNING"))

        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
