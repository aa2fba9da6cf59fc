import logging

from placement_bot.config import Settings
from placement_bot.utils.logging import NOISY_LOGGERS, setup_logging


def test_noisy_loggers_quieted():
    setup_logging("DEBUG")

    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_level_defaults_to_settings(monkeypatch):
    calls = {}

    def _fake_basic_config(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(
        "placement_bot.utils.logging.get_settings",
        lambda: Settings(_env_file=None, log_level="debug"),
    )
    monkeypatch.setattr(logging, "basicConfig", _fake_basic_config)

    setup_logging()

    assert calls["level"] == logging.DEBUG
