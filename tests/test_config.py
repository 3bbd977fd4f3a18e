"""Tests for missive.config — MessageDefaults frozen dataclass."""

import pytest

from missive.config import DEFAULTS, MessageDefaults


class TestMessageDefaults:
    def test_defaults(self) -> None:
        cfg = MessageDefaults()

        assert cfg.protocol_version == "1.1"
        assert cfg.body == "memory"
        assert cfg.body_mode == "wb+"
        assert cfg.chunk_size == 64 * 1024

    def test_override(self) -> None:
        cfg = MessageDefaults(protocol_version="2", chunk_size=1024)

        assert cfg.protocol_version == "2"
        assert cfg.chunk_size == 1024

    def test_frozen(self) -> None:
        cfg = MessageDefaults()

        with pytest.raises(AttributeError):
            cfg.protocol_version = "2"  # type: ignore[misc]

    def test_module_instance(self) -> None:
        assert DEFAULTS == MessageDefaults()
