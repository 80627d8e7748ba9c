"""Tests for verbfmt utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger."""

    def test_adds_prefix(self) -> None:
        from verbfmt.utils.logger import get_logger

        assert get_logger("mymodule").name == "verbfmt.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        from verbfmt.utils.logger import get_logger

        assert get_logger("verbfmt.renderer").name == "verbfmt.renderer"
        assert get_logger("verbfmt").name == "verbfmt"

    def test_returns_stdlib_logger(self) -> None:
        from verbfmt.utils import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_build_logs_compiled_config(self, caplog) -> None:
        from verbfmt import compile_format

        with caplog.at_level(logging.DEBUG, logger="verbfmt"):
            compile_format("sd", prefix="$")
        assert any("prefix='$'" in r.getMessage() for r in caplog.records)
