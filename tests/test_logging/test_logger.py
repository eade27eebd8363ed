"""Tests for SamplingLogger and TokenSamplingRecord."""

from __future__ import annotations

import logging

import pytest

from logit_sampler.config import SamplerConfig
from logit_sampler.logging.logger import SamplingLogger
from logit_sampler.logging.types import TokenSamplingRecord


def _make_record(**overrides: object) -> TokenSamplingRecord:
    """Create a TokenSamplingRecord with sensible defaults, overridable."""
    defaults: dict[str, object] = {
        "timestamp_ns": 1000000000,
        "total_sampling_ms": 0.25,
        "selector_used": "weighted",
        "greedy_override": False,
        "transforms_applied": ("temperature", "top_k"),
        "num_candidates": 40,
        "token_id": 42,
        "vocab_size": 32000,
        "config_hash": "abcdef1234567890",
    }
    defaults.update(overrides)
    return TokenSamplingRecord(**defaults)  # type: ignore[arg-type]


def _config(log_level: str, diagnostic_mode: bool = False) -> SamplerConfig:
    return SamplerConfig(
        _env_file=None,
        log_level=log_level,
        diagnostic_mode=diagnostic_mode,  # type: ignore[call-arg]
    )


class TestTokenSamplingRecord:
    """Tests for TokenSamplingRecord immutability."""

    def test_frozen(self) -> None:
        record = _make_record()
        with pytest.raises(AttributeError):
            record.token_id = 99  # type: ignore[misc]

    def test_slots(self) -> None:
        assert hasattr(_make_record(), "__slots__")


class TestSamplingLogger:
    """Tests for SamplingLogger."""

    def test_log_level_none_no_output(self, caplog: pytest.LogCaptureFixture) -> None:
        log = SamplingLogger(_config("none"))
        with caplog.at_level(logging.DEBUG, logger="logit_sampler"):
            log.log_token(_make_record())
        assert len(caplog.records) == 0

    def test_log_level_summary_output(self, caplog: pytest.LogCaptureFixture) -> None:
        log = SamplingLogger(_config("summary"))
        with caplog.at_level(logging.DEBUG, logger="logit_sampler"):
            log.log_token(_make_record())
        assert len(caplog.records) == 1
        msg = caplog.records[0].message
        assert "token=42" in msg
        assert "candidates=40/32000" in msg
        assert "selector=weighted" in msg
        assert "transforms=temperature,top_k" in msg
        assert "[GREEDY-OVERRIDE]" not in msg

    def test_summary_marks_override(self, caplog: pytest.LogCaptureFixture) -> None:
        log = SamplingLogger(_config("summary"))
        with caplog.at_level(logging.DEBUG, logger="logit_sampler"):
            log.log_token(
                _make_record(greedy_override=True, selector_used="greedy", transforms_applied=())
            )
        msg = caplog.records[0].message
        assert "[GREEDY-OVERRIDE]" in msg
        assert "transforms=-" in msg

    def test_log_level_full_json(self, caplog: pytest.LogCaptureFixture) -> None:
        log = SamplingLogger(_config("full"))
        with caplog.at_level(logging.DEBUG, logger="logit_sampler"):
            log.log_token(_make_record())
        assert len(caplog.records) == 1
        msg = caplog.records[0].message
        assert "sampling_record:" in msg
        assert '"token_id": 42' in msg

    def test_diagnostic_mode_stores_records(self) -> None:
        log = SamplingLogger(_config("none", diagnostic_mode=True))
        for token_id in (1, 2, 3):
            log.log_token(_make_record(token_id=token_id))
        data = log.get_diagnostic_data()
        assert [r.token_id for r in data] == [1, 2, 3]

    def test_diagnostic_mode_false_no_storage(self) -> None:
        log = SamplingLogger(_config("summary"))
        log.log_token(_make_record())
        assert log.get_diagnostic_data() == []

    def test_get_diagnostic_data_returns_copy(self) -> None:
        log = SamplingLogger(_config("none", diagnostic_mode=True))
        log.log_token(_make_record())
        log.get_diagnostic_data().clear()
        assert len(log.get_diagnostic_data()) == 1

    def test_summary_stats_empty(self) -> None:
        log = SamplingLogger(_config("none", diagnostic_mode=True))
        assert log.get_summary_stats() == {}

    def test_summary_stats_computed(self) -> None:
        log = SamplingLogger(_config("none", diagnostic_mode=True))
        log.log_token(_make_record(num_candidates=10, total_sampling_ms=1.0))
        log.log_token(
            _make_record(num_candidates=30, total_sampling_ms=3.0, greedy_override=True)
        )

        stats = log.get_summary_stats()
        assert stats["total_tokens"] == 2
        assert stats["mean_candidates"] == 20
        assert stats["min_candidates"] == 10
        assert stats["max_candidates"] == 30
        assert abs(stats["mean_total_ms"] - 2.0) < 1e-10
        assert stats["max_total_ms"] == 3.0
        assert stats["greedy_override_count"] == 1
        assert abs(stats["greedy_override_rate"] - 0.5) < 1e-10
