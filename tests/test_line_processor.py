"""Unit tests for LineProcessor and the result types."""

import pytest

from search.models import SUPPRESSED, EngineConfig, Passed


@pytest.mark.unit
class TestHighlightMode:
    """Every line passes; matching lines are highlighted."""

    def test_matching_line_is_highlighted(self, make_processor) -> None:
        assert make_processor("test").process("this is a test") == Passed("this is a <<test>>")

    def test_unmatched_line_passes_unchanged(self, make_processor) -> None:
        assert make_processor("test").process("no match here") == Passed("no match here")

    def test_zero_width_only_match_passes_unchanged(self, make_processor) -> None:
        assert make_processor("z*").process("abc") == Passed("abc")


@pytest.mark.unit
class TestFilterMode:
    """Only matching lines pass, never highlighted."""

    def test_matching_line_passes_unmodified(self, make_processor) -> None:
        processor = make_processor("test", filter_mode=True)
        assert processor.process("first test") == Passed("first test")

    def test_unmatched_line_is_suppressed(self, make_processor) -> None:
        processor = make_processor("test", filter_mode=True)
        assert processor.process("second nothing") is SUPPRESSED

    def test_zero_width_match_counts_as_match(self, make_processor) -> None:
        processor = make_processor("^", filter_mode=True)
        assert processor.process("anything") == Passed("anything")


@pytest.mark.unit
class TestModels:
    """Tests for the result and config types."""

    def test_suppressed_is_falsy_singleton(self) -> None:
        assert not SUPPRESSED
        assert type(SUPPRESSED)() is SUPPRESSED
        assert repr(SUPPRESSED) == "SUPPRESSED"

    def test_passed_is_truthy(self) -> None:
        assert Passed("")

    def test_config_defaults(self) -> None:
        config = EngineConfig(pattern="x")
        assert not config.filter_mode
        assert not config.parallel_mode
        assert config.worker_count >= 1

    def test_config_is_immutable(self) -> None:
        config = EngineConfig(pattern="x")
        with pytest.raises(AttributeError):
            config.pattern = "y"

    @pytest.mark.parametrize("workers", [0, -2])
    def test_config_rejects_bad_worker_count(self, workers) -> None:
        with pytest.raises(ValueError):
            EngineConfig(pattern="x", workers=workers)

    def test_config_rejects_bad_batch_size(self) -> None:
        with pytest.raises(ValueError):
            EngineConfig(pattern="x", batch_size=0)

    def test_explicit_worker_count(self) -> None:
        assert EngineConfig(pattern="x", workers=3).worker_count == 3
