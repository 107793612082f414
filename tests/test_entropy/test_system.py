"""Tests for SystemByteSource."""

from __future__ import annotations

from driftfield.entropy.system import SystemByteSource


class TestSystemByteSource:
    """Tests for the os.urandom() wrapper."""

    def test_name(self) -> None:
        assert SystemByteSource().name == "system"

    def test_is_always_available(self) -> None:
        assert SystemByteSource().is_available is True

    def test_returns_correct_byte_count(self) -> None:
        source = SystemByteSource()
        for n in (0, 1, 10, 1024, 4096):
            assert len(source.get_random_bytes(n)) == n

    def test_returns_bytes_type(self) -> None:
        assert isinstance(SystemByteSource().get_random_bytes(16), bytes)

    def test_consecutive_calls_differ(self) -> None:
        """Two 32-byte draws colliding is statistically near-impossible."""
        source = SystemByteSource()
        assert source.get_random_bytes(32) != source.get_random_bytes(32)

    def test_sample_checks_length(self) -> None:
        assert len(SystemByteSource().sample(2048)) == 2048

    def test_close_is_noop(self) -> None:
        source = SystemByteSource()
        source.close()
        assert len(source.get_random_bytes(8)) == 8

    def test_health_check(self) -> None:
        health = SystemByteSource().health_check()
        assert health == {"source": "system", "healthy": True}
