"""
Unit Tests for Balloon Verification
===================================
Constant-time comparison, verify/verify_m and the password helpers.
"""

import pytest

from balloon_core import (
    InvalidParameterError,
    balloon,
    balloon_m,
    constant_time_compare,
    verify,
    verify_m,
)


def _mutations(hex_digest):
    """Every single-character mutation of a hex digest."""
    for i, ch in enumerate(hex_digest):
        replacement = "0" if ch != "0" else "1"
        yield hex_digest[:i] + replacement + hex_digest[i + 1:]


class TestConstantTimeCompare:
    """Tests for constant-time string comparison."""

    def test_equal(self):
        """Equal strings should compare True."""
        assert constant_time_compare("abc123", "abc123") is True
        assert constant_time_compare("", "") is True

    def test_mismatch(self):
        """Any differing position should compare False."""
        assert constant_time_compare("abc123", "abc124") is False
        assert constant_time_compare("xbc123", "abc123") is False

    def test_length_mismatch(self):
        """Different lengths should return False."""
        assert constant_time_compare("abc", "abcd") is False
        assert constant_time_compare("abcd", "") is False

    def test_non_ascii(self):
        """Non-ASCII input should compare without raising."""
        assert constant_time_compare("é" * 4, "é" * 4) is True
        assert constant_time_compare("é" * 4, "e" * 4) is False


class TestVerify:
    """Tests for single-core verification."""

    def test_round_trip(self):
        """A digest should verify against its own inputs."""
        digest = balloon("hunter42", "examplesalt", 8, 2, 2).hex()

        assert verify(digest, "hunter42", "examplesalt", 8, 2, 2) is True

    def test_published_vector(self):
        """The published vector should verify with the default delta."""
        expected = "5f02f8206f9cd212485c6bdf85527b698956701ad0852106f94b94ee94577378"

        assert verify(expected, "", "salt", 3, 3) is True

    def test_wrong_password(self):
        """A different password should not verify."""
        digest = balloon("hunter42", "examplesalt", 8, 2).hex()

        assert verify(digest, "hunter43", "examplesalt", 8, 2) is False

    def test_wrong_costs(self):
        """Different costs should not verify."""
        digest = balloon("pw", "salt", 8, 2).hex()

        assert verify(digest, "pw", "salt", 8, 3) is False

    def test_single_character_mutations(self):
        """Every single-character mutation should fail."""
        digest = balloon("pw", "salt", 2, 1, 1).hex()

        assert all(not verify(m, "pw", "salt", 2, 1, 1) for m in _mutations(digest))

    def test_truncated_digest(self):
        """A shorter digest should fail on length."""
        digest = balloon("pw", "salt", 2, 1).hex()

        assert verify(digest[:-2], "pw", "salt", 2, 1) is False

    def test_invalid_costs_raise(self):
        """Invalid costs are caller errors, not mismatches."""
        with pytest.raises(InvalidParameterError):
            verify("00" * 32, "pw", "salt", 0, 1)


class TestVerifyM:
    """Tests for M-core verification."""

    def test_round_trip(self, serial_backend):
        """A Balloon-M digest should verify against its own inputs."""
        digest = balloon_m("pw", "salt", 4, 2, 3).hex()

        assert verify_m(digest, "pw", "salt", 4, 2, 3) is True
        assert verify_m(digest, "pw", "salt", 4, 2, 2) is False

    def test_published_vector(self):
        """The published vector should verify."""
        expected = "97a11df9382a788c781929831d409d3599e0b67ab452ef834718114efdcd1c6d"

        assert verify_m(expected, "password", "salt", 1, 1, 1) is True

    def test_invalid_parallel_cost(self):
        """parallel_cost below 1 should raise."""
        with pytest.raises(InvalidParameterError):
            verify_m("00" * 32, "pw", "salt", 1, 1, 0)


class TestPasswordHelpers:
    """Tests for recommended-parameter helpers."""

    def test_hash_password_sync(self):
        """Sync helper should match balloon_hash."""
        from balloon_core import balloon_hash, hash_password_sync

        assert hash_password_sync("pw", "salt") == balloon_hash("pw", "salt")

    def test_hash_password_sync_m_core(self, serial_backend):
        """parallel_cost should switch to the M-core variant."""
        from balloon_core import hash_password_sync

        assert hash_password_sync("pw", "salt", parallel_cost=2) == balloon_m("pw", "salt", 16, 20, 2, 4).hex()

    def test_verify_password_sync(self):
        """Sync verify should accept its own digests only."""
        from balloon_core import hash_password_sync, verify_password_sync

        digest = hash_password_sync("pw", "salt")

        assert verify_password_sync(digest, "pw", "salt") is True
        assert verify_password_sync(digest, "pw", "pepper") is False

    @pytest.mark.asyncio
    async def test_hash_and_verify_async(self):
        """Async helpers should agree with the sync ones."""
        from balloon_core import hash_password, hash_password_sync, verify_password

        digest = await hash_password("pw", "salt")

        assert digest == hash_password_sync("pw", "salt")
        assert await verify_password(digest, "pw", "salt") is True
        assert await verify_password(digest, "px", "salt") is False

    @pytest.mark.asyncio
    async def test_async_m_core(self):
        """Async helpers should support the M-core variant."""
        from balloon_core import hash_password, verify_password

        digest = await hash_password("pw", "salt", parallel_cost=2)

        assert await verify_password(digest, "pw", "salt", parallel_cost=2) is True
        assert await verify_password(digest, "pw", "salt") is False
