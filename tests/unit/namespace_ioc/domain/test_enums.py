"""Unit tests for domain enums."""

from namespace_ioc.domain.enums import Lifetime


class TestLifetime:
    """Test cases for the Lifetime enum."""

    def test_lifetime_values(self):
        """Test that lifetimes have the expected string values."""
        assert Lifetime.TRANSIENT.value == "transient"
        assert Lifetime.SINGLETON.value == "singleton"

    def test_lifetime_members(self):
        """Test that only transient and singleton lifetimes exist."""
        assert {member.name for member in Lifetime} == {"TRANSIENT", "SINGLETON"}

    def test_lifetime_string_representation(self):
        """Test that str() returns the raw value."""
        assert str(Lifetime.SINGLETON) == "singleton"

    def test_lifetime_is_str(self):
        """Test that lifetimes compare equal to their string values."""
        assert Lifetime.TRANSIENT == "transient"
        assert Lifetime("singleton") is Lifetime.SINGLETON
