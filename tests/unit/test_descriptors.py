"""
Unit tests for parameter descriptors.
"""

from dataclasses import FrozenInstanceError

import pytest

from parambind.binding import ConfigurationError, ModelAttribute, ParamType, RequestParam


class TestRequestParam:
    """Tests for RequestParam declarations."""

    def test_defaults(self):
        """Test the default declaration is a required string."""
        param = RequestParam("username")

        assert param.type is ParamType.STR
        assert param.required is True
        assert param.has_default is False
        assert param.key == "username"

    def test_explicit_key(self):
        """Test that name overrides the request key."""
        param = RequestParam("member_age", ParamType.INT, name="age")

        assert param.key == "age"
        assert param.field == "member_age"

    def test_frozen(self):
        """Test descriptors cannot be changed after declaration."""
        param = RequestParam("username")

        with pytest.raises(FrozenInstanceError):
            param.required = False

    def test_optional_non_nullable_rejected(self):
        """Test an optional int without default can never bind an absence."""
        with pytest.raises(ConfigurationError) as exc_info:
            RequestParam("age", ParamType.INT, required=False)

        assert exc_info.value.parameter == "age"
        assert "int" in str(exc_info.value)

    def test_optional_non_nullable_with_default(self):
        """Test a default makes an optional int valid."""
        param = RequestParam("age", ParamType.INT, required=False, default="-1")
        assert param.has_default

    def test_optional_nullable(self):
        """Test an optional nullable type needs no default."""
        RequestParam("age", ParamType.OPTIONAL_INT, required=False)
        RequestParam("username", required=False)

    def test_invalid_default_rejected(self):
        """Test a default that does not convert is caught early."""
        with pytest.raises(ConfigurationError) as exc_info:
            RequestParam("age", ParamType.INT, default="abc")

        assert "'abc'" in str(exc_info.value)

    @pytest.mark.parametrize("default", [-1, 0, 1.5, True])
    def test_non_text_default_rejected(self, default):
        """Test defaults must be written as request text."""
        with pytest.raises(ConfigurationError) as exc_info:
            RequestParam("age", ParamType.INT, default=default)

        assert exc_info.value.parameter == "age"
        assert "request text" in str(exc_info.value)

    def test_empty_default_for_non_nullable(self):
        """Test "" is not a usable default for an int."""
        with pytest.raises(ConfigurationError):
            RequestParam("age", ParamType.INT, default="")

    def test_empty_field_rejected(self):
        """Test a descriptor needs a field name."""
        with pytest.raises(ConfigurationError):
            RequestParam("")

    def test_empty_name_rejected(self):
        """Test an explicit key cannot be empty."""
        with pytest.raises(ConfigurationError):
            RequestParam("username", name="")


class TestModelAttribute:
    """Tests for aggregate declarations."""

    def test_name_from_factory(self):
        """Test the aggregate is named after its factory."""
        class Point:
            def __init__(self, x, y):
                self.x, self.y = x, y

        aggregate = ModelAttribute(
            fields=[RequestParam("x", ParamType.INT), RequestParam("y", ParamType.INT)],
            factory=Point,
        )

        assert aggregate.name == "Point"
        assert isinstance(aggregate.fields, tuple)

    def test_default_factory_is_dict(self):
        """Test an aggregate without factory builds a dict."""
        aggregate = ModelAttribute(fields=(RequestParam("username"),))

        assert aggregate.factory is dict
        assert aggregate.name == "dict"

    def test_explicit_name(self):
        """Test an explicit aggregate name is kept."""
        aggregate = ModelAttribute(fields=(RequestParam("a"),), name="hello")
        assert aggregate.name == "hello"

    def test_empty_fields_rejected(self):
        """Test an aggregate needs fields."""
        with pytest.raises(ConfigurationError):
            ModelAttribute(fields=())

    def test_duplicate_fields_rejected(self):
        """Test a field may be declared only once."""
        with pytest.raises(ConfigurationError) as exc_info:
            ModelAttribute(fields=(RequestParam("a"), RequestParam("a", ParamType.OPTIONAL_INT)))

        assert exc_info.value.parameter == "a"

    def test_errors_name_the_aggregate(self):
        """Test configuration errors say which aggregate is broken."""
        class Signup:
            def __init__(self, username):
                self.username = username

        with pytest.raises(ConfigurationError) as exc_info:
            ModelAttribute(
                fields=(RequestParam("username"), RequestParam("username")),
                factory=Signup,
            )
        assert "Aggregate Signup" in str(exc_info.value)

        with pytest.raises(ConfigurationError) as exc_info:
            ModelAttribute(fields=(), name="profile")
        assert "Aggregate profile" in str(exc_info.value)

    def test_renamed_field_rejected(self):
        """Test aggregate fields are bound by their own names."""
        with pytest.raises(ConfigurationError):
            ModelAttribute(fields=(RequestParam("member_name", name="username"),))

    def test_same_explicit_name_allowed(self):
        """Test an explicit name equal to the field is fine."""
        ModelAttribute(fields=(RequestParam("username", name="username"),))

    def test_non_descriptor_rejected(self):
        """Test fields must be RequestParam instances."""
        with pytest.raises(ConfigurationError):
            ModelAttribute(fields=("username",))
