"""
Unit tests for content filter options and parameter encoding.
"""

from suboptions.content_filter import (
    ContentFilterOptions,
    encode_parameters,
    placeholder_indices,
)


class TestContentFilterOptions:
    """Tests for ContentFilterOptions."""

    def test_empty_expression_disabled(self):
        """An empty expression disables filtering."""
        assert ContentFilterOptions().enabled is False

    def test_parameters_alone_do_not_enable(self):
        """Parameters without an expression do not enable filtering."""
        assert ContentFilterOptions(expression_parameters=["1"]).enabled is False

    def test_expression_enables(self):
        """A non-empty expression enables filtering."""
        assert ContentFilterOptions(filter_expression="x > 1").enabled is True


class TestEncodeParameters:
    """Tests for positional parameter encoding."""

    def test_preserves_order(self):
        """Order is preserved."""
        assert encode_parameters(["b", "a", "c"]) == ("b", "a", "c")

    def test_keeps_duplicates(self):
        """Duplicates are kept so positions stay aligned."""
        assert encode_parameters(["1", "1"]) == ("1", "1")

    def test_empty(self):
        """No parameters encode to an empty tuple."""
        assert encode_parameters([]) == ()

    def test_returns_copy(self):
        """The result does not alias the input list."""
        parameters = ["1"]
        encoded = encode_parameters(parameters)
        parameters.append("2")
        assert encoded == ("1",)


class TestPlaceholderIndices:
    """Tests for placeholder extraction."""

    def test_finds_indices(self):
        """All placeholders are found in order of appearance."""
        assert placeholder_indices("a = %1 OR b = %0 OR c = %12") == [1, 0, 12]

    def test_no_placeholders(self):
        """Expressions without placeholders yield nothing."""
        assert placeholder_indices("a > 1") == []

    def test_quoted_literals_skipped(self):
        """Placeholders inside quoted literals are plain text."""
        assert placeholder_indices("name = '%3' AND id = %0") == [0]
        assert placeholder_indices("tag = `%7`") == []

    def test_quote_kinds_do_not_close_each_other(self):
        """A backtick inside a single-quoted literal does not end it."""
        assert placeholder_indices("a = 'x`%2' OR b = %1") == [1]
