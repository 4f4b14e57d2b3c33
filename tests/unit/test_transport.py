"""
Unit tests for the in-memory transport.

Tests default records and content filter validation.
"""

import pytest

from suboptions import (
    InMemoryTransport,
    QoSProfile,
    SubscriptionTransport,
    TransportContentFilterOptions,
    TransportError,
    TransportOptionsRecord,
    UniqueNetworkFlowEndpointsRequirement,
)
from suboptions.transport import MAX_EXPRESSION_PARAMETERS


class TestDefaultOptions:
    """Tests for InMemoryTransport.get_default_options."""

    def test_is_subscription_transport(self, in_memory_transport):
        """InMemoryTransport implements the transport interface."""
        assert isinstance(in_memory_transport, SubscriptionTransport)

    def test_returns_fresh_record(self, in_memory_transport):
        """Each call returns a new record."""
        first = in_memory_transport.get_default_options()
        second = in_memory_transport.get_default_options()
        assert isinstance(first, TransportOptionsRecord)
        assert first is not second
        assert first.middleware_options is not second.middleware_options

    def test_default_record_values(self, in_memory_transport):
        """The baseline record uses system-default QoS and no allocator."""
        record = in_memory_transport.get_default_options()
        assert record.qos == QoSProfile.system_default().to_transport_profile()
        assert record.allocator is None
        assert record.middleware_options.ignore_local_publications is False
        assert (
            record.middleware_options.require_unique_network_flow_endpoints
            == UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
        )
        assert record.middleware_options.content_filter is None


class TestSetContentFilter:
    """Tests for content filter validation."""

    def test_valid_filter_stored(self, in_memory_transport):
        """A valid filter is stored on the record."""
        record = in_memory_transport.get_default_options()
        in_memory_transport.set_content_filter(record, "x > %0 AND y = %1", ["1", "'a'"])
        assert record.middleware_options.content_filter == TransportContentFilterOptions(
            filter_expression="x > %0 AND y = %1",
            expression_parameters=("1", "'a'"),
        )

    def test_parameters_not_retained(self, in_memory_transport):
        """The transport copies parameters instead of keeping the caller's list."""
        record = in_memory_transport.get_default_options()
        parameters = ["1"]
        in_memory_transport.set_content_filter(record, "x > %0", parameters)
        parameters[0] = "2"
        assert record.middleware_options.content_filter.expression_parameters == ("1",)

    def test_expression_without_placeholders(self, in_memory_transport):
        """Expressions need not use parameters."""
        record = in_memory_transport.get_default_options()
        in_memory_transport.set_content_filter(record, "x > 10", [])
        assert record.middleware_options.content_filter.expression_parameters == ()

    def test_counts_calls(self, in_memory_transport):
        """Every call is counted, including rejected ones."""
        record = in_memory_transport.get_default_options()
        in_memory_transport.set_content_filter(record, "x > 1", [])
        with pytest.raises(TransportError):
            in_memory_transport.set_content_filter(record, "x > %3", [])
        assert in_memory_transport.content_filter_calls == 2

    @pytest.mark.parametrize(
        ("expression", "parameters", "message"),
        [
            ("   ", [], "must not be empty"),
            ("(x > 1", [], "unclosed"),
            ("x > 1)", [], "unmatched"),
            ("name = 'left", [], "unterminated quoted literal"),
            ("x > %2", ["1", "2"], "placeholder %2"),
        ],
    )
    def test_rejections(self, in_memory_transport, expression, parameters, message):
        """Malformed expressions are rejected with a diagnostic."""
        record = in_memory_transport.get_default_options()
        with pytest.raises(TransportError, match=message):
            in_memory_transport.set_content_filter(record, expression, parameters)
        assert record.middleware_options.content_filter is None

    def test_parenthesis_inside_quotes_ignored(self, in_memory_transport):
        """Parentheses inside quoted literals do not count."""
        record = in_memory_transport.get_default_options()
        in_memory_transport.set_content_filter(record, "name = 'a(b'", [])
        assert record.middleware_options.content_filter is not None

    def test_placeholder_inside_quotes_ignored(self, in_memory_transport):
        """A quoted %N is literal text and needs no parameter."""
        record = in_memory_transport.get_default_options()
        in_memory_transport.set_content_filter(record, "name = '%3' AND id = %0", ["7"])
        assert record.middleware_options.content_filter.filter_expression == (
            "name = '%3' AND id = %0"
        )

    def test_too_many_parameters(self, in_memory_transport):
        """More than the maximum number of parameters is rejected."""
        record = in_memory_transport.get_default_options()
        parameters = ["0"] * (MAX_EXPRESSION_PARAMETERS + 1)
        with pytest.raises(TransportError, match="too many expression parameters"):
            in_memory_transport.set_content_filter(record, "x > %0", parameters)

    def test_maximum_parameters_accepted(self, in_memory_transport):
        """Exactly the maximum number of parameters is accepted."""
        record = in_memory_transport.get_default_options()
        parameters = ["0"] * MAX_EXPRESSION_PARAMETERS
        in_memory_transport.set_content_filter(record, "x > %99", parameters)

    def test_unsupported(self):
        """A transport without content filter support rejects all filters."""
        transport = InMemoryTransport(supports_content_filter=False)
        assert transport.supports_content_filter is False
        record = transport.get_default_options()
        with pytest.raises(TransportError, match="not supported"):
            transport.set_content_filter(record, "x > 1", [])
