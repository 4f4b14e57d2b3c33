"""
Translation of subscription options into transport options.

Translation is a single linear pipeline:

1. Check topic statistics settings
2. Start from the transport's default record
3. Overlay allocator, QoS and middleware flags
4. Let a customized middleware payload adjust the middleware options
5. Set the content filter, if an expression is declared
6. Carry topic statistics and QoS override settings through untouched

Either the finished record is returned or an exception is raised; a
partially built record is never returned.

Example:
    >>> from suboptions import QoSProfile, SubscriptionOptions, translate
    >>>
    >>> options = SubscriptionOptions(ignore_local_publications=True)
    >>> record = translate(options, QoSProfile.sensor_data())
    >>> record.middleware_options.ignore_local_publications
    True
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import timedelta
from typing import Any

from suboptions.content_filter import encode_parameters
from suboptions.exceptions import (
    InvalidContentFilterError,
    InvalidStatisticsPeriodError,
    TransportError,
    UnsupportedOptionsError,
)
from suboptions.observability import (
    ATTR_CONTENT_FILTER_ENABLED,
    ATTR_CONTENT_FILTER_PARAMETER_COUNT,
    ATTR_PAYLOAD_CUSTOMIZED,
    ATTR_PAYLOAD_IMPLEMENTATION,
    ATTR_STATISTICS_STATE,
    ATTR_USER_ALLOCATOR,
    SPAN_TRANSLATE,
    NullTracer,
    Tracer,
    create_tracer,
)
from suboptions.options import SubscriptionOptions, TopicStatisticsOptions
from suboptions.payload import customized_payload
from suboptions.qos import QoSProfile
from suboptions.transport.interface import SubscriptionTransport, TransportOptionsRecord
from suboptions.transport.memory import InMemoryTransport
from suboptions.types import TopicStatisticsState

logger = logging.getLogger(__name__)


def check_topic_statistics(stats: TopicStatisticsOptions) -> None:
    """
    Check that enabled topic statistics have a positive publish period.

    Raises:
        InvalidStatisticsPeriodError: If statistics are enabled with a
            non-positive period
    """
    if stats.state is TopicStatisticsState.ENABLE and stats.publish_period <= timedelta(0):
        raise InvalidStatisticsPeriodError(stats.publish_period)


class OptionsTranslator:
    """
    Builds transport options records from subscription options.

    Holds no state between calls apart from its collaborators; the allocator
    cache lives in the options being translated.

    Args:
        transport: Transport to build records for (in-memory by default)
        tracer: Optional tracer; overrides ``enable_tracing``
        enable_tracing: Create OpenTelemetry spans when available (default True)

    Example:
        >>> translator = OptionsTranslator(transport=InMemoryTransport())
        >>> record = translator.translate(SubscriptionOptions(), QoSProfile())
    """

    def __init__(
        self,
        transport: SubscriptionTransport | None = None,
        tracer: Tracer | None = None,
        enable_tracing: bool = True,
    ) -> None:
        self._transport = transport or InMemoryTransport()
        self._tracer = tracer or create_tracer(__name__, enable_tracing)

    @property
    def transport(self) -> SubscriptionTransport:
        return self._transport

    def translate(
        self,
        options: SubscriptionOptions[Any],
        qos: QoSProfile,
    ) -> TransportOptionsRecord:
        """
        Translate options and a QoS profile into a transport options record.

        Args:
            options: Subscription options
            qos: QoS profile for the subscription

        Returns:
            The finished record, owned by the caller

        Raises:
            UnsupportedOptionsError: If ``options`` is a bare
                ``SubscriptionOptionsBase`` without an allocator layer
            InvalidStatisticsPeriodError: If statistics are enabled with a
                non-positive publish period
            AllocationFailureError: If the default allocator cannot be constructed
            InvalidContentFilterError: If the transport rejects the content filter
        """
        if not isinstance(options, SubscriptionOptions):
            raise UnsupportedOptionsError(type(options))

        filter_options = options.content_filter_options
        payload = customized_payload(options.middleware_payload)

        attributes: dict[str, Any] | None = None
        if self._tracer.enabled:
            attributes = {
                ATTR_CONTENT_FILTER_ENABLED: filter_options.enabled,
                ATTR_CONTENT_FILTER_PARAMETER_COUNT: len(filter_options.expression_parameters),
                ATTR_PAYLOAD_CUSTOMIZED: payload is not None,
                ATTR_STATISTICS_STATE: options.topic_stats_options.state.value,
                ATTR_USER_ALLOCATOR: options.allocator is not None,
            }
            if payload is not None and payload.implementation_identifier is not None:
                attributes[ATTR_PAYLOAD_IMPLEMENTATION] = payload.implementation_identifier

        with self._tracer.span(SPAN_TRANSLATE, attributes):
            check_topic_statistics(options.topic_stats_options)

            record = self._transport.get_default_options()
            record.allocator = options.get_transport_allocator()
            record.qos = qos.to_transport_profile()
            middleware_options = record.middleware_options
            middleware_options.ignore_local_publications = options.ignore_local_publications
            middleware_options.require_unique_network_flow_endpoints = (
                options.require_unique_network_flow_endpoints
            )

            if payload is not None:
                payload.modify_transport_options(middleware_options)
                logger.debug(
                    "Applied middleware payload",
                    extra={"implementation": payload.implementation_identifier},
                )

            if filter_options.enabled:
                expression = filter_options.filter_expression
                parameters = encode_parameters(filter_options.expression_parameters)
                try:
                    self._transport.set_content_filter(record, expression, parameters)
                except TransportError as e:
                    raise InvalidContentFilterError(
                        expression, e.diagnostic, partial_record=record
                    ) from e

            record.topic_stats_options = replace(options.topic_stats_options)
            record.qos_overriding_options = options.qos_overriding_options

        logger.debug(
            "Translated subscription options",
            extra={
                "content_filter": filter_options.enabled,
                "event_callbacks": options.event_callbacks.has_callbacks(),
                "payload_customized": payload is not None,
                "user_allocator": options.allocator is not None,
            },
        )
        return record


def translate(
    options: SubscriptionOptions[Any],
    qos: QoSProfile,
    transport: SubscriptionTransport | None = None,
    tracer: Tracer | None = None,
) -> TransportOptionsRecord:
    """
    Translate options and a QoS profile into a transport options record.

    Convenience wrapper around ``OptionsTranslator``. Tracing is off unless
    a tracer is passed.

    Args:
        options: Subscription options
        qos: QoS profile for the subscription
        transport: Transport to build the record for (in-memory by default)
        tracer: Optional tracer

    Returns:
        The finished record

    Raises:
        TranslationError: If the options cannot be translated
    """
    translator = OptionsTranslator(transport=transport, tracer=tracer or NullTracer())
    return translator.translate(options, qos)


__all__ = [
    "OptionsTranslator",
    "translate",
    "check_topic_statistics",
]
