"""
Unit tests for QoS profiles and QoS overriding options.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from suboptions import (
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    QosOverridingOptions,
    QosPolicyKind,
    QoSProfile,
    ReliabilityPolicy,
    TransportQosProfile,
)


class TestQoSProfileDefaults:
    """Tests for default QoS values."""

    def test_defaults(self):
        """The default profile is reliable, volatile, keep last 10."""
        qos = QoSProfile()
        assert qos.history == HistoryPolicy.KEEP_LAST
        assert qos.depth == 10
        assert qos.reliability == ReliabilityPolicy.RELIABLE
        assert qos.durability == DurabilityPolicy.VOLATILE
        assert qos.liveliness == LivelinessPolicy.SYSTEM_DEFAULT
        assert qos.deadline == timedelta(0)
        assert qos.avoid_ros_namespace_conventions is False

    def test_is_frozen(self):
        """Profiles cannot be modified after creation."""
        qos = QoSProfile()
        with pytest.raises(ValidationError):
            qos.depth = 3  # type: ignore[misc]


class TestQoSProfileValidation:
    """Tests for QoS validation."""

    def test_negative_depth_rejected(self):
        """Depth must not be negative."""
        with pytest.raises(ValidationError):
            QoSProfile(depth=-1)

    def test_keep_last_zero_depth_rejected(self):
        """KEEP_LAST requires a depth of at least 1."""
        with pytest.raises(ValidationError, match="at least 1"):
            QoSProfile(history=HistoryPolicy.KEEP_LAST, depth=0)

    def test_keep_all_zero_depth_accepted(self):
        """KEEP_ALL ignores depth."""
        qos = QoSProfile(history=HistoryPolicy.KEEP_ALL, depth=0)
        assert qos.depth == 0

    def test_negative_duration_rejected(self):
        """Durations must not be negative."""
        with pytest.raises(ValidationError, match="must not be negative"):
            QoSProfile(deadline=timedelta(seconds=-1))


class TestQoSPresets:
    """Tests for named presets."""

    def test_sensor_data(self):
        """Sensor data is best effort with depth 5."""
        qos = QoSProfile.sensor_data()
        assert qos.reliability == ReliabilityPolicy.BEST_EFFORT
        assert qos.depth == 5

    def test_system_default(self):
        """System default defers every policy."""
        qos = QoSProfile.system_default()
        assert qos.history == HistoryPolicy.SYSTEM_DEFAULT
        assert qos.reliability == ReliabilityPolicy.SYSTEM_DEFAULT
        assert qos.durability == DurabilityPolicy.SYSTEM_DEFAULT

    def test_parameters(self):
        """Parameters keep a deep queue."""
        assert QoSProfile.parameters().depth == 1000

    @pytest.mark.parametrize(
        "name", ["default", "sensor_data", "system_default", "services", "parameters"]
    )
    def test_from_preset(self, name):
        """Every preset name resolves to the matching factory."""
        assert QoSProfile.from_preset(name) == getattr(QoSProfile, name)()

    def test_unknown_preset(self):
        """Unknown preset names are rejected."""
        with pytest.raises(ValueError, match="Unknown QoS preset"):
            QoSProfile.from_preset("best_guess")


class TestTransportProfile:
    """Tests for resolution into the transport shape."""

    def test_policies_carried(self):
        """Policies are copied into the transport profile."""
        qos = QoSProfile(
            history=HistoryPolicy.KEEP_ALL,
            reliability=ReliabilityPolicy.BEST_EFFORT,
            durability=DurabilityPolicy.TRANSIENT_LOCAL,
            liveliness=LivelinessPolicy.MANUAL_BY_TOPIC,
            avoid_ros_namespace_conventions=True,
        )

        profile = qos.to_transport_profile()

        assert isinstance(profile, TransportQosProfile)
        assert profile.history == HistoryPolicy.KEEP_ALL
        assert profile.reliability == ReliabilityPolicy.BEST_EFFORT
        assert profile.durability == DurabilityPolicy.TRANSIENT_LOCAL
        assert profile.liveliness == LivelinessPolicy.MANUAL_BY_TOPIC
        assert profile.avoid_ros_namespace_conventions is True

    def test_durations_in_nanoseconds(self):
        """Durations become integer nanoseconds."""
        qos = QoSProfile(
            deadline=timedelta(milliseconds=100),
            lifespan=timedelta(seconds=2, microseconds=5),
            liveliness_lease_duration=timedelta(days=1),
        )

        profile = qos.to_transport_profile()

        assert profile.deadline_ns == 100_000_000
        assert profile.lifespan_ns == 2_000_005_000
        assert profile.liveliness_lease_duration_ns == 86_400_000_000_000

    def test_zero_durations(self):
        """Unspecified durations stay zero."""
        profile = QoSProfile().to_transport_profile()
        assert profile.deadline_ns == 0
        assert profile.lifespan_ns == 0
        assert profile.liveliness_lease_duration_ns == 0

    def test_equal_profiles_resolve_equal(self):
        """Resolution is deterministic."""
        assert QoSProfile().to_transport_profile() == QoSProfile().to_transport_profile()


class TestQosOverridingOptions:
    """Tests for QoS overriding options."""

    def test_defaults(self):
        """No policies and no callback by default."""
        overrides = QosOverridingOptions()
        assert overrides.policy_kinds == ()
        assert overrides.validation_callback is None
        assert overrides.id == ""

    def test_with_default_policies(self):
        """Default policies are history, depth and reliability."""
        overrides = QosOverridingOptions.with_default_policies(id="camera")
        assert overrides.policy_kinds == (
            QosPolicyKind.HISTORY,
            QosPolicyKind.DEPTH,
            QosPolicyKind.RELIABILITY,
        )
        assert overrides.id == "camera"

    def test_validation_callback_kept(self):
        """The validation callback is stored as given."""

        def accept(profile):
            return True

        overrides = QosOverridingOptions.with_default_policies(validation_callback=accept)
        assert overrides.validation_callback is accept
