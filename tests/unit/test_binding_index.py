"""
Tests for BindingIndex

Must:
- Keep gateway -> devices and device -> gateways consistent
- Enforce the per-gateway capacity, re-binds included, without counting them twice
- Reject non-positive / non-integer device uids
"""

import pytest

from gwregistry.core.binding import BindingIndex, DEFAULT_CAPACITY
from gwregistry.core.errors import CapacityError, ValidationError, codes


def fill(index: BindingIndex, gateway: str, count: int, start: int = 1) -> None:
    for uid in range(start, start + count):
        index.bind(gateway, uid)


class TestBind:
    """bind() semantics"""

    def test_bind_is_visible_from_both_sides(self):
        index = BindingIndex()
        index.bind("gw-1", 7)

        assert index.devices_of("gw-1") == [7]
        assert index.gateways_of(7) == ["gw-1"]
        assert index.is_bound("gw-1", 7)

    def test_rebind_is_idempotent(self):
        """Binding the same pair twice does not grow the device list"""
        index = BindingIndex()
        index.bind("gw-1", 7)
        index.bind("gw-1", 7)

        assert index.devices_of("gw-1") == [7]
        assert index.count("gw-1") == 1
        assert index.gateways_of(7) == ["gw-1"]

    def test_devices_keep_binding_order(self):
        index = BindingIndex()
        for uid in (5, 3, 9):
            index.bind("gw-1", uid)
        assert index.devices_of("gw-1") == [5, 3, 9]

    def test_device_can_belong_to_many_gateways(self):
        index = BindingIndex()
        index.bind("gw-1", 1)
        index.bind("gw-2", 1)
        assert index.gateways_of(1) == ["gw-1", "gw-2"]

    def test_eleventh_device_is_rejected(self):
        index = BindingIndex()
        fill(index, "gw-1", DEFAULT_CAPACITY)

        with pytest.raises(CapacityError) as exc_info:
            index.bind("gw-1", 11)

        assert exc_info.value.error_code == codes.CAPACITY_EXCEEDED
        assert exc_info.value.details["capacity"] == 10
        assert index.count("gw-1") == 10
        assert index.gateways_of(11) == []

    def test_rebind_at_capacity_is_rejected(self):
        """A full gateway refuses even a pair it already holds"""
        index = BindingIndex()
        fill(index, "gw-1", DEFAULT_CAPACITY)

        with pytest.raises(CapacityError) as exc_info:
            index.bind("gw-1", 3)

        assert exc_info.value.details["device"] == 3
        assert index.count("gw-1") == 10
        assert index.gateways_of(3) == ["gw-1"]

    def test_capacity_is_per_gateway(self):
        index = BindingIndex(capacity=2)
        fill(index, "gw-1", 2)
        fill(index, "gw-2", 2)
        assert index.count("gw-1") == 2
        assert index.count("gw-2") == 2

    def test_custom_capacity(self):
        index = BindingIndex(capacity=3)
        fill(index, "gw-1", 3)
        with pytest.raises(CapacityError):
            index.bind("gw-1", 4)

    @pytest.mark.parametrize("bad", [0, -1, 1.5, "1", None, True])
    def test_rejects_bad_device_uid(self, bad):
        index = BindingIndex()
        with pytest.raises(ValidationError) as exc_info:
            index.bind("gw-1", bad)

        assert exc_info.value.error_code == codes.INVALID_DEVICE_UID
        assert exc_info.value.details["device"] == bad
        assert index.devices_of("gw-1") == []

    @pytest.mark.parametrize("bad", [0, -5, True, "abc"])
    def test_rejects_bad_capacity(self, bad):
        with pytest.raises(ValueError):
            BindingIndex(capacity=bad)


class TestUnbind:
    """unbind() semantics"""

    def test_unbind_removes_both_sides(self):
        index = BindingIndex()
        index.bind("gw-1", 1)
        index.bind("gw-1", 2)

        index.unbind("gw-1", 1)

        assert index.devices_of("gw-1") == [2]
        assert index.gateways_of(1) == []
        assert not index.is_bound("gw-1", 1)

    def test_unbind_unknown_pair_is_noop(self):
        index = BindingIndex()
        index.bind("gw-1", 1)

        index.unbind("gw-1", 99)
        index.unbind("gw-404", 1)

        assert index.devices_of("gw-1") == [1]
        assert index.gateways_of(1) == ["gw-1"]

    def test_unbind_frees_capacity(self):
        index = BindingIndex(capacity=1)
        index.bind("gw-1", 1)
        index.unbind("gw-1", 1)

        index.bind("gw-1", 2)

        assert index.devices_of("gw-1") == [2]

    def test_unbind_validates_uid(self):
        index = BindingIndex()
        with pytest.raises(ValidationError):
            index.unbind("gw-1", -1)


def test_empty_lookups():
    index = BindingIndex()
    assert index.devices_of("nothing") == []
    assert index.gateways_of(123) == []
    assert index.count("nothing") == 0


def test_lookups_return_copies():
    index = BindingIndex()
    index.bind("gw-1", 1)

    devices = index.devices_of("gw-1")
    devices.append(2)

    assert index.devices_of("gw-1") == [1]
