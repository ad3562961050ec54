import pytest

from servicearea.data.cantons import SWISS_CANTONS, RegionRegistry
from servicearea.models.domain import Region


def test_default_registry_lists_all_26_cantons_in_order():
    registry = RegionRegistry.default()

    regions = registry.list_regions()

    assert len(regions) == 26
    assert len(registry) == 26
    assert regions[0] == Region("AG", "Aargau")
    assert regions[-1] == Region("ZH", "Zürich")
    assert registry.codes() == tuple(code for code, _ in SWISS_CANTONS)


def test_label_of_known_and_unknown_codes():
    registry = RegionRegistry.default()

    assert registry.label_of("GR") == "Graubünden"
    assert registry.label_of("SG") == "St. Gallen"
    assert registry.label_of("XX") == "XX"
    assert registry.label_of("") == ""


def test_get_and_membership():
    registry = RegionRegistry.default()

    assert registry.get("BE") == Region("BE", "Bern")
    assert registry.get("be") is None
    assert "TI" in registry
    assert "8000" not in registry
    assert 42 not in registry


def test_duplicate_codes_are_rejected():
    with pytest.raises(ValueError):
        RegionRegistry([Region("ZH", "Zürich"), Region("ZH", "Zurich")])
