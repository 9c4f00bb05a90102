import pytest

from territory.errors import (
    AlreadyExists,
    EmptyIncludeSet,
    InvalidFormat,
    NotFound,
    OutOfParentScope,
    UnknownRegion,
)


def test_create_canonicalizes_name_and_keeps_submitted_lists(service):
    distributor = service.create("  d1 ", include=["us"], exclude=["ca-us"])

    assert distributor.name == "D1"
    assert distributor.parent is None
    assert distributor.include == ["us"]
    assert distributor.exclude == ["ca-us"]
    assert set(distributor.regions["US"].provinces) == {"NY"}
    assert service.get("d1") is distributor


def test_duplicate_names_are_case_insensitive(service):
    service.create("Acme", include=["US"])

    with pytest.raises(AlreadyExists):
        service.create("ACME ", include=["INDIA"])
    assert set(service.get("acme").regions) == {"US"}


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_is_invalid(service, name):
    with pytest.raises(InvalidFormat):
        service.create(name, include=["US"])


def test_blank_parent_is_invalid(service):
    with pytest.raises(InvalidFormat):
        service.create("D1", include=["US"], parent="  ")


def test_empty_include_is_rejected(service):
    with pytest.raises(EmptyIncludeSet):
        service.create("D1", include=[])
    with pytest.raises(NotFound):
        service.get("D1")


def test_malformed_path_is_rejected_before_anything_is_stored(service):
    with pytest.raises(InvalidFormat):
        service.create("D1", include=["A-B-C-D"])
    with pytest.raises(NotFound):
        service.get("D1")


def test_unknown_region_is_rejected(service):
    with pytest.raises(UnknownRegion):
        service.create("D1", include=["TX-US"])


def test_unknown_parent_is_not_found(service):
    with pytest.raises(NotFound) as exc_info:
        service.create("D2", include=["US"], parent="ghost")
    assert "GHOST" in exc_info.value.reason


def test_child_within_parent_succeeds(service):
    service.create("D1", include=["US", "INDIA"], exclude=["KARNATAKA-INDIA"])

    child = service.create("D2", include=["CA-US", "TAMIL NADU-INDIA"], exclude=["LA-CA-US"], parent="d1")

    assert child.parent == "D1"
    assert set(child.regions["US"].provinces["CA"].cities) == {"SF"}


def test_child_outside_parent_is_rejected(service):
    service.create("D1", include=["US", "INDIA"], exclude=["KARNATAKA-INDIA"])

    with pytest.raises(OutOfParentScope):
        service.create("D2", include=["KARNATAKA-INDIA"], parent="D1")
    with pytest.raises(OutOfParentScope):
        service.create("D2", include=["INDIA"], exclude=["KARNATAKA-INDIA"], parent="D1")
    with pytest.raises(NotFound):
        service.get("D2")


def test_check_access_answers_yes_or_no(service):
    service.create("D1", include=["US"], exclude=["NY-US"])

    assert service.check_access("d1", "la-ca-us") == "YES"
    assert service.check_access("D1", "US") == "YES"
    assert service.check_access("D1", "NY-US") == "NO"
    assert service.check_access("D1", "MIAMI-FL-US") == "NO"


def test_check_access_unknown_distributor(service):
    with pytest.raises(NotFound):
        service.check_access("nobody", "US")


def test_check_access_rejects_malformed_region(service):
    service.create("D1", include=["US"])

    with pytest.raises(InvalidFormat):
        service.check_access("D1", "A-B-C-D")
    with pytest.raises(InvalidFormat):
        service.check_access("D1", "")


def _assert_subset(child_tree, parent_tree):
    for country_name, country in child_tree.items():
        assert country_name in parent_tree
        parent_country = parent_tree[country_name]
        for province_name, province in country.provinces.items():
            assert province_name in parent_country.provinces
            parent_cities = parent_country.provinces[province_name].cities
            assert set(province.cities) <= set(parent_cities)


def test_broad_child_include_stays_inside_narrowed_parent(service):
    parent = service.create("D1", include=["US"], exclude=["NY-US", "SF-CA-US"])

    child = service.create("D2", include=["US"], parent="D1")

    _assert_subset(child.regions, parent.regions)
    assert set(child.regions["US"].provinces) == {"CA"}
    assert set(child.regions["US"].provinces["CA"].cities) == {"LA"}
    assert service.check_access("D1", "NYC-NY-US") == "NO"
    assert service.check_access("D2", "NYC-NY-US") == "NO"
    assert service.check_access("D2", "SF-CA-US") == "NO"
    assert service.check_access("D2", "LA-CA-US") == "YES"


def test_child_of_emptied_parent_country_gets_nothing_beneath_it(service):
    parent = service.create("D1", include=["US"], exclude=["CA-US", "NY-US"])

    child = service.create("D2", include=["US"], parent="D1")

    _assert_subset(child.regions, parent.regions)
    assert child.regions["US"].provinces == {}
    assert service.check_access("D2", "US") == "YES"
    assert service.check_access("D2", "CA-US") == "NO"


def test_grandchild_stays_inside_every_ancestor(service):
    service.create("D1", include=["US", "INDIA"], exclude=["KARNATAKA-INDIA"])
    service.create("D2", include=["US"], exclude=["BUF-NY-US"], parent="D1")

    grandchild = service.create("D3", include=["US"], parent="D2")

    _assert_subset(grandchild.regions, service.get("D2").regions)
    _assert_subset(grandchild.regions, service.get("D1").regions)
    assert set(grandchild.regions["US"].provinces["NY"].cities) == {"NYC"}
