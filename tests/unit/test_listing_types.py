import pytest

from listing_compliance.services.types import ListingSnapshot


def test_from_mapping_reads_camel_case_keys():
    listing = ListingSnapshot.from_mapping(
        {
            "address": " 5 Beach Road ",
            "draftCopy": "Sunny home.",
            "variantsJson": {"standard": "Std copy", "headlines": ["Sunny"], "bullets": ["North facing"]},
            "featuresJson": ["Heat pump"],
            "notes": "",
            "cv": "850000",
            "rv": 800000,
        }
    )
    assert listing.address == "5 Beach Road"
    assert listing.draft_copy == "Sunny home."
    assert listing.variants.standard == "Std copy"
    assert listing.variants.long is None
    assert listing.variants.headlines == ["Sunny"]
    assert listing.features == ["Heat pump"]
    assert listing.notes is None
    assert listing.cv == 850000.0


def test_from_mapping_treats_empty_object_as_present_variants():
    listing = ListingSnapshot.from_mapping({"address": "5 Beach Road", "variantsJson": {}})
    assert listing.variants is not None
    assert listing.variants.headlines == []


@pytest.mark.parametrize(
    "data",
    [
        {"address": "   "},
        {"address": "5 Beach Road", "featuresJson": "Heat pump"},
        {"address": "5 Beach Road", "variantsJson": ["standard"]},
        {"address": "5 Beach Road", "variantsJson": {"bullets": "one"}},
        {"address": "5 Beach Road", "cv": "lots"},
        {"address": "5 Beach Road", "cv": "nan", "rv": 500000},
        {"address": "5 Beach Road", "cv": 500000, "rv": "inf"},
        {"address": "5 Beach Road", "draftCopy": 5},
        {"address": "5 Beach Road", "draftCopy": "Tidy home.", "notes": 5},
        {"address": "5 Beach Road", "variantsJson": {"standard": 3}},
        {"address": "5 Beach Road", "variantsJson": {"long": ["Long copy"]}},
    ],
)
def test_from_mapping_rejects_malformed_input(data):
    with pytest.raises(ValueError):
        ListingSnapshot.from_mapping(data)


def test_from_mapping_keeps_empty_strings_as_absent():
    listing = ListingSnapshot.from_mapping({"address": "5 Beach Road", "draftCopy": "", "notes": ""})
    assert listing.draft_copy is None
    assert listing.notes is None
