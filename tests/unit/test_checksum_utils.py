from listing_compliance.services.types import ListingSnapshot, ListingVariants
from listing_compliance.utils.checksum import canonical_json, snapshot_checksum


def test_checksum_is_stable_for_equal_snapshots():
    first = ListingSnapshot(address="1 Main Road", draft_copy="Tidy home", variants=ListingVariants(bullets=["a"]))
    second = ListingSnapshot(address="1 Main Road", draft_copy="Tidy home", variants=ListingVariants(bullets=["a"]))
    assert snapshot_checksum(first) == snapshot_checksum(second)
    assert len(snapshot_checksum(first)) == 64


def test_checksum_changes_with_copy():
    first = ListingSnapshot(address="1 Main Road", draft_copy="Tidy home")
    second = ListingSnapshot(address="1 Main Road", draft_copy="Tidy house")
    assert snapshot_checksum(first) != snapshot_checksum(second)


def test_canonical_json_sorts_keys():
    assert canonical_json({"b": 1, "a": 2}) == '{"a":2,"b":1}'
