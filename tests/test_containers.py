"""Tests for CollectionCheck and MappingCheck."""

from checkvalidators import CollectionCheck, MappingCheck, check


class TestCollections:
    """Test sized collection checks."""

    def test_if_empty(self):
        assert check([]).if_empty().get_errors() == ["The list is empty"]
        assert check((1,)).if_empty().is_valid()

    def test_if_not_empty(self):
        assert check({1, 2}).if_not_empty().get_errors() == ["The list is not empty"]

    def test_counts(self):
        items = [1, 2, 3]
        assert check(items).if_count(3).get_errors() == ["The item count should not be 3"]
        assert check(items).if_not_count(2).get_errors() == ["The item count is not 2"]
        assert check(items).if_count_greater_than(2).get_errors() == [
            "The item count is greater than 2"
        ]
        assert check(items).if_count_less_than(4).get_errors() == [
            "The item count is less than 4"
        ]

    def test_none(self):
        assert CollectionCheck(None).if_empty().if_count(0).error_count() == 0


class TestMappings:
    """Test mapping checks."""

    def test_if_empty(self):
        assert check({}).if_empty().get_errors() == ["Dictionary is empty"]
        assert check({"a": 1}).if_not_empty().get_errors() == ["Dictionary is not empty"]

    def test_counts(self):
        assert check({"a": 1, "b": 2}).if_count_greater_than(1).error_count() == 1

    def test_keys(self):
        data = {"id": 1}
        assert check(data).if_contains_key("id").get_errors() == [
            "Dictionary should not contain the key 'id'"
        ]
        assert check(data).if_not_contains_key("name").get_errors() == [
            "Dictionary does not contain the key 'name'"
        ]

    def test_is_a_collection_check(self):
        assert issubclass(MappingCheck, CollectionCheck)
