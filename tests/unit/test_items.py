"""
Unit tests for Entry/Item records and id comparison.
"""
import pytest

from remserver.exceptions import MalformedInput
from remserver.storage.items import Entry, Item, is_item_id, same_id


@pytest.mark.unit
class TestIds:

    @pytest.mark.parametrize("value", [0, 1, 42, 2.5])
    def test_numbers_are_ids(self, value):
        assert is_item_id(value)

    @pytest.mark.parametrize("value", ["3", None, True, [1], {"id": 1}])
    def test_non_numbers_are_not_ids(self, value):
        assert not is_item_id(value)

    def test_same_id_is_type_aware(self):
        assert same_id(3, 3)
        assert not same_id(3, "3")
        assert not same_id("3", 3)
        assert not same_id(1, True)
        assert not same_id(3, 3.0)


@pytest.mark.unit
class TestRecords:

    def test_assign_id_overwrites_caller_id(self):
        item = Entry({"id": "abc", "title": "A"}).assign_id(7)

        assert item.id == 7
        assert item.to_json() == {"id": 7, "title": "A"}

    def test_assign_id_does_not_mutate_entry(self):
        entry = Entry({"title": "A"})

        entry.assign_id(1)

        assert entry.fields == {"title": "A"}

    def test_item_requires_numeric_id(self):
        with pytest.raises(MalformedInput):
            Item({"title": "no id"})
        with pytest.raises(MalformedInput):
            Item({"id": "1"})

    def test_coerce(self):
        entry = Entry({"a": 1})

        assert Entry.coerce(entry) is entry
        assert Entry.coerce({"a": 1}) == entry
        assert Entry.coerce(Item({"id": 1, "a": 1})).fields == {"id": 1, "a": 1}

    @pytest.mark.parametrize("payload", [None, "text", 5, [{"a": 1}]])
    def test_coerce_rejects_non_objects(self, payload):
        with pytest.raises(MalformedInput):
            Entry.coerce(payload)
