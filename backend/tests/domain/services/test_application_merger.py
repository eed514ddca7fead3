"""Unit tests for partial update merge rules."""

from domain.services import deep_merge, merge_application_document, prune_empty


class TestDeepMerge:
    """Test recursive merging."""

    def test_nested_mappings_merge_key_by_key(self):
        target = {"a": {"b": 1, "c": 2}}
        deep_merge(target, {"a": {"c": 3, "d": 4}})
        assert target == {"a": {"b": 1, "c": 3, "d": 4}}

    def test_lists_are_replaced(self):
        """Test that a list in the patch replaces the stored list."""
        target = {"files": ["old.pdf", "older.pdf"]}
        deep_merge(target, {"files": ["new.pdf"]})
        assert target == {"files": ["new.pdf"]}


class TestPruneEmpty:
    """Test removal of empty values."""

    def test_empty_values_are_removed_bottom_up(self):
        value = {"a": "", "b": None, "c": {"d": {}}, "e": [], "f": "kept", "g": 0}
        assert prune_empty(value) == {"f": "kept", "g": 0}

    def test_empty_items_inside_lists_are_removed(self):
        assert prune_empty({"files": ["", "x.pdf", None]}) == {"files": ["x.pdf"]}


class TestMergeApplicationDocument:
    """Test the two-phase application merge."""

    existing = {
        "applicantId": 2016011001,
        "year": 2018,
        "scholarship": {
            "status": {"A": "Pending", "B": "Pending"},
            "contents": {"A": {"content": "letter A"}, "B": {"content": "letter B"}},
        },
    }

    def test_status_is_replaced_not_merged(self):
        """Test that decisions replace the previous status map."""
        merged = merge_application_document(self.existing, {"scholarship": {"status": {"A": "Approved"}}})
        assert merged["scholarship"]["status"] == {"A": "Approved"}

    def test_untouched_contents_are_preserved(self):
        """Test that contents titles not in the patch survive a status update."""
        merged = merge_application_document(self.existing, {"scholarship": {"status": {"A": "Approved"}}})
        assert merged["scholarship"]["contents"] == self.existing["scholarship"]["contents"]

    def test_contents_merge_per_title(self):
        patch = {"scholarship": {"contents": {"A": {"content": "new A"}}}}
        merged = merge_application_document(self.existing, patch)
        assert merged["scholarship"]["contents"]["A"] == {"content": "new A"}
        assert merged["scholarship"]["contents"]["B"] == {"content": "letter B"}
        assert merged["scholarship"]["status"] == {"A": "Pending", "B": "Pending"}

    def test_empty_string_removes_a_field(self):
        """Test that an empty value in the patch prunes the stored value."""
        patch = {"scholarship": {"contents": {"B": {"content": ""}}}}
        merged = merge_application_document(self.existing, patch)
        assert "B" not in merged["scholarship"]["contents"]

    def test_status_for_new_category(self):
        """Test that a status for an absent category creates the category."""
        merged = merge_application_document(self.existing, {"honor": {"status": {"优秀学生": "已通过"}}})
        assert merged["honor"] == {"status": {"优秀学生": "已通过"}}

    def test_existing_document_is_not_modified(self):
        merge_application_document(self.existing, {"scholarship": {"status": {}}})
        assert self.existing["scholarship"]["status"] == {"A": "Pending", "B": "Pending"}

    def test_empty_status_removes_status(self):
        merged = merge_application_document(self.existing, {"scholarship": {"status": {}}})
        assert "status" not in merged["scholarship"]
