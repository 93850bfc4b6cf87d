"""
Tests for the retention policy: exactly one file survives per group,
and a file with the preferred extension wins when there is one.
"""
import pytest

from dedupe.core.selector import RetentionSelectorImpl


class TestRetentionSelector:

    def test_preferred_extension_is_retained(self):
        members = {"/x/a.txt", "/x/b.txt", "/x/c.doc"}

        retained, duplicates = RetentionSelectorImpl().select(members, preferred="doc")

        assert retained == "/x/c.doc"
        assert duplicates == {"/x/a.txt", "/x/b.txt"}

    def test_preferred_extension_accepts_leading_dot(self):
        retained, _ = RetentionSelectorImpl().select({"/a.txt", "/z.doc"}, preferred=".doc")
        assert retained == "/z.doc"

    def test_preferred_extension_is_case_sensitive(self):
        retained, _ = RetentionSelectorImpl().select({"/a.txt", "/b.DOC"}, preferred="doc")
        assert retained == "/a.txt"

    def test_several_preferred_members_keep_smallest_path(self):
        members = {"/b.doc", "/a.txt", "/c.doc"}

        retained, duplicates = RetentionSelectorImpl().select(members, preferred="doc")

        assert retained == "/b.doc"
        assert duplicates == {"/a.txt", "/c.doc"}

    def test_no_member_has_preferred_extension(self):
        members = {"/b.txt", "/a.txt"}

        retained, duplicates = RetentionSelectorImpl().select(members, preferred="pdf")

        assert retained == "/a.txt"
        assert duplicates == {"/b.txt"}

    @pytest.mark.parametrize("preferred", [None, "", "   "])
    def test_no_preference_keeps_one_member(self, preferred):
        members = {"/c.doc", "/a.txt", "/b.txt"}

        retained, duplicates = RetentionSelectorImpl().select(members, preferred=preferred)

        assert retained == "/a.txt"
        assert len(duplicates) == 2
        assert retained not in duplicates
        assert duplicates | {retained} == members

    def test_single_member_group_has_no_duplicates(self):
        retained, duplicates = RetentionSelectorImpl().select({"/only.txt"}, preferred="doc")
        assert retained == "/only.txt"
        assert duplicates == set()

    def test_members_are_not_mutated(self):
        members = {"/a.txt", "/b.txt"}
        RetentionSelectorImpl().select(members)
        assert members == {"/a.txt", "/b.txt"}

    def test_empty_group_is_rejected(self):
        with pytest.raises(ValueError, match="empty group"):
            RetentionSelectorImpl().select(set())

    def test_candidates(self):
        members = {"/a.txt", "/b.doc", "/c.doc"}
        assert RetentionSelectorImpl.candidates(members, "doc") == {"/b.doc", "/c.doc"}
        assert RetentionSelectorImpl.candidates(members, "pdf") == members
        assert RetentionSelectorImpl.candidates(members) == members
