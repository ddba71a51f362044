"""Tests for the UUID identifier value objects."""

from uuid import uuid4

import pytest

from learnhub.domain.content import CategoryId, ContentId
from learnhub.domain.shared.exceptions import InvalidFormatError
from learnhub_identity.domain.user import UserId


class TestIdentifier:
    """Behaviour shared by every identifier type."""

    @pytest.mark.parametrize("id_type", [UserId, CategoryId, ContentId])
    def test_generate_is_unique(self, id_type):
        assert id_type.generate() != id_type.generate()

    @pytest.mark.parametrize("id_type", [UserId, CategoryId, ContentId])
    def test_from_string_trims_whitespace(self, id_type):
        raw = uuid4()

        assert id_type.from_string(f"  {raw} ").value == raw

    def test_different_kinds_never_equal(self):
        """A category id and a content id with one UUID are distinct."""
        raw = uuid4()

        assert CategoryId(raw) != ContentId(raw)

    def test_error_names_the_kind(self):
        with pytest.raises(InvalidFormatError) as exc_info:
            CategoryId.from_string("python")

        assert exc_info.value.details["kind"] == CategoryId.kind
        assert exc_info.value.details["value"] == "python"

    def test_usable_as_dict_key(self):
        raw = uuid4()
        lookup = {ContentId(raw): "found"}

        assert lookup[ContentId.from_string(str(raw))] == "found"
