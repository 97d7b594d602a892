"""Unit tests for shared input validation."""

import pytest

from ridedispatch.domain.errors import InvalidInput
from ridedispatch.domain.validation import require_text


class TestRequireText:
    def test_filled_fields_pass(self):
        require_text(start_location="A", destination="B")

    def test_names_every_blank_field(self):
        with pytest.raises(InvalidInput, match="start_location, destination"):
            require_text(start_location="", destination="  ")

    def test_none_is_blank(self):
        with pytest.raises(InvalidInput, match="name"):
            require_text(name=None)
