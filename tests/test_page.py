"""
Tests for page request and page result shapes.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.schemas.page import Page, PageRequest


class TestPageRequest:

    def test_offset(self) -> None:
        assert PageRequest(page=3, size=25).offset == 75

    def test_defaults(self) -> None:
        request = PageRequest()
        assert request.page == 0
        assert request.offset == 0

    def test_rejects_negative_page_and_zero_size(self) -> None:
        with pytest.raises(PydanticValidationError):
            PageRequest(page=-1)
        with pytest.raises(PydanticValidationError):
            PageRequest(size=0)


class TestPage:

    def test_metadata(self) -> None:
        page = Page[int].of([1, 2], PageRequest(page=0, size=2), 5)

        assert page.total_pages == 3
        assert page.number_of_elements == 2
        assert page.first is True
        assert page.last is False
        assert page.empty is False

    def test_empty_page_beyond_total(self) -> None:
        page = Page[int].of([], PageRequest(page=9, size=2), 5)

        assert page.empty is True
        assert page.last is True
        assert page.total_elements == 5
