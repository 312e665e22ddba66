"""Tests for chunkviz.samples."""

import pytest

from chunkviz import ContentType, UnknownContentTypeError
from chunkviz.samples import SAMPLES, get_sample
from chunkviz.separators import get_separators


class TestSamples:
    def test_one_sample_per_content_type(self):
        assert set(SAMPLES) == set(ContentType)

    @pytest.mark.parametrize("content_type", list(ContentType))
    def test_sample_uses_its_separators(self, content_type):
        """Each sample contains at least one separator beyond single characters."""
        text = get_sample(content_type)
        assert text
        assert any(sep and sep in text for sep in get_separators(content_type))

    def test_default_is_text(self):
        assert get_sample() == SAMPLES[ContentType.TEXT]

    def test_string_tag(self):
        assert get_sample("html") == SAMPLES[ContentType.HTML]

    def test_unknown(self):
        with pytest.raises(UnknownContentTypeError):
            get_sample("cobol")
