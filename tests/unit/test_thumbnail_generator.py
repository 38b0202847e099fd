"""
Unit tests for core/thumbnail_generator.py

Tests prompt composition and the OpenAI images call (client mocked).
"""

import pytest
from unittest.mock import Mock

from core.config import Config
from core.exceptions import ConfigurationError, ThumbnailError
from core.thumbnail_generator import (
    STYLE_DESCRIPTIONS,
    ThumbnailGenerator,
    build_thumbnail_prompt,
)


class TestBuildThumbnailPrompt:
    """Tests for build_thumbnail_prompt()"""

    @pytest.mark.unit
    def test_uses_title_over_transcript(self):
        prompt = build_thumbnail_prompt('long transcript', title='Cooking Pasta')
        assert 'a video about: "Cooking Pasta"' in prompt
        assert 'long transcript' not in prompt

    @pytest.mark.unit
    def test_truncates_transcript(self):
        transcript = 'a' * 600 + 'TAIL'
        prompt = build_thumbnail_prompt(transcript)
        assert 'a' * Config.TRANSCRIPT_PROMPT_CHARS in prompt
        assert 'TAIL' not in prompt

    @pytest.mark.unit
    def test_defaults_to_professional_style(self):
        assert STYLE_DESCRIPTIONS['professional'] in build_thumbnail_prompt('t')
        assert STYLE_DESCRIPTIONS['professional'] in build_thumbnail_prompt('t', style='unknown')

    @pytest.mark.unit
    def test_named_style(self):
        assert STYLE_DESCRIPTIONS['minimal'] in build_thumbnail_prompt('t', style='minimal')

    @pytest.mark.unit
    def test_color_guidance(self):
        prompt = build_thumbnail_prompt('t', brand_colors={'primary': '#ff0000', 'secondary': '#0000ff'})
        assert 'Use #ff0000 as the dominant color. Accent with #0000ff.' in prompt

    @pytest.mark.unit
    def test_secondary_ignored_without_primary(self):
        prompt = build_thumbnail_prompt('t', brand_colors={'secondary': '#0000ff'})
        assert '#0000ff' not in prompt


class TestThumbnailGenerator:
    """Tests for ThumbnailGenerator"""

    @pytest.fixture
    def client(self):
        client = Mock()
        image = Mock(url='https://images.example/1.png', revised_prompt='revised')
        client.images.generate.return_value = Mock(data=[image])
        return client

    @pytest.mark.unit
    def test_requires_api_key(self):
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY is not configured"):
            ThumbnailGenerator('')

    @pytest.mark.unit
    def test_generate_from_prompt(self, client):
        result = ThumbnailGenerator('sk-test', client=client).generate_from_prompt('a red car')

        assert result.image_url == 'https://images.example/1.png'
        assert result.revised_prompt == 'revised'
        client.images.generate.assert_called_once_with(
            model='dall-e-3',
            prompt='a red car',
            n=1,
            size='1792x1024',
            quality='standard',
        )

    @pytest.mark.unit
    def test_generate_builds_prompt(self, client):
        ThumbnailGenerator('sk-test', client=client).generate('transcript text', title='My Video')

        prompt = client.images.generate.call_args[1]['prompt']
        assert '"My Video"' in prompt

    @pytest.mark.unit
    def test_empty_response_raises(self, client):
        client.images.generate.return_value = Mock(data=[])

        with pytest.raises(ThumbnailError, match="No image data returned from DALL-E"):
            ThumbnailGenerator('sk-test', client=client).generate_from_prompt('x')

    @pytest.mark.unit
    def test_api_failure_raises(self, client):
        client.images.generate.side_effect = RuntimeError("rate limited")

        with pytest.raises(ThumbnailError, match="DALL-E generation failed: rate limited"):
            ThumbnailGenerator('sk-test', client=client).generate_from_prompt('x')
