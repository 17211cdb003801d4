"""pytest tests for text cleanup and formatting helpers."""
from datetime import datetime, timezone

import pytest

from podarchive.text import (
    ELLIPSIS,
    clean_description,
    format_date,
    format_duration,
    parse_pub_date,
    remove_source_prefix,
    slugify,
    strip_markup,
    truncate,
)

LOREM = ("Recovery is not a straight line. Some weeks you gain ground and some weeks "
         "you lose it, and the only thing that matters is showing up again tomorrow "
         "with the same stubborn energy you had on the first day of therapy.")


class TestStripMarkup:

    def test_removes_tags(self):
        assert strip_markup('<p>Hello <b>there</b></p>') == 'Hello there'

    def test_decodes_known_entities(self):
        assert strip_markup('a&nbsp;b &lt;c&gt; &#39;d&#39; &quot;e&quot;') == 'a b <c> \'d\' "e"'

    def test_leaves_other_entities(self):
        assert strip_markup('caf&eacute;') == 'caf&eacute;'


class TestRemoveSourcePrefix:

    def test_example(self):
        assert remove_source_prefix('Send us a text Welcome back!') == 'Welcome back!'

    def test_case_insensitive(self):
        assert remove_source_prefix('SEND US A TEXT hi') == 'hi'

    def test_only_at_start(self):
        text = 'Welcome! Send us a text anytime.'
        assert remove_source_prefix(text) == text

    def test_single_removal(self):
        assert remove_source_prefix('Send us a text Send us a text') == 'Send us a text'

    def test_clean_description_strips_markup_first(self):
        html = '<p><a href="https://example.com/sms">Send us a text</a></p><p>Welcome back!</p>'
        assert clean_description(html) == 'Welcome back!'


class TestTruncate:

    def test_short_text_returned_stripped(self):
        assert truncate('<p>Short and sweet.</p>', 200) == 'Short and sweet.'

    def test_exact_length_not_truncated(self):
        text = 'x' * 50
        assert truncate(text, 50) == text

    @pytest.mark.parametrize("limit", [10, 25, 40, 57, 80, 120, 150])
    def test_never_splits_a_word(self, limit):
        result = truncate(LOREM, limit)
        assert result.endswith(ELLIPSIS)
        body = result[:-len(ELLIPSIS)]
        assert len(result) <= limit + len(ELLIPSIS)
        # Every word in the excerpt is a whole word from the source
        source_words = LOREM.split()
        assert body.split() == source_words[:len(body.split())]

    def test_cut_on_word_boundary_keeps_last_word(self):
        # "Recovery is not a" is 17 chars and followed by a space
        assert truncate(LOREM, 17) == 'Recovery is not a' + ELLIPSIS

    def test_prefix_removed_before_measuring(self):
        assert truncate('Send us a text Hello', 5) == 'Hello'

    def test_default_length(self):
        assert len(truncate(LOREM * 2)) <= 200 + len(ELLIPSIS)


class TestFormatDuration:

    @pytest.mark.parametrize("raw,expected", [
        ('3725', '1h 2m'),
        ('3600', '1h 0m'),
        ('1500', '25 min'),
        ('59', '0 min'),
        ('45 min', '45 min'),
        ('00:38:12', '00:38:12'),
        ('', ''),
        ('²', '²'),
        ('12²', '12²'),
    ])
    def test_format_duration(self, raw, expected):
        assert format_duration(raw) == expected


class TestSlugify:

    @pytest.mark.parametrize("title,expected", [
        ('Bonus: Live Listener Questions', 'bonus-live-listener-questions'),
        ('  --Hello,  World!-- ', 'hello-world'),
        ('Q&A #3', 'q-a-3'),
        ('!!!', ''),
    ])
    def test_slugify(self, title, expected):
        assert slugify(title) == expected


class TestDates:

    def test_parse_rfc2822(self):
        parsed = parse_pub_date('Tue, 06 Aug 2024 05:00:00 -0400')
        assert parsed == datetime(2024, 8, 6, 9, 0, tzinfo=timezone.utc)

    def test_naive_taken_as_utc(self):
        parsed = parse_pub_date('Tue, 06 Aug 2024 05:00:00 -0000')
        assert parsed.tzinfo is not None

    @pytest.mark.parametrize("raw", [
        '',
        'not a date',
        '32/13/2024',
        'Mon, 99999999999999999999 Jan 2020 00:00:00 +0000',
    ])
    def test_invalid_gives_none(self, raw):
        assert parse_pub_date(raw) is None

    def test_format_date(self):
        assert format_date(datetime(2024, 1, 5)) == 'Jan. 5, 2024'
        assert format_date(datetime(2023, 12, 25)) == 'Dec. 25, 2023'

    def test_format_missing_date(self):
        assert format_date(None) == ''
