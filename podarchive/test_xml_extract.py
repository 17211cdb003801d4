"""pytest tests for the regex feed extraction helpers."""
import pytest

from podarchive.xml_extract import all_items, attr_value, channel_fragment, tag_content, unwrap_cdata

ITEM = """
    <itunes:title>Recovery Talk</itunes:title>
    <title><![CDATA[42. Recovery Talk]]></title>
    <itunes:episodeType>full</itunes:episodeType>
    <itunes:episode>42</itunes:episode>
    <enclosure url="https://www.buzzsprout.com/2117363/episodes/15512345-recovery-talk.mp3" length="1" type="audio/mpeg" />
    <itunes:image href='https://example.com/ep.jpg'/>
    <GUID isPermaLink="false">Buzzsprout-15512345</GUID>
"""


class TestTagContent:

    def test_cdata_returned_raw(self):
        assert tag_content(ITEM, 'title') == '<![CDATA[42. Recovery Talk]]>'

    def test_prefixed_tag_not_confused_with_longer_name(self):
        assert tag_content(ITEM, 'itunes:episode') == '42'
        assert tag_content(ITEM, 'itunes:episodeType') == 'full'

    def test_case_insensitive(self):
        assert tag_content(ITEM, 'guid') == 'Buzzsprout-15512345'

    def test_trimmed(self):
        assert tag_content('<title>\n  Spaced  \n</title>', 'title') == 'Spaced'

    def test_missing_is_empty(self):
        assert tag_content(ITEM, 'pubDate') == ''

    def test_self_closing_never_opens(self):
        assert tag_content(ITEM, 'itunes:image') == ''

    def test_first_match_wins(self):
        assert tag_content('<title>a</title><title>b</title>', 'title') == 'a'


class TestAttrValue:

    def test_enclosure_url(self):
        assert attr_value(ITEM, 'enclosure', 'url').endswith('15512345-recovery-talk.mp3')

    def test_single_quotes_and_self_closing(self):
        assert attr_value(ITEM, 'itunes:image', 'href') == 'https://example.com/ep.jpg'

    def test_missing_attribute(self):
        assert attr_value(ITEM, 'enclosure', 'href') == ''

    def test_missing_tag(self):
        assert attr_value(ITEM, 'media:content', 'url') == ''


class TestUnwrapCData:

    def test_cdata_keeps_markup(self):
        assert unwrap_cdata('<![CDATA[ <p>Hi</p> ]]>') == '<p>Hi</p>'

    def test_plain_text_markup_stripped(self):
        assert unwrap_cdata(' <p>Hi <b>there</b></p> ') == 'Hi there'

    def test_empty(self):
        assert unwrap_cdata('') == ''


class TestItemsAndChannel:

    FEED = """<rss><channel><title>Show</title><link>https://show.example</link>
        <item><title>Newest</title></item>
        <item><title>Older</title></item>
        </channel></rss>"""

    def test_all_items_in_document_order(self):
        items = all_items(self.FEED)
        assert [tag_content(i, 'title') for i in items] == ['Newest', 'Older']

    def test_channel_stops_at_first_item(self):
        channel = channel_fragment(self.FEED)
        assert tag_content(channel, 'title') == 'Show'
        assert 'Newest' not in channel

    def test_channel_without_items(self):
        channel = channel_fragment('<rss><channel><title>Empty</title></channel></rss>')
        assert tag_content(channel, 'title') == 'Empty'

    @pytest.mark.parametrize("xml", ['', 'not xml at all', '<rss></rss>'])
    def test_garbage_gives_nothing(self, xml):
        assert all_items(xml) == []
        assert channel_fragment(xml) == ''
