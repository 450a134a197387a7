"""Tests for sanitizer.strip_shortcodes, strip_all_tags and trim_words."""

from app.services.sanitizer import strip_all_tags, strip_shortcodes, summarize_html, trim_words


class TestStripShortcodes:
    def test_strips_divi_section_tags(self):
        html = "[et_pb_section fb_built='1'][/et_pb_section]"
        assert strip_shortcodes(html) == ""

    def test_strips_self_closing_shortcode(self):
        result = strip_shortcodes("Before [gallery ids='1,2,3'] After")
        assert "[gallery" not in result
        assert "Before" in result
        assert "After" in result

    def test_no_shortcodes_unchanged(self):
        html = "<p>Regular HTML content without shortcodes.</p>"
        assert strip_shortcodes(html) == html

    def test_strips_wpbakery_shortcodes(self):
        html = "[vc_row][vc_column width='1/1']<p>Content</p>[/vc_column][/vc_row]"
        result = strip_shortcodes(html)
        assert "vc_row" not in result
        assert "<p>Content</p>" in result

    def test_empty_string(self):
        assert strip_shortcodes("") == ""


class TestStripAllTags:
    def test_removes_markup(self):
        assert strip_all_tags("<p>Hello <strong>world</strong></p>") == "Hello world"

    def test_drops_script_and_style_bodies(self):
        html = "<style>p{color:red}</style><p>Text</p><script>alert(1)</script>"
        assert strip_all_tags(html) == "Text"

    def test_decodes_entities(self):
        assert strip_all_tags("Tom &amp; Jerry&#8217;s") == "Tom & Jerry’s"

    def test_collapses_whitespace(self):
        assert strip_all_tags("  one\n\n two\tthree ") == "one two three"

    def test_empty_and_blank(self):
        assert strip_all_tags("") == ""
        assert strip_all_tags("   ") == ""


class TestTrimWords:
    def test_short_text_unchanged(self):
        assert trim_words("one two three", 30) == "one two three"

    def test_long_text_truncated_with_more(self):
        text = " ".join(f"w{i}" for i in range(40))
        result = trim_words(text, 30, "...")
        assert result == " ".join(f"w{i}" for i in range(30)) + "..."

    def test_exact_length_has_no_ellipsis(self):
        text = " ".join(["word"] * 30)
        assert not trim_words(text, 30).endswith("...")


class TestSummarizeHtml:
    def test_strips_shortcodes_and_tags_before_trimming(self):
        html = "[et_pb_text]<p>" + " ".join(["alpha"] * 35) + "</p>[/et_pb_text]"
        result = summarize_html(html, 30)
        assert "et_pb" not in result
        assert result.endswith("...")
        assert len(result[:-3].split()) == 30
