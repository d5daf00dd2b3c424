"""Tests for comment stripping."""

from kantara.preprocessor import strip_comments


class TestStripComments:
    def test_removes_line_comment(self):
        """Everything after // on a line is dropped."""
        assert strip_comments("key: 1 // trailing\nother: 2") == "key: 1 \nother: 2"

    def test_removes_block_comment_across_lines(self):
        """Block comments may span lines and are removed with their newlines."""
        assert strip_comments("a: 1\n/* one\ntwo */b: 2") == "a: 1\nb: 2"

    def test_block_comments_are_not_nested(self):
        """The first */ closes the comment."""
        assert strip_comments("/* a /* b */ c */") == " c */"

    def test_multiple_block_comments_are_removed_separately(self):
        assert strip_comments("/* a */x/* b */") == "x"

    def test_text_without_comments_is_unchanged(self):
        text = 'section {\n  key: "value"\n}'
        assert strip_comments(text) == text

    def test_comment_markers_inside_strings_still_strip(self):
        """Known limitation: quoted strings do not protect comment markers."""
        assert strip_comments('url: "http://example.com"') == 'url: "http:'
