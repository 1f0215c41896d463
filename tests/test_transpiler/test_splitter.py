"""Tests for splitting Figma CSS on comment labels."""

from figma_converter.transpiler.splitter import is_noise_label, split_comment_blocks


class TestSplitCommentBlocks:
    def test_pairs_labels_with_following_text(self):
        text = "/* Button */\ndisplay: flex;\n/* Label */\ncolor: red;"
        assert split_comment_blocks(text) == (
            ("Button", "display: flex;"),
            ("Label", "color: red;"),
        )

    def test_preamble_before_first_comment_is_ignored(self):
        text = "color: blue;\n/* Card */\npadding: 8px;"
        assert split_comment_blocks(text) == (("Card", "padding: 8px;"),)

    def test_no_comments(self):
        assert split_comment_blocks("display: flex;") == ()

    def test_empty_input(self):
        assert split_comment_blocks("") == ()


class TestRejectedLabels:
    def test_auto_layout_noise_dropped(self):
        assert split_comment_blocks("/* Auto layout */ { display: flex; }") == ()

    def test_inside_auto_layout_noise_dropped(self):
        text = "/* Inside auto layout */\nflex: none;\n/* Icon */\nwidth: 16px;"
        assert split_comment_blocks(text) == (("Icon", "width: 16px;"),)

    def test_blank_label_dropped(self):
        assert split_comment_blocks("/*  */\ncolor: red;") == ()

    def test_label_without_body_dropped(self):
        assert split_comment_blocks("/* Button */") == ()

    def test_consecutive_labels_drop_the_empty_one(self):
        text = "/* Frame 12 */\n/* Button */\ncolor: red;"
        assert split_comment_blocks(text) == (("Button", "color: red;"),)


class TestIsNoiseLabel:
    def test_noise(self):
        assert is_noise_label("Auto layout")
        assert is_noise_label("Inside auto layout")

    def test_not_noise(self):
        assert not is_noise_label("Primary Button")

    def test_case_sensitive(self):
        assert not is_noise_label("auto layout")
