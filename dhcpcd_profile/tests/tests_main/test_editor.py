import pytest
from dhcpcd_profile.editor import (
    append_profile,
    profile_header,
    remove_profile,
    render_profile,
    replace_profile,
    split_lines,
    split_profile,
)


@pytest.fixture
def two_profile_document():
    """dhcpcd.conf excerpt with profiles a and b"""
    return [
        "hostname",
        "persistent",
        "",
        "profile a",
        "static ip_address=10.0.0.2/24",
        "static routers=10.0.0.1",
        "",
        "profile b",
        "static ip_address=10.1.0.2/24",
        "",
        "interface eth0",
        "fallback b",
    ]


class TestSplitLines:

    def test_trailing_newline_does_not_add_line(self):
        assert split_lines("hostname\npersistent\n") == ["hostname", "persistent"]

    def test_blank_lines_kept(self):
        assert split_lines("a\n\nb\n\n") == ["a", "", "b", ""]

    def test_empty_text(self):
        assert split_lines("") == []

    def test_one_carriage_return_dropped(self):
        assert split_lines("a\r\nb\r\r\nc") == ["a", "b\r", "c"]

    def test_other_separators_stay_inside_line(self):
        """Test that form feeds and Unicode separators do not split lines"""
        text = "# page\x0cbreak\n# sep\u2028here\nx\x0by\x1cz\x85w\n"
        assert split_lines(text) == ["# page\x0cbreak", "# sep\u2028here", "x\x0by\x1cz\x85w"]


class TestRemoveProfile:

    def test_block_runs_to_end_of_document(self):
        """Test that non-profile lines after the header belong to the block"""
        lines = ["line1", "profile eth0", "static ip_address=1.2.3.4", "line2"]
        assert remove_profile(lines, "eth0") == ["line1"]

    def test_block_ends_at_next_profile(self, two_profile_document):
        result = remove_profile(two_profile_document, "a")

        assert result == [
            "hostname",
            "persistent",
            "",
            "profile b",
            "static ip_address=10.1.0.2/24",
            "",
            "interface eth0",
            "fallback b",
        ]

    def test_missing_profile_keeps_everything(self, two_profile_document):
        assert remove_profile(two_profile_document, "c") == two_profile_document

    def test_header_must_match_exactly(self):
        """Test that profiles sharing a name prefix are not removed"""
        lines = ["profile eth0-backup", "static routers=1.1.1.1", "profile eth0 ", "static routers=2.2.2.2"]
        assert remove_profile(lines, "eth0") == lines

    def test_indented_profile_line_is_not_a_header(self):
        lines = ["profile eth0", "  profile other", "static routers=1.1.1.1"]
        assert remove_profile(lines, "eth0") == []

    def test_interleaved_duplicate_headers_both_removed(self):
        """Known limitation: a repeated header re-enters the block"""
        lines = [
            "profile a", "static routers=1",
            "profile b", "static routers=2",
            "profile a", "static routers=3",
        ]
        assert remove_profile(lines, "a") == ["profile b", "static routers=2"]

    def test_input_not_modified(self, two_profile_document):
        original = list(two_profile_document)
        remove_profile(two_profile_document, "a")
        assert two_profile_document == original

    def test_split_returns_removed_lines(self, two_profile_document):
        kept, removed = split_profile(two_profile_document, "b")

        assert removed == ["profile b", "static ip_address=10.1.0.2/24", "", "interface eth0", "fallback b"]
        assert kept == two_profile_document[:7]


class TestRenderProfile:

    def test_render(self):
        assert render_profile("wlan0", {'ip_address': '192.168.1.42', 'routers': '192.168.1.1'}) == [
            "",
            "profile wlan0",
            "static ip_address=192.168.1.42",
            "static routers=192.168.1.1",
        ]

    def test_render_empty_variables(self):
        assert render_profile("wlan0", {}) == ["", "profile wlan0"]

    def test_header(self):
        assert profile_header("wlan0") == "profile wlan0"


class TestReplaceProfile:

    def test_replace_existing_block(self):
        """Test replacing a block that runs to the end of the document"""
        lines = ["line1", "profile eth0", "static ip_address=1.2.3.4", "line2"]

        result = replace_profile(lines, "eth0", {'ip_address': '9.9.9.9'})

        assert result == ["line1", "", "profile eth0", "static ip_address=9.9.9.9"]

    def test_append_when_profile_missing(self):
        """Test that a fresh block is appended and prior lines stay intact"""
        lines = ["hostname", "interface eth0", "static routers=10.0.0.1"]

        result = replace_profile(lines, "eth0", {'ip_address': '9.9.9.9'})

        assert result[:3] == lines
        assert result[3:] == ["", "profile eth0", "static ip_address=9.9.9.9"]

    def test_empty_document(self):
        assert replace_profile([], "eth0", {'routers': '1.1.1.1'}) == ["", "profile eth0", "static routers=1.1.1.1"]

    def test_trailing_blank_line_reused_as_separator(self):
        lines = ["hostname", ""]
        assert replace_profile(lines, "eth0", {}) == ["hostname", "", "profile eth0"]

    def test_idempotent(self, two_profile_document):
        variables = {'ip_address': '10.0.0.9/24', 'routers': '10.0.0.1'}

        once = replace_profile(two_profile_document, "a", variables)
        twice = replace_profile(once, "a", variables)

        assert twice == once

    def test_other_profile_preserved(self, two_profile_document):
        """Test that profile b and non-profile lines keep content and order"""
        result = replace_profile(two_profile_document, "a", {'ip_address': '10.0.0.9/24'})

        # The blank line closing block a belongs to block a
        assert result == [
            "hostname",
            "persistent",
            "",
            "profile b",
            "static ip_address=10.1.0.2/24",
            "",
            "interface eth0",
            "fallback b",
            "",
            "profile a",
            "static ip_address=10.0.0.9/24",
        ]

    def test_single_header_after_replace(self, two_profile_document):
        result = replace_profile(two_profile_document, "b", {'routers': '10.1.0.1'})

        assert result.count("profile b") == 1
        assert result[-2:] == ["profile b", "static routers=10.1.0.1"]
        assert result[-3] == ""

    def test_variables_written_in_map_order(self):
        variables = {'subnet_cidr': '24', 'ip_address': '10.0.0.2', 'routers': '10.0.0.1'}

        result = replace_profile([], "eth0", variables)

        assert result[2:] == ["static subnet_cidr=24", "static ip_address=10.0.0.2", "static routers=10.0.0.1"]

    def test_input_not_modified(self, two_profile_document):
        original = list(two_profile_document)
        replace_profile(two_profile_document, "a", {'routers': '1.1.1.1'})
        assert two_profile_document == original


class TestAppendProfile:

    def test_appends_separator_and_block(self):
        assert append_profile(["hostname"], "eth0", {'routers': '1.1.1.1'}) == [
            "hostname", "", "profile eth0", "static routers=1.1.1.1"]

    def test_reuses_trailing_blank_line(self):
        """Test that only one blank line ends up before the header"""
        assert append_profile(["hostname", ""], "eth0", {}) == ["hostname", "", "profile eth0"]

    def test_input_not_modified(self):
        lines = ["hostname"]
        append_profile(lines, "eth0", {})
        assert lines == ["hostname"]
