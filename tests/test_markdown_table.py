"""Tests for the certificate markdown table parser."""

from ca_leaderboard.markdown_table import is_separator, parse_markdown_table, split_cells


class TestSplitCells:

    def test_strips_edge_pipes(self):
        assert split_cells("| Alice | ABC123 |") == ["Alice", "ABC123"]

    def test_no_edge_pipes(self):
        assert split_cells("Alice|ABC123") == ["Alice", "ABC123"]

    def test_keeps_empty_inner_cell(self):
        assert split_cells("| Bob |  | x |") == ["Bob", "", "x"]


class TestIsSeparator:

    def test_plain_dashes(self):
        assert is_separator("|---|---|")

    def test_aligned(self):
        assert is_separator("| :--- | ---: |")

    def test_without_edge_pipes(self):
        assert is_separator("---|---")

    def test_single_dash_cells(self):
        assert is_separator("|-|-|")
        assert is_separator("| :-: | --: |")

    def test_data_row(self):
        assert not is_separator("| Alice | ABC123 |")


class TestParseMarkdownTable:

    def test_basic_table(self):
        text = "Name|Referral Code\n---|---\nAlice|ABC123\nBob|XYZ999\nAlice|ABC123"
        assert parse_markdown_table(text) == [
            {"Name": "Alice", "Referral Code": "ABC123"},
            {"Name": "Bob", "Referral Code": "XYZ999"},
            {"Name": "Alice", "Referral Code": "ABC123"},
        ]

    def test_piped_table_with_trailing_newline(self):
        text = "| Name | Referral Code |\n|------|------|\n| Alice | ABC123 |\n"
        assert parse_markdown_table(text) == [{"Name": "Alice", "Referral Code": "ABC123"}]

    def test_crlf_line_endings(self):
        text = "| Name | Referral Code |\r\n|---|---|\r\n| Alice | ABC123 |\r\n"
        assert parse_markdown_table(text) == [{"Name": "Alice", "Referral Code": "ABC123"}]

    def test_arity_mismatch_dropped(self):
        text = "| Name | Referral Code |\n|---|---|\n| Alice |\n| Bob | XYZ999 |\n| Eve | E1 | extra |"
        assert parse_markdown_table(text) == [{"Name": "Bob", "Referral Code": "XYZ999"}]

    def test_blank_and_separator_lines_skipped(self):
        text = "| Name | Referral Code |\n|---|---|\n\n   \n|---|---|\n| Bob | XYZ999 |"
        assert parse_markdown_table(text) == [{"Name": "Bob", "Referral Code": "XYZ999"}]

    def test_empty_referral_code_dropped(self):
        text = "| Name | Referral Code |\n|---|---|\n| Alice |  |\n| Bob | XYZ999 |"
        assert parse_markdown_table(text) == [{"Name": "Bob", "Referral Code": "XYZ999"}]

    def test_no_referral_codes_populated(self):
        text = "| Name | Referral Code |\n|---|---|\n| Alice |   |\n| Bob | |"
        assert parse_markdown_table(text) == []

    def test_empty_cells_kept_without_referral_column(self):
        text = "| Name | GitHub |\n|---|---|\n| Alice |  |"
        assert parse_markdown_table(text) == [{"Name": "Alice", "GitHub": ""}]

    def test_missing_separator_keeps_first_row(self):
        text = "| Name | Referral Code |\n| Alice | ABC123 |\n| Bob | XYZ999 |"
        rows = parse_markdown_table(text)
        assert [r["Name"] for r in rows] == ["Alice", "Bob"]

    def test_header_only(self):
        assert parse_markdown_table("| Name | Referral Code |\n|---|---|") == []

    def test_empty_text(self):
        assert parse_markdown_table("") == []

    def test_order_preserved(self):
        names = ["Zed", "Amy", "Kim", "Bea"]
        text = "| Name | Referral Code |\n|---|---|\n" + "\n".join(f"| {n} | C{i} |" for i, n in enumerate(names))
        assert [r["Name"] for r in parse_markdown_table(text)] == names

    def test_single_dash_separator(self):
        text = "| Name | Referral Code |\n|-|-|\n| Alice | ABC123 |"
        assert parse_markdown_table(text) == [{"Name": "Alice", "Referral Code": "ABC123"}]

    def test_short_aligned_separator(self):
        text = "| Name | Referral Code |\n| :-: | --: |\n| Alice | ABC123 |"
        assert parse_markdown_table(text) == [{"Name": "Alice", "Referral Code": "ABC123"}]
