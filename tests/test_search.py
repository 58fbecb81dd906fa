"""Tests for line search."""

from minigrep.search import search, search_case_insensitive


class TestSearch:
    """Test case-sensitive search."""

    def test_one_result(self):
        contents = "Rust:\nsafe, fast, productive.\nPick three."
        assert search("duct", contents) == ["safe, fast, productive."]

    def test_case_sensitive(self):
        contents = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."
        assert search("duct", contents) == ["safe, fast, productive."]

    def test_no_match(self):
        assert search("monomorphization", "Rust:\nPick three.") == []

    def test_multiple_matches_keep_order(self):
        contents = "b one\na two\nb three\nb one"
        assert search("b", contents) == ["b one", "b three", "b one"]

    def test_substring_not_word(self):
        """Matching is plain containment, not whole-word."""
        assert search("ick", "Pick three.\nthree") == ["Pick three."]

    def test_empty_query_matches_every_line(self):
        contents = "first\n\nthird"
        assert search("", contents) == ["first", "", "third"]

    def test_empty_contents(self):
        assert search("anything", "") == []
        assert search("", "") == []

    def test_trailing_newline_adds_no_line(self):
        assert search("", "a\nb\n") == ["a", "b"]

    def test_crlf_lines(self):
        assert search("fast", "Rust:\r\nsafe, fast\r\n") == ["safe, fast"]

    def test_lone_carriage_return_is_not_a_boundary(self):
        assert search("beta", "alpha\rbeta\ngamma") == ["alpha\rbeta"]

    def test_final_carriage_return_without_newline_kept(self):
        assert search("a", "a\r") == ["a\r"]
        assert search("", "x\r\ny\r") == ["x", "y\r"]

    def test_idempotent(self):
        contents = "Rust:\nsafe, fast, productive.\nPick three."
        assert search("t", contents) == search("t", contents)


class TestSearchCaseInsensitive:
    """Test case-insensitive search."""

    def test_case_insensitive(self):
        contents = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."
        assert search_case_insensitive("rUsT", contents) == ["Rust:", "Trust me."]

    def test_returns_original_casing(self):
        assert search_case_insensitive("duct", "Duct tape.") == ["Duct tape."]

    def test_empty_query_matches_every_line(self):
        assert search_case_insensitive("", "A\nb") == ["A", "b"]

    def test_empty_contents(self):
        assert search_case_insensitive("x", "") == []

    def test_superset_of_case_sensitive(self):
        contents = "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape."
        sensitive = search("duct", contents)
        insensitive = search_case_insensitive("duct", contents)
        assert len(insensitive) >= len(sensitive)
        assert set(sensitive).issubset(insensitive)
        assert insensitive == ["safe, fast, productive.", "Duct tape."]
