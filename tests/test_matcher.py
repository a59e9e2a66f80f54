"""Pattern engine tests."""

import pytest

from signpost_core.routing.matcher import PatternEngine, PatternEngineError


class TestMatching:
    """Test pattern matching."""

    def test_static_pattern(self):
        """Test exact static match."""
        engine = PatternEngine()
        engine.map(["GET"], "posts/all", "target")

        match = engine.match("/posts/all", "GET")

        assert match.target == "target"
        assert match.params == {}

    def test_method_must_match(self):
        """Test methods are compared upper-cased."""
        engine = PatternEngine()
        engine.map(["get"], "posts", "target")

        assert engine.match("/posts", "get") is not None
        assert engine.match("/posts", "POST") is None

    def test_default_type_matches_one_segment(self):
        """Test the default type stops at slashes."""
        engine = PatternEngine()
        engine.map(["GET"], "posts/[:id]", "target")

        assert engine.match("/posts/abc", "GET").params == {"id": "abc"}
        assert engine.match("/posts/abc/def", "GET") is None

    @pytest.mark.parametrize(
        "type_id, good, bad",
        [
            ("i", "123", "12a"),
            ("a", "abc123", "abc-123"),
            ("h", "beef01", "xyz"),
        ],
    )
    def test_builtin_types(self, type_id, good, bad):
        """Test built-in match types."""
        engine = PatternEngine()
        engine.map(["GET"], f"items/[{type_id}:id]", "target")

        assert engine.match(f"/items/{good}", "GET").params == {"id": good}
        assert engine.match(f"/items/{bad}", "GET") is None

    def test_custom_match_type(self):
        """Test match types registered by tag."""
        engine = PatternEngine()
        engine.add_match_types({"year": "[0-9]{4}"})
        engine.map(["GET"], "archive/[year:year]", "target")

        assert engine.match("/archive/2024", "GET").params == {"year": "2024"}
        assert engine.match("/archive/24", "GET") is None

    def test_unknown_match_type_raises(self):
        """Test unregistered tags fail at map time."""
        engine = PatternEngine()

        with pytest.raises(PatternEngineError):
            engine.map(["GET"], "items/[nope:id]", "target")

    def test_optional_block_takes_its_slash(self):
        """Test optional placeholders drop the preceding slash."""
        engine = PatternEngine()
        engine.map(["GET"], "posts/[:id]?", "target")

        assert engine.match("/posts", "GET").params == {}
        assert engine.match("/posts/5", "GET").params == {"id": "5"}
        assert engine.match("/posts/", "GET") is None

    def test_regex_metacharacters_in_static_text_are_literal(self):
        """Test static text is escaped."""
        engine = PatternEngine()
        engine.map(["GET"], "feed.xml", "target")

        assert engine.match("/feed.xml", "GET") is not None
        assert engine.match("/feedaxml", "GET") is None

    def test_first_entry_wins(self):
        """Test registration order."""
        engine = PatternEngine()
        engine.map(["GET"], "[:slug]", "first")
        engine.map(["GET"], "about", "second")

        assert engine.match("/about", "GET").target == "first"

    def test_question_mark_is_part_of_the_path(self):
        """Test paths are matched as given."""
        engine = PatternEngine()
        engine.map(["GET"], "search/[:term]", "target")

        assert engine.match("/search/a?b", "GET").params == {"term": "a?b"}

    def test_invalid_match_type_regex_raises(self):
        """Test regexes that do not compile fail at map time."""
        engine = PatternEngine()
        engine.add_match_types({"bad": "[0-9"})

        with pytest.raises(PatternEngineError):
            engine.map(["GET"], "items/[bad:id]", "target")

    def test_base_path_is_stripped(self):
        """Test matching is relative to the base path."""
        engine = PatternEngine("/api/")
        engine.map(["GET"], "posts", "target")

        assert engine.match("/api/posts", "GET") is not None
        assert engine.match("/posts", "GET") is None

    def test_base_path_without_trailing_slash_matches_root(self):
        """Test the base path itself reaches the empty pattern."""
        engine = PatternEngine("/api/")
        engine.map(["GET"], "", "root")

        assert engine.match("/api", "GET").target == "root"
        assert engine.match("/api/", "GET").target == "root"

    def test_match_reports_name(self):
        """Test EngineMatch carries the entry name."""
        engine = PatternEngine()
        engine.map(["GET"], "posts", "target", name="posts")

        assert engine.match("/posts", "GET").name == "posts"


class TestGeneration:
    """Test reverse URL generation."""

    def test_generate_static(self):
        """Test base path is prepended."""
        engine = PatternEngine("/api/")
        engine.map(["GET"], "posts/", "target", name="posts")

        assert engine.generate("posts") == "/api/posts/"

    def test_generate_with_params(self):
        """Test values are substituted with str()."""
        engine = PatternEngine()
        engine.map(["GET"], "posts/[i:id]/comments/[:slug]/", "target", name="comment")

        assert engine.generate("comment", {"id": 5, "slug": "hi"}) == "/posts/5/comments/hi/"

    def test_generate_omits_optional_block(self):
        """Test optional params can be left out."""
        engine = PatternEngine()
        engine.map(["GET"], "posts/[:id]?/", "target", name="posts")

        assert engine.generate("posts") == "/posts/"
        assert engine.generate("posts", {"id": None}) == "/posts/"
        assert engine.generate("posts", {"id": 3}) == "/posts/3/"

    def test_generate_missing_required_raises(self):
        """Test required params must be supplied."""
        engine = PatternEngine()
        engine.map(["GET"], "posts/[:id]/", "target", name="posts")

        with pytest.raises(PatternEngineError):
            engine.generate("posts")

    def test_generate_unknown_name_raises(self):
        """Test unknown names."""
        with pytest.raises(PatternEngineError):
            PatternEngine().generate("missing")

    def test_last_name_wins(self):
        """Test re-registering a name repoints it."""
        engine = PatternEngine()
        engine.map(["GET"], "first/", "a", name="dup")
        engine.map(["GET"], "second/", "b", name="dup")

        assert engine.generate("dup") == "/second/"

    def test_generate_rejects_values_outside_match_type(self):
        """Test values that would not match their placeholder."""
        engine = PatternEngine()
        engine.map(["GET"], "posts/[:id]/comments/", "target", name="comments")
        engine.map(["GET"], "items/[i:id]/", "target", name="items")

        for name, value in (("comments", ""), ("comments", "a/b"), ("items", "abc")):
            with pytest.raises(PatternEngineError):
                engine.generate(name, {"id": value})
