import pytest
from api_release_notes.diff.base import DiffOptions
from api_release_notes.diff.renames import detect_renames, path_similarity


class TestPathSimilarity:
    def test_identical_paths(self):
        assert path_similarity("/pets/{id}", "/pets/{id}") == 1.0

    def test_one_differing_segment_of_four(self):
        assert path_similarity("/api/store/v1/inventory", "/api/store/v2/inventory") == 0.75

    def test_length_difference_over_one(self):
        assert path_similarity("/a", "/a/b/c") == 0.0

    def test_length_difference_of_one(self):
        assert path_similarity("/a/b/c", "/a/b/c/d") == 0.75

    def test_empty_segments_ignored(self):
        assert path_similarity("//pets//{id}/", "/pets/{id}") == 1.0

    def test_root_paths(self):
        assert path_similarity("/", "/") == 0.0


class TestDetectRenames:
    def test_different_first_segment_is_not_rename(self):
        result = detect_renames({"/accounts/{id}": {"GET"}}, {"/users/{id}": {"GET"}})
        assert path_similarity("/users/{id}", "/accounts/{id}") == 0.5
        assert result.renamed == {}
        assert result.added == {"/accounts/{id}": {"GET"}}
        assert result.removed == {"/users/{id}": {"GET"}}

    def test_version_bump_on_short_path_is_not_rename(self):
        result = detect_renames({"/v2/widgets": {"GET", "POST"}}, {"/v1/widgets": {"GET", "POST"}})
        assert path_similarity("/v1/widgets", "/v2/widgets") == 0.5
        assert result.renamed == {}

    def test_pluralized_segment_is_not_rename(self):
        result = detect_renames({"/pets/{id}": {"GET"}}, {"/pet/{id}": {"GET"}})
        assert path_similarity("/pet/{id}", "/pets/{id}") == 0.5
        assert result.renamed == {}

    def test_rename_detected(self):
        result = detect_renames(
            {"/api/store/v2/inventory": {"GET"}, "/other": {"GET"}},
            {"/api/store/v1/inventory": {"GET"}},
        )
        assert set(result.renamed) == {"/api/store/v1/inventory"}
        rename = result.renamed["/api/store/v1/inventory"]
        assert rename.new_path == "/api/store/v2/inventory"
        assert rename.methods == {"GET"}
        assert result.added == {"/other": {"GET"}}
        assert result.removed == {}

    def test_methods_must_match(self):
        result = detect_renames({"/api/store/v2/inventory": {"GET", "PUT"}}, {"/api/store/v1/inventory": {"GET"}})
        assert result.renamed == {}

    def test_first_added_match_wins(self):
        added = {"/api/v2/items/list": {"GET"}, "/api/v3/items/list": {"GET"}}
        result = detect_renames(added, {"/api/v1/items/list": {"GET"}})
        assert result.renamed["/api/v1/items/list"].new_path == "/api/v2/items/list"
        assert result.added == {"/api/v3/items/list": {"GET"}}

    def test_matched_added_path_is_consumed(self):
        added = {"/api/v3/items/list": {"GET"}}
        removed = {"/api/v1/items/list": {"GET"}, "/api/v2/items/list": {"GET"}}
        result = detect_renames(added, removed)
        assert set(result.renamed) == {"/api/v1/items/list"}
        assert result.removed == {"/api/v2/items/list": {"GET"}}
        assert result.added == {}

    def test_inputs_not_mutated(self):
        added = {"/api/store/v2/inventory": {"GET"}}
        removed = {"/api/store/v1/inventory": {"GET"}}
        detect_renames(added, removed)
        assert added == {"/api/store/v2/inventory": {"GET"}}
        assert removed == {"/api/store/v1/inventory": {"GET"}}

    @pytest.mark.parametrize("threshold, expected", [(0.5, 1), (0.51, 0)])
    def test_threshold(self, threshold, expected):
        result = detect_renames({"/v2/widgets": {"GET"}}, {"/v1/widgets": {"GET"}}, threshold=threshold)
        assert len(result.renamed) == expected

    def test_default_threshold_matches_options(self):
        # 0.75 similarity passes the default; 2/3 does not
        assert path_similarity("/a/b/c", "/a/b/d") < DiffOptions().rename_threshold
        assert detect_renames({"/a/b/d": {"GET"}}, {"/a/b/c": {"GET"}}).renamed == {}
        assert len(detect_renames({"/a/b/c/e": {"GET"}}, {"/a/b/c/d": {"GET"}}).renamed) == 1
