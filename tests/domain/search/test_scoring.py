"""Tests for tag match scoring."""

from sample_scout.domain.search.scoring import (
    build_tag_vocabulary,
    count_matches,
    score,
)


class TestBuildTagVocabulary:
    """Tests for flattening tags into a token set."""

    def test_multi_word_tags_are_split(self):
        assert build_tag_vocabulary(["drum break"]) == {"drum", "break"}

    def test_duplicates_collapse(self):
        assert build_tag_vocabulary(["Bass", "bass", "bass loop"]) == {"bass", "loop"}

    def test_empty_tags(self):
        assert build_tag_vocabulary([]) == set()


class TestCountMatches:
    """Tests for exact vs. partial-only counting."""

    def test_exact_match_not_counted_as_partial(self):
        vocabulary = {"drum", "drumroll"}
        assert count_matches(vocabulary, ["drum"]) == (1, 0)

    def test_partial_only_match(self):
        assert count_matches({"drumroll"}, ["drum"]) == (0, 1)

    def test_no_match(self):
        assert count_matches({"synth"}, ["bass"]) == (0, 0)


class TestScore:
    """Tests for the weighted score."""

    def test_two_exact_matches(self):
        assert score(["bass", "loop"], ["bass", "loop"]) == 4.0

    def test_one_exact_match(self):
        assert score(["vocal chop"], ["vocal"]) == 2.0

    def test_one_partial_match(self):
        assert score(["drumroll"], ["drum"]) == 0.5

    def test_exact_weight_is_four_times_partial(self):
        exact = score(["drum"], ["drum"])
        partial = score(["drumroll"], ["drum"])
        assert exact == 4 * partial

    def test_mixed_exact_and_partial(self):
        assert score(["drum", "synthwave"], ["drum", "synth"]) == 2.5

    def test_repeated_query_word_doubles_contribution(self):
        single = score(["kick"], ["kick"])
        double = score(["kick"], ["kick", "kick"])
        assert double == 2 * single

        single_partial = score(["kicker"], ["kick"])
        double_partial = score(["kicker"], ["kick", "kick"])
        assert double_partial == 2 * single_partial

    def test_tags_are_normalized_before_matching(self):
        """Query words come pre-normalized; tags are normalized by score()."""
        assert score(["Drums"], ["drum"]) == 2.0

    def test_empty_tags_score_zero(self):
        assert score([], ["bass"]) == 0

    def test_empty_query_scores_zero(self):
        assert score(["bass"], []) == 0

    def test_score_never_negative(self):
        assert score(["pad"], ["bass", "loop"]) >= 0
