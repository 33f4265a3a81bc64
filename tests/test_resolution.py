"""
Tests for the ability resolution layer.
"""
import pytest

from creature_importer.catalog import IndexHit
from creature_importer.models import AbilityKind, ReferenceLibraryEntry
from creature_importer.resolution import (
    AmbiguousCandidates,
    AutoMatched,
    FuzzyMatcher,
    NoMatch,
    ResolutionPolicy,
    levenshtein_distance,
    normalize_skill_hint,
)


def _entry(name, skill="melee", level=1, uid=None):
    return ReferenceLibraryEntry(
        unique_id=uid or f"test.{name.lower().replace(' ', '-')}",
        name=name,
        entity_kind=AbilityKind.MASTERY,
        skill=skill,
        level=level,
    )


class TestLevenshtein:
    """Tests for levenshtein_distance."""

    @pytest.mark.parametrize("a,b", [
        ("kitten", "sitting"),
        ("Iron Grip", "iron grip mastery"),
        ("", "abc"),
        ("Feuerball", "Fireball"),
    ])
    def test_distance_is_symmetric(self, a, b):
        """Test that distance does not depend on argument order."""
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    @pytest.mark.parametrize("a", ["", "a", "Whirlwind Strike"])
    def test_distance_to_self_is_zero(self, a):
        """Test that a string has distance 0 to itself."""
        assert levenshtein_distance(a, a) == 0

    def test_known_distance(self):
        """Test the textbook kitten/sitting example."""
        assert levenshtein_distance("kitten", "sitting") == 3


class TestFuzzyMatcher:
    """Tests for FuzzyMatcher scoring and ranking."""

    @pytest.mark.parametrize("s", ["Light", "Iron Grip", "Whirlwind Strike", "a"])
    def test_identical_strings_score_one(self, s):
        """Test that equal strings score exactly 1.0."""
        assert FuzzyMatcher.score(s, s) == 1.0

    def test_score_ignores_case_and_whitespace(self):
        """Test that normalization makes case and spacing irrelevant."""
        assert FuzzyMatcher.score("  iron   GRIP ", "Iron Grip") == 1.0

    @pytest.mark.parametrize("s,t", [
        ("Whirlwind", "Whirlwind Strike"),
        ("I", "Iron Grip Mastery"),
        ("Iron Grip", "Iron Grip Mastery"),
    ])
    def test_prefix_scores_between_point_nine_and_one(self, s, t):
        """Test that a proper prefix scores in [0.9, 1.0)."""
        score = FuzzyMatcher.score(s, t)
        assert 0.9 <= score < 1.0

    def test_longer_prefix_scores_higher(self):
        """Test that a prefix covering more of the target scores higher."""
        assert FuzzyMatcher.score("Whirlwind", "Whirlwind Strike") > FuzzyMatcher.score("Whirl", "Whirlwind Strike")

    def test_reverse_prefix_scores_point_eight(self):
        """Test that a search extending the target scores 0.8."""
        assert FuzzyMatcher.score("Iron Grip Mastery", "Iron Grip") == 0.8

    def test_edit_distance_is_scaled(self):
        """Test that unrelated-by-prefix names never score above 0.7."""
        score = FuzzyMatcher.score("Whirlwnd Strik", "Whirlwind Strike")
        assert score == pytest.approx((1 - 2 / 16) * 0.7)
        assert FuzzyMatcher.score("abc", "xyz") == 0.0

    def test_rank_filters_by_list_threshold(self):
        """Test that rank drops entries below the list threshold."""
        matcher = FuzzyMatcher()
        entries = [_entry("Whirlwind Strike"), _entry("Zzz")]

        ranked = matcher.rank("Whirlwnd Strik", entries, lambda e: e.name)

        assert [c.entry.name for c in ranked] == ["Whirlwind Strike"]

    def test_rank_breaks_ties_by_label(self):
        """Test that equal scores are ordered alphabetically by label."""
        matcher = FuzzyMatcher()
        entries = [_entry("Iron Grip", skill="melee", uid="a.1"), _entry("Iron Grip", skill="blades", uid="a.2")]

        ranked = matcher.rank("Iron Grip", entries, lambda e: f"{e.name} ({e.skill})")

        assert [c.label for c in ranked] == ["Iron Grip (blades)", "Iron Grip (melee)"]
        assert all(c.is_exact for c in ranked)

    def test_best_guess_uses_higher_threshold(self):
        """Test that best_guess ignores candidates under 0.5."""
        matcher = FuzzyMatcher(list_threshold=0.0, best_guess_threshold=0.5)

        assert matcher.best_guess("abc", [_entry("xyz")], lambda e: e.name) is None
        assert matcher.best_guess("Iron", [_entry("Iron Grip")], lambda e: e.name).entry.name == "Iron Grip"

    def test_invalid_threshold_rejected(self):
        """Test that thresholds outside [0, 1] are rejected."""
        with pytest.raises(ValueError):
            FuzzyMatcher(list_threshold=1.5)


class TestResolutionPolicy:
    """Tests for ResolutionPolicy selection rules."""

    def test_single_hit_auto_matches(self):
        """Test that one exact-or-prefix hit is bound automatically."""
        policy = ResolutionPolicy(FuzzyMatcher(), lambda e: e.name)
        entry = _entry("Whirlwind Strike")

        result = policy.select_from_hits("Whirlwind", [IndexHit(entry=entry, is_exact=False)])

        assert isinstance(result, AutoMatched)
        assert result.entry == entry
        assert result.strategy_used == "prefix"

    def test_exact_plus_prefix_is_ambiguous(self):
        """Test that an exact hit does not win over a second prefix hit."""
        policy = ResolutionPolicy(FuzzyMatcher(), lambda e: e.name)
        hits = [
            IndexHit(entry=_entry("Iron Grip Mastery"), is_exact=False),
            IndexHit(entry=_entry("Iron Grip"), is_exact=True),
        ]

        result = policy.select_from_hits("Iron Grip", hits)

        assert isinstance(result, AmbiguousCandidates)
        assert [c.entry.name for c in result.candidates] == ["Iron Grip", "Iron Grip Mastery"]
        assert result.candidates[0].score == 1.0
        assert not result.is_auto_matched

    def test_no_hits_defers_to_pool(self):
        """Test that select_from_hits returns None without hits."""
        policy = ResolutionPolicy(FuzzyMatcher(), lambda e: e.name)
        assert policy.select_from_hits("anything", []) is None

    def test_empty_pool_is_no_match(self):
        """Test that nothing above threshold yields NoMatch."""
        policy = ResolutionPolicy(FuzzyMatcher(), lambda e: e.name)

        result = policy.select_from_pool("Qwertz", [_entry("Iron Grip")])

        assert isinstance(result, NoMatch)
        assert result.best_guess is None


class TestEntityResolver:
    """Tests for EntityResolver against the fixture catalog."""

    @pytest.mark.asyncio
    async def test_exact_and_prefix_hits_are_ambiguous(self, resolver):
        """Test that 'Iron Grip' with 'Iron Grip Mastery' present is not auto-matched."""
        result = await resolver.resolve("Iron Grip", AbilityKind.MASTERY, "melee", 3)

        assert isinstance(result, AmbiguousCandidates)
        assert len(result.candidates) == 2
        assert result.best_guess.name == "Iron Grip"
        assert result.candidates[0].label == "Iron Grip (Melee)"

    @pytest.mark.asyncio
    async def test_unique_prefix_auto_matches(self, resolver):
        """Test that a unique prefix hit is auto-matched."""
        result = await resolver.resolve("Whirlwind", AbilityKind.MASTERY, "melee", 3)

        assert isinstance(result, AutoMatched)
        assert result.entry.name == "Whirlwind Strike"
        assert result.entry.unique_id == "core.masteries.m3"

    @pytest.mark.asyncio
    async def test_level_ceiling_excludes_entries(self, resolver):
        """Test that entries above the ceiling are never returned."""
        result = await resolver.resolve("Whirlwind", AbilityKind.MASTERY, "melee", 2)

        assert not isinstance(result, AutoMatched)
        candidates = getattr(result, "candidates", [])
        assert all(c.entry.level <= 2 for c in candidates)

    @pytest.mark.asyncio
    async def test_skill_filter_excludes_other_skills(self, resolver):
        """Test that a skill hint restricts the candidate pool."""
        result = await resolver.resolve("Crushing Blow", AbilityKind.MASTERY, "melee", 4)

        assert not isinstance(result, AutoMatched)
        assert all(c.entry.skill == "melee" for c in getattr(result, "candidates", []))

    @pytest.mark.asyncio
    async def test_nothing_similar_is_no_match(self, resolver):
        """Test that a name far from every entry yields NoMatch."""
        result = await resolver.resolve("Qqqqqqqqqq", AbilityKind.MASTERY)

        assert isinstance(result, NoMatch)
        assert result.original_query == "Qqqqqqqqqq"

    @pytest.mark.asyncio
    async def test_typo_gives_candidates(self, resolver):
        """Test that a misspelled name yields ranked fuzzy candidates."""
        result = await resolver.resolve("Whirlwnd Strik", AbilityKind.MASTERY, "melee", 4)

        assert isinstance(result, AmbiguousCandidates)
        assert result.strategy_used == "fuzzy"
        assert result.best_guess.name == "Whirlwind Strike"

    @pytest.mark.asyncio
    async def test_available_in_skill_matches_at_its_grade(self, resolver):
        """Test that a spell is found through its alternative skill and grade."""
        found = await resolver.resolve("Fireball", AbilityKind.SPELL, "combatmagic", 3)
        too_low = await resolver.resolve("Fireball", AbilityKind.SPELL, "combatmagic", 2)

        assert isinstance(found, AutoMatched)
        assert found.entry.level == 3
        assert not isinstance(too_low, AutoMatched)

    @pytest.mark.asyncio
    async def test_placeholder_skill_hint_means_any_skill(self, resolver):
        """Test that an 'undefined' hint does not filter."""
        result = await resolver.resolve("Fireball", AbilityKind.SPELL, "undefined", 5)

        assert isinstance(result, AutoMatched)
        assert result.entry.skill == "firemagic"

    @pytest.mark.asyncio
    async def test_suggest_skill_picks_best_entry(self, resolver):
        """Test that suggest_skill finds the skill of the best candidate."""
        best = await resolver.suggest_skill("Fireball", AbilityKind.SPELL, 5)

        assert best is not None
        assert best.entry.skill == "firemagic"
        assert best.score == 1.0

    @pytest.mark.asyncio
    async def test_suggest_skill_returns_none_below_threshold(self, resolver):
        """Test that weak candidates are not suggested."""
        assert await resolver.suggest_skill("Qqqqqqqq", AbilityKind.SPELL, 5) is None


class TestNormalizeSkillHint:
    """Tests for normalize_skill_hint."""

    @pytest.mark.parametrize("hint", [None, "", "  ", "undefined", "none", "null"])
    def test_placeholders_mean_no_filter(self, hint):
        """Test that empty and placeholder hints become None."""
        assert normalize_skill_hint(hint) is None

    def test_hint_is_lowercased(self):
        """Test that real hints are normalized."""
        assert normalize_skill_hint(" Melee ") == "melee"
