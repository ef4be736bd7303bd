"""Tests for SearchService business logic."""

import copy

from services.search_service import SearchService, count_pattern_entries, filter_playbook
from utils.playbook_models import Catalog, Pattern


def _filter(catalog, term, structure=None):
    return filter_playbook(
        catalog.structure if structure is None else structure,
        catalog.pattern_index,
        catalog.quotes,
        term,
    )


def _is_ordered_subset(filtered, original):
    for phase_name, themes in filtered.items():
        if phase_name not in original:
            return False
        for theme_label, ids in themes.items():
            source = original[phase_name].get(theme_label)
            if source is None:
                return False
            positions = [source.index(pattern_id) for pattern_id in ids]
            if positions != sorted(positions):
                return False
        theme_order = [label for label in original[phase_name] if label in themes]
        if list(themes) != theme_order:
            return False
    phase_order = [name for name in original if name in filtered]
    return list(filtered) == phase_order


# ============= Empty Term Tests =============


def test_filter_empty_term_returns_same_structure(sample_catalog):
    """Test that a blank term returns the input structure object itself."""
    assert _filter(sample_catalog, "") is sample_catalog.structure
    assert _filter(sample_catalog, "   ") is sample_catalog.structure
    assert _filter(sample_catalog, None) is sample_catalog.structure


# ============= Matching Tests =============


def test_filter_by_name(sample_catalog):
    """Test filtering by pattern name keeps only matching ids."""
    result = _filter(sample_catalog, "hero")

    assert result == {"Delivery": {"T2. Release Pressure": ["AP3"]}}


def test_filter_is_case_insensitive(sample_catalog):
    """Test that matching ignores case in term and content."""
    assert _filter(sample_catalog, "FEATURE factory") == _filter(sample_catalog, "feature FACTORY")


def test_filter_by_id(sample_catalog):
    """Test that pattern ids are searchable."""
    result = _filter(sample_catalog, "ap2")

    assert result == {"Delivery": {"T1. Fake Agility": ["AP2"]}}


def test_filter_by_quote_in_other_theme(sample_catalog):
    """Test that a quote under any theme of a pattern matches it in every theme."""
    # The quote lives under T3 but AP1 is also listed under T1
    result = _filter(sample_catalog, "asked users")

    assert result == {
        "Delivery": {"T1. Fake Agility": ["AP1"]},
        "Discovery": {"T3. Solution First": ["AP1"]},
    }


def test_filter_by_quote_author(sample_catalog):
    """Test that quote authors are part of the searchable text."""
    result = _filter(sample_catalog, "team lead")

    assert result == {"Delivery": {"T2. Release Pressure": ["AP3"]}}


def test_filter_no_results_is_empty_dict(sample_catalog):
    """Test that no match yields an empty structure distinct from the input."""
    result = _filter(sample_catalog, "zzz")

    assert result == {}
    assert result is not sample_catalog.structure


def test_filter_drops_unknown_patterns():
    """Test that ids missing from the index never survive filtering."""
    catalog = Catalog.from_datasets(
        structure={"Delivery": {"T1. Theme One": ["AP1", "AP2"]}},
        patterns=[Pattern(id="AP1", name="Rush", description="...")],
        quotes={"AP2": {"T1": ["Rush everything - Ghost"]}},
        themes={},
    )

    assert _filter(catalog, "rush") == {"Delivery": {"T1. Theme One": ["AP1"]}}


def test_filter_removes_empty_themes_and_phases(sample_catalog):
    """Test that themes and phases without matches disappear."""
    result = _filter(sample_catalog, "theatre")

    assert list(result) == ["Delivery"]
    assert list(result["Delivery"]) == ["T1. Fake Agility"]


# ============= Property Tests =============


def test_filter_output_is_ordered_subset(sample_catalog):
    """Test that every result is an order-preserving subset of the input."""
    for term in ["a", "e", "ship", "ap", "t", "zzz", "deadline"]:
        result = _filter(sample_catalog, term)
        assert _is_ordered_subset(result, sample_catalog.structure), term


def test_filter_is_idempotent(sample_catalog):
    """Test that filtering a filtered structure again changes nothing."""
    for term in ["a", "rush", "users", "zzz"]:
        once = _filter(sample_catalog, term)
        twice = _filter(sample_catalog, term, structure=once)
        assert twice == once, term


def test_filter_does_not_mutate_inputs(sample_catalog):
    """Test that the structure, patterns and quotes are left untouched."""
    structure_before = copy.deepcopy(sample_catalog.structure)
    quotes_before = copy.deepcopy(sample_catalog.quotes)
    patterns_before = sample_catalog.patterns

    _filter(sample_catalog, "ship")
    _filter(sample_catalog, "zzz")

    assert sample_catalog.structure == structure_before
    assert sample_catalog.quotes == quotes_before
    assert sample_catalog.patterns == patterns_before


def test_filter_is_deterministic(sample_catalog):
    """Test that identical inputs give identical outputs."""
    assert _filter(sample_catalog, "e") == _filter(sample_catalog, "e")


# ============= Service Tests =============


def test_search_service_filter_defaults_to_catalog_structure(sample_catalog):
    """Test that the service filters the full catalog by default."""
    service = SearchService(sample_catalog)

    assert service.filter("") is sample_catalog.structure
    assert service.filter("hero") == {"Delivery": {"T2. Release Pressure": ["AP3"]}}


def test_search_service_filter_explicit_structure(sample_catalog):
    """Test that the service can narrow an already filtered structure."""
    service = SearchService(sample_catalog)
    narrowed = service.filter("ship")

    assert service.filter("rush", structure=narrowed) == {
        "Delivery": {"T1. Fake Agility": ["AP1"]},
        "Discovery": {"T3. Solution First": ["AP1"]},
    }


def test_search_service_matches(sample_catalog):
    """Test single-pattern matching."""
    service = SearchService(sample_catalog)

    assert service.matches("AP3", "dana") is True
    assert service.matches("AP3", "rush") is False
    assert service.matches("AP99", "") is False


def test_count_pattern_entries(sample_catalog):
    """Test counting (theme, id) entries."""
    assert count_pattern_entries(sample_catalog.structure) == 5
    assert count_pattern_entries({}) == 0
