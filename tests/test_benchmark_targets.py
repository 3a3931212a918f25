"""
Tests for exact target generation and the averaging report.
"""

import pytest

from src.benchmarks import (
    PLACEMENT_CONTEXTUAL,
    PLACEMENT_PRIMARY,
    PLACEMENT_SUPPORTING,
    BenchmarkAggregator,
    build_averaging_report,
    determine_placement_strategy,
    generate_targets,
)


@pytest.fixture
def benchmarks(competitors):
    return BenchmarkAggregator().calculate_benchmarks(competitors)


# ============================================================================
# Exact targets
# ============================================================================

class TestExactTargets:

    def test_core_targets_copy_benchmarks(self, benchmarks):
        targets = generate_targets(benchmarks)

        assert targets.target_word_count == 1620
        assert targets.target_keyword_density == 2.62
        assert targets.target_optimized_headings == 9

    def test_lsi_target_frequency_is_rounded(self, benchmarks):
        targets = generate_targets(benchmarks)
        target = next(t for t in targets.lsi_keyword_targets if t.keyword == "digital marketing")

        assert target.target_frequency == 5
        assert target.target_density == pytest.approx(0.33)
        assert target.placement_strategy == PLACEMENT_CONTEXTUAL

    def test_entity_target_count_and_suggestions(self, benchmarks):
        targets = generate_targets(benchmarks)
        organization = next(
            t for t in targets.entity_integration_targets if t.entity_type == "ORGANIZATION"
        )

        assert organization.target_count == 4
        assert organization.target_density == 0.272
        assert organization.suggested_entities == ["Google", "Facebook", "Amazon", "Microsoft", "Apple"]

    def test_suggestions_capped_at_five(self, competitor_pages):
        for i, page in enumerate(competitor_pages):
            page["entities"].append(
                {"text": f"Extra {i}", "type": "ORGANIZATION", "frequency": 1, "confidence": 0.5}
            )
        _, targets = BenchmarkAggregator().calculate_all(competitor_pages)
        organization = targets.entity_integration_targets[0]

        assert len(organization.suggested_entities) == 5

    def test_target_order_follows_benchmarks(self, benchmarks):
        targets = generate_targets(benchmarks)

        assert [t.keyword for t in targets.lsi_keyword_targets] == [
            k.keyword for k in benchmarks.lsi_keyword_frequencies
        ]

    def test_quality_targets(self, benchmarks):
        targets = generate_targets(benchmarks)

        assert targets.target_readability_score == 76.2
        assert targets.target_content_quality == 86.2

    def test_to_dict(self, benchmarks):
        data = generate_targets(benchmarks).to_dict()

        assert data["targetKeywordDensity"] == 2.62
        assert data["targetWordCount"] == 1620
        assert data["lsiKeywordTargets"][0]["keyword"] == "digital marketing"
        assert "suggestedEntities" in data["entityIntegrationTargets"][0]


class TestPlacementStrategy:

    @pytest.mark.parametrize("pattern,relevance,expected", [
        ("high", 60, PLACEMENT_PRIMARY),
        ("high", 50, PLACEMENT_SUPPORTING),
        ("high", 30, PLACEMENT_SUPPORTING),
        ("medium", 5, PLACEMENT_SUPPORTING),
        ("low", 26, PLACEMENT_SUPPORTING),
        ("low", 25, PLACEMENT_CONTEXTUAL),
        ("high", 10, PLACEMENT_CONTEXTUAL),
    ])
    def test_strategy(self, pattern, relevance, expected):
        assert determine_placement_strategy(pattern, relevance) == expected


# ============================================================================
# Averaging report
# ============================================================================

class TestAveragingReport:

    def test_report_is_valid(self, competitors):
        aggregator = BenchmarkAggregator()
        _, targets = aggregator.calculate_all(competitors)
        report = aggregator.build_report(competitors, targets)

        assert report.is_valid is True
        assert report.issues == []
        assert report.summary == "Analyzed 5 competitors with VALID precision"
        assert [d.metric for d in report.details] == [
            "Word Count", "Keyword Density", "Heading Optimization",
        ]

    def test_report_details(self, competitors):
        aggregator = BenchmarkAggregator()
        _, targets = aggregator.calculate_all(competitors)
        report = aggregator.build_report(competitors, targets)
        word_count = report.details[0]

        assert word_count.values == [1500, 1800, 1200, 2000, 1600]
        assert word_count.average == 1620
        assert word_count.target == 1620

    def test_report_flags_drifted_target(self, competitors):
        aggregator = BenchmarkAggregator()
        _, targets = aggregator.calculate_all(competitors)
        competitors[0].keyword_density = 5.0

        report = build_averaging_report(competitors, targets)

        assert report.is_valid is False
        assert len(report.issues) == 1
        assert report.issues[0].startswith("Keyword Density precision issue")
        assert "INVALID" in report.summary

    def test_report_to_dict(self, competitor_pages):
        aggregator = BenchmarkAggregator()
        _, targets = aggregator.calculate_all(competitor_pages)
        data = aggregator.build_report(competitor_pages, targets).to_dict()

        assert data["validation"] == {"isValid": True, "issues": []}
        assert len(data["details"]) == 3
