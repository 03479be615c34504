"""Tests for configuration validation and generation request building."""

import pytest

from intel_reports.builder.selection import MultiSelection
from intel_reports.builder.validator import (
    ConfigurationState,
    build_config,
    build_generation_request,
    validation_message,
)
from intel_reports.catalog.report_types import ReportType, get_report_type
from intel_reports.errors import ConfigValidationError
from intel_reports.models.report import (
    CompanyDeepDiveConfig,
    CompetitiveAnalysisConfig,
    MarketEntryBriefConfig,
    SectorOverviewConfig,
)


@pytest.fixture
def state():
    return ConfigurationState()


class TestSectorOverview:

    def test_valid_sector(self, state):
        state.sector = "launch-services"
        config = build_config(get_report_type("sector-overview"), state)
        assert isinstance(config, SectorOverviewConfig)
        assert config.to_payload() == {"sector": "launch-services"}

    def test_missing_sector(self, state):
        with pytest.raises(ConfigValidationError) as exc_info:
            build_config(get_report_type("sector-overview"), state)
        assert exc_info.value.message == "Please select a sector"
        assert exc_info.value.field_id == "sector"

    def test_unknown_sector(self, state):
        state.sector = "asteroid-mining-guilds"
        assert validation_message(get_report_type("sector-overview"), state) == "Invalid sector selected"


class TestCompanyDeepDive:

    def test_selected_company(self, state, companies):
        state.company.select(companies[0])
        config = build_config(get_report_type("company-deep-dive"), state)
        assert isinstance(config, CompanyDeepDiveConfig)
        assert config.to_payload() == {"companySlug": "spacex"}

    def test_typed_but_not_selected(self, state):
        with pytest.raises(ConfigValidationError) as exc_info:
            build_config(get_report_type("company-deep-dive"), state)
        assert exc_info.value.message == "Please select a company"

    def test_ignores_unrelated_input(self, state, companies):
        state.company.select(companies[1])
        state.sector = "launch-services"
        state.topic = "something that is long enough"
        state.companies.add(companies[2])
        payload = build_config(get_report_type("company-deep-dive"), state).to_payload()
        assert set(payload) == {"companySlug"}


class TestCompetitiveAnalysis:

    def test_one_company_rejected(self, state, companies):
        state.companies.add(companies[0])
        message = validation_message(get_report_type("competitive-analysis"), state)
        assert message == "Please select at least 2 companies to compare"

    def test_two_companies_accepted(self, state, companies):
        state.companies.add(companies[0])
        state.companies.add(companies[1])
        config = build_config(get_report_type("competitive-analysis"), state)
        assert isinstance(config, CompetitiveAnalysisConfig)
        assert config.to_payload() == {"companySlugs": ["spacex", "rocket-lab"]}

    def test_more_than_five_rejected(self, companies):
        state = ConfigurationState(companies=MultiSelection(max_items=10))
        for company in companies:
            state.companies.add(company)
        message = validation_message(get_report_type("competitive-analysis"), state)
        assert message == "Select no more than 5 companies to compare"


class TestMarketEntryBrief:

    def test_short_topic_rejected(self, state):
        state.topic = "AI"
        message = validation_message(get_report_type("market-entry-brief"), state)
        assert message == "Please provide a market/opportunity description (at least 10 characters)"

    def test_topic_accepted(self, state):
        state.topic = "  LEO broadband for maritime customers  "
        config = build_config(get_report_type("market-entry-brief"), state)
        assert isinstance(config, MarketEntryBriefConfig)
        assert config.to_payload() == {"topic": "LEO broadband for maritime customers"}

    def test_whitespace_does_not_count(self, state):
        state.topic = "   short   "
        assert validation_message(get_report_type("market-entry-brief"), state) is not None

    def test_topic_too_long(self, state):
        state.topic = "x" * 2001
        message = validation_message(get_report_type("market-entry-brief"), state)
        assert message == "Topic description is too long (max 2000 characters)"


def test_config_keys_match_each_type(companies):
    """A valid config carries exactly the keys its report type declares."""
    state = ConfigurationState(sector="earth-observation", topic="Lunar surface logistics services")
    state.company.select(companies[0])
    state.companies.add(companies[1])
    state.companies.add(companies[2])

    for report_type_id, expected in [
        ("sector-overview", {"sector"}),
        ("company-deep-dive", {"companySlug"}),
        ("competitive-analysis", {"companySlugs"}),
        ("market-entry-brief", {"topic"}),
    ]:
        payload = build_config(get_report_type(report_type_id), state).to_payload()
        assert set(payload) == expected


def test_build_generation_request(state):
    state.sector = "space-debris"
    request = build_generation_request(get_report_type("sector-overview"), state)
    assert request.to_payload() == {
        "reportType": "sector-overview",
        "config": {"sector": "space-debris"},
    }


def test_unsupported_report_type(state):
    custom = get_report_type("sector-overview").model_copy(update={"id": "custom-report"})
    assert isinstance(custom, ReportType)
    with pytest.raises(ConfigValidationError) as exc_info:
        build_config(custom, state)
    assert exc_info.value.message == "Unsupported report type"
