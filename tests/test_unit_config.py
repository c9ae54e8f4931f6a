from startup911.platform.config import MatchingFlags, Settings


def test_mentor_budget_is_soft_by_default():
    settings = Settings(_env_file=None, MENTOR_BUDGET_HARD_FILTER=False)
    assert settings.matching_flags == MatchingFlags(mentor_budget_hard_filter=False)


def test_mentor_budget_hard_filter_from_env(monkeypatch):
    monkeypatch.setenv("MENTOR_BUDGET_HARD_FILTER", "true")
    settings = Settings(_env_file=None)
    assert settings.matching_flags.mentor_budget_hard_filter is True


def test_resolved_log_level_defaults_to_info_when_blank():
    assert Settings(_env_file=None, LOG_LEVEL="  ").resolved_log_level == "INFO"


def test_resolved_log_level_is_uppercased():
    assert Settings(_env_file=None, LOG_LEVEL="debug").resolved_log_level == "DEBUG"


def test_is_production():
    assert Settings(_env_file=None, DEPLOYMENT_ENV="Production").is_production is True
    assert Settings(_env_file=None, DEPLOYMENT_ENV="development").is_production is False


def test_only_consumed_settings_are_declared():
    assert "BACKEND_URL" not in Settings.model_fields
    assert "MENTOR_BUDGET_HARD_FILTER" in Settings.model_fields
