from config import ScoringWeights, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("MIN_RELEVANCE", raising=False)
    s = Settings(_env_file=None)
    assert s.min_relevance == 0.50
    assert s.min_role_match == 0.30
    assert s.weights == ScoringWeights()
    assert s.weights.role == 30


def test_nested_weight_override(monkeypatch):
    monkeypatch.setenv("WEIGHTS__ROLE", "50")
    monkeypatch.setenv("MIN_RELEVANCE", "0.4")
    s = Settings(_env_file=None)
    assert s.weights.role == 50
    assert s.weights.skills == 15
    assert s.min_relevance == 0.4


def test_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    s = Settings(_env_file=None)
    assert s.cors_origins == ["https://a.example", "https://b.example"]


def test_cors_origins_json(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://a.example"]')
    s = Settings(_env_file=None)
    assert s.cors_origins == ["https://a.example"]
