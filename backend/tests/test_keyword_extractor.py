from services.keyword_extractor import (
    contains_all_tokens,
    contains_phrase,
    extract_keywords_from_sentence,
    is_generic,
    location_cluster,
    normalize,
    role_similarity,
    singularize,
    skill_matches,
)


def test_normalize_keeps_tech_symbols():
    assert normalize("  GPS-Tracking, C++! ") == "gps-tracking c++"
    assert normalize(None) == ""


def test_singularize():
    assert singularize("operations executives") == "operation executive"
    assert singularize("class bus") == "class bus"


def test_contains_phrase_whole_words():
    assert contains_phrase("Senior Fleet Manager", "fleet manager")
    assert not contains_phrase("fleetmanager", "fleet")
    assert not contains_phrase("anything", "")


def test_contains_all_tokens():
    assert contains_all_tokens("Managed the warehouse inventory daily", "inventory warehouse")
    assert not contains_all_tokens("Fleet Manager", "fleet management")


def test_skill_matches_direct_and_synonym():
    assert skill_matches("gps tracking", "GPS Tracking")
    assert skill_matches("gps tracking", "GPS")
    assert skill_matches("inventory management", "Stock Control")
    assert skill_matches("sap", "ERP")


def test_skill_matches_rejects_unrelated():
    assert not skill_matches("python", "Tally")
    assert not skill_matches("fleet management", "GPS Tracking")
    assert not skill_matches("sap", "")


def test_generic_entry_is_not_contained_credit():
    assert is_generic("Management")
    assert is_generic("team manager")
    assert not is_generic("Fleet Management")
    assert not skill_matches("fleet management", "Management")
    assert not skill_matches("leadership", "Team")
    assert skill_matches("management", "Fleet Management")


def test_role_similarity():
    assert role_similarity("Fleet Manager", "fleet managers") == 100
    assert role_similarity("Fleet Manager", "Accountant") < 50
    assert role_similarity("", "Accountant") == 0


def test_location_cluster():
    assert location_cluster("Gurgaon") == location_cluster("New Delhi")
    assert location_cluster("Navi Mumbai") == location_cluster("Thane")
    assert location_cluster("Gurgaon") != location_cluster("Mumbai")
    assert location_cluster("Atlantis") is None


def test_extract_comma_separated():
    assert extract_keywords_from_sentence("forklift, warehouse, 3 years") == ["forklift", "warehouse"]


def test_extract_single_sentence():
    assert extract_keywords_from_sentence("GPS tracking for fleet") == ["gps tracking", "fleet"]
    assert extract_keywords_from_sentence("looking for a fleet manager") == ["fleet"]


def test_extract_drops_qualified_experience():
    assert extract_keywords_from_sentence("forklift, warehouse, minimum 3 years") == [
        "forklift", "warehouse",
    ]
    assert extract_keywords_from_sentence("at least 3 years, forklift") == ["forklift"]
    assert extract_keywords_from_sentence("forklift; 2+ yrs of experience") == ["forklift"]


def test_extract_single_sentence_keeps_text_order():
    assert extract_keywords_from_sentence("route optimization and gps tracking") == [
        "route optimization", "gps tracking",
    ]
    assert extract_keywords_from_sentence("forklift with gps tracking") == ["forklift", "gps tracking"]


def test_extract_dedupes_preserving_order():
    assert extract_keywords_from_sentence("Forklift; warehouse; forklift") == ["forklift", "warehouse"]


def test_extract_empty():
    assert extract_keywords_from_sentence("") == []
    assert extract_keywords_from_sentence(None) == []
    assert extract_keywords_from_sentence("5 years, 10") == []
