"""Keyword extraction and phrase matching for requirement-candidate scoring.

Holds the logistics-domain vocabularies (skill and role synonyms, role skill
hints, regional location clusters) plus the tokenizer used when the
text-understanding service is unavailable. Fuzzy role comparison uses
rapidfuzz token-sort similarity.
"""

import re

from rapidfuzz import fuzz

# ---------------------------------------------------------------------------
# Tokenizer vocabularies
# ---------------------------------------------------------------------------
STOPWORDS: frozenset[str] = frozenset({
    # Articles, prepositions, conjunctions
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "with",
    "by", "about", "as", "into", "like", "through", "after", "over", "between",
    "out", "of", "from", "up", "down", "under", "above", "below", "across", "around",
    # Verbs and auxiliaries
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "shall", "should", "may", "might",
    "must", "can", "could", "get", "got", "getting", "go", "going", "went", "gone",
    "need", "needs", "needed", "want", "wanted", "require", "required", "looking",
    # Pronouns
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "my", "your", "his", "hers", "its", "our", "their",
    # Question words and demonstratives
    "who", "whom", "which", "what", "where", "when", "why", "how", "this", "that",
    "these", "those", "here", "there", "now", "then",
    # Filler
    "okay", "ok", "all", "not", "no", "yes", "well", "so", "just", "only", "also",
    "too", "very", "much", "many", "more", "most", "some", "any", "each", "every",
    "search", "find", "look", "filter", "sort", "show", "view", "candidate",
    "candidates", "someone", "person", "people",
})

# Generic words that carry no matching signal on their own
BLACKLIST: frozenset[str] = frozenset({
    "manager", "management", "team", "lead", "leader", "good", "bad", "best",
    "work", "worked", "working", "experience", "experienced", "exp", "years",
    "year", "yrs", "yr", "month", "months", "location", "locations", "located",
    "based", "plus", "minimum", "maximum", "least",
})

# Multi-word domain phrases kept intact when tokenizing
DOMAIN_PHRASES: tuple[str, ...] = (
    "gps tracking", "fleet management", "route optimization", "route planning",
    "supply chain management", "supply chain", "inventory management",
    "inventory control", "warehouse management", "transportation management",
    "logistics planning", "vehicle tracking", "driver management",
    "fuel management", "maintenance scheduling", "safety regulations",
    "dot regulations", "international fuel tax agreement", "team management",
    "data analysis", "problem solving", "communication skills",
    "organizational skills", "commercial driver license", "clean license",
    "hazmat certification", "forklift certification", "driving license",
    "vendor management", "stock management",
)

_EXPERIENCE_PHRASE_RE = re.compile(
    r"^\d+(?:\.\d+)?\s*\+?\s*(?:-\s*\d+\s*)?(?:years?|yrs?|months?)(?:\s+(?:of\s+)?(?:experience|exp))?$"
)
# Words that only frame an experience figure ("minimum 3 years", "at least 2 yrs")
_EXPERIENCE_QUALIFIERS = frozenset({
    "minimum", "maximum", "min", "max", "least", "atleast", "upto", "plus",
    "experience", "exp", "total", "overall",
})
_PHRASE_SPLIT_RE = re.compile(r"[,;\n|]+")
_NON_WORD_RE = re.compile(r"[^a-z0-9.+#/&\s-]")

# ---------------------------------------------------------------------------
# Skill synonyms: required skill -> alternatives accepted in candidate skills
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: dict[str, list[str]] = {
    "sap": ["sap", "erp", "enterprise resource planning", "sap software"],
    "erp": ["erp", "sap", "enterprise resource planning"],
    "inventory management": [
        "inventory", "stock management", "inventory control", "stock control",
        "inventory tracking",
    ],
    "lifo": ["lifo", "inventory method", "inventory management"],
    "fefo": ["fefo", "fifo", "inventory method", "inventory management"],
    "fifo": ["fifo", "fefo", "inventory method", "inventory management"],
    "warehouse management": [
        "warehouse", "godown", "store management", "warehouse operations",
    ],
    "organizational skills": ["organization", "organizational", "planning", "coordination"],
    "leadership": [
        "leadership", "leader", "team management", "people management", "supervisory",
    ],
    "fleet management": [
        "fleet", "vehicle management", "transportation management", "fleet operations",
    ],
    "gps tracking": ["gps", "vehicle tracking", "fleet tracking", "gps monitoring"],
    "route optimization": [
        "route planning", "route optimization", "logistics planning", "delivery planning",
    ],
    "cdl": ["cdl", "commercial driver license", "commercial driving license"],
    "commercial driver license": ["cdl", "commercial driving license"],
    "communication skills": ["communication"],
    "communication": ["communication skills"],
}

# ---------------------------------------------------------------------------
# Role synonyms: required role -> titles that count as a close match
# ---------------------------------------------------------------------------
ROLE_SYNONYMS: dict[str, list[str]] = {
    "fleet manager": [
        "fleet management", "transportation manager", "logistics manager",
        "operations manager", "fleet operations manager", "vehicle fleet manager",
    ],
    "truck driver": [
        "driver", "heavy vehicle driver", "commercial driver", "truck operator",
        "heavy truck driver", "delivery driver", "commercial vehicle driver",
    ],
    "logistics coordinator": [
        "logistics executive", "supply chain coordinator", "logistics specialist",
        "operations coordinator", "logistics officer",
    ],
    "warehouse manager": [
        "warehouse executive", "store manager", "inventory manager",
        "warehouse supervisor", "store incharge", "warehouse incharge",
        "godown manager", "warehouse operations manager", "store operations manager",
        "inventory operations manager",
    ],
    "supply chain manager": [
        "supply chain executive", "procurement manager", "operations manager",
        "logistics manager", "scm manager",
    ],
    "transport manager": [
        "transportation manager", "fleet manager", "logistics manager",
        "dispatch manager", "transport operations manager",
    ],
    "transport executive": [
        "transport manager", "logistics executive", "fleet executive",
        "transport coordinator", "operations executive", "operation executive",
    ],
    "operations manager": [
        "operations executive", "operations head", "operations supervisor",
        "fleet manager", "logistics manager", "operations incharge",
        "operation manager",
    ],
    "warehouse executive": [
        "warehouse manager", "store executive", "inventory executive",
        "warehouse supervisor", "store keeper", "godown executive",
    ],
    "inventory manager": [
        "inventory executive", "stock manager", "warehouse manager",
        "store manager", "inventory controller",
    ],
    "logistics manager": [
        "logistics executive", "logistics coordinator", "logistics head",
        "logistics operations manager", "supply chain manager",
    ],
    "operations executive": [
        "operations manager", "operation executive", "operations officer",
        "operations coordinator",
    ],
}

# Skills that signal a candidate can do a role even with a different title
ROLE_SKILL_HINTS: dict[str, list[str]] = {
    "fleet manager": [
        "fleet", "transportation", "logistics", "vehicle", "route",
        "driver management", "fuel management",
    ],
    "truck driver": [
        "driving", "vehicle", "transportation", "license", "delivery",
        "logistics", "commercial driving",
    ],
    "logistics coordinator": [
        "logistics", "supply chain", "coordination", "planning", "inventory",
        "transportation",
    ],
    "warehouse manager": [
        "warehouse", "inventory", "store", "godown", "stock", "warehousing",
        "storage", "inventory control", "stock management",
    ],
    "supply chain manager": [
        "supply chain", "procurement", "logistics", "inventory", "operations",
        "vendor management",
    ],
    "transport manager": [
        "transportation", "fleet", "logistics", "route", "dispatch",
        "vehicle management",
    ],
    "transport executive": [
        "transportation", "logistics", "fleet", "coordination", "operations", "vehicle",
    ],
}

# ---------------------------------------------------------------------------
# Regional clusters: locations close enough to count as a near match
# ---------------------------------------------------------------------------
LOCATION_CLUSTERS: list[list[str]] = [
    ["delhi", "new delhi", "ncr", "gurgaon", "gurugram", "noida", "faridabad",
     "ghaziabad", "greater noida", "manesar", "bawal", "dharuhera", "bhiwadi",
     "neemrana"],
    ["mumbai", "bombay", "navi mumbai", "thane", "kalyan", "bhiwandi", "vasai",
     "virar", "panvel"],
    ["pune", "pimpri", "chinchwad", "chakan", "talegaon"],
    ["ludhiana", "chandigarh", "mohali", "jalandhar", "amritsar", "patiala", "lodhwal"],
    ["bangalore", "bengaluru", "electronic city", "whitefield", "hosur"],
    ["chennai", "madras", "kanchipuram", "sriperumbudur", "oragadam"],
    ["hyderabad", "secunderabad", "cyberabad"],
    ["kolkata", "calcutta", "howrah", "salt lake"],
    ["ahmedabad", "gandhinagar", "vadodara", "surat", "sanand"],
    ["indore", "dewas", "pithampur", "bhopal"],
]


# ---------------------------------------------------------------------------
# Normalization and phrase matching
# ---------------------------------------------------------------------------

def normalize(text: str | None) -> str:
    """Lower-case, strip punctuation (keeping tech symbols) and squash spaces."""
    if not text:
        return ""
    text = _NON_WORD_RE.sub(" ", text.lower())
    return " ".join(text.split())


def singularize(text: str) -> str:
    """Crude plural folding so "operations executive" == "operation executive"."""
    return " ".join(w[:-1] if len(w) > 3 and w.endswith("s") and not w.endswith("ss") else w
                    for w in text.split())


def phrase_position(haystack: str, phrase: str) -> int | None:
    """Offset of the first whole-word match of ``phrase`` in normalized ``haystack``."""
    phrase = normalize(phrase)
    if not phrase:
        return None
    m = re.search(rf"(?<![a-z0-9]){re.escape(phrase)}(?![a-z0-9])", normalize(haystack))
    return m.start() if m else None


def contains_phrase(haystack: str, phrase: str) -> bool:
    """Whole-word, case-insensitive phrase presence."""
    return phrase_position(haystack, phrase) is not None


def is_generic(text: str) -> bool:
    """True when every word is a stop word or blacklisted filler ("Manager")."""
    words = normalize(text).split()
    return all(w in STOPWORDS or w in BLACKLIST for w in words)


def contains_all_tokens(haystack: str, phrase: str) -> bool:
    """Every significant word of ``phrase`` appears as a word in ``haystack``."""
    tokens = [t for t in normalize(phrase).split() if t not in STOPWORDS]
    if not tokens:
        return False
    words = set(normalize(haystack).split())
    return all(t in words for t in tokens)


def text_matches(haystack: str, phrase: str) -> bool:
    """Phrase or all-token presence of ``phrase`` in ``haystack``."""
    return contains_phrase(haystack, phrase) or contains_all_tokens(haystack, phrase)


def skill_matches(required: str, candidate_skill: str) -> bool:
    """Check a required skill against one candidate skill entry.

    Matches when either phrase contains the other as whole words, or when the
    candidate skill is one of the required skill's synonyms. A candidate entry
    made only of filler words must contain the required skill itself.
    """
    req = normalize(required)
    cand = normalize(candidate_skill)
    if not req or not cand:
        return False
    # A filler-only entry ("Management") never matches by being contained
    reverse = len(cand) >= 3 and not is_generic(cand)
    if contains_phrase(cand, req) or (reverse and contains_phrase(req, cand)):
        return True
    for synonym in SKILL_SYNONYMS.get(req, []):
        if contains_phrase(cand, synonym) or (reverse and contains_phrase(synonym, cand)):
            return True
    return False


def role_similarity(required_role: str, candidate_role: str) -> float:
    """rapidfuzz token-sort similarity between two titles, 0-100."""
    a = singularize(normalize(required_role))
    b = singularize(normalize(candidate_role))
    if not a or not b:
        return 0.0
    return float(fuzz.token_sort_ratio(a, b))


def location_cluster(location: str) -> int | None:
    """Index of the regional cluster a location falls into, if any."""
    loc = normalize(location)
    if not loc:
        return None
    for i, cluster in enumerate(LOCATION_CLUSTERS):
        for city in cluster:
            if contains_phrase(loc, city) or contains_phrase(city, loc):
                return i
    return None


# ---------------------------------------------------------------------------
# Keyword extraction (fallback tokenizer)
# ---------------------------------------------------------------------------

def _is_keyword(token: str) -> bool:
    if not token or token in STOPWORDS or token in BLACKLIST:
        return False
    # "minimum 3 years", "at least 2 yrs of experience"
    core = token.split()
    while core and (core[0] in STOPWORDS or core[0] in _EXPERIENCE_QUALIFIERS):
        core.pop(0)
    while core and (core[-1] in STOPWORDS or core[-1] in _EXPERIENCE_QUALIFIERS):
        core.pop()
    if not core or _EXPERIENCE_PHRASE_RE.match(" ".join(core)):
        return False
    try:
        float(token)
        return False
    except ValueError:
        pass
    return len(token) > 1


def _strip_stopwords(phrase: str) -> str:
    words = phrase.split()
    while words and words[0] in STOPWORDS:
        words.pop(0)
    while words and words[-1] in STOPWORDS:
        words.pop()
    return " ".join(words)


def extract_keywords_from_sentence(text: str | None) -> list[str]:
    """Split free text into ordered, distinct keyword phrases.

    Comma/semicolon/newline separated input keeps each segment as a phrase
    ("gps tracking, fleet management"). A single segment is split on
    whitespace, but known domain phrases found in it are kept whole.
    Either way keywords come out in the order they appear in the text.
    Stop words, numbers and experience phrases ("3 years") are dropped.
    """
    if not text or not text.strip():
        return []

    lowered = text.lower()
    segments = [normalize(s) for s in _PHRASE_SPLIT_RE.split(lowered)]
    segments = [s for s in segments if s]

    candidates: list[str] = []
    if len(segments) > 1:
        for seg in segments:
            seg = _strip_stopwords(seg)
            if _is_keyword(seg):
                candidates.append(seg)
    elif segments:
        sentence = segments[0]
        found: list[tuple[int, str]] = []
        covered: set[str] = set()
        for phrase in DOMAIN_PHRASES:
            pos = phrase_position(sentence, phrase)
            if pos is not None:
                found.append((pos, phrase))
                covered.update(phrase.split())
        for m in re.finditer(r"\S+", sentence):
            word = m.group()
            if word not in covered and _is_keyword(word):
                found.append((m.start(), word))
        candidates = [kw for _, kw in sorted(found, key=lambda item: item[0])]

    seen: set[str] = set()
    keywords: list[str] = []
    for kw in candidates:
        if kw not in seen:
            seen.add(kw)
            keywords.append(kw)
    return keywords
