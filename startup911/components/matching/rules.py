"""Matching constants: category weights, tier labels, requirement names, orderings."""

from __future__ import annotations

import enum


class CandidateKind(str, enum.Enum):
    GRANT = "grant"
    VC = "vc"
    MENTOR = "mentor"


# ---------------------------------------------------------------------------
# Category weights (points awarded once per matched category)
# ---------------------------------------------------------------------------
GRANT_WEIGHTS = {
    "stage": 35,
    "industry": 35,
    "location": 15,
    "social_impact": 15,
}

VC_WEIGHTS = {
    "stage": 40,
    "industry": 35,
    "investment_type": 25,
}

MENTOR_WEIGHTS = {
    "industries": 50,
    "languages": 30,
    "budget": 20,
}

# ---------------------------------------------------------------------------
# Tier labels, keyed by tier number (1 = both groups matched, 4 = neither)
# ---------------------------------------------------------------------------
PERFECT_MATCH_LABEL = "Perfect Match"

TIER_LABELS = {
    CandidateKind.GRANT: {
        1: PERFECT_MATCH_LABEL,
        2: "Stage Match",
        3: "Industry Match",
        4: "Basic Match",
    },
    CandidateKind.VC: {
        1: PERFECT_MATCH_LABEL,
        2: "Strong Match",
        3: "Speculative Match",
        4: "Other Match",
    },
    CandidateKind.MENTOR: {
        1: PERFECT_MATCH_LABEL,
        2: "Expertise Match",
        3: "Language Match",
        4: "Other Match",
    },
}

# ---------------------------------------------------------------------------
# Grant prerequisites: boolean column -> REQUIREMENT tag name the user must pick
# ---------------------------------------------------------------------------
GRANT_REQUIREMENT_TAGS = {
    "dpiit_required": "DPIIT Registration",
    "patent_required": "Patent/IP",
    "prototype_required": "Working Prototype",
    "technical_cofounder_required": "Technical Co-founder",
    "full_time_commitment": "Full-time Commitment",
}

# ---------------------------------------------------------------------------
# VC specifics
# ---------------------------------------------------------------------------
SECTOR_AGNOSTIC_MARKER = "sector agnostic"

VC_FUNDING_STAGES = [
    "Pre-Seed", "Seed", "Series A", "Series B", "Series C", "Series C+",
    "Pre-Series A", "Angel", "Debt Financing", "Post-IPO Debt", "Post-IPO Equity", "Grant",
]

VC_INDUSTRIES = [
    "Finance", "Health Care", "Consumer", "Enterprise", "Bio Tech", "Web3",
    "Education", "E-commerce", "B2B", "Artificial Intelligence", "Real Estate",
    "Media and Entertainment", "Social Media", "Information Technology", "Software",
    "SaaS", "Logistics", "Food and Beverage", "Insurance", "Climate Tech",
    "Agriculture", "Blockchain", "Sustainability", "Banking", "Robotics",
    "Telecommunications", "Payments", "Marketplace", "Mobile", "Transportation",
    "Deep tech", "Medical", "Medical Device", "Renewable Energy",
]

VC_INVESTMENT_TYPES = ["Impact Investing", "Social Impact", "Sector Agnostic"]

# Region identifier -> (display name, countries). Order is the questionnaire order.
GEOGRAPHICAL_REGIONS = {
    "southeast_asia": (
        "Southeast Asia",
        ["Singapore", "Indonesia", "Vietnam", "Malaysia", "Thailand", "Philippines",
         "Cambodia", "Myanmar", "Republic of the Union of Myanmar"],
    ),
    "east_asia": ("East Asia", ["China", "Hong Kong", "Japan", "South Korea", "Taiwan"]),
    "south_asia": ("South Asia", ["India", "Pakistan", "Bangladesh", "Maldives"]),
    "oceania": ("Australia & Oceania", ["Australia"]),
    "north_america": ("North America", ["United States", "Canada"]),
    "europe": (
        "Europe",
        ["United Kingdom", "Germany", "France", "Italy", "Switzerland", "Netherlands",
         "Czechia", "Luxembourg", "Cyprus", "Romania", "Malta", "Sweden", "Poland"],
    ),
    "middle_east": ("Middle East", ["United Arab Emirates", "Saudi Arabia", "Turkey", "Israel"]),
    "latin_america": ("Latin America", ["Brazil", "Peru", "Argentina"]),
    "africa": ("Africa", ["Morocco", "Ghana"]),
    "caribbean": ("Caribbean & Offshore", ["Cayman Islands"]),
}

# ---------------------------------------------------------------------------
# Mentor specifics
# ---------------------------------------------------------------------------
# Cheapest first; anything not listed (including unset) sorts after.
RATE_TIER_ORDER = {
    "Free": 0,
    "<₹1K": 1,
    "₹1K-3K": 2,
    "₹3K-5K": 3,
    "₹5K+": 4,
}
UNSET_RATE_TIER_RANK = 5

RATE_TIER_OPTIONS = list(RATE_TIER_ORDER)

ANY_BUDGET = "any"

LANGUAGE_OPTIONS = [
    "English", "Hindi", "Bengali", "Marathi", "Telugu", "Tamil",
    "Gujarati", "Urdu", "Kannada", "Malayalam", "Punjabi",
]

# Tag types a mentor's questionnaire "industries" answer is matched against.
MENTOR_INDUSTRY_TAG_TYPES = ("INDUSTRY", "EXPERTISE")

MENTOR_INDUSTRIES = VC_INDUSTRIES + ["Marketing", "Sales", "Product Management", "Design", "Legal", "HR", "Operations"]

# Tag groups returned by the grouped tag listing
GROUPED_TAG_TYPES = ["STAGE", "INDUSTRY", "REQUIREMENT", "LOCATION", "SOCIAL_IMPACT", "SPECIAL_CATEGORY"]
