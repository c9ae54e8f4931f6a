"""
Seed the directory tables with the tag vocabulary and a small demo directory.

Usage (from the repo root with DATABASE_URL set):
  python -m startup911.scripts.seed_directory

Safe to re-run: tags are upserted by (name, type) and demo rows are only
inserted when their table is empty.
"""
from __future__ import annotations

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from startup911.components.matching.rules import (
    GRANT_REQUIREMENT_TAGS,
    GEOGRAPHICAL_REGIONS,
    VC_FUNDING_STAGES,
    VC_INDUSTRIES,
    VC_INVESTMENT_TYPES,
)
from startup911.models import VC, Grant, Mentor, Tag, TagType
from startup911.platform.database import Base, SessionLocal, engine

GRANT_STAGES = ["Ideation", "Validation", "Early Traction", "Scaling"]
GRANT_INDUSTRIES = ["AgriTech", "EdTech", "FinTech", "HealthTech", "CleanTech", "DeepTech", "SaaS"]
GRANT_LOCATIONS = ["Pan-India", "Karnataka", "Maharashtra", "Kerala", "Tamil Nadu", "Delhi NCR"]
SOCIAL_IMPACT = ["Women Empowerment", "Rural Development", "Climate Action", "Financial Inclusion"]
SPECIAL_CATEGORIES = ["Women-led", "Student Founder", "SC/ST Founder"]
EXPERTISE = ["Fundraising", "Go-to-market", "Product Management", "Marketing", "Legal", "Operations"]

TAG_VOCABULARY: dict[TagType, list[str]] = {
    TagType.STAGE: GRANT_STAGES + VC_FUNDING_STAGES,
    TagType.INDUSTRY: GRANT_INDUSTRIES + VC_INDUSTRIES,
    TagType.LOCATION: GRANT_LOCATIONS,
    TagType.REGION: [name for name, _countries in GEOGRAPHICAL_REGIONS.values()],
    TagType.REQUIREMENT: list(GRANT_REQUIREMENT_TAGS.values()),
    TagType.SOCIAL_IMPACT: SOCIAL_IMPACT,
    TagType.SPECIAL_CATEGORY: SPECIAL_CATEGORIES,
    TagType.EXPERTISE: EXPERTISE,
    TagType.INVESTMENT_TYPE: VC_INVESTMENT_TYPES,
}


def seed_tags(db: Session) -> dict[tuple[str, str], Tag]:
    existing = {(t.name, t.type): t for t in db.scalars(select(Tag))}
    created = 0
    for tag_type, names in TAG_VOCABULARY.items():
        for name in dict.fromkeys(names):
            key = (name, tag_type.value)
            if key in existing:
                continue
            tag = Tag(name=name, type=tag_type.value)
            db.add(tag)
            existing[key] = tag
            created += 1
    db.flush()
    print(f"Tags: {created} created, {len(existing) - created} already present.")
    return existing


def _pick(tags: dict[tuple[str, str], Tag], tag_type: TagType, *names: str) -> list[Tag]:
    return [tags[(name, tag_type.value)] for name in names]


def seed_grants(db: Session, tags: dict[tuple[str, str], Tag]) -> None:
    if db.scalar(select(func.count(Grant.id))):
        print("Grants already seeded. Skipping.")
        return
    grants = [
        Grant(
            name="Startup India Seed Fund",
            organization="DPIIT",
            details="Financial assistance for proof of concept, prototype development and market entry.",
            status="Open",
            amount_max="₹50 Lakh",
            dpiit_required=True,
            application_link="https://seedfund.startupindia.gov.in",
            tags=_pick(tags, TagType.STAGE, "Ideation", "Validation")
            + _pick(tags, TagType.INDUSTRY, "FinTech", "HealthTech", "AgriTech")
            + _pick(tags, TagType.LOCATION, "Pan-India"),
        ),
        Grant(
            name="BIRAC BIG",
            organization="BIRAC",
            details="Biotechnology Ignition Grant for early-stage ideas with a working prototype.",
            status="Open",
            amount_max="₹50 Lakh",
            prototype_required=True,
            mentorship_included=True,
            tags=_pick(tags, TagType.STAGE, "Validation")
            + _pick(tags, TagType.INDUSTRY, "HealthTech", "DeepTech")
            + _pick(tags, TagType.LOCATION, "Pan-India"),
        ),
        Grant(
            name="Karnataka Elevate",
            organization="Karnataka Startup Cell",
            details="Grant-in-aid for innovative startups registered in Karnataka.",
            status="Open",
            amount_max="₹50 Lakh",
            women_led_focus=True,
            application_deadline=date(2026, 12, 31),
            tags=_pick(tags, TagType.STAGE, "Early Traction")
            + _pick(tags, TagType.INDUSTRY, "SaaS", "CleanTech")
            + _pick(tags, TagType.LOCATION, "Karnataka")
            + _pick(tags, TagType.SOCIAL_IMPACT, "Women Empowerment"),
        ),
    ]
    db.add_all(grants)
    print(f"Grants: {len(grants)} created.")


def seed_vcs(db: Session, tags: dict[tuple[str, str], Tag]) -> None:
    if db.scalar(select(func.count(VC.id))):
        print("VCs already seeded. Skipping.")
        return
    vcs = [
        VC(
            name="Blume Ventures",
            country_based_of="India",
            website="https://blume.vc",
            tags=_pick(tags, TagType.STAGE, "Seed", "Series A")
            + _pick(tags, TagType.INDUSTRY, "Software", "Finance"),
        ),
        VC(
            name="Omnivore",
            country_based_of="India",
            website="https://www.omnivore.vc",
            tags=_pick(tags, TagType.STAGE, "Seed")
            + _pick(tags, TagType.INDUSTRY, "Agriculture", "Food and Beverage")
            + _pick(tags, TagType.INVESTMENT_TYPE, "Impact Investing"),
        ),
        VC(
            name="Antler",
            country_based_of="Singapore",
            website="https://www.antler.co",
            tags=_pick(tags, TagType.STAGE, "Pre-Seed")
            + _pick(tags, TagType.INVESTMENT_TYPE, "Sector Agnostic"),
        ),
    ]
    db.add_all(vcs)
    print(f"VCs: {len(vcs)} created.")


def seed_mentors(db: Session, tags: dict[tuple[str, str], Tag]) -> None:
    if db.scalar(select(func.count(Mentor.id))):
        print("Mentors already seeded. Skipping.")
        return
    mentors = [
        Mentor(
            name="Ananya Rao",
            superpower="Pitch decks that close rounds",
            languages=["English", "Kannada"],
            rate_tier="₹1K-3K",
            tags=_pick(tags, TagType.EXPERTISE, "Fundraising")
            + _pick(tags, TagType.INDUSTRY, "FinTech"),
        ),
        Mentor(
            name="Vikram Shah",
            superpower="B2B go-to-market",
            languages=["English", "Hindi", "Gujarati"],
            rate_tier="Free",
            tags=_pick(tags, TagType.EXPERTISE, "Go-to-market")
            + _pick(tags, TagType.INDUSTRY, "SaaS"),
        ),
    ]
    db.add_all(mentors)
    print(f"Mentors: {len(mentors)} created.")


def main() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        tags = seed_tags(db)
        seed_grants(db, tags)
        seed_vcs(db, tags)
        seed_mentors(db, tags)
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
