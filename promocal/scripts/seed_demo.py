"""Seed demo promotions for local development.

Usage:
    flask seed-demo                # current month
    flask seed-demo --year 2025 --month 0
"""

from __future__ import annotations

from datetime import date

import click
from flask.cli import with_appcontext

from promocal.domains.promotions.models import (
    CalendarSettings,
    SpecialPromotion,
    WeeklyPlan,
    WeeklyPromotion,
)
from promocal.extensions import db

DEMO_WEEKLY = [
    (1, "🎯", "Monday Boost", "Boost de Segunda", "blue", "SPORT"),
    (3, "🎰", "Casino Wednesday", "Quarta do Cassino", "green", "CASINO"),
    (5, "⚽", "Weekend Warm-up", "Aquecimento de Fim de Semana", "orange", "SPORT"),
]


def _translations(en_title: str, pt_title: str) -> dict:
    return {
        "pt": {"title": pt_title, "button": "Participar", "link": "#"},
        "en": {"title": en_title, "button": "Join", "link": "#"},
    }


def seed_demo(year: int, month: int) -> dict:
    """Idempotently insert weekly defaults, one override and two specials."""
    stats = {"weekly": 0, "plan": 0, "specials": 0}
    for weekday, icon, en_title, pt_title, color, category in DEMO_WEEKLY:
        if WeeklyPromotion.query.filter_by(weekday=weekday).first():
            continue
        db.session.add(
            WeeklyPromotion(
                weekday=weekday,
                icon=icon,
                button_color=color,
                category=category,
                active=True,
                title=en_title,
                translations=_translations(en_title, pt_title),
            )
        )
        stats["weekly"] += 1

    if not WeeklyPlan.query.filter_by(year=year, month=month, weekday=1).first():
        db.session.add(
            WeeklyPlan(
                year=year,
                month=month,
                weekday=1,
                icon="🔥",
                button_color="red",
                category="SPORT",
                active=True,
                translations=_translations("Double Odds Monday", "Odds em Dobro"),
            )
        )
        stats["plan"] += 1

    for day in (10, 20):
        if SpecialPromotion.query.filter_by(year=year, month=month, day=day).first():
            continue
        db.session.add(
            SpecialPromotion(
                year=year,
                month=month,
                day=day,
                icon="🎁",
                category="ALL",
                active=True,
                translations=_translations(f"Special day {day}", f"Dia especial {day}"),
            )
        )
        stats["specials"] += 1

    if not CalendarSettings.query.first():
        db.session.add(CalendarSettings(bg_image_url=None))

    db.session.commit()
    return stats


@click.command("seed-demo")
@click.option("--year", type=int, default=None)
@click.option("--month", type=click.IntRange(0, 11), default=None, help="0-based month")
@with_appcontext
def seed_demo_command(year: int | None, month: int | None):
    """Insert demo promotions for a month."""
    today = date.today()
    year = today.year if year is None else year
    month = today.month - 1 if month is None else month
    stats = seed_demo(year, month)
    click.echo(
        f"Seeded {year}-{month:02d}: weekly={stats['weekly']}, "
        f"plan={stats['plan']}, specials={stats['specials']}"
    )
