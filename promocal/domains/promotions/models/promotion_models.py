"""Promotion calendar models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from promocal.extensions import db


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)


class PromotionFieldsMixin:
    """Display columns shared by weekly defaults, weekly plans and specials.

    ``translations`` maps a language code to ``{title, button, link, richHtml}``.
    The flat ``title``/``button``/``link``/``rich_html`` columns are the
    fallback when no translation applies.
    """

    icon: Mapped[str | None] = mapped_column(db.String(255))
    link: Mapped[str | None] = mapped_column(db.String(1024))
    button: Mapped[str | None] = mapped_column(db.String(255))
    button_color: Mapped[str | None] = mapped_column(db.String(32))
    category: Mapped[str | None] = mapped_column(db.String(64))
    active: Mapped[bool] = mapped_column(default=True, nullable=False)
    title: Mapped[str | None] = mapped_column(db.String(255))
    rich_html: Mapped[str | None] = mapped_column(db.Text)
    translations: Mapped[dict] = mapped_column(db.JSON, default=dict)


class WeeklyPromotion(db.Model, PromotionFieldsMixin, TimestampMixin):
    """Recurring promotion for a weekday (Sunday=0 .. Saturday=6)."""

    __tablename__ = "weekly_promotion"
    __table_args__ = (db.UniqueConstraint("weekday", name="uq_weekly_promotion_weekday"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    weekday: Mapped[int] = mapped_column(nullable=False)


class WeeklyPlan(db.Model, PromotionFieldsMixin, TimestampMixin):
    """Month-specific override of a weekday promotion. ``month`` is 0-based."""

    __tablename__ = "weekly_plan"
    __table_args__ = (
        db.UniqueConstraint("year", "month", "weekday", name="uq_weekly_plan_year_month_weekday"),
        db.Index("ix_weekly_plan_year_month", "year", "month"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    year: Mapped[int] = mapped_column(nullable=False)
    month: Mapped[int] = mapped_column(nullable=False)
    weekday: Mapped[int] = mapped_column(nullable=False)


class SpecialPromotion(db.Model, PromotionFieldsMixin, TimestampMixin):
    """Promotion tied to one calendar date. ``month`` is 0-based."""

    __tablename__ = "special_promotion"
    __table_args__ = (
        db.Index("ix_special_promotion_year_month_active", "year", "month", "active"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    year: Mapped[int] = mapped_column(nullable=False)
    month: Mapped[int] = mapped_column(nullable=False)
    day: Mapped[int] = mapped_column(nullable=False)


class CalendarSettings(db.Model, TimestampMixin):
    """Singleton row with page-wide settings."""

    __tablename__ = "calendar_settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    bg_image_url: Mapped[str | None] = mapped_column(db.String(1024))


__all__ = ["CalendarSettings", "SpecialPromotion", "WeeklyPlan", "WeeklyPromotion"]
