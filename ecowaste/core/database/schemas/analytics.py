"""
Schema model for the per-user analytics summary.
"""

from __future__ import annotations

from typing import Dict

from pydantic import Field

from .common import CamelModel


class UserAnalytics(CamelModel):
    """Totals derived from a user's waste entries and profile."""

    total_waste_entries: int = 0
    total_eco_points: int = 0
    waste_by_type: Dict[str, float] = Field(default_factory=dict, description="Waste type to summed quantity")
    carbon_footprint: float = 0.0
