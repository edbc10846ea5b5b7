"""Move - Catalog Unit.

A move describes WHAT a technique is: its category, the skill tier that
unlocks it, and the stance/side facts the selector needs. It carries no
weights; weighting is computed per slot by the selector.
"""

from dataclasses import dataclass, field

from kickcombo.generation.schema.combo_spec import Category, Level, Side, Stance

# Tag vocabulary understood by the selector
TAG_INSIDE = "inside"
TAG_REAR_LEG = "rear_leg"
TAG_LEAD = "lead"


@dataclass(frozen=True)
class Move:
    """Catalog entry for a single technique.

    Attributes:
        id: Unique move identifier (used for repetition tracking)
        label: Display text, not necessarily unique
        category: Move category
        level: Minimum skill level that unlocks the move
        stance: If set, the move is only legal for this stance
        side: Body side the technique is thrown with
        forward_leg_only: Legal only when ``side`` is the forward side for the stance
        tags: Selector hints (inside, rear_leg, lead)
    """

    id: str
    label: str
    category: Category
    level: Level

    stance: Stance | None = None
    side: Side = Side.NEUTRAL
    forward_leg_only: bool = False

    tags: frozenset[str] = field(default_factory=frozenset)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
