"""Combo Invariants - Single Source of Truth.

Bounds and category rules that every generated combo must satisfy.
The sequencer, the selector and the validator import from here - nowhere else.
"""

from kickcombo.generation.schema.combo_spec import Category, Mode, Side, Stance

# Supported move count (inclusive); requests outside are clamped
MIN_COMBO_MOVES = 3
MAX_COMBO_MOVES = 8

# Categories that may never occupy two consecutive slots
RESTRICTED_REPEAT_CATEGORIES: frozenset[Category] = frozenset(
    {Category.KICK, Category.KNEE, Category.DEFENSE}
)

# Categories nudged towards the end of a combo
FINISHER_CATEGORIES: frozenset[Category] = frozenset({Category.KICK, Category.KNEE})

# Leg-based categories are excluded in boxing mode
LEG_CATEGORIES: frozenset[Category] = frozenset({Category.KICK, Category.KNEE})

MODE_CATEGORIES: dict[Mode, frozenset[Category]] = {
    Mode.KICKBOXING: frozenset(Category),
    Mode.BOXING: frozenset({Category.PUNCH, Category.DEFENSE}),
}

# Side of the body that is forward for each stance
FORWARD_SIDE: dict[Stance, Side] = {
    Stance.ORTHODOX: Side.LEFT,
    Stance.SOUTHPAW: Side.RIGHT,
}

# Every combo must contain at least one slot of this category
REQUIRED_CATEGORY = Category.PUNCH
