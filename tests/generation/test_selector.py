"""Move selector tests."""

import random
from collections import Counter

import pytest

from kickcombo.generation.library.catalog import DEFAULT_CATALOG
from kickcombo.generation.schema.combo_spec import DEFAULT_RULES, Category, Level, Mode, Rules, Stance
from kickcombo.generation.selector import is_lead_side, move_weight, select_moves
from kickcombo.generation.tuning import DEFAULT_TUNING, GenerationTuning


def _moves(*ids: str):
    return [DEFAULT_CATALOG.get(i) for i in ids]


def test_base_weight_is_one():
    assert move_weight(DEFAULT_CATALOG.get("cross"), None, Counter()) == pytest.approx(1.0)


def test_inside_move_boosted():
    assert move_weight(DEFAULT_CATALOG.get("l_in_low"), None, Counter()) == pytest.approx(DEFAULT_TUNING.inside_boost)


def test_rear_leg_move_penalised():
    assert move_weight(DEFAULT_CATALOG.get("r_back_low"), None, Counter()) == pytest.approx(DEFAULT_TUNING.rear_leg_penalty)


def test_used_move_penalised_not_excluded():
    used = Counter({"cross": 1})
    assert move_weight(DEFAULT_CATALOG.get("cross"), None, used) == pytest.approx(DEFAULT_TUNING.used_move_penalty)


def test_same_side_as_previous_penalised():
    prev = DEFAULT_CATALOG.get("lhook")
    assert move_weight(DEFAULT_CATALOG.get("l_low"), prev, Counter()) == pytest.approx(DEFAULT_TUNING.same_side_penalty)
    assert move_weight(DEFAULT_CATALOG.get("r_low"), prev, Counter()) == pytest.approx(1.0)


def test_neutral_side_never_side_penalised():
    prev = DEFAULT_CATALOG.get("cross")
    assert move_weight(DEFAULT_CATALOG.get("jab"), prev, Counter()) == pytest.approx(1.0)


def test_adjustments_multiply():
    prev = DEFAULT_CATALOG.get("lhook")
    used = Counter({"l_in_low": 1})
    expected = DEFAULT_TUNING.inside_boost * DEFAULT_TUNING.used_move_penalty * DEFAULT_TUNING.same_side_penalty
    assert move_weight(DEFAULT_CATALOG.get("l_in_low"), prev, used) == pytest.approx(expected)


def test_is_lead_side():
    jab = DEFAULT_CATALOG.get("jab")
    assert is_lead_side(jab, Stance.ORTHODOX)
    assert is_lead_side(jab, Stance.SOUTHPAW)
    assert is_lead_side(DEFAULT_CATALOG.get("lhook"), Stance.ORTHODOX)
    assert not is_lead_side(DEFAULT_CATALOG.get("lhook"), Stance.SOUTHPAW)
    assert not is_lead_side(DEFAULT_CATALOG.get("cross"), Stance.ORTHODOX)


def test_one_move_per_slot_in_category(rng):
    pool = DEFAULT_CATALOG.legal_moves(Level.INTERMEDIATE, Mode.KICKBOXING, Stance.ORTHODOX)
    categories = [Category.PUNCH, Category.KICK, Category.PUNCH, Category.KNEE, Category.DEFENSE, Category.PUNCH]
    for _ in range(100):
        moves = select_moves(categories, pool, stance=Stance.ORTHODOX, rules=DEFAULT_RULES, rng=rng)
        assert [m.category for m in moves] == categories


def test_no_same_move_twice_in_a_row(rng):
    pool = _moves("jab", "cross")
    for _ in range(100):
        moves = select_moves([Category.PUNCH] * 8, pool, stance=Stance.ORTHODOX, rules=DEFAULT_RULES, rng=rng)
        ids = [m.id for m in moves]
        assert all(a != b for a, b in zip(ids, ids[1:], strict=False))


def test_same_move_allowed_when_rule_off(rng):
    rules = Rules(
        avoid_same_move_in_a_row=False,
        avoid_same_category_in_a_row=False,
        finisher_bias=DEFAULT_RULES.finisher_bias,
    )
    pool = _moves("jab", "cross")
    repeats = 0
    for _ in range(100):
        ids = [m.id for m in select_moves([Category.PUNCH] * 8, pool, stance=Stance.ORTHODOX, rules=rules, rng=rng)]
        repeats += sum(a == b for a, b in zip(ids, ids[1:], strict=False))
    assert repeats > 0


def test_single_candidate_repeats_instead_of_failing(rng):
    moves = select_moves([Category.PUNCH] * 5, _moves("jab"), stance=Stance.ORTHODOX, rules=DEFAULT_RULES, rng=rng)
    assert [m.id for m in moves] == ["jab"] * 5


def test_empty_category_widens_to_pool(rng):
    pool = _moves("jab", "cross")
    moves = select_moves([Category.PUNCH, Category.KNEE, Category.PUNCH], pool, stance=Stance.ORTHODOX, rules=DEFAULT_RULES, rng=rng)
    assert len(moves) == 3
    assert all(m.category == Category.PUNCH for m in moves)


def test_widening_keeps_restricted_categories_apart(rng):
    pool = _moves("jab", "l_low")
    for _ in range(50):
        moves = select_moves([Category.KICK, Category.KNEE], pool, stance=Stance.ORTHODOX, rules=DEFAULT_RULES, rng=rng)
        assert [m.id for m in moves] == ["l_low", "jab"]


@pytest.mark.parametrize(
    ("stance", "lead_ids"),
    [(Stance.ORTHODOX, {"jab", "lhook"}), (Stance.SOUTHPAW, {"jab", "rhook"})],
)
def test_opener_narrowed_to_lead_side(stance, lead_ids):
    tuning = GenerationTuning(lead_side_chance=1.0)
    pool = DEFAULT_CATALOG.legal_moves(Level.BEGINNER, Mode.KICKBOXING, stance)
    for seed in range(100):
        moves = select_moves(
            [Category.PUNCH, Category.KICK], pool, stance=stance, rules=DEFAULT_RULES, rng=random.Random(seed), tuning=tuning
        )
        assert moves[0].id in lead_ids


def test_kick_opener_narrowed_to_forward_leg():
    tuning = GenerationTuning(lead_side_chance=1.0)
    pool = DEFAULT_CATALOG.legal_moves(Level.BEGINNER, Mode.KICKBOXING, Stance.SOUTHPAW)
    for seed in range(100):
        moves = select_moves(
            [Category.KICK, Category.PUNCH], pool, stance=Stance.SOUTHPAW, rules=DEFAULT_RULES, rng=random.Random(seed), tuning=tuning
        )
        assert moves[0].id in {"r_low", "midr"}


def test_opener_not_narrowed_when_chance_is_zero():
    tuning = GenerationTuning(lead_side_chance=0.0)
    pool = DEFAULT_CATALOG.legal_moves(Level.BEGINNER, Mode.KICKBOXING, Stance.ORTHODOX)
    openers = {
        select_moves([Category.PUNCH], pool, stance=Stance.ORTHODOX, rules=DEFAULT_RULES, rng=random.Random(seed), tuning=tuning)[0].id
        for seed in range(200)
    }
    assert "cross" in openers
    assert "rhook" in openers
