"""Static move catalog data.

Labels are the Japanese display strings shown to users. Some labels are
shared on purpose (both inside low kick variants read "インロー").
"""

from kickcombo.generation.library.move import TAG_INSIDE, TAG_LEAD, TAG_REAR_LEG, Move
from kickcombo.generation.schema.combo_spec import Category, Level, Side, Stance

PUNCH = Category.PUNCH
KICK = Category.KICK
KNEE = Category.KNEE
DEFENSE = Category.DEFENSE

BEGINNER = Level.BEGINNER
INTERMEDIATE = Level.INTERMEDIATE
ADVANCED = Level.ADVANCED

LEFT = Side.LEFT
RIGHT = Side.RIGHT

ORTHODOX = Stance.ORTHODOX
SOUTHPAW = Stance.SOUTHPAW

MOVES: tuple[Move, ...] = (
    # ---- Punch ----
    Move("jab", "ジャブ", PUNCH, BEGINNER, tags=frozenset({TAG_LEAD})),
    Move("cross", "ストレート", PUNCH, BEGINNER),
    Move("lhook", "左フック", PUNCH, BEGINNER, side=LEFT),
    Move("rhook", "右フック", PUNCH, BEGINNER, side=RIGHT),
    Move("lupper", "左アッパー", PUNCH, INTERMEDIATE, side=LEFT),
    Move("rupper", "右アッパー", PUNCH, INTERMEDIATE, side=RIGHT),
    Move("bodycross", "ボディストレート", PUNCH, INTERMEDIATE),
    Move("lbody", "左ボディ", PUNCH, INTERMEDIATE, side=LEFT),
    Move("rbody", "右ボディ", PUNCH, INTERMEDIATE, side=RIGHT),
    # ---- Kick ----
    Move("l_low", "左ロー", KICK, BEGINNER, side=LEFT),
    Move("r_low", "右ロー", KICK, BEGINNER, side=RIGHT),
    Move("l_in_low", "インロー", KICK, INTERMEDIATE, side=LEFT, forward_leg_only=True, tags=frozenset({TAG_INSIDE})),
    Move("r_in_low", "インロー", KICK, INTERMEDIATE, side=RIGHT, forward_leg_only=True, tags=frozenset({TAG_INSIDE})),
    Move("midl", "左ミドル", KICK, BEGINNER, side=LEFT),
    Move("midr", "右ミドル", KICK, BEGINNER, side=RIGHT),
    Move("l_back_low", "左奥足ロー", KICK, ADVANCED, side=LEFT, tags=frozenset({TAG_REAR_LEG})),
    Move("r_back_low", "右奥足ロー", KICK, ADVANCED, side=RIGHT, tags=frozenset({TAG_REAR_LEG})),
    Move("l_high", "左ハイ", KICK, ADVANCED, side=LEFT),
    Move("r_high", "右ハイ", KICK, ADVANCED, side=RIGHT),
    # ---- Knee ----
    Move("kneel", "左ヒザ", KNEE, INTERMEDIATE, side=LEFT),
    Move("kneer", "右ヒザ", KNEE, INTERMEDIATE, side=RIGHT),
    Move("l_switch_knee", "スイッチニー", KNEE, ADVANCED, side=LEFT, forward_leg_only=True),
    Move("r_switch_knee", "スイッチニー", KNEE, ADVANCED, side=RIGHT, forward_leg_only=True),
    Move("jump_knee", "飛びヒザ", KNEE, ADVANCED),
    # ---- Defense (single) ----
    Move("parry_jab", "ジャブをパリィ", DEFENSE, INTERMEDIATE),
    Move("parry_straight", "ストレートをパリィ", DEFENSE, INTERMEDIATE),
    Move("stepback_12", "ワンツーをステップバック", DEFENSE, INTERMEDIATE),
    # ---- Defense + counter ----
    Move("weave_lhook_straight_o", "左フックをウィービング➞ストレート", DEFENSE, INTERMEDIATE, stance=ORTHODOX),
    Move("weave_rhook_straight_s", "右フックをウィービング➞ストレート", DEFENSE, INTERMEDIATE, stance=SOUTHPAW),
    Move("weave_rhook_lhook_straight_o", "右フックをウィービング➞左フック・ストレート", DEFENSE, INTERMEDIATE, stance=ORTHODOX),
    Move("weave_lhook_rhook_straight_s", "左フックをウィービング➞右フック・ストレート", DEFENSE, INTERMEDIATE, stance=SOUTHPAW),
    Move("slip_straight_body_o", "ストレートをヘッドスリップ➞左ボディ", DEFENSE, INTERMEDIATE, stance=ORTHODOX),
    Move("slip_straight_body_s", "ストレートをヘッドスリップ➞右ボディ", DEFENSE, INTERMEDIATE, stance=SOUTHPAW),
    Move("sway_straight_straight", "ストレートをスウェイ➞ストレート", DEFENSE, INTERMEDIATE),
    Move("block_lbody_rhook_o", "左ボディをブロック➞右フック", DEFENSE, INTERMEDIATE, stance=ORTHODOX),
    Move("block_rbody_lhook_o", "右ボディをブロック➞左フック", DEFENSE, INTERMEDIATE, stance=ORTHODOX),
    Move("block_rbody_lhook_s", "右ボディをブロック➞左フック", DEFENSE, INTERMEDIATE, stance=SOUTHPAW),
    Move("block_lbody_rhook_s", "左ボディをブロック➞右フック", DEFENSE, INTERMEDIATE, stance=SOUTHPAW),
    Move("duck_rhook_lupper_o", "右フックをダッキング➞左アッパー", DEFENSE, ADVANCED, stance=ORTHODOX),
    Move("duck_lhook_rupper_s", "左フックをダッキング➞右アッパー", DEFENSE, ADVANCED, stance=SOUTHPAW),
)
