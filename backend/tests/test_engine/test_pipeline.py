"""End-to-end decision scenarios through the full check pipeline."""

import pytest

from crossmark.engine.checks.c09_multi_mark import multi_mark
from crossmark.engine.checks.c14_branch_ceiling import branch_ceiling
from crossmark.engine.clustering import IntersectionCluster
from crossmark.engine.config import ValidatorConfig, VoteBox
from crossmark.engine.context import Category, CrossCandidate, ValidationContext
from crossmark.engine.pipeline import Pipeline, validate_mark
from crossmark.engine.registry import CheckRegistry, CheckSpec, Stage
from tests.conftest import (
    CIRCLE_STROKES,
    DAB_STROKES,
    INTENTIONAL_STROKES,
    LOOPED_X_STROKES,
    OUTSIDE_V_STROKES,
    SHALLOW_CROSS_STROKES,
    STAR_STROKES,
    T_STROKES,
    TWO_CROSSES_STROKES,
    X_STROKES,
    X_WITH_UNDERLINE_STROKES,
    line,
)


def test_waiting_on_no_strokes():
    result = validate_mark([])
    assert result.category is Category.WAITING
    assert result.valid is None
    assert result.invalid_type is None


def test_clean_x_is_valid(x_strokes):
    result = validate_mark(x_strokes)
    assert result.valid is True
    assert result.category is Category.VALID
    assert result.details["branch_count"] == 2
    assert result.details["explained_ratio"] == pytest.approx(1.0)


def test_single_stroke_loop_cross_is_valid(looped_x_strokes):
    result = validate_mark(looped_x_strokes)
    assert result.valid is True


def test_closed_loop_is_no_cross():
    result = validate_mark(CIRCLE_STROKES)
    assert result.valid is False
    assert result.invalid_type == "no_cross"


def test_three_line_star_is_wrong_symbol(star_strokes):
    result = validate_mark(star_strokes, debug=True)
    assert result.invalid_type == "wrong_symbol"
    assert result.details["strokes_at_intersection"] == 3
    assert result.debug.checks_run[-1] == "C12"


def test_two_separated_crosses_are_multi_mark():
    result = validate_mark(TWO_CROSSES_STROKES)
    assert result.invalid_type == "multi_mark"
    assert result.details["valid_clusters"] == 2
    assert result.details["scale_reference"] == pytest.approx(42.4, abs=0.1)


def test_secondary_crossing_is_intentional():
    result = validate_mark(INTENTIONAL_STROKES)
    assert result.invalid_type == "intentional"
    assert result.details["largest_separation"] == pytest.approx(56.6, abs=0.1)


def test_multi_mark_found_after_intentional_pair():
    # Clusters 0 and 1 are only intentional apart; cluster 2 is far away
    far_x = [line((620, 115), (780, 275)), line((780, 115), (620, 275))]
    config = ValidatorConfig(vote_box=VoteBox(x=0, y=0, width=1000, height=600))
    result = validate_mark(INTENTIONAL_STROKES + far_x, config=config)
    assert result.invalid_type == "multi_mark"
    assert result.details["valid_clusters"] == 3


def test_short_dab_is_blank():
    result = validate_mark(DAB_STROKES)
    assert result.invalid_type == "blank"
    assert result.details["total_ink_length"] == pytest.approx(10.0)


def test_single_point_is_blank():
    assert validate_mark([[(250, 195)]]).invalid_type == "blank"


def test_ink_outside_box(x_strokes):
    result = validate_mark(OUTSIDE_V_STROKES)
    assert result.invalid_type == "outside_box"
    assert result.details["outside_point"][1] < 82

    stray_dot = validate_mark(x_strokes + [[(50, 50)]])
    assert stray_dot.invalid_type == "outside_box"


def test_ink_within_tolerance_is_inside():
    strokes = X_STROKES + [line((330, 195), (412, 195))]
    result = validate_mark(strokes)
    assert result.invalid_type != "outside_box"


def test_scribble_guard():
    zigzag = [[(150 + 10 * i, 150 if i % 2 else 200) for i in range(20)]]
    result = validate_mark(zigzag, config=ValidatorConfig(max_points_total=10))
    assert result.invalid_type == "wrong_symbol"
    assert result.details["total_points"] > 10


def test_parallel_lines_no_cross():
    strokes = [line((150, 150), (350, 150)), line((150, 200), (350, 200))]
    assert validate_mark(strokes).invalid_type == "no_cross"


def test_short_arm_is_wrong_symbol():
    result = validate_mark(T_STROKES)
    assert result.invalid_type == "wrong_symbol"
    assert result.details["cross_candidates"] == 0


def test_shallow_cross_has_single_branch():
    result = validate_mark(SHALLOW_CROSS_STROKES)
    assert result.invalid_type == "wrong_symbol"
    assert result.reason == "no cross shape"
    assert result.details["branch_count"] == 1


def test_underline_is_extra_writing():
    result = validate_mark(X_WITH_UNDERLINE_STROKES)
    assert result.invalid_type == "extra_writing"
    assert result.details["threshold"] == 0.70
    assert result.details["explained_ratio"] == pytest.approx(0.618, abs=0.01)


def test_debug_info(x_strokes):
    result = validate_mark(x_strokes, debug=True)
    debug = result.debug
    assert debug is not None
    assert len(debug.intersections) == 1
    assert debug.clusters[0]["is_cross_valid"] is True
    assert debug.best_candidate["strokes_at_intersection"] == 2
    assert debug.branch_count == 2
    assert debug.checks_run[-1] == "C16"
    assert result.to_dict()["debug"]["candidate_count"] == 1


def test_debug_flag_does_not_change_decision():
    for strokes in (X_STROKES, STAR_STROKES, TWO_CROSSES_STROKES, X_WITH_UNDERLINE_STROKES):
        plain = validate_mark(strokes)
        debugged = validate_mark(strokes, debug=True)
        assert plain.category is debugged.category
        assert plain.debug is None


def test_input_strokes_not_mutated(x_strokes):
    snapshot = [list(s) for s in x_strokes]
    validate_mark(x_strokes)
    assert x_strokes == snapshot


def test_pipeline_reusable_across_calls(x_strokes):
    pipeline = Pipeline()
    assert pipeline.validate(x_strokes).valid is True
    assert pipeline.validate(DAB_STROKES).invalid_type == "blank"
    assert pipeline.validate(x_strokes).valid is True


def test_degenerate_input_never_raises():
    cases = [
        [[]],
        [[(250, 195)], [(250, 195)]],
        [[(250, 195), (250, 195), (250, 195)]],
        [[(200, 200), (200, 200), (300, 300), (300, 300)], [(300, 200), (200, 300)]],
    ]
    for strokes in cases:
        result = validate_mark(strokes)
        assert result.category in Category


def test_pipeline_stops_at_first_verdict():
    reg = CheckRegistry()
    ran = []

    def first(ctx: ValidationContext) -> None:
        ran.append("first")

    def second(ctx: ValidationContext) -> None:
        ran.append("second")
        ctx.conclude(Category.BLANK, "stop here")

    def third(ctx: ValidationContext) -> None:
        ran.append("third")

    reg.register(CheckSpec(id="X01", stage=Stage.INK, fn=first))
    reg.register(CheckSpec(id="X02", stage=Stage.INK, fn=second, dependencies=["X01"]))
    reg.register(CheckSpec(id="X03", stage=Stage.INK, fn=third, dependencies=["X02"]))

    result = Pipeline(registry=reg).validate([[(0, 0), (1, 1)]])
    assert ran == ["first", "second"]
    assert result.category is Category.BLANK
    assert result.reason == "stop here"


def _ceiling_context(branches, strokes, extensions):
    ctx = ValidationContext(strokes=[None] * strokes)
    ctx.best_candidate = CrossCandidate(
        point=(250.0, 195.0),
        extensions=extensions,
        arm_angles=(45.0, 225.0, 135.0, 315.0),
        strokes_at_intersection=2,
    )
    ctx.branch_count = branches
    branch_ceiling(ctx)
    return ctx


def test_branch_ceiling_allows_natural_loop():
    ctx = _ceiling_context(3, 2, (80.0, 20.0, 80.0, 80.0))
    assert ctx.verdict is None


def test_branch_ceiling_emphasis_with_balanced_arms():
    ctx = _ceiling_context(3, 3, (80.0, 70.0, 75.0, 80.0))
    assert ctx.verdict is None


def test_branch_ceiling_rejects_unbalanced_star():
    ctx = _ceiling_context(3, 3, (80.0, 40.0, 80.0, 80.0))
    assert ctx.verdict.category is Category.WRONG_SYMBOL
    assert ctx.verdict.details["arm_balance_ratio"] == 0.5


def test_branch_ceiling_rejects_four_branches():
    ctx = _ceiling_context(4, 1, (80.0, 80.0, 80.0, 80.0))
    assert ctx.verdict.category is Category.WRONG_SYMBOL


def test_config_rejects_bad_values():
    with pytest.raises(ValueError):
        ValidatorConfig(resample_step=0)
    with pytest.raises(ValueError):
        ValidatorConfig(vote_box=VoteBox(width=0))
    with pytest.raises(ValueError):
        ValidatorConfig(intentional_min_ratio=0.05)


def test_explained_threshold_by_stroke_count():
    cfg = ValidatorConfig()
    assert cfg.explained_ink_threshold(1) == 0.50
    assert cfg.explained_ink_threshold(2) == 0.62
    assert cfg.explained_ink_threshold(5) == 0.70


def test_category_precedence():
    assert Category.MULTI_MARK.rank == Category.INTENTIONAL.rank
    ordered = sorted(Category, key=lambda c: c.rank)
    assert ordered[0] is Category.WAITING
    assert ordered[-1] is Category.VALID
    assert Category.BLANK.rank < Category.OUTSIDE_BOX.rank < Category.NO_CROSS.rank
    assert Category.WRONG_SYMBOL.rank < Category.EXTRA_WRITING.rank


def _separation_context(distance):
    ctx = ValidationContext(strokes=[])
    ctx.scale_reference = 100.0
    ctx.clusters = [
        IntersectionCluster(points=[], indices=[], centroid=(200.0, 195.0), is_cross_valid=True),
        IntersectionCluster(points=[], indices=[], centroid=(200.0 + distance, 195.0), is_cross_valid=True),
    ]
    multi_mark(ctx)
    return ctx


def test_separation_below_intentional_ratio_is_retrace():
    assert _separation_context(19.5).verdict is None


def test_separation_reports_threshold_it_used():
    intentional = _separation_context(20.5).verdict
    assert intentional.category is Category.INTENTIONAL
    assert intentional.details["threshold"] == 20.0

    multi = _separation_context(100.0).verdict
    assert multi.category is Category.MULTI_MARK
    assert multi.details["threshold"] == 100.0
