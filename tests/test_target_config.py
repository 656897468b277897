from decimal import Decimal

from liftlog.models.routine import ExerciseTemplate, parse_target_reps, parse_target_weights


def test_parse_reps_dash_separated():
    assert parse_target_reps("15-12-10-8") == [15, 12, 10, 8]


def test_parse_reps_blank_is_empty():
    assert parse_target_reps("") == []
    assert parse_target_reps("   ") == []
    assert parse_target_reps(None) == []


def test_parse_reps_malformed_tokens_become_zero():
    assert parse_target_reps("12-x-10") == [12, 0, 10]


def test_parse_reps_ignores_empty_tokens_and_whitespace():
    assert parse_target_reps("12--10") == [12, 10]
    assert parse_target_reps(" 12 - 10 ") == [12, 10]


def test_parse_weights():
    assert parse_target_weights("20-25-27.5") == [Decimal("20"), Decimal("25"), Decimal("27.5")]
    assert parse_target_weights("20-heavy") == [Decimal("20"), Decimal(0)]
    assert parse_target_weights("") == []


def test_template_set_count():
    template = ExerciseTemplate(name="Bench Press", target_config="15-12-10-8", target_weights="")
    assert template.target_reps == [15, 12, 10, 8]
    assert template.set_count == 4
    assert template.target_weight_values == []


def test_template_blank_config_has_no_sets():
    template = ExerciseTemplate(name="Plank", target_config="", target_weights="")
    assert template.target_reps == []
    assert template.set_count == 0


def test_parse_only_ascii_digits():
    assert parse_target_reps("١٥-10") == [0, 10]
    assert parse_target_weights("٢٠-20") == [Decimal(0), Decimal("20")]


def test_parse_weights_rejects_exponent_and_specials():
    assert parse_target_weights("1e3-nan-Infinity-.5") == [Decimal(0), Decimal(0), Decimal(0), Decimal("0.5")]
