from __future__ import annotations

from types import SimpleNamespace

import numpy as np
import pytest
from statsmodels.stats.multitest import multipletests

from false_discovery import (
    ConvergenceError,
    config,
    FDRValidationError,
    Value,
    benjamini_hochberg,
    benjamini_hochberg_arrays,
    parse_delimited_input,
)

TEST_EPSILON = 1e-7


def _values(p_values: list[float]) -> list[Value]:
    return [Value(id=str(i), p_value=p) for i, p in enumerate(p_values)]


def test_critical_values_follow_rank() -> None:
    values = _values([0.3, 0.01, 0.12, 0.05, 0.2, 0.03])
    benjamini_hochberg(0.05, values)

    n = len(values)
    for k, value in enumerate(values, start=1):
        assert value.critical_value == pytest.approx(k / n * 0.05)


def test_records_are_sorted_in_place_by_p() -> None:
    values = _values([0.3, 0.01, 0.12, 0.05])
    originals = list(values)

    benjamini_hochberg(0.05, values)

    assert [v.p_value for v in values] == [0.01, 0.05, 0.12, 0.3]
    # Same objects, reordered
    assert sorted(map(id, values)) == sorted(map(id, originals))


def test_ties_keep_input_order() -> None:
    values = [
        Value("x", 0.2),
        Value("first", 0.01),
        Value("y", 0.2),
        Value("z", 0.2),
    ]
    benjamini_hochberg(0.05, values)

    assert [v.id for v in values] == ["first", "x", "y", "z"]


def test_scenario_a_needs_no_repair() -> None:
    values = _values([0.01, 0.03, 0.05, 0.12, 0.2, 0.3])
    benjamini_hochberg(0.05, values)

    np.testing.assert_allclose(
        [v.adjusted_p for v in values],
        [0.06, 0.09, 0.10, 0.18, 0.24, 0.3],
        atol=TEST_EPSILON,
    )


def test_raw_adjusted_is_capped_at_one() -> None:
    order, critical, raw = benjamini_hochberg_arrays(
        np.array([0.9, 0.6, 0.95]), fdr=0.1
    )

    np.testing.assert_array_equal(order, [1, 0, 2])
    np.testing.assert_allclose(critical, [0.1 / 3, 0.2 / 3, 0.1])
    np.testing.assert_allclose(raw, [1.0, 1.0, 0.95])


def test_default_fdr_comes_from_config() -> None:
    _, critical, _ = benjamini_hochberg_arrays(np.array([0.2, 0.01]))

    np.testing.assert_allclose(
        critical, [config.FDR_ALPHA / 2, config.FDR_ALPHA]
    )


def test_nan_p_value_does_not_spread_to_other_records() -> None:
    values = parse_delimited_input("A 0.01\nB nan\nC 0.2")

    for method in ("running_min", "iterative"):
        benjamini_hochberg(0.05, values, method=method)

        assert [v.id for v in values] == ["A", "C", "B"]
        np.testing.assert_allclose(
            [v.adjusted_p for v in values[:2]], [0.03, 0.3], atol=TEST_EPSILON
        )
        assert np.isnan(values[2].adjusted_p)
        assert not values[2].significant


def test_adjusted_p_is_non_decreasing_after_repair(rng) -> None:
    values = _values(list(rng.uniform(size=300)))
    benjamini_hochberg(0.05, values)

    adjusted = np.array([v.adjusted_p for v in values])
    assert np.all(np.diff(adjusted) >= 0)
    assert np.all(adjusted <= 1.0)


def test_matches_statsmodels_fdr_bh(rng) -> None:
    p_values = rng.uniform(size=120) ** 3
    values = _values(list(p_values))

    benjamini_hochberg(0.05, values)

    _, expected, _, _ = multipletests(p_values, alpha=0.05, method="fdr_bh")
    by_id = {v.id: v.adjusted_p for v in values}
    actual = np.array([by_id[str(i)] for i in range(len(p_values))])
    np.testing.assert_allclose(actual, expected, rtol=1e-12)


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "A 0.01\nB 0.03\nC 0.05\nD 0.12\nE 0.2\nF 0.3",
            {"A": 0.06, "B": 0.09, "C": 0.10, "D": 0.18, "E": 0.24, "F": 0.3},
        ),
        (
            "A 0.001052588\nB 0.002887613\nC 0.004249\n"
            "D 0.2431061\nE 0.4909836\nF 0.589325",
            {
                "A": 0.006315528,
                "B": 0.008498000,
                "C": 0.008498000,
                "D": 0.364659150,
                "E": 0.589180320,
                "F": 0.589325000,
            },
        ),
        (
            "A 0.006920873\nB 0.0074964\nC 0.190987137\nD 0.204375554\n"
            "E 0.376956048\nF 0.742802872\nG 0.743635244\nH 0.883128442",
            {
                "A": 0.0299856,
                "B": 0.0299856,
                "C": 0.4087511,
                "D": 0.4087511,
                "E": 0.6031297,
                "F": 0.8498689,
                "G": 0.8498689,
                "H": 0.8831284,
            },
        ),
    ],
    ids=["insignificant", "repaired", "some-significant"],
)
def test_adjusted_p_for_parsed_input(text: str, expected: dict[str, float]) -> None:
    values = parse_delimited_input(text)
    benjamini_hochberg(0.05, values)

    for value in values:
        assert abs(value.adjusted_p - expected[value.id]) <= TEST_EPSILON, value.id


def test_very_small_p_value_is_significant(rng) -> None:
    values = _values(list(rng.uniform(size=249)))
    values.append(Value(id="249", p_value=1e-13))

    benjamini_hochberg(0.05, values)

    assert values[0].id == "249"
    assert values[0].significant
    assert all(
        v.significant == (v.p_value < v.critical_value) for v in values
    )


@pytest.mark.parametrize("fdr", [0.0, 1.0, 1.2, -0.1, float("nan")])
def test_invalid_fdr_leaves_records_untouched(fdr: float) -> None:
    values = _values([0.3, 0.01, 0.2])
    snapshot = [(v.id, v.p_value, v.critical_value, v.adjusted_p) for v in values]

    with pytest.raises(FDRValidationError, match="FDR must be on the range"):
        benjamini_hochberg(fdr, values)

    assert [(v.id, v.p_value, v.critical_value, v.adjusted_p) for v in values] == snapshot


def test_invalid_fdr_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        benjamini_hochberg(1.2, [Value(id=None, p_value=0.1)])


def test_unknown_method_leaves_records_untouched() -> None:
    values = _values([0.3, 0.01])

    with pytest.raises(ValueError, match="Unknown monotonicity method"):
        benjamini_hochberg(0.05, values, method="step_down")

    assert [v.p_value for v in values] == [0.3, 0.01]


def test_empty_input_is_a_no_op() -> None:
    values: list[Value] = []
    benjamini_hochberg(0.05, values)
    assert values == []


def test_accepts_any_object_with_the_capability() -> None:
    records = [
        SimpleNamespace(p=0.04, critical_value=None, adjusted_p=None),
        SimpleNamespace(p=0.01, critical_value=None, adjusted_p=None),
    ]

    benjamini_hochberg(0.05, records)

    assert [r.p for r in records] == [0.01, 0.04]
    assert records[0].critical_value == pytest.approx(0.025)
    assert records[0].adjusted_p == pytest.approx(0.02)
    assert records[1].adjusted_p == pytest.approx(0.04)


def test_out_of_range_p_values_are_accepted() -> None:
    values = [Value("high", 1.5), Value("neg", -0.2), Value("mid", 0.3)]

    benjamini_hochberg(0.05, values)

    assert [v.id for v in values] == ["neg", "mid", "high"]
    np.testing.assert_allclose([v.adjusted_p for v in values], [-0.6, 0.45, 1.0])
    assert values[0].significant
    assert not values[2].significant


def test_iterative_method_matches_running_min(rng) -> None:
    p_values = list(rng.uniform(size=60) ** 2)
    running = _values(p_values)
    iterative = _values(p_values)

    benjamini_hochberg(0.05, running, method="running_min")
    benjamini_hochberg(0.05, iterative, method="iterative")

    assert [v.adjusted_p for v in running] == [v.adjusted_p for v in iterative]


def test_iterative_method_convergence_failure_leaves_partial_state() -> None:
    # 500 equal p-values give a decreasing run of raw estimates 250 long;
    # each forward scan only moves the minimum one rank down.
    values = _values([0.5] * 500)

    with pytest.raises(ConvergenceError) as excinfo:
        benjamini_hochberg(0.05, values, method="iterative", max_passes=200)

    assert excinfo.value.passes == 200
    assert values[-1].critical_value == pytest.approx(0.05)
    adjusted = np.array([v.adjusted_p for v in values])
    assert adjusted[-1] == pytest.approx(0.5)
    assert np.any(np.diff(adjusted) < 0)


def test_running_min_handles_long_decreasing_runs() -> None:
    values = _values([0.5] * 500)

    benjamini_hochberg(0.05, values)

    np.testing.assert_allclose([v.adjusted_p for v in values], 0.5)
