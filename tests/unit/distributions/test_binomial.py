from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import asdict, fields

import numpy as np
import pytest
from scipy.stats import binom

from pysatl_binomial import (
    DEFAULT_N,
    DEFAULT_P,
    Binomial,
    CharacteristicName,
    Distribution,
    FamilyName,
    InvalidArgumentError,
    ParametricFamilyRegister,
    UnivariateDiscrete,
    binomial,
)


def _noop() -> None:
    pass


INVALID_N = ["5", -5.0, 0.0, 4.3, math.nan, math.inf, True, False, None, {}, [], _noop]
INVALID_P = ["5", -5.0, -0.1, 1.1, 5.0, math.nan, True, False, None, {}, [], _noop]

DERIVED_PROPERTIES = ["kurtosis", "mean", "median", "mode", "skewness", "stdev", "variance"]
EVALUATORS = ["cdf", "logpmf", "mgf", "pmf", "quantile"]


class TestConstruction:
    def test_default_parameters(self) -> None:
        dist = Binomial()

        assert isinstance(dist, Binomial)
        assert dist.n == DEFAULT_N == 1
        assert dist.p == DEFAULT_P == 0.5

    def test_custom_parameters(self) -> None:
        dist = Binomial(4, 0.5)

        assert dist.n == 4
        assert dist.p == 0.5

    def test_keyword_parameters(self) -> None:
        dist = Binomial(p=0.3, n=7)

        assert (dist.n, dist.p) == (7, 0.3)

    @pytest.mark.parametrize("value", INVALID_N)
    def test_invalid_n(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="Number of trials must be a positive integer"):
            Binomial(value, 0.3)

    @pytest.mark.parametrize("value", INVALID_P)
    def test_invalid_p(self, value: object) -> None:
        with pytest.raises(
            InvalidArgumentError, match=r"Success probability must be a number on the interval"
        ):
            Binomial(8, value)

    def test_error_message_names_value(self) -> None:
        with pytest.raises(InvalidArgumentError) as excinfo:
            Binomial(4.3, 0.3)
        assert str(excinfo.value) == (
            "invalid argument. Number of trials must be a positive integer. Value: `4.3`."
        )

    def test_error_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            Binomial(-5, 0.3)

    @pytest.mark.parametrize("kwargs", [{"n": 8}, {"p": 0.3}])
    def test_requires_both_parameters(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(InvalidArgumentError, match="must be provided together"):
            Binomial(**kwargs)

    def test_requires_both_parameters_positional(self) -> None:
        with pytest.raises(InvalidArgumentError, match=r"Value: `8`"):
            Binomial(8)

    def test_accepts_numpy_scalars(self) -> None:
        dist = Binomial(np.int64(6), np.float64(0.25))

        assert dist.mean == pytest.approx(1.5)

    def test_accepts_integral_float(self) -> None:
        dist = Binomial(5.0, 0.1)

        assert dist.cdf(0.8) == pytest.approx(binom.cdf(0.8, 5, 0.1))

    def test_rejects_n_beyond_float_range(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Number of trials must be a positive integer"):
            Binomial(10**400, 0.5)

    def test_n_beyond_int64_range(self) -> None:
        dist = Binomial(2**64, 0.5)

        assert dist.n == 2**64
        assert dist.mean == pytest.approx(2.0**63)
        assert dist.variance == pytest.approx(2.0**62)
        assert dist.stdev == pytest.approx(2.0**31)
        assert dist.mode == 2**63
        assert isinstance(dist.median, float)
        assert dist.skewness == pytest.approx(0.0, abs=1e-9)
        assert dist.kurtosis == pytest.approx(-2.0 / 2.0**64, abs=1e-12)
        assert dist.mgf(0.0) == 1.0
        assert dist.pmf(0.0) == 0.0
        assert dist.cdf(0.0) == 0.0


class TestFactoryEquivalence:
    def test_factory_returns_instance(self) -> None:
        assert isinstance(binomial(), Binomial)
        assert isinstance(binomial(4, 0.5), Binomial)

    def test_factory_and_constructor_agree(self) -> None:
        handles = [Binomial(4, 0.5), binomial(4, 0.5), binomial(n=4, p=0.5)]
        family = ParametricFamilyRegister.get(FamilyName.BINOMIAL)
        handles.append(family(4, 0.5))

        assert len({id(h) for h in handles}) == len(handles)
        for handle in handles:
            assert isinstance(handle, Binomial)
            assert (handle.n, handle.p) == (4, 0.5)
            for name in DERIVED_PROPERTIES:
                assert getattr(handle, name) == getattr(handles[0], name)
            assert handle.pmf(2.0) == handles[0].pmf(2.0)

    def test_factory_validates(self) -> None:
        with pytest.raises(InvalidArgumentError):
            binomial(8)
        with pytest.raises(InvalidArgumentError):
            binomial(0, 0.5)

    def test_handles_are_independent(self) -> None:
        first = binomial(4, 0.5)
        second = binomial(4, 0.5)
        first.n = 9

        assert second.n == 4


class TestParameterAccess:
    def test_get_and_set_n(self) -> None:
        dist = Binomial(2, 0.4)
        assert dist.n == 2

        dist.n = 9
        assert dist.n == 9

    def test_get_and_set_p(self) -> None:
        dist = Binomial(10, 0.4)
        assert dist.p == 0.4

        dist.p = 0.8
        assert dist.p == 0.8

    @pytest.mark.parametrize("value", INVALID_N)
    def test_invalid_n_assignment_keeps_value(self, value: object) -> None:
        dist = Binomial(3, 0.2)

        with pytest.raises(InvalidArgumentError, match=r"^invalid assignment\."):
            dist.n = value  # type: ignore[assignment]
        assert dist.n == 3

    @pytest.mark.parametrize("value", INVALID_P)
    def test_invalid_p_assignment_keeps_value(self, value: object) -> None:
        dist = Binomial(3, 0.2)

        with pytest.raises(InvalidArgumentError, match=r"^invalid assignment\."):
            dist.p = value  # type: ignore[assignment]
        assert dist.p == 0.2

    def test_rejected_assignment_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        dist = Binomial()

        with caplog.at_level(logging.DEBUG, logger="pysatl_binomial.distributions.binomial"):
            with pytest.raises(InvalidArgumentError):
                dist.p = 1.5
        assert "Rejected assignment p=1.5" in caplog.text

    def test_fields_are_enumerable(self) -> None:
        dist = Binomial(6, 0.3)

        assert [f.name for f in fields(dist)] == ["n", "p"]
        assert asdict(dist) == {"n": 6, "p": 0.3}

    def test_no_other_attributes(self) -> None:
        dist = Binomial()

        with pytest.raises(AttributeError):
            dist.q = 0.5  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            dist.cdf = lambda x: 0.0  # type: ignore[method-assign]
        assert dist.cdf(0.5) == pytest.approx(0.5)

    def test_repr(self) -> None:
        assert repr(Binomial(4, 0.2)) == "Binomial(n=4, p=0.2)"

    def test_identity_equality(self) -> None:
        assert Binomial(4, 0.2) != Binomial(4, 0.2)


class TestDerivedProperties:
    @pytest.mark.parametrize(
        "name, n, p, reference",
        [
            ("kurtosis", 8, 0.4, lambda n, p: binom.stats(n, p, moments="k")),
            ("mean", 2, 0.9, binom.mean),
            ("median", 20, 0.4, binom.median),
            ("skewness", 9, 0.3, lambda n, p: binom.stats(n, p, moments="s")),
            ("stdev", 9, 0.3, binom.std),
            ("variance", 5, 0.8, binom.var),
        ],
    )
    def test_property_delegates(self, name, n, p, reference) -> None:
        assert getattr(Binomial(n, p), name) == pytest.approx(float(reference(n, p)))

    def test_mode(self) -> None:
        assert Binomial(3, 0.4).mode == 1
        assert Binomial(12, 0.4).mode == 5

    def test_reference_values(self) -> None:
        dist = Binomial(12, 0.4)

        assert dist.kurtosis == pytest.approx(-0.153, abs=1e-3)
        assert dist.variance == pytest.approx(2.88)
        assert dist.mean == pytest.approx(4.8)
        assert dist.median == 5.0
        assert dist.skewness == pytest.approx(0.118, abs=1e-3)
        assert dist.stdev == pytest.approx(1.697, abs=1e-3)

    @pytest.mark.parametrize("name", DERIVED_PROPERTIES)
    def test_properties_are_read_only(self, name: str) -> None:
        dist = Binomial(12, 0.4)
        before = getattr(dist, name)

        with pytest.raises(AttributeError):
            setattr(dist, name, 3.14)
        assert getattr(dist, name) == before
        assert (dist.n, dist.p) == (12, 0.4)

    def test_recomputed_after_mutation(self) -> None:
        dist = Binomial(5, 0.5)
        assert dist.mean == pytest.approx(2.5)

        dist.p = 0.2
        assert dist.mean == pytest.approx(1.0)

        dist.n = 10
        assert dist.mean == pytest.approx(2.0)
        assert dist.variance == pytest.approx(1.6)
        assert dist.mode == 2

    @pytest.mark.filterwarnings("error")
    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_degenerate_shape_moments_are_silent(self, p: float) -> None:
        dist = Binomial(4, p)

        assert not np.isfinite(dist.skewness)
        assert not np.isfinite(dist.kurtosis)
        assert dist.variance == 0.0
        assert dist.stdev == 0.0


class TestEvaluators:
    def test_cdf(self) -> None:
        assert Binomial(5, 0.1).cdf(0.8) == pytest.approx(0.59049)
        assert Binomial().cdf(0.5) == pytest.approx(binom.cdf(0.5, 1, 0.5))

    def test_pmf(self) -> None:
        assert Binomial(4, 0.2).pmf(2.0) == pytest.approx(0.1536)

    def test_logpmf(self) -> None:
        assert Binomial(4, 0.2).logpmf(2.0) == pytest.approx(-1.873, abs=1e-3)

    def test_mgf(self) -> None:
        assert Binomial(4, 0.2).mgf(0.5) == pytest.approx(1.629, abs=1e-3)

    def test_quantile(self) -> None:
        assert Binomial(4, 0.2).quantile(0.5) == 1.0

    def test_argument_domain_is_delegated(self) -> None:
        dist = Binomial(4, 0.2)

        assert np.isnan(dist.quantile(1.5))
        assert np.isnan(dist.cdf(np.nan))
        assert dist.pmf(2.5) == 0.0
        assert dist.logpmf(-1.0) == -np.inf

    @pytest.mark.parametrize("name", EVALUATORS)
    def test_evaluators_accept_arrays(self, name: str) -> None:
        dist = Binomial(6, 0.3)
        x = np.array([0.0, 0.25, 0.5, 1.0])

        result = getattr(dist, name)(x)
        expected = np.array([getattr(dist, name)(v) for v in x])
        np.testing.assert_array_almost_equal(result, expected)

    def test_evaluators_read_current_parameters(self) -> None:
        dist = Binomial(4, 0.2)
        pmf = dist.pmf
        first = pmf(2.0)

        dist.p = 0.5
        assert pmf(2.0) == pytest.approx(binom.pmf(2, 4, 0.5))
        assert pmf(2.0) != first

        dist.n = 8
        assert dist.quantile(0.5) == binom.ppf(0.5, 8, 0.5)
        assert dist.cdf(3.0) == pytest.approx(binom.cdf(3, 8, 0.5))
        assert dist.mgf(0.5) == pytest.approx((0.5 + 0.5 * math.exp(0.5)) ** 8)


class TestDistributionInterface:
    def test_implements_protocol(self) -> None:
        dist = Binomial()

        assert isinstance(dist, Distribution)
        assert dist.distribution_type == UnivariateDiscrete
        assert dist.family.name == FamilyName.BINOMIAL

    def test_parameters_snapshot(self) -> None:
        dist = Binomial(4, 0.2)
        snapshot = dist.parameters

        dist.p = 0.6
        assert snapshot.parameters == {"n": 4, "p": 0.2}
        assert dist.parameters.parameters == {"n": 4, "p": 0.6}

    def test_calculate_characteristic(self) -> None:
        dist = Binomial(12, 0.4)

        assert dist.calculate_characteristic(CharacteristicName.MEAN) == pytest.approx(4.8)
        assert dist.calculate_characteristic("pmf", 5) == pytest.approx(binom.pmf(5, 12, 0.4))

    def test_query_method_is_evaluated_lazily(self) -> None:
        dist = Binomial(12, 0.4)
        mean = dist.query_method(CharacteristicName.MEAN)
        cdf = dist.query_method(CharacteristicName.CDF)

        dist.n = 6
        assert mean() == pytest.approx(2.4)
        assert cdf(2.0) == pytest.approx(binom.cdf(2, 6, 0.4))

    def test_unknown_characteristic(self) -> None:
        with pytest.raises(KeyError, match="'entropy' is not provided"):
            Binomial().query_method("entropy")
