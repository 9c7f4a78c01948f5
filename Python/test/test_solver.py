"""
Tests of the Lanczos driver.
"""
import numpy as np
import pytest
import scipy.sparse as sp

from heisenberg_project.ed import Factorization, LanczosSolver, SolverConfig, factorize
from heisenberg_project.hilbert import make_basis
from heisenberg_project.models import SystemConfig
from heisenberg_project.operators import make_model


@pytest.fixture(scope="module")
def large_model():
    """L=12 ground-state sector, large enough for the ARPACK path."""
    system = SystemConfig(size=12, momentum=0, magnetization=0)
    return make_model(make_basis(system), system)


class TestFactorize:

    def test_empty_model_returns_sentinel(self):
        result = factorize(sp.csr_matrix((0, 0), dtype=np.complex128))
        assert isinstance(result, Factorization)
        assert result.empty
        values, vectors, info = result
        assert values is None and vectors is None and info is None

    def test_single_state(self):
        system          = SystemConfig(size=2, momentum=0, magnetization=1, anisotropy=2.0)
        values, vectors, info = factorize(make_model(make_basis(system), system))
        np.testing.assert_allclose(values, [1.0])
        assert vectors.shape == (1, 1)
        assert info.converged == 1

    def test_dense_path(self, scenario_a):
        values, vectors, info = factorize(make_model(make_basis(scenario_a), scenario_a), howmany=2)
        np.testing.assert_allclose(values, [-2.0, -1.0], atol=1e-12)
        assert vectors.shape == (3, 2)
        assert info.method == "numpy.eigh"
        assert info.converged == 2
        assert np.all(info.residual_norms < 1e-10)

    def test_largest_real_part(self, scenario_a):
        values, _, _ = factorize(make_model(make_basis(scenario_a), scenario_a), howmany=1, which="LR")
        np.testing.assert_allclose(values, [1.0], atol=1e-12)

    def test_sparse_path_matches_dense(self, large_model):
        assert large_model.shape[0] > SolverConfig().dense_threshold
        values, vectors, info = factorize(large_model, howmany=3)
        exact = np.linalg.eigvalsh(large_model.toarray())[:3]
        assert info.method == "scipy.eigsh"
        np.testing.assert_allclose(values, exact, atol=1e-8)
        assert vectors.shape == (large_model.shape[0], 3)
        assert info.converged == 3

    def test_eigenvectors_are_normalized(self, large_model):
        _, vectors, _ = factorize(large_model, howmany=2)
        np.testing.assert_allclose(np.linalg.norm(vectors, axis=0), 1.0, atol=1e-10)

    def test_howmany_is_clipped_to_dimension(self, scenario_a):
        values, _, _ = factorize(make_model(make_basis(scenario_a), scenario_a), howmany=10)
        assert len(values) == 3

    @pytest.mark.parametrize("kwargs", [{"which": "LM"}, {"howmany": 0}])
    def test_invalid_arguments(self, scenario_a, kwargs):
        with pytest.raises(ValueError):
            factorize(make_model(make_basis(scenario_a), scenario_a), **kwargs)


class TestLanczosSolver:

    def test_run_uses_config(self, scenario_a):
        solver  = LanczosSolver(make_model(make_basis(scenario_a), scenario_a), SolverConfig(howmany=3))
        result  = solver.run()
        np.testing.assert_allclose(result.values, [-2.0, -1.0, 1.0], atol=1e-12)
