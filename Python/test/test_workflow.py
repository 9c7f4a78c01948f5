"""
Tests of the configuration loader, the HDF5 writer and the command-line workflow.
"""
import json
import logging
from pathlib import Path

import h5py
import numpy as np
import pytest

from heisenberg_project.hes_globals import configure_logging, get_logger
from heisenberg_project.hilbert import InvalidSizeError, make_basis
from heisenberg_project.io import HeisenbergHDF5Schema, HeisenbergResultWriter
from heisenberg_project.models import ConfigError, SystemConfig, load_system
from heisenberg_project.workflows import main, run

INPUT = {
    "system size"           : 4,
    "momentum sector"       : 0,
    "magnetization sector"  : 0,
    "coupling constant"     : 1,
    "anisotropy"            : 1.0,
    "magnon interaction"    : 1.0,
}


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.json"
    path.write_text(json.dumps(INPUT))
    return path


class TestConfig:

    def test_from_dict_json_keys(self):
        system = SystemConfig.from_dict(INPUT)
        assert system == SystemConfig(size=4, momentum=0, magnetization=0, coupling=1.0)
        assert isinstance(system.coupling, float)

    def test_from_dict_field_names(self):
        system = SystemConfig.from_dict({"size": 6, "momentum": 2, "magnetization": 1,
                                         "coupling": -1.0, "anisotropy": 0.5, "interaction": 0.0})
        assert system.n_magnons == 2
        assert system.momentum_value == pytest.approx(2.0 * np.pi / 3.0)

    def test_round_trip(self):
        system = SystemConfig(size=8, momentum=3, magnetization=2, coupling=0.5, anisotropy=2.0, interaction=0.1)
        assert SystemConfig.from_dict(system.to_dict()) == system
        assert system.summary()["size"] == 8

    def test_load_system(self, input_file):
        assert load_system(input_file).size == 4

    def test_missing_key(self):
        payload = dict(INPUT)
        del payload["anisotropy"]
        with pytest.raises(ConfigError, match="anisotropy"):
            SystemConfig.from_dict(payload)

    @pytest.mark.parametrize(
        "update",
        [
            {"system size": 0},
            {"system size": 4.5},
            {"momentum sector": 4},
            {"momentum sector": -1},
            {"magnetization sector": -1},
            {"coupling constant": "strong"},
        ],
    )
    def test_invalid_values(self, update):
        with pytest.raises(ConfigError):
            SystemConfig.from_dict({**INPUT, **update})

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ not json")
        with pytest.raises(ConfigError):
            load_system(path)

    def test_frozen(self):
        system = SystemConfig(size=4)
        with pytest.raises(AttributeError):
            system.size = 6


class TestRun:

    def test_run_from_mapping(self):
        system, basis, factorization = run(INPUT)
        assert len(basis) == 3
        assert factorization.values[0] == pytest.approx(-2.0)

    def test_run_from_path(self, input_file):
        system, basis, (values, vectors, info) = run(path=input_file, howmany=2)
        np.testing.assert_allclose(values, [-2.0, -1.0], atol=1e-12)
        assert vectors.shape == (len(basis), 2)

    def test_run_empty_sector(self):
        _, basis, factorization = run(SystemConfig(size=4, momentum=1, magnetization=2))
        assert len(basis) == 0
        assert factorization.empty

    def test_run_propagates_basis_errors(self):
        with pytest.raises(InvalidSizeError):
            run(SystemConfig(size=5))

    def test_run_requires_input(self):
        with pytest.raises(ValueError):
            run()


class TestWriter:

    def test_write_result_layout(self, tmp_path):
        system, basis, factorization = run(SystemConfig(size=6, momentum=0, magnetization=0), howmany=2)
        writer  = HeisenbergResultWriter(path=tmp_path / "out" / "results.h5")
        out     = writer.write_result(None, system, basis, factorization)
        label   = HeisenbergHDF5Schema.sector_label(6, 0, 0)
        assert label == "L6_S0_K0"
        with h5py.File(out, "r") as h5:
            grp = h5[f"/ed/{label}"]
            assert grp.attrs["status"] == "ok"
            assert grp.attrs["dim"] == len(basis)
            assert grp.attrs["converged"] == 2
            np.testing.assert_allclose(grp["energies"][()], factorization.values)
            np.testing.assert_array_equal(grp["basis_states"][()], basis.states)
            assert grp["eigenvectors"].shape == (len(basis), 2)
            assert grp["system/size"][()] == 6

    def test_write_empty_result(self, tmp_path):
        system, basis, factorization = run(SystemConfig(size=4, momentum=1, magnetization=2))
        writer = HeisenbergResultWriter(path=tmp_path / "results.h5")
        writer.write_result("empty", system, basis, factorization)
        with h5py.File(writer.path, "r") as h5:
            assert h5["/ed/empty"].attrs["status"] == "empty"
            assert "energies" not in h5["/ed/empty"]

    def test_write_metadata(self, tmp_path):
        writer = HeisenbergResultWriter(path=tmp_path / "results.h5")
        writer.write_metadata({"version": "0.1.0", "nested": {"value": 1.5}})
        with h5py.File(writer.path, "r") as h5:
            assert h5["/metadata/global/nested/value"][()] == 1.5

    def test_rewrite_empty_clears_spectrum(self, tmp_path):
        writer = HeisenbergResultWriter(path=tmp_path / "results.h5")
        system, basis, factorization = run(SystemConfig(size=4))
        writer.write_result("sector", system, basis, factorization)
        empty_system, empty_basis, empty = run(SystemConfig(size=4, momentum=1, magnetization=2))
        writer.write_result("sector", empty_system, empty_basis, empty)
        with h5py.File(writer.path, "r") as h5:
            grp = h5["/ed/sector"]
            assert grp.attrs["status"] == "empty"
            assert grp.attrs["dim"] == 0
            for key in HeisenbergHDF5Schema().spectral_datasets:
                assert key not in grp

    def test_sector_label_parsing(self):
        assert HeisenbergHDF5Schema.parse_sector_label("L12_S3_K5") == (12, 3, 5)
        with pytest.raises(ValueError):
            HeisenbergHDF5Schema.parse_sector_label("ground_state")


class TestCommandLine:

    def test_main_with_parameters(self, tmp_path, capsys):
        output = tmp_path / "cli.h5"
        code   = main(["--size", "4", "--howmany", "2", "--output", str(output), "--log-level", "WARNING"])
        assert code == 0
        assert "E[0] = -2.000000000000" in capsys.readouterr().out
        with h5py.File(output, "r") as h5:
            assert "/ed/L4_S0_K0/energies" in h5

    def test_main_with_input_file(self, input_file, capsys):
        assert main(["--input", str(input_file), "--log-level", "WARNING"]) == 0
        assert "dim = 3" in capsys.readouterr().out

    def test_main_empty_sector(self, capsys):
        assert main(["--size", "4", "--momentum", "1", "--magnetization", "2", "--log-level", "ERROR"]) == 0
        assert "Empty sector" in capsys.readouterr().out

    def test_main_requires_system(self):
        with pytest.raises(SystemExit):
            main([])


class TestLogging:

    def test_configure_logging(self):
        logger = configure_logging("debug")
        assert logger is get_logger()
        assert logger.level == logging.DEBUG
        configure_logging(logging.INFO)
        assert len(logger.handlers) == 1

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")
