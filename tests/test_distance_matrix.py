import logging

import numpy as np
import pytest

from pwalign.config.config_loader import ConfigLoader
from pwalign.core.errors import EmptyComparisonError, SequenceTooLongError
from pwalign.core.scoring import Scoring, SubstitutionMatrix
from pwalign.diagnostics.validation import check_pair_size, grid_cells, validate_sequences
from pwalign.pipeline.distance_matrix import (
    compute_distance_matrix,
    compute_distance_matrix_from_config,
    parse_num_workers,
    setup_logging,
)

SEQUENCES = {"s1": "ACGT", "s2": "ACGT", "s3": "AGT", "s4": "ACCT"}


@pytest.fixture
def dna():
    return Scoring(SubstitutionMatrix.identity("ACGT"), gap_opening=2, gap_extension=1)


def test_distance_matrix_values(dna):
    matrix = compute_distance_matrix(SEQUENCES, dna)

    assert matrix.names == ("s1", "s2", "s3", "s4")
    assert len(matrix) == 4
    assert matrix["s1", "s2"] == 0.0
    assert matrix["s1", "s3"] == 0.0
    assert matrix["s1", "s4"] == pytest.approx(0.25)
    assert matrix["s3", "s4"] == pytest.approx(1 / 3)


def test_distance_matrix_symmetric_zero_diagonal(dna):
    values = compute_distance_matrix(SEQUENCES, dna, method='global').values
    assert np.allclose(values, values.T)
    assert np.all(np.diag(values) == 0.0)


def test_parallel_matches_serial(dna):
    serial = compute_distance_matrix(SEQUENCES, dna, num_workers=1)
    parallel = compute_distance_matrix(SEQUENCES, dna, num_workers=2)
    assert np.array_equal(serial.values, parallel.values)


def test_accepts_pairs_in_order(dna):
    matrix = compute_distance_matrix([("y", "ACGT"), ("x", "ACCT")], dna)
    assert matrix.names == ("y", "x")
    assert matrix.index("x") == 1
    with pytest.raises(KeyError):
        matrix.index("z")


def test_undefined_distance(dna):
    """Local alignment of unrelated sequences compares nothing."""
    unrelated = {"p": "AAAA", "q": "TTTT"}
    with pytest.raises(EmptyComparisonError):
        compute_distance_matrix(unrelated, dna, method='local')

    matrix = compute_distance_matrix(unrelated, dna, method='local', undefined_distance=1.0)
    assert matrix["p", "q"] == 1.0


def test_size_limit(dna):
    assert grid_cells("ACGT", "AGT") == 20
    check_pair_size("ACGT", "AGT", 20)
    with pytest.raises(SequenceTooLongError):
        compute_distance_matrix(SEQUENCES, dna, max_cells=19)


def test_bad_input(dna):
    with pytest.raises(ValueError, match="unique"):
        compute_distance_matrix([("a", "ACGT"), ("a", "AGT")], dna)
    with pytest.raises(ValueError):
        compute_distance_matrix(SEQUENCES, dna, method='semiglobal')


def test_from_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "alignment:\n"
        "  method: global\n"
        "scoring:\n"
        "  gap_opening: 2\n"
        "  gap_extension: 1\n"
    )
    matrix = compute_distance_matrix_from_config(SEQUENCES, ConfigLoader(str(path)))
    assert matrix["s1", "s4"] == pytest.approx(0.25)


def test_parse_num_workers():
    assert parse_num_workers(4) == 4
    assert parse_num_workers("3") == 3
    assert parse_num_workers(0) == 1
    assert parse_num_workers("many") == 1
    assert parse_num_workers('auto') >= 1


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "pwalign.log"
    logger = setup_logging({'level': 'DEBUG', 'file': str(log_file)})

    assert logger.name == 'pwalign'
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger.info("distance matrix started")
    for handler in logger.handlers:
        handler.flush()
    assert "INFO - distance matrix started" in log_file.read_text()

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_validate_sequences(dna):
    ok, errors = validate_sequences({"s1": "ACGT", "s2": ""}, dna)
    assert not ok
    assert errors == ["Sequence s2: empty"]

    ok, errors = validate_sequences({"s3": "ACNGX"}, dna)
    assert not ok
    assert errors == ["Sequence s3: symbols not in substitution matrix: NX"]

    assert validate_sequences(SEQUENCES, dna) == (True, [])
