import random

import pytest

from parabench.matrix import (
    SubMatrix,
    gather_submatrices,
    main,
    random_submatrix,
    sequential_aggregation,
    verify_gathered,
)


def test_random_submatrix_shape_and_range():
    matrix = random_submatrix(6, random.Random(1))
    assert (matrix.rows, matrix.cols) == (6, 6)
    assert len(matrix.data) == 36
    assert all(0 <= value < 100 for value in matrix.data)


def test_random_submatrix_is_deterministic_with_seed():
    first = random_submatrix(5, random.Random(42))
    second = random_submatrix(5, random.Random(42))
    assert first == second


def test_random_submatrix_rejects_bad_size():
    with pytest.raises(ValueError):
        random_submatrix(0)


def test_submatrix_rejects_wrong_data_length():
    with pytest.raises(ValueError):
        SubMatrix(2, 2, [1, 2, 3])


def test_gather_keeps_rank_order_and_seeds():
    gathered = gather_submatrices(4, 3, seed=10)
    assert len(gathered) == 4
    assert gathered[2] == random_submatrix(3, random.Random(12))
    assert gathered[0] != gathered[1]


def test_gather_rejects_no_tasks():
    with pytest.raises(ValueError):
        gather_submatrices(0, 3)


def test_verify_successful():
    report = verify_gathered(gather_submatrices(5, 4, seed=3), 4)
    assert report.successful is True
    assert report.received == 5
    assert report.total_rows == report.expected_total_rows
    assert report.mismatches == []


def test_verify_detects_bad_dimensions():
    matrices = [SubMatrix(5, 5, [0] * 25), SubMatrix(4, 5, [0] * 20)]
    report = verify_gathered(matrices, 5)
    assert report.successful is False
    assert report.mismatches == [(1, 4, 5)]
    assert report.total_rows < report.expected_total_rows


def test_sequential_aggregation_shape():
    matrix, elapsed = sequential_aggregation(3, 2, random.Random(0))
    assert len(matrix) == 6
    assert all(len(row) == 6 for row in matrix)
    assert all(0 <= value < 100 for row in matrix for value in row)
    assert elapsed >= 0


def test_main_reports_success(capsys):
    assert main(["--workers", "3", "--k", "4", "--seed", "7"]) == 0
    captured = capsys.readouterr()
    assert "Received 3 matrices." in captured.out
    assert "Verification successful" in captured.out
    assert "FAILED" not in captured.err