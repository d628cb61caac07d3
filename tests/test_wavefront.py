import pytest

from parabench.wavefront import (
    init_grid,
    main,
    measure_execution_time,
    parallel_wavefront,
    sequential_wavefront,
    validate_grid,
)


def test_init_grid_borders_are_ones():
    grid = init_grid(5)
    assert grid[0] == [1] * 5
    assert [row[0] for row in grid] == [1] * 5
    assert all(cell == 0 for row in grid[1:] for cell in row[1:])


def test_init_grid_rejects_negative():
    with pytest.raises(ValueError):
        init_grid(-1)


def test_initial_grid_is_not_valid():
    assert validate_grid(init_grid(4)) is False


def test_sequential_wavefront_is_valid():
    result = sequential_wavefront(init_grid(12))
    assert validate_grid(result) is True


def test_sequential_wavefront_does_not_modify_input():
    grid = init_grid(6)
    sequential_wavefront(grid)
    assert grid == init_grid(6)


def test_sequential_known_value():
    result = sequential_wavefront(init_grid(3))
    assert result[2][2] == 6


def test_symmetry():
    result = sequential_wavefront(init_grid(9))
    assert all(result[i][j] == result[j][i] for i in range(9) for j in range(9))


@pytest.mark.parametrize("size,block", [(1, 3), (2, 1), (11, 5), (21, 4), (17, 100), (10, 3)])
def test_parallel_matches_sequential(size, block):
    grid = init_grid(size)
    assert parallel_wavefront(grid, block, 4) == sequential_wavefront(grid)


def test_parallel_rejects_bad_block_size():
    with pytest.raises(ValueError):
        parallel_wavefront(init_grid(4), 0)


def test_large_grid_wraps_and_stays_valid():
    result = sequential_wavefront(init_grid(40))
    assert all(-(2**31) <= cell < 2**31 for row in result for cell in row)
    assert validate_grid(result) is True


def test_validate_detects_tampering():
    result = sequential_wavefront(init_grid(6))
    result[3][4] += 1
    assert validate_grid(result) is False


def test_measure_execution_time_prints_and_returns(capsys):
    grid = init_grid(5)
    result = measure_execution_time(grid, sequential_wavefront)
    assert result == sequential_wavefront(grid)
    assert "Execution Time:" in capsys.readouterr().out


def test_main_reports_both_valid(capsys):
    assert main(["--size", "20", "--block", "5", "--workers", "2"]) == 0
    out = capsys.readouterr().out
    assert "Sequential Execution" in out
    assert "Parallel Execution" in out
    assert out.count("Is valid: 1") == 2