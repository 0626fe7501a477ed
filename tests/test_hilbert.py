import io

import pytest

from numlab.hilbert import hilbert_matrix, main


def test_shape():
    h = hilbert_matrix(3, 5)
    assert len(h) == 3
    assert all(len(row) == 5 for row in h)


def test_first_entry():
    assert hilbert_matrix(2, 2)[0][0] == 1.0


def test_square_is_symmetric():
    h = hilbert_matrix(5, 5)
    assert h == [list(col) for col in zip(*h)]


def test_constant_along_antidiagonals():
    h = hilbert_matrix(4, 6)
    for i in range(3):
        for j in range(5):
            assert h[i][j + 1] == pytest.approx(h[i + 1][j])


def test_rows_strictly_decrease():
    for row in hilbert_matrix(3, 6):
        assert all(a > b for a, b in zip(row, row[1:]))


def test_rectangular_extends_square():
    wide = hilbert_matrix(3, 7)
    square = hilbert_matrix(3, 3)
    assert [row[:3] for row in wide] == square


def test_zero_rows():
    assert hilbert_matrix(0, 4) == []


@pytest.mark.parametrize("rows, columns", [(-1, 2), (2, -1)])
def test_negative_dimensions(rows, columns):
    with pytest.raises(ValueError):
        hilbert_matrix(rows, columns)


def test_main_prints_matrix(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n"))
    assert main([]) == 0
    assert "1 0.5 0.333333" in capsys.readouterr().out