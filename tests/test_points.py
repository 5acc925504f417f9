import io
from pathlib import Path

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from bbox2d.error import MalformedPointsError, ParserError
from bbox2d.points import load_points, to_vectors
from bbox2d.vector import Vector2D


class TestLoadPoints:
    def test_whitespace_separated(self) -> None:
        data = load_points(io.StringIO('0 0\n20   10\n-3.5 4\n'))
        assert_array_equal(data, np.array([[0.0, 0.0], [20.0, 10.0], [-3.5, 4.0]]))

    def test_comments_and_blank_lines(self) -> None:
        data = load_points(io.StringIO('# x y\n1 2  # first\n\n3 4\n'))
        assert_array_equal(data, np.array([[1.0, 2.0], [3.0, 4.0]]))

    def test_delimiter(self) -> None:
        data = load_points(io.StringIO('1,2\n3,4\n'), delimiter=',')
        assert_array_equal(data, np.array([[1.0, 2.0], [3.0, 4.0]]))

    def test_single_point(self) -> None:
        assert load_points(io.StringIO('1 2\n')).shape == (1, 2)

    @pytest.mark.parametrize('text', ['', '# nothing here\n', '\n\n'])
    def test_empty_input(self, text: str) -> None:
        data = load_points(io.StringIO(text))
        assert data.shape == (0, 2)

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / 'points.txt'
        path.write_text('5 6\n7 8\n', encoding='utf-8')
        assert_array_equal(load_points(path), np.array([[5.0, 6.0], [7.0, 8.0]]))
        assert_array_equal(load_points(str(path)), np.array([[5.0, 6.0], [7.0, 8.0]]))

    def test_non_numeric(self) -> None:
        with pytest.raises(MalformedPointsError):
            load_points(io.StringIO('1 2\nx y\n'))

    def test_ragged_rows(self) -> None:
        with pytest.raises(MalformedPointsError):
            load_points(io.StringIO('1 2\n3\n'))

    def test_wrong_column_count(self, tmp_path: Path) -> None:
        path = tmp_path / 'xyz.txt'
        path.write_text('1 2 3\n4 5 6\n', encoding='utf-8')
        with pytest.raises(ParserError) as exc_info:
            load_points(path)

        assert exc_info.value.source == str(path)
        assert '2 columns' in str(exc_info.value)


def test_to_vectors() -> None:
    vectors = to_vectors(np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert vectors == [Vector2D(1.0, 2.0), Vector2D(3.0, 4.0)]
    assert to_vectors(np.empty((0, 2))) == []
