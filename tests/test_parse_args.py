import pytest

from course_planner.main import parse_args


def test_parse_args_valid_input(tmp_path):
    catalog_file = tmp_path / "courses.csv"
    catalog_file.write_text("A,Alpha\n")

    assert parse_args([str(catalog_file)]) == str(catalog_file)


def test_parse_args_no_arguments():
    assert parse_args([]) is None


def test_parse_args_too_many_arguments():
    with pytest.raises(ValueError, match="Usage:"):
        parse_args(["a.csv", "b.csv"])


def test_parse_args_file_not_found():
    with pytest.raises(ValueError, match="does not exist"):
        parse_args(["/nonexistent/courses.csv"])


def test_parse_args_not_a_file(tmp_path):
    with pytest.raises(ValueError, match="must be a file"):
        parse_args([str(tmp_path)])
