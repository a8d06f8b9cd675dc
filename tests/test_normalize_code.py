import pytest

from course_planner.normalize import is_comment, normalize_code, split_record, strip_bom


@pytest.mark.parametrize("raw", [" csci 101 ", "CSCI101", "csci101", "CSCI-101", "\tcsci_101\n"])
def test_normalize_code_ignores_case_whitespace_and_punctuation(raw):
    assert normalize_code(raw) == "CSCI101"


def test_normalize_code_is_idempotent():
    once = normalize_code(" math 201a ")
    assert normalize_code(once) == once == "MATH201A"


def test_normalize_code_strips_bom():
    assert normalize_code("\ufeffcsci100") == "CSCI100"
    assert normalize_code("\xef\xbb\xbfcsci100") == "CSCI100"


def test_normalize_code_discards_exotic_spaces_and_non_ascii():
    assert normalize_code("CSCI\u00a0101") == "CSCI101"
    assert normalize_code("CSCI\u2003101\u00a0") == "CSCI101"
    assert normalize_code("CAF\u00c91") == "CAF1"


def test_normalize_code_can_be_empty():
    assert normalize_code("") == ""
    assert normalize_code(" -- ") == ""


def test_strip_bom_only_leading():
    assert strip_bom("A\ufeff") == "A\ufeff"


def test_split_record_trims_fields():
    assert split_record(" CSCI200 , Data Structures ,CSCI101,\r\n") == [
        "CSCI200",
        "Data Structures",
        "CSCI101",
        "",
    ]


def test_is_comment():
    assert is_comment("")
    assert is_comment("   ")
    assert is_comment("  # heading")
    assert is_comment("\ufeff# heading")
    assert not is_comment("CSCI100,Intro")
