import pytest

from cafego.app.common.errors import StoreError
from cafego.app.common.validation import last_path_segment, parse_int_id


@pytest.mark.parametrize("raw,expected", [("1", 1), ("+7", 7), ("-3", -3), ("007", 7)])
def test_parse_int_id_accepts_plain_integers(raw, expected):
    assert parse_int_id(raw) == expected


@pytest.mark.parametrize("raw", ["", " 1", "1_0", "abc", "1.0", "٣"])
def test_parse_int_id_rejects_everything_else(raw):
    with pytest.raises(StoreError) as exc:
        parse_int_id(raw, field="product_id")
    assert exc.value.status_code == 400
    assert exc.value.details == {"product_id": raw}


def test_last_path_segment():
    assert last_path_segment("a/b/2") == "2"
    assert last_path_segment("2") == "2"
    assert last_path_segment("1/") == ""


def test_parse_int_id_rejects_trailing_newline():
    with pytest.raises(StoreError) as exc:
        parse_int_id("1\n")
    assert exc.value.status_code == 400


def test_parse_int_id_rejects_oversized_digit_strings():
    with pytest.raises(StoreError) as exc:
        parse_int_id("9" * 5000, field="product_id")
    assert exc.value.status_code == 400
    assert exc.value.code == "validation_error"
