import pytest

from risk_categories.api.utils import generate_id, is_valid_id


@pytest.mark.parametrize(
    "value",
    ["5f4e994f025923001fdd6bc8", "5F4E994F025923001FDD6BC8", "000000000000000000000000"],
)
def test_is_valid_id_accepts_24_hex_characters(value):
    assert is_valid_id(value)


@pytest.mark.parametrize(
    "value",
    [
        "100",
        "",
        "5f4e994f025923001fdd6bc",
        "5f4e994f025923001fdd6bc8a",
        "5f4e994f025923001fdd6bcz",
        " 5f4e994f025923001fdd6bc8",
        "5f4e994f025923001fdd6bc8\n",
        100,
        None,
        ["5f4e994f025923001fdd6bc8"],
    ],
)
def test_is_valid_id_rejects_everything_else(value):
    assert not is_valid_id(value)


def test_generate_id_is_valid_and_unique():
    ids = {generate_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(is_valid_id(id) for id in ids)
    assert all(id == id.lower() for id in ids)
