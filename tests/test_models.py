"""
Model and schema tests: tag codec, account numbers and request validation.
"""

import pytest
from pydantic import ValidationError

from bank_ledger.models import generate_account_number, join_tags, split_tags
from bank_ledger.schemas import CreateAccountRequest, TransactionDetailsRequest


def test_join_tags():
    assert join_tags(["a", "b", "c"]) == "a,b,c"
    assert join_tags([]) == ""
    assert join_tags(None) == ""


def test_split_tags_strips_whitespace():
    assert split_tags("food, weekly ,shop") == ["food", "weekly", "shop"]


def test_split_tags_empty_column():
    assert split_tags("") == []
    assert split_tags(None) == []


def test_tags_round_trip_keeps_order():
    tags = ["zeta", "alpha", "mid"]
    assert split_tags(join_tags(tags)) == tags


def test_generate_account_number_range():
    for _ in range(200):
        assert 0 <= generate_account_number() < 1_000_000


@pytest.mark.parametrize("first_name,last_name,valid", [
    ("Ada", "Lovelace", True),
    ("Ada", "", True),
    ("", "Lovelace", True),
    ("", "", False),
    ("   ", "\t", False),
])
def test_create_account_request_is_valid(first_name, last_name, valid):
    request = CreateAccountRequest(first_name=first_name, last_name=last_name)
    assert request.is_valid() is valid


def test_details_request_strips_tags():
    request = TransactionDetailsRequest(tags=[" rent ", "home"])
    assert request.tags == ["rent", "home"]


@pytest.mark.parametrize("tags", [["ok", ""], ["a,b"], ["  "]])
def test_details_request_rejects_bad_tags(tags):
    with pytest.raises(ValidationError):
        TransactionDetailsRequest(tags=tags)


def test_details_request_defaults_to_none():
    request = TransactionDetailsRequest()
    assert request.description is None
    assert request.tags is None
