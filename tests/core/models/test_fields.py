"""Tests for contact field value types."""

import pytest
from pydantic import ValidationError

from fosterbook.core.models import (Address, AnimalType, Availability, Email,
                                    Name, Phone, Tag)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("peter jack", True),
        ("12345", True),
        ("peter the 2nd", True),
        ("Capital Tan", True),
        ("David Roger Jackson Ray Jr 2nd", True),
        ("", False),
        (" ", False),
        ("^", False),
        ("peter*", False),
    ],
)
def test_name_is_valid(value, expected):
    assert Name.is_valid(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("911", True),
        ("93121534", True),
        ("124293842033123", True),
        ("", False),
        ("91", False),
        ("phone", False),
        ("9011p041", False),
        ("9312 1534", False),
    ],
)
def test_phone_is_valid(value, expected):
    assert Phone.is_valid(value) is expected


@pytest.mark.parametrize(
    "value",
    [
        "j@e.com",
        "PeterJack_1190@example.com",
        "a@bc",
        "test@localhost",
        "123@145",
        "a1+be.d@example1.com",
        "peter_jack@very-very-very-long-example.com",
        "if.you.dream.it_you.can.do.it@example.com",
        "e1234567@u.nus.edu",
    ],
)
def test_email_valid(value):
    assert Email.is_valid(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        " ",
        "@example.com",
        "peterjack@",
        "peterjackexample.com",
        "peterjack@@example.com",
        "peter jack@example.com",
        "peterjack@exam ple.com",
        "-peterjack@example.com",
        "peterjack-@example.com",
        "peter..jack@example.com",
        "peterjack@example.c",
        "peterjack@-example.com",
        "peterjack@example.com-",
        "peterjack@example_com",
        "peterjack@example.com.",
    ],
)
def test_email_invalid(value):
    assert not Email.is_valid(value)


def test_address_is_valid():
    assert Address.is_valid("Blk 456, Den Road, #01-355")
    assert Address.is_valid("-")
    assert not Address.is_valid("")
    assert not Address.is_valid(" ")


def test_tag_is_valid():
    assert Tag.is_valid("friend")
    assert Tag.is_valid("owesMoney2")
    assert not Tag.is_valid("best friend")
    assert not Tag.is_valid("#friend")


def test_field_value_rejects_invalid_text():
    """Constructing a field with malformed text raises the constraint message."""
    with pytest.raises(ValidationError, match="at least 3 digits"):
        Phone(value="12")

    with pytest.raises(ValidationError, match="alphanumeric"):
        Tag(value="not a tag")


def test_field_values_are_hashable_and_compare_by_value():
    assert Tag(value="friend") == Tag(value="friend")
    assert len({Tag(value="friend"), Tag(value="friend")}) == 1
    assert str(Tag(value="friend")) == "[friend]"
    assert str(Name(value="Amy Bee")) == "Amy Bee"


def test_field_values_are_frozen():
    name = Name(value="Amy Bee")
    with pytest.raises(ValidationError):
        name.value = "Bob"


class TestAvailability:
    def test_from_text_is_case_insensitive(self):
        assert Availability.from_text("available") == Availability.AVAILABLE
        assert Availability.from_text("NOTAVAILABLE") == Availability.NOT_AVAILABLE
        assert Availability.from_text("Nil") == Availability.NIL

    def test_unknown_text(self):
        assert Availability.from_text("maybe") is None
        assert not Availability.is_valid("")

    def test_str(self):
        assert str(Availability.NOT_AVAILABLE) == "NotAvailable"


class TestAnimalType:
    def test_valid_with_availability(self):
        assert AnimalType.is_valid("Dog", "Available")
        assert AnimalType.is_valid("cat", "NotAvailable")

    def test_rejects_malformed_type(self):
        violation = AnimalType.constraint_violation("Golden Retriever", "Available")
        assert violation == AnimalType.MESSAGE_CONSTRAINTS
        assert not AnimalType.is_valid("D0g", "Available")

    def test_accepts_nil_availability(self):
        assert AnimalType.constraint_violation("Dog", "nil") is None
        assert AnimalType.is_valid("Dog", "NIL")

    def test_empty_type_with_nil_availability(self):
        assert AnimalType.constraint_violation("", "nil") == (
            AnimalType.MESSAGE_CONSTRAINTS
        )
