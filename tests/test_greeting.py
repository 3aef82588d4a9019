import pytest
from pydantic import ValidationError

from greeter.models.greeting import Greeting
from greeter.services.greeting_service import get_greeting, get_json_greeting

# --- Greeting model ---

def test_greeting_valid():
    greeting = Greeting(name="Barney", age=79)
    assert greeting.name == "Barney"
    assert greeting.age == 79


def test_greeting_missing_field():
    with pytest.raises(ValidationError, match="Field required"):
        Greeting(name="Barney")


def test_greeting_rejects_string_age():
    with pytest.raises(ValidationError):
        Greeting(name="Barney", age="79")


@pytest.mark.parametrize("age", [-1, 65536])
def test_greeting_age_out_of_u16_range(age):
    with pytest.raises(ValidationError):
        Greeting(name="Barney", age=age)


def test_greeting_from_json():
    greeting = Greeting.model_validate_json('{"name": "Wilma", "age": 42}')
    assert greeting == Greeting(name="Wilma", age=42)


# --- greeting_service ---

def test_get_greeting_defaults_to_world():
    assert get_greeting() == "Hello, world!\n"
    assert get_greeting(None) == "Hello, world!\n"


def test_get_greeting_with_name():
    assert get_greeting("Fred") == "Hello, Fred!\n"


def test_get_greeting_keeps_empty_name():
    assert get_greeting("") == "Hello, !\n"


def test_get_json_greeting():
    assert get_json_greeting(Greeting(name="Barney", age=79)) == (
        "Hello, Barney!, you appear to be 79\n"
    )
