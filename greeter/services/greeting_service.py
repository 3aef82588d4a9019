from typing import Optional

from greeter.models.greeting import Greeting

DEFAULT_NAME = "world"


def get_greeting(name: Optional[str] = None) -> str:
    """Business logic for generating a greeting."""
    if name is None:
        name = DEFAULT_NAME
    return f"Hello, {name}!\n"


def get_json_greeting(greeting: Greeting) -> str:
    return f"Hello, {greeting.name}!, you appear to be {greeting.age}\n"
