import logging

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from greeter.models.greeting import Greeting
from greeter.services.greeting_service import get_greeting, get_json_greeting

router = APIRouter(default_response_class=PlainTextResponse)
_LOGGER = logging.getLogger(__name__)


@router.get("/hello")
async def greet_default():
    _LOGGER.debug("Greeting with default name")
    return get_greeting()


@router.get("/hello/{name}")
async def greet(name: str):
    _LOGGER.debug("Greeting %s", name)
    return get_greeting(name)


async def parse_greeting(request: Request) -> Greeting:
    """Read the body as JSON whatever its Content-Type says."""
    body = await request.body()
    try:
        return Greeting.model_validate_json(body)
    except ValidationError as e:
        errors = [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)]
        raise RequestValidationError(errors, body=body) from e


@router.post("/hello_json")
async def greet_json(request: Request):
    greeting = await parse_greeting(request)
    _LOGGER.debug("Greeting %s, age %d", greeting.name, greeting.age)
    return get_json_greeting(greeting)
