from pydantic import BaseModel, ConfigDict, Field


class Greeting(BaseModel):
    """Request body of ``POST /hello_json``."""

    model_config = ConfigDict(strict=True)

    name: str
    age: int = Field(ge=0, le=65535)
