from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator


class Item(BaseModel):
    id: int
    name: str
    price: int


class ItemCreate(BaseModel):
    """Body of POST /api/items, decoded with typed-decoder rules."""

    model_config = ConfigDict(strict=True, extra="ignore")

    id: int = 0
    name: str = ""
    price: int = 0

    @field_validator("id", "name", "price", mode="before")
    @classmethod
    def null_is_zero_value(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


def describe_decode_error(err: ValidationError) -> str:
    lines = []
    for error in err.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        lines.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "\n".join(lines)
