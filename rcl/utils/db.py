from typing import TypeVar

from databases import Database
from pydantic import BaseModel
from sqlalchemy.sql import Select

BaseModelT = TypeVar("BaseModelT", bound=BaseModel)


async def fetch_one_parsed(
    database: Database, model: type[BaseModelT], query: Select
) -> BaseModelT | None:
    record = await database.fetch_one(query)
    return model.model_validate(dict(record._mapping)) if record is not None else None


async def fetch_all_parsed(
    database: Database, model: type[BaseModelT], query: Select
) -> list[BaseModelT]:
    records = await database.fetch_all(query)
    return [model.model_validate(dict(record._mapping)) for record in records]
