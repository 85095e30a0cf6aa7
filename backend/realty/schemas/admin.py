from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecreateTablesRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    confirm_delete: bool = False
