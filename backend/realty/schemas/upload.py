from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UploadResponse(BaseModel):
    url: str
    key: str


class PresignedUploadResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    upload_url: str
    file_url: str
