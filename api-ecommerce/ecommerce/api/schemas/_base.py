# ecommerce/api/schemas/_base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # accepts both confirmPassword and confirm_password; serializes camelCase
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
