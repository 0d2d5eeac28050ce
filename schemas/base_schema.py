from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base for the API DTOs; fields are exposed under their PascalCase aliases."""
    model_config = ConfigDict(from_attributes=True, arbitrary_types_allowed=True, populate_by_name=True)
