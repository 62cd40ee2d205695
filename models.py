from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class GenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email_content: str = Field(alias="emailContent")
    tone: Optional[str] = None
