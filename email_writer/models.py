from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # `emailContent` is the field name older clients still send.
    content: str | None = Field(
        default=None,
        validation_alias=AliasChoices("content", "emailContent"),
    )
    tone: str | None = None
