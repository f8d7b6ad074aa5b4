from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ExtractExamResultsInput(BaseModel):
    """Raw text handed over by the calling application."""

    text: StrictStr = Field(
        ...,
        description="Free-form text that may contain laboratory exam results mixed with unrelated administrative content"
    )


class ExtractExamResultsOutput(BaseModel):
    """Abbreviated exam results as a single pipe-delimited string."""

    model_config = ConfigDict(populate_by_name=True)

    results_string: StrictStr = Field(
        ...,
        alias="resultsString",
        description="Zero or more 'abbreviation: value' pairs joined by ' | ', or an empty string when no valid result is identified"
    )
