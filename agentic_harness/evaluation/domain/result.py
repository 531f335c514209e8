"""EvaluationResult — structured output from a single judge invocation."""

from pydantic import BaseModel, ConfigDict, Field


class EvaluationResult(BaseModel):
    """The evaluation response indicating the result of the evaluation.

    rating: 1 (task not done) to 4 (task fully done).
    feedback: incremental guidance on what to fix, not a request to start over.
    """

    model_config = ConfigDict(frozen=True)

    rating: int = Field(ge=1, le=4)
    evaluation: str
    feedback: str
