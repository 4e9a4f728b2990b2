"""Structured-output schema for the relevancy model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RelevancyJudgment(BaseModel):
    """The relevancy of the content to LangChain's products."""

    # Tool/function name the model sees and traces record.
    model_config = ConfigDict(title="relevancy")

    reasoning: str = Field(
        description="Reasoning for why the webpage is or isn't relevant to LangChain's products."
    )
    relevant: bool = Field(
        description="Whether or not the webpage is relevant to LangChain's products."
    )
