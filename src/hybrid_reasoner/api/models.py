from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from hybrid_reasoner.api import config


class ReasonRequest(BaseModel):
    query: str = Field(max_length=config.MAX_QUERY_LENGTH)
    # Only automatic planning exists; the field mirrors the extension message format
    mode: Literal["auto"] = "auto"
    k: Optional[int] = Field(default=None, ge=1, le=config.MAX_TOP_K)

    def normalized_query(self) -> str:
        return self.query.strip()


class BatchReasonRequest(BaseModel):
    queries: List[str]
    k: Optional[int] = Field(default=None, ge=1, le=config.MAX_TOP_K)
