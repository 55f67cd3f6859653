"""Wire models for the authorization engine HTTP API."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ...config.constants import Conditions
from ...features.tuples.entities import TupleCondition, TupleKey
from .protocols import ReadRequest, ReadResponse, StoredTuple


class ConditionModel(BaseModel):
    name: str
    context: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("context")
    @classmethod
    def validate_group_resources(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        groups = value.get(Conditions.GROUP_RESOURCES_KEY)
        if groups is not None and (
            not isinstance(groups, list) or not all(isinstance(g, str) for g in groups)
        ):
            raise ValueError(f"{Conditions.GROUP_RESOURCES_KEY} must be a list of strings")
        return value

    @property
    def group_resources(self) -> List[str]:
        return list(self.context.get(Conditions.GROUP_RESOURCES_KEY) or [])


class TupleKeyModel(BaseModel):
    user: str
    relation: str
    object: str
    condition: Optional[ConditionModel] = None

    def to_tuple_key(self) -> TupleKey:
        condition = None
        if self.condition is not None:
            condition = TupleCondition(self.condition.name, tuple(self.condition.group_resources))
        return TupleKey(
            user=self.user,
            relation=self.relation,
            object=self.object,
            condition=condition,
        )


class TupleModel(BaseModel):
    key: TupleKeyModel
    timestamp: Optional[datetime] = None


class ReadRequestTupleKeyModel(BaseModel):
    object: str
    relation: str


class ReadRequestBody(BaseModel):
    tuple_key: ReadRequestTupleKeyModel
    page_size: Optional[int] = None
    continuation_token: str = ""

    @classmethod
    def from_request(cls, request: ReadRequest) -> "ReadRequestBody":
        return cls(
            tuple_key=ReadRequestTupleKeyModel(object=request.object, relation=request.relation),
            page_size=request.page_size,
            continuation_token=request.continuation_token,
        )


class ReadResponseBody(BaseModel):
    tuples: List[TupleModel] = Field(default_factory=list)
    continuation_token: Optional[str] = ""

    def to_read_response(self) -> ReadResponse:
        return ReadResponse(
            tuples=[StoredTuple(key=t.key.to_tuple_key(), timestamp=t.timestamp) for t in self.tuples],
            continuation_token=self.continuation_token or "",
        )
