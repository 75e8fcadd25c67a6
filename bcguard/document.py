"""Parsed API document models.

The loader converts JSON/YAML text into these immutable models. Each node
keeps the JSON pointer it was read from in ``pointer``; nodes built by hand
leave it as None and locations fall back to a manually built path.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class HttpMethod(str, Enum):
    """The eight operation verbs, in the order they are always walked."""

    GET = 'get'
    POST = 'post'
    PUT = 'put'
    DELETE = 'delete'
    PATCH = 'patch'
    OPTIONS = 'options'
    HEAD = 'head'
    TRACE = 'trace'


class Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    pointer: Optional[str] = None


class Reference(Node):
    """A ``$ref`` entry. Never resolved by the comparators."""

    ref: str


class Info(Node):
    title: str = ''
    version: str = ''
    description: Optional[str] = None


class Parameter(Node):
    name: str
    location: str  # query / header / path / cookie
    required: bool = False
    description: Optional[str] = None
    example: Any = None


class RequestBody(Node):
    required: bool = False
    description: Optional[str] = None
    content: Dict[str, Any] = {}


class Response(Node):
    description: Optional[str] = None


class Schema(Node):
    type: Optional[str] = None
    properties: Dict[str, Union['Schema', Reference]] = {}
    required: List[str] = []  # document order


class Operation(Node):
    summary: Optional[str] = None
    description: Optional[str] = None
    parameters: List[Union[Parameter, Reference]] = []
    responses: Dict[str, Union[Response, Reference]] = {}
    request_body: Optional[Union[RequestBody, Reference]] = None


class PathItem(Node):
    operations: Dict[HttpMethod, Operation] = {}

    def operation(self, method: HttpMethod) -> Optional[Operation]:
        return self.operations.get(method)


class Components(Node):
    schemas: Dict[str, Union[Schema, Reference]] = {}


class Document(Node):
    openapi: Optional[str] = None
    info: Info = Info()
    paths: Dict[str, PathItem] = {}
    components: Components = Components()
