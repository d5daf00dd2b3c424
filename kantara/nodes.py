"""Node definitions for the parsed Kantara tree."""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Literal, Mapping, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from kantara.values import Scalar

NodeKind = Literal["root", "section", "function", "property", "import"]

ROOT_TYPE = "KantaraObject"
SECTION_TYPE = "KantaraSection"
FUNCTION_TYPE = "KantaraFunction"
IMPORT_TYPE = "KantaraImport"


def _plain_dict(value: Mapping[str, Scalar]) -> dict[str, Scalar]:
    return dict(value)


# read-only after validation, dumped as a plain dict
Properties = Annotated[
    dict[str, Scalar],
    AfterValidator(MappingProxyType),
    PlainSerializer(_plain_dict, return_type=dict[str, Scalar]),
]


class BaseNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class RootNode(BaseNode):
    name: str = "root"
    kind: Literal["root"] = "root"
    type: str = ROOT_TYPE
    children: tuple["Node", ...] = ()


class SectionNode(BaseNode):
    kind: Literal["section"] = "section"
    type: str = SECTION_TYPE
    properties: Properties = Field(default_factory=dict, validate_default=True)
    children: tuple["Node", ...] = ()


class FunctionNode(BaseNode):
    """A named block whose body is kept as dedented, unparsed text."""

    kind: Literal["function"] = "function"
    type: str = FUNCTION_TYPE
    arguments: tuple[str, ...] = ()
    body: str = ""


class PropertyNode(BaseNode):
    kind: Literal["property"] = "property"
    type: Literal["string", "number", "boolean"]
    value: Scalar


class ImportNode(BaseNode):
    """An import that was not expanded (deferred, or imports disabled)."""

    kind: Literal["import"] = "import"
    type: str = IMPORT_TYPE
    value: str


Node = Annotated[
    Union[RootNode, SectionNode, FunctionNode, PropertyNode, ImportNode],
    Field(discriminator="kind"),
]
ContainerNode = RootNode | SectionNode

RootNode.model_rebuild()
SectionNode.model_rebuild()


def node_children(node: BaseNode) -> tuple[Node, ...]:
    """Parsed children of a root or section node; leaves and functions have none."""
    if isinstance(node, (RootNode, SectionNode)):
        return node.children
    return ()


def function_body(node: BaseNode) -> str | None:
    if isinstance(node, FunctionNode):
        return node.body
    return None


__all__ = [
    "NodeKind",
    "BaseNode",
    "RootNode",
    "SectionNode",
    "FunctionNode",
    "PropertyNode",
    "ImportNode",
    "Node",
    "ContainerNode",
    "ROOT_TYPE",
    "SECTION_TYPE",
    "FUNCTION_TYPE",
    "IMPORT_TYPE",
    "node_children",
    "function_body",
]
