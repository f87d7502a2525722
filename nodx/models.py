"""Pydantic models for declarative document files."""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TextSpec(BaseModel):
    """Text content, escaped on render."""

    type: Literal["text"] = "text"
    text: str = Field("", description="Plain text; HTML-significant characters are escaped.")

    model_config = ConfigDict(coerce_numbers_to_str=True)


class RawSpec(BaseModel):
    """Trusted markup inserted without escaping."""

    type: Literal["raw"] = "raw"
    html: str = Field("", description="Trusted HTML fragment.")


class AttrSpec(BaseModel):
    """A single attribute on the enclosing element."""

    type: Literal["attr"] = "attr"
    name: str = Field(..., description="Attribute name; an empty name renders nothing.")
    value: Optional[str] = Field("", description="Attribute value, escaped on render.")

    model_config = ConfigDict(coerce_numbers_to_str=True)


class ClassesSpec(BaseModel):
    """A class attribute composed from names and name -> bool toggles."""

    type: Literal["classes"] = "classes"
    classes: List[Union[str, Dict[str, Any]]] = Field(
        default_factory=list,
        description="Class names, or mappings whose true-valued keys are included.",
    )


class ElementSpec(BaseModel):
    """An element with ordered attribute and content children."""

    type: Literal["element"] = "element"
    tag: str = Field(..., description="Tag name; an empty tag groups children without markup.")
    void: Optional[bool] = Field(
        None,
        description="Render without content or closing tag. Defaults to the HTML void-element table.",
    )
    children: List["NodeSpec"] = Field(
        default_factory=list, description="Attributes, text and nested elements in order."
    )


NodeSpec = Annotated[
    Union[TextSpec, RawSpec, AttrSpec, ClassesSpec, ElementSpec],
    Field(discriminator="type"),
]

ElementSpec.model_rebuild()


class Document(BaseModel):
    """Schema for document YAML/JSON files."""

    title: str = Field("", description="Page title passed to the layout.")
    lang: str = Field("en", description="Value of the layout's lang attribute.")
    layout: Optional[str] = Field(
        None,
        description="Jinja2 layout file name; omit to render the body as a bare fragment.",
    )
    body: List[NodeSpec] = Field(
        default_factory=list, description="Top-level nodes rendered in order."
    )


__all__ = [
    "AttrSpec",
    "ClassesSpec",
    "Document",
    "ElementSpec",
    "NodeSpec",
    "RawSpec",
    "TextSpec",
]
