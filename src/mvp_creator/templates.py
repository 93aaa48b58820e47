"""Structured model of the generated Java sources and its formatter."""

from dataclasses import dataclass, field
from typing import Optional, Union

INDENT = "    "


@dataclass
class JavaMethod:
    """A method declaration, abstract when body is None."""

    signature: str
    modifiers: str = ""
    body: Optional[list[str]] = None
    override: bool = False


@dataclass
class JavaType:
    """A class or interface, possibly nested inside another type."""

    name: str
    kind: str = "class"
    modifiers: str = "public"
    type_params: str = ""
    extends: list[str] = field(default_factory=list)
    implements: list[str] = field(default_factory=list)
    fields: list[str] = field(default_factory=list)
    members: list[Union[JavaMethod, "JavaType"]] = field(default_factory=list)

    def declaration(self) -> str:
        parts = [self.modifiers, self.kind, self.name + self.type_params]
        if self.extends:
            parts.append("extends " + ", ".join(self.extends))
        if self.implements:
            parts.append("implements " + ", ".join(self.implements))
        return " ".join(part for part in parts if part)


@dataclass
class JavaSource:
    """A complete compilation unit."""

    package: str
    type: JavaType
    imports: list[str] = field(default_factory=list)
    header: list[str] = field(default_factory=list)


def _render_method(method: JavaMethod, depth: int) -> list[str]:
    pad = INDENT * depth
    lines = []
    if method.override:
        lines.append(f"{pad}@Override")
    declaration = " ".join(part for part in (method.modifiers, method.signature) if part)
    if method.body is None:
        lines.append(f"{pad}{declaration};")
        return lines

    lines.append(f"{pad}{declaration} {{")
    lines.extend(f"{pad}{INDENT}{line}" if line else "" for line in method.body)
    lines.append(f"{pad}}}")
    return lines


def _render_type(java_type: JavaType, depth: int) -> list[str]:
    pad = INDENT * depth
    lines = [f"{pad}{java_type.declaration()} {{"]

    blocks: list[list[str]] = []
    if java_type.fields:
        blocks.append([f"{pad}{INDENT}{line}" for line in java_type.fields])
    for member in java_type.members:
        if isinstance(member, JavaType):
            blocks.append(_render_type(member, depth + 1))
        else:
            blocks.append(_render_method(member, depth + 1))

    for index, block in enumerate(blocks):
        if index:
            lines.append("")
        lines.extend(block)

    lines.append(f"{pad}}}")
    return lines


def render_source(source: JavaSource) -> str:
    """Format a JavaSource as file content."""
    lines = [f"package {source.package};", ""]

    if source.imports:
        lines.extend(f"import {name};" for name in source.imports)
        lines.append("")

    if source.header:
        lines.append("/**")
        lines.extend(f" * {line}" for line in source.header)
        lines.append(" */")

    lines.extend(_render_type(source.type, 0))
    return "\n".join(lines) + "\n"
