"""recordview: declarative projection of records into serializable dicts.

    from recordview import NestedRender, register_schema, render

    register_schema(User, ["id", "username", "email", "inserted_at", "updated_at"])
    register_schema(Review, ["id", "comment", "rating"])

    render(User, user, only=["id", "username"], add={
        "reviews": NestedRender(Review, "reviews", {"many": True, "only": ["comment"]}),
        "initials": lambda u: u["username"][:2],
    })
"""

from recordview.config import RenderConfig, get_config, reset_config
from recordview.errors import (
    ComputedFieldError,
    DepthLimitError,
    OptionsError,
    RecordViewError,
    SchemaError,
)
from recordview.render import (
    AddDirective,
    Computed,
    Literal,
    NestedRender,
    Projector,
    RenderOptions,
    render,
    wrap,
    wrap_paginated,
)
from recordview.schemas import (
    FieldProvider,
    SchemaDescriptor,
    SchemaRegistry,
    fields_for,
    register_schema,
    schema,
)
from recordview.targets import JsonTarget, ProjectionTarget, YamlTarget

__all__ = [
    "AddDirective",
    "Computed",
    "ComputedFieldError",
    "DepthLimitError",
    "FieldProvider",
    "JsonTarget",
    "Literal",
    "NestedRender",
    "OptionsError",
    "ProjectionTarget",
    "Projector",
    "RecordViewError",
    "RenderConfig",
    "RenderOptions",
    "SchemaDescriptor",
    "SchemaError",
    "SchemaRegistry",
    "YamlTarget",
    "fields_for",
    "get_config",
    "register_schema",
    "render",
    "reset_config",
    "schema",
    "wrap",
    "wrap_paginated",
]
