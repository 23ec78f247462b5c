"""End-to-end tests for Projector.render and the module-level render()."""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from recordview import (
    Computed,
    ComputedFieldError,
    DepthLimitError,
    Literal,
    NestedRender,
    Projector,
    RenderConfig,
    RenderOptions,
    SchemaError,
    register_schema,
    render,
)
from recordview.config import reset_config
from recordview.schemas.registry import reset as reset_registry

from tests.helpers import INSERTED, UPDATED, Author, Review, User, make_user

# -------------------------------------------------------------------------
# Field selection
# -------------------------------------------------------------------------


class TestBaseFields:
    def test_all_fields_without_timestamps(self, projector, user):
        assert projector.render(User, user) == {
            "id": 1,
            "username": "ada",
            "email": "ada@example.com",
        }

    def test_output_follows_schema_order(self, projector):
        record = {"email": "e", "id": 7, "username": "u"}
        assert list(projector.render(User, record)) == ["id", "username", "email"]

    def test_extra_record_keys_ignored(self, projector, user):
        user["password_hash"] = "secret"
        assert "password_hash" not in projector.render(User, user)

    def test_only(self, projector, user):
        assert projector.render(User, user, only=["id"]) == {"id": 1}

    def test_only_single_name(self, projector, user):
        assert projector.render(User, user, only="username") == {"username": "ada"}

    def test_except(self, projector, user):
        assert projector.render(User, user, {"except": ["email"]}) == {
            "id": 1,
            "username": "ada",
        }

    def test_except_keyword_spellings(self, projector, user):
        expected = {"id": 1, "username": "ada"}
        assert projector.render(User, user, exclude=["email"]) == expected
        assert projector.render(User, user, except_="email") == expected

    def test_only_wins_over_except(self, projector, user):
        result = projector.render(User, user, {"only": ["id", "email"], "except": ["email"]})
        assert result == {"id": 1, "email": "ada@example.com"}

    def test_only_empty_keeps_added_fields(self, projector, user):
        result = projector.render(User, user, only=[], add={"kind": Literal("user")})
        assert result == {"kind": "user"}

    def test_only_names_not_in_schema_ignored(self, projector, user):
        assert projector.render(User, user, only=["id", "nope"]) == {"id": 1}

    def test_attribute_records(self, projector):
        record = SimpleNamespace(id=3, username="grace")
        assert projector.render(User, record) == {
            "id": 3,
            "username": "grace",
            "email": None,
        }

    def test_unhashable_self_describing_schema(self, projector):
        @dataclass
        class Tagged:
            prefix: str

            def schema_fields(self):
                return [f"{self.prefix}_label"]

        assert projector.render(Tagged("tag"), {"tag_label": "a"}) == {"tag_label": "a"}


class TestTimestamps:
    def test_dropped_by_default(self, projector, user):
        result = projector.render(User, user)
        assert "inserted_at" not in result
        assert "updated_at" not in result

    def test_included_on_request(self, projector, user):
        result = projector.render(User, user, include_timestamps=True)
        assert result["inserted_at"] == INSERTED
        assert result["updated_at"] == UPDATED

    def test_only_cannot_bring_timestamps_back(self, projector, user):
        assert projector.render(User, user, only=["id", "inserted_at"]) == {"id": 1}

    def test_only_with_include_timestamps(self, projector, user):
        result = projector.render(
            User, user, only=["inserted_at"], include_timestamps=True
        )
        assert result == {"inserted_at": INSERTED}

    def test_added_field_named_like_timestamp_survives(self, projector, user):
        result = projector.render(User, user, add={"updated_at": Literal("later")})
        assert result["updated_at"] == "later"

    def test_per_call_timestamp_fields(self, projector, user):
        result = projector.render(User, user, timestamp_fields=["email"])
        assert "email" not in result
        assert result["inserted_at"] == INSERTED

    def test_configured_timestamp_fields(self, registry, user):
        projector = Projector(registry, RenderConfig(timestamp_fields=("username",)))
        assert projector.render(User, user) == {
            "id": 1,
            "email": "ada@example.com",
            "inserted_at": INSERTED,
            "updated_at": UPDATED,
        }


# -------------------------------------------------------------------------
# Add directives
# -------------------------------------------------------------------------


class TestComputedFields:
    def test_computed_value_inlined(self, projector):
        result = projector.render(User, {"id": 1}, add={"avg": lambda r: 4.5})
        assert result == {"id": 1, "username": None, "email": None, "avg": 4.5}

    def test_computed_ignores_only_and_except(self, projector):
        add = {"avg": Computed(lambda r: 4.5)}
        assert projector.render(User, {"id": 1}, only=["id"], add=add) == {
            "id": 1,
            "avg": 4.5,
        }
        assert projector.render(User, {"id": 1}, {"except": ["avg"], "add": add})["avg"] == 4.5

    def test_computed_receives_record(self, projector, user):
        result = projector.render(User, user, only=[], add={"mail": lambda u: u["email"].upper()})
        assert result == {"mail": "ADA@EXAMPLE.COM"}

    def test_computed_overrides_base_field(self, projector, user):
        result = projector.render(User, user, add={"email": lambda u: "hidden"})
        assert result["email"] == "hidden"

    def test_add_keys_follow_base_fields_in_order(self, projector, user):
        result = projector.render(
            User, user, only=["id"], add={"b": Literal(2), "a": Literal(1)}
        )
        assert list(result) == ["id", "b", "a"]

    def test_add_as_pairs(self, projector, user):
        result = projector.render(User, user, only=[], add=[("x", 1), ("y", lambda u: u["id"])])
        assert result == {"x": 1, "y": 1}

    def test_raw_literal_map_inlined(self, projector, user):
        result = projector.render(User, user, only=[], add={"meta": {"version": 2}})
        assert result == {"meta": {"version": 2}}

    def test_computed_error_wrapped(self, projector, user):
        def boom(record):
            raise KeyError("missing")

        with pytest.raises(ComputedFieldError) as exc_info:
            projector.render(User, user, add={"broken": boom})
        assert exc_info.value.key == "broken"
        assert isinstance(exc_info.value.cause, KeyError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_options_instance_with_plain_function(self, projector, user):
        opts = RenderOptions(only=(), add={"x": lambda r: r["id"] * 10})
        assert projector.render(User, user, opts) == {"x": 10}

    def test_computed_evaluated_once_per_record(self, projector, user):
        calls = []

        def track(record):
            calls.append(record["id"])
            return True

        projector.render(User, user, add={"seen": track})
        assert calls == [1]


class TestNestedRender:
    def test_nested_collection(self, projector):
        record = {"id": 1, "reviews": [{"comment": "a"}, {"comment": "b"}]}
        add = {"reviewed": NestedRender(Review, "reviews", {"many": True, "only": ["comment"]})}
        result = projector.render(User, record, only=["id"], add=add)
        assert result == {"id": 1, "reviewed": [{"comment": "a"}, {"comment": "b"}]}

    def test_nested_single_without_options(self, projector):
        record = {"id": 9, "author": {"id": 2, "name": "Ada"}}
        result = projector.render(Review, record, only=["id"], add={"writer": NestedRender(Author, "author")})
        assert result == {"id": 9, "writer": {"id": 2, "name": "Ada"}}

    def test_nested_missing_source_is_null_safe(self, projector):
        result = projector.render(Review, {"id": 9}, only=[], add={"writer": NestedRender(Author, "author")})
        assert result == {"writer": {"id": None, "name": None}}

    def test_nested_missing_collection_renders_empty_list(self, projector):
        add = {"reviewed": NestedRender(Review, "reviews", {"many": True})}
        assert projector.render(User, {"id": 1}, only=[], add=add) == {"reviewed": []}

    def test_two_levels(self, projector):
        record = {
            "id": 1,
            "reviews": [
                {"id": 10, "comment": "good", "author": {"id": 2, "name": "Bo"}},
            ],
        }
        inner = RenderOptions(
            many=True,
            only=("comment",),
            add={"by": NestedRender(Author, "author", {"only": "name"})},
        )
        result = projector.render(User, record, only=["id"], add={"reviews": NestedRender(Review, "reviews", inner)})
        assert result == {"id": 1, "reviews": [{"comment": "good", "by": {"name": "Bo"}}]}

    def test_nested_does_not_mutate_outer_record(self, projector):
        record = {"id": 1, "reviews": [{"comment": "a", "rating": 5}]}
        snapshot = {"id": 1, "reviews": [{"comment": "a", "rating": 5}]}
        projector.render(User, record, add={"r": NestedRender(Review, "reviews", {"many": True, "only": ["comment"]})})
        assert record == snapshot

    def test_nested_error_propagates_unwrapped(self, projector):
        def boom(review):
            raise ValueError("bad review")

        add = {"reviews": NestedRender(Review, "reviews", {"many": True, "add": {"score": boom}})}
        with pytest.raises(ComputedFieldError) as exc_info:
            projector.render(User, {"reviews": [{"id": 1}]}, add=add)
        assert exc_info.value.key == "score"

    def test_unknown_nested_schema(self, projector):
        with pytest.raises(SchemaError):
            projector.render(User, {"x": {}}, add={"x": NestedRender(object(), "x")})


# -------------------------------------------------------------------------
# Collections and null safety
# -------------------------------------------------------------------------


class TestMany:
    def test_order_preserved(self, projector):
        result = projector.render(User, [{"id": 1}, {"id": 2}], many=True, only=["id"])
        assert result == [{"id": 1}, {"id": 2}]

    def test_computed_per_element(self, projector):
        seen = []

        def double(record):
            seen.append(record["id"])
            return record["id"] * 2

        result = projector.render(User, [{"id": 1}, {"id": 2}], many=True, only=["id"], add={"twice": double})
        assert result == [{"id": 1, "twice": 2}, {"id": 2, "twice": 4}]
        assert seen == [1, 2]

    def test_empty_and_null_elements_kept(self, projector):
        result = projector.render(User, [None, {"id": 5}], many=True, only=["id"])
        assert result == [{"id": None}, {"id": 5}]

    def test_empty_collection(self, projector):
        assert projector.render(User, [], many=True) == []

    def test_generator_input(self, projector):
        records = (make_user(id=i) for i in range(3))
        assert [r["id"] for r in projector.render(User, records, many=True)] == [0, 1, 2]


class TestNullRecord:
    def test_every_field_null(self, projector):
        assert projector.render(User, None, include_timestamps=True) == {
            "id": None,
            "username": None,
            "email": None,
            "inserted_at": None,
            "updated_at": None,
        }

    def test_null_record_keeps_add(self, projector):
        result = projector.render(User, None, only=["id"], add={"kind": "user"})
        assert result == {"id": None, "kind": "user"}


# -------------------------------------------------------------------------
# Schemas, depth guard, defaults
# -------------------------------------------------------------------------


class TestSchemaErrors:
    def test_unregistered_schema(self, projector):
        class Unknown:
            pass

        with pytest.raises(SchemaError) as exc_info:
            projector.render(Unknown, {})
        assert exc_info.value.schema is Unknown

    def test_descriptor_schema(self, projector):
        class Tag:
            @classmethod
            def schema_fields(cls):
                return ("label",)

        assert projector.render(Tag, {"label": "x", "other": 1}) == {"label": "x"}


class TestDepthGuard:
    def test_unguarded_by_default(self, projector):
        assert projector.config.max_depth is None

    def test_limit_exceeded(self, registry):
        projector = Projector(registry, RenderConfig(max_depth=1))
        record = {"reviews": [{"author": {"name": "x"}}]}
        inner = {"many": True, "add": {"by": NestedRender(Author, "author")}}
        with pytest.raises(DepthLimitError) as exc_info:
            projector.render(User, record, add={"reviews": NestedRender(Review, "reviews", inner)})
        assert exc_info.value.depth == 2
        assert exc_info.value.max_depth == 1

    def test_within_limit(self, registry):
        projector = Projector(registry, RenderConfig(max_depth=1))
        record = {"author": {"id": 1, "name": "x"}}
        result = projector.render(Review, record, only=[], add={"by": NestedRender(Author, "author")})
        assert result == {"by": {"id": 1, "name": "x"}}

    def test_self_referencing_schema_within_limit(self, registry):
        registry.register("node", ["name"])
        projector = Projector(registry, RenderConfig(max_depth=3))
        leaf = {"name": "c"}
        tree = {"name": "a", "child": {"name": "b", "child": leaf}}
        options = {"add": {"child": NestedRender("node", "child")}}
        result = projector.render("node", tree, add={"child": NestedRender("node", "child", options)})
        assert result == {"name": "a", "child": {"name": "b", "child": {"name": "c"}}}


class TestModuleLevelRender:
    @pytest.fixture(autouse=True)
    def _isolate(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RECORDVIEW_CONFIG", str(tmp_path / "missing.yaml"))
        monkeypatch.delenv("RECORDVIEW_TIMESTAMP_FIELDS", raising=False)
        monkeypatch.delenv("RECORDVIEW_MAX_DEPTH", raising=False)
        reset_registry()
        reset_config()
        yield
        reset_registry()
        reset_config()

    def test_uses_default_registry(self, user):
        register_schema(User, ["id", "username", "inserted_at"])
        assert render(User, user) == {"id": 1, "username": "ada"}

    def test_uses_env_config(self, monkeypatch, user):
        monkeypatch.setenv("RECORDVIEW_TIMESTAMP_FIELDS", "username")
        register_schema(User, ["id", "username", "inserted_at"])
        assert render(User, user) == {"id": 1, "inserted_at": INSERTED}
