"""Unit tests for appcore.model: App accessors, metadata views and
parameter flattening.
"""
from __future__ import annotations

import pytest

from appcore.model import App, AppMetadata, Attachment, Maintainer, flatten_parameters


class TestApp:
    def test_new_app_is_bare(self) -> None:
        app = App("my-app")
        assert app.path == "my-app"
        assert app.cleanup is None
        assert app.metadata_raw is None
        assert app.metadata is None
        assert app.parameters == {}

    def test_accessors_return_copies(self) -> None:
        app = App("my-app")
        app._composes.append(b"x")
        composes = app.composes
        assert composes == (b"x",)
        assert isinstance(composes, tuple)

    def test_parameters_cannot_be_mutated_through_accessor(self) -> None:
        app = App("my-app")
        app._parameters = {"web": {"port": 80, "hosts": ["a"]}}
        parameters = app.parameters
        parameters["web"]["port"] = 9999
        parameters["web"]["hosts"].append("b")
        parameters["extra"] = True
        app.flat_parameters()["web.hosts"].append("c")
        assert app.parameters == {"web": {"port": 80, "hosts": ["a"]}}

    def test_close_without_cleanup(self) -> None:
        App("my-app").close()

    def test_repr(self) -> None:
        assert "my-app" in repr(App("my-app"))


class TestAttachment:
    def test_frozen(self) -> None:
        attachment = Attachment(path="a.cfg", size=1)
        with pytest.raises(AttributeError):
            attachment.size = 2  # type: ignore[misc]


class TestAppMetadata:
    def test_from_document(self) -> None:
        metadata = AppMetadata.from_document({
            "name": "app",
            "version": "0.1.0",
            "description": "demo",
            "maintainers": [{"name": "dev", "email": "dev@example.com"}, {"name": "ops"}],
        })
        assert metadata.name == "app"
        assert metadata.description == "demo"
        assert metadata.maintainers == (
            Maintainer("dev", "dev@example.com"),
            Maintainer("ops"),
        )

    def test_defaults(self) -> None:
        metadata = AppMetadata.from_document({"name": "app", "version": "1"})
        assert metadata.description == ""
        assert metadata.maintainers == ()

    def test_maintainer_str(self) -> None:
        assert str(Maintainer("dev", "dev@example.com")) == "dev <dev@example.com>"
        assert str(Maintainer("ops")) == "ops"


class TestFlattenParameters:
    def test_nested(self) -> None:
        assert flatten_parameters({"a": {"b": {"c": 1}}, "d": "x"}) == {"a.b.c": 1, "d": "x"}

    def test_lists_are_leaves(self) -> None:
        assert flatten_parameters({"l": [{"a": 1}]}) == {"l": [{"a": 1}]}

    def test_empty_mapping_disappears(self) -> None:
        assert flatten_parameters({"a": {}, "b": 1}) == {"b": 1}
