"""Tests for roost.routing.dispatcher — resolution, invocation, auto-render."""

import copy
import io
from pathlib import Path

import pytest

from roost.context import get_request
from roost.errors import (
    ConfigurationError,
    HandlerMismatch,
    HandlerNotFound,
    OperationNotFound,
)
from roost.handlers.controller import Controller
from roost.handlers.registry import ControllerRegistry, DirectoryRegistry
from roost.http.request import Request
from roost.routing.dispatcher import Dispatcher, get_dispatcher
from roost.routing.parse import RequestContext
from roost.templating.renderer import Renderer
from roost.testing import RenderSpy

seen: list[RequestContext] = []


class IndexController(Controller):
    def index_action(self) -> None:
        self.view.set("greeting", "hello")

    def about_action(self) -> None:
        pass


class BlogController(Controller):
    def list_action(self) -> None:
        seen.append(self.request)

    def feed_action(self) -> bool:
        self.view.render("blog/feed.html")
        return False

    def silent_action(self) -> bool:
        return False

    def truthy_action(self) -> int:
        return 0

    def edit_post_action(self) -> None:
        pass

    def fail_action(self) -> None:
        raise RuntimeError("action failed")


def _registry() -> ControllerRegistry:
    registry = ControllerRegistry()
    registry.register("index", IndexController)
    registry.register("blog", BlogController)
    return registry


def _dispatcher() -> tuple[Dispatcher, RenderSpy]:
    spy = RenderSpy(None)
    return Dispatcher().configure(_registry(), spy), spy


class TestConfiguration:
    def test_run_without_controllers(self) -> None:
        dispatcher = Dispatcher().set_renderer(RenderSpy(None))
        with pytest.raises(ConfigurationError, match="controller path"):
            dispatcher.run(Request.from_uri("/"))

    def test_run_without_renderer(self) -> None:
        dispatcher = Dispatcher().set_registry(_registry())
        with pytest.raises(ConfigurationError, match="renderer"):
            dispatcher.run(Request.from_uri("/"))

    def test_configure_is_chainable(self) -> None:
        dispatcher = Dispatcher()
        spy = RenderSpy(None)
        assert dispatcher.configure(_registry(), spy) is dispatcher
        assert dispatcher.renderer is spy

    def test_configure_with_directory(self, controllers: Path) -> None:
        dispatcher = Dispatcher().configure(controllers, RenderSpy(None))
        assert isinstance(dispatcher.registry, DirectoryRegistry)
        assert dispatcher.registry.root == controllers

    def test_defaults_before_run(self) -> None:
        dispatcher = Dispatcher()
        assert dispatcher.controller_name == "index"
        assert dispatcher.action_name == "index"


class TestSingleton:
    def test_accessor_returns_same_instance(self) -> None:
        assert get_dispatcher() is get_dispatcher()

    def test_copy_disallowed(self) -> None:
        with pytest.raises(TypeError):
            copy.copy(get_dispatcher())
        with pytest.raises(TypeError):
            copy.deepcopy(get_dispatcher())


class TestCall:
    def test_auto_renders_view(self) -> None:
        dispatcher, spy = _dispatcher()
        assert dispatcher.call("index", "about") is True
        assert spy.calls == [("index/about.html", True)]

    def test_false_suppresses_render(self) -> None:
        dispatcher, spy = _dispatcher()
        assert dispatcher.call("blog", "silent") is False
        assert spy.calls == []

    def test_only_explicit_false_suppresses(self) -> None:
        dispatcher, spy = _dispatcher()
        dispatcher.call("blog", "truthy")
        assert spy.rendered == ["blog/truthy.html"]

    def test_manual_render_then_false(self) -> None:
        dispatcher, spy = _dispatcher()
        dispatcher.call("blog", "feed")
        assert spy.rendered == ["blog/feed.html"]

    def test_view_path_is_lowercased(self) -> None:
        dispatcher, spy = _dispatcher()
        dispatcher.call("index", "ABOUT")
        assert spy.rendered == ["index/about.html"]

    def test_dashed_action(self) -> None:
        dispatcher, spy = _dispatcher()
        dispatcher.call("blog", "edit-post")
        assert spy.rendered == ["blog/edit-post.html"]

    def test_custom_extension(self) -> None:
        spy = RenderSpy(None)
        dispatcher = Dispatcher(script_extension=".phtml").configure(_registry(), spy)
        dispatcher.call("index", "about")
        assert spy.rendered == ["index/about.phtml"]

    def test_unknown_controller(self) -> None:
        dispatcher, spy = _dispatcher()
        with pytest.raises(HandlerNotFound):
            dispatcher.call("nope", "index")
        assert spy.calls == []

    def test_unknown_action(self) -> None:
        dispatcher, _ = _dispatcher()
        with pytest.raises(OperationNotFound, match="missing_action does not exist in BlogController"):
            dispatcher.call("blog", "missing")

    def test_non_action_method_is_not_an_operation(self) -> None:
        dispatcher, _ = _dispatcher()
        with pytest.raises(OperationNotFound):
            dispatcher.call("blog", "__init__")

    def test_action_errors_propagate(self) -> None:
        dispatcher, spy = _dispatcher()
        with pytest.raises(RuntimeError, match="action failed"):
            dispatcher.call("blog", "fail")
        assert spy.calls == []

    def test_handler_gets_renderer(self) -> None:
        dispatcher, spy = _dispatcher()
        dispatcher.call("index", "index")
        assert spy.get("greeting") == "hello"


class TestRun:
    def test_root_runs_index_index(self) -> None:
        dispatcher, spy = _dispatcher()
        ctx = dispatcher.run(Request.from_uri("/"))
        assert ctx.route == "index/index"
        assert spy.rendered == ["index/index.html"]

    def test_single_segment_is_index_action(self) -> None:
        dispatcher, spy = _dispatcher()
        dispatcher.run(Request.from_uri("/about"))
        assert spy.rendered == ["index/about.html"]

    def test_sets_default_title(self) -> None:
        dispatcher, spy = _dispatcher()
        dispatcher.run(Request.from_uri("/index/about"))
        assert spy.get("title") == "index/about"

    def test_records_last_route(self) -> None:
        dispatcher, _ = _dispatcher()
        dispatcher.run(Request.from_uri("/blog/edit-post"))
        assert dispatcher.controller_name == "blog"
        assert dispatcher.action_name == "edit-post"

    def test_flags_reach_the_handler(self) -> None:
        seen.clear()
        dispatcher, _ = _dispatcher()
        dispatcher.run(Request.from_uri("/blog/list/draft/mine"))
        assert seen[0].flags == ("draft", "mine")
        assert seen[0].params["draft"] is True

    def test_context_reset_after_run(self) -> None:
        dispatcher, _ = _dispatcher()
        dispatcher.run(Request.from_uri("/blog/list"))
        with pytest.raises(LookupError):
            get_request()

    def test_context_reset_after_error(self) -> None:
        dispatcher, _ = _dispatcher()
        with pytest.raises(RuntimeError):
            dispatcher.run(Request.from_uri("/blog/fail"))
        with pytest.raises(LookupError):
            get_request()

    def test_nonexistent_controller_never_no_ops(self) -> None:
        dispatcher, spy = _dispatcher()
        with pytest.raises(HandlerNotFound):
            dispatcher.run(Request.from_uri("/ghost/index"))
        assert spy.calls == []

    def test_query_parameter_route(self) -> None:
        dispatcher, spy = _dispatcher()
        dispatcher.run(Request.from_uri("/index.py?q=/index/about"))
        assert spy.rendered == ["index/about.html"]


class TestEndToEnd:
    def test_directory_controllers_and_real_views(
        self,
        controllers: Path,
        layouts: Path,
        scripts: Path,
        write_controller,
        write_layout,
        write_script,
    ) -> None:
        write_controller(
            "blog.py",
            "from roost import Controller\n\n\n"
            "class BlogController(Controller):\n"
            "    def show_action(self):\n"
            "        self.view.set('post', 'First post')\n",
        )
        write_layout("default.html", "<title>{{ title }}</title><main>{{ content }}</main>")
        write_script("blog/show.html", "<h1>{{ post }}</h1>")

        out = io.StringIO()
        renderer = Renderer("default.html", output=out).configure_directories(layouts, scripts)
        Dispatcher().configure(controllers, renderer).run(Request.from_uri("/blog/show"))

        assert out.getvalue() == "<title>blog/show</title><main><h1>First post</h1></main>"

    def test_mismatched_module(self, controllers: Path, write_controller) -> None:
        write_controller("blog.py", "class WrongController:\n    pass\n")
        dispatcher = Dispatcher().configure(controllers, RenderSpy(None))
        with pytest.raises(HandlerMismatch):
            dispatcher.run(Request.from_uri("/blog/show"))
