"""Controller base class and the naming conventions that bind URLs to code.

Conventions::

    /blog/show       -> class BlogController, method show_action
    /my-blog/edit-me -> class MyBlogController, method edit_me_action
                        (module my_blog.py under the controller root)

After an action runs, the view ``{controller}/{action}.html`` renders
unless the action returns ``False``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roost.context import get_request
from roost.routing.parse import RequestContext

if TYPE_CHECKING:
    from roost.templating.renderer import Renderer

HANDLER_SUFFIX = "Controller"
OPERATION_SUFFIX = "_action"


def handler_name(controller: str) -> str:
    """``"my-blog"`` -> ``"MyBlogController"``."""
    words = [word for word in controller.split("-") if word]
    return "".join(word[:1].upper() + word[1:] for word in words) + HANDLER_SUFFIX


def operation_name(action: str) -> str:
    """``"Edit-Me"`` -> ``"edit_me_action"``."""
    return action.lower().replace("-", "_") + OPERATION_SUFFIX


def module_name(controller: str) -> str:
    """``"my-blog"`` -> ``"my_blog"``."""
    return controller.lower().replace("-", "_")


def view_path(controller: str, action: str, extension: str = ".html") -> str:
    """The script rendered after an action: ``{controller}/{action}{ext}``."""
    return f"{controller.lower()}/{action.lower()}{extension}"


class Controller:
    """Base class for controllers.

    The renderer is injected at construction and available as
    ``self.view``::

        class BlogController(Controller):
            def index_action(self):
                self.view.set("posts", load_posts())

            def feed_action(self):
                print(self.view.render("blog/feed.xml", output=False))
                return False  # no auto-render
    """

    def __init__(self, view: Renderer) -> None:
        self.view = view

    @property
    def request(self) -> RequestContext:
        """The request being dispatched (flags, params, route)."""
        return get_request()
