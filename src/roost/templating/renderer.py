"""Script rendering with an optional layout wrapper.

A render evaluates the view script first, stores its output in the
reserved ``content`` variable, then evaluates the layout, which embeds
it with ``{{ content }}``::

    renderer = (
        Renderer("default.html")
        .configure_directories("app/views/layouts", "app/views/scripts")
    )
    renderer.set("posts", posts)
    html = renderer.render("blog/index.html", output=False)

Scripts and layouts are kida templates. Each directory root gets its
own kida ``Environment``, created on first use.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TextIO

from kida import Environment, FileSystemLoader
from kida.template import Markup

from roost.errors import ConfigurationError, DirectoryError, LayoutNotFound, ScriptNotFound
from roost.templating.output import OutputStack
from roost.templating.paths import deep_merge, normalize_slashes
from roost.templating.scope import TemplateScope

logger = logging.getLogger("roost.templating")

CONTENT = "content"
VIEW = "view"


def _readable_dir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.R_OK)


def _readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)


class Renderer:
    """Holds template variables and directory roots, and renders scripts.

    Unset variables read as ``None``. ``set_variables()`` deep-merges
    (see :func:`roost.templating.paths.deep_merge`); ``render()``
    overwrites ``content`` every time.
    """

    __slots__ = (
        "_autoescape",
        "_base_url",
        "_environments",
        "_layout",
        "_layout_dir",
        "_output",
        "_scope",
        "_script_dir",
        "_variables",
    )

    def __init__(
        self,
        layout: str | None = "default.html",
        *,
        output: TextIO | None = None,
        autoescape: bool = True,
    ) -> None:
        self._variables: dict[str, Any] = {}
        self._layout_dir: Path | None = None
        self._script_dir: Path | None = None
        # Stored unchecked; render() demotes a missing layout with a warning.
        self._layout = normalize_slashes(layout) if layout is not None else None
        self._base_url = ""
        self._output = OutputStack(output)
        self._autoescape = autoescape
        self._environments: dict[Path, Environment] = {}
        self._scope = TemplateScope(self)

    # -- Directories --

    def set_layout_directory(self, directory: str | Path) -> "Renderer":
        path = Path(directory)
        if not _readable_dir(path):
            msg = f"Directory not found or not readable: {directory}"
            raise DirectoryError(msg)
        self._layout_dir = path
        return self

    def set_script_directory(self, directory: str | Path) -> "Renderer":
        path = Path(directory)
        if not _readable_dir(path):
            msg = f"Directory not found or not readable: {directory}"
            raise DirectoryError(msg)
        self._script_dir = path
        return self

    def configure_directories(self, layout_dir: str | Path, script_dir: str | Path) -> "Renderer":
        return self.set_layout_directory(layout_dir).set_script_directory(script_dir)

    @property
    def layout_directory(self) -> Path | None:
        return self._layout_dir

    @property
    def script_directory(self) -> Path | None:
        return self._script_dir

    # -- Layout --

    def set_layout(self, path: str | None) -> "Renderer":
        """Select the layout, relative to the layout directory.

        ``None`` disables wrapping. Raises ``LayoutNotFound`` when the
        file does not exist or is not readable.
        """
        if path is None:
            self._layout = None
            return self

        path = normalize_slashes(path)
        layout_dir = self._layout_dir
        if layout_dir is None or not path or not _readable_file(self._join(layout_dir, path)):
            msg = f"The layout file does not exist or is not readable: {layout_dir}{path}"
            raise LayoutNotFound(msg)
        self._layout = path
        return self

    @property
    def layout(self) -> str | None:
        """The layout path without its leading slash, or ``None``."""
        if self._layout is None:
            return None
        return self._layout[1:]

    # -- Base URL --

    def set_base_url(self, url: str) -> "Renderer":
        self._base_url = normalize_slashes(url)
        return self

    def get_base_url(self, url: str = "") -> str:
        """Return the base URL with *url* appended; never empty.

        ::

            get_base_url()        -> "/"       (no base)
            get_base_url("/x")    -> "/root/x" (base "/root")
        """
        return (self._base_url + normalize_slashes(url)) or "/"

    # -- Output --

    @property
    def output(self) -> OutputStack:
        return self._output

    def set_output(self, stream: TextIO | None) -> "Renderer":
        """Send ``output=True`` renders to *stream* (``None`` means stdout)."""
        self._output.stream = stream
        return self

    # -- Variables --

    def get(self, name: str, default: Any = None) -> Any:
        return self._variables.get(name, default)

    def set(self, name: str, value: Any) -> "Renderer":
        self._variables[name] = value
        return self

    def has(self, name: str) -> bool:
        """True when *name* is set to something other than ``None``."""
        return self._variables.get(name) is not None

    def remove(self, name: str) -> "Renderer":
        self._variables.pop(name, None)
        return self

    def set_variables(self, variables: Mapping[str, Any]) -> "Renderer":
        self._variables = deep_merge(self._variables, variables)
        return self

    def to_dict(self) -> dict[str, Any]:
        return dict(self._variables)

    def clear(self) -> "Renderer":
        self._variables = {}
        return self

    def __getitem__(self, name: str) -> Any:
        return self._variables.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self._variables[name] = value

    def __delitem__(self, name: str) -> None:
        self._variables.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    # -- Rendering --

    def render(self, path: str, output: bool = True) -> str | None:
        """Render the script at *path*, wrapped in the layout if one is set.

        With *output* the result is written to the current output and
        ``None`` is returned; otherwise the rendered string is returned.
        """
        layout_dir, script_dir = self._require_directories()

        if self._layout is not None and not self._join(layout_dir, self._layout).is_file():
            logger.warning(
                "The layout specified does not exist: %s",
                self._join(layout_dir, self._layout),
            )
            self._layout = None

        script = self._require_script(script_dir, path)
        self._variables[CONTENT] = self._evaluate(script_dir, script)

        if self._layout is not None:
            result = self._evaluate(layout_dir, self._layout)
        else:
            result = self._variables[CONTENT]

        if output:
            self._output.write(result)
            return None
        return result

    def _partial(
        self,
        path: str,
        variables: Mapping[str, Any],
        *,
        output: bool = False,
    ) -> Markup:
        """Render a script with *variables* swapped in for the current set.

        The original variable mapping is restored afterwards, also when
        the script raises. No layout is applied. *output* writes the result
        directly only when no template is being evaluated; from inside a
        template the partial always appears in place.
        """
        script_dir = self._script_dir
        if script_dir is None:
            msg = "A script directory was not provided."
            raise ConfigurationError(msg)
        script = self._require_script(script_dir, path)

        saved = self._variables
        self._variables = dict(variables)
        try:
            html = self._evaluate(script_dir, script)
        finally:
            self._variables = saved

        # Within a template evaluation the partial is emitted in place.
        if output and self._output.depth == 0:
            self._output.write(html)
            return Markup("")
        return html

    def _evaluate(self, directory: Path, path: str) -> Markup:
        """Run one template under a capture and return what it produced."""
        template = self._environment(directory).get_template(path.lstrip("/"))
        context = {**self._variables, VIEW: self._scope}
        with self._output.capture() as buffer:
            for chunk in template.render_stream(context):
                self._output.write(chunk)
        return Markup(buffer.getvalue())

    def _environment(self, directory: Path) -> Environment:
        env = self._environments.get(directory)
        if env is None:
            env = Environment(
                loader=FileSystemLoader(str(directory)),
                autoescape=self._autoescape,
            )
            self._environments[directory] = env
        return env

    def _require_directories(self) -> tuple[Path, Path]:
        if self._layout_dir is None or self._script_dir is None:
            msg = "Both the layout and script directories must be configured before rendering."
            raise ConfigurationError(msg)
        return self._layout_dir, self._script_dir

    def _require_script(self, script_dir: Path, path: str) -> str:
        path = normalize_slashes(path)
        if not path or not self._join(script_dir, path).is_file():
            msg = f"The script you are trying to render does not exist: {script_dir}{path}"
            raise ScriptNotFound(msg)
        return path

    @staticmethod
    def _join(directory: Path, path: str) -> Path:
        return directory / path.lstrip("/")
