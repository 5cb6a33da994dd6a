"""File templates for ``roost new``."""

MAIN_PY = '''\
"""Bootstrap for {name}.

    python main.py /index/index
    roost dispatch /index/index
"""

import sys
from pathlib import Path

from roost import App, AppConfig, Request

app = App(AppConfig(app_dir=Path(__file__).parent / "app"))

if __name__ == "__main__":
    uri = sys.argv[1] if len(sys.argv) > 1 else "/"
    response = app.handle(Request.from_uri(uri))
    sys.stdout.write(response.text)
'''

INDEX_CONTROLLER_PY = '''\
from roost import Controller


class IndexController(Controller):
    """The default controller."""

    def index_action(self):
        self.view.set("greeting", "Hello from {name}!")
'''

DEFAULT_LAYOUT_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
</head>
<body>
  {{ content }}
</body>
</html>
"""

INDEX_SCRIPT_HTML = """\
<h1>{{ greeting }}</h1>
"""
