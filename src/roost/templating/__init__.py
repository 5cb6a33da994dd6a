"""Layout-wrapped script rendering on top of kida."""

from roost.templating.output import OutputStack
from roost.templating.paths import deep_merge, normalize_slashes
from roost.templating.renderer import Renderer
from roost.templating.scope import TemplateScope

__all__ = ["OutputStack", "Renderer", "TemplateScope", "deep_merge", "normalize_slashes"]
