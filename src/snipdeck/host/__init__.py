"""Host-side collaborators: insertion targets, templating and capabilities."""

from snipdeck.host.buffer import TextBuffer
from snipdeck.host.capabilities import CapabilityRegistry
from snipdeck.host.protocols import InsertionTarget, TemplateEngine

__all__ = ["CapabilityRegistry", "InsertionTarget", "TemplateEngine", "TextBuffer"]
