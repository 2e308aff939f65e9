"""marklite renderers.

Renderers convert a lexed token sequence into an output format.

Available Renderers:
- HtmlRenderer: Renders tokens to an HTML fragment using StringBuilder

Thread Safety:
Renderers keep per-call state in a RenderContext local to each render() call.
Safe for concurrent use from multiple threads.

"""

from marklite.renderers.html import HtmlRenderer, html_escape

__all__ = ["HtmlRenderer", "html_escape"]
