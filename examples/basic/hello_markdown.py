"""Convert Markdown in one call: zero config, zero deps."""

from marklite import convert

html = convert("# Hello\n\nSome **bold** and a [link](https://example.com)")
print(html)
