"""Render the dialect in 3 lines, zero config, zero deps."""

from stackdown import render

html = render("# Hello **World**\n\nSome *emphasis* and a [link](https://example.org \"Example\")\n")
print(html)
