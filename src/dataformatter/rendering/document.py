# topmark:header:start
#
#   project      : DataFormatter
#   file         : document.py
#   file_relpath : src/dataformatter/rendering/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML documents: the output sink around the recursive renderer.

`HtmlFormatter` owns the document boilerplate and the hand-off of rendered
fragments to a text stream. It is a scoped resource: the preamble (``<head>``
with a small stylesheet, then ``<body>``) is written when the formatter is
opened, and the closing tags are written and the stream flushed when it is
closed, on every exit path of a ``with`` block. The stream itself belongs to
the caller and is never closed here.

Example:
    ```python
    import sys

    from dataformatter import HtmlFormatter, OrderedList

    with HtmlFormatter(sys.stdout) as fmt:
        fmt.out(fmt.heading("Recipes"), {"Toast": OrderedList(["Slice", "Toast"])})
    ```

`format_html` is the single-call shortcut that returns the content without any
document boilerplate.
"""

from __future__ import annotations

import html
import io
from itertools import chain
from typing import TYPE_CHECKING, Any, TextIO

from dataformatter.config.logging import get_logger
from dataformatter.constants import DEFAULT_DOCUMENT_TITLE, DEFAULT_FRAGMENT_SEPARATOR
from dataformatter.core.markers import Emphasized, Heading
from dataformatter.rendering.html import iter_fragments, render

if TYPE_CHECKING:
    from types import TracebackType

    from dataformatter.config.logging import DataFormatterLogger
    from dataformatter.config.options import FormattingOptions

logger: DataFormatterLogger = get_logger(__name__)

DOCUMENT_STYLE: str = """<style type="text/css">
<!--
   em   {font-weight: bold; color: red;
        font-size: x-large;}
   dt { font-weight: bold;}
-->
</style>"""

DOCUMENT_END: str = "</body></html>"


def heading(text: Any) -> Heading:
    """Return ``text`` marked to be displayed as a heading."""
    return Heading(text)


def emphasized(text: Any) -> Emphasized:
    """Return ``text`` marked to be displayed as emphasized text."""
    return Emphasized(text)


def format_html(
    *values: Any,
    options: FormattingOptions | None = None,
    separator: str = DEFAULT_FRAGMENT_SEPARATOR,
) -> str:
    """Render ``values`` and return the HTML content as one string.

    No document boilerplate is added.

    Args:
        *values (Any): Top-level values, rendered in order.
        options (FormattingOptions | None): Formatting options shared by all values.
        separator (str): Text placed between fragments. Defaults to a newline.

    Returns:
        str: The rendered content.
    """
    return separator.join(chain.from_iterable(iter_fragments(v, options) for v in values))


def document_preamble(title: str, *, escape: bool = False) -> str:
    """Return the markup opening an HTML document, up to and including ``<body>``.

    Args:
        title (str): Document title.
        escape (bool): If True, the title is HTML-escaped.
    """
    if escape:
        title = html.escape(title)
    return f"<html>\n<head>\n<title>{title}</title>\n{DOCUMENT_STYLE}\n</head>\n<body>"


class HtmlFormatter:
    """Scoped HTML output sink.

    Args:
        stream (TextIO | None): Destination stream. When None, output is collected
            in memory and available through `getvalue`.
        content_only (bool): If True, no ``<html>``/``<head>``/``<body>`` boilerplate
            is written around the content.
        options (FormattingOptions | None): Formatting options for every `out` call.
        title (str): Document title used in the preamble.
        separator (str): Text written after each fragment. Defaults to a newline.

    Attributes:
        options (FormattingOptions | None): Formatting options for every `out` call.
        content_only (bool): Whether document boilerplate is suppressed.
        title (str): Document title used in the preamble.
        separator (str): Text written after each fragment.
    """

    options: FormattingOptions | None
    content_only: bool
    title: str
    separator: str

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        content_only: bool = False,
        options: FormattingOptions | None = None,
        title: str = DEFAULT_DOCUMENT_TITLE,
        separator: str = DEFAULT_FRAGMENT_SEPARATOR,
    ) -> None:
        self._buffer: io.StringIO | None = None
        if stream is None:
            stream = self._buffer = io.StringIO()
        self._stream: TextIO = stream
        self.content_only = content_only
        self.options = options
        self.title = title
        self.separator = separator
        self._opened: bool = False
        self._closed: bool = False

    def __enter__(self) -> HtmlFormatter:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        """Whether the document has been closed."""
        return self._closed

    def open(self) -> None:
        """Write the document preamble (once).

        Raises:
            ValueError: If the formatter has already been closed.
        """
        if self._closed:
            raise ValueError("HTML document is already closed")
        if self._opened:
            return
        self._opened = True
        logger.debug("Opening HTML document (content_only=%s)", self.content_only)
        if not self.content_only:
            escape: bool = self.options is not None and self.options.escape_text
            self._write(document_preamble(self.title, escape=escape))
            self._write(self.separator)

    def close(self) -> None:
        """Write the closing tags and flush the stream. Calling it again has no effect."""
        if self._closed:
            return
        # A document that was never opened still gets a complete boilerplate frame
        self.open()
        self._closed = True
        if not self.content_only:
            self._write(DOCUMENT_END)
            self._write(self.separator)
        self._stream.flush()
        logger.debug("Closed HTML document")

    def out(self, *values: Any) -> None:
        """Render ``values`` in order and write them to the stream.

        Opens the document first if needed.

        Raises:
            ValueError: If the formatter has already been closed.
        """
        self.open()
        for value in values:
            # Render fully before writing so a failure leaves no partial structure behind
            fragments: list[str] = render(value, self.options)
            self._write("".join(f"{fragment}{self.separator}" for fragment in fragments))

    def heading(self, text: Any) -> Heading:
        """Return ``text`` marked to be displayed as a heading by `out`."""
        return heading(text)

    def emphasized(self, text: Any) -> Emphasized:
        """Return ``text`` marked to be displayed as emphasized text by `out`."""
        return emphasized(text)

    def getvalue(self) -> str:
        """Return everything written so far when no stream was given.

        Raises:
            ValueError: If the formatter writes to a caller-provided stream.
        """
        if self._buffer is None:
            raise ValueError("Output was written to a caller-provided stream")
        return self._buffer.getvalue()

    def _write(self, text: str) -> None:
        self._stream.write(text)
