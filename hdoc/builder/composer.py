"""Wrap assembled pages and generated CSS in the static HTML shell."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

DEFAULT_TITLE = "Document"


class DocumentComposer:
    """Render the final HTML document from its three fragments.

    Page and component markup is inserted as-is; callers are responsible for
    supplying valid HTML fragments.
    """

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the composer and Jinja environment."""
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("document.html.jinja")

    def compose(
        self, *, css: str, body: str, stylesheet: str = "", title: str = DEFAULT_TITLE
    ) -> str:
        """Return the complete HTML document.

        Parameters
        ----------
        css : str
            Generated custom-property declarations.
        body : str
            Concatenated, include-resolved page markup.
        stylesheet : str, optional
            Literal contents of the project's static stylesheet.
        title : str, optional
            Text for the ``<title>`` element; escaped on output.
        """
        html = self.template.render(
            css=css, stylesheet=stylesheet, body=body, title=title
        )
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["DEFAULT_TITLE", "DocumentComposer"]
