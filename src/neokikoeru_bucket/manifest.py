"""Render the Scoop manifest from its template.

Templates use ``string.Template`` placeholders (``$version`` or
``${version}``; ``$$`` is a literal dollar sign). Substitution is strict:
any placeholder without a matching bucket field is an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from string import Template

from neokikoeru_bucket.bucket import Bucket
from neokikoeru_bucket.exceptions import ManifestIOError, TemplateError
from neokikoeru_bucket.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ManifestTemplate:
    """A parsed manifest template.

    Attributes:
        path: Where the template was read from
        template: Parsed template

    """

    path: Path
    template: Template

    @classmethod
    def from_text(cls, text: str, path: Path) -> ManifestTemplate:
        """Parse template text.

        Raises:
            TemplateError: If the text contains a malformed placeholder

        """
        template = Template(text)
        if not template.is_valid():
            msg = f"Malformed placeholder in template {path}"
            raise TemplateError(msg)
        return cls(path=path, template=template)

    @property
    def placeholders(self) -> list[str]:
        """Names referenced by the template, in order of first use."""
        return self.template.get_identifiers()

    def render(self, bucket: Bucket) -> str:
        """Substitute bucket fields into the template.

        Args:
            bucket: Record to render

        Returns:
            Rendered manifest text

        Raises:
            TemplateError: If the template references an unknown field

        """
        try:
            return self.template.substitute(bucket.as_mapping())
        except KeyError as e:
            msg = (
                f"Template {self.path} references unknown field "
                f"{e.args[0]!r}"
            )
            raise TemplateError(msg) from e
        except ValueError as e:
            msg = f"Malformed placeholder in template {self.path}: {e}"
            raise TemplateError(msg) from e


def load_template(path: Path) -> ManifestTemplate:
    """Read and parse the manifest template.

    Args:
        path: Template file location

    Returns:
        Parsed template

    Raises:
        TemplateError: If the file cannot be read or is malformed

    """
    try:
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read template {path}: {e}"
        raise TemplateError(msg) from e

    logger.debug("Loaded template %s", path)
    return ManifestTemplate.from_text(text, path)


def write_manifest(
    template: ManifestTemplate, bucket: Bucket, destination: Path
) -> None:
    """Render the template and write it to the destination.

    The manifest is rendered before the destination is opened, so a
    template error never truncates an existing manifest. The file is
    created if missing, truncated otherwise, and always closed.

    Args:
        template: Parsed manifest template
        bucket: Record to render
        destination: Output file path

    Raises:
        TemplateError: If rendering fails
        ManifestIOError: If the destination cannot be opened or written

    """
    content = template.render(bucket)

    try:
        with destination.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        msg = f"Failed to write manifest {destination}: {e}"
        raise ManifestIOError(msg) from e

    logger.info("Wrote %s for version %s", destination, bucket.version)
