"""README generation for the customized project.

Renders ``templates/README.md.j2`` with Jinja2. The output depends only on
the project name, its description and the surviving features, so the same
inputs always produce the same text.
"""

from collections.abc import Iterable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from starter_setup.utils.logger import get_logger

logger = get_logger("readme")

README_TEMPLATE = "README.md.j2"
README_FILENAME = "README.md"
DEFAULT_TAGLINE = "A TypeScript project powered by Bun."


def _get_template_root() -> Path:
    """Get path to the bundled templates directory.

    Raises:
        RuntimeError: If the templates directory cannot be found
    """
    import starter_setup.templates

    template_path = Path(starter_setup.templates.__file__).parent
    if not (template_path / README_TEMPLATE).exists():
        raise RuntimeError(
            "Could not locate the README template. Ensure starter-setup is properly installed."
        )
    return template_path


def _build_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_get_template_root())),
        autoescape=select_autoescape(["html", "xml"]),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def generate_readme(name: str, description: str, features: Iterable[str]) -> str:
    """Render the README text.

    Args:
        name: Project name (the project directory's basename)
        description: Project description; empty falls back to a default tagline
        features: Keys of the features that were kept

    Returns:
        Markdown document ending with a single newline
    """
    template = _build_environment().get_template(README_TEMPLATE)
    return template.render(
        name=name,
        description=description,
        default_tagline=DEFAULT_TAGLINE,
        features=frozenset(features),
    )


def write_readme(project_dir: Path, text: str) -> Path:
    """Overwrite the project README."""
    path = project_dir / README_FILENAME
    path.write_text(text)
    logger.debug(f"Wrote {path}")
    return path
